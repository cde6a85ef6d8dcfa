"""Tests for the generic resource table view."""

from datetime import date

import pytest

from office_portal.components import ResourceRegistry, registry
from office_portal.components.resource_tables import ResourceDescriptor, ViewField

BILLINGS = [
    {'id': 1, 'invoiceNumber': 'INV-001', 'client': 'Acme, Ltd', 'amount': '1,200.50',
     'dueDate': [2024, 5, 1], 'status': 'Paid', 'type': 'Service'},
    {'id': 2, 'client': 'Globex', 'amount': 300, 'dueDate': '2024-06-15T00:00:00',
     'status': 'Pending'},
    {'id': 3, 'invoiceNumber': 'INV-003', 'amount': None, 'status': 'Paid'},
]


class TestDescriptors:
    """Tests for ViewField / ResourceDescriptor."""

    def test_billing_normalization(self):
        rows = [registry.get('billing').normalize_item(raw) for raw in BILLINGS]
        assert rows[0] == {
            'id': 1, 'invoiceNumber': 'INV-001', 'clientName': 'Acme, Ltd', 'amount': 1200.5,
            'date': '2024-05-01', 'status': 'Paid', 'description': 'Service',
        }
        assert rows[1]['invoiceNumber'] == 'INV-2'
        assert rows[1]['date'] == '2024-06-15'
        assert rows[1]['description'] == 'No description'
        assert rows[2]['clientName'] == 'Unknown Client'
        assert rows[2]['amount'] == 0.0

    def test_search_fields_must_be_view_fields(self):
        with pytest.raises(ValueError):
            ResourceDescriptor('x', 'X', '/api/x', 'hr', [ViewField('a', 'A')], search_fields=['b'])

    def test_unknown_field_type(self):
        with pytest.raises(ValueError):
            ViewField('a', 'A', type='money')

    def test_duplicate_slug_rejected(self):
        local = ResourceRegistry()
        descriptor = ResourceDescriptor('x', 'X', '/api/x', 'hr', [ViewField('a', 'A')], ['a'])
        local.register(descriptor)
        with pytest.raises(ValueError):
            local.register(descriptor)

    def test_lab_inventory_defaults(self):
        row = registry.get('lab-inventory').normalize_item({'id': 9, 'item': 'Probe', 'date': 'soon'})
        assert row['itemCondition'] == 'New'
        assert row['type'] == 'in'
        assert row['date'] == date.today().isoformat()

    def test_activity_priority_suffix_removed(self):
        row = registry.get('activities').normalize_item({'priority': 'High Priority'})
        assert row['priority'] == 'high'

    def test_memo_sent_to_everyone(self):
        memos = registry.get('memos')
        row = memos.normalize_item({'id': 3, 'title': 'Standup', 'meetingDate': [2024, 7, 2],
                                    'totalRecipients': 12, 'sentToAll': True})
        assert row['meetingDate'] == '2024-07-02'
        assert row['recipients'] == 'All'
        assert memos.normalize_item({'totalRecipients': 4})['recipients'] == '4'

    def test_bank_details_placeholders(self):
        row = registry.get('bank-details').normalize_item(
            {'id': 1, 'employeeId': 'EMP1', 'employeeName': 'Asha', 'bankName': None})
        assert row['bankName'] == '-'
        assert row['panNumber'] == '-'

    def test_employee_request_fills_in_employee_id(self):
        assert registry.get('my-reports').request_for('EMP7') == ('/api/reports/employee/EMP7', None)
        assert registry.get('payslips').request_for('EMP7') == (
            '/api/payroll/payslips/metadata', {'employeeId': 'EMP7'})
        assert registry.get('payslips').employee_scoped
        assert not registry.get('rent').employee_scoped

    def test_every_section_has_resources(self):
        for section in ('admin', 'data-manager', 'store', 'finance-manager', 'hr', 'employee'):
            assert registry.for_section(section), section


class TestResourceApi:
    """Tests for /api/resources routes."""

    def test_list_search_and_facet(self, client, backend, login_as):
        login_as('DATAMANAGER')
        backend.add('GET', '/api/billings', BILLINGS)

        body = client.get('/api/resources/billing').get_json()
        assert body['count'] == 3 and body['total'] == 3
        assert body['facet']['options'] == ['Paid', 'Pending']

        body = client.get('/api/resources/billing?q=acme').get_json()
        assert [item['id'] for item in body['items']] == [1]

        body = client.get('/api/resources/billing?facet=paid').get_json()
        assert [item['id'] for item in body['items']] == [1, 3]
        assert body['total'] == 3

    def test_backend_failure_is_503_with_empty_items(self, client, backend, login_as):
        login_as('DATAMANAGER')
        backend.add('GET', '/api/billings', status=500, text='oops', content_type='text/plain')
        response = client.get('/api/resources/billing')
        assert response.status_code == 503
        body = response.get_json()
        assert body['items'] == []
        assert body['error'] == 'Failed to fetch billing management: HTTP error! status: 500'

    def test_export_matches_filtered_rows(self, client, backend, login_as):
        login_as('DATAMANAGER')
        backend.add('GET', '/api/billings', BILLINGS)
        response = client.get('/api/resources/billing/export?facet=Paid')
        assert response.status_code == 200
        assert response.mimetype == 'text/csv'
        assert 'billing_data.csv' in response.headers['Content-Disposition']
        lines = response.get_data(as_text=True).splitlines()
        assert lines[0] == 'Invoice Number,Client,Amount,Due Date,Status,Type'
        assert lines[1] == 'INV-001,"Acme, Ltd",1200.5,2024-05-01,Paid,Service'
        assert len(lines) == 3

    def test_detail(self, client, backend, login_as):
        login_as('DATAMANAGER')
        backend.add('GET', '/api/billings', BILLINGS)
        detail = client.get('/api/resources/billing/2').get_json()
        assert detail['title'] == 'Billing Management Details'
        assert {'name': 'clientName', 'label': 'Client', 'type': 'text', 'value': 'Globex'} in detail['fields']
        assert client.get('/api/resources/billing/99').status_code == 404

    def test_unknown_and_forbidden(self, client, login_as):
        login_as('STORE')
        assert client.get('/api/resources/nope').status_code == 404
        assert client.get('/api/resources/billing').status_code == 403

    def test_catalogue_limited_to_allowed_sections(self, client, login_as):
        login_as('FINANCE')
        sections = {item['section'] for item in client.get('/api/resources').get_json()}
        assert sections == {'finance-manager'}

    def test_page_renders_error_in_body(self, client, backend, login_as):
        login_as('STORE')
        backend.fail('GET', '/store/stationary/regular')
        response = client.get('/store/stationary-regular')
        assert response.status_code == 200
        assert b'Failed to fetch regular office supplies' in response.data

    def test_page_renders_rows_and_detail(self, client, backend, login_as):
        login_as('HR')
        backend.add('GET', '/api/employees', [
            {'id': 5, 'employeeId': 'EMP5', 'employeeName': 'Asha Rao', 'department': 'Design',
             'joiningDate': [2023, 1, 9], 'status': 'Active'},
        ])
        response = client.get('/hr/employees?view=5')
        assert response.status_code == 200
        assert b'Asha Rao' in response.data
        assert b'Employees Details' in response.data
        assert b'2023-01-09' in response.data

    def test_page_in_wrong_section_is_404(self, client, login_as):
        login_as('ADMIN')
        assert client.get('/hr/billing').status_code == 404


class TestAreaResources:
    """Tests for the admin, finance and employee list pages."""

    def test_admin_reports_filtered_by_type(self, client, backend, login_as):
        login_as('ADMIN')
        backend.add('GET', '/api/reports', [
            {'id': 1, 'title': 'Site visit', 'type': 'visit', 'status': 'submitted', 'content': 'Pune'},
            {'id': 2, 'title': 'OEM order', 'type': 'oem', 'content': 'Order for Pune'},
        ])
        body = client.get('/api/resources/reports?q=pune&facet=oem').get_json()
        assert [item['id'] for item in body['items']] == [2]
        assert body['items'][0]['status'] == 'draft'
        assert body['facet']['options'] == ['visit', 'oem']

    def test_admin_pages_are_admin_only(self, client, login_as):
        login_as('HR')
        assert client.get('/api/resources/memos').status_code == 403
        assert client.get('/api/resources/bank-details').status_code != 403

    def test_rent_page(self, client, backend, login_as):
        login_as('FINANCE')
        backend.add('GET', '/api/rent', [{'id': 1, 'month': 'May', 'amount': '45,000'}])
        response = client.get('/finance-manager/rent')
        assert response.status_code == 200
        assert b'Facility Rent' in response.data

    def test_electric_bills_export(self, client, backend, login_as):
        login_as('FINANCE')
        backend.add('GET', '/api/electric-bills', [{'id': 1, 'accountNo': 'EB-9', 'amount': 1800}])
        text = client.get('/api/resources/electric-bills/export').get_data(as_text=True)
        assert text.splitlines()[1] == 'EB-9,,1800,,,'

    def test_payslips_scoped_to_signed_in_employee(self, client, backend, login_as):
        login_as('EMPLOYEE', employee_id='EMP7', token='emp-tok')
        backend.add('GET', '/api/payroll/payslips/metadata', [
            {'month': 4, 'year': 2024, 'monthName': 'April', 'netPay': 41250.5},
        ])
        body = client.get('/api/resources/payslips').get_json()
        assert body['items'][0]['monthName'] == 'April'
        assert body['items'][0]['netPay'] == 41250.5
        call = backend.calls[-1]
        assert call['params'] == {'employeeId': 'EMP7'}
        assert call['headers']['Authorization'] == 'Bearer emp-tok'

    def test_my_reports_page(self, client, backend, login_as):
        login_as('EMPLOYEE', employee_id='EMP7')
        backend.add('GET', '/api/reports/employee/EMP7', [{'id': 4, 'title': 'Weekly update'}])
        response = client.get('/employee/my-reports')
        assert response.status_code == 200
        assert b'Weekly update' in response.data

    def test_employee_area_needs_employee_login(self, client, login_as):
        login_as('ADMIN')
        assert client.get('/api/resources/payslips').status_code == 403
        sections = {item['section'] for item in client.get('/api/resources').get_json()}
        assert 'employee' not in sections
        assert 'admin' in sections
