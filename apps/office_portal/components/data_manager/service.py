"""
Data Manager Overview Business Logic
Module counts, monthly sales/purchase totals and sales payment status
"""
from datetime import date

from office_portal.core.normalize import parse_amount, parse_date

MONTH_LABELS = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
                'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']
PAYMENT_STATUSES = ['Paid', 'Pending', 'Overdue', 'Partially Paid']

DATA_MANAGER_MODULES = [
    {'id': 'sales', 'name': 'Sales Management', 'endpoint': '/api/sales'},
    {'id': 'purchase', 'name': 'Purchase Management', 'endpoint': '/api/purchases'},
    {'id': 'logistics', 'name': 'Logistics Documents', 'endpoint': '/api/logisticsdocuments'},
    {'id': 'registration', 'name': 'Company Registration', 'endpoint': '/api/companyregistrations'},
    {'id': 'bank', 'name': 'Bank Documents', 'endpoint': '/api/bankdocuments'},
    {'id': 'billing', 'name': 'Billing Management', 'endpoint': '/api/billings'},
    {'id': 'ca', 'name': 'CA Documents', 'endpoint': '/api/cadocuments'},
    {'id': 'tender', 'name': 'Tender Management', 'endpoint': '/api/tenders'},
    {'id': 'finance', 'name': 'Finance Reports', 'endpoint': '/api/financereports'},
]


def monthly_totals(records, date_field='date', amount_field='amount', year=None):
    """Sum ``amount_field`` per calendar month of ``year`` (default: this year)"""
    year = year or date.today().year
    totals = [0.0] * 12
    for record in records:
        if not isinstance(record, dict):
            continue
        when = parse_date(record.get(date_field))
        if when is None or when.year != year:
            continue
        totals[when.month - 1] += parse_amount(record.get(amount_field))
    return {'labels': list(MONTH_LABELS), 'data': totals}


def payment_status_counts(sales):
    """Count sales per known payment status; other values are ignored"""
    counts = dict.fromkeys(PAYMENT_STATUSES, 0)
    for sale in sales:
        status = sale.get('paymentStatus') if isinstance(sale, dict) else None
        if status in counts:
            counts[status] += 1
    return {'labels': list(counts), 'data': list(counts.values())}


class DataManagerService:
    """Service for the data-manager overview"""

    def __init__(self, backend):
        self.backend = backend

    def get_overview(self, token, year=None):
        """All overview figures; failed endpoints count as empty"""
        lists = self.backend.fetch_many([m['endpoint'] for m in DATA_MANAGER_MODULES], token=token)
        sales = lists.get('/api/sales', [])
        purchases = lists.get('/api/purchases', [])

        return {
            'modules': [
                dict(module, count=len(lists.get(module['endpoint'], [])))
                for module in DATA_MANAGER_MODULES
            ],
            'counts': {m['id']: len(lists.get(m['endpoint'], [])) for m in DATA_MANAGER_MODULES},
            'monthly_sales': monthly_totals(sales, year=year),
            'monthly_purchases': monthly_totals(purchases, year=year),
            'payment_status': payment_status_counts(sales),
        }
