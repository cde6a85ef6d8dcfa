"""Tests for the employee self-service portal."""

from datetime import date

from office_portal.components.employee_portal import validate_leave


class TestValidateLeave:
    """Tests for validate_leave."""

    def test_inclusive_days(self):
        leave, errors = validate_leave({'startDate': '2024-05-10', 'endDate': '2024-05-12',
                                        'reason': 'Family trip'})
        assert errors == {}
        assert leave['numberOfDays'] == 3
        assert leave['leaveType'] == 'casual'

    def test_single_day(self):
        leave, _ = validate_leave({'startDate': '2024-05-10', 'endDate': '2024-05-10', 'reason': 'x'})
        assert leave['numberOfDays'] == 1

    def test_end_before_start(self):
        leave, errors = validate_leave({'startDate': '2024-05-10', 'endDate': '2024-05-01', 'reason': 'x'})
        assert leave is None
        assert errors == {'endDate': 'End date cannot be before start date'}

    def test_missing_fields(self):
        _, errors = validate_leave({})
        assert set(errors) == {'startDate', 'endDate', 'reason'}


def test_requires_employee_login(client, login_as):
    assert client.get('/api/employee/profile').status_code == 401
    login_as('ADMIN')
    assert client.get('/api/employee/profile').status_code == 403


def test_profile(client, backend, login_as):
    login_as('EMPLOYEE', employee_id='EMP7', token='emp-token')
    backend.add('GET', '/api/employees/byEmployeeId/EMP7', {'employeeId': 'EMP7', 'employeeName': 'Ravi'})
    body = client.get('/api/employee/profile').get_json()
    assert body['employeeName'] == 'Ravi'
    assert backend.calls[0]['headers']['Authorization'] == 'Bearer emp-token'


def test_today_attendance_found(client, backend, login_as):
    login_as('EMPLOYEE', employee_id='EMP7')
    today = date.today()
    backend.add('GET', '/api/attendance/employee/EMP7', [
        {'date': [2000, 1, 1], 'status': 'present'},
        {'date': [today.year, today.month, today.day], 'status': 'late', 'workHours': 2,
         'checkInTime': '10:15'},
    ])
    body = client.get('/api/employee/attendance/today').get_json()
    assert body['status'] == 'late'
    assert body['date'] == today.isoformat()
    assert body['workHoursLabel'] == '2 hours'


def test_today_attendance_absent_when_unavailable(client, backend, login_as):
    login_as('EMPLOYEE', employee_id='EMP7')
    backend.fail('GET', '/api/attendance/employee/EMP7')
    body = client.get('/api/employee/attendance/today').get_json()
    assert body == {
        'employeeId': 'EMP7',
        'date': date.today().isoformat(),
        'checkInTime': None,
        'checkOutTime': None,
        'status': 'absent',
        'workHours': 0,
        'workHoursLabel': '0 mins',
    }


def test_leaves_and_holidays(client, backend, login_as):
    login_as('EMPLOYEE', employee_id='EMP7')
    backend.add('GET', '/api/leave-requests/employee/EMP7', [
        {'id': 1, 'leaveType': 'sick', 'startDate': [2024, 3, 4], 'endDate': '2024-03-05T00:00:00',
         'status': 'APPROVED'},
        {'id': 2, 'leaveType': 'casual', 'startDate': [2024, 4, 1], 'endDate': [2024, 4, 1]},
    ])
    backend.add('GET', '/api/holidays', [{'id': 3, 'startDate': [2024, 8, 15]}])

    body = client.get('/api/employee/leaves').get_json()
    assert [leave['status'] for leave in body['leaves']] == ['approved', 'pending']
    assert body['leaves'][0]['endDate'] == '2024-03-05'
    assert body['holidays'] == [{
        'id': 3, 'holidayName': 'Holiday', 'day': '', 'startDate': '2024-08-15', 'endDate': '',
        'type': 'General', 'coverage': 'All',
    }]


def test_holiday_failure_is_silent(client, backend, login_as):
    login_as('EMPLOYEE', employee_id='EMP7')
    backend.add('GET', '/api/leave-requests/employee/EMP7', [])
    backend.fail('GET', '/api/holidays')
    response = client.get('/api/employee/leaves')
    assert response.status_code == 200
    assert response.get_json()['holidays'] == []


def test_submit_leave(client, backend, login_as):
    login_as('EMPLOYEE', employee_id='EMP7')
    backend.add('POST', '/api/leave-requests/employee', {'id': 11, 'status': 'PENDING'})
    response = client.post('/api/employee/leaves', json={
        'leaveType': 'sick', 'startDate': '2024-05-10', 'endDate': '2024-05-11', 'reason': 'Flu',
    })
    assert response.status_code == 201
    leave = response.get_json()
    assert leave['id'] == 11
    assert leave['status'] == 'pending'
    assert leave['numberOfDays'] == 2

    sent = backend.calls[-1]['json']
    assert sent == {
        'leaveType': 'sick', 'startDate': '2024-05-10', 'endDate': '2024-05-11',
        'reason': 'Flu', 'numberOfDays': 2, 'employeeId': 'EMP7', 'status': 'pending',
    }


def test_submit_leave_rejects_bad_range(client, backend, login_as):
    login_as('EMPLOYEE', employee_id='EMP7')
    response = client.post('/api/employee/leaves', json={
        'startDate': '2024-05-10', 'endDate': '2024-05-01', 'reason': 'Flu',
    })
    assert response.status_code == 400
    assert backend.calls == []


def test_employee_page(client, backend, login_as):
    login_as('EMPLOYEE', employee_id='EMP7')
    backend.add('GET', '/api/employees/byEmployeeId/EMP7', {'employeeName': 'Ravi Kumar'})
    response = client.get('/employee')
    assert response.status_code == 200
    assert b'Ravi Kumar' in response.data
    assert b'absent' in response.data


def test_submit_leave_rejects_non_object_body(client, backend, login_as):
    login_as('EMPLOYEE', employee_id='EMP7')
    response = client.post('/api/employee/leaves', json=[{'startDate': '2024-05-10'}])
    assert response.status_code == 400
    assert response.get_json() == {'error': 'No data provided'}
    assert backend.calls == []
