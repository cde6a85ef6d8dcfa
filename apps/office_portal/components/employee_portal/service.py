"""
Employee Portal Business Logic
Profile, today's attendance, leave requests and holidays for one employee
"""
import logging
from datetime import date

from office_portal.core.backend_client import BackendError
from office_portal.core.normalize import format_date, format_work_hours, parse_date

logger = logging.getLogger(__name__)

LEAVE_TYPES = ('casual', 'sick', 'earned', 'unpaid')
DEFAULT_LEAVE_TYPE = 'casual'


def absent_record(employee_id, today):
    """Placeholder attendance for a day with no check-in"""
    return {
        'employeeId': employee_id,
        'date': today.isoformat(),
        'checkInTime': None,
        'checkOutTime': None,
        'status': 'absent',
        'workHours': 0,
        'workHoursLabel': format_work_hours(0),
    }


def normalize_leave(raw):
    status = raw.get('status')
    return {
        'id': raw.get('id'),
        'employeeId': raw.get('employeeId'),
        'employeeName': raw.get('employeeName'),
        'leaveType': raw.get('leaveType'),
        'startDate': format_date(raw.get('startDate')),
        'endDate': format_date(raw.get('endDate')),
        'numberOfDays': raw.get('numberOfDays'),
        'status': status.lower() if isinstance(status, str) and status else 'pending',
        'reason': raw.get('reason'),
        'hrComments': raw.get('hrComments'),
        'requestDate': format_date(raw.get('requestDate')),
    }


def normalize_holiday(raw):
    return {
        'id': raw.get('id'),
        'holidayName': raw.get('holidayName') or 'Holiday',
        'day': raw.get('day') or '',
        'startDate': format_date(raw.get('startDate')),
        'endDate': format_date(raw.get('endDate')),
        'type': raw.get('type') or 'General',
        'coverage': raw.get('coverage') or 'All',
    }


def validate_leave(form):
    """Return (cleaned request, errors) for a leave application"""
    errors = {}
    start = parse_date(form.get('startDate'))
    end = parse_date(form.get('endDate'))
    reason = (form.get('reason') or '').strip()
    leave_type = (form.get('leaveType') or DEFAULT_LEAVE_TYPE).strip().lower()

    if start is None:
        errors['startDate'] = 'Start date is required'
    if end is None:
        errors['endDate'] = 'End date is required'
    if not reason:
        errors['reason'] = 'Reason is required'
    if start and end and end < start:
        errors['endDate'] = 'End date cannot be before start date'
    if errors:
        return None, errors

    return {
        'leaveType': leave_type,
        'startDate': start.isoformat(),
        'endDate': end.isoformat(),
        'reason': reason,
        'numberOfDays': max(1, (end - start).days + 1),
    }, {}


class EmployeePortalService:
    """Service for the employee self-service pages"""

    def __init__(self, backend):
        self.backend = backend

    def get_profile(self, employee_id, token):
        """Employee record; raises BackendError when unavailable"""
        return self.backend.get_json(f'/api/employees/byEmployeeId/{employee_id}', token=token)

    def get_today_attendance(self, employee_id, token, today=None):
        """Today's attendance record, or an absent placeholder"""
        today = today or date.today()
        try:
            records = self.backend.get_list(f'/api/attendance/employee/{employee_id}', token=token)
        except BackendError as e:
            logger.warning(f"Attendance for {employee_id} unavailable: {e}")
            return absent_record(employee_id, today)

        for record in records:
            if isinstance(record, dict) and parse_date(record.get('date')) == today:
                return dict(
                    record,
                    date=today.isoformat(),
                    workHoursLabel=format_work_hours(record.get('workHours')),
                )
        return absent_record(employee_id, today)

    def get_holidays(self, token):
        try:
            holidays = self.backend.get_list('/api/holidays', token=token)
        except BackendError as e:
            logger.debug(f"Holidays unavailable: {e}")
            return []
        return [normalize_holiday(h) for h in holidays if isinstance(h, dict)]

    def get_leaves(self, employee_id, token):
        """Leave requests and holidays; a leave fetch failure sets ``error``"""
        result = {'leaves': [], 'holidays': self.get_holidays(token), 'error': None}
        try:
            leaves = self.backend.get_list(f'/api/leave-requests/employee/{employee_id}', token=token)
        except BackendError as e:
            logger.error(f"Leave requests for {employee_id} failed: {e}")
            result['error'] = 'Failed to fetch leaves'
            return result
        result['leaves'] = [normalize_leave(r) for r in leaves if isinstance(r, dict)]
        return result

    def submit_leave(self, employee_id, form, token):
        """Validate and file a leave request

        Returns (leave, errors, error) where only one of them is set.
        """
        request_data, errors = validate_leave(form)
        if errors:
            return None, errors, None

        payload = dict(request_data, employeeId=employee_id, status='pending')
        try:
            created = self.backend.post_json('/api/leave-requests/employee', payload, token=token)
        except BackendError as e:
            logger.error(f"Leave submission for {employee_id} failed: {e}")
            return None, {}, 'Failed to submit leave request'

        created = created if isinstance(created, dict) else {}
        leave = normalize_leave(dict(payload, **{k: v for k, v in created.items() if v is not None}))
        if leave['numberOfDays'] is None:
            leave['numberOfDays'] = request_data['numberOfDays']
        if not leave['requestDate']:
            leave['requestDate'] = date.today().isoformat()
        logger.info(f"Leave request filed for {employee_id} ({leave['numberOfDays']} days)")
        return leave, {}, None
