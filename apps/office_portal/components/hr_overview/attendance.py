"""
Attendance Business Logic
Joins attendance records with employees and summarizes them per view window
"""
import logging
from datetime import date, timedelta

from office_portal.core.backend_client import BackendError
from office_portal.core.normalize import format_date, format_work_hours, parse_amount, parse_date
from office_portal.core.table import facet_filter, filter_rows

logger = logging.getLogger(__name__)

VIEWS = ('today', 'week', 'month', 'year')
DEFAULT_VIEW = 'year'
STATUSES = ('present', 'late', 'half-day', 'absent')
SEARCH_FIELDS = ('employeeName', 'department')


def view_window(view, today=None):
    """Inclusive (start, end) dates for a view; weeks start on Sunday"""
    today = today or date.today()
    if view == 'today':
        return today, today
    if view == 'week':
        start = today - timedelta(days=(today.weekday() + 1) % 7)
        return start, start + timedelta(days=6)
    if view == 'month':
        first_of_next = date(today.year + today.month // 12, today.month % 12 + 1, 1)
        return today.replace(day=1), first_of_next - timedelta(days=1)
    if view == 'year':
        return date(today.year, 1, 1), date(today.year, 12, 31)
    return None


def join_attendance(attendance, employees):
    """One display record per attendance entry, named from the employee list"""
    by_id = {
        emp.get('employeeId'): emp
        for emp in employees if isinstance(emp, dict)
    }
    records = []
    for raw in attendance:
        if not isinstance(raw, dict):
            continue
        employee = by_id.get(raw.get('employeeId'), {})
        when = parse_date(raw.get('date'))
        work_hours = parse_amount(raw.get('workHours'))
        records.append({
            'employeeId': raw.get('employeeId'),
            'employeeName': employee.get('employeeName') or 'Unknown',
            'department': employee.get('department') or 'Unknown',
            'date': format_date(when) if when else raw.get('date'),
            'day': when,
            'signIn': raw.get('checkInTime'),
            'signOut': raw.get('checkOutTime'),
            'status': raw.get('status'),
            'workHours': work_hours,
            'workHoursLabel': format_work_hours(work_hours),
        })
    return records


def within(records, window):
    if window is None:
        return list(records)
    start, end = window
    return [r for r in records if r['day'] is not None and start <= r['day'] <= end]


def first_per_employee_day(records):
    """Keep the first record for each (employeeId, date) pair"""
    seen = {}
    for record in records:
        seen.setdefault((record['employeeId'], record['date']), record)
    return list(seen.values())


def attendance_stats(records):
    """Status counts plus total and average work hours"""
    stats = dict.fromkeys(STATUSES, 0)
    for record in records:
        status = record.get('status')
        if status:
            stats[status] = stats.get(status, 0) + 1
    total = len(records)
    total_hours = sum(r['workHours'] for r in records)
    stats.update({
        'total': total,
        'totalWorkHours': total_hours,
        'avgWorkHours': f'{total_hours / total:.1f}' if total else '0',
    })
    return stats


class AttendanceService:
    """Service for the attendance view"""

    def __init__(self, backend):
        self.backend = backend

    def fetch_records(self, token):
        attendance = self.backend.get_list('/api/attendance', token=token)
        employees = self.backend.get_list('/api/employees', token=token)
        return join_attendance(attendance, employees)

    def load(self, token, view=DEFAULT_VIEW, department=None, q='', today=None):
        """Attendance records, stats and departments for one view"""
        view = view if view in VIEWS else DEFAULT_VIEW
        state = {
            'view': view,
            'department': department or 'all',
            'query': q or '',
            'records': [],
            'stats': attendance_stats([]),
            'departments': [],
            'error': None,
        }
        try:
            records = self.fetch_records(token)
        except BackendError as e:
            logger.error(f"Attendance fetch failed: {e}")
            state['error'] = f"Failed to fetch attendance data: {e}"
            return state

        state['departments'] = sorted({r['department'] for r in records})

        visible = within(records, view_window(view, today))
        visible = facet_filter(visible, 'department', department)
        visible = filter_rows(visible, q, SEARCH_FIELDS)

        # Stats count every matching entry; the table shows one row per employee-day
        state['stats'] = attendance_stats(visible)
        rows = visible if view == 'today' else first_per_employee_day(visible)
        state['records'] = [
            {k: v for k, v in record.items() if k != 'day'} for record in rows
        ]
        return state
