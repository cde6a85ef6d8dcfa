"""
HR Overview Business Logic
"""
import logging
from datetime import date, timedelta

from office_portal.core.backend_client import BackendError
from office_portal.core.normalize import parse_date
from .attendance import attendance_stats, join_attendance, within

logger = logging.getLogger(__name__)

NEW_HIRE_DAYS = 30
RECENT_ACTIVITY_LIMIT = 5


def department_breakdown(employees):
    """Head count and share (rounded percent) per department"""
    counts = {}
    for emp in employees:
        dept = emp.get('department') or 'Others'
        counts[dept] = counts.get(dept, 0) + 1
    total = len(employees)
    return [
        {'label': dept, 'count': count, 'percentage': round(count / total * 100)}
        for dept, count in counts.items()
    ]


def count_new_hires(employees, today=None, days=NEW_HIRE_DAYS):
    since = (today or date.today()) - timedelta(days=days)
    hires = 0
    for emp in employees:
        joined = parse_date(emp.get('joinDate') or emp.get('joiningDate'))
        if joined is not None and joined >= since:
            hires += 1
    return hires


class HrOverviewService:
    """Service for the HR dashboard"""

    def __init__(self, backend):
        self.backend = backend

    def get_overview(self, token, today=None):
        """Workforce figures and today's attendance; failed endpoints count as empty"""
        today = today or date.today()
        lists = self.backend.fetch_many(['/api/employees', '/api/attendance'], token=token)
        employees = [e for e in lists.get('/api/employees', []) if isinstance(e, dict)]
        attendance = join_attendance(lists.get('/api/attendance', []), employees)

        try:
            activities = self.backend.get_list('/api/hr/recent-activities', token=token)
        except BackendError as e:
            logger.warning(f"Recent activities unavailable: {e}")
            activities = []

        departments = department_breakdown(employees)
        todays = within(attendance, (today, today))
        return {
            'totalEmployees': len(employees),
            'activeEmployees': sum(
                1 for e in employees if not e.get('status') or e.get('status') == 'Active'
            ),
            'newHires': count_new_hires(employees, today),
            'departments': len(departments),
            'departmentData': departments,
            'attendanceToday': attendance_stats(todays),
            'recentActivities': activities[:RECENT_ACTIVITY_LIMIT],
        }
