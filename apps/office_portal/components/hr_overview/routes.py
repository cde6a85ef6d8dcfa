"""
HR Overview and Attendance Routes
"""
from flask import Blueprint, jsonify, request

from office_portal.config.settings import PortalConfig
from office_portal.core import current_session, get_backend, login_required
from office_portal.core.pages import render_page
from .attendance import AttendanceService, VIEWS
from .service import HrOverviewService

hr_overview_bp = Blueprint('hr_overview', __name__)

AREA_ROLES = PortalConfig.get_area_roles('hr')


def _attendance_state():
    return AttendanceService(get_backend()).load(
        current_session().token,
        view=request.args.get('view', 'year'),
        department=request.args.get('department'),
        q=request.args.get('q', ''),
    )


@hr_overview_bp.route('/api/hr/overview')
@login_required(roles=AREA_ROLES)
def api_overview():
    return jsonify(HrOverviewService(get_backend()).get_overview(current_session().token))


@hr_overview_bp.route('/hr')
@login_required(roles=AREA_ROLES)
def overview_page():
    """HR dashboard"""
    overview = HrOverviewService(get_backend()).get_overview(current_session().token)
    return render_page('hr.html', 'hr', overview=overview)


@hr_overview_bp.route('/api/attendance')
@login_required(roles=AREA_ROLES)
def api_attendance():
    """Attendance records and stats for ?view=today|week|month|year"""
    state = _attendance_state()
    if state['error']:
        return jsonify({'error': state['error'], 'items': []}), 503
    return jsonify(state)


@hr_overview_bp.route('/hr/attendance')
@login_required(roles=AREA_ROLES)
def attendance_page():
    return render_page('attendance.html', 'hr', state=_attendance_state(), views=VIEWS)
