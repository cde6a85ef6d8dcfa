"""
Employee Portal Routes
"""
import logging

from flask import Blueprint, jsonify, request

from office_portal.core import BackendError, current_session, get_backend, login_required
from office_portal.core.pages import render_page
from .service import EmployeePortalService, LEAVE_TYPES

logger = logging.getLogger(__name__)

employee_portal_bp = Blueprint('employee_portal', __name__)


def _service():
    return EmployeePortalService(get_backend())


@employee_portal_bp.route('/api/employee/profile')
@login_required(employee=True)
def api_profile():
    portal_session = current_session()
    try:
        profile = _service().get_profile(portal_session.employee_id, portal_session.token)
    except BackendError as e:
        logger.error(f"Profile fetch failed: {e}")
        return jsonify({'error': str(e)}), 503
    return jsonify(profile)


@employee_portal_bp.route('/api/employee/attendance/today')
@login_required(employee=True)
def api_today_attendance():
    portal_session = current_session()
    return jsonify(_service().get_today_attendance(portal_session.employee_id, portal_session.token))


@employee_portal_bp.route('/api/employee/leaves', methods=['GET'])
@login_required(employee=True)
def api_leaves():
    """Own leave requests plus the holiday calendar"""
    portal_session = current_session()
    result = _service().get_leaves(portal_session.employee_id, portal_session.token)
    if result['error']:
        return jsonify(dict(result, items=[])), 503
    return jsonify(result)


@employee_portal_bp.route('/api/employee/leaves', methods=['POST'])
@login_required(employee=True)
def api_submit_leave():
    """Apply for leave"""
    portal_session = current_session()
    if request.is_json:
        data = request.get_json(silent=True)
    else:
        data = request.form.to_dict()
    if not data or not isinstance(data, dict):
        return jsonify({'error': 'No data provided'}), 400
    leave, errors, error = _service().submit_leave(portal_session.employee_id, data, portal_session.token)
    if errors:
        return jsonify({'errors': errors}), 400
    if error:
        return jsonify({'error': error}), 503
    return jsonify(leave), 201


@employee_portal_bp.route('/employee')
@login_required(employee=True)
def employee_page():
    """Employee dashboard: profile card, today's attendance, leaves"""
    portal_session = current_session()
    service = _service()
    try:
        profile = service.get_profile(portal_session.employee_id, portal_session.token)
        profile_error = None
    except BackendError as e:
        logger.error(f"Profile fetch failed: {e}")
        profile, profile_error = None, str(e)

    return render_page(
        'employee.html', 'employee',
        profile=profile,
        profile_error=profile_error,
        attendance=service.get_today_attendance(portal_session.employee_id, portal_session.token),
        leaves=service.get_leaves(portal_session.employee_id, portal_session.token),
        leave_types=LEAVE_TYPES,
    )
