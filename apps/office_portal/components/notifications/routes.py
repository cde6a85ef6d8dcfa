"""
Notifications Routes
"""
from flask import Blueprint, jsonify

from office_portal.config.settings import PortalConfig
from office_portal.core import BackendError, current_session, get_backend, login_required
from .service import NotificationsService

notifications_bp = Blueprint('notifications', __name__)

AREA_ROLES = PortalConfig.get_area_roles('admin')


@notifications_bp.route('/api/notifications')
@login_required(roles=AREA_ROLES)
def api_notifications():
    return jsonify(NotificationsService(get_backend()).get_notifications(current_session().token))


@notifications_bp.route('/api/notifications/<notification_id>/read', methods=['POST'])
@login_required(roles=AREA_ROLES)
def api_mark_read(notification_id):
    """Mark one notification as read"""
    try:
        result = NotificationsService(get_backend()).mark_read(notification_id, current_session().token)
    except BackendError as e:
        return jsonify({'id': notification_id, 'read': False, 'error': str(e)}), 503
    return jsonify(result)
