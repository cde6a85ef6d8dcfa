"""
Main page routes for the portal
"""
from flask import Blueprint, redirect, url_for

from office_portal.config.settings import PortalConfig
from office_portal.core import current_session, get_backend, login_required
from office_portal.core.pages import render_page
from office_portal.core.sessions import home_for
from office_portal.components.notifications import NotificationsService
from office_portal.components.system_logs import SystemLogsService

# Create main blueprint
main_bp = Blueprint('main', __name__)

ADMIN_AREAS = [
    {'title': 'Employee Management', 'path': '/hr'},
    {'title': 'Attendance', 'path': '/hr/attendance'},
    {'title': 'Finance', 'path': '/finance-manager/dashboard'},
    {'title': 'Inventory', 'path': '/store'},
    {'title': 'Data Management', 'path': '/data-manager'},
]


@main_bp.route('/')
def index():
    """Send users to their home area"""
    portal_session = current_session()
    if portal_session is None:
        return redirect(url_for('auth.login_page'))
    return redirect(home_for(portal_session.roles, portal_session.employee_id))


@main_bp.route('/admin')
@login_required(roles=PortalConfig.get_area_roles('admin'))
def admin_page():
    """Admin home: area shortcuts, notifications and recent activity"""
    return render_page(
        'admin.html', 'admin',
        areas=ADMIN_AREAS,
        notifications=NotificationsService(get_backend()).get_notifications(current_session().token),
        recent_logs=list(reversed(SystemLogsService().get_logs(limit=10))),
    )


@main_bp.route('/dashboard')
@login_required()
def dashboard():
    """Landing page for accounts without a role area"""
    return render_page('dashboard.html', None)
