"""
System Logs Routes
"""
from flask import Blueprint, jsonify, request

from office_portal.config.settings import PortalConfig
from office_portal.core import login_required
from office_portal.core.pages import render_page
from .service import SystemLogsService

system_logs_bp = Blueprint('system_logs', __name__)

service = SystemLogsService()

LEVELS = ['ALL', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def _limit():
    try:
        return max(0, int(request.args.get('limit', 50)))
    except ValueError:
        return 50


@system_logs_bp.route('/api/logs')
@login_required(roles=PortalConfig.get_area_roles('admin'))
def api_logs():
    """Recent portal log entries, ?level=&limit="""
    level_filter = request.args.get('level', 'ALL')
    return jsonify(service.get_logs(level_filter=level_filter, limit=_limit()))


@system_logs_bp.route('/admin/logs')
@login_required(roles=PortalConfig.get_area_roles('admin'))
def logs_page():
    level_filter = request.args.get('level', 'ALL')
    return render_page(
        'logs.html', 'admin',
        logs=list(reversed(service.get_logs(level_filter=level_filter, limit=_limit()))),
        levels=LEVELS,
        level=level_filter.upper(),
    )
