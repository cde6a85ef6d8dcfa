"""
Data Manager Overview Routes
"""
from flask import Blueprint, jsonify

from office_portal.config.settings import PortalConfig
from office_portal.core import current_session, get_backend, login_required
from office_portal.core.pages import render_page
from .service import DataManagerService

data_manager_bp = Blueprint('data_manager', __name__)

AREA_ROLES = PortalConfig.get_area_roles('data-manager')


@data_manager_bp.route('/api/data-manager/overview')
@login_required(roles=AREA_ROLES)
def api_overview():
    """Module counts and chart series for the data-manager dashboard"""
    return jsonify(DataManagerService(get_backend()).get_overview(current_session().token))


@data_manager_bp.route('/data-manager')
@login_required(roles=AREA_ROLES)
def overview_page():
    """Data-manager dashboard"""
    overview = DataManagerService(get_backend()).get_overview(current_session().token)
    return render_page('data_manager.html', 'data-manager', overview=overview)
