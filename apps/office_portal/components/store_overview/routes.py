"""
Store Overview Routes
"""
from flask import Blueprint, jsonify

from office_portal.config.settings import PortalConfig
from office_portal.core import current_session, get_backend, login_required
from office_portal.core.pages import render_page
from .service import StoreOverviewService

store_overview_bp = Blueprint('store_overview', __name__)

AREA_ROLES = PortalConfig.get_area_roles('store')


@store_overview_bp.route('/api/store/overview')
@login_required(roles=AREA_ROLES)
def api_overview():
    """Section counts for the store dashboard"""
    return jsonify(StoreOverviewService(get_backend()).get_overview(current_session().token))


@store_overview_bp.route('/store')
@login_required(roles=AREA_ROLES)
def overview_page():
    """Store dashboard"""
    overview = StoreOverviewService(get_backend()).get_overview(current_session().token)
    return render_page('store.html', 'store', overview=overview)
