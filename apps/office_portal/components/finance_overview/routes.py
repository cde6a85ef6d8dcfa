"""
Finance Overview Routes
"""
from flask import Blueprint, current_app, jsonify

from office_portal.config.settings import PortalConfig
from office_portal.core import current_session, get_backend, login_required
from office_portal.core.pages import render_page
from .service import FinanceOverviewService

finance_overview_bp = Blueprint('finance_overview', __name__)

AREA_ROLES = PortalConfig.get_area_roles('finance-manager')


def _service():
    return FinanceOverviewService(get_backend(), current_app.config['MONTHLY_BUDGET'])


@finance_overview_bp.route('/api/finance/overview')
@login_required(roles=AREA_ROLES)
def api_overview():
    """Budget and expense cards"""
    return jsonify(_service().get_overview(current_session().token))


@finance_overview_bp.route('/finance-manager')
@finance_overview_bp.route('/finance-manager/dashboard')
@login_required(roles=AREA_ROLES)
def overview_page():
    overview = _service().get_overview(current_session().token)
    return render_page('finance.html', 'finance-manager', overview=overview)
