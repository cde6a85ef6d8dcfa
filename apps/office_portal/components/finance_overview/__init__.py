"""
Finance Overview Component
"""
from .routes import finance_overview_bp
from .service import FinanceOverviewService, format_inr, percent_change


def init_finance_overview(app):
    """Initialize Finance Overview component with Flask app"""
    app.register_blueprint(finance_overview_bp)
    return finance_overview_bp


__all__ = ['finance_overview_bp', 'FinanceOverviewService', 'format_inr',
           'percent_change', 'init_finance_overview']
