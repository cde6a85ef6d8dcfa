"""
Store Overview Component
"""
from .routes import store_overview_bp
from .service import StoreOverviewService, STORE_SECTIONS


def init_store_overview(app):
    """Initialize Store Overview component with Flask app"""
    app.register_blueprint(store_overview_bp)
    return store_overview_bp


__all__ = ['store_overview_bp', 'StoreOverviewService', 'STORE_SECTIONS', 'init_store_overview']
