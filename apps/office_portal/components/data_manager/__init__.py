"""
Data Manager Component
Overview of the data-manager modules
"""
from .routes import data_manager_bp
from .service import DataManagerService, monthly_totals, payment_status_counts


def init_data_manager(app):
    """Initialize Data Manager component with Flask app"""
    app.register_blueprint(data_manager_bp)
    return data_manager_bp


__all__ = ['data_manager_bp', 'DataManagerService', 'monthly_totals',
           'payment_status_counts', 'init_data_manager']
