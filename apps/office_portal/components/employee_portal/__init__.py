"""
Employee Portal Component
Self-service pages for employee logins
"""
from .routes import employee_portal_bp
from .service import EmployeePortalService, validate_leave


def init_employee_portal(app):
    """Initialize Employee Portal component with Flask app"""
    app.register_blueprint(employee_portal_bp)
    return employee_portal_bp


__all__ = ['employee_portal_bp', 'EmployeePortalService', 'validate_leave', 'init_employee_portal']
