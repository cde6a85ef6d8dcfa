"""
HR Overview Component
Workforce dashboard and attendance tracking
"""
from .routes import hr_overview_bp
from .service import HrOverviewService
from .attendance import AttendanceService


def init_hr_overview(app):
    """Initialize HR Overview component with Flask app"""
    app.register_blueprint(hr_overview_bp)
    return hr_overview_bp


__all__ = ['hr_overview_bp', 'HrOverviewService', 'AttendanceService', 'init_hr_overview']
