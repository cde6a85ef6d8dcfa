"""
Notifications Component
"""
from .routes import notifications_bp
from .service import NotificationsService


def init_notifications(app):
    """Initialize Notifications component with Flask app"""
    app.register_blueprint(notifications_bp)
    return notifications_bp


__all__ = ['notifications_bp', 'NotificationsService', 'init_notifications']
