"""
Auth Component
Login, logout and session lookup
"""
from .routes import auth_bp
from .service import AuthService, validate_credentials


def init_auth(app):
    """Initialize Auth component with Flask app"""
    app.register_blueprint(auth_bp)
    return auth_bp


__all__ = ['auth_bp', 'AuthService', 'validate_credentials', 'init_auth']
