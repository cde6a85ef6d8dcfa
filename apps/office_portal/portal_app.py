"""
Office Portal
Role-based web front end over the office management REST backend
"""
import logging
import os

from flask import Flask, jsonify, request

# Import modular components
from office_portal.config.settings import PortalConfig
from office_portal.core import BackendClient, SessionStore, system_logs
from office_portal.core.activity_log import install_activity_log
from office_portal.core.extensions import limiter
from office_portal.routes.main_routes import main_bp

from office_portal.components.auth import init_auth
from office_portal.components.resource_tables import init_resource_tables
from office_portal.components.data_manager import init_data_manager
from office_portal.components.store_overview import init_store_overview
from office_portal.components.finance_overview import init_finance_overview
from office_portal.components.hr_overview import init_hr_overview
from office_portal.components.employee_portal import init_employee_portal
from office_portal.components.notifications import init_notifications
from office_portal.components.system_logs import init_system_logs

logger = logging.getLogger(__name__)


class PortalApp:
    """Main portal application class"""

    def __init__(self, config_object=PortalConfig):
        self.config_object = config_object
        self.app = None

    def create_app(self):
        """Create and configure Flask application"""
        template_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates')
        self.app = Flask(__name__, template_folder=template_dir)

        # Load configuration
        self.app.config.from_object(self.config_object)

        # Initialize extensions
        limiter.init_app(self.app)
        install_activity_log(system_logs, level=logging.getLevelName(self.app.config['LOG_LEVEL']))

        # Shared backend client and server-side session registry
        self.app.extensions['backend'] = BackendClient(
            self.app.config['API_URL'],
            timeout=self.app.config['REQUEST_TIMEOUT']
        )
        self.app.extensions['portal_sessions'] = SessionStore(self.app.config['PERMANENT_SESSION_LIFETIME'])

        # Initialize components
        init_auth(self.app)
        init_resource_tables(self.app)
        init_data_manager(self.app)
        init_store_overview(self.app)
        init_finance_overview(self.app)
        init_hr_overview(self.app)
        init_employee_portal(self.app)
        init_notifications(self.app)
        init_system_logs(self.app)

        # Register main blueprint
        self.app.register_blueprint(main_bp)

        self.app.register_error_handler(429, self._rate_limited)

        logger.info(f"Portal configured against backend {self.app.config['API_URL']}")
        return self.app

    @staticmethod
    def _rate_limited(error):
        if request.path.startswith('/api/'):
            return jsonify({'error': 'Too many requests. Please try again later.'}), 429
        return 'Too many requests. Please try again later.', 429

    def run(self, host='0.0.0.0', port=None):
        """Start the portal"""
        port = port or int(os.environ.get('PORTAL_PORT', 3000))

        # Display startup info
        print("Office Portal")
        print(f"Starting on: http://localhost:{port}")
        print(f"Backend:     {self.app.config['API_URL']}")

        self.app.run(host=host, port=port, debug=False)


def create_app(config_object=PortalConfig):
    """Application factory for WSGI servers and tests"""
    return PortalApp(config_object).create_app()


def main():
    """Main entry point"""
    logging.basicConfig(
        level=PortalConfig.LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    portal = PortalApp()
    portal.create_app()
    portal.run()


if __name__ == '__main__':
    main()
