"""
Authentication Service
Validates the login form, authenticates against the backend and opens a
server-side portal session.
"""
import logging
import re

from office_portal.core import BackendError
from office_portal.core.sessions import end_session, home_for, start_session

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r'^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$', re.IGNORECASE)
MIN_PASSWORD_LENGTH = 8


def validate_credentials(email, password):
    """Return {field: message} for every invalid field (empty when valid)"""
    errors = {}
    if not email:
        errors['email'] = 'Email is required'
    elif not EMAIL_PATTERN.match(email):
        errors['email'] = 'Invalid email address'

    if not password:
        errors['password'] = 'Password is required'
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors['password'] = f'Password must be at least {MIN_PASSWORD_LENGTH} characters'
    return errors


class AuthService:
    """Login and logout against the backend"""

    def __init__(self, backend):
        self.backend = backend

    def login(self, email, password, as_employee=False):
        """Authenticate and open a session

        Returns a dict with either 'redirect' (success) or 'errors'/'error'.
        """
        email = (email or '').strip()
        errors = validate_credentials(email, password)
        if errors:
            return {'errors': errors}

        try:
            payload = self.backend.login(email, password, as_employee=as_employee)
        except BackendError as e:
            end_session()
            return {'error': e.message, 'status_code': e.status_code}

        if not payload.get('token'):
            end_session()
            logger.warning("Login for %s returned no token", email)
            return {'error': 'Invalid response from server. Please try again.'}

        portal_session = start_session(dict({'email': email}, **payload), as_employee=as_employee)
        destination = home_for(portal_session.roles, portal_session.employee_id)
        logger.info("User %s logged in (roles=%s) -> %s", email, portal_session.roles, destination)
        return {
            'redirect': destination,
            'email': portal_session.email,
            'roles': portal_session.roles,
            'employeeId': portal_session.employee_id,
        }

    def logout(self):
        end_session()
