"""
Core services for portal components
"""
from collections import deque

from office_portal.config.settings import PortalConfig
from .backend_client import BackendClient, BackendError
from .sessions import SessionStore, login_required, current_session

# Global state - shared across all components
system_logs = deque(maxlen=PortalConfig.MAX_LOG_ENTRIES)  # Most recent portal log entries


def get_backend():
    """The BackendClient registered on the current app"""
    from flask import current_app
    return current_app.extensions['backend']


__all__ = [
    'BackendClient',
    'BackendError',
    'SessionStore',
    'login_required',
    'current_session',
    'get_backend',
    'system_logs',
]
