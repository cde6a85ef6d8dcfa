"""
Server-side portal sessions and role guards

The browser only ever holds an opaque session id (inside Flask's signed
cookie). The backend token and roles stay in the SessionStore and are checked
on every request.
"""
import logging
import secrets
import threading
from datetime import datetime
from functools import wraps

from flask import current_app, g, jsonify, redirect, request, session, url_for

logger = logging.getLogger(__name__)


class PortalSession:
    """One authenticated user"""

    def __init__(self, email, roles, token, employee_id=None, employee_name=None, profile=None):
        self.email = email
        self.roles = list(roles or [])
        self.token = token
        self.employee_id = employee_id
        self.employee_name = employee_name
        self.profile = profile or {}
        self.created_at = datetime.now()
        self.last_seen = self.created_at

    @property
    def is_employee(self):
        return bool(self.employee_id)

    def has_any_role(self, roles):
        return any(role in self.roles for role in roles)

    def to_dict(self):
        return {
            'email': self.email,
            'roles': self.roles,
            'employeeId': self.employee_id,
            'employeeName': self.employee_name,
        }


class SessionStore:
    """Thread-safe in-memory session registry with a fixed lifetime"""

    def __init__(self, lifetime):
        self.lifetime = lifetime
        self._sessions = {}
        self._lock = threading.Lock()

    def _expired(self, portal_session, now):
        return now - portal_session.created_at > self.lifetime

    def create(self, portal_session):
        """Register a session under a fresh sid, dropping any that have expired"""
        sid = secrets.token_urlsafe(32)
        now = datetime.now()
        with self._lock:
            stale = [key for key, value in self._sessions.items() if self._expired(value, now)]
            for key in stale:
                del self._sessions[key]
            self._sessions[sid] = portal_session
        if stale:
            logger.info("Dropped %d expired sessions", len(stale))
        return sid

    def get(self, sid):
        """Return the live session for ``sid``; expired sessions are dropped"""
        if not sid:
            return None
        with self._lock:
            portal_session = self._sessions.get(sid)
            if portal_session is None:
                return None
            if self._expired(portal_session, datetime.now()):
                del self._sessions[sid]
                logger.info("Session for %s expired", portal_session.email)
                return None
            portal_session.last_seen = datetime.now()
            return portal_session

    def discard(self, sid):
        with self._lock:
            return self._sessions.pop(sid, None)

    def __len__(self):
        with self._lock:
            return len(self._sessions)


def get_store():
    return current_app.extensions['portal_sessions']


def home_for(roles, employee_id=None):
    """Landing path for a set of roles (first match in ROLE_HOMES wins)

    Employee logins carrying an employee id always land on the employee portal.
    """
    config = current_app.config
    if employee_id:
        return config['EMPLOYEE_HOME']
    for role, path in config['ROLE_HOMES']:
        if role in (roles or []):
            return path
    return config['DEFAULT_HOME']


def start_session(login_payload, as_employee=False):
    """Register a backend login payload and bind it to the browser session"""
    portal_session = PortalSession(
        email=login_payload.get('email'),
        roles=login_payload.get('roles') or [],
        token=login_payload.get('token'),
        employee_id=login_payload.get('employeeId') if as_employee else None,
        employee_name=login_payload.get('employeeName'),
        profile=login_payload if as_employee else None
    )
    previous_sid = session.get('sid')
    if previous_sid:
        get_store().discard(previous_sid)
    session.clear()
    session.permanent = True
    session['sid'] = get_store().create(portal_session)
    g.portal_session = portal_session
    return portal_session


def end_session():
    sid = session.pop('sid', None)
    if sid:
        get_store().discard(sid)
    g.pop('portal_session', None)


def current_session():
    """The PortalSession bound to this request, or None"""
    if 'portal_session' not in g:
        g.portal_session = get_store().get(session.get('sid'))
    return g.portal_session


def _wants_json():
    return request.path.startswith('/api/') or request.accept_mimetypes.best == 'application/json'


def login_required(roles=None, employee=False):
    """Guard a view: requires a live session, and optionally roles or an employee login"""
    def decorator(view):
        @wraps(view)
        def wrapped(*args, **kwargs):
            portal_session = current_session()
            if portal_session is None:
                if _wants_json():
                    return jsonify({'error': 'Authentication required'}), 401
                return redirect(url_for('auth.login_page'))

            allowed = True
            if employee and not portal_session.is_employee:
                allowed = False
            if roles and not portal_session.has_any_role(roles):
                allowed = False

            if not allowed:
                logger.info("Denied %s to %s", request.path, portal_session.email)
                if _wants_json():
                    return jsonify({'error': 'Forbidden'}), 403
                return redirect(home_for(portal_session.roles, portal_session.employee_id))
            return view(*args, **kwargs)
        return wrapped
    return decorator
