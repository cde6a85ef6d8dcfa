"""Shared fixtures: a testing app whose backend HTTP session is faked."""

import json

import pytest
import requests

from office_portal.config.settings import TestingConfig
from office_portal.core.sessions import PortalSession
from office_portal.portal_app import create_app

BACKEND = TestingConfig.API_URL


class FakeResponse:
    """Just enough of requests.Response for BackendClient."""

    def __init__(self, status_code=200, body=None, text=None, content_type='application/json'):
        self.status_code = status_code
        if text is None and body is not None:
            text = json.dumps(body)
        self.text = text or ''
        self.content = self.text.encode()
        self.headers = {'Content-Type': content_type} if self.text else {}

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        return json.loads(self.text)


class FakeBackendSession:
    """Routes (method, path) to canned responses and records every call."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, method, path, body=None, status=200, text=None, content_type='application/json'):
        self.routes[(method.upper(), path)] = FakeResponse(status, body, text, content_type)

    def fail(self, method, path):
        self.routes[(method.upper(), path)] = requests.exceptions.ConnectionError('connection refused')

    def request(self, method, url, headers=None, timeout=None, **kwargs):
        path = url[len(BACKEND):] if url.startswith(BACKEND) else url
        self.calls.append({'method': method.upper(), 'path': path, 'headers': headers or {}, **kwargs})
        response = self.routes.get((method.upper(), path))
        if response is None:
            return FakeResponse(404, text='Not Found', content_type='text/plain')
        if isinstance(response, Exception):
            raise response
        return response

    def post(self, url, **kwargs):
        return self.request('POST', url, **kwargs)

    def paths(self, method='GET'):
        return [call['path'] for call in self.calls if call['method'] == method]


@pytest.fixture
def backend():
    return FakeBackendSession()


@pytest.fixture
def app(backend):
    app = create_app(TestingConfig)
    app.extensions['backend'].session = backend
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login_as(app, client):
    """Bind a portal session with the given roles to the test client."""

    def _login(*roles, employee_id=None, email='user@example.com', token='tok-123'):
        portal_session = PortalSession(
            email=email,
            roles=list(roles),
            token=token,
            employee_id=employee_id,
            employee_name='Test User',
        )
        sid = app.extensions['portal_sessions'].create(portal_session)
        with client.session_transaction() as flask_session:
            flask_session['sid'] = sid
        return portal_session

    return _login
