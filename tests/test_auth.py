"""Tests for login, role routing and the session gate."""

from datetime import datetime, timedelta

import pytest

from office_portal.components.auth.service import validate_credentials
from office_portal.core.sessions import PortalSession, SessionStore


class TestValidateCredentials:
    """Tests for login form validation."""

    def test_valid(self):
        assert validate_credentials('admin@example.com', 'password1') == {}

    def test_missing(self):
        assert validate_credentials('', '') == {
            'email': 'Email is required',
            'password': 'Password is required',
        }

    def test_malformed(self):
        errors = validate_credentials('not-an-email', 'short')
        assert errors['email'] == 'Invalid email address'
        assert errors['password'] == 'Password must be at least 8 characters'


@pytest.mark.parametrize('roles,home', [
    (['ADMIN', 'HR'], '/admin'),
    (['STORE'], '/store'),
    (['FINANCE'], '/finance-manager/dashboard'),
    (['HR', 'FINANCE'], '/finance-manager/dashboard'),
    (['HR'], '/hr'),
    (['DATAMANAGER'], '/data-manager'),
    (['VISITOR'], '/dashboard'),
    ([], '/dashboard'),
])
def test_login_redirects_by_role(client, backend, roles, home):
    backend.add('POST', '/api/auth/login', {'token': 'tok', 'roles': roles, 'email': 'a@example.com'})
    response = client.post('/login', data={'email': 'a@example.com', 'password': 'password1'})
    assert response.status_code == 302
    assert response.headers['Location'].endswith(home)


def test_employee_login_lands_on_employee_portal(client, backend):
    backend.add('POST', '/api/employees/login', {'token': 'tok', 'roles': ['EMPLOYEE'], 'employeeId': 'EMP7'})
    response = client.post('/api/auth/login', json={
        'email': 'e@example.com', 'password': 'password1', 'asEmployee': True,
    })
    assert response.status_code == 200
    assert response.get_json() == {
        'redirect': '/employee',
        'email': 'e@example.com',
        'roles': ['EMPLOYEE'],
        'employeeId': 'EMP7',
    }


def test_validation_errors_skip_backend(client, backend):
    response = client.post('/api/auth/login', json={'email': 'bad', 'password': 'x'})
    assert response.status_code == 400
    assert set(response.get_json()['errors']) == {'email', 'password'}
    assert backend.calls == []


def test_failed_login_reports_message(client, backend):
    backend.add('POST', '/api/auth/login', status=401, text='', content_type='text/plain')
    response = client.post('/api/auth/login', json={'email': 'a@example.com', 'password': 'password1'})
    assert response.status_code == 401
    assert response.get_json()['error'] == 'Invalid email or password. Please check your credentials.'

    page = client.post('/login', data={'email': 'a@example.com', 'password': 'password1'})
    assert page.status_code == 401
    assert b'Invalid email or password' in page.data


def test_cookie_holds_no_token(app, client, backend):
    backend.add('POST', '/api/auth/login', {'token': 'secret-backend-token', 'roles': ['HR']})
    client.post('/api/auth/login', json={'email': 'a@example.com', 'password': 'password1'})
    with client.session_transaction() as flask_session:
        assert set(flask_session.keys()) - {'_permanent'} == {'sid'}
        assert 'secret-backend-token' not in str(dict(flask_session))
    assert len(app.extensions['portal_sessions']) == 1


def test_session_endpoint_and_logout(app, client, login_as):
    assert client.get('/api/auth/session').status_code == 401

    login_as('HR', email='hr@example.com')
    session_info = client.get('/api/auth/session').get_json()
    assert session_info['authenticated'] is True
    assert session_info['email'] == 'hr@example.com'

    response = client.get('/logout')
    assert response.status_code == 302
    assert client.get('/api/auth/session').status_code == 401
    assert len(app.extensions['portal_sessions']) == 0


class TestGate:
    """Tests for login_required on pages and API routes."""

    def test_anonymous_api_gets_401(self, client):
        response = client.get('/api/hr/overview')
        assert response.status_code == 401
        assert response.get_json() == {'error': 'Authentication required'}

    def test_anonymous_page_redirects_to_login(self, client):
        response = client.get('/hr')
        assert response.status_code == 302
        assert response.headers['Location'].endswith('/login')

    def test_wrong_role_api_gets_403(self, client, login_as):
        login_as('STORE')
        assert client.get('/api/hr/overview').status_code == 403

    def test_wrong_role_page_redirects_home(self, client, login_as):
        login_as('STORE')
        response = client.get('/hr')
        assert response.status_code == 302
        assert response.headers['Location'].endswith('/store')

    def test_root_redirects(self, client, login_as):
        assert client.get('/').headers['Location'].endswith('/login')
        login_as('DATAMANAGER')
        assert client.get('/').headers['Location'].endswith('/data-manager')

    def test_admin_enters_every_area(self, client, backend, login_as):
        login_as('ADMIN')
        for path in ('/api/hr/overview', '/api/store/overview', '/api/finance/overview',
                     '/api/data-manager/overview'):
            assert client.get(path).status_code == 200, path

    def test_token_forwarded_to_backend(self, client, backend, login_as):
        login_as('HR', token='hr-token')
        client.get('/api/hr/overview')
        assert backend.calls
        assert all(call['headers'].get('Authorization') == 'Bearer hr-token' for call in backend.calls)

    def test_signed_in_user_skips_login_page(self, client, login_as):
        login_as('STORE')
        response = client.get('/login')
        assert response.status_code == 302
        assert response.headers['Location'].endswith('/store')


@pytest.mark.parametrize('body', [['x'], 'a@example.com', 42, {}])
def test_json_login_rejects_non_object_body(client, backend, body):
    response = client.post('/api/auth/login', json=body)
    assert response.status_code == 400
    assert response.get_json() == {'error': 'No data provided'}
    assert backend.calls == []


class TestSessionStore:
    """Tests for the server-side session registry."""

    def _session(self, age_minutes=0):
        portal_session = PortalSession('a@example.com', ['HR'], 'tok')
        portal_session.created_at = datetime.now() - timedelta(minutes=age_minutes)
        return portal_session

    def test_expired_session_is_not_returned(self):
        store = SessionStore(timedelta(minutes=30))
        sid = store.create(self._session())
        store._sessions[sid].created_at -= timedelta(hours=1)
        assert store.get(sid) is None
        assert len(store) == 0

    def test_create_drops_abandoned_sessions(self):
        store = SessionStore(timedelta(minutes=30))
        for _ in range(5):
            store.create(self._session(age_minutes=60))
        live = store.create(self._session(age_minutes=5))
        assert len(store) == 1
        assert store.get(live) is not None


def test_second_login_replaces_first_session(app, client, backend):
    backend.add('POST', '/api/auth/login', {'token': 'tok', 'roles': ['HR'], 'email': 'a@example.com'})
    client.post('/login', data={'email': 'a@example.com', 'password': 'password1'})
    with client.session_transaction() as flask_session:
        first_sid = flask_session['sid']

    client.post('/login', data={'email': 'a@example.com', 'password': 'password1'})
    store = app.extensions['portal_sessions']
    assert len(store) == 1
    assert store.get(first_sid) is None
