"""
Authentication Routes
"""
from flask import Blueprint, current_app, jsonify, redirect, render_template, request, url_for

from office_portal.core import current_session, get_backend
from office_portal.core.extensions import limiter
from office_portal.core.sessions import home_for
from .service import AuthService

auth_bp = Blueprint('auth', __name__)


def _login_limit():
    return current_app.config['LOGIN_RATE_LIMIT']


def _flag(value):
    return str(value).lower() in ('1', 'true', 'on', 'yes')


@auth_bp.route('/login', methods=['GET'])
def login_page():
    """Login form (signed-in users go straight home)"""
    portal_session = current_session()
    if portal_session is not None:
        return redirect(home_for(portal_session.roles, portal_session.employee_id))
    return render_template('login.html', form={}, errors={}, error=None)


@auth_bp.route('/login', methods=['POST'])
@limiter.limit(_login_limit)
def login_submit():
    """Handle the login form"""
    form = {
        'email': request.form.get('email', ''),
        'as_employee': _flag(request.form.get('as_employee', '')),
    }
    result = AuthService(get_backend()).login(
        form['email'],
        request.form.get('password', ''),
        as_employee=form['as_employee']
    )
    if 'redirect' in result:
        return redirect(result['redirect'])
    return render_template(
        'login.html',
        form=form,
        errors=result.get('errors', {}),
        error=result.get('error')
    ), 400 if 'errors' in result else 401


@auth_bp.route('/api/auth/login', methods=['POST'])
@limiter.limit(_login_limit)
def api_login():
    """JSON login: {email, password, asEmployee?}"""
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify({'error': 'No data provided'}), 400

    result = AuthService(get_backend()).login(
        data.get('email', ''),
        data.get('password', ''),
        as_employee=_flag(data.get('asEmployee', False))
    )
    if 'errors' in result:
        return jsonify({'errors': result['errors']}), 400
    if 'error' in result:
        return jsonify({'error': result['error']}), 401
    return jsonify(result)


@auth_bp.route('/api/auth/session')
def api_session():
    """Who is signed in"""
    portal_session = current_session()
    if portal_session is None:
        return jsonify({'authenticated': False}), 401
    return jsonify(dict(portal_session.to_dict(), authenticated=True))


@auth_bp.route('/logout', methods=['GET', 'POST'])
def logout():
    """Discard the server-side session"""
    AuthService(get_backend()).logout()
    if request.path.startswith('/api/') or request.is_json:
        return jsonify({'message': 'Logged out'})
    return redirect(url_for('auth.login_page'))
