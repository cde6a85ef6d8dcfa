"""
REST backend client
All portal traffic to the backend (APIURL) goes through this module
"""
import logging
from concurrent.futures import ThreadPoolExecutor

import requests

from .normalize import unwrap_list

logger = logging.getLogger(__name__)

LOGIN_STATUS_MESSAGES = {
    401: 'Invalid email or password. Please check your credentials.',
    404: 'Login service not found. Please contact support.',
}
SERVER_ERROR_MESSAGE = 'Server error. Please try again later.'
DEFAULT_LOGIN_ERROR = 'Login failed. Please check your credentials.'


class BackendError(Exception):
    """Raised when a backend call fails or returns a non-2xx status"""

    def __init__(self, message, status_code=None, endpoint=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.endpoint = endpoint


class BackendClient:
    """Thin wrapper around a requests session bound to the backend base URL"""

    def __init__(self, base_url, timeout=10, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self, token=None):
        headers = {'Accept': 'application/json'}
        if token:
            headers['Authorization'] = f'Bearer {token}'
        return headers

    def _request(self, method, path, token=None, **kwargs):
        try:
            response = self.session.request(
                method,
                self._url(path),
                headers=self._headers(token),
                timeout=self.timeout,
                **kwargs
            )
        except requests.exceptions.RequestException as e:
            logger.warning("Backend %s %s failed: %s", method, path, e)
            raise BackendError(str(e), endpoint=path) from e

        if not 200 <= response.status_code < 300:
            logger.warning("Backend %s %s returned HTTP %s", method, path, response.status_code)
            raise BackendError(
                f'HTTP error! status: {response.status_code}',
                status_code=response.status_code,
                endpoint=path
            )
        return response

    def _decode(self, response, path):
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.warning("Backend %s returned a non-JSON body", path)
            raise BackendError('Invalid response from server', response.status_code, path) from e

    def get_json(self, path, token=None, params=None):
        """GET a JSON document"""
        response = self._request('GET', path, token=token, params=params)
        return self._decode(response, path)

    def get_list(self, path, token=None, params=None):
        """GET a collection endpoint and return its items as a list"""
        return unwrap_list(self.get_json(path, token=token, params=params))

    def post_json(self, path, payload, token=None):
        """POST a JSON payload and return the decoded response"""
        response = self._request('POST', path, token=token, json=payload)
        return self._decode(response, path)

    def put(self, path, token=None, payload=None):
        """PUT with an optional JSON payload"""
        response = self._request('PUT', path, token=token, json=payload)
        return self._decode(response, path)

    def fetch_many(self, paths, token=None):
        """Fetch several collections concurrently

        Returns {path: items}; a failed path maps to an empty list.
        """
        def fetch(path):
            try:
                return path, self.get_list(path, token=token)
            except BackendError as e:
                logger.warning("Counting %s as empty: %s", path, e.message)
                return path, []

        unique_paths = list(dict.fromkeys(paths))
        if not unique_paths:
            return {}
        with ThreadPoolExecutor(max_workers=min(8, len(unique_paths))) as executor:
            return dict(executor.map(fetch, unique_paths))

    def login(self, email, password, as_employee=False):
        """Authenticate against the backend

        Returns the login payload ({email, roles, token, employeeId?, ...}).
        Raises BackendError with a user-facing message on failure.
        """
        path = '/api/employees/login' if as_employee else '/api/auth/login'
        try:
            response = self.session.post(
                self._url(path),
                json={'email': email, 'password': password},
                headers={'Accept': 'application/json'},
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.warning("Login request to %s failed: %s", path, e)
            raise BackendError(
                'Network error. Please check your internet connection and try again.',
                endpoint=path
            ) from e

        content_type = response.headers.get('Content-Type', '')
        data = None
        if 'application/json' in content_type:
            try:
                data = response.json()
            except ValueError:
                data = None

        if response.ok and isinstance(data, dict):
            return data

        if response.ok:
            message = 'Invalid response from server. Please try again.'
        elif isinstance(data, dict):
            message = data.get('message') or DEFAULT_LOGIN_ERROR
        elif response.status_code in LOGIN_STATUS_MESSAGES:
            message = LOGIN_STATUS_MESSAGES[response.status_code]
        elif response.status_code >= 500:
            message = SERVER_ERROR_MESSAGE
        else:
            message = 'Login failed. Please check your credentials and try again.'
        logger.info("Login rejected for %s (HTTP %s)", email, response.status_code)
        raise BackendError(message, status_code=response.status_code, endpoint=path)
