"""
API Client - HTTP access to the content endpoints for admin tooling

Uses a ``requests.Session`` so the admin login cookie is carried between
calls. Any object exposing ``request(method, url, json=..., timeout=...)``
and returning a response with ``ok``, ``status_code``, ``json()`` and
``text`` can stand in for the session.
"""

import requests

RESOURCE_PATHS = {
    'skills': '/api/skills',
    'experiences': '/api/experiences',
    'portfolios': '/api/portofolios',
}


class ApiRequestError(Exception):
    """Non-2xx response from the API"""

    def __init__(self, status_code, message):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class ApiClient:
    def __init__(self, base_url='http://localhost:5000', session=None, timeout=None):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def request(self, method, path, payload=None):
        """Issue one request and return the decoded JSON body"""
        response = self.session.request(
            method,
            f"{self.base_url}{path}",
            json=payload,
            timeout=self.timeout
        )
        if not response.ok:
            raise ApiRequestError(response.status_code, _error_message(response))
        try:
            return response.json()
        except ValueError:
            return response.text

    def login(self, username, password):
        return self.request('POST', '/api/auth/login', {'username': username, 'password': password})

    def logout(self):
        return self.request('POST', '/api/auth/logout')

    def stats(self):
        return self.request('GET', '/api/stats')

    def resource(self, name):
        return ResourceClient(self, RESOURCE_PATHS.get(name, f'/api/{name}'))


class ResourceClient:
    """CRUD calls for one collection"""

    def __init__(self, api, path):
        self.api = api
        self.path = path

    def list(self):
        return self.api.request('GET', self.path)

    def get(self, row_id):
        return self.api.request('GET', f"{self.path}/{row_id}")

    def create(self, payload):
        return self.api.request('POST', self.path, payload)

    def update(self, row_id, payload):
        return self.api.request('PUT', f"{self.path}/{row_id}", payload)

    def patch(self, row_id, payload):
        return self.api.request('PATCH', f"{self.path}/{row_id}", payload)

    def delete(self, row_id):
        return self.api.request('DELETE', f"{self.path}/{row_id}")


def _error_message(response):
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get('error'):
        return body['error']
    return f"HTTP {response.status_code}"
