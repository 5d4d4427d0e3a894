"""
Pytest configuration and shared fixtures.

Every test gets a fresh application built with the testing config
(in-memory SQLite) so no state leaks between tests.
"""
import os

import pytest

os.environ.setdefault('FLASK_ENV', 'testing')

from app import create_app  # noqa: E402
from extensions import db  # noqa: E402
from admin_client import ApiClient  # noqa: E402
from utils.security import reset_rate_limits  # noqa: E402

ADMIN_LOGIN = {'username': 'admin', 'password': 'admin-pass'}


@pytest.fixture
def app():
    app = create_app('testing')
    reset_rate_limits()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(app):
    client = app.test_client()
    resp = client.post('/api/auth/login', json=ADMIN_LOGIN)
    assert resp.status_code == 200
    return client


class _TestResponse:
    def __init__(self, resp):
        self.status_code = resp.status_code
        self.text = resp.get_data(as_text=True)
        self._json = resp.get_json(silent=True)

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._json is None:
            raise ValueError('response body is not JSON')
        return self._json


class FlaskSession:
    """Routes ApiClient calls through a Flask test client"""

    def __init__(self, client):
        self.client = client
        self.calls = []

    def request(self, method, url, json=None, timeout=None):
        self.calls.append((method, url))
        return _TestResponse(self.client.open(url, method=method, json=json))


@pytest.fixture
def api(auth_client):
    return ApiClient(base_url='', session=FlaskSession(auth_client))


def make_experience(**overrides):
    payload = {
        'title': 'Intern',
        'company': 'Acme',
        'startDate': 'Jan 2023',
        'description': 'Built internal tools.',
        'tools': ['Go'],
        'isActive': True,
        'order': 1,
    }
    payload.update(overrides)
    return payload


def make_portfolio(**overrides):
    payload = {
        'title': 'Shop',
        'description': 'An online shop.',
        'category': 'Web Development',
        'technologies': ['Flask', 'PostgreSQL'],
        'imageUrls': ['https://example.com/shop.png'],
        'projectUrl': 'https://shop.example.com',
        'githubUrl': 'https://github.com/example/shop',
        'isActive': True,
    }
    payload.update(overrides)
    return payload


def make_skill(**overrides):
    payload = {'title': 'Backend', 'skills': 'Python, Flask, SQL', 'link': 'https://example.com'}
    payload.update(overrides)
    return payload
