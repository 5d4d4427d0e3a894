"""
Security Module - Admin identity, rate limiting and audit logging
"""

import os
import json
import time
from datetime import datetime
from flask import request, current_app
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash


# Rate Limiting
RATE_LIMIT_REQUESTS = {}  # {ip: [(timestamp, endpoint), ...]}


class AdminUser(UserMixin):
    """The single site administrator, identified by username"""

    def __init__(self, username):
        self.id = username
        self.username = username


def init_admin_credentials(app):
    """
    Resolve the admin password hash once at startup.

    A pre-hashed ``ADMIN_PASSWORD_HASH`` wins; otherwise the plaintext
    ``ADMIN_PASSWORD`` is hashed here and dropped from the config.
    """
    password = app.config.pop('ADMIN_PASSWORD', None)
    if not app.config.get('ADMIN_PASSWORD_HASH') and password:
        app.config['ADMIN_PASSWORD_HASH'] = generate_password_hash(password)
    if not app.config.get('ADMIN_USERNAME') or not app.config.get('ADMIN_PASSWORD_HASH'):
        app.logger.warning("Admin credentials not configured - admin login disabled")


def get_admin_credentials():
    """Load admin credentials from configuration safely"""
    username = current_app.config.get('ADMIN_USERNAME')
    password_hash = current_app.config.get('ADMIN_PASSWORD_HASH')
    if not username or not password_hash:
        return {'username': None, 'password_hash': None}
    return {
        'username': username,
        'password_hash': password_hash
    }


def verify_password(password, password_hash):
    """Verify password against hash"""
    if not password or not password_hash:
        return False
    return check_password_hash(password_hash, password)


def authenticate_admin(username, password):
    """Return an ``AdminUser`` for valid credentials, otherwise None"""
    credentials = get_admin_credentials()
    if not credentials['username'] or username != credentials['username']:
        return None
    if not verify_password(password, credentials['password_hash']):
        return None
    return AdminUser(username)


def load_admin(user_id):
    """Flask-Login user loader; only the configured admin resolves"""
    admin_username = current_app.config.get('ADMIN_USERNAME')
    if admin_username and user_id == admin_username:
        return AdminUser(user_id)
    return None


def get_client_ip():
    """Client address as seen by the WSGI server (rewritten by ProxyFix when enabled)"""
    return request.remote_addr or 'unknown'


def check_rate_limit(endpoint='contact'):
    """Check if IP is within rate limit"""
    max_requests = current_app.config.get('RATE_LIMIT_MAX_REQUESTS', 10)
    window = current_app.config.get('RATE_LIMIT_WINDOW', 60)
    client_ip = get_client_ip()
    current_time = time.time()

    if client_ip not in RATE_LIMIT_REQUESTS:
        RATE_LIMIT_REQUESTS[client_ip] = []

    # Clean old requests outside the window
    RATE_LIMIT_REQUESTS[client_ip] = [
        (ts, ep) for ts, ep in RATE_LIMIT_REQUESTS[client_ip]
        if current_time - ts < window
    ]

    endpoint_requests = [
        ep for ts, ep in RATE_LIMIT_REQUESTS[client_ip] if ep == endpoint
    ]
    if len(endpoint_requests) >= max_requests:
        return False

    RATE_LIMIT_REQUESTS[client_ip].append((current_time, endpoint))
    return True


def reset_rate_limits():
    RATE_LIMIT_REQUESTS.clear()


def log_audit_event(event_type, username=None, details=''):
    """Log high-level audit events for administrative review"""
    current_app.logger.info(f"Audit: {event_type} by {username or 'anonymous'} {details}".rstrip())

    audit_file = current_app.config.get('AUDIT_LOG_FILE')
    if not audit_file:
        return

    try:
        log_data = {
            'event': event_type,
            'username': username,
            'ip': get_client_ip(),
            'details': details,
            'timestamp': datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        }

        try:
            with open(audit_file, 'r', encoding='utf-8') as f:
                logs = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError):
            logs = []

        logs.append(log_data)
        logs = logs[-1000:]

        directory = os.path.dirname(audit_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(audit_file, 'w', encoding='utf-8') as f:
            json.dump(logs, f, ensure_ascii=False, indent=2)
    except OSError as e:
        current_app.logger.error(f"Error logging audit event: {str(e)}")


__all__ = [
    'AdminUser',
    'init_admin_credentials',
    'get_admin_credentials',
    'verify_password',
    'authenticate_admin',
    'load_admin',
    'get_client_ip',
    'check_rate_limit',
    'reset_rate_limits',
    'log_audit_event'
]
