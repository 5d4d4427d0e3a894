"""
Decorators Module - Authentication and audit decorators for API handlers
"""

from functools import wraps
from flask import current_app, request
from flask_login import current_user
from .errors import Unauthorized
from .security import log_audit_event


def admin_required(f):
    """Decorator to require an authenticated admin before any persistence work"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if current_app.config.get('ADMIN_AUTH_REQUIRED', True) and not current_user.is_authenticated:
            current_app.logger.warning(f"Rejected unauthenticated {request.method} {request.path}")
            raise Unauthorized()
        return f(*args, **kwargs)
    return decorated_function


def audited(event_type):
    """Decorator recording a successful admin mutation in the audit log"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            response = f(*args, **kwargs)
            username = current_user.username if current_user.is_authenticated else None
            details = ', '.join(f"{k}={v}" for k, v in kwargs.items())
            log_audit_event(event_type, username=username, details=details)
            return response
        return decorated_function
    return decorator
