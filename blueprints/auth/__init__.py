"""
Auth Blueprint - Authentication and authorization
Handles: Admin login, logout and session state
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')

from . import routes
