"""
Auth Routes - Admin session management for the content API
"""

from flask import jsonify, request, current_app
from flask_login import login_user, logout_user, current_user
from utils.errors import ValidationError, Unauthorized, RateLimited
from utils.security import authenticate_admin, check_rate_limit, get_client_ip, log_audit_event
from . import auth_bp


@auth_bp.route('/login', methods=['POST'])
def login():
    """Admin login"""
    if not check_rate_limit('login'):
        raise RateLimited()

    payload = request.get_json(silent=True) or {}
    username = payload.get('username')
    password = payload.get('password')
    if not username or not password:
        raise ValidationError('Username and password are required')

    admin = authenticate_admin(username, password)
    if admin is None:
        current_app.logger.warning(f"Failed admin login for {username} from {get_client_ip()}")
        log_audit_event('failed_login', username=username)
        raise Unauthorized('Invalid credentials')

    login_user(admin)
    log_audit_event('admin_login', username=username)
    return jsonify({'success': True, 'username': admin.username})


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Logout current admin"""
    if current_user.is_authenticated:
        log_audit_event('admin_logout', username=current_user.username)
    logout_user()
    return jsonify({'success': True})


@auth_bp.route('/me', methods=['GET'])
def me():
    """Current authentication state"""
    if current_user.is_authenticated:
        return jsonify({'authenticated': True, 'username': current_user.username})
    return jsonify({'authenticated': False, 'username': None})
