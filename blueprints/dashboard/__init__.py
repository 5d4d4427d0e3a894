"""
Dashboard Blueprint - Admin dashboard data
Handles: Content statistics
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/api')

from . import routes
