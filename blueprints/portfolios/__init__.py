"""
Portfolios Blueprint - Project gallery resource endpoints
Handles: List, create, replace, status toggle and delete of portfolio projects
"""

from flask import Blueprint

# The path keeps its historical spelling so existing clients keep working.
portfolios_bp = Blueprint('portfolios', __name__, url_prefix='/api/portofolios')

from . import routes
