"""
Experiences Blueprint - Experience timeline resource endpoints
Handles: List, create, replace, status toggle and delete of experiences
"""

from flask import Blueprint

experiences_bp = Blueprint('experiences', __name__, url_prefix='/api/experiences')

from . import routes
