"""
Skills Blueprint - Skill card resource endpoints
Handles: List, read, create, update and delete of skill cards
"""

from flask import Blueprint

skills_bp = Blueprint('skills', __name__, url_prefix='/api/skills')

from . import routes
