"""
Pages Blueprint - Public pages
Handles: Home, project gallery, contact form, sitemap
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
