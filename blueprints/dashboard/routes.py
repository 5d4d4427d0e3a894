"""
Dashboard Routes - Admin dashboard statistics
"""

from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from utils.data import get_content_counts
from utils.decorators import admin_required
from utils.errors import UnexpectedError
from . import dashboard_bp


@dashboard_bp.route('/stats', methods=['GET'])
@admin_required
def stats():
    """Content counts for the dashboard cards"""
    count_projects = current_app.config.get('STATS_COUNT_PROJECTS', False)
    try:
        counts = get_content_counts(count_projects=count_projects)
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error loading stats: {str(e)}")
        raise UnexpectedError('Failed to load stats')

    if not count_projects:
        # TODO: confirm with the site owner whether the dashboard should count
        # portfolio projects, then flip STATS_COUNT_PROJECTS on by default.
        counts['pending'] = ['projects']

    return jsonify(counts)
