"""
Portfolios Routes - Project gallery management
"""

from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from models import Portfolio
from utils.data import load_portfolios, portfolio_to_dict
from utils.decorators import admin_required, audited
from utils.errors import UnexpectedError
from utils.resources import (
    parse_identifier, read_payload, require_fields, optional_text, string_list,
    read_active_flag, optional_active_flag, get_row, strict_not_found, commit
)
from . import portfolios_bp

REQUIRED_FIELDS = ('title', 'description', 'category')

# Offered by the admin form; any other category is accepted as well.
SUGGESTED_CATEGORIES = [
    'Web Development',
    'Mobile Development',
    'Desktop Application',
    'Machine Learning',
    'Data Science',
    'DevOps',
    'UI/UX Design',
    'Game Development'
]


def apply_payload(portfolio, payload):
    technologies = string_list(payload.get('technologies'))
    image_urls = string_list(payload.get('imageUrls'))
    project_url = optional_text(payload.get('projectUrl'))
    github_url = optional_text(payload.get('githubUrl'))
    is_active = optional_active_flag(payload)

    portfolio.title = payload['title']
    portfolio.description = payload['description']
    portfolio.category = payload['category']
    portfolio.technologies = technologies
    portfolio.image_urls = image_urls
    portfolio.project_url = project_url
    portfolio.github_url = github_url
    portfolio.is_active = is_active


@portfolios_bp.route('', methods=['GET'])
def list_portfolios():
    """List all portfolio projects, most recently updated first"""
    try:
        return jsonify(load_portfolios())
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error fetching portfolios: {str(e)}")
        raise UnexpectedError('Failed to fetch portfolios')


@portfolios_bp.route('/categories', methods=['GET'])
def list_categories():
    """Suggested categories for the admin form"""
    return jsonify(SUGGESTED_CATEGORIES)


@portfolios_bp.route('', methods=['POST'])
@admin_required
@audited('portfolio_created')
def create_portfolio():
    """Create a portfolio project"""
    payload = read_payload()
    require_fields(payload, REQUIRED_FIELDS)

    portfolio = Portfolio()
    apply_payload(portfolio, payload)
    db.session.add(portfolio)
    commit('create', 'Portfolio')

    current_app.logger.info(f"Created portfolio {portfolio.id}")
    return jsonify(portfolio_to_dict(portfolio)), 201


@portfolios_bp.route('/<portfolio_id>', methods=['PUT'])
@admin_required
@audited('portfolio_updated')
def update_portfolio(portfolio_id):
    """Replace a portfolio project"""
    parsed_id = parse_identifier(portfolio_id)
    payload = read_payload()
    require_fields(payload, REQUIRED_FIELDS)

    portfolio = get_row(Portfolio, parsed_id, 'Portfolio', strict=strict_not_found())
    apply_payload(portfolio, payload)
    commit('update', 'Portfolio')

    current_app.logger.info(f"Updated portfolio {parsed_id}")
    return jsonify(portfolio_to_dict(portfolio))


@portfolios_bp.route('/<portfolio_id>', methods=['PATCH'])
@admin_required
@audited('portfolio_toggled')
def toggle_portfolio(portfolio_id):
    """Set the activation flag of a portfolio project"""
    parsed_id = parse_identifier(portfolio_id)
    is_active = read_active_flag(read_payload())

    portfolio = get_row(Portfolio, parsed_id, 'Portfolio', strict=strict_not_found())
    portfolio.is_active = is_active
    commit('update', 'Portfolio')

    current_app.logger.info(f"Portfolio {parsed_id} is_active={is_active}")
    return jsonify(portfolio_to_dict(portfolio))


@portfolios_bp.route('/<portfolio_id>', methods=['DELETE'])
@admin_required
@audited('portfolio_deleted')
def delete_portfolio(portfolio_id):
    """Delete a portfolio project"""
    parsed_id = parse_identifier(portfolio_id)
    portfolio = get_row(Portfolio, parsed_id, 'Portfolio', strict=strict_not_found())

    db.session.delete(portfolio)
    commit('delete', 'Portfolio')

    current_app.logger.info(f"Deleted portfolio {parsed_id}")
    return jsonify({'success': True, 'message': 'Portfolio deleted successfully'}), 200
