"""
Experiences Routes - Experience timeline management
"""

from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from models import Experience
from utils.data import load_experiences, experience_to_dict
from utils.decorators import admin_required, audited
from utils.errors import UnexpectedError
from utils.resources import (
    parse_identifier, read_payload, require_fields, string_list, optional_int,
    read_active_flag, optional_active_flag, get_row, strict_not_found, commit
)
from . import experiences_bp

REQUIRED_FIELDS = ('title', 'company', 'startDate', 'description')


def apply_payload(experience, payload):
    """Full replace: every writable field is taken from the payload or reset"""
    tools = string_list(payload.get('tools'))
    order = optional_int(payload.get('order'))
    is_active = optional_active_flag(payload)

    experience.title = payload['title']
    experience.company = payload['company']
    experience.start_date = payload['startDate']
    experience.description = payload['description']
    experience.tools = tools
    experience.is_active = is_active
    experience.order = order


@experiences_bp.route('', methods=['GET'])
def list_experiences():
    """List all experiences by manual order"""
    try:
        return jsonify(load_experiences())
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error fetching experiences: {str(e)}")
        raise UnexpectedError('Failed to fetch experiences')


@experiences_bp.route('', methods=['POST'])
@admin_required
@audited('experience_created')
def create_experience():
    """Create an experience"""
    payload = read_payload()
    require_fields(payload, REQUIRED_FIELDS)

    experience = Experience()
    apply_payload(experience, payload)
    db.session.add(experience)
    commit('create', 'Experience')

    current_app.logger.info(f"Created experience {experience.id}")
    return jsonify(experience_to_dict(experience)), 201


@experiences_bp.route('/<experience_id>', methods=['PUT'])
@admin_required
@audited('experience_updated')
def update_experience(experience_id):
    """Replace an experience"""
    parsed_id = parse_identifier(experience_id)
    payload = read_payload()
    require_fields(payload, REQUIRED_FIELDS)

    experience = get_row(Experience, parsed_id, 'Experience', strict=strict_not_found())
    apply_payload(experience, payload)
    commit('update', 'Experience')

    current_app.logger.info(f"Updated experience {parsed_id}")
    return jsonify(experience_to_dict(experience))


@experiences_bp.route('/<experience_id>', methods=['PATCH'])
@admin_required
@audited('experience_toggled')
def toggle_experience(experience_id):
    """Set the activation flag of an experience"""
    parsed_id = parse_identifier(experience_id)
    is_active = read_active_flag(read_payload())

    experience = get_row(Experience, parsed_id, 'Experience', strict=strict_not_found())
    experience.is_active = is_active
    commit('update', 'Experience')

    current_app.logger.info(f"Experience {parsed_id} is_active={is_active}")
    return jsonify(experience_to_dict(experience))


@experiences_bp.route('/<experience_id>', methods=['DELETE'])
@admin_required
@audited('experience_deleted')
def delete_experience(experience_id):
    """Delete an experience"""
    parsed_id = parse_identifier(experience_id)
    experience = get_row(Experience, parsed_id, 'Experience', strict=strict_not_found())

    db.session.delete(experience)
    commit('delete', 'Experience')

    current_app.logger.info(f"Deleted experience {parsed_id}")
    return jsonify({'success': True, 'message': 'Experience deleted successfully'}), 200
