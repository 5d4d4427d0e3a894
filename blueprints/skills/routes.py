"""
Skills Routes - Skill card management
Skills are always publicly visible; they carry no activation flag.
"""

from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from models import Skill
from utils.data import load_skills, skill_to_dict
from utils.decorators import admin_required, audited
from utils.errors import ValidationError, UnexpectedError
from utils.resources import parse_identifier, read_payload, require_fields, optional_text, get_row, commit
from . import skills_bp

REQUIRED_FIELDS = ('title', 'skills')
REQUIRED_MESSAGE = 'Title and skills are required'


@skills_bp.route('', methods=['GET'])
def list_skills():
    """List all skill cards"""
    try:
        return jsonify(load_skills())
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error fetching skills: {str(e)}")
        raise UnexpectedError('Failed to fetch skills')


@skills_bp.route('/<skill_id>', methods=['GET'])
def get_skill(skill_id):
    """Read a single skill card"""
    parsed_id = parse_identifier(skill_id)
    skill = get_row(Skill, parsed_id, 'Skill')
    return jsonify(skill_to_dict(skill))


@skills_bp.route('', methods=['POST'])
@admin_required
@audited('skill_created')
def create_skill():
    """Create a skill card"""
    payload = read_payload()
    require_fields(payload, REQUIRED_FIELDS, REQUIRED_MESSAGE)

    skill = Skill(
        title=payload['title'],
        skills=payload['skills'],
        link=optional_text(payload.get('link'))
    )
    db.session.add(skill)
    commit('create', 'Skill')

    current_app.logger.info(f"Created skill {skill.id}")
    return jsonify(skill_to_dict(skill)), 201


@skills_bp.route('/<skill_id>', methods=['PUT'])
@admin_required
@audited('skill_updated')
def update_skill(skill_id):
    """Replace a skill card"""
    parsed_id = parse_identifier(skill_id)
    payload = read_payload()
    require_fields(payload, REQUIRED_FIELDS, REQUIRED_MESSAGE)
    link = optional_text(payload.get('link'))

    skill = get_row(Skill, parsed_id, 'Skill')
    skill.title = payload['title']
    skill.skills = payload['skills']
    skill.link = link
    commit('update', 'Skill')

    current_app.logger.info(f"Updated skill {skill.id}")
    return jsonify(skill_to_dict(skill))


@skills_bp.route('/<skill_id>', methods=['PATCH'])
@admin_required
def patch_skill(skill_id):
    """Skills have no activation state, so status toggles are refused"""
    parse_identifier(skill_id)
    current_app.logger.warning(f"Rejected status toggle on skill {skill_id}")
    raise ValidationError('Skills have no activation state')


@skills_bp.route('/<skill_id>', methods=['DELETE'])
@admin_required
@audited('skill_deleted')
def delete_skill(skill_id):
    """Delete a skill card"""
    parsed_id = parse_identifier(skill_id)
    skill = get_row(Skill, parsed_id, 'Skill')

    db.session.delete(skill)
    commit('delete', 'Skill')

    current_app.logger.info(f"Deleted skill {parsed_id}")
    return jsonify({'success': True, 'message': 'Skill deleted successfully'}), 200
