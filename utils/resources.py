"""
Resources Module - Shared steps of the content endpoints
Identifier parsing, payload validation, row lookup and commit handling.
"""

from flask import request, current_app
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from .errors import ValidationError, MalformedIdentifier, NotFound, UnexpectedError

# Integer primary keys are signed 64-bit on every supported backend.
MAX_ROW_ID = 2 ** 63 - 1


def parse_identifier(raw_id):
    """Parse a path identifier into an int, rejecting anything non-numeric"""
    try:
        return int(str(raw_id).strip())
    except (TypeError, ValueError):
        raise MalformedIdentifier()


def read_payload():
    """Request body as a dict; anything else is a validation error"""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError('Request body must be a JSON object')
    return payload


def require_fields(payload, fields, message='Missing required fields'):
    """Reject the payload when any required field is absent or blank"""
    for field in fields:
        value = payload.get(field)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(message)


def optional_text(value, message='Link fields must be strings'):
    """Nullable text field; empty strings are stored as null"""
    if value is None or value == '':
        return None
    if not isinstance(value, str):
        raise ValidationError(message)
    return value


def string_list(value):
    """Coerce a payload list field, treating null as empty"""
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError('List fields must be arrays of strings')
    return [str(item) for item in value]


def optional_int(value):
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise ValidationError('Order must be an integer')
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError('Order must be an integer')


def read_active_flag(payload):
    """Extract the ``isActive`` toggle; only a real boolean is accepted"""
    value = payload.get('isActive')
    if not isinstance(value, bool):
        raise ValidationError('isActive must be a boolean')
    ignored = sorted(k for k in payload if k != 'isActive')
    if ignored:
        current_app.logger.warning(f"Ignoring fields in status toggle: {ignored}")
    return value


def optional_active_flag(payload, default=False):
    """``isActive`` on create/replace: absent or null means ``default``"""
    value = payload.get('isActive')
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError('isActive must be a boolean')
    return value


def get_row(model, row_id, label, strict=True):
    """
    Load a row by primary key.

    With ``strict`` a missing row is a clean 404. Without it the miss is
    reported as a persistence failure (500), which is how the experience
    and portfolio endpoints have always answered.
    """
    row = None
    if -MAX_ROW_ID - 1 <= row_id <= MAX_ROW_ID:
        try:
            row = db.session.get(model, row_id)
        except SQLAlchemyError as e:
            current_app.logger.error(f"Error loading {label.lower()} {row_id}: {str(e)}")
            raise UnexpectedError(f'Failed to load {label.lower()}')
    if row is None:
        if strict:
            raise NotFound(f'{label} not found')
        current_app.logger.error(f"{label} {row_id} does not exist")
        raise UnexpectedError(f'Failed to modify {label.lower()}')
    return row


def strict_not_found():
    return bool(current_app.config.get('STRICT_NOT_FOUND', False))


def commit(action, label):
    """Commit the session, mapping persistence errors to a generic 500"""
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error trying to {action} {label.lower()}: {str(e)}")
        raise UnexpectedError(f'Failed to {action} {label.lower()}')


__all__ = [
    'parse_identifier',
    'read_payload',
    'require_fields',
    'optional_text',
    'string_list',
    'optional_int',
    'read_active_flag',
    'optional_active_flag',
    'get_row',
    'strict_not_found',
    'commit'
]
