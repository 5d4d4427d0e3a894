"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import admin_required, audited
from .data import (
    load_skills,
    load_experiences,
    load_portfolios,
    skill_to_dict,
    experience_to_dict,
    portfolio_to_dict,
    get_content_counts
)
from .errors import (
    ApiError,
    ValidationError,
    MalformedIdentifier,
    NotFound,
    UnexpectedError
)
from .listing import (
    split_list,
    join_list,
    filter_rows,
    active_only,
    category_buckets,
    select_bucket,
    timeline
)
from .notifications import send_email, send_contact_message
from .security import (
    get_client_ip,
    check_rate_limit,
    log_audit_event,
    get_admin_credentials,
    verify_password
)

__all__ = [
    # Decorators
    'admin_required',
    'audited',

    # Data
    'load_skills',
    'load_experiences',
    'load_portfolios',
    'skill_to_dict',
    'experience_to_dict',
    'portfolio_to_dict',
    'get_content_counts',

    # Errors
    'ApiError',
    'ValidationError',
    'MalformedIdentifier',
    'NotFound',
    'UnexpectedError',

    # Listing
    'split_list',
    'join_list',
    'filter_rows',
    'active_only',
    'category_buckets',
    'select_bucket',
    'timeline',

    # Notifications
    'send_email',
    'send_contact_message',

    # Security
    'get_client_ip',
    'check_rate_limit',
    'log_audit_event',
    'get_admin_credentials',
    'verify_password'
]
