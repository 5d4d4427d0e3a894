"""
Errors Module - API error taxonomy

Every error carries the HTTP status it maps to and a generic,
client-safe message. Detail belongs in the log, not in the response.
"""


class ApiError(Exception):
    """Base class for errors rendered as ``{"error": message}``"""
    status_code = 500
    default_message = 'Unexpected error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'error': self.message}


class ValidationError(ApiError):
    """Missing or malformed payload field (client-correctable)"""
    status_code = 400
    default_message = 'Missing required fields'


class MalformedIdentifier(ApiError):
    status_code = 400
    default_message = 'Invalid ID format'


class NotFound(ApiError):
    status_code = 404
    default_message = 'Not found'


class Unauthorized(ApiError):
    status_code = 401
    default_message = 'Authentication required'


class RateLimited(ApiError):
    status_code = 429
    default_message = 'Too many requests, please try again later'


class ServiceUnavailable(ApiError):
    status_code = 503
    default_message = 'Service unavailable'


class UnexpectedError(ApiError):
    """Persistence-layer failure, including missing rows on legacy paths"""
    status_code = 500


__all__ = [
    'ApiError',
    'ValidationError',
    'MalformedIdentifier',
    'NotFound',
    'Unauthorized',
    'RateLimited',
    'ServiceUnavailable',
    'UnexpectedError'
]
