"""
Errors Module - API error taxonomy
Every error carries a human-readable message and the HTTP status it maps to.
"""


class ApiError(Exception):
    """Base class for errors returned to the client as JSON"""
    status_code = 500
    default_message = 'Something went wrong'

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {'message': self.message, 'error': type(self).__name__}


class ValidationError(ApiError):
    status_code = 400
    default_message = 'Invalid input'


class DuplicateEmail(ApiError):
    status_code = 400
    default_message = 'An account with this email already exists'


class InvalidCredentials(ApiError):
    status_code = 400
    default_message = 'Invalid email or password'


class UnsupportedMediaType(ApiError):
    status_code = 400
    default_message = 'File type is not allowed'


class Unauthorized(ApiError):
    status_code = 401
    default_message = 'Authentication required'


class Forbidden(ApiError):
    status_code = 403
    default_message = 'You do not have permission to modify this item'


class NotFound(ApiError):
    status_code = 404
    default_message = 'Not found'


class PayloadTooLarge(ApiError):
    status_code = 413
    default_message = 'File is too large. Maximum size is 10MB.'


class TooManyRequests(ApiError):
    status_code = 429
    default_message = 'Too many requests. Please try again later.'


class InternalError(ApiError):
    status_code = 500
    default_message = 'Internal server error'


__all__ = [
    'ApiError',
    'ValidationError',
    'DuplicateEmail',
    'InvalidCredentials',
    'UnsupportedMediaType',
    'Unauthorized',
    'Forbidden',
    'NotFound',
    'PayloadTooLarge',
    'TooManyRequests',
    'InternalError'
]
