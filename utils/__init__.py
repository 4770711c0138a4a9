"""
Utils Package - Centralized utility modules initialization
"""

from .errors import (
    ApiError,
    ValidationError,
    DuplicateEmail,
    InvalidCredentials,
    UnsupportedMediaType,
    Unauthorized,
    Forbidden,
    NotFound,
    PayloadTooLarge,
    TooManyRequests,
    InternalError
)
from .decorators import login_required, current_user_id
from .sessions import SessionStore, get_session_store, load_user_from_request
from .security import hash_password, verify_password, get_client_ip, RateLimiter, check_rate_limit
from .accounts import AuthService
from .records import OwnedRecordService, RECORD_SERVICES
from .uploads import UploadService
from .contact import ContactService

__all__ = [
    # Errors
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
    'InternalError',

    # Decorators
    'login_required',
    'current_user_id',

    # Sessions
    'SessionStore',
    'get_session_store',
    'load_user_from_request',

    # Security
    'hash_password',
    'verify_password',
    'get_client_ip',
    'RateLimiter',
    'check_rate_limit',

    # Services
    'AuthService',
    'OwnedRecordService',
    'RECORD_SERVICES',
    'UploadService',
    'ContactService'
]
