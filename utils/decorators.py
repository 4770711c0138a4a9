"""
Decorators Module - Authentication decorators
"""

from functools import wraps
from flask import current_app, request
from flask_login import current_user
from .errors import Unauthorized


def login_required(f):
    """Decorator to require a valid session; responds 401 otherwise"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            current_app.logger.info(f"Unauthenticated request to {request.endpoint}")
            raise Unauthorized()
        return f(*args, **kwargs)
    return decorated_function


def current_user_id():
    """Id of the session user, or None for anonymous requests"""
    if current_user.is_authenticated:
        return current_user.id
    return None


__all__ = ['login_required', 'current_user_id']
