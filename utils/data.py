"""
Data Management Module - Model serialization and portfolio owner lookup
"""

from flask import request
from flask_login import current_user
from extensions import db
from models import User
from .errors import NotFound


def format_datetime(value):
    return value.isoformat() if value else None


def user_to_dict(user):
    """Public user fields; the password hash is never included"""
    if not user:
        return None
    return {
        'id': user.id,
        'email': user.email,
        'name': user.name,
        'title': user.title or '',
        'summary': user.summary or '',
        'location': user.location or '',
        'phone': user.phone or '',
        'linkedin': user.linkedin or '',
        'imageUrl': user.image_url or '',
        'cvUrl': user.cv_url or '',
        'createdAt': format_datetime(user.created_at)
    }


def record_to_dict(record, fields):
    """Convert a portfolio record to a dictionary"""
    result = {
        'id': record.id,
        'userId': record.user_id
    }
    for field in fields:
        result[field.key] = getattr(record, field.column)
    result['createdAt'] = format_datetime(record.created_at)
    return result


def message_to_dict(message):
    """Convert contact message model to dictionary"""
    return {
        'id': message.id,
        'userId': message.user_id,
        'senderName': message.sender_name,
        'senderEmail': message.sender_email,
        'message': message.message,
        'isRead': bool(message.is_read),
        'createdAt': format_datetime(message.created_at)
    }


def get_user(user_id):
    if not user_id:
        return None
    return db.session.get(User, user_id)


def get_default_owner():
    """Earliest-registered user; the site owner when no owner is named"""
    return User.query.order_by(User.created_at.asc(), User.id.asc()).first()


def resolve_portfolio_owner():
    """
    Work out whose portfolio a public GET is asking for.

    Order: explicit ?userId=, then the signed-in user, then the default owner.
    Returns None when no user exists at all.

    Raises:
        NotFound: an explicit userId does not match any user
    """
    user_id = request.args.get('userId', '').strip()
    if user_id:
        user = get_user(user_id)
        if not user:
            raise NotFound('Portfolio not found')
        return user
    if current_user.is_authenticated:
        return current_user._get_current_object()
    return get_default_owner()


__all__ = [
    'format_datetime',
    'user_to_dict',
    'record_to_dict',
    'message_to_dict',
    'get_user',
    'get_default_owner',
    'resolve_portfolio_owner'
]
