"""
Accounts Module - Signup, login, logout and profile management
"""

from flask import current_app
from sqlalchemy.exc import IntegrityError
from extensions import db
from models import User
from .errors import ValidationError, DuplicateEmail, InvalidCredentials, Unauthorized, NotFound
from .helpers import clean_str, normalize_email, is_valid_email
from .records import Field
from .security import hash_password, verify_password

MIN_PASSWORD_LENGTH = 6

# Profile fields a user may set at signup or edit later, bounded by their columns
PROFILE_FIELDS = [
    Field('name', required=True),
    Field('title'),
    Field('summary', max_length=None),
    Field('location'),
    Field('phone', max_length=50),
    Field('linkedin', max_length=500),
]


def clean_profile_fields(payload):
    """Pick, trim and length-check known profile fields from payload"""
    values = {}
    for field in PROFILE_FIELDS:
        if field.key in payload:
            values[field.column] = field.clean(payload[field.key])
    return values


class AuthService:
    """Account operations; sessions are delegated to the injected store"""

    def __init__(self, session_store):
        self.sessions = session_store

    def signup(self, payload):
        """
        Register a new user and open a session for them.

        Emails are unique case-insensitively and stored lower-cased.

        Returns:
            tuple: (User, session token)
        """
        email = normalize_email(clean_str(payload.get('email')))
        password = payload.get('password')
        if not email or not is_valid_email(email):
            raise ValidationError('Invalid email')
        if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters')
        if 'name' not in payload:
            raise ValidationError('Name is required')
        profile = clean_profile_fields(payload)

        if User.query.filter_by(email=email).first():
            raise DuplicateEmail()

        user = User(email=email, password_hash=hash_password(password), **profile)
        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError:
            # Lost a race with a concurrent signup for the same email
            db.session.rollback()
            raise DuplicateEmail()

        token = self.sessions.create(user.id)
        current_app.logger.info(f"New user signed up: {user.id}")
        return user, token

    def login(self, email, password):
        """
        Check credentials and open a session.

        Unknown email and wrong password both raise InvalidCredentials.
        """
        user = User.query.filter_by(email=normalize_email(email if isinstance(email, str) else '')).first()
        password = password if isinstance(password, str) else ''
        # Always hash, so unknown emails cost the same as wrong passwords
        if not verify_password(password, user.password_hash if user else None):
            current_app.logger.warning("Failed login attempt")
            raise InvalidCredentials()

        token = self.sessions.create(user.id)
        current_app.logger.info(f"User logged in: {user.id}")
        return user, token

    def logout(self, token):
        """Destroy the session for token; safe to call when already logged out"""
        self.sessions.destroy(token)

    def me(self, token):
        """User for token, or None for anonymous visitors"""
        user_id = self.sessions.resolve(token)
        if user_id is None:
            return None
        return db.session.get(User, user_id)

    def get_profile(self, user_id):
        user = db.session.get(User, user_id) if user_id else None
        if user is None:
            raise NotFound('Profile not found')
        return user

    def update_profile(self, session_user_id, payload):
        """Update public profile fields; email, password and file urls are not editable here"""
        if not session_user_id:
            raise Unauthorized()
        if not isinstance(payload, dict):
            raise ValidationError('Request body must be a JSON object')
        values = clean_profile_fields(payload)
        if not values:
            raise ValidationError('No updatable fields provided')
        user = self.get_profile(session_user_id)
        for column, value in values.items():
            setattr(user, column, value)
        db.session.commit()
        current_app.logger.info(f"Profile updated for user {user.id}")
        return user


__all__ = ['AuthService', 'PROFILE_FIELDS', 'MIN_PASSWORD_LENGTH']
