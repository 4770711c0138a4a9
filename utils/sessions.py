"""
Sessions Module - Server-side session store
Maps opaque cookie tokens to user ids. Tokens live for a fixed TTL from
creation and are not refreshed on activity.
"""

import hashlib
import secrets
from datetime import timedelta
from flask import current_app
from extensions import db
from models import AuthSession, User, utcnow


def hash_token(token):
    """SHA-256 hex digest used as the storage key for a session token"""
    return hashlib.sha256(token.encode('utf-8')).hexdigest()


class SessionStore:
    """Persistent session store backed by the auth_sessions table.

    Args:
        ttl (timedelta): lifetime of a session, counted from creation
        clock (callable): returns the current naive UTC datetime
    """

    def __init__(self, ttl=timedelta(days=30), clock=utcnow):
        self.ttl = ttl
        self.clock = clock

    def create(self, user_id):
        """Create a session for user_id and return the raw token"""
        token = secrets.token_urlsafe(32)
        now = self.clock()
        db.session.add(AuthSession(
            token_hash=hash_token(token),
            user_id=user_id,
            created_at=now,
            expires_at=now + self.ttl
        ))
        db.session.commit()
        return token

    def resolve(self, token):
        """Return the user id for token, or None when missing or expired"""
        if not token:
            return None
        record = db.session.get(AuthSession, hash_token(token))
        if record is None:
            return None
        if record.expires_at <= self.clock():
            db.session.delete(record)
            db.session.commit()
            return None
        return record.user_id

    def destroy(self, token):
        """Delete the session for token; unknown tokens are ignored"""
        if not token:
            return
        AuthSession.query.filter_by(token_hash=hash_token(token)).delete()
        db.session.commit()

    def purge_expired(self):
        """Delete every expired session and return how many were removed"""
        removed = AuthSession.query.filter(AuthSession.expires_at <= self.clock()).delete()
        db.session.commit()
        return removed


def get_session_store():
    """Session store bound to the current app"""
    return current_app.extensions['session_store']


def get_auth_token(request):
    return request.cookies.get(current_app.config['AUTH_COOKIE_NAME'])


def load_user_from_request(request):
    """Flask-Login request loader: resolve the auth cookie to a User"""
    user_id = get_session_store().resolve(get_auth_token(request))
    if user_id is None:
        return None
    return db.session.get(User, user_id)


def set_auth_cookie(response, token):
    config = current_app.config
    response.set_cookie(
        config['AUTH_COOKIE_NAME'],
        token,
        max_age=int(config['SESSION_TTL'].total_seconds()),
        httponly=True,
        secure=config['AUTH_COOKIE_SECURE'],
        samesite=config['AUTH_COOKIE_SAMESITE']
    )
    return response


def clear_auth_cookie(response):
    config = current_app.config
    response.delete_cookie(
        config['AUTH_COOKIE_NAME'],
        httponly=True,
        secure=config['AUTH_COOKIE_SECURE'],
        samesite=config['AUTH_COOKIE_SAMESITE']
    )
    return response


__all__ = [
    'SessionStore',
    'hash_token',
    'get_session_store',
    'get_auth_token',
    'load_user_from_request',
    'set_auth_cookie',
    'clear_auth_cookie'
]
