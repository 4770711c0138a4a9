"""
Auth Routes - Signup, login, logout and current user
"""

from flask import jsonify, request, current_app
from utils.accounts import AuthService
from utils.data import user_to_dict
from utils.helpers import get_payload
from utils.sessions import get_session_store, get_auth_token, set_auth_cookie, clear_auth_cookie
from . import auth_bp


def get_auth_service():
    return AuthService(get_session_store())


@auth_bp.route('/signup', methods=['POST'])
def signup():
    """Create an account and sign the new user in"""
    user, token = get_auth_service().signup(get_payload())
    response = jsonify(user_to_dict(user))
    response.status_code = 201
    return set_auth_cookie(response, token)


@auth_bp.route('/login', methods=['POST'])
def login():
    payload = get_payload()
    user, token = get_auth_service().login(payload.get('email'), payload.get('password'))
    return set_auth_cookie(jsonify(user_to_dict(user)), token)


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Logout current session; succeeds even without one"""
    token = get_auth_token(request)
    if token:
        get_auth_service().logout(token)
        current_app.logger.info("Session logged out")
    return clear_auth_cookie(jsonify({'success': True}))


@auth_bp.route('/me')
def me():
    """Current user, or null for anonymous visitors"""
    user = get_auth_service().me(get_auth_token(request))
    return jsonify(user_to_dict(user))
