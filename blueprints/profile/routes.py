"""
Profile Routes - Public profile view and owner edits
"""

from flask import jsonify
from utils.accounts import AuthService
from utils.data import user_to_dict, resolve_portfolio_owner
from utils.decorators import login_required, current_user_id
from utils.helpers import get_payload
from utils.sessions import get_session_store
from . import profile_bp


@profile_bp.route('', methods=['GET'])
def get_profile():
    """Public profile of ?userId=, the session user, or the site owner"""
    owner = resolve_portfolio_owner()
    if owner is None:
        return jsonify({})
    return jsonify(user_to_dict(owner))


@profile_bp.route('', methods=['PATCH'])
@login_required
def update_profile():
    user = AuthService(get_session_store()).update_profile(current_user_id(), get_payload())
    return jsonify(user_to_dict(user))
