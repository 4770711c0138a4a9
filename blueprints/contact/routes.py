"""
Contact Routes - Public contact form and the owner's message inbox
"""

from flask import jsonify, current_app
from utils.contact import ContactService
from utils.data import message_to_dict
from utils.decorators import login_required, current_user_id
from utils.errors import TooManyRequests
from utils.helpers import get_payload
from utils.security import check_rate_limit
from . import contact_bp


def get_contact_service():
    return ContactService(max_length=current_app.config['MESSAGE_MAX_LENGTH'])


@contact_bp.route('/contact', methods=['POST'])
def contact():
    """Portfolio contact form processing - no session required"""
    payload = get_payload()

    # Honeypot spam protection
    if payload.get('website'):
        current_app.logger.info("Contact honeypot triggered; message discarded")
        return jsonify({'success': True})

    if not check_rate_limit('contact'):
        raise TooManyRequests()

    get_contact_service().send(
        payload.get('recipientUserId'),
        payload.get('name'),
        payload.get('email'),
        payload.get('message'))
    return jsonify({'success': True})


@contact_bp.route('/messages', methods=['GET'])
@login_required
def list_messages():
    messages = get_contact_service().inbox(current_user_id())
    return jsonify([message_to_dict(m) for m in messages])


@contact_bp.route('/messages/<message_id>', methods=['GET'])
@login_required
def view_message(message_id):
    message = get_contact_service().get(current_user_id(), message_id)
    return jsonify(message_to_dict(message))


@contact_bp.route('/messages/<message_id>', methods=['PATCH'])
@login_required
def update_message(message_id):
    """Mark a message read (default) or unread"""
    payload = get_payload()
    message = get_contact_service().set_read(current_user_id(), message_id, payload.get('isRead', True))
    return jsonify(message_to_dict(message))


@contact_bp.route('/messages/<message_id>', methods=['DELETE'])
@login_required
def delete_message(message_id):
    get_contact_service().delete(current_user_id(), message_id)
    return jsonify({'success': True})
