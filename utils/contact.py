"""
Contact Module - Public contact form intake and the owner's inbox
"""

from flask import current_app
from extensions import db
from models import ContactMessage, User
from .errors import ValidationError, Unauthorized, Forbidden, NotFound
from .helpers import clean_str, is_valid_email
from .notifications import notify_new_message_async


class ContactService:
    def __init__(self, max_length=5000):
        self.max_length = max_length

    def send(self, recipient_user_id, sender_name, sender_email, message):
        """
        Store a message from a public visitor to a portfolio owner.

        All four fields must be non-empty and the sender email must be
        syntactically valid. No authentication is required.

        Raises:
            ValidationError: a field is missing, empty or malformed
            NotFound: the recipient does not exist
        """
        recipient_user_id = clean_str(recipient_user_id)
        sender_name = clean_str(sender_name)
        sender_email = clean_str(sender_email)
        message = clean_str(message)
        if not all([recipient_user_id, sender_name, sender_email, message]):
            raise ValidationError('Required fields missing')
        if not is_valid_email(sender_email):
            raise ValidationError('Invalid email address')

        recipient = db.session.get(User, recipient_user_id)
        if recipient is None:
            current_app.logger.error(f"Contact message for unknown user: {recipient_user_id}")
            raise NotFound('Recipient not found')

        new_message = ContactMessage(
            user_id=recipient.id,
            sender_name=sender_name[:255],
            sender_email=sender_email[:255],
            message=message[:self.max_length],
            is_read=False
        )
        db.session.add(new_message)
        db.session.commit()
        current_app.logger.info(f"Contact message saved for user {recipient.id}, message_id: {new_message.id}")

        notify_new_message_async(recipient.email, sender_name, sender_email, new_message.message)
        return new_message

    def inbox(self, session_user_id):
        """Messages addressed to the session user, newest first"""
        if not session_user_id:
            raise Unauthorized()
        return (ContactMessage.query
                .filter_by(user_id=session_user_id)
                .order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc())
                .all())

    def get(self, session_user_id, message_id):
        if not session_user_id:
            raise Unauthorized()
        message = db.session.get(ContactMessage, message_id)
        if message is None:
            raise NotFound('Message not found')
        if message.user_id != session_user_id:
            current_app.logger.warning(f"User {session_user_id} attempted to access message {message_id}")
            raise Forbidden()
        return message

    def set_read(self, session_user_id, message_id, is_read=True):
        if not isinstance(is_read, bool):
            raise ValidationError('isRead must be true or false')
        message = self.get(session_user_id, message_id)
        message.is_read = is_read
        db.session.commit()
        return message

    def delete(self, session_user_id, message_id):
        message = self.get(session_user_id, message_id)
        db.session.delete(message)
        db.session.commit()
        current_app.logger.info(f"Deleted message {message_id} for user {session_user_id}")


__all__ = ['ContactService']
