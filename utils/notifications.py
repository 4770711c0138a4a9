"""
Notifications Module - Email and Telegram alerts for new contact messages
Both channels are optional; failures are logged and never reach the visitor.
"""

import smtplib
import threading
import requests
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from flask import current_app


def get_telegram_credentials():
    """Return (bot_token, chat_id) or (None, None) if not configured"""
    bot_token = current_app.config.get('TELEGRAM_BOT_TOKEN')
    chat_id = current_app.config.get('TELEGRAM_CHAT_ID')
    if bot_token and chat_id:
        return bot_token, chat_id
    return None, None


def load_smtp_config():
    """SMTP settings from app config; empty dict when incomplete"""
    config = current_app.config
    smtp_cfg = {
        'host': config.get('SMTP_HOST'),
        'port': config.get('SMTP_PORT', '587'),
        'email': config.get('SMTP_EMAIL'),
        'password': config.get('SMTP_PASSWORD')
    }
    if not all([smtp_cfg['host'], smtp_cfg['email'], smtp_cfg['password']]):
        return {}
    return smtp_cfg


def send_telegram_notification(message_text):
    """
    Send a Telegram message with the configured bot.

    Returns:
        bool: True if sent successfully, False otherwise
    """
    bot_token, chat_id = get_telegram_credentials()
    if not (bot_token and chat_id):
        current_app.logger.debug("Telegram credentials not configured")
        return False

    try:
        url = f"https://api.telegram.org/bot{bot_token}/sendMessage"
        payload = {
            'chat_id': chat_id,
            'text': message_text,
            'parse_mode': 'HTML'
        }
        response = requests.post(url, json=payload, timeout=10)
        if response.status_code == 200:
            current_app.logger.info("Telegram notification sent")
            return True
        current_app.logger.error(f"Telegram API error: {response.status_code}")
        return False
    except requests.RequestException as e:
        current_app.logger.error(f"Telegram notification error: {str(e)}")
        return False


def send_email(recipient, subject, body):
    """
    Send a plain-text email using the configured SMTP account.

    Returns:
        bool: Success status
    """
    smtp_cfg = load_smtp_config()
    if not smtp_cfg:
        current_app.logger.debug("SMTP config incomplete")
        return False

    msg = MIMEMultipart('alternative')
    msg['Subject'] = subject
    msg['From'] = smtp_cfg['email']
    msg['To'] = recipient
    msg.attach(MIMEText(body, 'plain'))

    try:
        with smtplib.SMTP(smtp_cfg['host'], int(smtp_cfg['port']), timeout=10) as server:
            server.starttls()
            server.login(smtp_cfg['email'], smtp_cfg['password'])
            server.send_message(msg)
        current_app.logger.info(f"Email sent to {recipient}")
        return True
    except (smtplib.SMTPException, OSError) as e:
        current_app.logger.error(f"Error sending email to {recipient}: {str(e)}")
        return False


def notify_new_message(recipient_email, sender_name, sender_email, message_text):
    """Alert the portfolio owner about a new contact message"""
    preview = message_text[:200] + ('...' if len(message_text) > 200 else '')
    send_telegram_notification(
        f"📧 <b>New Portfolio Message</b>\n\n"
        f"👤 <b>From:</b> {sender_name}\n"
        f"📧 <b>Email:</b> {sender_email}\n"
        f"💬 <b>Message:</b>\n{preview}")
    send_email(
        recipient_email,
        f"[Portfolio] New message from {sender_name}",
        f"From: {sender_name} <{sender_email}>\n\n{message_text}")


def notify_new_message_async(recipient_email, sender_name, sender_email, message_text):
    """Run notify_new_message in a daemon thread unless NOTIFY_ASYNC is off"""
    if not (get_telegram_credentials()[0] or load_smtp_config()):
        return None
    if not current_app.config.get('NOTIFY_ASYNC', True):
        notify_new_message(recipient_email, sender_name, sender_email, message_text)
        return None

    app = current_app._get_current_object()

    def _send():
        with app.app_context():
            notify_new_message(recipient_email, sender_name, sender_email, message_text)

    thread = threading.Thread(target=_send)
    thread.daemon = True
    thread.start()
    return thread


__all__ = [
    'get_telegram_credentials',
    'load_smtp_config',
    'send_telegram_notification',
    'send_email',
    'notify_new_message',
    'notify_new_message_async'
]
