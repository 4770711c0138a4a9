"""
Helpers Module - Utility functions for common operations
"""

import os
import secrets
import time
from flask import request
from email_validator import validate_email, EmailNotValidError
from werkzeug.utils import secure_filename
from .errors import ValidationError


def get_payload():
    """Request body as a dict: JSON when sent as JSON, form fields otherwise"""
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError('Request body must be a JSON object')
        return data
    return request.form.to_dict()


def clean_str(value):
    """Trimmed string for text fields; None stays None"""
    if value is None:
        return None
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        raise ValidationError('Expected a text value')
    return str(value).strip()


def split_items(raw):
    """
    Normalize skill items into an ordered list of non-empty strings.

    Accepts either a list or a comma-separated string. Each entry is trimmed
    and empty or whitespace-only entries are dropped silently.
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        parts = raw.split(',')
    elif isinstance(raw, (list, tuple)):
        parts = raw
    else:
        raise ValidationError('Items must be a list or a comma-separated string')

    items = []
    for part in parts:
        if not isinstance(part, str):
            raise ValidationError('Items must be text')
        part = part.strip()
        if part:
            items.append(part)
    return items


def normalize_email(email):
    return (email or '').strip().lower()


def is_valid_email(email):
    """Syntax-only email check (no DNS lookups)"""
    try:
        validate_email(email, check_deliverability=False)
        return True
    except EmailNotValidError:
        return False


def allowed_file(mimetype, allowed_types):
    """Check if the declared MIME type is on the allow-list"""
    return (mimetype or '').split(';', 1)[0].strip().lower() in allowed_types


def generate_upload_filename(kind, original_filename=None, fallback_ext=''):
    """Collision-resistant name: <kind>-<unix millis>-<random hex><ext>"""
    ext = ''
    if original_filename:
        safe = secure_filename(original_filename)
        ext = os.path.splitext(safe)[1].lower()
    if not ext:
        ext = fallback_ext
    return f"{kind}-{int(time.time() * 1000)}-{secrets.token_hex(6)}{ext}"


__all__ = [
    'get_payload',
    'clean_str',
    'split_items',
    'normalize_email',
    'is_valid_email',
    'allowed_file',
    'generate_upload_filename'
]
