"""
Uploads Module - Avatar and CV file storage
Files are written under UPLOAD_FOLDER and the user's imageUrl/cvUrl is
pointed at the new file. Previous files are left in place.
"""

import os
from flask import current_app
from extensions import db
from .errors import ValidationError, Unauthorized, UnsupportedMediaType, PayloadTooLarge
from .helpers import allowed_file, generate_upload_filename

ALLOWED_IMAGE_TYPES = {
    'image/jpeg': '.jpg',
    'image/png': '.png',
    'image/gif': '.gif',
    'image/webp': '.webp',
}

ALLOWED_DOCUMENT_TYPES = {
    'application/pdf': '.pdf',
    'application/msword': '.doc',
    'application/vnd.openxmlformats-officedocument.wordprocessingml.document': '.docx',
}


class UploadService:
    def __init__(self, upload_folder, url_prefix='/uploads', max_size=10 * 1024 * 1024):
        self.upload_folder = upload_folder
        self.url_prefix = url_prefix.rstrip('/')
        self.max_size = max_size

    @classmethod
    def from_config(cls, config):
        return cls(config['UPLOAD_FOLDER'], config['UPLOAD_URL_PREFIX'], config['MAX_UPLOAD_SIZE'])

    def upload_image(self, user, data, mimetype, filename=None):
        return self._store(user, data, mimetype, filename,
                           kind='image', allowed=ALLOWED_IMAGE_TYPES, column='image_url')

    def upload_cv(self, user, data, mimetype, filename=None):
        return self._store(user, data, mimetype, filename,
                           kind='cv', allowed=ALLOWED_DOCUMENT_TYPES, column='cv_url')

    def _store(self, user, data, mimetype, filename, kind, allowed, column):
        if user is None or not user.is_authenticated:
            raise Unauthorized()
        if data is None:
            raise ValidationError('No file uploaded')
        if not allowed_file(mimetype, allowed):
            current_app.logger.warning(f"Rejected {kind} upload with type {mimetype!r} from user {user.id}")
            raise UnsupportedMediaType(f"File type not allowed. Allowed types: {', '.join(sorted(allowed))}")
        if len(data) > self.max_size:
            raise PayloadTooLarge(f"File is too large. Maximum size is {self.max_size // (1024 * 1024)}MB.")

        base_type = mimetype.split(';', 1)[0].strip().lower()
        stored_name = generate_upload_filename(kind, filename, fallback_ext=allowed[base_type])
        os.makedirs(self.upload_folder, exist_ok=True)
        path = os.path.join(self.upload_folder, stored_name)
        with open(path, 'wb') as f:
            f.write(data)

        url = f"{self.url_prefix}/{stored_name}"
        setattr(user, column, url)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            os.remove(path)
            raise
        current_app.logger.info(f"Stored {kind} upload {stored_name} ({len(data)} bytes) for user {user.id}")
        return url


__all__ = ['UploadService', 'ALLOWED_IMAGE_TYPES', 'ALLOWED_DOCUMENT_TYPES']
