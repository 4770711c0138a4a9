"""
Upload Routes - Multipart file uploads for the profile image and CV
"""

from flask import jsonify, request, current_app, send_from_directory
from flask_login import current_user
from utils.decorators import login_required
from utils.errors import ValidationError
from utils.uploads import UploadService
from . import uploads_bp


def read_upload(field):
    """Return (bytes, mimetype, filename) of the multipart file field"""
    file = request.files.get(field)
    if not file or not file.filename:
        raise ValidationError(f"No file uploaded in field '{field}'")
    return file.read(), file.mimetype, file.filename


@uploads_bp.route('/api/upload/image', methods=['POST'])
@login_required
def upload_image():
    data, mimetype, filename = read_upload('image')
    url = UploadService.from_config(current_app.config).upload_image(
        current_user._get_current_object(), data, mimetype, filename)
    return jsonify({'url': url, 'imageUrl': url})


@uploads_bp.route('/api/upload/cv', methods=['POST'])
@login_required
def upload_cv():
    data, mimetype, filename = read_upload('cv')
    url = UploadService.from_config(current_app.config).upload_cv(
        current_user._get_current_object(), data, mimetype, filename)
    return jsonify({'url': url, 'cvUrl': url})


@uploads_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    """Serve a stored upload"""
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
