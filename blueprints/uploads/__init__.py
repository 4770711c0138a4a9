"""
Uploads Blueprint - Avatar and CV uploads
Handles: Image upload, CV upload, serving stored files
"""

from flask import Blueprint

uploads_bp = Blueprint('uploads', __name__, url_prefix='')

from . import routes
