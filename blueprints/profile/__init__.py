"""
Profile Blueprint - Public profile and profile editing
"""

from flask import Blueprint

profile_bp = Blueprint('profile', __name__, url_prefix='/api/profile')

from . import routes
