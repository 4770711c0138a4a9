"""
Auth Blueprint - Authentication
Handles: Signup, Login, Logout, Current user
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')

from . import routes
