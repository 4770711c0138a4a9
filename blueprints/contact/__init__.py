"""
Contact Blueprint - Contact form and inbox
Handles: Public contact submissions, owner message management
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__, url_prefix='/api')

from . import routes
