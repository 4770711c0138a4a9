"""
Portfolio Blueprint - Portfolio sections
Handles: Education, Experience, Skills, Projects, Certifications, Languages
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='/api')

from . import routes
