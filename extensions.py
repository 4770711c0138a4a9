"""
Extensions Module - Centralized initialization of Flask extensions
Decouples extensions from the main app.py to avoid circular imports
and enable better testing.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Initialize extensions without binding to app
db = SQLAlchemy()
login_manager = LoginManager()
# Identity comes from the server-side session store only
login_manager.session_protection = None

__all__ = ['db', 'login_manager']
