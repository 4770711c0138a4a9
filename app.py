"""
Portfolio API - Main Application Entry Point
Application Factory Pattern with blueprints per domain

This module initializes the Flask application with all necessary extensions,
configurations, and error handlers. All route handling is delegated to blueprints.
"""

import os
import click
from flask import Flask, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge
from werkzeug.middleware.proxy_fix import ProxyFix
from config import get_config
from extensions import db, login_manager
from utils.errors import ApiError, PayloadTooLarge, InternalError
from utils.security import RateLimiter
from utils.sessions import SessionStore, load_user_from_request

# Import all blueprints
from blueprints.auth import auth_bp
from blueprints.profile import profile_bp
from blueprints.portfolio import portfolio_bp
from blueprints.uploads import uploads_bp
from blueprints.contact import contact_bp


def create_app(config_name=None, overrides=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        overrides (dict): Config values applied after the config object (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    if overrides:
        app.config.update(overrides)

    # Fix PostgreSQL URL if needed
    db_url = app.config.get('SQLALCHEMY_DATABASE_URI')
    if db_url and db_url.startswith("postgres://"):
        app.config['SQLALCHEMY_DATABASE_URI'] = db_url.replace(
            "postgres://", "postgresql://", 1)

    # Trust X-Forwarded-* only from the configured number of proxies
    proxy_count = app.config.get('PROXY_FIX_X_FOR', 0)
    if proxy_count:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=proxy_count, x_proto=proxy_count)

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Register CLI commands
    register_commands(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio API is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions and per-app services"""
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.request_loader(load_user_from_request)

    # Services injected into handlers through app.extensions
    app.extensions['session_store'] = SessionStore(ttl=app.config['SESSION_TTL'])
    app.extensions['rate_limiter'] = RateLimiter(
        max_requests=app.config['CONTACT_RATE_LIMIT'],
        window=app.config['CONTACT_RATE_WINDOW'])

    # Create tables if they don't exist
    with app.app_context():
        try:
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
        except SQLAlchemyError as e:
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(profile_bp)
    app.register_blueprint(portfolio_bp)
    app.register_blueprint(uploads_bp)
    app.register_blueprint(contact_bp)


def register_error_handlers(app):
    """Every error leaves as JSON with a human-readable message"""

    @app.errorhandler(ApiError)
    def api_error(e):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(RequestEntityTooLarge)
    def file_too_large(e):
        error = PayloadTooLarge()
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(SQLAlchemyError)
    def database_error(e):
        db.session.rollback()
        app.logger.error(f"Database Error: {str(e)}")
        error = InternalError()
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({'message': e.description, 'error': e.name}), e.code

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        error = InternalError()
        return jsonify(error.to_dict()), error.status_code


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        if app.config.get('AUTH_COOKIE_SECURE'):
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


def register_commands(app):
    """Register Flask CLI commands"""

    @app.cli.command('purge-sessions')
    def purge_sessions():
        """Delete expired sessions."""
        removed = app.extensions['session_store'].purge_expired()
        click.echo(f"Removed {removed} expired sessions")

    @app.cli.command('seed-demo')
    @click.option('--email', default='demo@example.com', help='Login email of the demo user.')
    @click.option('--password', default='demo-password', help='Password of the demo user.')
    def seed_demo(email, password):
        """Create a demo user with a sample portfolio."""
        from utils.seed import seed_demo_portfolio
        user = seed_demo_portfolio(email, password)
        if user is None:
            click.echo(f"User {email} already exists, nothing to do")
        else:
            click.echo(f"Created demo user {user.email} ({user.id})")


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
