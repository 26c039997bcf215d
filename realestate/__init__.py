"""
Real Estate Listings - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os
import secrets

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from realestate.config import Config
from realestate.extensions import db, login_manager

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )

    if not app.config.get('SECRET_KEY'):
        app.config['SECRET_KEY'] = secrets.token_hex(32)
        logger.warning('SECRET_KEY not set; generated a random one, sessions will not survive a restart')

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'admin.login'

    from realestate.services.file_store import FileStore
    app.extensions['file_store'] = FileStore(
        app.config['UPLOAD_FOLDER'],
        app.config['MAX_IMAGE_BYTES'],
        app.config['ALLOWED_IMAGE_FORMATS'],
    )

    # Register blueprints
    from realestate.admin import admin_bp
    from realestate.public import public_bp

    app.register_blueprint(public_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')

    from realestate.cli import register_commands
    register_commands(app)

    # Resolve the session token carried in the cookie to a Principal
    @login_manager.user_loader
    def load_principal(token):
        from realestate.services.auth import resolve_session
        return resolve_session(token)

    # Template filter for listing ratings: full stars plus a half star
    @app.template_filter('stars')
    def stars_filter(rating):
        full = int(rating or 0)
        half = (rating or 0) - full > 0
        return '\u2605' * full + ('\u00bd' if half else '')

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception('Internal Server Error: %s', e)
        db.session.rollback()
        return jsonify({'error': 'Internal Server Error'}), 500

    # Create database tables
    with app.app_context():
        os.makedirs(app.instance_path, exist_ok=True)
        os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)
        db.create_all()

    return app
