"""
Admin Gate - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, jsonify, session
from admin_gate.extensions import db, login_manager
from admin_gate.config import Config


def create_app(config_class=Config):
    """Create and configure the Flask application.
    
    Args:
        config_class: Configuration class to use (default: Config)
    
    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    logging.getLogger('admin_gate').setLevel(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    
    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    # Resolving current_user must not write the session
    login_manager.session_protection = None
    
    # User directory consulted by the access predicates
    from admin_gate.access import SQLAlchemyUserDirectory
    from admin_gate.access.predicate import DIRECTORY_EXTENSION_KEY
    directory = SQLAlchemyUserDirectory()
    app.extensions[DIRECTORY_EXTENSION_KEY] = directory
    
    _register_user_loaders(app, directory)
    
    # Register blueprints
    from admin_gate.admin import admin_bp
    from admin_gate.ops import ops_bp
    
    app.register_blueprint(admin_bp, url_prefix='/admin')
    app.register_blueprint(ops_bp, url_prefix='/ops')
    
    from admin_gate.cli import register_commands
    register_commands(app)
    
    _register_error_handlers(app)
    
    @app.route('/health')
    def health():
        return jsonify(status='ok')
    
    # Create database tables
    with app.app_context():
        _ensure_sqlite_dir(app.config['SQLALCHEMY_DATABASE_URI'])
        db.create_all()
    
    return app


def _register_user_loaders(app, directory):
    """Let Flask-Login resolve `current_user` from the session user id."""
    from admin_gate.access import DirectoryUnavailable
    
    def load(user_id):
        try:
            return directory.find_by_id(user_id)
        except DirectoryUnavailable:
            return None
    
    @login_manager.user_loader
    def load_user(user_id):
        return load(user_id)
    
    @login_manager.request_loader
    def load_user_from_session(request):
        user_id = session.get(app.config['ADMIN_SESSION_KEY'])
        if user_id is None or user_id == '':
            return None
        return load(user_id)


def _register_error_handlers(app):
    from admin_gate.access.decorators import wants_json
    
    @app.errorhandler(401)
    @app.errorhandler(403)
    def access_denied(e):
        if wants_json():
            return jsonify(error=e.name), e.code
        return e


def _ensure_sqlite_dir(uri):
    """Create the directory of a file-backed SQLite database."""
    prefix = 'sqlite:///'
    if not uri.startswith(prefix) or uri.endswith(':memory:'):
        return
    path = os.path.dirname(uri[len(prefix):])
    if path:
        os.makedirs(path, exist_ok=True)
