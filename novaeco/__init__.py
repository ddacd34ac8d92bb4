"""Flask application factory."""

import logging
import os
from flask import Flask, render_template
from .config import config, DEFAULT_SECRET_KEY
from .extensions import db, migrate, login_manager, bcrypt, csrf


def create_app(config_name=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')
    
    app = Flask(__name__)
    app.config.from_object(config[config_name])
    
    # Admin sessions live in the signed cookie
    if not (app.debug or app.testing) and app.config.get('SECRET_KEY') in (None, '', DEFAULT_SECRET_KEY):
        raise RuntimeError('SECRET_KEY must be set to a private value outside development and testing')
    
    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    
    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    bcrypt.init_app(app)
    csrf.init_app(app)
    
    os.makedirs(app.config['INSTANCE_DIR'], exist_ok=True)
    
    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)
    
    from .utils.filters import register_filters
    register_filters(app)
    
    # Shared catalog and inbox, loaded once
    from .services import AppState, STATE_KEY, current_gate
    with app.app_context():
        db.create_all()
        app.extensions[STATE_KEY] = AppState.from_app(app)
    
    # The auth gate's session snapshot is the source of truth for Flask-Login
    @login_manager.request_loader
    def load_admin(request):
        gate = current_gate()
        return gate.user if gate.is_admin else None
    
    # Error handlers
    @app.errorhandler(404)
    def not_found_error(error):
        return render_template('errors/404.html'), 404
    
    @app.errorhandler(403)
    def forbidden_error(error):
        return render_template('errors/403.html'), 403
    
    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        return render_template('errors/500.html'), 500
    
    # Context processors
    @app.context_processor
    def inject_globals():
        return dict(company_name=app.config['COMPANY_NAME'])
    
    return app
