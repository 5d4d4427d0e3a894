"""
Portfolio Site - Main Application Entry Point
Built with the Application Factory Pattern for a modular architecture

This module initializes the Flask application with all necessary extensions,
configurations, and middleware. All actual route handling is delegated to blueprints.
"""

import os
from flask import Flask, render_template, request, jsonify
from werkzeug.middleware.proxy_fix import ProxyFix
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from config import get_config
from extensions import db, login_manager
from utils.errors import ApiError
from utils.security import load_admin, init_admin_credentials

# Import all blueprints
from blueprints.auth import auth_bp
from blueprints.pages import pages_bp
from blueprints.dashboard import dashboard_bp
from blueprints.skills import skills_bp
from blueprints.experiences import experiences_bp
from blueprints.portfolios import portfolios_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    # Only honour X-Forwarded-* when running behind known proxies
    proxies = app.config.get('TRUSTED_PROXY_COUNT', 0)
    if proxies:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=proxies, x_proto=proxies)

    init_admin_credentials(app)
    if not app.config.get('ADMIN_AUTH_REQUIRED', True):
        app.logger.warning('Admin authentication is DISABLED - do not run like this in production')

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio site is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.user_loader(load_admin)

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
    app.register_blueprint(pages_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(skills_bp)
    app.register_blueprint(experiences_bp)
    app.register_blueprint(portfolios_bp)


def _wants_json():
    return request.path.startswith('/api/')


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(ApiError)
    def api_error(e):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(400)
    def bad_request(e):
        if _wants_json():
            return jsonify({'error': 'Bad request'}), 400
        return render_template('errors/400.html'), 400

    @app.errorhandler(404)
    def page_not_found(e):
        if _wants_json():
            return jsonify({'error': 'Not found'}), 404
        return render_template('errors/404.html'), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        if _wants_json():
            return jsonify({'error': 'Unexpected error'}), 500
        return render_template('errors/500.html'), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "script-src 'self' 'unsafe-inline'; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src * data: blob:; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


if __name__ == '__main__':
    env = os.environ.get('FLASK_ENV', 'development')
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
