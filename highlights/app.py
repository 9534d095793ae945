"""
Flask application factory for the Highlights backend
"""
import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS

from highlights.config import get_config
from highlights.storage.backends import resolve_backend
from highlights.storage.document_store import build_document_store
from highlights.storage.errors import MalformedData

STORE_EXTENSION = 'document_store'


def create_app(config_name=None, overrides=None):
    """
    Application factory pattern for creating Flask app

    Args:
        config_name: Configuration name ('development', 'production', 'testing')
        overrides: Optional mapping applied on top of the configuration class

    Returns:
        Flask application instance
    """
    app = Flask(__name__, static_folder=None)

    # Load configuration
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    config_class = get_config(config_name)
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)

    configure_logging(app)

    # Initialize CORS
    CORS(app, origins=app.config['CORS_ORIGINS'], supports_credentials=True)

    # Storage backend is decided once, here
    backend = resolve_backend(app.config)
    app.extensions[STORE_EXTENSION] = build_document_store(app.config, backend)
    app.logger.info(f"Using {backend.value} storage")

    # Register error handlers
    register_error_handlers(app)

    # Register blueprints
    register_blueprints(app)

    # Health check endpoint
    @app.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint"""
        return jsonify({
            'status': 'healthy',
            'version': '0.1.0',
            'service': 'highlights-backend',
            'storage': app.extensions[STORE_EXTENSION].backend.value,
        }), 200

    return app


def configure_logging(app):
    """Attach a stream handler to the package logger at the configured level"""
    package_logger = logging.getLogger('highlights')
    package_logger.setLevel(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
        package_logger.addHandler(handler)


def register_error_handlers(app):
    """Register error handlers for the application"""
    from highlights.i18n import t

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({
            'error': 'Bad Request',
            'message': str(error)
        }), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'error': 'Not Found',
            'message': 'The requested resource was not found'
        }), 404

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({
            'error': 'Internal Server Error',
            'message': 'An unexpected error occurred'
        }), 500

    @app.errorhandler(MalformedData)
    def malformed_data(error):
        app.logger.error(f"Stored data could not be loaded: {error}")
        return jsonify({
            'error': t('errors.load_failed'),
            'message': str(error)
        }), 500


def register_blueprints(app):
    """Register API blueprints"""
    from highlights.api import api_bp

    app.register_blueprint(api_bp, url_prefix='/api/v1')
