"""
Flask Application Factory

This module implements the application factory pattern for creating
DeedGuide application instances with different configurations.
"""

import logging
from collections.abc import Mapping

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from deedguide.config import config


def create_app(config_name='default', overrides=None):
    """
    Application factory function

    Args:
        config_name: Configuration name ('development', 'production', 'testing'),
            or a mapping of settings applied over the testing/default configuration
        overrides: Optional mapping of settings applied last

    Returns:
        Flask: Configured Flask application instance
    """

    if isinstance(config_name, Mapping):
        overrides = dict(config_name, **(overrides or {}))
        config_name = 'testing' if overrides.get('TESTING') else 'default'

    # Normalize config name
    config_name = (config_name or 'default').lower()

    app = Flask(__name__)

    cfg = config.get(config_name) or config['default']
    app.config.from_object(cfg)
    if overrides:
        app.config.update(overrides)

    configure_logging(app)

    app.json.ensure_ascii = bool(app.config.get('JSON_ENSURE_ASCII', False))

    register_blueprints(app)
    register_error_handlers(app)
    register_cli_commands(app)

    app.logger.debug('DeedGuide application created with config: %s', config_name)
    return app


def configure_logging(app):
    """Apply LOG_LEVEL to the package logger (core and services log under it)."""

    level_name = str(app.config.get('LOG_LEVEL') or 'INFO').upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
        app.logger.warning('Unknown LOG_LEVEL %r; falling back to INFO', level_name)
    app.logger.setLevel(level)


def register_blueprints(app):
    """Register Flask blueprints"""

    from deedguide.blueprints.guidance import guidance_bp
    from deedguide.routes.health import health_bp

    app.register_blueprint(health_bp)  # No prefix - accessible at /health
    app.register_blueprint(guidance_bp, url_prefix='/guidance')


def register_error_handlers(app):
    """Register JSON error handlers for common HTTP errors"""

    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'success': False, 'error': error.description}), error.code

    @app.errorhandler(500)
    def internal_error(error):
        app.logger.exception('Unhandled exception (500): %s', error)
        return jsonify({'success': False, 'error': 'Internal server error'}), 500


def register_cli_commands(app):
    """Register custom Flask CLI commands."""
    from deedguide.cli import guidance_run_command, guidance_validate_command

    app.cli.add_command(guidance_validate_command)
    app.cli.add_command(guidance_run_command)
