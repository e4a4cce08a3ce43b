"""Application package for Docker Cleaner."""

from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from flask_talisman import Talisman

from docker_cleaner.config import Config
from docker_cleaner.extensions import limiter
from docker_cleaner.routes import (
    create_health_blueprint,
    create_pages_blueprint,
    create_resources_blueprint,
    create_system_blueprint,
)
from docker_cleaner.services import DockerEngine, ResourceService

VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def configure_logging(log_level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(config_class: type[Config] = Config, engine: DockerEngine | None = None) -> Flask:
    """Create and configure the Flask application."""
    configure_logging(config_class.LOG_LEVEL)

    app = Flask(__name__)
    app.config.from_object(config_class)
    app.config.setdefault('RATELIMIT_DEFAULT', f"{app.config['RATE_LIMIT_PER_MINUTE']} per minute")
    app.json.sort_keys = False

    limiter.init_app(app)

    if app.config['FORCE_HTTPS']:
        Talisman(app,
            force_https=True,
            strict_transport_security=True,
            content_security_policy={
                'default-src': "'self'",
                'script-src': ["'self'"],
                'style-src': ["'self'", "'unsafe-inline'"],
                'connect-src': ["'self'", "*"],
            }
        )
    else:
        @app.after_request
        def set_security_headers(response):
            response.headers['X-Content-Type-Options'] = 'nosniff'
            response.headers['X-Frame-Options'] = 'SAMEORIGIN'
            response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
            return response

    @app.after_request
    def allow_cross_origin(response):
        response.headers['Access-Control-Allow-Origin'] = '*'
        response.headers['Access-Control-Allow-Methods'] = 'GET, DELETE, OPTIONS'
        response.headers['Access-Control-Allow-Headers'] = request.headers.get(
            'Access-Control-Request-Headers', 'Content-Type'
        )
        return response

    @app.errorhandler(404)
    def not_found(error):
        if request.path.startswith('/api/'):
            return jsonify({'error': 'Not found'}), 404
        return error

    @app.errorhandler(405)
    def method_not_allowed(error):
        if request.path.startswith('/api/'):
            return jsonify({'error': 'Method not allowed'}), 405
        return error

    if engine is None:
        engine = DockerEngine(app.config['DOCKER_SOCKET_PATH'])
    resource_service = ResourceService(engine=engine, logger=logger)
    app.extensions['docker_engine'] = engine

    app.register_blueprint(create_resources_blueprint(resource_service=resource_service, logger=logger))
    app.register_blueprint(create_system_blueprint(resource_service=resource_service, logger=logger))
    app.register_blueprint(create_health_blueprint(engine=engine, version=VERSION))
    app.register_blueprint(create_pages_blueprint(api_base=app.config['API_BASE'], version=VERSION))

    logger.info("Docker Cleaner %s using socket %s", VERSION, engine.socket_path)
    return app
