from __future__ import annotations

import sys

from flask import Blueprint, jsonify


def create_health_blueprint(*, engine, version: str):
    """Create health and version routes with injected dependencies."""
    blueprint = Blueprint('health', __name__)

    @blueprint.route('/health')
    def health_check():
        """Health check endpoint for container orchestration and monitoring."""
        health = {
            'status': 'healthy',
            'version': version,
            'checks': {},
        }

        try:
            engine.ping()
            health['checks']['docker'] = {'status': 'ok', 'socket': engine.socket_path}
        except Exception as e:
            health['status'] = 'unhealthy'
            health['checks']['docker'] = {'status': 'error', 'message': str(e)}

        status_code = 200 if health['status'] == 'healthy' else 503
        return jsonify(health), status_code

    @blueprint.route('/api/version')
    def get_version():
        """Get application version and build info."""
        return jsonify({
            'version': version,
            'python_version': sys.version.split()[0],
            'api_version': 'v1',
        })

    return blueprint
