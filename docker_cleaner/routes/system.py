from __future__ import annotations

from flask import Blueprint, jsonify


def create_system_blueprint(*, resource_service, logger):
    """Create the aggregate disk usage route."""
    blueprint = Blueprint('system', __name__)

    @blueprint.route('/api/system', methods=['GET'])
    def system_info():
        """Per-kind count and total size for containers, images and volumes."""
        try:
            return jsonify(resource_service.usage_summary())
        except Exception as e:
            logger.error(f"Failed to fetch system info: {e}")
            return jsonify({'error': 'Failed to fetch system info'}), 500

    return blueprint
