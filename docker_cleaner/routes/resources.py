from __future__ import annotations

from flask import Blueprint, jsonify, request

from docker_cleaner.models import CONTAINERS, IMAGES, NETWORKS, VOLUMES
from docker_cleaner.utils.validators import DeleteRequestError, parse_delete_body


def create_resources_blueprint(*, resource_service, logger):
    """Create list and bulk-delete routes for every resource kind."""
    blueprint = Blueprint('resources', __name__)

    # kind -> (lister, remover, body field)
    handlers = {
        CONTAINERS: (resource_service.list_containers, resource_service.remove_containers, 'ids'),
        IMAGES: (resource_service.list_images, resource_service.remove_images, 'ids'),
        VOLUMES: (resource_service.list_volumes, resource_service.remove_volumes, 'names'),
        NETWORKS: (resource_service.list_networks, resource_service.remove_networks, 'ids'),
    }

    def make_list_view(kind, lister):
        def list_resources():
            try:
                return jsonify(lister())
            except Exception as e:
                logger.error(f"Failed to fetch {kind}: {e}")
                return jsonify({'error': f'Failed to fetch {kind}'}), 500

        list_resources.__doc__ = f"List all {kind} known to the Docker engine."
        return list_resources

    def make_delete_view(kind, remover, field):
        def delete_resources():
            try:
                identifiers = parse_delete_body(request.get_json(silent=True), field)
                outcomes = remover(identifiers)
            except DeleteRequestError as e:
                logger.warning(f"Rejected delete request for {kind}: {e}")
                return jsonify({'error': f'Failed to delete {kind}'}), 500
            except Exception as e:
                logger.error(f"Failed to delete {kind}: {e}")
                return jsonify({'error': f'Failed to delete {kind}'}), 500

            failed = sum(1 for outcome in outcomes if not outcome.success)
            logger.info(f"Deleted {len(outcomes) - failed}/{len(outcomes)} {kind}")
            return jsonify({'results': [outcome.to_dict() for outcome in outcomes]})

        delete_resources.__doc__ = f"Remove the requested {kind}, one outcome per identifier."
        return delete_resources

    for kind, (lister, remover, field) in handlers.items():
        blueprint.add_url_rule(
            f'/api/{kind}',
            endpoint=f'list_{kind}',
            view_func=make_list_view(kind, lister),
            methods=['GET'],
        )
        blueprint.add_url_rule(
            f'/api/{kind}',
            endpoint=f'delete_{kind}',
            view_func=make_delete_view(kind, remover, field),
            methods=['DELETE'],
        )

    return blueprint
