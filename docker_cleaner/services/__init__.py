"""Service layer for Docker Cleaner."""

from .docker_engine import DockerEngine
from .resource_service import ResourceService

__all__ = [
    'DockerEngine',
    'ResourceService',
]
