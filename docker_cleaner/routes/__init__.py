"""Routes package."""
from .health import create_health_blueprint
from .pages import create_pages_blueprint
from .resources import create_resources_blueprint
from .system import create_system_blueprint

__all__ = [
    'create_health_blueprint',
    'create_pages_blueprint',
    'create_resources_blueprint',
    'create_system_blueprint',
]
