from __future__ import annotations

from flask import Blueprint, render_template


def create_pages_blueprint(*, api_base: str, version: str):
    """Create the dashboard page route."""
    blueprint = Blueprint('pages', __name__)

    @blueprint.route('/')
    def index():
        """Single-page dashboard."""
        return render_template('index.html', api_base=api_base, version=version)

    return blueprint
