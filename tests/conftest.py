"""
Pytest fixtures for Docker Cleaner tests
"""
import pytest
from docker.errors import APIError

from docker_cleaner import create_app
from docker_cleaner.config import TestingConfig


class FakeDockerAPI:
    """Stand-in for docker.APIClient returning canned engine JSON."""

    def __init__(self):
        self.containers_data = []
        self.images_data = []
        self.volumes_data = {'Volumes': [], 'Warnings': None}
        self.networks_data = []
        self.df_data = {'Containers': [], 'Images': [], 'Volumes': []}
        self.remove_errors = {}
        self.fail_with = None
        self.calls = []

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def containers(self, all=False, size=False):
        self.calls.append(('containers', all, size))
        self._check()
        return self.containers_data

    def images(self, all=False):
        self.calls.append(('images', all))
        self._check()
        return self.images_data

    def volumes(self):
        self.calls.append(('volumes',))
        self._check()
        return self.volumes_data

    def networks(self):
        self.calls.append(('networks',))
        self._check()
        return self.networks_data

    def df(self):
        self.calls.append(('df',))
        self._check()
        return self.df_data

    def _remove(self, kind, identifier, **kwargs):
        self.calls.append((f'remove_{kind}', identifier, kwargs))
        self._check()
        message = self.remove_errors.get(identifier)
        if message:
            raise APIError('409 Client Error: Conflict', explanation=message)

    def remove_container(self, container, force=False):
        self._remove('container', container, force=force)

    def remove_image(self, image, force=False):
        self._remove('image', image, force=force)

    def remove_volume(self, name, force=False):
        self._remove('volume', name, force=force)

    def remove_network(self, net_id):
        self._remove('network', net_id)


class FakeEngine:
    socket_path = '/var/run/docker.sock'

    def __init__(self, api):
        self.api = api
        self.reachable = True

    def ping(self):
        if not self.reachable:
            raise ConnectionError('Cannot connect to the Docker daemon')
        return True


@pytest.fixture
def docker_api():
    return FakeDockerAPI()


@pytest.fixture
def engine(docker_api):
    return FakeEngine(docker_api)


@pytest.fixture
def app(engine):
    """Create application for testing"""
    flask_app = create_app(TestingConfig, engine=engine)
    yield flask_app


@pytest.fixture
def client(app):
    """Create a test client"""
    return app.test_client()
