from __future__ import annotations

import logging
import threading

import docker

logger = logging.getLogger(__name__)


def resolve_base_url(socket_path: str) -> str:
    """Turn a socket path into a Docker base URL, keeping explicit schemes."""
    if '://' in socket_path:
        return socket_path
    return f'unix://{socket_path}'


class DockerEngine:
    """Lazily connects to the Docker Engine socket and keeps the client."""

    def __init__(self, socket_path: str, client_factory=docker.DockerClient):
        self.socket_path = socket_path
        self.client = None
        self._client_factory = client_factory
        self._lock = threading.Lock()

    @property
    def base_url(self) -> str:
        return resolve_base_url(self.socket_path)

    def get_client(self):
        """Return the shared Docker client, creating it on first use.

        Concurrent first calls create a single client. A failed connection
        attempt is not cached, so the next call tries again.
        """
        if self.client is not None:
            return self.client

        with self._lock:
            if self.client is None:
                self.client = self._client_factory(base_url=self.base_url)
                logger.info("Connected to Docker engine at %s", self.base_url)
            return self.client

    @property
    def api(self):
        """Low-level API client returning raw engine JSON."""
        return self.get_client().api

    def ping(self) -> bool:
        return bool(self.get_client().ping())
