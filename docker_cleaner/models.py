from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

CONTAINERS = 'containers'
IMAGES = 'images'
VOLUMES = 'volumes'
NETWORKS = 'networks'

RESOURCE_KINDS = (CONTAINERS, IMAGES, VOLUMES, NETWORKS)


def non_negative(value: Any) -> int:
    """Coerce an engine size figure to an int, mapping missing/-1 to 0."""
    try:
        number = int(value or 0)
    except (TypeError, ValueError):
        return 0
    return number if number > 0 else 0


@dataclass
class ContainerRecord:
    id: str
    names: list[str]
    image: str
    state: str
    status: str
    created: int
    size: int = 0

    @classmethod
    def from_engine(cls, entry: Dict[str, Any]) -> 'ContainerRecord':
        return cls(
            id=entry.get('Id') or '',
            names=list(entry.get('Names') or []),
            image=entry.get('Image') or '',
            state=entry.get('State') or '',
            status=entry.get('Status') or '',
            created=entry.get('Created') or 0,
            size=non_negative(entry.get('SizeRw')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'names': self.names,
            'image': self.image,
            'state': self.state,
            'status': self.status,
            'created': self.created,
            'size': self.size,
        }


@dataclass
class ImageRecord:
    id: str
    repo_tags: list[str]
    created: int
    size: int
    virtual_size: int
    containers: Optional[int] = None

    @classmethod
    def from_engine(cls, entry: Dict[str, Any]) -> 'ImageRecord':
        containers = entry.get('Containers')
        if containers is not None and containers < 0:
            containers = None
        return cls(
            id=entry.get('Id') or '',
            repo_tags=[tag for tag in (entry.get('RepoTags') or []) if tag != '<none>:<none>'],
            created=entry.get('Created') or 0,
            size=non_negative(entry.get('Size')),
            virtual_size=non_negative(entry.get('VirtualSize', entry.get('Size'))),
            containers=containers,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'repoTags': self.repo_tags,
            'created': self.created,
            'size': self.size,
            'virtualSize': self.virtual_size,
            'containers': self.containers,
        }


@dataclass
class VolumeRecord:
    name: str
    driver: str
    mountpoint: str
    created: Optional[str] = None
    size: int = 0
    ref_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'driver': self.driver,
            'mountpoint': self.mountpoint,
            'created': self.created,
            'size': self.size,
            'refCount': self.ref_count,
        }


@dataclass
class NetworkRecord:
    id: str
    name: str
    driver: str
    scope: str
    internal: bool = False
    created: Optional[str] = None

    @classmethod
    def from_engine(cls, entry: Dict[str, Any]) -> 'NetworkRecord':
        return cls(
            id=entry.get('Id') or '',
            name=entry.get('Name') or '',
            driver=entry.get('Driver') or '',
            scope=entry.get('Scope') or '',
            internal=bool(entry.get('Internal', False)),
            created=entry.get('Created'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'driver': self.driver,
            'scope': self.scope,
            'internal': self.internal,
            'created': self.created,
        }


@dataclass
class KindUsage:
    count: int = 0
    size: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {'count': self.count, 'size': self.size}


@dataclass
class UsageSummary:
    containers: KindUsage = field(default_factory=KindUsage)
    images: KindUsage = field(default_factory=KindUsage)
    volumes: KindUsage = field(default_factory=KindUsage)

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {
            CONTAINERS: self.containers.to_dict(),
            IMAGES: self.images.to_dict(),
            VOLUMES: self.volumes.to_dict(),
        }


@dataclass
class RemovalOutcome:
    """Result of removing a single resource within a bulk delete."""
    identifier: Any
    success: bool
    error: Optional[str] = None
    key: str = 'id'

    @classmethod
    def ok(cls, identifier: str, key: str = 'id') -> 'RemovalOutcome':
        return cls(identifier=identifier, success=True, key=key)

    @classmethod
    def failed(cls, identifier: str, error: str, key: str = 'id') -> 'RemovalOutcome':
        return cls(identifier=identifier, success=False, error=error, key=key)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {self.key: self.identifier, 'success': self.success}
        if not self.success:
            payload['error'] = self.error
        return payload
