from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List

from docker.errors import APIError

from docker_cleaner.models import (
    ContainerRecord,
    ImageRecord,
    KindUsage,
    NetworkRecord,
    RemovalOutcome,
    UsageSummary,
    VolumeRecord,
    non_negative,
)
from docker_cleaner.utils.validators import validate_identifier


def describe_engine_error(error: Exception) -> str:
    """Return the engine's own message for an error, falling back to str()."""
    if isinstance(error, APIError) and error.explanation:
        explanation = error.explanation
        if isinstance(explanation, bytes):
            explanation = explanation.decode('utf-8', errors='replace')
        return str(explanation)
    return str(error)


class ResourceService:
    """Lists Docker resources and removes them in best-effort batches."""

    def __init__(self, *, engine, logger):
        self._engine = engine
        self._logger = logger

    def list_containers(self) -> List[Dict[str, Any]]:
        containers = self._engine.api.containers(all=True, size=True) or []
        return [ContainerRecord.from_engine(entry).to_dict() for entry in containers]

    def list_images(self) -> List[Dict[str, Any]]:
        images = self._engine.api.images(all=True) or []
        return [ImageRecord.from_engine(entry).to_dict() for entry in images]

    def list_volumes(self) -> List[Dict[str, Any]]:
        listing = self._engine.api.volumes() or {}
        volumes = listing.get('Volumes') or []
        usage_map = self._volume_usage_map()

        volume_list = []
        for entry in volumes:
            name = entry.get('Name') or ''
            usage = usage_map.get(name, {})
            listed_usage = entry.get('UsageData') or {}
            ref_count = listed_usage.get('RefCount', usage.get('RefCount'))
            volume_list.append(VolumeRecord(
                name=name,
                driver=entry.get('Driver') or '',
                mountpoint=entry.get('Mountpoint') or '',
                created=entry.get('CreatedAt'),
                size=non_negative(usage.get('Size')),
                ref_count=non_negative(ref_count),
            ).to_dict())
        return volume_list

    def _volume_usage_map(self) -> Dict[str, Dict[str, Any]]:
        """Map volume name to its UsageData from the disk usage report.

        The listing call carries no sizes, so they come from df(). A missing or
        malformed report leaves every volume without usage figures.
        """
        disk = self._engine.api.df() or {}
        usage_map = {}
        entries = disk.get('Volumes') if isinstance(disk, dict) else None
        if not isinstance(entries, list):
            self._logger.debug("Disk usage report carried no volume entries")
            return usage_map
        for entry in entries:
            if not isinstance(entry, dict) or not entry.get('Name'):
                continue
            usage_map[entry['Name']] = entry.get('UsageData') or {}
        return usage_map

    def list_networks(self) -> List[Dict[str, Any]]:
        networks = self._engine.api.networks() or []
        return [NetworkRecord.from_engine(entry).to_dict() for entry in networks]

    def usage_summary(self) -> Dict[str, Dict[str, int]]:
        disk = self._engine.api.df() or {}
        containers = disk.get('Containers') or []
        images = disk.get('Images') or []
        volumes = disk.get('Volumes') or []
        summary = UsageSummary(
            containers=KindUsage(
                count=len(containers),
                size=sum(non_negative(entry.get('SizeRw')) for entry in containers),
            ),
            images=KindUsage(
                count=len(images),
                size=sum(non_negative(entry.get('Size')) for entry in images),
            ),
            volumes=KindUsage(
                count=len(volumes),
                size=sum(non_negative((entry.get('UsageData') or {}).get('Size')) for entry in volumes),
            ),
        )
        return summary.to_dict()

    # The client is resolved before the loop: an unreachable engine fails the
    # whole request, while per-item engine errors become failed outcomes.

    def remove_containers(self, ids: Iterable[str]) -> List[RemovalOutcome]:
        api = self._engine.api
        return self._remove_each(ids, 'container', lambda cid: api.remove_container(cid, force=True))

    def remove_images(self, ids: Iterable[str]) -> List[RemovalOutcome]:
        api = self._engine.api
        return self._remove_each(ids, 'image', lambda iid: api.remove_image(iid, force=True))

    def remove_volumes(self, names: Iterable[str]) -> List[RemovalOutcome]:
        api = self._engine.api
        return self._remove_each(names, 'volume', lambda name: api.remove_volume(name, force=True), key='name')

    def remove_networks(self, ids: Iterable[str]) -> List[RemovalOutcome]:
        api = self._engine.api
        return self._remove_each(ids, 'network', api.remove_network)

    def _remove_each(
        self,
        identifiers: Iterable[str],
        kind: str,
        remove: Callable[[str], Any],
        key: str = 'id',
    ) -> List[RemovalOutcome]:
        """Attempt every removal independently and report one outcome per input."""
        results = []
        for identifier in identifiers:
            is_valid, error_msg = validate_identifier(identifier)
            if not is_valid:
                self._logger.warning("Skipped %s %r: %s", kind, identifier, error_msg)
                results.append(RemovalOutcome.failed(identifier, "invalid identifier", key=key))
                continue
            try:
                remove(identifier)
                results.append(RemovalOutcome.ok(identifier, key=key))
                self._logger.info("Removed %s %s", kind, identifier)
            except Exception as error:
                message = describe_engine_error(error)
                self._logger.warning("Failed to remove %s %s: %s", kind, identifier, message)
                results.append(RemovalOutcome.failed(identifier, message, key=key))
        return results
