from __future__ import annotations

import concurrent.futures
import logging
from typing import Any, Callable, Dict, List, Optional

import requests

from docker_cleaner.dashboard.state import TableState
from docker_cleaner.models import CONTAINERS, IMAGES, NETWORKS, RESOURCE_KINDS, VOLUMES

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = 'http://localhost:3001/api'
SYSTEM = 'system'
FETCH_FAILED = 'Failed to fetch data'
DELETE_FAILED = 'Failed to delete items'


class DashboardClient:
    """Talks to the gateway and owns everything the dashboard displays.

    Data is only replaced by a refresh in which all five fetches succeed;
    a failed refresh sets ``error`` and leaves the previous data in place.
    """

    def __init__(self, api_base: str = DEFAULT_API_BASE, session: requests.Session | None = None,
                 timeout: float | None = None):
        self.api_base = api_base.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout
        self.state = TableState()
        self.data: Dict[str, List[Dict[str, Any]]] = {kind: [] for kind in RESOURCE_KINDS}
        self.system_info: Optional[Dict[str, Dict[str, int]]] = None
        self.loading = False
        self.error: Optional[str] = None

    @property
    def containers(self):
        return self.data[CONTAINERS]

    @property
    def images(self):
        return self.data[IMAGES]

    @property
    def volumes(self):
        return self.data[VOLUMES]

    @property
    def networks(self):
        return self.data[NETWORKS]

    def _url(self, path: str) -> str:
        return f"{self.api_base}/{path}"

    def _fetch(self, path: str):
        response = self.session.get(self._url(path), timeout=self.timeout)
        if not response.ok:
            raise RuntimeError(FETCH_FAILED)
        return response.json()

    def refresh(self) -> bool:
        """Fetch all collections and the usage summary concurrently."""
        self.loading = True
        self.error = None
        paths = list(RESOURCE_KINDS) + [SYSTEM]
        try:
            with concurrent.futures.ThreadPoolExecutor(max_workers=len(paths)) as executor:
                futures = {path: executor.submit(self._fetch, path) for path in paths}
                results = {path: future.result() for path, future in futures.items()}
        except Exception as e:
            logger.warning("Refresh failed: %s", e)
            self.error = str(e) or 'An error occurred'
            return False
        finally:
            self.loading = False

        for kind in RESOURCE_KINDS:
            self.data[kind] = results[kind]
        self.system_info = results[SYSTEM]
        return True

    # Table interaction, delegated to the state machine with the active data

    def active_items(self) -> List[Dict[str, Any]]:
        return self.data[self.state.active_tab]

    def visible_items(self) -> List[Dict[str, Any]]:
        return self.state.visible_items(self.active_items())

    def switch_tab(self, kind: str) -> None:
        self.state.switch_tab(kind)

    def toggle_select_all(self) -> None:
        self.state.toggle_select_all(self.visible_items())

    @property
    def can_delete(self) -> bool:
        return self.state.selection_size > 0 and not self.loading

    def delete_selected(self, confirm: Callable[[str], bool]) -> Optional[List[Dict[str, Any]]]:
        """Bulk-delete the selection on the active tab.

        Returns the per-item results, or None when nothing was sent.
        """
        if not self.can_delete:
            return None

        count = self.state.selection_size
        if not confirm(f"Are you sure you want to delete {count} selected items?"):
            return None

        kind = self.state.active_tab
        field = 'names' if kind == VOLUMES else 'ids'
        self.loading = True
        self.error = None
        try:
            response = self.session.delete(
                self._url(kind),
                json={field: self.state.selected},
                timeout=self.timeout,
            )
            if not response.ok:
                raise RuntimeError(DELETE_FAILED)
            results = response.json()['results']
        except Exception as e:
            logger.warning("Delete of %s failed: %s", kind, e)
            self.error = str(e) or 'An error occurred'
            self.loading = False
            return None

        failed = [result for result in results if not result.get('success')]
        self.state.clear_selection()
        self.refresh()
        if failed:
            self.error = f"Failed to delete {len(failed)} items"
        return results
