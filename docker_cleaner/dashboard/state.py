"""Table state for the dashboard: active tab, search, sort and selection."""
from __future__ import annotations

import locale
import unicodedata
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Dict, Iterable, List, Optional

from docker_cleaner.models import CONTAINERS, IMAGES, NETWORKS, RESOURCE_KINDS, VOLUMES

ASC = 'asc'
DESC = 'desc'

Item = Dict[str, Any]


@dataclass(frozen=True)
class SortConfig:
    key: str
    direction: str = ASC


def item_key(kind: str, item: Item) -> str:
    """Identifier used for selection and deletion: name for volumes, id otherwise."""
    if kind == VOLUMES:
        return item.get('name', '')
    return item.get('id', '')


def strip_name(name: str) -> str:
    """Drop the leading '/' the engine puts on container names."""
    return name.replace('/', '', 1) if name else ''


def sort_value(kind: str, item: Item, key: str) -> Any:
    """Scalar to compare for a column, substituting derived values."""
    if key in ('name', 'names'):
        if kind == CONTAINERS:
            names = item.get('names') or []
            return strip_name(names[0]) if names else ''
        if kind in (VOLUMES, NETWORKS):
            value = item.get('name')
            return '' if value is None else value
    elif key == 'repoTags':
        tags = item.get('repoTags') or []
        return tags[0] if tags else ''

    value = item.get(key)
    return '' if value is None else value


def _sign(number) -> int:
    return (number > 0) - (number < 0)


def collation_key(value: str) -> str:
    """Case- and accent-insensitive primary key, so 'éclair' sorts with 'e'."""
    decomposed = unicodedata.normalize('NFKD', value)
    return ''.join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def compare_text(a: str, b: str) -> int:
    primary_a, primary_b = collation_key(a), collation_key(b)
    if primary_a != primary_b:
        return _sign(locale.strcoll(primary_a, primary_b))
    return _sign(locale.strcoll(a.lower(), b.lower()))


def compare_values(a: Any, b: Any) -> int:
    """Type-aware comparison.

    Strings compare ignoring case and accents, with the locale breaking ties.
    Numbers compare by difference and booleans put False first. Anything else
    compares as strings.
    """
    if isinstance(a, bool) and isinstance(b, bool):
        return 0 if a == b else (1 if a else -1)
    if isinstance(a, str) and isinstance(b, str):
        return compare_text(a, b)
    if (isinstance(a, (int, float)) and not isinstance(a, bool)
            and isinstance(b, (int, float)) and not isinstance(b, bool)):
        return _sign(a - b)
    return compare_text(str(a), str(b))


def matches_search(kind: str, item: Item, term: str) -> bool:
    needle = term.lower()

    def has(value) -> bool:
        return needle in (value or '').lower()

    if kind == CONTAINERS:
        return (any(has(name) for name in item.get('names') or [])
                or has(item.get('image'))
                or has(item.get('status')))
    if kind == IMAGES:
        return any(has(tag) for tag in item.get('repoTags') or []) or has(item.get('id'))
    if kind in (VOLUMES, NETWORKS):
        return has(item.get('name')) or has(item.get('driver'))
    return False


class TableState:
    """Interaction state for the resource table.

    Holds the active kind, search text, sort column/direction and the ordered
    set of selected identifiers. Displayed rows are always derived from this
    state plus the last fetched items: filter first, then sort.
    """

    def __init__(self, active_tab: str = CONTAINERS):
        if active_tab not in RESOURCE_KINDS:
            raise ValueError(f"Unknown resource kind: {active_tab}")
        self.active_tab = active_tab
        self.search_term = ''
        self.sort_config: Optional[SortConfig] = None
        self._selected: Dict[str, None] = {}

    @property
    def selected(self) -> List[str]:
        return list(self._selected)

    @property
    def selection_size(self) -> int:
        return len(self._selected)

    def is_selected(self, identifier: str) -> bool:
        return identifier in self._selected

    def switch_tab(self, kind: str) -> None:
        """Activate a resource kind and reset search, sort and selection."""
        if kind not in RESOURCE_KINDS:
            raise ValueError(f"Unknown resource kind: {kind}")
        self.active_tab = kind
        self.clear_selection()
        self.search_term = ''
        self.sort_config = None

    def set_search(self, term: str) -> None:
        self.search_term = term or ''

    def toggle_sort(self, key: str) -> SortConfig:
        direction = ASC
        if self.sort_config and self.sort_config.key == key and self.sort_config.direction == ASC:
            direction = DESC
        self.sort_config = SortConfig(key, direction)
        return self.sort_config

    def filter_items(self, items: Iterable[Item]) -> List[Item]:
        items = list(items)
        if not self.search_term:
            return items
        return [item for item in items if matches_search(self.active_tab, item, self.search_term)]

    def sort_items(self, items: Iterable[Item]) -> List[Item]:
        items = list(items)
        if not self.sort_config:
            return items

        key = self.sort_config.key
        descending = self.sort_config.direction == DESC

        def compare(a: Item, b: Item) -> int:
            result = compare_values(sort_value(self.active_tab, a, key), sort_value(self.active_tab, b, key))
            return -result if descending else result

        # sorted() is stable, so equal rows keep their fetched order
        return sorted(items, key=cmp_to_key(compare))

    def visible_items(self, items: Iterable[Item]) -> List[Item]:
        return self.sort_items(self.filter_items(items))

    def toggle_item(self, identifier: str) -> None:
        if identifier in self._selected:
            del self._selected[identifier]
        else:
            self._selected[identifier] = None

    def all_visible_selected(self, visible: List[Item]) -> bool:
        return bool(visible) and all(
            item_key(self.active_tab, item) in self._selected for item in visible
        )

    def toggle_select_all(self, visible: List[Item]) -> None:
        """Toggle selection of the visible rows.

        When every visible row is already selected only those rows are
        deselected; selections hidden by the search stay. Otherwise the
        selection becomes exactly the visible rows (or is cleared when its
        size already equals the visible count).
        """
        visible_ids = [item_key(self.active_tab, item) for item in visible]
        if visible_ids and self.all_visible_selected(visible):
            for identifier in visible_ids:
                self._selected.pop(identifier, None)
        elif self.selection_size == len(visible_ids):
            self.clear_selection()
        else:
            self._selected = dict.fromkeys(visible_ids)

    def clear_selection(self) -> None:
        self._selected = {}
