"""Terminal front end for the Docker Cleaner gateway."""
from __future__ import annotations

import argparse
import locale
import os
import sys
from typing import Any, Callable, Dict, List, Sequence, Tuple

from docker_cleaner.dashboard import DashboardClient
from docker_cleaner.dashboard.client import DEFAULT_API_BASE
from docker_cleaner.dashboard.formatting import (
    display_names,
    display_tags,
    format_bytes,
    format_date,
    short_image_id,
)
from docker_cleaner.models import CONTAINERS, IMAGES, NETWORKS, RESOURCE_KINDS, VOLUMES

Column = Tuple[str, Callable[[Dict[str, Any]], str]]

COLUMNS: Dict[str, List[Column]] = {
    CONTAINERS: [
        ('ID', lambda c: c.get('id', '')[:12]),
        ('NAME', lambda c: display_names(c.get('names') or [])),
        ('IMAGE', lambda c: c.get('image', '')),
        ('STATUS', lambda c: c.get('status', '')),
        ('CREATED', lambda c: format_date(c.get('created'))),
        ('SIZE', lambda c: format_bytes(c.get('size'))),
    ],
    IMAGES: [
        ('REPOSITORY:TAG', lambda i: display_tags(i.get('repoTags') or [])),
        ('IMAGE ID', lambda i: short_image_id(i.get('id', ''))),
        ('CREATED', lambda i: format_date(i.get('created'))),
        ('SIZE', lambda i: format_bytes(i.get('size'))),
        ('CONTAINERS', lambda i: str(i.get('containers') or 0)),
    ],
    VOLUMES: [
        ('NAME', lambda v: v.get('name', '')),
        ('DRIVER', lambda v: v.get('driver', '')),
        ('CREATED', lambda v: format_date(v.get('created'))),
        ('SIZE', lambda v: format_bytes(v.get('size'))),
        ('REF COUNT', lambda v: str(v.get('refCount', 0))),
    ],
    NETWORKS: [
        ('ID', lambda n: n.get('id', '')[:12]),
        ('NAME', lambda n: n.get('name', '')),
        ('DRIVER', lambda n: n.get('driver', '')),
        ('SCOPE', lambda n: n.get('scope', '')),
        ('INTERNAL', lambda n: 'Yes' if n.get('internal') else 'No'),
        ('CREATED', lambda n: format_date(n.get('created'))),
    ],
}


def render_table(kind: str, items: Sequence[Dict[str, Any]]) -> str:
    if not items:
        return f"No {kind} found"
    columns = COLUMNS[kind]
    rows = [[render(item) for _, render in columns] for item in items]
    widths = [
        max(len(header), *(len(row[index]) for row in rows))
        for index, (header, _) in enumerate(columns)
    ]
    lines = ['  '.join(header.ljust(widths[i]) for i, (header, _) in enumerate(columns)).rstrip()]
    for row in rows:
        lines.append('  '.join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip())
    return '\n'.join(lines)


def render_usage(system_info: Dict[str, Dict[str, int]]) -> str:
    lines = []
    for kind in (CONTAINERS, IMAGES, VOLUMES):
        usage = system_info.get(kind) or {}
        lines.append(f"{kind.capitalize():<12}{usage.get('count', 0):>6}  {format_bytes(usage.get('size', 0))}")
    return '\n'.join(lines)


def ask(message: str) -> bool:
    answer = input(f"{message} [y/N] ")
    return answer.strip().lower() in ('y', 'yes')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='docker-cleaner', description="List and bulk-delete Docker resources")
    parser.add_argument(
        "--url",
        dest="api_base",
        default=os.getenv('DOCKER_CLEANER_URL', DEFAULT_API_BASE),
        help="Gateway API base URL (default: DOCKER_CLEANER_URL or %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List resources of one kind")
    list_parser.add_argument("kind", choices=RESOURCE_KINDS)
    list_parser.add_argument("--search", default='', help="Case-insensitive filter")
    list_parser.add_argument("--sort", dest="sort_key", default=None, help="Column to sort by, e.g. size or names")
    list_parser.add_argument("--desc", action="store_true", help="Sort descending")

    delete_parser = subparsers.add_parser("delete", help="Delete resources by id (volumes by name)")
    delete_parser.add_argument("kind", choices=RESOURCE_KINDS)
    delete_parser.add_argument("identifiers", nargs="+")
    delete_parser.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")

    subparsers.add_parser("usage", help="Show disk usage per resource kind")
    return parser


def main(argv: Sequence[str] | None = None, confirm: Callable[[str], bool] = ask) -> int:
    try:
        locale.setlocale(locale.LC_COLLATE, '')
    except locale.Error:
        # unsupported LANG/LC_ALL; sorting falls back to the C collation
        pass
    args = build_parser().parse_args(argv)
    client = DashboardClient(args.api_base)

    if args.command == 'delete':
        client.switch_tab(args.kind)
        for identifier in dict.fromkeys(args.identifiers):
            client.state.toggle_item(identifier)
        results = client.delete_selected((lambda _message: True) if args.yes else confirm)
        if results is None:
            if client.error:
                print(f"Error: {client.error}", file=sys.stderr)
                return 1
            print("Aborted.")
            return 0
        key = 'name' if args.kind == VOLUMES else 'id'
        for result in results:
            if result.get('success'):
                print(f"deleted  {result[key]}")
            else:
                print(f"failed   {result[key]}: {result.get('error')}")
        if client.error:
            print(f"Error: {client.error}", file=sys.stderr)
            return 1
        return 0

    if not client.refresh():
        print(f"Error: {client.error}", file=sys.stderr)
        return 1

    if args.command == 'usage':
        print(render_usage(client.system_info or {}))
        return 0

    client.switch_tab(args.kind)
    client.state.set_search(args.search)
    if args.sort_key:
        client.state.toggle_sort(args.sort_key)
        if args.desc:
            client.state.toggle_sort(args.sort_key)
    print(render_table(args.kind, client.visible_items()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
