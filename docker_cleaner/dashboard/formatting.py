"""Display helpers shared by the dashboard views."""
from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Iterable, Optional, Union

BYTE_UNITS = ['B', 'KB', 'MB', 'GB', 'TB']

# Engine timestamps may carry nanoseconds, fromisoformat accepts at most six digits
_FRACTION_RE = re.compile(r'(\.\d{6})\d+')


def format_bytes(size: Optional[int]) -> str:
    if not size or size <= 0:
        return '0 B'
    k = 1024
    i = min(int(math.floor(math.log(size) / math.log(k))), len(BYTE_UNITS) - 1)
    value = f"{size / math.pow(k, i):.2f}".rstrip('0').rstrip('.')
    return f"{value} {BYTE_UNITS[i]}"


def parse_timestamp(value: Union[int, float, str, None]) -> Optional[datetime]:
    """Epoch seconds or an engine ISO-8601 string to a local datetime."""
    if value is None or value == '':
        return None
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value)
    text = _FRACTION_RE.sub(r'\1', str(value).strip()).replace('Z', '+00:00')
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed


def format_date(value: Union[int, float, str, None]) -> str:
    parsed = parse_timestamp(value)
    if parsed is None:
        return 'N/A'
    return parsed.strftime('%Y-%m-%d %H:%M:%S')


def display_names(names: Iterable[str]) -> str:
    return ', '.join(name.replace('/', '', 1) for name in names)


def short_image_id(image_id: str) -> str:
    return image_id[7:19] if image_id.startswith('sha256:') else image_id[:12]


def display_tags(repo_tags: Iterable[str]) -> str:
    tags = list(repo_tags)
    return ', '.join(tags) if tags else '<none>'
