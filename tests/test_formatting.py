"""Tests for display helpers."""
from datetime import datetime

from docker_cleaner.dashboard.formatting import (
    display_names,
    display_tags,
    format_bytes,
    format_date,
    parse_timestamp,
    short_image_id,
)


def test_format_bytes():
    assert format_bytes(0) == '0 B'
    assert format_bytes(None) == '0 B'
    assert format_bytes(512) == '512 B'
    assert format_bytes(1024) == '1 KB'
    assert format_bytes(1536) == '1.5 KB'
    assert format_bytes(5 * 1024 ** 3) == '5 GB'
    assert format_bytes(2 * 1024 ** 5) == '2048 TB'


def test_parse_timestamp_handles_engine_formats():
    assert parse_timestamp(0) == datetime.fromtimestamp(0)
    parsed = parse_timestamp('2024-01-02T03:04:05.123456789Z')
    assert parsed is not None
    assert parsed.tzinfo is not None
    assert parse_timestamp('not a date') is None
    assert parse_timestamp('') is None


def test_format_date_missing_value():
    assert format_date(None) == 'N/A'
    assert format_date(1700000000) == datetime.fromtimestamp(1700000000).strftime('%Y-%m-%d %H:%M:%S')


def test_display_helpers():
    assert display_names(['/web', '/web-alias']) == 'web, web-alias'
    assert short_image_id('sha256:0123456789abcdef0123') == '0123456789ab'
    assert display_tags([]) == '<none>'
    assert display_tags(['a:1', 'b:2']) == 'a:1, b:2'
