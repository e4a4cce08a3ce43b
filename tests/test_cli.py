"""Tests for the terminal front end."""
import pytest

from docker_cleaner import cli
from test_dashboard_client import BASE, FakeResponse, _loaded_session


@pytest.fixture
def session(monkeypatch):
    fake = _loaded_session()
    monkeypatch.setattr('docker_cleaner.dashboard.client.requests.Session', lambda: fake)
    return fake


def test_list_images_with_search(session, capsys):
    assert cli.main(['--url', BASE, 'list', 'images', '--search', 'x:latest']) == 0
    out = capsys.readouterr().out
    assert 'REPOSITORY:TAG' in out
    assert 'x:latest' in out


def test_list_sorted_descending(session, capsys):
    session.routes[('GET', f'{BASE}/volumes')] = FakeResponse([
        {'name': 'small', 'driver': 'local', 'size': 1, 'refCount': 0},
        {'name': 'big', 'driver': 'local', 'size': 2048, 'refCount': 1},
    ])
    assert cli.main(['--url', BASE, 'list', 'volumes', '--sort', 'size', '--desc']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1].startswith('big')
    assert lines[2].startswith('small')


def test_list_empty_kind(session, capsys):
    session.routes[('GET', f'{BASE}/networks')] = FakeResponse([])
    assert cli.main(['--url', BASE, 'list', 'networks']) == 0
    assert 'No networks found' in capsys.readouterr().out


def test_usage(session, capsys):
    assert cli.main(['--url', BASE, 'usage']) == 0
    out = capsys.readouterr().out
    assert 'Images' in out
    assert '100 B' in out


def test_refresh_failure_exits_nonzero(session, capsys):
    session.routes[('GET', f'{BASE}/system')] = FakeResponse({'error': 'Failed to fetch system info'}, 500)
    assert cli.main(['--url', BASE, 'usage']) == 1
    assert 'Failed to fetch data' in capsys.readouterr().err


def test_delete_reports_each_outcome(session, capsys):
    session.routes[('DELETE', f'{BASE}/containers')] = FakeResponse({'results': [
        {'id': 'c1', 'success': True},
        {'id': 'c2', 'success': False, 'error': 'container is running'},
    ]})
    assert cli.main(['--url', BASE, 'delete', 'containers', 'c1', 'c2', '--yes']) == 1
    captured = capsys.readouterr()
    assert 'deleted  c1' in captured.out
    assert 'failed   c2: container is running' in captured.out
    assert 'Failed to delete 1 items' in captured.err


def test_delete_aborted_without_confirmation(session, capsys):
    assert cli.main(['--url', BASE, 'delete', 'volumes', 'data'], confirm=lambda message: False) == 0
    assert 'Aborted.' in capsys.readouterr().out
    assert session.deleted == []
