"""Tests for record projections."""
from docker_cleaner.models import (
    ContainerRecord,
    ImageRecord,
    NetworkRecord,
    RemovalOutcome,
    UsageSummary,
    non_negative,
)


def test_non_negative():
    assert non_negative(None) == 0
    assert non_negative(-1) == 0
    assert non_negative('12') == 12
    assert non_negative('x') == 0


def test_container_record_defaults():
    record = ContainerRecord.from_engine({'Id': 'abc'})
    assert record.to_dict() == {
        'id': 'abc', 'names': [], 'image': '', 'state': '', 'status': '', 'created': 0, 'size': 0,
    }


def test_image_record_drops_none_placeholder_tag():
    record = ImageRecord.from_engine({'Id': 'sha256:x', 'RepoTags': ['<none>:<none>'], 'Size': 3})
    assert record.repo_tags == []
    assert record.virtual_size == 3


def test_network_record_internal_flag():
    assert NetworkRecord.from_engine({'Id': 'n', 'Internal': True}).internal is True


def test_removal_outcome_payloads():
    assert RemovalOutcome.ok('c1').to_dict() == {'id': 'c1', 'success': True}
    assert RemovalOutcome.failed('v', 'in use', key='name').to_dict() == {
        'name': 'v', 'success': False, 'error': 'in use',
    }


def test_usage_summary_defaults_to_zero():
    assert UsageSummary().to_dict() == {
        'containers': {'count': 0, 'size': 0},
        'images': {'count': 0, 'size': 0},
        'volumes': {'count': 0, 'size': 0},
    }
