import json

import pytest

from mr_mirror.infrastructure.entrypoints.api.mappers.merge_event_mapper import MergeEventMapper


def test_maps_object_attributes(payload_bytes):
    event = MergeEventMapper.from_payload(payload_bytes)

    assert event.iid == 42
    assert event.title == "Fix login"
    assert event.author_id == 11
    assert event.source_project_id == 7
    assert event.target_project_id == 8
    assert event.source_branch == "feature/login"
    assert event.target_branch == "MASTER"
    assert event.action == "open"
    assert event.url.endswith("/merge_requests/42")


def test_unknown_fields_are_ignored(make_payload):
    payload = make_payload(state="opened", merge_status="can_be_merged")
    payload["project"] = {"id": 7, "web_url": "https://gitlab.example.com/group/app"}

    event = MergeEventMapper.from_payload(json.dumps(payload).encode())

    assert event.iid == 42


def test_null_description_and_action_become_empty(make_payload):
    payload = make_payload(description=None, action=None)

    event = MergeEventMapper.from_payload(json.dumps(payload).encode())

    assert event.description == ""
    assert event.action == ""
    assert not event.is_actionable_action


def test_missing_attributes_decode_to_empty_event():
    event = MergeEventMapper.from_payload(b'{"object_kind": "merge_request"}')

    assert event.target_branch == ""
    assert event.iid == 0


@pytest.mark.parametrize(
    "body",
    [b"", b"{not json", b"[1, 2]", b'{"object_attributes": {"iid": "forty-two"}}'],
)
def test_undecodable_bodies_raise_value_error(body):
    with pytest.raises(ValueError):
        MergeEventMapper.from_payload(body)
