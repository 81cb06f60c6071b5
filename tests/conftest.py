import json

import pytest

from mr_mirror.core.domain.delivery import Commit
from mr_mirror.core.domain.mirroring import BranchMapping
from mr_mirror.infrastructure.configuration.main_settings import Settings
from mr_mirror.infrastructure.fakes.fake_vcs import FakeVcs

SOURCE_PROJECT_ID = 7
TARGET_PROJECT_ID = 8
MR_IID = 42


@pytest.fixture
def settings():
    return Settings(
        gitlab_base_url="https://gitlab.example.com",
        gitlab_token="mock_gl_token",
        branch_mappings="MASTER=Branch_v2.1.1,Branch_v2.0=MASTER",
        app_name="TestMirror",
        gitlab_webhook_secret=None,
    )


@pytest.fixture
def branch_mapping():
    return BranchMapping.from_pairs(["MASTER=Branch_v2.1.1", "Branch_v2.0=MASTER"])


@pytest.fixture
def commits():
    """Oldest first, the order cherry-picks must be applied in."""
    return [Commit(id="c1"), Commit(id="c2"), Commit(id="c3")]


@pytest.fixture
def fake_vcs(commits):
    return FakeVcs(
        branches={(SOURCE_PROJECT_ID, "Branch_v2.1.1"): ["base"], (SOURCE_PROJECT_ID, "MASTER"): ["base"]},
        merge_request_commits={(SOURCE_PROJECT_ID, MR_IID): list(reversed(commits))},
    )


@pytest.fixture
def make_payload():
    def _make(**attributes):
        object_attributes = {
            "iid": MR_IID,
            "title": "Fix login",
            "description": "Fixes the login redirect",
            "author_id": 11,
            "source_project_id": SOURCE_PROJECT_ID,
            "target_project_id": TARGET_PROJECT_ID,
            "source_branch": "feature/login",
            "target_branch": "MASTER",
            "action": "open",
            "url": "https://gitlab.example.com/group/app/-/merge_requests/42",
        }
        object_attributes.update(attributes)
        return {
            "object_kind": "merge_request",
            "user": {"id": 11, "username": "dev", "name": "Dev"},
            "object_attributes": object_attributes,
        }

    return _make


@pytest.fixture
def payload_bytes(make_payload):
    return json.dumps(make_payload()).encode("utf-8")
