import json

import pytest
from structlog.testing import capture_logs

from mr_mirror.core.domain.mirroring import MirrorState
from mr_mirror.infrastructure.resolution.container import build_mirror_workflow

WORKING_BRANCH = "feature/login_for_Branch_v2.1.1"


@pytest.fixture
def workflow(fake_vcs, branch_mapping):
    return build_mirror_workflow(fake_vcs, branch_mapping)


def _body(payload: dict) -> bytes:
    return json.dumps(payload).encode("utf-8")


@pytest.mark.asyncio
async def test_all_commits_applied_opens_merge_request(workflow, fake_vcs, payload_bytes):
    result = await workflow.execute(payload_bytes)

    assert result.state is MirrorState.DONE
    assert result.outcome.succeeded
    assert fake_vcs.calls_to("create_branch") == [
        {"project_id": 7, "branch_name": WORKING_BRANCH, "ref": "Branch_v2.1.1"}
    ]
    assert [c["commit_id"] for c in fake_vcs.calls_to("cherry_pick_commit")] == ["c1", "c2", "c3"]
    assert fake_vcs.branches[(7, WORKING_BRANCH)] == ["base", "c1", "c2", "c3"]
    [merge_request] = fake_vcs.merge_requests
    assert merge_request["source_branch"] == WORKING_BRANCH
    assert merge_request["target_branch"] == "Branch_v2.1.1"
    assert merge_request["title"] == "CherryPick - Fix login"
    assert fake_vcs.issues == []


@pytest.mark.asyncio
async def test_conflicting_commit_opens_issue(workflow, fake_vcs, payload_bytes):
    fake_vcs.cherry_pick_failures["c2"] = "Sorry, we cannot cherry-pick this commit automatically."

    result = await workflow.execute(payload_bytes)

    assert result.state is MirrorState.DONE
    assert [c.id for c in result.outcome.applied] == ["c1"]
    assert [c.id for c in result.outcome.failed] == ["c2", "c3"]
    assert [c["commit_id"] for c in fake_vcs.calls_to("cherry_pick_commit")] == ["c1", "c2"]
    assert fake_vcs.merge_requests == []
    [issue] = fake_vcs.issues
    assert "  * c1 [applied]\n" in issue["description"]
    assert "  * c2 [failed]: Sorry, we cannot cherry-pick this commit automatically.\n" in issue["description"]
    assert "  * c3 [skipped]\n" in issue["description"]


@pytest.mark.asyncio
async def test_branch_creation_failure_stops_early(workflow, fake_vcs, payload_bytes):
    fake_vcs.branches[(7, WORKING_BRANCH)] = ["stale"]

    result = await workflow.execute(payload_bytes)

    assert result.state is MirrorState.FAILED_EARLY
    assert result.outcome is None
    assert fake_vcs.calls_to("list_merge_request_commits") == []
    assert fake_vcs.calls_to("cherry_pick_commit") == []
    assert fake_vcs.issues == []
    assert fake_vcs.merge_requests == []


@pytest.mark.asyncio
async def test_commit_fetch_failure_stops_early(workflow, fake_vcs, payload_bytes):
    fake_vcs.commit_listing_error = "500 Internal Server Error"

    result = await workflow.execute(payload_bytes)

    assert result.state is MirrorState.FAILED_EARLY
    assert len(fake_vcs.calls_to("create_branch")) == 1
    assert fake_vcs.calls_to("cherry_pick_commit") == []
    assert fake_vcs.issues == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "attributes",
    [
        {"action": "update"},
        {"action": "merge"},
        {"target_branch": "develop"},
        {"action": None},
    ],
)
async def test_non_actionable_events_are_ignored(workflow, fake_vcs, make_payload, attributes):
    result = await workflow.execute(_body(make_payload(**attributes)))

    assert result.state is MirrorState.IGNORED
    assert fake_vcs.calls == []


@pytest.mark.asyncio
async def test_reopen_is_actionable(workflow, fake_vcs, make_payload):
    result = await workflow.execute(_body(make_payload(action="reopen")))

    assert result.state is MirrorState.DONE


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b"", b"not json", b"{", b"[]"])
async def test_malformed_bodies_are_ignored(workflow, fake_vcs, body):
    result = await workflow.execute(body)

    assert result.state is MirrorState.IGNORED
    assert fake_vcs.calls == []


@pytest.mark.asyncio
async def test_empty_merge_request_still_reports(workflow, fake_vcs, payload_bytes):
    fake_vcs.merge_request_commits.clear()

    result = await workflow.execute(payload_bytes)

    assert result.state is MirrorState.DONE
    assert result.outcome.total == 0
    assert len(fake_vcs.merge_requests) == 1


@pytest.mark.asyncio
async def test_reporting_failure_does_not_change_state(workflow, fake_vcs, payload_bytes):
    fake_vcs.merge_request_error = "Another open merge request already exists"

    result = await workflow.execute(payload_bytes)

    assert result.state is MirrorState.DONE
    assert fake_vcs.merge_requests == []


@pytest.mark.asyncio
async def test_early_failure_logs_remote_status(workflow, fake_vcs, payload_bytes):
    fake_vcs.commit_listing_error = "500 Internal Server Error"

    with capture_logs() as logs:
        await workflow.execute(payload_bytes)

    [aborted] = [entry for entry in logs if entry["event"] == "Mirror workflow aborted"]
    assert aborted["error_type"] == "CommitFetchError"
    assert aborted["error_status_code"] == 500
