import pytest

from mr_mirror.core.application.exceptions import CommitFetchError
from mr_mirror.core.application.workflows.mirror import CommitSequencer
from mr_mirror.core.domain.delivery import Commit
from mr_mirror.core.domain.merge_event import MergeEvent
from mr_mirror.infrastructure.common.retry.retry_policy import RetryPolicy

EVENT = MergeEvent(
    iid=42,
    title="Fix login",
    description="",
    author_id=11,
    source_project_id=7,
    target_project_id=8,
    source_branch="feature/login",
    target_branch="MASTER",
    action="open",
    url="https://gitlab.example.com/mr/42",
)


@pytest.mark.asyncio
async def test_sequence_reverses_newest_first_listing(fake_vcs, commits):
    sequenced = await CommitSequencer(fake_vcs).sequence(EVENT)

    assert sequenced == commits
    assert fake_vcs.calls_to("list_merge_request_commits") == [{"project_id": 7, "mr_iid": 42}]


@pytest.mark.asyncio
async def test_sequence_of_empty_merge_request(fake_vcs):
    fake_vcs.merge_request_commits.clear()

    assert await CommitSequencer(fake_vcs).sequence(EVENT) == []


@pytest.mark.asyncio
async def test_sequence_raises_commit_fetch_error(fake_vcs):
    fake_vcs.commit_listing_error = "500 Internal Server Error"

    with pytest.raises(CommitFetchError):
        await CommitSequencer(fake_vcs).sequence(EVENT)

    assert len(fake_vcs.calls_to("list_merge_request_commits")) == 1


@pytest.mark.asyncio
async def test_sequence_retries_transient_errors_when_allowed(fake_vcs):
    fake_vcs.commit_listing_error = "503 Service Unavailable"
    policy = RetryPolicy(max_attempts=3, initial_wait=0, max_wait=0)

    with pytest.raises(CommitFetchError):
        await CommitSequencer(fake_vcs, policy).sequence(EVENT)

    assert len(fake_vcs.calls_to("list_merge_request_commits")) == 3


@pytest.mark.asyncio
async def test_sequence_keeps_any_length_reversed(fake_vcs):
    many = [Commit(id=f"c{i}") for i in range(1, 8)]
    fake_vcs.merge_request_commits[(7, 42)] = list(reversed(many))

    assert await CommitSequencer(fake_vcs).sequence(EVENT) == many
