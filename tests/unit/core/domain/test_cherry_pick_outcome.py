import pytest

from mr_mirror.core.domain.delivery import CherryPickOutcome, Commit, WorkingBranchName

COMMITS = [Commit(id="c1"), Commit(id="c2"), Commit(id="c3")]


@pytest.mark.parametrize("fail_index", [0, 1, 2])
def test_split_partitions_sequence_in_order(fail_index):
    outcome = CherryPickOutcome.split(COMMITS, fail_index, RuntimeError("conflict"))

    assert list(outcome.applied) == COMMITS[:fail_index]
    assert list(outcome.failed) == COMMITS[fail_index:]
    assert list(outcome.commits) == COMMITS
    assert outcome.total == len(COMMITS)
    assert outcome.failed_commit == COMMITS[fail_index]
    assert list(outcome.skipped) == COMMITS[fail_index + 1:]
    assert not outcome.succeeded


def test_complete_has_no_failure():
    outcome = CherryPickOutcome.complete(COMMITS)

    assert list(outcome.applied) == COMMITS
    assert outcome.failed == ()
    assert outcome.cause is None
    assert outcome.failed_commit is None
    assert outcome.succeeded


def test_partial_outcome_requires_cause():
    with pytest.raises(ValueError):
        CherryPickOutcome(applied=(), failed=(COMMITS[0],))


def test_successful_outcome_rejects_cause():
    with pytest.raises(ValueError):
        CherryPickOutcome(applied=tuple(COMMITS), cause=RuntimeError("boom"))


def test_working_branch_name_convention():
    name = WorkingBranchName.for_downstream("feature/login", "Branch_v2.1.1")

    assert str(name) == "feature/login_for_Branch_v2.1.1"


def test_working_branch_name_rejects_empty():
    with pytest.raises(ValueError):
        WorkingBranchName("  ")
