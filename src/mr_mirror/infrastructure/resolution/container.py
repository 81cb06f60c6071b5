"""Functional DI container: builds a fully wired mirror workflow.

Everything a request needs is passed in here; no module-level globals.
"""

from mr_mirror.core.application.ports import VcsPort
from mr_mirror.core.application.workflows.mirror import (
    BranchPreparer,
    CherryPickExecutor,
    CommitSequencer,
    EventValidator,
    MirrorMergeRequestWorkflow,
    OutcomeReporter,
)
from mr_mirror.core.domain.mirroring import BranchMapping
from mr_mirror.infrastructure.common.retry.retry_policy import RetryPolicy
from mr_mirror.infrastructure.configuration.main_settings import Settings
from mr_mirror.infrastructure.entrypoints.api.mappers.merge_event_mapper import MergeEventMapper
from mr_mirror.infrastructure.tools.vcs.gitlab import GitLabHttpClient, GitLabVcsAdapter


def build_vcs(settings: Settings) -> VcsPort:
    return GitLabVcsAdapter(GitLabHttpClient(settings))


def build_branch_mapping(settings: Settings) -> BranchMapping:
    return BranchMapping.from_pairs(settings.branch_mapping_pairs())


def build_mirror_workflow(
    vcs: VcsPort,
    mapping: BranchMapping,
    commit_fetch_max_attempts: int = 1,
) -> MirrorMergeRequestWorkflow:
    return MirrorMergeRequestWorkflow(
        validator=EventValidator(mapping, MergeEventMapper.from_payload),
        preparer=BranchPreparer(vcs),
        sequencer=CommitSequencer(vcs, RetryPolicy(max_attempts=commit_fetch_max_attempts)),
        executor=CherryPickExecutor(vcs),
        reporter=OutcomeReporter(vcs),
    )
