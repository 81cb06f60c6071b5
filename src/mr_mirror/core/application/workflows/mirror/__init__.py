from mr_mirror.core.application.workflows.mirror.branch_preparer import BranchPreparer
from mr_mirror.core.application.workflows.mirror.cherry_pick_executor import CherryPickExecutor
from mr_mirror.core.application.workflows.mirror.commit_sequencer import CommitSequencer
from mr_mirror.core.application.workflows.mirror.event_validator import EventValidator
from mr_mirror.core.application.workflows.mirror.mirror_merge_request_workflow import (
    MirrorMergeRequestWorkflow,
)
from mr_mirror.core.application.workflows.mirror.outcome_reporter import OutcomeReporter

__all__ = [
    "BranchPreparer",
    "CherryPickExecutor",
    "CommitSequencer",
    "EventValidator",
    "MirrorMergeRequestWorkflow",
    "OutcomeReporter",
]
