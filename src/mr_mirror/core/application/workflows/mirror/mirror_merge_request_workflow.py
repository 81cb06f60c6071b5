"""Mirror pipeline: Validate -> Prepare branch -> Sequence -> Cherry-pick -> Report."""

import structlog
from structlog.contextvars import bind_contextvars

from mr_mirror.core.application.exceptions import (
    BranchCreationError,
    CommitFetchError,
    MalformedEvent,
    NotActionable,
)
from mr_mirror.core.application.workflows.base_workflow import BaseWorkflow
from mr_mirror.core.application.workflows.mirror.branch_preparer import BranchPreparer
from mr_mirror.core.application.workflows.mirror.cherry_pick_executor import CherryPickExecutor
from mr_mirror.core.application.workflows.mirror.commit_sequencer import CommitSequencer
from mr_mirror.core.application.workflows.mirror.event_validator import EventValidator
from mr_mirror.core.application.workflows.mirror.outcome_reporter import OutcomeReporter
from mr_mirror.core.domain.delivery import CherryPickOutcome
from mr_mirror.core.domain.mirroring import MirrorResult, MirrorState
from mr_mirror.infrastructure.observability.tracing_setup import trace_operation

logger = structlog.get_logger()


class MirrorMergeRequestWorkflow(BaseWorkflow):
    """Handles one merge request webhook delivery end to end.

    Holds no per-request state; one instance serves concurrent deliveries.
    """

    def __init__(
        self,
        validator: EventValidator,
        preparer: BranchPreparer,
        sequencer: CommitSequencer,
        executor: CherryPickExecutor,
        reporter: OutcomeReporter,
    ) -> None:
        self._validator = validator
        self._preparer = preparer
        self._sequencer = sequencer
        self._executor = executor
        self._reporter = reporter

    @trace_operation("workflow.mirror")
    async def execute(self, raw_payload: bytes) -> MirrorResult:
        bind_contextvars(event_type="workflow.mirror")
        _transition(MirrorState.RECEIVED)
        try:
            event = self._validator.parse(raw_payload)
            downstream = self._validator.admit(event)
        except (MalformedEvent, NotActionable):
            return self._finish(MirrorState.IGNORED)
        _transition(MirrorState.VALIDATED)

        bind_contextvars(
            mr_iid=event.iid,
            target_branch=event.target_branch,
            downstream_branch=downstream,
            source_project_id=event.source_project_id,
        )
        logger.info("Mirror workflow started", mr_url=event.url, mr_title=event.title)

        try:
            working_branch = await self._preparer.prepare(event, downstream)
            _transition(MirrorState.BRANCH_PREPARED)
            bind_contextvars(working_branch=working_branch)
            commits = await self._sequencer.sequence(event)
            _transition(MirrorState.COMMITS_FETCHED)
        except (BranchCreationError, CommitFetchError) as exc:
            logger.error(
                "Mirror workflow aborted",
                error_type=type(exc).__name__,
                error_details=str(exc),
                **exc.context,
            )
            return self._finish(MirrorState.FAILED_EARLY)

        _transition(MirrorState.PICKING)
        outcome = await self._executor.apply(event.source_project_id, commits, working_branch)
        await self._reporter.report(event, downstream, working_branch, outcome)
        _transition(MirrorState.REPORTED)

        logger.info(
            "Mirror workflow completed",
            applied=len(outcome.applied),
            failed=len(outcome.failed),
            total=outcome.total,
        )
        return self._finish(MirrorState.DONE, outcome)

    @staticmethod
    def _finish(state: MirrorState, outcome: CherryPickOutcome | None = None) -> MirrorResult:
        _transition(state)
        return MirrorResult(state=state, outcome=outcome)


def _transition(state: MirrorState) -> None:
    logger.debug("Mirror state changed", mirror_state=state.value)
