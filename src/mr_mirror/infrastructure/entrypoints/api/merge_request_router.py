import time

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from mr_mirror.core.application.workflows.mirror import MirrorMergeRequestWorkflow
from mr_mirror.core.domain.mirroring import MirrorResult, MirrorState
from mr_mirror.infrastructure.entrypoints.api.security import validate_gitlab_token
from mr_mirror.infrastructure.observability.metrics_service import (
    CHERRY_PICKS_TOTAL,
    EVENTS_TOTAL,
    MIRROR_DURATION_SECONDS,
)
from mr_mirror.infrastructure.observability.redaction_service import redact_text

logger = structlog.get_logger()
router = APIRouter()

_RESPONSES: dict[MirrorState, tuple[str, int]] = {
    MirrorState.IGNORED: ("ignored", 200),
    MirrorState.FAILED_EARLY: ("failed", 500),
    MirrorState.DONE: ("ok", 200),
}


def get_workflow(request: Request) -> MirrorMergeRequestWorkflow:
    return request.app.state.mirror_workflow


@router.post(
    "/mergerequests",
    response_class=PlainTextResponse,
    dependencies=[Depends(validate_gitlab_token)],
)
async def mirror_merge_request(
    request: Request,
    workflow: MirrorMergeRequestWorkflow = Depends(get_workflow),
) -> PlainTextResponse:
    body = await request.body()
    logger.debug(
        "Raw merge request webhook payload received",
        raw_payload=redact_text(body.decode("utf-8", errors="replace")),
    )
    start = time.perf_counter()
    try:
        result = await workflow.execute(body)
    except Exception as exc:
        logger.error(
            "Router error in merge request mirror",
            processing_status="ERROR",
            error_type=type(exc).__name__,
            error_details=str(exc),
        )
        result = MirrorResult(state=MirrorState.FAILED_EARLY)
    finally:
        MIRROR_DURATION_SECONDS.observe(time.perf_counter() - start)

    _record_outcome(result)
    text, status_code = _RESPONSES[result.state]
    return PlainTextResponse(text, status_code=status_code)


def _record_outcome(result: MirrorResult) -> None:
    """Record Prometheus counters for a finished delivery."""
    if result.state is MirrorState.IGNORED:
        EVENTS_TOTAL.labels(outcome="ignored").inc()
        return
    if result.outcome is None:
        EVENTS_TOTAL.labels(outcome="failed").inc()
        return
    CHERRY_PICKS_TOTAL.labels(outcome="applied").inc(len(result.outcome.applied))
    if result.outcome.succeeded:
        EVENTS_TOTAL.labels(outcome="mirrored").inc()
    else:
        CHERRY_PICKS_TOTAL.labels(outcome="failed").inc()
        EVENTS_TOTAL.labels(outcome="partial").inc()
