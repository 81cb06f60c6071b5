import structlog

from mr_mirror.core.application.exceptions import ReportingError
from mr_mirror.core.application.ports import VcsPort
from mr_mirror.core.application.ports.common.exceptions import ProviderError
from mr_mirror.core.application.workflows.mirror.issue_description_builder import (
    IssueDescriptionBuilder,
)
from mr_mirror.core.domain.delivery import CherryPickOutcome
from mr_mirror.core.domain.merge_event import MergeEvent

logger = structlog.get_logger()

MERGE_REQUEST_TITLE_PREFIX = "CherryPick - "


class OutcomeReporter:
    """Files a follow-up merge request on full success, an issue otherwise.

    Reporting failures are logged and swallowed: the cherry-picks already
    applied stay where they are.
    """

    def __init__(self, vcs: VcsPort) -> None:
        self._vcs = vcs

    async def report(
        self,
        event: MergeEvent,
        downstream: str,
        working_branch: str,
        outcome: CherryPickOutcome,
    ) -> str | None:
        """Returns the web URL of the created MR or issue, None when reporting failed."""
        try:
            if outcome.succeeded:
                return await self._open_merge_request(event, downstream, working_branch)
            return await self._open_issue(event, downstream, working_branch, outcome)
        except ReportingError as exc:
            logger.error(
                "Mirror outcome could not be reported",
                error_type=type(exc).__name__,
                error_details=str(exc),
                **exc.context,
            )
            return None

    async def _open_merge_request(self, event: MergeEvent, downstream: str, working_branch: str) -> str:
        try:
            web_url = await self._vcs.create_merge_request(
                project_id=event.target_project_id,
                title=f"{MERGE_REQUEST_TITLE_PREFIX}{event.title}",
                description=event.description,
                source_branch=working_branch,
                target_branch=downstream,
                assignee_id=event.author_id,
                target_project_id=event.target_project_id,
                remove_source_branch=True,
            )
        except ProviderError as exc:
            raise ReportingError(
                f"cherry pick merge request[{event.iid}]({event.title}) into {downstream} "
                f"succeeded, but the merge request could not be created: {exc}",
                context={"report_kind": "merge_request", "error_status_code": exc.status_code},
            ) from exc
        logger.info("Cherry-pick succeeded, merge request created", merge_request_url=web_url)
        return web_url

    async def _open_issue(
        self,
        event: MergeEvent,
        downstream: str,
        working_branch: str,
        outcome: CherryPickOutcome,
    ) -> str:
        try:
            web_url = await self._vcs.create_issue(
                project_id=event.source_project_id,
                title=IssueDescriptionBuilder.build_title(event, downstream),
                description=IssueDescriptionBuilder.build_description(
                    event, downstream, working_branch, outcome
                ),
                assignee_ids=[event.author_id],
                resolves_mr_iid=event.iid,
            )
        except ProviderError as exc:
            raise ReportingError(
                f"cherry pick merge request[{event.iid}]({event.title}) into {downstream} "
                f"failed without issue: {exc}",
                context={"report_kind": "issue", "error_status_code": exc.status_code},
            ) from exc
        logger.info("Cherry-pick failed, issue created", issue_url=web_url)
        return web_url
