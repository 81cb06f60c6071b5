import structlog

from mr_mirror.core.application.exceptions import CommitFetchError
from mr_mirror.core.application.ports import VcsPort
from mr_mirror.core.application.ports.common.exceptions import ProviderError
from mr_mirror.core.domain.delivery import Commit
from mr_mirror.core.domain.merge_event import MergeEvent
from mr_mirror.infrastructure.common.retry.retry_policy import RetryPolicy

logger = structlog.get_logger()


class CommitSequencer:
    """Fetches the merge request commits and orders them oldest first.

    The remote lists newest first; cherry-picks have to replay authorship order.
    """

    def __init__(self, vcs: VcsPort, retry_policy: RetryPolicy | None = None) -> None:
        self._vcs = vcs
        self._retry_policy = retry_policy or RetryPolicy()

    async def sequence(self, event: MergeEvent) -> list[Commit]:
        try:
            newest_first = await self._retry_policy.run(
                lambda: self._vcs.list_merge_request_commits(event.source_project_id, event.iid)
            )
        except ProviderError as exc:
            raise CommitFetchError(
                f"fail to list commits of merge request[{event.iid}]: {exc}",
                context={"error_status_code": exc.status_code},
            ) from exc

        commits = list(reversed(newest_first))
        if not commits:
            logger.warning("Merge request has no commits", mr_iid=event.iid)
        logger.info("Commits sequenced", commit_count=len(commits))
        return commits
