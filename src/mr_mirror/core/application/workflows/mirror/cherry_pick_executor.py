import structlog

from mr_mirror.core.application.exceptions import CherryPickFailure
from mr_mirror.core.application.ports import VcsPort
from mr_mirror.core.application.ports.common.exceptions import ProviderError
from mr_mirror.core.domain.delivery import CherryPickOutcome, Commit

logger = structlog.get_logger()


class CherryPickExecutor:
    """Applies commits one by one onto the working branch, halting at the first failure.

    Each pick is computed against the branch left by the previous one, so the
    loop is strictly sequential. Commits after the failing one are never tried.
    """

    def __init__(self, vcs: VcsPort) -> None:
        self._vcs = vcs

    async def apply(
        self, project_id: int, commits: list[Commit], branch_name: str
    ) -> CherryPickOutcome:
        for index, commit in enumerate(commits):
            try:
                await self._vcs.cherry_pick_commit(project_id, commit.id, branch_name)
            except ProviderError as exc:
                failure = CherryPickFailure(
                    commit.id,
                    exc.message,
                    context={"fail_index": index, "error_status_code": exc.status_code},
                )
                logger.warning(
                    "Cherry-pick failed, remaining commits skipped",
                    commit_id=commit.id,
                    skipped=len(commits) - index - 1,
                    error_type=type(failure).__name__,
                    error_details=exc.message,
                    **failure.context,
                )
                return CherryPickOutcome.split(commits, index, failure)
            logger.info("Commit cherry-picked", commit_id=commit.id, index=index)
        return CherryPickOutcome.complete(commits)
