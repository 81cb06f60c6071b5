import structlog

from mr_mirror.core.application.exceptions import BranchCreationError
from mr_mirror.core.application.ports import VcsPort
from mr_mirror.core.application.ports.common.exceptions import ProviderError
from mr_mirror.core.domain.delivery import WorkingBranchName
from mr_mirror.core.domain.merge_event import MergeEvent

logger = structlog.get_logger()


class BranchPreparer:
    """Creates the working branch ``<source>_for_<downstream>`` at the downstream tip."""

    def __init__(self, vcs: VcsPort) -> None:
        self._vcs = vcs

    async def prepare(self, event: MergeEvent, downstream: str) -> str:
        try:
            name = WorkingBranchName.for_downstream(event.source_branch, downstream)
            created = await self._vcs.create_branch(event.source_project_id, name.value, downstream)
        except (ProviderError, ValueError) as exc:
            raise BranchCreationError(
                f"fail to prepare branch for cherry picking merge request[{event.iid}] "
                f"into {downstream}: {exc}",
                context={"error_status_code": getattr(exc, "status_code", None)},
            ) from exc
        logger.info("Working branch prepared", working_branch=created, downstream_branch=downstream)
        return created
