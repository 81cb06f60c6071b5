from collections.abc import Callable

import structlog

from mr_mirror.core.application.exceptions import MalformedEvent, NotActionable
from mr_mirror.core.domain.merge_event import MergeEvent
from mr_mirror.core.domain.mirroring import BranchMapping

logger = structlog.get_logger()


class EventValidator:
    """Decodes a webhook body and decides whether it warrants mirroring.

    Neither step touches the remote API.
    """

    def __init__(self, mapping: BranchMapping, parser: Callable[[bytes], MergeEvent]) -> None:
        self._mapping = mapping
        self._parser = parser

    def parse(self, raw_payload: bytes) -> MergeEvent:
        try:
            return self._parser(raw_payload)
        except ValueError as exc:
            logger.info("Undecodable merge request event ignored", error_details=str(exc)[:200])
            raise MalformedEvent(str(exc)) from exc

    def admit(self, event: MergeEvent) -> str:
        """Return the downstream branch for ``event`` or raise NotActionable."""
        downstream = self._mapping.downstream_for(event.target_branch)
        if not event.is_actionable_action or not downstream:
            logger.info(
                "Merge request event ignored",
                mr_iid=event.iid,
                action=event.action,
                target_branch=event.target_branch,
            )
            raise NotActionable(
                f"ignore merge request[{event.iid}] event"
                f"{{action={event.action}, target branch={event.target_branch}}}"
            )
        return downstream
