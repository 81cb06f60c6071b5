from dataclasses import dataclass
from enum import Enum

from mr_mirror.core.domain.delivery.cherry_pick_outcome import CherryPickOutcome


class MirrorState(str, Enum):
    RECEIVED = "received"
    VALIDATED = "validated"
    BRANCH_PREPARED = "branch_prepared"
    COMMITS_FETCHED = "commits_fetched"
    PICKING = "picking"
    REPORTED = "reported"
    DONE = "done"
    IGNORED = "ignored"
    FAILED_EARLY = "failed_early"

    @property
    def is_terminal(self) -> bool:
        return self in (MirrorState.DONE, MirrorState.IGNORED, MirrorState.FAILED_EARLY)


@dataclass(frozen=True)
class MirrorResult:
    """Terminal state of one webhook delivery plus the cherry-pick outcome, if any."""

    state: MirrorState
    outcome: CherryPickOutcome | None = None

    def __post_init__(self):
        if not self.state.is_terminal:
            raise ValueError(f"MirrorResult requires a terminal state, got '{self.state.value}'")
