from mr_mirror.core.domain.delivery.cherry_pick_outcome import CherryPickOutcome
from mr_mirror.core.domain.delivery.commit import Commit
from mr_mirror.core.domain.delivery.working_branch import WorkingBranchName

__all__ = ["CherryPickOutcome", "Commit", "WorkingBranchName"]
