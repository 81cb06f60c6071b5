from mr_mirror.core.domain.mirroring.branch_mapping import BranchMapping
from mr_mirror.core.domain.mirroring.mirror_state import MirrorResult, MirrorState

__all__ = ["BranchMapping", "MirrorResult", "MirrorState"]
