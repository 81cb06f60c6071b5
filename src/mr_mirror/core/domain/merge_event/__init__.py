from mr_mirror.core.domain.merge_event.merge_event import ACTIONABLE_ACTIONS, MergeEvent

__all__ = ["ACTIONABLE_ACTIONS", "MergeEvent"]
