from dataclasses import dataclass

ACTIONABLE_ACTIONS = frozenset({"open", "reopen"})


@dataclass(frozen=True)
class MergeEvent:
    """One merge request webhook notification, as seen by the mirror."""

    iid: int
    title: str
    description: str
    author_id: int
    source_project_id: int
    target_project_id: int
    source_branch: str
    target_branch: str
    action: str
    url: str

    @property
    def is_actionable_action(self) -> bool:
        return self.action in ACTIONABLE_ACTIONS
