"""Mirror exception hierarchy.

Every workflow component raises from this tree so the orchestrator can route
on exception type instead of inspecting messages.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application-layer errors in mr-mirror."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class MirrorError(ApplicationError):
    """Base for errors raised while mirroring a merge request."""


class MalformedEvent(MirrorError):
    """The webhook body could not be decoded into a merge event. Soft: answered as ignored."""


class NotActionable(MirrorError):
    """The event decoded fine but does not warrant mirroring. Soft: answered as ignored."""


class BranchCreationError(MirrorError):
    """The working branch could not be created. Fatal to the request."""


class CommitFetchError(MirrorError):
    """The merge request commit list could not be retrieved. Fatal to the request."""


class CherryPickFailure(MirrorError):
    """A single commit could not be applied onto the working branch.

    Partial, not fatal: it becomes the cause of the outcome and switches
    the reporter to the issue path.
    """

    def __init__(self, commit_id: str, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, context=context)
        self.commit_id = commit_id


class ReportingError(MirrorError):
    """The follow-up merge request or issue could not be created. Logged only."""
