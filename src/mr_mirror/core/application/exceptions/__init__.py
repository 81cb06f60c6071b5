from mr_mirror.core.application.exceptions.mirror_exceptions import (
    ApplicationError,
    BranchCreationError,
    CherryPickFailure,
    CommitFetchError,
    MalformedEvent,
    MirrorError,
    NotActionable,
    ReportingError,
)

__all__ = [
    "ApplicationError",
    "BranchCreationError",
    "CherryPickFailure",
    "CommitFetchError",
    "MalformedEvent",
    "MirrorError",
    "NotActionable",
    "ReportingError",
]
