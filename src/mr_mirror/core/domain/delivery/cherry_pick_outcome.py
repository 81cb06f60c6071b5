"""Result of applying an ordered commit sequence onto a working branch."""

from dataclasses import dataclass

from mr_mirror.core.domain.delivery.commit import Commit


@dataclass(frozen=True)
class CherryPickOutcome:
    """Order-preserving split of a commit sequence at the first failed cherry-pick.

    ``applied + failed`` always equals the sequence that was attempted.
    When ``failed`` is non-empty its head is the commit that failed with
    ``cause``; the rest were never attempted.
    """

    applied: tuple[Commit, ...]
    failed: tuple[Commit, ...] = ()
    cause: Exception | None = None

    def __post_init__(self):
        if self.failed and self.cause is None:
            raise ValueError("A partial cherry-pick outcome requires the causing error.")
        if not self.failed and self.cause is not None:
            raise ValueError("A successful cherry-pick outcome cannot carry an error.")

    @classmethod
    def split(
        cls, commits: list[Commit] | tuple[Commit, ...], fail_index: int, cause: Exception
    ) -> "CherryPickOutcome":
        return cls(applied=tuple(commits[:fail_index]), failed=tuple(commits[fail_index:]), cause=cause)

    @classmethod
    def complete(cls, commits: list[Commit] | tuple[Commit, ...]) -> "CherryPickOutcome":
        return cls(applied=tuple(commits))

    @property
    def succeeded(self) -> bool:
        return not self.failed

    @property
    def failed_commit(self) -> Commit | None:
        return self.failed[0] if self.failed else None

    @property
    def skipped(self) -> tuple[Commit, ...]:
        return self.failed[1:]

    @property
    def total(self) -> int:
        return len(self.applied) + len(self.failed)

    @property
    def commits(self) -> tuple[Commit, ...]:
        return self.applied + self.failed
