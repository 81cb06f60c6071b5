from dataclasses import dataclass


@dataclass(frozen=True)
class Commit:
    """A commit as reported by the hosting platform. Never built from local state."""

    id: str
    short_id: str = ""
    title: str = ""
    author_name: str = ""
    created_at: str | None = None
