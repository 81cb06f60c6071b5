"""Target branch -> downstream branch lookup table."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class BranchMapping:
    """Read-only table telling which downstream branch mirrors a target branch.

    Built once at startup and shared by every request.
    """

    _pairs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "_pairs", MappingProxyType(dict(self._pairs)))

    @classmethod
    def from_pairs(cls, pairs: Iterable[str]) -> "BranchMapping":
        """Parse ``branch=downstream`` strings.

        Anything that does not split into exactly two non-empty sides is
        skipped. A repeated branch keeps its last downstream.
        """
        table: dict[str, str] = {}
        for raw in pairs:
            parts = raw.strip().split("=")
            if len(parts) != 2:
                continue
            branch, downstream = parts[0].strip(), parts[1].strip()
            if branch and downstream:
                table[branch] = downstream
        return cls(table)

    def downstream_for(self, target_branch: str) -> str | None:
        return self._pairs.get(target_branch) or None

    def as_dict(self) -> dict[str, str]:
        return dict(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)
