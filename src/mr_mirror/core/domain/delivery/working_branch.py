from dataclasses import dataclass

_SEPARATOR = "_for_"


@dataclass(frozen=True)
class WorkingBranchName:
    value: str

    def __post_init__(self):
        val = self.value.strip()
        if not val or " " in val:
            raise ValueError("Working branch name must be non-empty and contain no spaces.")

    @classmethod
    def for_downstream(cls, source_branch: str, downstream_branch: str) -> "WorkingBranchName":
        return cls(f"{source_branch}{_SEPARATOR}{downstream_branch}")

    def __str__(self) -> str:
        return self.value
