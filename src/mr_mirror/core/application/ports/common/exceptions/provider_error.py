from __future__ import annotations

from dataclasses import dataclass

from mr_mirror.core.application.ports.common.exceptions.infra_error import InfraError


@dataclass(frozen=False, eq=False)
class ProviderError(InfraError):
    """A remote hosting API call failed."""

    provider: str
    message: str
    retryable: bool = False
    status_code: int | None = None
    operation: str | None = None

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.provider}: {self.message}{code}"
