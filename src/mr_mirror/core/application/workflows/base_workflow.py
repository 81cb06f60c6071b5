from abc import ABC, abstractmethod

from mr_mirror.core.domain.mirroring import MirrorResult


class BaseWorkflow(ABC):
    """Abstract base for webhook-driven workflow pipelines."""

    @abstractmethod
    async def execute(self, raw_payload: bytes) -> MirrorResult:
        """Run the full pipeline for one webhook delivery."""
