from abc import ABC, abstractmethod

from mr_mirror.core.domain.delivery import Commit


class VcsPort(ABC):
    """Remote hosting operations the mirror depends on.

    Implementations raise ``ProviderError`` on any remote failure.
    """

    @abstractmethod
    async def create_branch(self, project_id: int, branch_name: str, ref: str) -> str:
        """Creates ``branch_name`` from ``ref``. Returns the created branch name."""
        pass

    @abstractmethod
    async def list_merge_request_commits(self, project_id: int, mr_iid: int) -> list[Commit]:
        """Lists every commit of the merge request, newest first."""
        pass

    @abstractmethod
    async def cherry_pick_commit(self, project_id: int, commit_id: str, branch_name: str) -> Commit:
        """Applies ``commit_id`` onto ``branch_name``. Returns the new commit."""
        pass

    @abstractmethod
    async def create_issue(
        self,
        project_id: int,
        title: str,
        description: str,
        assignee_ids: list[int],
        resolves_mr_iid: int,
    ) -> str:
        """Opens an issue. Returns the issue web URL."""
        pass

    @abstractmethod
    async def create_merge_request(
        self,
        project_id: int,
        title: str,
        description: str,
        source_branch: str,
        target_branch: str,
        assignee_id: int,
        target_project_id: int,
        remove_source_branch: bool = True,
    ) -> str:
        """Opens a merge request. Returns the MR web URL."""
        pass
