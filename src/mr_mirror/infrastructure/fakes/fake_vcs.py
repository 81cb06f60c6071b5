from dataclasses import dataclass, field
from typing import Any

from mr_mirror.core.application.ports import VcsPort
from mr_mirror.core.application.ports.common.exceptions import ProviderError
from mr_mirror.core.domain.delivery import Commit


@dataclass
class FakeVcs(VcsPort):
    """
    In-memory VcsPort for tests and local dry runs.
    Seed ``branches`` and ``merge_request_commits`` (newest first, as GitLab
    lists them) and flip the failure switches to exercise error paths.
    """

    branches: dict[tuple[int, str], list[str]] = field(default_factory=dict)
    merge_request_commits: dict[tuple[int, int], list[Commit]] = field(default_factory=dict)
    cherry_pick_failures: dict[str, str] = field(default_factory=dict)
    branch_creation_error: str | None = None
    commit_listing_error: str | None = None
    issue_error: str | None = None
    merge_request_error: str | None = None
    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=list)
    issues: list[dict[str, Any]] = field(default_factory=list)
    merge_requests: list[dict[str, Any]] = field(default_factory=list)

    def calls_to(self, operation: str) -> list[dict[str, Any]]:
        return [kwargs for name, kwargs in self.calls if name == operation]

    async def create_branch(self, project_id: int, branch_name: str, ref: str) -> str:
        self.calls.append(("create_branch", {"project_id": project_id, "branch_name": branch_name, "ref": ref}))
        if self.branch_creation_error:
            raise ProviderError(provider="fake", message=self.branch_creation_error, status_code=400)
        if (project_id, branch_name) in self.branches:
            raise ProviderError(provider="fake", message="Branch already exists", status_code=400)
        if (project_id, ref) not in self.branches:
            raise ProviderError(provider="fake", message="Invalid reference name", status_code=400)
        self.branches[(project_id, branch_name)] = list(self.branches[(project_id, ref)])
        return branch_name

    async def list_merge_request_commits(self, project_id: int, mr_iid: int) -> list[Commit]:
        self.calls.append(("list_merge_request_commits", {"project_id": project_id, "mr_iid": mr_iid}))
        if self.commit_listing_error:
            raise ProviderError(provider="fake", message=self.commit_listing_error, status_code=500, retryable=True)
        return list(self.merge_request_commits.get((project_id, mr_iid), []))

    async def cherry_pick_commit(self, project_id: int, commit_id: str, branch_name: str) -> Commit:
        self.calls.append(
            ("cherry_pick_commit", {"project_id": project_id, "commit_id": commit_id, "branch_name": branch_name})
        )
        if commit_id in self.cherry_pick_failures:
            raise ProviderError(provider="fake", message=self.cherry_pick_failures[commit_id], status_code=400)
        if (project_id, branch_name) not in self.branches:
            raise ProviderError(provider="fake", message="Branch Not Found", status_code=404)
        self.branches[(project_id, branch_name)].append(commit_id)
        return Commit(id=f"picked-{commit_id}")

    async def create_issue(
        self,
        project_id: int,
        title: str,
        description: str,
        assignee_ids: list[int],
        resolves_mr_iid: int,
    ) -> str:
        issue = {
            "project_id": project_id,
            "title": title,
            "description": description,
            "assignee_ids": assignee_ids,
            "resolves_mr_iid": resolves_mr_iid,
        }
        self.calls.append(("create_issue", issue))
        if self.issue_error:
            raise ProviderError(provider="fake", message=self.issue_error, status_code=500)
        self.issues.append(issue)
        return f"https://gitlab.example.com/issues/{len(self.issues)}"

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
        merge_request = {
            "project_id": project_id,
            "title": title,
            "description": description,
            "source_branch": source_branch,
            "target_branch": target_branch,
            "assignee_id": assignee_id,
            "target_project_id": target_project_id,
            "remove_source_branch": remove_source_branch,
        }
        self.calls.append(("create_merge_request", merge_request))
        if self.merge_request_error:
            raise ProviderError(provider="fake", message=self.merge_request_error, status_code=409)
        self.merge_requests.append(merge_request)
        return f"https://gitlab.example.com/merge_requests/{len(self.merge_requests)}"
