import urllib.parse
from collections.abc import Awaitable
from typing import Any

import httpx
import structlog

from mr_mirror.core.application.ports import VcsPort
from mr_mirror.core.application.ports.common.exceptions import ProviderError
from mr_mirror.core.domain.delivery import Commit
from mr_mirror.infrastructure.observability.metrics_service import GITLAB_CALLS_TOTAL
from mr_mirror.infrastructure.tools.vcs.gitlab.gitlab_http_client import GitLabHttpClient

logger = structlog.get_logger()

_PROVIDER = "gitlab"
_COMMITS_PER_PAGE = 100


class GitLabVcsAdapter(VcsPort):
    """VcsPort over the GitLab REST v4 API. Every failure surfaces as ProviderError."""

    def __init__(self, client: GitLabHttpClient):
        self.client = client

    async def create_branch(self, project_id: int, branch_name: str, ref: str) -> str:
        path = f"projects/{project_id}/repository/branches"
        logger.info("Creating GitLab branch", branch=branch_name, ref=ref, project_id=project_id)
        payload = {"branch": branch_name, "ref": ref}
        data = await self._call("create_branch", self.client.post(path, payload))
        return data.get("name", branch_name)

    async def list_merge_request_commits(self, project_id: int, mr_iid: int) -> list[Commit]:
        path = f"projects/{project_id}/merge_requests/{mr_iid}/commits"
        commits: list[Commit] = []
        page: str | None = "1"
        while page:
            params = {"per_page": _COMMITS_PER_PAGE, "page": page}
            response = await self._request(
                "list_merge_request_commits", self.client.get(path, params=params)
            )
            items = _decode_json("list_merge_request_commits", response)
            if not isinstance(items, list):
                raise ProviderError(
                    provider=_PROVIDER,
                    message="commit listing did not return a list",
                    status_code=response.status_code,
                    operation="list_merge_request_commits",
                )
            commits.extend(self._to_commit(item) for item in items)
            page = response.headers.get("X-Next-Page") or None
        logger.info("Merge request commits listed", mr_iid=mr_iid, commit_count=len(commits))
        return commits

    async def cherry_pick_commit(self, project_id: int, commit_id: str, branch_name: str) -> Commit:
        sha = urllib.parse.quote(commit_id, safe="")
        path = f"projects/{project_id}/repository/commits/{sha}/cherry_pick"
        data = await self._call("cherry_pick_commit", self.client.post(path, {"branch": branch_name}))
        return self._to_commit(data, fallback_id=commit_id)

    async def create_issue(
        self,
        project_id: int,
        title: str,
        description: str,
        assignee_ids: list[int],
        resolves_mr_iid: int,
    ) -> str:
        payload = {
            "title": title,
            "description": description,
            "assignee_ids": assignee_ids,
            "merge_request_to_resolve_discussions_of": resolves_mr_iid,
        }
        data = await self._call("create_issue", self.client.post(f"projects/{project_id}/issues", payload))
        return data.get("web_url", "")

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
        payload = {
            "title": title,
            "description": description,
            "source_branch": source_branch,
            "target_branch": target_branch,
            "assignee_id": assignee_id,
            "target_project_id": target_project_id,
            "remove_source_branch": remove_source_branch,
        }
        path = f"projects/{project_id}/merge_requests"
        data = await self._call("create_merge_request", self.client.post(path, payload))
        return data.get("web_url", "")

    # ── Helpers ────────────────────────────────────────────────────────

    async def _call(self, operation: str, pending: Awaitable[httpx.Response]) -> Any:
        response = await self._request(operation, pending)
        return _decode_json(operation, response)

    async def _request(self, operation: str, pending: Awaitable[httpx.Response]) -> httpx.Response:
        """Await a client call, raising ProviderError on transport or HTTP failure."""
        try:
            response = await pending
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            GITLAB_CALLS_TOTAL.labels(operation=operation, outcome="error").inc()
            status_code = exc.response.status_code
            raise ProviderError(
                provider=_PROVIDER,
                message=_extract_error_message(exc.response),
                retryable=status_code >= 500 or status_code == 429,
                status_code=status_code,
                operation=operation,
            ) from exc
        except httpx.HTTPError as exc:
            GITLAB_CALLS_TOTAL.labels(operation=operation, outcome="error").inc()
            raise ProviderError(
                provider=_PROVIDER,
                message=f"{type(exc).__name__}: {exc}",
                retryable=True,
                operation=operation,
            ) from exc
        GITLAB_CALLS_TOTAL.labels(operation=operation, outcome="success").inc()
        return response

    @staticmethod
    def _to_commit(item: dict[str, Any], fallback_id: str = "") -> Commit:
        return Commit(
            id=item.get("id") or fallback_id,
            short_id=item.get("short_id", ""),
            title=item.get("title", ""),
            author_name=item.get("author_name", ""),
            created_at=item.get("created_at"),
        )


def _decode_json(operation: str, response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise ProviderError(
            provider=_PROVIDER,
            message=f"unexpected non-JSON response: {response.text[:200]}",
            status_code=response.status_code,
            operation=operation,
        ) from exc


def _extract_error_message(response: httpx.Response) -> str:
    """GitLab answers errors as {"message": ...} or {"error": ...}; fall back to the raw body."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if message:
            return message if isinstance(message, str) else str(message)
    return response.text
