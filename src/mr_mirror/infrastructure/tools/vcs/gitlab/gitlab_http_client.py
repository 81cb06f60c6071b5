from typing import Any

import httpx

from mr_mirror.infrastructure.configuration.main_settings import Settings

_API_PREFIX = "api/v4"


class GitLabHttpClient:
    """Thin async wrapper over the GitLab REST v4 API.

    Every call opens its own connection and carries the configured deadline,
    so a stuck GitLab request only stalls the webhook delivery that made it.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.base_url = settings.gitlab_base_url.rstrip("/")
        self._validate_config()

    def _validate_config(self) -> None:
        self.settings.validate_gitlab_credentials()

    def _get_headers(self) -> dict[str, str]:
        token = self.settings.gitlab_token.get_secret_value() if self.settings.gitlab_token else ""
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "PRIVATE-TOKEN": token,
        }

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{_API_PREFIX}/{path.lstrip('/')}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            verify=self.settings.gitlab_verify_ssl,
            timeout=self.settings.gitlab_timeout_seconds,
        )

    async def get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        async with self._client() as client:
            return await client.get(self._url(path), headers=self._get_headers(), params=params)

    async def post(self, path: str, json_data: dict[str, Any] | None = None) -> httpx.Response:
        async with self._client() as client:
            return await client.post(self._url(path), headers=self._get_headers(), json=json_data)
