import secrets

from fastapi import HTTPException, Request, Security, status
from fastapi.security import APIKeyHeader

from mr_mirror.infrastructure.configuration.main_settings import Settings

gitlab_token_header = APIKeyHeader(name="X-Gitlab-Token", auto_error=False)


async def validate_gitlab_token(
    request: Request, gitlab_token: str | None = Security(gitlab_token_header)
) -> None:
    """Checks the hook secret GitLab sends, when one is configured."""
    settings: Settings = request.app.state.settings
    if not settings.gitlab_webhook_secret:
        return
    expected = settings.gitlab_webhook_secret.get_secret_value()
    if not gitlab_token or not secrets.compare_digest(gitlab_token, expected):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Could not validate credentials"
        )
