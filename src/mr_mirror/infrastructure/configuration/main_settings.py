from pathlib import Path
from typing import Annotated

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process configuration, read from the environment (and an optional .env).
    Command line options override these values, see cli_arguments.
    """

    app_name: str = Field(default="mr-mirror", alias="APP_NAME")
    listen: str = Field(default=":80", alias="MR_MIRROR_LISTEN")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    logging_file: Path | None = Field(default=None, alias="MR_MIRROR_LOGGING_FILE")
    tracing_enabled: bool = Field(default=False, alias="MR_MIRROR_TRACING")

    # GitLab Config
    gitlab_base_url: str = Field(default="", alias="GITLAB_BASE_URL")
    gitlab_token: SecretStr | None = Field(default=None, alias="GITLAB_TOKEN")
    gitlab_verify_ssl: bool = Field(default=True, alias="GITLAB_VERIFY_SSL")
    gitlab_timeout_seconds: float = Field(default=30.0, gt=0, alias="GITLAB_TIMEOUT_SECONDS")
    gitlab_webhook_secret: SecretStr | None = Field(
        default=None,
        alias="GITLAB_WEBHOOK_SECRET",
        description="Expected X-Gitlab-Token header. Unset disables the check.",
    )
    commit_fetch_max_attempts: int = Field(default=1, ge=1, alias="COMMIT_FETCH_MAX_ATTEMPTS")

    # Mirror Config
    branch_mappings: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        alias="MR_MIRROR_BRANCH_MAPPINGS",
        description="branch=downstream pairs; the env value is comma separated, e.g. 'MASTER=Branch_v2.1.1'",
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    @field_validator("gitlab_token", "gitlab_webhook_secret", mode="before")
    @classmethod
    def empty_secret_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("branch_mappings", mode="before")
    @classmethod
    def split_env_mappings(cls, value: object) -> object:
        # Only the env string is comma separated; command line pairs arrive as a list
        if isinstance(value, str):
            return value.split(",")
        return value

    def branch_mapping_pairs(self) -> list[str]:
        return [pair for pair in self.branch_mappings if pair.strip()]

    def validate_gitlab_credentials(self) -> None:
        if not self.gitlab_base_url:
            raise ValueError("GitLab base URL is missing in settings.")
        if not self.gitlab_token:
            raise ValueError("GitLab token is missing in settings.")
