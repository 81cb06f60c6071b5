from mr_mirror.infrastructure.tools.vcs.gitlab.gitlab_http_client import GitLabHttpClient
from mr_mirror.infrastructure.tools.vcs.gitlab.gitlab_vcs_adapter import GitLabVcsAdapter

__all__ = ["GitLabHttpClient", "GitLabVcsAdapter"]
