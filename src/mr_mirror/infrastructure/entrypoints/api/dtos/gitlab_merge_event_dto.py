from pydantic import BaseModel, ConfigDict, Field


class GitLabUserDTO(BaseModel):
    id: int | None = None
    username: str | None = None
    name: str | None = None


class GitLabMergeRequestAttributesDTO(BaseModel):
    """The ``object_attributes`` block of a GitLab merge request hook."""

    model_config = ConfigDict(extra="ignore")

    iid: int = 0
    title: str = ""
    description: str | None = ""
    author_id: int = 0
    source_project_id: int = 0
    target_project_id: int = 0
    source_branch: str = ""
    target_branch: str = ""
    action: str | None = ""
    url: str = ""


class GitLabMergeEventDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    object_kind: str | None = None
    user: GitLabUserDTO | None = None
    object_attributes: GitLabMergeRequestAttributesDTO = Field(
        default_factory=GitLabMergeRequestAttributesDTO
    )
