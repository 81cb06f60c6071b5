from mr_mirror.core.domain.merge_event import MergeEvent
from mr_mirror.infrastructure.entrypoints.api.dtos.gitlab_merge_event_dto import (
    GitLabMergeEventDTO,
)


class MergeEventMapper:
    """
    Maps a GitLab merge request hook body onto the MergeEvent domain type.
    Attributes GitLab left out decode to empty values; a body that is not
    JSON, or has mistyped attributes, raises ValueError.
    """

    @classmethod
    def from_payload(cls, raw_payload: bytes) -> MergeEvent:
        return cls.to_domain(GitLabMergeEventDTO.model_validate_json(raw_payload))

    @staticmethod
    def to_domain(payload: GitLabMergeEventDTO) -> MergeEvent:
        attrs = payload.object_attributes
        return MergeEvent(
            iid=attrs.iid,
            title=attrs.title,
            description=attrs.description or "",
            author_id=attrs.author_id,
            source_project_id=attrs.source_project_id,
            target_project_id=attrs.target_project_id,
            source_branch=attrs.source_branch,
            target_branch=attrs.target_branch,
            action=attrs.action or "",
            url=attrs.url,
        )
