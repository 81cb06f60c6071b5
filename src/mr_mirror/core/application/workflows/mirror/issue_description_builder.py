"""Markdown body of the issue filed when a mirror stops part way."""

from mr_mirror.core.domain.delivery import CherryPickOutcome
from mr_mirror.core.domain.merge_event import MergeEvent


class IssueDescriptionBuilder:
    @staticmethod
    def build_title(event: MergeEvent, downstream: str) -> str:
        return f"Fail to cherry pick MR[{event.iid}]({event.title}) into {downstream}"

    @staticmethod
    def build_description(
        event: MergeEvent, downstream: str, working_branch: str, outcome: CherryPickOutcome
    ) -> str:
        if outcome.succeeded:
            raise ValueError("An issue description needs a failed cherry-pick outcome.")

        lines = [
            f"**Merge Request:** {event.url}",
            "",
            f"**Target Branch:** {downstream}",
            "",
            f"**Working Branch:** {working_branch}",
            "",
            f"**Details:** {len(outcome.failed)}/{outcome.total} commit(s) failed",
            "",
        ]
        lines += [f"  * {commit.id} [applied]" for commit in outcome.applied]
        lines.append(f"  * {outcome.failed_commit.id} [failed]: {outcome.cause}")
        lines += [f"  * {commit.id} [skipped]" for commit in outcome.skipped]
        return "\n".join(lines) + "\n"
