from __future__ import annotations

from typing import Dict
from typing import List
from typing import Optional
from typing import Sequence

from jira_ai_assistant import LOGGER
from jira_ai_assistant.entities.constants import COMPLETED_STATUS_MARKERS
from jira_ai_assistant.entities.constants import IN_PROGRESS_STATUS_MARKERS
from jira_ai_assistant.entities.constants import StatusCategory
from jira_ai_assistant.entities.issue import IssueRecord
from jira_ai_assistant.entities.summaries import IssueRef
from jira_ai_assistant.entities.summaries import StoryPointsSummary
from jira_ai_assistant.settings.jira_board_config import DEFAULT_STORY_POINT_FIELDS
from jira_ai_assistant.settings.jira_board_config import JiraBoardSettings
from jira_ai_assistant.use_cases.aggregation.name_matching import match_target_name
from jira_ai_assistant.use_cases.interfaces.issue_tracker_repository_interface import (
    ALL_FIELDS,
    IssueTrackerRepositoryInterface,
)


def categorize_status(status_name: str) -> StatusCategory:
    status = status_name.lower()
    if any(marker in status for marker in COMPLETED_STATUS_MARKERS):
        return StatusCategory.COMPLETED
    if any(marker in status for marker in IN_PROGRESS_STATUS_MARKERS):
        return StatusCategory.IN_PROGRESS
    return StatusCategory.TODO


def resolve_story_points(
    issue: IssueRecord, field_names: Sequence[str] = DEFAULT_STORY_POINT_FIELDS
) -> float:
    """First numeric value greater than zero among ``field_names``, else 0."""
    for field_name in field_names:
        value = issue.numeric_field(field_name)
        if value is not None and value > 0:
            return value
    return 0.0


def summarize_story_points(
    issues: Sequence[IssueRecord],
    assignee_names: Sequence[str],
    field_names: Sequence[str] = DEFAULT_STORY_POINT_FIELDS,
) -> List[StoryPointsSummary]:
    """Roll story points up per assignee, split by status category.

    Args:
        issues: Issues fetched with all fields
        assignee_names: Target names; empty means one bucket per assignee
        field_names: Prioritized field identifiers holding the point value

    Returns:
        One summary per target name (zero valued when nothing matched), or per assignee
    """
    summaries: Dict[str, StoryPointsSummary] = {
        name: StoryPointsSummary(assignee=name) for name in assignee_names
    }

    for issue in issues:
        assignee = issue.assignee_name
        if assignee_names:
            bucket = match_target_name(assignee, assignee_names)
            if bucket is None:
                LOGGER.debug(f"Skipped {issue.key}: {assignee} is not a target assignee")
                continue
        else:
            bucket = assignee

        points = resolve_story_points(issue, field_names)
        summary = summaries.setdefault(bucket, StoryPointsSummary(assignee=bucket))
        summary.total_story_points += points
        summary.issue_count += 1

        category = categorize_status(issue.status)
        if category == StatusCategory.COMPLETED:
            summary.completed_story_points += points
        elif category == StatusCategory.IN_PROGRESS:
            summary.in_progress_story_points += points
        else:
            summary.todo_story_points += points

        summary.issues.append(
            IssueRef(
                key=issue.key,
                summary=issue.summary,
                story_points=points,
                status=issue.status,
            )
        )

    return list(summaries.values())


class StoryPointsUseCase:
    def __init__(
        self,
        issue_repository: IssueTrackerRepositoryInterface,
        board_settings: JiraBoardSettings,
    ):
        self.issue_repository = issue_repository
        self.board_settings = board_settings

    async def run(
        self,
        jql: str,
        assignee_names: Sequence[str],
        sprint_name: Optional[str] = None,
    ) -> List[StoryPointsSummary]:
        LOGGER.info(
            f"Calculating story points for {list(assignee_names) or 'all assignees'}"
            + (f" in sprint {sprint_name}" if sprint_name else "")
        )
        result = await self.issue_repository.search_issues(
            jql,
            max_results=self.board_settings.aggregation_max_results,
            fields=ALL_FIELDS,
        )
        summaries = summarize_story_points(
            result.issues, assignee_names, self.board_settings.story_point_fields
        )
        LOGGER.info(
            "Story points: "
            + ", ".join(
                f"{s.assignee}: {s.total_story_points} points ({s.issue_count} issues)"
                for s in summaries
            )
        )
        return summaries

    async def run_safely(
        self,
        jql: str,
        assignee_names: Sequence[str],
        sprint_name: Optional[str] = None,
    ) -> List[StoryPointsSummary]:
        """Like ``run`` but any failure yields a zero summary for every requested name."""
        try:
            return await self.run(jql, assignee_names, sprint_name)
        except Exception as e:
            LOGGER.error(f"Error calculating story points: {e}", exc_info=True)
            return [StoryPointsSummary(assignee=name) for name in assignee_names]
