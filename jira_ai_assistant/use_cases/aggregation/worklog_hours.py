from __future__ import annotations

from typing import Dict
from typing import List
from typing import Optional
from typing import Sequence

from jira_ai_assistant import LOGGER
from jira_ai_assistant.entities.issue import IssueRecord
from jira_ai_assistant.entities.issue import WorklogEntry
from jira_ai_assistant.entities.query import DateRange
from jira_ai_assistant.entities.summaries import WorklogSummary
from jira_ai_assistant.settings.jira_board_config import JiraBoardSettings
from jira_ai_assistant.use_cases.aggregation.name_matching import match_target_name
from jira_ai_assistant.use_cases.interfaces.issue_tracker_repository_interface import (
    IssueTrackerRepositoryInterface,
    WORKLOG_SEARCH_FIELDS,
)
from jira_ai_assistant.utils.time_parser import format_hours
from jira_ai_assistant.utils.time_parser import parse_time_spent


def worklog_hours(worklog: WorklogEntry) -> float:
    if worklog.time_spent:
        return parse_time_spent(worklog.time_spent)
    if worklog.time_spent_seconds:
        return worklog.time_spent_seconds / 3600
    return 0.0


def summarize_worklogs(
    issues: Sequence[IssueRecord],
    user_names: Sequence[str],
    date_range: Optional[DateRange] = None,
) -> List[WorklogSummary]:
    """Reduce issue worklogs into hours per user.

    Args:
        issues: Issues carrying their worklogs
        user_names: Target names; empty means one bucket per author
        date_range: Inclusive bounds on the worklog start date, or None for all dates

    Returns:
        One summary per target name (zero valued when nothing matched), or per author
    """
    summaries: Dict[str, WorklogSummary] = {
        name: WorklogSummary(user=name) for name in user_names
    }

    for issue in issues:
        for worklog in issue.worklogs:
            if date_range is not None and not date_range.contains(worklog.started):
                continue

            if user_names:
                bucket = match_target_name(worklog.author, user_names)
                if bucket is None:
                    continue
            else:
                bucket = worklog.author

            summary = summaries.setdefault(bucket, WorklogSummary(user=bucket))
            summary.total_hours += worklog_hours(worklog)
            summary.entries += 1

    for summary in summaries.values():
        summary.total_hours = round(summary.total_hours, 2)
    return list(summaries.values())


class WorklogHoursUseCase:
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
        user_names: Sequence[str],
        date_range: Optional[DateRange] = None,
    ) -> List[WorklogSummary]:
        LOGGER.info(
            f"Calculating worklog hours for {list(user_names) or 'all users'} "
            f"between {date_range.start if date_range else '*'} and "
            f"{date_range.end if date_range else '*'}"
        )
        result = await self.issue_repository.search_issues(
            jql,
            max_results=self.board_settings.aggregation_max_results,
            fields=WORKLOG_SEARCH_FIELDS,
        )
        summaries = summarize_worklogs(result.issues, user_names, date_range)
        for summary in summaries:
            LOGGER.debug(
                f"{summary.user}: {format_hours(summary.total_hours)} in {summary.entries} entries"
            )
        return summaries

    async def run_safely(
        self,
        jql: str,
        user_names: Sequence[str],
        date_range: Optional[DateRange] = None,
    ) -> List[WorklogSummary]:
        """Like ``run`` but any failure yields a zero summary for every requested name."""
        try:
            return await self.run(jql, user_names, date_range)
        except Exception as e:
            LOGGER.error(f"Error calculating worklog hours: {e}", exc_info=True)
            return [WorklogSummary(user=name) for name in user_names]
