"""Unit tests for worklog hour aggregation."""

import unittest
from unittest.mock import AsyncMock, MagicMock

from jira_ai_assistant.entities.issue import IssueRecord
from jira_ai_assistant.entities.issue import IssueSearchResult
from jira_ai_assistant.entities.issue import WorklogEntry
from jira_ai_assistant.entities.query import DateRange
from jira_ai_assistant.entities.summaries import WorklogSummary
from jira_ai_assistant.use_cases.aggregation.worklog_hours import (
    WorklogHoursUseCase,
    summarize_worklogs,
    worklog_hours,
)
from jira_ai_assistant.use_cases.interfaces.issue_tracker_repository_interface import (
    WORKLOG_SEARCH_FIELDS,
)
from jira_ai_assistant.utils.exceptions import IssueTrackerError


def _raw_worklog(author, time_spent, started):
    return {
        "author": {"displayName": author},
        "timeSpent": time_spent,
        "started": started,
    }


def _issue_with_worklogs():
    return IssueRecord.from_raw_issue(
        {
            "key": "MSC-1",
            "fields": {
                "summary": "Checkout flow",
                "worklog": {
                    "worklogs": [
                        _raw_worklog("John Smith", "2h", "2025-01-10T09:00:00.000+0000"),
                        _raw_worklog("John Smith", "1h 30m", "2025-01-15T14:00:00.000+0000"),
                        _raw_worklog("Jane Roe", "3h", "2025-01-12T10:00:00.000+0000"),
                        _raw_worklog("John Smith", "4h", "2025-02-03T10:00:00.000+0000"),
                    ]
                },
            },
        }
    )


class TestSummarizeWorklogs(unittest.TestCase):
    """Test suite for summarize_worklogs."""

    def test_target_name_within_date_range(self):
        # Act
        summaries = summarize_worklogs(
            [_issue_with_worklogs()],
            ["John"],
            DateRange(start="2025-01-01", end="2025-01-31"),
        )

        # Assert
        self.assertEqual(summaries, [WorklogSummary(user="John", total_hours=3.5, entries=2)])

    def test_date_bounds_are_inclusive(self):
        # Act
        summaries = summarize_worklogs(
            [_issue_with_worklogs()],
            ["John"],
            DateRange(start="2025-01-15", end="2025-02-03"),
        )

        # Assert
        self.assertEqual(summaries[0].total_hours, 5.5)
        self.assertEqual(summaries[0].entries, 2)

    def test_without_targets_groups_by_author(self):
        # Act
        summaries = summarize_worklogs([_issue_with_worklogs()], [])

        # Assert
        by_user = {summary.user: summary for summary in summaries}
        self.assertEqual(set(by_user), {"John Smith", "Jane Roe"})
        self.assertEqual(by_user["John Smith"].total_hours, 7.5)
        self.assertEqual(by_user["John Smith"].entries, 3)
        self.assertEqual(by_user["Jane Roe"].total_hours, 3.0)

    def test_unmatched_target_gets_zero_summary(self):
        # Act
        summaries = summarize_worklogs([_issue_with_worklogs()], ["John", "Zed"])

        # Assert
        self.assertEqual(summaries[1], WorklogSummary(user="Zed", total_hours=0.0, entries=0))

    def test_seconds_are_used_when_time_spent_is_missing(self):
        self.assertEqual(worklog_hours(WorklogEntry(time_spent_seconds=5400)), 1.5)
        self.assertEqual(worklog_hours(WorklogEntry()), 0.0)


class TestWorklogHoursUseCase(unittest.IsolatedAsyncioTestCase):
    """Test suite for WorklogHoursUseCase."""

    def setUp(self):
        """Set up test fixtures."""
        self.issue_repository = AsyncMock()
        self.board_settings = MagicMock()
        self.board_settings.aggregation_max_results = 1000
        self.use_case = WorklogHoursUseCase(
            issue_repository=self.issue_repository,
            board_settings=self.board_settings,
        )

    async def test_run_fetches_worklog_fields(self):
        # Arrange
        self.issue_repository.search_issues.return_value = IssueSearchResult(
            issues=[_issue_with_worklogs()], total=1
        )
        date_range = DateRange(start="2025-01-01", end="2025-01-31")

        # Act
        summaries = await self.use_case.run('worklogAuthor = "Jane Roe"', ["Jane"], date_range)

        # Assert
        self.issue_repository.search_issues.assert_awaited_once_with(
            'worklogAuthor = "Jane Roe"',
            max_results=1000,
            fields=WORKLOG_SEARCH_FIELDS,
        )
        self.assertEqual(summaries, [WorklogSummary(user="Jane", total_hours=3.0, entries=1)])

    async def test_run_safely_degrades_to_zero_summaries(self):
        # Arrange
        self.issue_repository.search_issues.side_effect = IssueTrackerError("timeout")

        # Act
        summaries = await self.use_case.run_safely("worklogAuthor = Bob", ["Bob", "Eve"])

        # Assert
        self.assertEqual(
            summaries, [WorklogSummary(user="Bob"), WorklogSummary(user="Eve")]
        )

    async def test_run_propagates_tracker_errors(self):
        # Arrange
        self.issue_repository.search_issues.side_effect = IssueTrackerError("timeout")

        # Act / Assert
        with self.assertRaises(IssueTrackerError):
            await self.use_case.run("worklogAuthor = Bob", ["Bob"])


if __name__ == "__main__":
    unittest.main()
