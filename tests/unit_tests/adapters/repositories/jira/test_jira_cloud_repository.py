"""Unit tests for JiraCloudRepository."""

import unittest
from unittest.mock import MagicMock, patch

import requests
from jira.exceptions import JIRAError

from jira_ai_assistant.adapters.repositories.jira.jira_cloud_repository import (
    JiraCloudRepository,
)
from jira_ai_assistant.settings.jira_settings import JiraConnectionSettings
from jira_ai_assistant.use_cases.interfaces.issue_tracker_repository_interface import (
    DEFAULT_SEARCH_FIELDS,
)
from jira_ai_assistant.utils.exceptions import IssueTrackerError

SEARCH_RESPONSE = {
    "issues": [
        {
            "id": "10001",
            "key": "MSC-1",
            "fields": {
                "summary": "Checkout crash",
                "status": {"name": "In Progress"},
                "assignee": {"displayName": "Alice Smith"},
                "customfield_10020": [
                    {"id": 1, "name": "Sprint 1", "state": "closed"},
                    {"id": 2, "name": "Sprint 2", "state": "active"},
                ],
            },
        }
    ],
    "total": 1,
    "maxResults": 50,
    "startAt": 0,
}


class TestJiraCloudRepository(unittest.IsolatedAsyncioTestCase):
    """Test suite for JiraCloudRepository."""

    def setUp(self):
        """Set up test fixtures."""
        self.patcher = patch(
            "jira_ai_assistant.adapters.repositories.jira.jira_cloud_repository.JIRA"
        )
        self.mock_jira_class = self.patcher.start()
        self.mock_jira = self.mock_jira_class.return_value
        self.settings = JiraConnectionSettings(
            domain="https://acme.atlassian.net",
            email="bot@acme.com",
            token="secret-token",
            timeout=15,
        )
        self.repository = JiraCloudRepository(self.settings)

    def tearDown(self):
        """Tear down test fixtures."""
        self.patcher.stop()

    async def test_cloud_search_uses_enhanced_search(self):
        # Arrange
        self.mock_jira.enhanced_search_issues.return_value = SEARCH_RESPONSE

        # Act
        result = await self.repository.search_issues("type = Bug", max_results=50)

        # Assert
        self.mock_jira_class.assert_called_once_with(
            server="https://acme.atlassian.net",
            basic_auth=("bot@acme.com", "secret-token"),
            token_auth=None,
            timeout=15,
            get_server_info=False,
        )
        self.mock_jira.enhanced_search_issues.assert_called_once_with(
            "type = Bug",
            maxResults=50,
            fields=DEFAULT_SEARCH_FIELDS,
            json_result=True,
        )
        self.assertEqual(result.total, 1)
        self.assertEqual(result.max_results, 50)
        issue = result.issues[0]
        self.assertEqual(issue.key, "MSC-1")
        self.assertEqual(issue.status, "In Progress")
        self.assertEqual(issue.assignee_name, "Alice Smith")
        self.assertEqual(issue.sprint.name, "Sprint 2")

    async def test_self_hosted_search_uses_token_auth(self):
        # Arrange
        settings = JiraConnectionSettings(domain="https://jira.acme.local", token="pat")
        repository = JiraCloudRepository(settings)
        self.mock_jira.search_issues.return_value = {"issues": []}

        # Act
        result = await repository.search_issues("project = MSC", fields="*all")

        # Assert
        self.assertEqual(self.mock_jira_class.call_args.kwargs["token_auth"], "pat")
        self.mock_jira.search_issues.assert_called_once_with(
            "project = MSC", maxResults=200, fields="*all", json_result=True
        )
        self.assertEqual(result.issues, [])

    async def test_missing_issues_array_yields_empty_result(self):
        # Arrange
        self.mock_jira.enhanced_search_issues.return_value = {"issues": None}

        # Act
        result = await self.repository.search_issues("type = Bug")

        # Assert
        self.assertEqual(result.issues, [])
        self.assertEqual(result.total, 0)

    async def test_jira_error_is_wrapped(self):
        # Arrange
        self.mock_jira.enhanced_search_issues.side_effect = JIRAError(
            status_code=400, text="Field 'foo' does not exist"
        )

        # Act / Assert
        with self.assertRaises(IssueTrackerError) as context:
            await self.repository.search_issues("foo = bar")
        self.assertEqual(
            context.exception.message,
            "Failed to fetch JIRA issues: JIRA API Error: 400 - Field 'foo' does not exist",
        )
        self.assertEqual(context.exception.details, {"status_code": 400})
        self.assertEqual(context.exception.status_code, 502)

    async def test_connection_error_is_wrapped(self):
        # Arrange
        self.mock_jira.enhanced_search_issues.side_effect = requests.exceptions.ConnectionError()

        # Act / Assert
        with self.assertRaises(IssueTrackerError) as context:
            await self.repository.search_issues("type = Bug")
        self.assertIn("Unable to connect to JIRA", context.exception.message)

    async def test_unconfigured_repository(self):
        # Arrange
        settings = MagicMock()
        settings.is_configured = False
        repository = JiraCloudRepository(settings)

        # Act / Assert
        with self.assertRaises(IssueTrackerError):
            await repository.search_issues("type = Bug")
        self.assertFalse(await repository.check_connection())
        self.mock_jira_class.assert_not_called()

    async def test_check_connection(self):
        # Act
        connected = await self.repository.check_connection()

        # Assert
        self.assertTrue(connected)
        self.mock_jira.myself.assert_called_once()

    async def test_check_connection_failure(self):
        # Arrange
        self.mock_jira.myself.side_effect = JIRAError(status_code=401, text="Unauthorized")

        # Act / Assert
        self.assertFalse(await self.repository.check_connection())


if __name__ == "__main__":
    unittest.main()
