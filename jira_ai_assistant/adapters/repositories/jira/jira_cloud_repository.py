"""Jira Cloud Repository implementation.

This module provides the issue-tracker repository backed by the Jira REST API.
"""

from __future__ import annotations

import asyncio
from typing import Any
from typing import Dict
from typing import Optional

import requests
from jira import JIRA
from jira.exceptions import JIRAError

from jira_ai_assistant import LOGGER
from jira_ai_assistant.entities.issue import IssueRecord
from jira_ai_assistant.entities.issue import IssueSearchResult
from jira_ai_assistant.settings.jira_settings import JiraConnectionSettings
from jira_ai_assistant.settings.jira_settings import JiraConnectionType
from jira_ai_assistant.use_cases.interfaces.issue_tracker_repository_interface import (
    DEFAULT_SEARCH_FIELDS,
    IssueTrackerRepositoryInterface,
)
from jira_ai_assistant.utils.exceptions import IssueTrackerError


class JiraCloudRepository(IssueTrackerRepositoryInterface):
    """Repository for searching issues on Jira Cloud or Jira Server.

    The underlying ``JIRA`` client is synchronous, so every call is pushed to a
    worker thread to keep the event loop free.
    """

    def __init__(self, settings: JiraConnectionSettings):
        """Initialize the Jira repository.

        Args:
            settings: Settings for connecting to Jira.
        """
        self.settings = settings
        self._jira: Optional[JIRA] = None

    @property
    def jira(self) -> JIRA:
        """Create the Jira client on first use."""
        if self._jira is None:
            if not self.settings.is_configured:
                raise IssueTrackerError(
                    "JIRA configuration is missing. Please check environment variables."
                )
            if self.settings.connection_type == JiraConnectionType.CLOUD:
                basic_auth = (self.settings.email, self.settings.token)
                token_auth = None
            elif self.settings.token:
                basic_auth = None
                token_auth = self.settings.token
            else:
                basic_auth = (self.settings.username, self.settings.password)
                token_auth = None
            self._jira = JIRA(
                server=str(self.settings.domain).rstrip("/"),
                basic_auth=basic_auth,
                token_auth=token_auth,
                timeout=self.settings.timeout,
                get_server_info=False,
            )
        return self._jira

    async def search_issues(
        self,
        jql: str,
        max_results: int = 200,
        fields: Optional[str] = DEFAULT_SEARCH_FIELDS,
    ) -> IssueSearchResult:
        """Search for issues using JQL.

        Args:
            jql: JQL query string.
            max_results: Maximum number of results to return.
            fields: Comma separated field selection, ``*all`` for every field.

        Returns:
            The first page of matching issues.

        Raises:
            IssueTrackerError: When Jira is unreachable or rejects the query.
        """
        LOGGER.debug(f"Searching Jira with maxResults={max_results}: {jql}")
        try:
            data = await asyncio.to_thread(self._search_raw, jql, max_results, fields)
        except JIRAError as e:
            LOGGER.error(f"Jira rejected query '{jql}': {e.status_code} {e.text}")
            raise IssueTrackerError(
                f"JIRA API Error: {e.status_code} - {e.text}",
                details={"status_code": e.status_code},
            ) from e
        except requests.exceptions.RequestException as e:
            LOGGER.error(f"Unable to connect to Jira: {e}")
            raise IssueTrackerError(
                "Unable to connect to JIRA. Please check your network connection and JIRA URL."
            ) from e

        return self._to_search_result(data)

    def _search_raw(self, jql: str, max_results: int, fields: Optional[str]) -> Dict[str, Any]:
        if self.settings.connection_type == JiraConnectionType.CLOUD:
            return self.jira.enhanced_search_issues(
                jql,
                maxResults=max_results,
                fields=fields,
                json_result=True,
            )
        return self.jira.search_issues(
            jql,
            maxResults=max_results,
            fields=fields,
            json_result=True,
        )

    @staticmethod
    def _to_search_result(data: Dict[str, Any]) -> IssueSearchResult:
        raw_issues = data.get("issues")
        if not isinstance(raw_issues, list):
            LOGGER.warning("No issues found in response data or issues is not an array")
            raw_issues = []
        issues = [IssueRecord.from_raw_issue(raw) for raw in raw_issues]
        return IssueSearchResult(
            issues=issues,
            total=data.get("total", len(issues)),
            max_results=data.get("maxResults", len(issues)),
            start_at=data.get("startAt", 0),
        )

    async def check_connection(self) -> bool:
        """Make a lightweight call to verify credentials.

        Returns:
            True when Jira answered, False otherwise.
        """
        if not self.settings.is_configured:
            return False
        try:
            await asyncio.to_thread(self.jira.myself)
            return True
        except (JIRAError, requests.exceptions.RequestException) as e:
            LOGGER.warning(f"Jira connection check failed: {e}")
            return False
