from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import Optional

from jira_ai_assistant.entities.issue import IssueSearchResult

DEFAULT_SEARCH_FIELDS = (
    "summary,description,status,priority,assignee,reporter,created,updated,"
    "issuetype,project,sprint,worklog,customfield_10020,customfield_10021,"
    "customfield_10016,Story Points"
)
WORKLOG_SEARCH_FIELDS = "worklog,key,summary"
ALL_FIELDS = "*all"


class IssueTrackerRepositoryInterface(ABC):
    @abstractmethod
    async def search_issues(
        self,
        jql: str,
        max_results: int = 200,
        fields: Optional[str] = DEFAULT_SEARCH_FIELDS,
    ) -> IssueSearchResult:
        """Run a JQL search and return the first page of results.

        Raises:
            IssueTrackerError: When the tracker is unreachable or rejects the query
        """
        pass

    @abstractmethod
    async def check_connection(self) -> bool:
        pass
