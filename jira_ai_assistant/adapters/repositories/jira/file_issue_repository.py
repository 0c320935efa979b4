"""Issue repository serving a local JSON export, used in demo mode."""

from __future__ import annotations

import json
import os
import re
from typing import Any, Dict, List, Optional

from jira_ai_assistant import DEFAULT_PATH
from jira_ai_assistant import LOGGER
from jira_ai_assistant.entities.issue import IssueRecord
from jira_ai_assistant.entities.issue import IssueSearchResult
from jira_ai_assistant.use_cases.interfaces.issue_tracker_repository_interface import (
    DEFAULT_SEARCH_FIELDS,
    IssueTrackerRepositoryInterface,
)
from jira_ai_assistant.utils.exceptions import IssueTrackerError

_KEY_CLAUSE = re.compile(r'\bkey\s*(?:=\s*"([^"]+)"|in\s*\(([^)]+)\))', re.IGNORECASE)


class FileIssueRepository(IssueTrackerRepositoryInterface):
    """Repository answering searches from a JSON file shaped like a Jira search response.

    JQL is not evaluated, except that ``key = "X"`` and ``key in (...)`` narrow
    the result to those issues.
    """

    def __init__(self, file_path: Optional[str] = None):
        """Initialize the file repository.

        Args:
            file_path: Path to the JSON file. If not provided, uses ``demo_issues.json``
                      in the project root.
        """
        self.file_path = file_path or os.path.join(DEFAULT_PATH, "demo_issues.json")
        LOGGER.info(f"Serving issues from {self.file_path} (demo mode)")

    def _load_raw_issues(self) -> List[Dict[str, Any]]:
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise IssueTrackerError(f"Unable to read demo data: {e}") from e

        raw_issues = data.get("issues") if isinstance(data, dict) else data
        if not isinstance(raw_issues, list):
            LOGGER.warning("Demo data has no issues array")
            return []
        return raw_issues

    @staticmethod
    def _requested_keys(jql: str) -> List[str]:
        match = _KEY_CLAUSE.search(jql)
        if not match:
            return []
        if match.group(1):
            return [match.group(1).upper()]
        return [key.strip().strip('"').upper() for key in match.group(2).split(",") if key.strip()]

    async def search_issues(
        self,
        jql: str,
        max_results: int = 200,
        fields: Optional[str] = DEFAULT_SEARCH_FIELDS,
    ) -> IssueSearchResult:
        raw_issues = self._load_raw_issues()
        keys = self._requested_keys(jql)
        if keys:
            raw_issues = [raw for raw in raw_issues if str(raw.get("key", "")).upper() in keys]

        issues = [IssueRecord.from_raw_issue(raw) for raw in raw_issues[:max_results]]
        return IssueSearchResult(
            issues=issues,
            total=len(raw_issues),
            max_results=max_results,
            start_at=0,
        )

    async def check_connection(self) -> bool:
        return os.path.exists(self.file_path)
