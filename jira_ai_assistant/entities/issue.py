from __future__ import annotations

from typing import Any
from typing import Dict
from typing import List
from typing import Optional
from typing import Union

from pydantic import BaseModel
from pydantic import Field
from pydantic import StrictBool
from pydantic import StrictFloat
from pydantic import StrictInt
from pydantic import StrictStr

from jira_ai_assistant.entities.constants import UNASSIGNED

# Raw tracker fields are open ended; custom fields hold numbers, text, lists or objects.
FieldValue = Union[
    StrictBool, StrictInt, StrictFloat, StrictStr, List[Any], Dict[str, Any], None
]

SPRINT_FIELD_CANDIDATES = ("sprint", "customfield_10020", "customfield_10021")


class WorklogEntry(BaseModel):
    """Single time log attached to an issue."""

    author: str = "Unknown"
    author_email: Optional[str] = None
    time_spent: Optional[str] = None
    time_spent_seconds: Optional[int] = None
    started: str = ""

    @classmethod
    def from_raw_worklog(cls, raw_worklog: Dict[str, Any]) -> "WorklogEntry":
        author = raw_worklog.get("author") or {}
        return cls(
            author=author.get("displayName") or "Unknown",
            author_email=author.get("emailAddress"),
            time_spent=raw_worklog.get("timeSpent"),
            time_spent_seconds=raw_worklog.get("timeSpentSeconds"),
            started=raw_worklog.get("started") or "",
        )


class SprintReference(BaseModel):
    id: int = 0
    name: str = "Unknown Sprint"
    state: str = "unknown"


class IssueRecord(BaseModel):
    """Typed view over a raw Jira search result issue."""

    id: Optional[str] = None
    key: str
    summary: str = "No summary"
    status: str = "Unknown"
    priority: Optional[str] = None
    issue_type: Optional[str] = None
    assignee: Optional[str] = None
    reporter: Optional[str] = None
    project_key: Optional[str] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    sprint: Optional[SprintReference] = None
    worklogs: List[WorklogEntry] = Field(default_factory=list)
    fields: Dict[str, FieldValue] = Field(default_factory=dict)

    @classmethod
    def from_raw_issue(cls, raw_issue: Dict[str, Any]) -> "IssueRecord":
        """Create from a raw API response issue."""
        fields = raw_issue.get("fields") or {}
        worklog = fields.get("worklog") or {}
        return cls(
            id=raw_issue.get("id"),
            key=raw_issue.get("key", ""),
            summary=fields.get("summary") or "No summary",
            status=(fields.get("status") or {}).get("name") or "Unknown",
            priority=(fields.get("priority") or {}).get("name"),
            issue_type=(fields.get("issuetype") or {}).get("name"),
            assignee=(fields.get("assignee") or {}).get("displayName"),
            reporter=(fields.get("reporter") or {}).get("displayName"),
            project_key=(fields.get("project") or {}).get("key"),
            created=fields.get("created"),
            updated=fields.get("updated"),
            sprint=cls._sprint_from_fields(fields),
            worklogs=[
                WorklogEntry.from_raw_worklog(raw)
                for raw in worklog.get("worklogs") or []
            ],
            fields=fields,
        )

    @staticmethod
    def _sprint_from_fields(fields: Dict[str, Any]) -> Optional[SprintReference]:
        for field_name in SPRINT_FIELD_CANDIDATES:
            sprint_field = fields.get(field_name)
            if not sprint_field:
                continue
            # Issues carried over between sprints list all of them; the last is current.
            sprint = sprint_field[-1] if isinstance(sprint_field, list) else sprint_field
            if isinstance(sprint, dict):
                return SprintReference(
                    id=sprint.get("id") or 0,
                    name=sprint.get("name") or "Unknown Sprint",
                    state=sprint.get("state") or "unknown",
                )
        return None

    @property
    def assignee_name(self) -> str:
        return self.assignee or UNASSIGNED

    def numeric_field(self, field_name: str) -> Optional[float]:
        """Return the field as a number, or None when absent or not numeric."""
        value = self.fields.get(field_name)
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                return None
        return None

    def to_response_dict(self) -> Dict[str, Any]:
        """Flatten the record for API responses, dropping the raw field bag."""
        return self.model_dump(exclude={"fields"})


class IssueSearchResult(BaseModel):
    issues: List[IssueRecord] = Field(default_factory=list)
    total: int = 0
    max_results: int = 0
    start_at: int = 0
