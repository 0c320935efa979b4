from __future__ import annotations

from typing import List
from typing import Optional

from pydantic import BaseModel
from pydantic import Field


class DateRange(BaseModel):
    """Inclusive date range, both bounds in ``YYYY-MM-DD`` form."""

    start: str
    end: str

    def contains(self, iso_timestamp: str) -> bool:
        """Compare only the date portion of an ISO timestamp against the bounds."""
        day = iso_timestamp.split("T")[0]
        return self.start <= day <= self.end


class ExtractedEntities(BaseModel):
    """Entities pulled out of a free-text query and/or a generated JQL string."""

    user_names: List[str] = Field(default_factory=list)
    team_ids: List[str] = Field(default_factory=list)
    date_range: Optional[DateRange] = None
    sprint_name: Optional[str] = None
    issue_keys: List[str] = Field(default_factory=list)


class QueryClassification(BaseModel):
    is_worklog_query: bool = False
    is_story_points_query: bool = False
