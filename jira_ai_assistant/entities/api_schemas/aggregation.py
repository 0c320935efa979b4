"""API schema models for worklog and story point aggregation endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from jira_ai_assistant.entities.summaries import StoryPointsSummary
from jira_ai_assistant.entities.summaries import WorklogSummary


class StoryPointsRequest(BaseModel):
    """Request model for story point aggregation.

    Either ``jql`` or ``query`` must be given; ``query`` is translated when ``jql`` is missing.
    """
    query: Optional[str] = Field(None, description="Free-text query to translate")
    jql: Optional[str] = Field(None, description="Explicit JQL, takes precedence over query")
    assignees: List[str] = Field(default_factory=list, description="Target assignee names")
    sprint: Optional[str] = Field(None, description="Sprint name")


class StoryPointsResponse(BaseModel):
    summary: List[StoryPointsSummary] = Field(description="Story points per assignee")
    jql: str = Field(description="JQL used to fetch the issues")
    query: str = Field(description="Free-text query or a JQL marker")
    timestamp: datetime = Field(description="Time the response was assembled")


class WorklogRequest(BaseModel):
    """Request model for worklog aggregation."""
    query: Optional[str] = Field(None, description="Free-text query to translate")
    jql: Optional[str] = Field(None, description="Explicit JQL, takes precedence over query")
    user_names: List[str] = Field(default_factory=list, description="Target user names")
    start_date: Optional[str] = Field(None, description="Start date (YYYY-MM-DD)")
    end_date: Optional[str] = Field(None, description="End date (YYYY-MM-DD)")


class WorklogResponse(BaseModel):
    summary: List[WorklogSummary] = Field(description="Hours per user")
    jql: str = Field(description="JQL used to fetch the issues")
    query: str = Field(description="Free-text query or a JQL marker")
    timestamp: datetime = Field(description="Time the response was assembled")
