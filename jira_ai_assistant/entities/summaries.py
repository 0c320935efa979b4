from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel
from pydantic import Field


class WorklogSummary(BaseModel):
    """Hours logged by one user (or one matched target name)."""

    user: str
    total_hours: float = 0.0
    entries: int = 0


class IssueRef(BaseModel):
    key: str
    summary: str
    story_points: float = 0.0
    status: str


class StoryPointsSummary(BaseModel):
    """Story points rolled up per assignee and bucketed by status category."""

    assignee: str
    total_story_points: float = 0.0
    completed_story_points: float = 0.0
    in_progress_story_points: float = 0.0
    todo_story_points: float = 0.0
    issue_count: int = 0
    issues: List[IssueRef] = Field(default_factory=list)


class TokenUsage(BaseModel):
    """Token usage of a single generation call."""

    input_tokens: int
    output_tokens: int
    total_tokens: int
    query_count: int
    timestamp: datetime


class TokenUsageStats(BaseModel):
    """Running token counters since process start."""

    total_queries: int = 0
    total_input_tokens: int = 0
    total_output_tokens: int = 0
    total_tokens: int = 0
    session_start: datetime = Field(default_factory=datetime.now)
    last_query: datetime = Field(default_factory=datetime.now)


class ModelCacheStatus(BaseModel):
    """State of the cached JQL model handle."""

    active: bool = False
    age_hours: float = 0.0
