"""API schema models for natural-language query endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from jira_ai_assistant.entities.summaries import StoryPointsSummary
from jira_ai_assistant.entities.summaries import WorklogSummary


class QueryRequest(BaseModel):
    """Request model for the natural-language search endpoint.

    Args:
        query: Free-text question about Jira issues
        include_analysis: Whether to attach an AI analysis of the results
    """
    query: Optional[str] = Field(None, description="Free-text question about Jira issues")
    include_analysis: bool = Field(False, description="Attach an AI analysis of the results")


class QueryMetadata(BaseModel):
    """Bookkeeping attached to every query response."""
    processing_time_ms: int = Field(description="Time spent handling the request")
    timestamp: datetime = Field(description="Time the response was assembled")
    query: str = Field(description="The original free-text query")
    is_worklog_query: bool = Field(False, description="Worklog aggregation was requested")
    is_story_points_query: bool = Field(False, description="Story points aggregation was requested")
    start_date: Optional[str] = Field(None, description="Start of the extracted date range")
    end_date: Optional[str] = Field(None, description="End of the extracted date range")


class QueryResponse(BaseModel):
    """Response model for the natural-language search endpoint."""
    jql: str = Field(description="JQL generated from the free-text query")
    jql_explanation: Optional[str] = Field(None, description="Plain-language explanation of the JQL")
    issues: List[Dict[str, Any]] = Field(default_factory=list, description="Matching issues")
    total: int = Field(0, description="Total number of matching issues")
    max_results: int = Field(0, description="Result cap applied to the search")
    start_at: int = Field(0, description="Offset of the first returned issue")
    analysis: Optional[str] = Field(None, description="AI analysis of the results")
    worklog_summary: Optional[List[WorklogSummary]] = Field(None, description="Hours per user")
    story_points_summary: Optional[List[StoryPointsSummary]] = Field(
        None, description="Story points per assignee"
    )
    metadata: QueryMetadata


class TranslateRequest(BaseModel):
    query: Optional[str] = Field(None, description="Free-text question to translate")


class TranslateResponse(BaseModel):
    query: str = Field(description="The original free-text query")
    jql: str = Field(description="Generated JQL")


class AssistantChatRequest(BaseModel):
    """Request model for the assistant chat endpoint.

    Args:
        prompt: Question for the assistant
        context: Optional data (usually issues) the answer should be based on
    """
    prompt: Optional[str] = Field(None, description="Question for the assistant")
    context: Optional[Any] = Field(None, description="Optional data to ground the answer")


class AssistantChatResponse(BaseModel):
    response: str = Field(description="Assistant answer")
    processing_time_ms: int = Field(description="Time spent handling the request")
    timestamp: datetime = Field(description="Time the response was assembled")
    prompt: str = Field(description="The original prompt")
