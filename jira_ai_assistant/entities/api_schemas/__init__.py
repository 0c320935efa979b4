"""API schema models package."""

__all__ = [
    "QueryRequest",
    "QueryResponse",
    "QueryMetadata",
    "TranslateRequest",
    "TranslateResponse",
    "AssistantChatRequest",
    "AssistantChatResponse",
    "StoryPointsRequest",
    "StoryPointsResponse",
    "WorklogRequest",
    "WorklogResponse",
]

from jira_ai_assistant.entities.api_schemas.aggregation import (
    StoryPointsRequest,
    StoryPointsResponse,
    WorklogRequest,
    WorklogResponse,
)
from jira_ai_assistant.entities.api_schemas.query import (
    AssistantChatRequest,
    AssistantChatResponse,
    QueryMetadata,
    QueryRequest,
    QueryResponse,
    TranslateRequest,
    TranslateResponse,
)
