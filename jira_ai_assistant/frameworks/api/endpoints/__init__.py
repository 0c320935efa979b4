"""API endpoints package."""

__all__ = [
    "AggregationEndpoint",
    "AssistantEndpoint",
    "HealthCheckEndpoint",
    "QueryEndpoint",
    "TokenStatsEndpoint",
]

from jira_ai_assistant.frameworks.api.endpoints.aggregation import AggregationEndpoint
from jira_ai_assistant.frameworks.api.endpoints.assistant import AssistantEndpoint
from jira_ai_assistant.frameworks.api.endpoints.health_check import HealthCheckEndpoint
from jira_ai_assistant.frameworks.api.endpoints.query import QueryEndpoint
from jira_ai_assistant.frameworks.api.endpoints.token_stats import TokenStatsEndpoint
