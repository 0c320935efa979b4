"""Token usage statistics and model cache API endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from jira_ai_assistant.entities.summaries import ModelCacheStatus
from jira_ai_assistant.entities.summaries import TokenUsageStats
from jira_ai_assistant.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from jira_ai_assistant.use_cases.interfaces.token_tracker_interface import (
    TokenTrackerInterface,
)
from jira_ai_assistant.use_cases.query_orchestrator import QueryOrchestratorUseCase


class TokenStatsEndpoint(ServiceAPIEndpointBluePrint):
    """Operator endpoints for LLM token counters and the cached JQL model."""

    def __init__(
        self,
        token_tracker: TokenTrackerInterface,
        query_orchestrator: QueryOrchestratorUseCase,
    ):
        self.token_tracker = token_tracker
        self.query_orchestrator = query_orchestrator

    def create_rest_api_route(self) -> APIRouter:
        api_route = APIRouter(prefix="/stats", tags=["Stats"])

        @api_route.get(
            "/tokens",
            summary="Token usage since startup",
            response_model=TokenUsageStats,
        )
        async def get_token_stats():
            return self.token_tracker.get_stats()

        @api_route.get(
            "/cache",
            summary="State of the cached JQL model",
            response_model=ModelCacheStatus,
        )
        async def get_cache_status():
            return self.query_orchestrator.cache_status()

        @api_route.post(
            "/cache/invalidate",
            summary="Invalidate the cached JQL model",
            description="The next query rebuilds the model with the current system instructions",
        )
        async def invalidate_cache():
            self.query_orchestrator.invalidate_cache()
            return {"status": "invalidated"}

        return api_route
