"""Natural-language query API endpoint."""

from __future__ import annotations

import time
from datetime import datetime

from fastapi import APIRouter, HTTPException

from jira_ai_assistant import LOGGER
from jira_ai_assistant.entities.api_schemas import QueryRequest
from jira_ai_assistant.entities.api_schemas import QueryResponse
from jira_ai_assistant.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from jira_ai_assistant.use_cases.query_orchestrator import QueryOrchestratorUseCase
from jira_ai_assistant.utils.exceptions import QueryValidationError


class QueryEndpoint(ServiceAPIEndpointBluePrint):
    """API endpoint translating free text into JQL and returning the matching issues."""

    def __init__(self, query_orchestrator: QueryOrchestratorUseCase):
        """Initialize the endpoint.

        Args:
            query_orchestrator: Use case handling a natural-language query end to end
        """
        self.query_orchestrator = query_orchestrator

    def create_rest_api_route(self) -> APIRouter:
        """Create and configure the API router for natural-language queries.

        Returns:
            Configured APIRouter for the query endpoint
        """
        api_route = APIRouter(tags=["Query"])

        @api_route.post(
            "/query",
            summary="Search Jira with a natural-language query",
            description=(
                "Generates JQL from free text, fetches matching issues and, for worklog "
                "or story point questions, attaches the aggregated summaries"
            ),
            response_model=QueryResponse,
        )
        async def query(request: QueryRequest):
            started = time.perf_counter()
            try:
                return await self.query_orchestrator.handle(
                    request.query, include_analysis=request.include_analysis
                )
            except QueryValidationError as e:
                raise e.to_http_exception()
            except Exception as e:
                LOGGER.error(f"Error in /query endpoint: {str(e)}", exc_info=True)
                raise HTTPException(
                    status_code=500,
                    detail={
                        "error": str(e) or "An unexpected error occurred",
                        "metadata": {
                            "processing_time_ms": int((time.perf_counter() - started) * 1000),
                            "timestamp": datetime.now().isoformat(),
                        },
                    },
                )

        return api_route
