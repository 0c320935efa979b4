"""AI assistant chat API endpoint."""

from __future__ import annotations

import time
from datetime import datetime

from fastapi import APIRouter, HTTPException

from jira_ai_assistant import LOGGER
from jira_ai_assistant.entities.api_schemas import AssistantChatRequest
from jira_ai_assistant.entities.api_schemas import AssistantChatResponse
from jira_ai_assistant.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from jira_ai_assistant.use_cases.ai_insights import AiInsightsUseCase
from jira_ai_assistant.utils.exceptions import QueryValidationError


class AssistantEndpoint(ServiceAPIEndpointBluePrint):
    def __init__(self, ai_insights: AiInsightsUseCase):
        self.ai_insights = ai_insights

    def create_rest_api_route(self) -> APIRouter:
        api_route = APIRouter(prefix="/ai", tags=["Assistant"])

        @api_route.post(
            "/query",
            summary="Ask the assistant",
            description="Answers a free-form question, optionally grounded on the given data",
            response_model=AssistantChatResponse,
        )
        async def ask_assistant(request: AssistantChatRequest):
            started = time.perf_counter()
            if not request.prompt or not request.prompt.strip():
                raise QueryValidationError(
                    "Prompt parameter is required and must be a non-empty string"
                ).to_http_exception()

            LOGGER.info(f"Processing AI chat query: {request.prompt}")
            try:
                response = await self.ai_insights.generate_response(
                    request.prompt, request.context
                )
            except Exception as e:
                LOGGER.error(f"Error in /ai/query endpoint: {str(e)}", exc_info=True)
                raise HTTPException(
                    status_code=500,
                    detail={"error": str(e) or "An unexpected error occurred"},
                )

            return AssistantChatResponse(
                response=response,
                processing_time_ms=int((time.perf_counter() - started) * 1000),
                timestamp=datetime.now(),
                prompt=request.prompt,
            )

        return api_route
