"""Worklog and story point reporting API endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi import APIRouter

from jira_ai_assistant import LOGGER
from jira_ai_assistant.entities.api_schemas import StoryPointsRequest
from jira_ai_assistant.entities.api_schemas import StoryPointsResponse
from jira_ai_assistant.entities.api_schemas import TranslateRequest
from jira_ai_assistant.entities.api_schemas import TranslateResponse
from jira_ai_assistant.entities.api_schemas import WorklogRequest
from jira_ai_assistant.entities.api_schemas import WorklogResponse
from jira_ai_assistant.entities.query import DateRange
from jira_ai_assistant.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from jira_ai_assistant.use_cases.query_orchestrator import QueryOrchestratorUseCase
from jira_ai_assistant.use_cases.query_orchestrator import validate_query
from jira_ai_assistant.utils.exceptions import QueryValidationError

JQL_QUERY_MARKER = "JQL query"


class AggregationEndpoint(ServiceAPIEndpointBluePrint):
    """API endpoints for story point and worklog reports."""

    def __init__(self, query_orchestrator: QueryOrchestratorUseCase):
        """Initialize the endpoint.

        Args:
            query_orchestrator: Use case exposing translation and aggregation
        """
        self.query_orchestrator = query_orchestrator

    async def _resolve_jql(self, jql: Optional[str], query: Optional[str]) -> str:
        if jql and jql.strip():
            return jql.strip()
        if query and query.strip():
            return await self.query_orchestrator.translate(query.strip())
        raise QueryValidationError("Either JQL query or natural language query is required")

    def create_rest_api_route(self) -> APIRouter:
        """Create and configure the API router for reports.

        Returns:
            Configured APIRouter for the report endpoints
        """
        api_route = APIRouter(prefix="/api/jira", tags=["Reports"])

        @api_route.post(
            "/story-points",
            summary="Story points per assignee",
            description="Aggregates story points by assignee and status category",
            response_model=StoryPointsResponse,
        )
        async def story_points(request: StoryPointsRequest):
            try:
                jql = await self._resolve_jql(request.jql, request.query)
            except QueryValidationError as e:
                raise e.to_http_exception()

            LOGGER.debug(f"Story points report for {request.assignees} with JQL: {jql}")
            summary = await self.query_orchestrator.summarize_story_points(
                jql, request.assignees, request.sprint
            )
            return StoryPointsResponse(
                summary=summary,
                jql=jql,
                query=request.query or JQL_QUERY_MARKER,
                timestamp=datetime.now(),
            )

        @api_route.post(
            "/worklog",
            summary="Worklog hours per user",
            description="Sums logged hours per user, optionally bounded by a date range",
            response_model=WorklogResponse,
        )
        async def worklog(request: WorklogRequest):
            try:
                jql = await self._resolve_jql(request.jql, request.query)
            except QueryValidationError as e:
                raise e.to_http_exception()

            date_range = None
            if request.start_date and request.end_date:
                date_range = DateRange(start=request.start_date, end=request.end_date)

            LOGGER.debug(f"Worklog report for {request.user_names} with JQL: {jql}")
            summary = await self.query_orchestrator.summarize_worklog(
                jql, request.user_names, date_range
            )
            return WorklogResponse(
                summary=summary,
                jql=jql,
                query=request.query or JQL_QUERY_MARKER,
                timestamp=datetime.now(),
            )

        @api_route.post(
            "/translate",
            summary="Translate free text into JQL",
            response_model=TranslateResponse,
        )
        async def translate(request: TranslateRequest):
            try:
                query = validate_query(request.query)
            except QueryValidationError as e:
                raise e.to_http_exception()

            jql = await self.query_orchestrator.translate(query)
            return TranslateResponse(query=query, jql=jql)

        return api_route
