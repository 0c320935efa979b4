"""Health check endpoint for API service."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter

from jira_ai_assistant import __version__
from jira_ai_assistant.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from jira_ai_assistant.use_cases.interfaces.issue_tracker_repository_interface import (
    IssueTrackerRepositoryInterface,
)
from jira_ai_assistant.use_cases.interfaces.llm_interface import LLMInterface


class HealthCheckEndpoint(ServiceAPIEndpointBluePrint):
    """Health check endpoint for API service status monitoring."""

    def __init__(
        self,
        issue_repository: IssueTrackerRepositoryInterface,
        llm: LLMInterface,
    ):
        """Initialize the health check endpoint.

        Args:
            issue_repository: Repository whose connection is reported
            llm: LLM gateway whose configuration is reported
        """
        self.issue_repository = issue_repository
        self.llm = llm
        self.start_time = datetime.now()

    def create_rest_api_route(self) -> APIRouter:
        """Create and configure the API router for health checks.

        Returns:
            Configured APIRouter for health check endpoints
        """
        api_route = APIRouter(
            prefix="/health",
            tags=["Health"]
        )

        @api_route.get(
            "/",
            summary="Health check endpoint",
            description="Returns the current status of the API service and its backends"
        )
        async def health_check():
            """Health check endpoint.

            Returns:
                Dictionary with service status information
            """
            uptime = datetime.now() - self.start_time
            days = uptime.days
            hours, remainder = divmod(uptime.seconds, 3600)
            minutes, seconds = divmod(remainder, 60)

            jira_connected = await self.issue_repository.check_connection()
            return {
                "status": "ok" if jira_connected else "degraded",
                "version": __version__,
                "uptime": f"{days}d {hours}h {minutes}m {seconds}s",
                "timestamp": datetime.now().isoformat(),
                "services": {
                    "jira": "connected" if jira_connected else "unavailable",
                    "ai": "configured" if self.llm.is_configured else "fallback",
                },
            }

        @api_route.get(
            "/ping",
            summary="Simple ping endpoint",
            description="Returns a simple pong response to verify the service is running"
        )
        async def ping():
            return {"ping": "pong"}

        return api_route
