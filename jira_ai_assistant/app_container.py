"""Application container for the Jira AI assistant."""

from typing import Optional

from lagom import Container

from jira_ai_assistant import LOGGER
from jira_ai_assistant.config_dependency_injection import configure_container
from jira_ai_assistant.frameworks.api.endpoints import AggregationEndpoint
from jira_ai_assistant.frameworks.api.endpoints import AssistantEndpoint
from jira_ai_assistant.frameworks.api.endpoints import HealthCheckEndpoint
from jira_ai_assistant.frameworks.api.endpoints import QueryEndpoint
from jira_ai_assistant.frameworks.api.endpoints import TokenStatsEndpoint
from jira_ai_assistant.frameworks.api.registry import SubServiceEndpoints
from jira_ai_assistant.use_cases.interfaces.issue_tracker_repository_interface import (
    IssueTrackerRepositoryInterface,
)
from jira_ai_assistant.use_cases.interfaces.llm_interface import LLMInterface
from jira_ai_assistant.use_cases.query_orchestrator import QueryOrchestratorUseCase


# Global container instance
_container: Optional[Container] = None


def get_container() -> Container:
    """Get the global container instance.

    Returns:
        The configured container
    """
    global _container
    if _container is None:
        _container = setup_container()
    return _container


def setup_container() -> Container:
    """Set up and configure the application container.

    Returns:
        Fully configured container
    """
    container = configure_container()

    registry = container[SubServiceEndpoints]
    for endpoint_type in (
        HealthCheckEndpoint,
        QueryEndpoint,
        AssistantEndpoint,
        TokenStatsEndpoint,
        AggregationEndpoint,
    ):
        registry.register(container[endpoint_type])

    return container


async def startup() -> None:
    """Run startup tasks for the application."""
    LOGGER.info("Starting Jira AI assistant")
    container = get_container()

    # A fresh deploy may ship new system instructions; never reuse an older handle.
    container[QueryOrchestratorUseCase].invalidate_cache()

    llm = container[LLMInterface]
    LOGGER.info(f"AI service {'configured' if llm.is_configured else 'running in fallback mode'}")

    repository = container[IssueTrackerRepositoryInterface]
    if await repository.check_connection():
        LOGGER.info("Issue tracker connection verified")
    else:
        LOGGER.warning("Issue tracker is not reachable, searches will fail until it is")


async def shutdown() -> None:
    """Run shutdown tasks for the application."""
    LOGGER.info("Shutting down Jira AI assistant")
