"""Dependency injection configuration for the Jira AI assistant."""

from __future__ import annotations

from lagom import Container, Singleton

from jira_ai_assistant import LOGGER
from jira_ai_assistant.adapters.ai_models.gemini_gateway import GeminiGateway
from jira_ai_assistant.adapters.repositories.jira.file_issue_repository import (
    FileIssueRepository,
)
from jira_ai_assistant.adapters.repositories.jira.jira_cloud_repository import (
    JiraCloudRepository,
)
from jira_ai_assistant.adapters.token_usage.token_tracker import TokenTracker
from jira_ai_assistant.frameworks.api.endpoints import AggregationEndpoint
from jira_ai_assistant.frameworks.api.endpoints import AssistantEndpoint
from jira_ai_assistant.frameworks.api.endpoints import HealthCheckEndpoint
from jira_ai_assistant.frameworks.api.endpoints import QueryEndpoint
from jira_ai_assistant.frameworks.api.endpoints import TokenStatsEndpoint
from jira_ai_assistant.frameworks.api.registry import SubServiceEndpoints
from jira_ai_assistant.settings import API_SETTINGS
from jira_ai_assistant.settings import GEMINI_SETTINGS
from jira_ai_assistant.settings import JIRA_BOARD_SETTINGS
from jira_ai_assistant.settings import JIRA_SETTINGS
from jira_ai_assistant.settings.api_settings import ApiServerSettings
from jira_ai_assistant.settings.gemini_settings import GeminiConnectionSetting
from jira_ai_assistant.settings.jira_board_config import JiraBoardSettings
from jira_ai_assistant.settings.jira_settings import JiraConnectionSettings
from jira_ai_assistant.use_cases.aggregation.story_points import StoryPointsUseCase
from jira_ai_assistant.use_cases.aggregation.worklog_hours import WorklogHoursUseCase
from jira_ai_assistant.use_cases.ai_insights import AiInsightsUseCase
from jira_ai_assistant.use_cases.interfaces.issue_tracker_repository_interface import (
    IssueTrackerRepositoryInterface,
)
from jira_ai_assistant.use_cases.interfaces.llm_interface import LLMInterface
from jira_ai_assistant.use_cases.interfaces.token_tracker_interface import (
    TokenTrackerInterface,
)
from jira_ai_assistant.use_cases.query_orchestrator import QueryOrchestratorUseCase
from jira_ai_assistant.use_cases.query_translation.generate_jql_use_case import (
    GenerateJqlUseCase,
)


def create_issue_repository(settings: JiraConnectionSettings) -> IssueTrackerRepositoryInterface:
    if settings.demo_mode:
        LOGGER.info("Demo mode enabled, issues are served from a local file")
        return FileIssueRepository(settings.demo_data_path)
    return JiraCloudRepository(settings)


def configure_container() -> Container:
    """Configure the dependency injection container.

    Returns:
        Configured Lagom container
    """
    container = Container()

    # Add settings to container
    container[JiraConnectionSettings] = Singleton(lambda: JIRA_SETTINGS)
    container[JiraBoardSettings] = Singleton(lambda: JIRA_BOARD_SETTINGS)
    container[GeminiConnectionSetting] = Singleton(lambda: GEMINI_SETTINGS)
    container[ApiServerSettings] = Singleton(lambda: API_SETTINGS)

    # A) Bind INTERFACE -> ADAPTER
    container[IssueTrackerRepositoryInterface] = Singleton(
        lambda c: create_issue_repository(c[JiraConnectionSettings])
    )

    container[LLMInterface] = Singleton(
        lambda c: GeminiGateway(c[GeminiConnectionSetting])
    )

    container[TokenTrackerInterface] = Singleton(lambda: TokenTracker())

    # B) Bind USE CASES
    container[GenerateJqlUseCase] = Singleton(
        lambda c: GenerateJqlUseCase(
            llm=c[LLMInterface],
            token_tracker=c[TokenTrackerInterface],
            settings=c[GeminiConnectionSetting],
        )
    )

    container[WorklogHoursUseCase] = Singleton(
        lambda c: WorklogHoursUseCase(
            issue_repository=c[IssueTrackerRepositoryInterface],
            board_settings=c[JiraBoardSettings],
        )
    )

    container[StoryPointsUseCase] = Singleton(
        lambda c: StoryPointsUseCase(
            issue_repository=c[IssueTrackerRepositoryInterface],
            board_settings=c[JiraBoardSettings],
        )
    )

    container[AiInsightsUseCase] = Singleton(
        lambda c: AiInsightsUseCase(
            llm=c[LLMInterface],
            token_tracker=c[TokenTrackerInterface],
            settings=c[GeminiConnectionSetting],
        )
    )

    container[QueryOrchestratorUseCase] = Singleton(
        lambda c: QueryOrchestratorUseCase(
            generate_jql=c[GenerateJqlUseCase],
            worklog_hours=c[WorklogHoursUseCase],
            story_points=c[StoryPointsUseCase],
            ai_insights=c[AiInsightsUseCase],
            issue_repository=c[IssueTrackerRepositoryInterface],
            board_settings=c[JiraBoardSettings],
        )
    )

    # Register API endpoints
    container[SubServiceEndpoints] = Singleton(lambda: SubServiceEndpoints())

    container[HealthCheckEndpoint] = Singleton(
        lambda c: HealthCheckEndpoint(
            issue_repository=c[IssueTrackerRepositoryInterface],
            llm=c[LLMInterface],
        )
    )

    container[QueryEndpoint] = Singleton(
        lambda c: QueryEndpoint(query_orchestrator=c[QueryOrchestratorUseCase])
    )

    container[AssistantEndpoint] = Singleton(
        lambda c: AssistantEndpoint(ai_insights=c[AiInsightsUseCase])
    )

    container[TokenStatsEndpoint] = Singleton(
        lambda c: TokenStatsEndpoint(
            token_tracker=c[TokenTrackerInterface],
            query_orchestrator=c[QueryOrchestratorUseCase],
        )
    )

    container[AggregationEndpoint] = Singleton(
        lambda c: AggregationEndpoint(query_orchestrator=c[QueryOrchestratorUseCase])
    )

    return container
