"""Request level handling of natural-language Jira queries.

The orchestrator translates the query, decides whether worklog or story point
aggregation applies, runs those reducers in degraded mode and fetches the
matching issues.
"""

from __future__ import annotations

import asyncio
import time
from datetime import datetime
from typing import List
from typing import Optional
from typing import Sequence

from jira_ai_assistant import LOGGER
from jira_ai_assistant.entities.api_schemas import QueryMetadata
from jira_ai_assistant.entities.api_schemas import QueryResponse
from jira_ai_assistant.entities.constants import WORKLOG_KEYWORDS
from jira_ai_assistant.entities.query import DateRange
from jira_ai_assistant.entities.query import QueryClassification
from jira_ai_assistant.entities.summaries import ModelCacheStatus
from jira_ai_assistant.entities.summaries import StoryPointsSummary
from jira_ai_assistant.entities.summaries import WorklogSummary
from jira_ai_assistant.settings.jira_board_config import JiraBoardSettings
from jira_ai_assistant.use_cases.aggregation.story_points import StoryPointsUseCase
from jira_ai_assistant.use_cases.aggregation.worklog_hours import WorklogHoursUseCase
from jira_ai_assistant.use_cases.ai_insights import AiInsightsUseCase
from jira_ai_assistant.use_cases.interfaces.issue_tracker_repository_interface import (
    IssueTrackerRepositoryInterface,
)
from jira_ai_assistant.use_cases.query_translation.entity_extractor import (
    extract_assignee_names,
    extract_date_range,
    extract_sprint_name,
    extract_user_names,
)
from jira_ai_assistant.use_cases.query_translation.generate_jql_use_case import (
    GenerateJqlUseCase,
)
from jira_ai_assistant.utils.exceptions import QueryValidationError

STORY_POINTS_JQL_MARKER = '"story points" is not empty'


def classify_query(free_text: str, jql: str) -> QueryClassification:
    lowered = free_text.lower()
    lowered_jql = jql.lower()
    return QueryClassification(
        is_worklog_query=any(keyword in lowered for keyword in WORKLOG_KEYWORDS),
        is_story_points_query="story point" in lowered or STORY_POINTS_JQL_MARKER in lowered_jql,
    )


def validate_query(query: Optional[str]) -> str:
    if not query or not isinstance(query, str) or not query.strip():
        raise QueryValidationError()
    return query.strip()


class QueryOrchestratorUseCase:
    def __init__(
        self,
        generate_jql: GenerateJqlUseCase,
        worklog_hours: WorklogHoursUseCase,
        story_points: StoryPointsUseCase,
        ai_insights: AiInsightsUseCase,
        issue_repository: IssueTrackerRepositoryInterface,
        board_settings: JiraBoardSettings,
    ):
        self.generate_jql = generate_jql
        self.worklog_hours = worklog_hours
        self.story_points = story_points
        self.ai_insights = ai_insights
        self.issue_repository = issue_repository
        self.board_settings = board_settings

    async def translate(self, free_text: str) -> str:
        """Translate free text into JQL. Always returns a usable query."""
        return await self.generate_jql.run(free_text)

    async def summarize_worklog(
        self,
        jql: str,
        user_names: Sequence[str],
        date_range: Optional[DateRange] = None,
    ) -> List[WorklogSummary]:
        return await self.worklog_hours.run_safely(jql, user_names, date_range)

    async def summarize_story_points(
        self,
        jql: str,
        assignee_names: Sequence[str],
        sprint_name: Optional[str] = None,
    ) -> List[StoryPointsSummary]:
        return await self.story_points.run_safely(jql, assignee_names, sprint_name)

    def invalidate_cache(self) -> None:
        self.generate_jql.invalidate_cache()

    def cache_status(self) -> ModelCacheStatus:
        return self.generate_jql.cache_status()

    async def _worklog_summary(
        self, query: str, jql: str, date_range: Optional[DateRange]
    ) -> Optional[List[WorklogSummary]]:
        user_names = extract_user_names(query, jql)
        # Named users without a period are ambiguous; everything else is summarized.
        if user_names and date_range is None:
            LOGGER.warning(
                f"Could not extract a date range for users {user_names} from query "
                f"'{query}' or JQL '{jql}'"
            )
            return None
        return await self.summarize_worklog(jql, user_names, date_range)

    async def _story_points_summary(
        self, query: str, jql: str
    ) -> Optional[List[StoryPointsSummary]]:
        assignee_names = extract_assignee_names(query, jql)
        sprint_name = extract_sprint_name(query, jql)
        if not assignee_names and not sprint_name:
            LOGGER.warning(
                f"Could not extract assignee names or sprint from query '{query}' or JQL '{jql}'"
            )
            return None
        return await self.summarize_story_points(jql, assignee_names, sprint_name)

    async def handle(self, query: Optional[str], include_analysis: bool = False) -> QueryResponse:
        """Translate, aggregate and fetch for one natural-language query.

        Args:
            query: Free-text question about Jira issues
            include_analysis: Attach an AI analysis and JQL explanation

        Returns:
            The assembled query response

        Raises:
            QueryValidationError: When the query is missing or blank
            IssueTrackerError: When the plain issue fetch fails
        """
        started = time.perf_counter()
        query = validate_query(query)
        LOGGER.info(f"Processing query: {query}")

        jql = await self.translate(query)
        LOGGER.info(f"Generated JQL: {jql}")
        classification = classify_query(query, jql)

        date_range = None
        worklog_summary = None
        story_points_summary = None
        if classification.is_worklog_query:
            date_range = extract_date_range(query, jql)
            worklog_summary = await self._worklog_summary(query, jql, date_range)
        if classification.is_story_points_query:
            story_points_summary = await self._story_points_summary(query, jql)

        is_aggregation = (
            classification.is_worklog_query or classification.is_story_points_query
        )
        max_results = (
            self.board_settings.aggregation_max_results
            if is_aggregation
            else self.board_settings.general_max_results
        )
        result = await self.issue_repository.search_issues(jql, max_results=max_results)

        analysis = None
        jql_explanation = None
        if include_analysis and result.issues:
            if story_points_summary:
                analysis_call = self.ai_insights.analyze_story_points(story_points_summary, query)
            else:
                analysis_call = self.ai_insights.analyze_issues(result.issues, query)
            analysis, jql_explanation = await asyncio.gather(
                analysis_call,
                self.ai_insights.explain_jql(jql, query),
            )

        return QueryResponse(
            jql=jql,
            jql_explanation=jql_explanation,
            issues=[issue.to_response_dict() for issue in result.issues],
            total=result.total,
            max_results=result.max_results,
            start_at=result.start_at,
            analysis=analysis,
            worklog_summary=worklog_summary,
            story_points_summary=story_points_summary,
            metadata=QueryMetadata(
                processing_time_ms=int((time.perf_counter() - started) * 1000),
                timestamp=datetime.now(),
                query=query,
                is_worklog_query=classification.is_worklog_query,
                is_story_points_query=classification.is_story_points_query,
                start_date=date_range.start if date_range else None,
                end_date=date_range.end if date_range else None,
            ),
        )
