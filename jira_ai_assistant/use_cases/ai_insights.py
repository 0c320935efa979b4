from __future__ import annotations

import json
from collections import Counter
from typing import Any
from typing import Sequence

from jira_ai_assistant import LOGGER
from jira_ai_assistant.entities.issue import IssueRecord
from jira_ai_assistant.entities.summaries import StoryPointsSummary
from jira_ai_assistant.settings.gemini_settings import GeminiConnectionSetting
from jira_ai_assistant.use_cases.interfaces.llm_interface import LLMInterface
from jira_ai_assistant.use_cases.interfaces.token_tracker_interface import (
    TokenTrackerInterface,
)

ASSISTANT_SYSTEM_PROMPT = "JIRA AI Assistant. Help with JQL, issues, workflows. Be concise, helpful."
MAX_CONTEXT_ITEMS = 5
MAX_ANALYZED_ISSUES = 10

JQL_HELP_TEXT = """I can help you with JQL queries! Here are some examples:

- Find all bugs: type = Bug
- High priority issues: priority = High
- Issues assigned to someone: assignee = "username"
- Open issues: status != Done
- Issues created this week: created >= -1w
- Combine conditions: type = Bug AND priority = High AND status = "Open"

Would you like help with a specific JQL query?"""

WORKFLOW_HELP_TEXT = '''JIRA workflows typically include these statuses:
- To Do / Open - New issues waiting to be worked on
- In Progress - Issues currently being worked on
- In Review - Issues waiting for review
- Done / Closed - Completed issues

You can filter by status using: status = "Status Name"'''

PRIORITY_HELP_TEXT = """JIRA priority levels are typically:
- Highest/Critical - Urgent issues requiring immediate attention
- High - Important issues to be addressed soon
- Medium - Standard priority issues
- Low - Nice-to-have improvements
- Lowest - Future considerations

Filter by priority: priority = High"""

LIMITED_MODE_TEXT = """I'm currently running in limited mode due to AI API configuration issues. However, I can still help you with:

- JIRA search and filtering
- Basic JQL query guidance
- Issue management best practices
- Understanding JIRA workflows

What specific aspect of JIRA would you like help with?"""


class AiInsightsUseCase:
    """Free-form answers and analyses backed by Gemini.

    Every method returns plain text. When the model is not configured, or a call
    fails, a deterministic summary computed from the inputs is returned instead.
    """

    def __init__(
        self,
        llm: LLMInterface,
        token_tracker: TokenTrackerInterface,
        settings: GeminiConnectionSetting,
    ):
        self.llm = llm
        self.token_tracker = token_tracker
        self.settings = settings

    async def _generate(self, prompt: str) -> str:
        response = await self.llm.generate_text(
            prompt, temperature=0.7, model_name=self.settings.analysis_model_name
        )
        self.token_tracker.track_usage(
            prompt,
            response.text,
            exact_input_tokens=response.input_tokens,
            exact_output_tokens=response.output_tokens,
        )
        return response.text

    async def generate_response(self, prompt: str, context: Any = None) -> str:
        enhanced_prompt = f"{ASSISTANT_SYSTEM_PROMPT}\n\nQuery: {prompt}"
        if context:
            limited_context = context[:MAX_CONTEXT_ITEMS] if isinstance(context, list) else context
            enhanced_prompt += f"\n\nData: {json.dumps(limited_context, default=str)}"
            enhanced_prompt += "\n\nAnalyze and respond."

        if not self.llm.is_configured:
            return self.fallback_response(prompt, context)
        try:
            return await self._generate(enhanced_prompt)
        except Exception as e:
            LOGGER.error(f"Error generating AI response: {e}", exc_info=True)
            return self.fallback_response(prompt, context)

    @staticmethod
    def fallback_response(prompt: str, context: Any = None) -> str:
        lowered = prompt.lower()
        if "jql" in lowered or "query" in lowered:
            return JQL_HELP_TEXT
        if "status" in lowered or "workflow" in lowered:
            return WORKFLOW_HELP_TEXT
        if "priority" in lowered:
            return PRIORITY_HELP_TEXT
        if isinstance(context, list):
            return (
                f"I found {len(context)} issues based on your search. While I can't provide "
                "AI analysis due to API limitations, you can review the results to identify "
                "patterns in status, priority, and assignments."
            )
        return LIMITED_MODE_TEXT

    async def explain_jql(self, jql: str, query: str) -> str:
        if not self.llm.is_configured:
            return (
                f"JQL Query: {jql}\n\n"
                f'This query was generated from your request: "{query}"\n\n'
                "Basic JQL explanation:\n"
                '- ~ means "contains text"\n'
                '- = means "equals exactly"\n'
                "- AND combines conditions\n"
                "- OR provides alternatives\n\n"
                "The query will search for JIRA issues matching your criteria."
            )
        try:
            return await self._generate(
                f'Explain JQL: {jql}\nFrom query: "{query}"\nBrief explanation:'
            )
        except Exception as e:
            LOGGER.error(f"Error generating JQL explanation: {e}", exc_info=True)
            return (
                f'This JQL query ({jql}) was generated from your request: "{query}". '
                "It will search for JIRA issues matching your criteria."
            )

    async def analyze_issues(self, issues: Sequence[IssueRecord], query: str) -> str:
        if not self.llm.is_configured:
            return self.summarize_issue_distribution(issues, query)

        issue_lines = "".join(
            f"\n- {issue.key}: {issue.summary}\n"
            f"  Status: {issue.status}\n"
            f"  Priority: {issue.priority or 'Not set'}\n"
            f"  Assignee: {issue.assignee_name}\n"
            for issue in issues[:MAX_ANALYZED_ISSUES]
        )
        remaining = len(issues) - MAX_ANALYZED_ISSUES
        prompt = (
            "Analyze these JIRA issues and provide insights:\n\n"
            f'User Query: "{query}"\n'
            f"Number of issues found: {len(issues)}\n\n"
            f"Issues summary:\n{issue_lines}\n"
            + (f"... and {remaining} more issues\n" if remaining > 0 else "")
            + "\nPlease provide:\n"
            "1. A summary of the search results\n"
            "2. Key patterns or insights from the data\n"
            "3. Status distribution\n"
            "4. Priority analysis\n"
            "5. Any recommendations or next steps\n\n"
            "Keep the analysis concise but insightful."
        )
        try:
            return await self._generate(prompt)
        except Exception as e:
            LOGGER.error(f"Error analyzing issues: {e}", exc_info=True)
            return (
                f'Found {len(issues)} issues matching your query "{query}". The search includes '
                "various statuses and priorities. Review the results for more details."
            )

    @staticmethod
    def summarize_issue_distribution(issues: Sequence[IssueRecord], query: str) -> str:
        status_counts = Counter(issue.status for issue in issues)
        priority_counts = Counter(issue.priority or "Not set" for issue in issues)
        status_lines = "\n".join(f"- {status}: {count}" for status, count in status_counts.items())
        priority_lines = "\n".join(
            f"- {priority}: {count}" for priority, count in priority_counts.items()
        )
        return (
            f'Analysis for "{query}":\n\n'
            f"Found {len(issues)} issues\n\n"
            f"Status Distribution:\n{status_lines}\n\n"
            f"Priority Distribution:\n{priority_lines}\n\n"
            "You can refine your search using more specific JQL queries or filters."
        )

    async def analyze_story_points(
        self, summaries: Sequence[StoryPointsSummary], query: str
    ) -> str:
        total_points = sum(s.total_story_points for s in summaries)
        if not self.llm.is_configured:
            return self.summarize_story_point_totals(summaries, query)

        assignee_lines = "".join(
            f"\n- {s.assignee}: {s.total_story_points} total points\n"
            f"  Completed: {s.completed_story_points} points\n"
            f"  In Progress: {s.in_progress_story_points} points\n"
            f"  To Do: {s.todo_story_points} points\n"
            f"  Issues: {s.issue_count}\n"
            for s in summaries
        )
        prompt = (
            "Analyze story points data and provide insights:\n\n"
            f'User Query: "{query}"\n'
            f"Total Assignees: {len(summaries)}\n"
            f"Total Story Points: {total_points}\n\n"
            f"Assignee Summary:\n{assignee_lines}\n"
            "Please provide:\n"
            "1. Overall sprint/project analysis\n"
            "2. Individual assignee performance insights\n"
            "3. Workload distribution assessment\n"
            "4. Completion rate analysis\n"
            "5. Recommendations for sprint planning or capacity management\n\n"
            "Keep the analysis actionable and insightful."
        )
        try:
            return await self._generate(prompt)
        except Exception as e:
            LOGGER.error(f"Error analyzing story points: {e}", exc_info=True)
            return (
                f"Story points analysis shows {total_points} points across "
                f'{len(summaries)} assignees for "{query}".'
            )

    @staticmethod
    def summarize_story_point_totals(
        summaries: Sequence[StoryPointsSummary], query: str
    ) -> str:
        total_points = sum(s.total_story_points for s in summaries)
        completed_points = sum(s.completed_story_points for s in summaries)
        completion_rate = round(completed_points / total_points * 100) if total_points > 0 else 0

        breakdown = "\n".join(
            f"- {s.assignee}: {s.total_story_points} points total "
            f"({s.completed_story_points} completed, {s.in_progress_story_points} in progress, "
            f"{s.todo_story_points} to do)"
            for s in summaries
        )
        top = sorted(summaries, key=lambda s: s.total_story_points, reverse=True)[:3]
        top_lines = "\n".join(
            f"{index}. {s.assignee}: {s.total_story_points} points"
            for index, s in enumerate(top, start=1)
        )
        return (
            f'Story Points Analysis for "{query}":\n\n'
            "Summary:\n"
            f"- Total Story Points: {total_points}\n"
            f"- Completed Points: {completed_points}\n"
            f"- Completion Rate: {completion_rate}%\n\n"
            f"Assignee Breakdown:\n{breakdown}\n\n"
            f"Top Contributors:\n{top_lines}\n\n"
            f"The team has {total_points} story points across {len(summaries)} assignees "
            f"with a {completion_rate}% completion rate."
        )
