__all__ = [
    "GenerativeModelInterface",
    "LLMInterface",
    "IssueTrackerRepositoryInterface",
    "TokenTrackerInterface",
]

from jira_ai_assistant.use_cases.interfaces.issue_tracker_repository_interface import (
    IssueTrackerRepositoryInterface,
)
from jira_ai_assistant.use_cases.interfaces.llm_interface import GenerativeModelInterface
from jira_ai_assistant.use_cases.interfaces.llm_interface import LLMInterface
from jira_ai_assistant.use_cases.interfaces.token_tracker_interface import (
    TokenTrackerInterface,
)
