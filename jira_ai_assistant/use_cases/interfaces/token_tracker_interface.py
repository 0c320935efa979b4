from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import Optional

from jira_ai_assistant.entities.summaries import TokenUsage
from jira_ai_assistant.entities.summaries import TokenUsageStats


class TokenTrackerInterface(ABC):
    @abstractmethod
    def track_usage(
        self,
        input_text: str,
        output_text: str,
        exact_input_tokens: Optional[int] = None,
        exact_output_tokens: Optional[int] = None,
    ) -> TokenUsage:
        pass

    @abstractmethod
    def get_stats(self) -> TokenUsageStats:
        pass

    @abstractmethod
    def reset(self) -> None:
        pass
