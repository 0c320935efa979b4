from __future__ import annotations

import math
import threading
from datetime import datetime
from typing import Optional

from jira_ai_assistant import LOGGER
from jira_ai_assistant.entities.summaries import TokenUsage
from jira_ai_assistant.entities.summaries import TokenUsageStats
from jira_ai_assistant.use_cases.interfaces.token_tracker_interface import (
    TokenTrackerInterface,
)

CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    return math.ceil(len(text) / CHARS_PER_TOKEN)


class TokenTracker(TokenTrackerInterface):
    """In-process counters of LLM token usage since startup."""

    def __init__(self):
        self._lock = threading.Lock()
        self._stats = TokenUsageStats()

    def track_usage(
        self,
        input_text: str,
        output_text: str,
        exact_input_tokens: Optional[int] = None,
        exact_output_tokens: Optional[int] = None,
    ) -> TokenUsage:
        """Record one call, estimating counts the provider did not report."""
        input_tokens = (
            exact_input_tokens if exact_input_tokens is not None else estimate_tokens(input_text)
        )
        output_tokens = (
            exact_output_tokens if exact_output_tokens is not None else estimate_tokens(output_text)
        )
        now = datetime.now()

        with self._lock:
            self._stats.total_queries += 1
            self._stats.total_input_tokens += input_tokens
            self._stats.total_output_tokens += output_tokens
            self._stats.total_tokens += input_tokens + output_tokens
            self._stats.last_query = now
            query_count = self._stats.total_queries

        LOGGER.debug(
            f"Token usage #{query_count}: input={input_tokens}, output={output_tokens}"
        )
        return TokenUsage(
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            total_tokens=input_tokens + output_tokens,
            query_count=query_count,
            timestamp=now,
        )

    def get_stats(self) -> TokenUsageStats:
        with self._lock:
            return self._stats.model_copy()

    def reset(self) -> None:
        with self._lock:
            self._stats = TokenUsageStats()
