from __future__ import annotations

import re
import time
from typing import Callable

from jira_ai_assistant import LOGGER
from jira_ai_assistant.entities.summaries import ModelCacheStatus
from jira_ai_assistant.settings.gemini_settings import GeminiConnectionSetting
from jira_ai_assistant.use_cases.interfaces.llm_interface import GenerativeModelInterface
from jira_ai_assistant.use_cases.interfaces.llm_interface import LLMInterface
from jira_ai_assistant.use_cases.interfaces.token_tracker_interface import (
    TokenTrackerInterface,
)
from jira_ai_assistant.use_cases.query_translation.default_filter import (
    augment_with_default_filter,
)
from jira_ai_assistant.use_cases.query_translation.fallback_query_builder import (
    build_fallback_jql,
)
from jira_ai_assistant.use_cases.query_translation.model_cache import ModelHandleCache
from jira_ai_assistant.use_cases.query_translation.prompts import JQL_SYSTEM_PROMPT
from jira_ai_assistant.use_cases.query_translation.prompts import build_full_prompt
from jira_ai_assistant.use_cases.query_translation.prompts import build_user_prompt

JQL_SHAPE = re.compile(r"\w+\s*(=|~|!=|in|not in|>|<|>=|<=)\s*.+")
MIN_JQL_LENGTH = 3

_CODE_FENCE = re.compile(r"```(?:jql|sql)?", re.IGNORECASE)


def strip_code_fences(text: str) -> str:
    return _CODE_FENCE.sub("", text).strip()


def is_valid_jql(jql: str) -> bool:
    return len(jql) >= MIN_JQL_LENGTH and JQL_SHAPE.search(jql) is not None


class GenerateJqlUseCase:
    """Translate free text into JQL with a cached Gemini model.

    The system instructions are bound once to a cached model handle, so each call
    only sends the user's query. Anything that goes wrong, from missing credentials
    to malformed output, degrades to the rule based fallback builder.
    """

    def __init__(
        self,
        llm: LLMInterface,
        token_tracker: TokenTrackerInterface,
        settings: GeminiConnectionSetting,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.llm = llm
        self.token_tracker = token_tracker
        self.settings = settings
        self.model_cache = ModelHandleCache(
            factory=self._create_model,
            expiry_hours=settings.cache_expiry_hours,
            clock=clock,
        )

    def _create_model(self) -> GenerativeModelInterface:
        return self.llm.create_model(
            system_instruction=JQL_SYSTEM_PROMPT,
            temperature=self.settings.temperature,
            max_output_tokens=self.settings.max_output_tokens,
        )

    def invalidate_cache(self) -> None:
        self.model_cache.invalidate()

    def cache_status(self) -> ModelCacheStatus:
        return ModelCacheStatus(
            active=self.model_cache.is_active,
            age_hours=round(self.model_cache.age_hours(), 3),
        )

    async def run(self, free_text: str) -> str:
        """Return a usable JQL string for ``free_text``. Never raises."""
        try:
            if not self.llm.is_configured:
                LOGGER.warning("LLM not configured, using rule based JQL generation")
                return build_fallback_jql(free_text)

            try:
                model = self.model_cache.get()
            except Exception as e:
                LOGGER.warning(f"Could not build cached model, using fallback: {e}")
                return build_fallback_jql(free_text)

            prompt = build_user_prompt(free_text)
            try:
                response = await model.generate(prompt)
            except Exception as e:
                LOGGER.warning(f"Cached model failed, retrying without cache: {e}")
                prompt = build_full_prompt(free_text)
                response = await self.llm.generate_text(
                    prompt,
                    temperature=self.settings.temperature,
                    max_tokens=self.settings.max_output_tokens,
                )

            raw_jql = response.text.strip()
            self.token_tracker.track_usage(
                prompt,
                raw_jql,
                exact_input_tokens=response.input_tokens,
                exact_output_tokens=response.output_tokens,
            )

            jql = strip_code_fences(raw_jql)
            LOGGER.info(f"Generated LLM JQL: {jql}")
            if not is_valid_jql(jql):
                LOGGER.warning(f"Generated JQL '{jql}' is malformed, using fallback")
                return build_fallback_jql(free_text)

            return augment_with_default_filter(jql, free_text)
        except Exception as e:
            LOGGER.error(f"Error generating JQL with LLM: {e}", exc_info=True)
            return build_fallback_jql(free_text)
