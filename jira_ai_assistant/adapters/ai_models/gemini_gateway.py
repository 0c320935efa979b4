from __future__ import annotations

from typing import Any, Dict, Optional

import google.generativeai as genai

from jira_ai_assistant import LOGGER
from jira_ai_assistant.entities.llm_response import LLMResponse
from jira_ai_assistant.settings.gemini_settings import GeminiConnectionSetting
from jira_ai_assistant.use_cases.interfaces.llm_interface import GenerativeModelInterface
from jira_ai_assistant.use_cases.interfaces.llm_interface import LLMInterface
from jira_ai_assistant.utils.exceptions import LLMConfigurationError


def _to_llm_response(response: Any) -> LLMResponse:
    text = response.text if hasattr(response, "text") else ""
    usage = getattr(response, "usage_metadata", None)
    return LLMResponse(
        text=text or "",
        input_tokens=getattr(usage, "prompt_token_count", None) if usage else None,
        output_tokens=getattr(usage, "candidates_token_count", None) if usage else None,
    )


class GeminiModelHandle(GenerativeModelInterface):
    """A ``genai.GenerativeModel`` bound to its system instructions."""

    def __init__(self, model: genai.GenerativeModel, request_timeout: float):
        self.model = model
        self.request_timeout = request_timeout

    async def generate(self, prompt: str) -> LLMResponse:
        response = await self.model.generate_content_async(
            prompt, request_options={"timeout": self.request_timeout}
        )
        return _to_llm_response(response)


class GeminiGateway(LLMInterface):
    """
    Concrete adapter for calling Google's Gemini language models.
    """

    def __init__(self, settings: GeminiConnectionSetting):
        """Initialize the Gemini gateway with API settings."""
        self.settings = settings
        self.api_key = settings.token
        self.model_name = settings.model_name
        if self.is_configured:
            genai.configure(api_key=self.api_key)
        else:
            LOGGER.warning("Gemini API token not found, AI features run in fallback mode")

    @property
    def is_configured(self) -> bool:
        return self.settings.is_configured

    def _generation_config(
        self, temperature: Optional[float], max_output_tokens: Optional[int]
    ) -> Dict[str, Any]:
        generation_config: Dict[str, Any] = {}
        if temperature is not None:
            generation_config["temperature"] = temperature
        if max_output_tokens is not None:
            generation_config["max_output_tokens"] = max_output_tokens
        return generation_config

    def create_model(
        self,
        system_instruction: Optional[str] = None,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
    ) -> GenerativeModelInterface:
        """
        Build a Gemini model bound to the given system instructions.

        Raises:
            LLMConfigurationError: When no API token is configured.
        """
        if not self.is_configured:
            raise LLMConfigurationError()

        model = genai.GenerativeModel(
            self.model_name,
            generation_config=self._generation_config(temperature, max_output_tokens),
            system_instruction=system_instruction,
        )
        return GeminiModelHandle(model, self.settings.request_timeout)

    async def generate_text(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        model_name: Optional[str] = None,
    ) -> LLMResponse:
        """
        Generate text using the Gemini API directly.

        Args:
            prompt: The prompt to send to the model.
            temperature: Controls randomness (lower is more deterministic).
            max_tokens: Maximum number of tokens to generate (called max_output_tokens in Gemini).
            model_name: Model to use instead of the configured one.

        Returns:
            Generated text with the token counts Gemini reported.
        """
        if not self.is_configured:
            raise LLMConfigurationError()

        model = genai.GenerativeModel(
            model_name or self.model_name,
            generation_config=self._generation_config(temperature, max_tokens),
        )
        response = await model.generate_content_async(
            prompt, request_options={"timeout": self.settings.request_timeout}
        )
        return _to_llm_response(response)
