from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from jira_ai_assistant.entities.llm_response import LLMResponse


class GenerativeModelInterface(ABC):
    """A model handle bound once to its system instructions."""

    @abstractmethod
    async def generate(self, prompt: str) -> LLMResponse:
        """Send a single prompt against the bound instructions.

        Args:
            prompt: The per-call prompt

        Returns:
            Generated text and token counts
        """
        pass


class LLMInterface(ABC):
    """Interface for Language Model providers (Gemini, etc.)."""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether credentials are available to talk to the provider."""
        pass

    @abstractmethod
    def create_model(
        self,
        system_instruction: Optional[str] = None,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
    ) -> GenerativeModelInterface:
        """Build a model handle bound to the given system instructions.

        Raises:
            LLMConfigurationError: When the provider is not configured
        """
        pass

    @abstractmethod
    async def generate_text(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        model_name: Optional[str] = None,
    ) -> LLMResponse:
        """Generate text with a one-off model.

        Args:
            prompt: The prompt to send to the model
            temperature: Controls randomness (lower is more deterministic)
            max_tokens: Maximum number of tokens to generate
            model_name: Overrides the configured model

        Returns:
            Generated text and token counts
        """
        pass
