from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class GeminiConnectionSetting(BaseSettings):
    token: Optional[str] = None
    model_name: str = "gemini-2.5-flash"
    analysis_model_name: str = "gemini-1.5-flash"
    temperature: float = 0.1
    max_output_tokens: int = 500
    cache_expiry_hours: float = Field(
        default=1.0,
        description="Age after which the cached JQL model is rebuilt",
    )
    request_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for a single generation request",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="gemini_connection_config_",
        extra="ignore",
    )

    @property
    def is_configured(self) -> bool:
        return bool(self.token) and len(self.token) > 10
