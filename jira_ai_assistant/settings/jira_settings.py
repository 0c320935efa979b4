from enum import Enum
from typing import Optional

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class JiraConnectionType(Enum):
    CLOUD = "cloud"
    SELF_HOSTED = "self_hosted"


class JiraConnectionSettings(BaseSettings):
    username: Optional[str] = Field(default=None, description="Jira username")
    password: Optional[str] = Field(default=None, description="Jira password")
    email: Optional[str] = Field(default=None, description="Jira email")
    domain: Optional[HttpUrl] = Field(
        description="Jira domain (e.g., https://your-domain.atlassian.net)",
        default=None,
    )
    token: Optional[str] = Field(
        description="Jira API token",
        default=None,
    )
    timeout: int = Field(
        default=15,
        description="Timeout in seconds applied to every Jira REST call",
    )
    demo_mode: bool = Field(
        default=False,
        description="Serve issues from a local JSON file instead of Jira",
    )
    demo_data_path: Optional[str] = Field(
        default=None,
        description="Path of the JSON file used in demo mode",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="jira_", extra="ignore"
    )

    @property
    def connection_type(self) -> JiraConnectionType:
        """Determine if the Jira instance is cloud-based or self-hosted.

        Returns:
            JiraConnectionType: CLOUD if domain contains 'atlassian.net', SELF_HOSTED otherwise.
        """
        if self.domain is not None and "atlassian.net" in self.domain.host:
            return JiraConnectionType.CLOUD
        return JiraConnectionType.SELF_HOSTED

    @property
    def is_configured(self) -> bool:
        """Whether enough credentials are present to open a Jira connection."""
        if self.domain is None:
            return False
        if self.connection_type == JiraConnectionType.CLOUD:
            return bool(self.email and self.token)
        return bool(self.token or (self.username and self.password))
