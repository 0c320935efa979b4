from __future__ import annotations

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


# Custom field numbering is tenant specific; the first numeric value > 0 wins.
DEFAULT_STORY_POINT_FIELDS = [
    "customfield_10130",
    "customfield_10036",
    "customfield_10037",
    "Story Points",
    "customfield_10016",
    "customfield_10024",
    "customfield_10020",
    "storyPoints",
    "story_points",
    "points",
]


class JiraBoardSettings(BaseSettings):
    story_point_fields: List[str] = Field(
        default_factory=lambda: list(DEFAULT_STORY_POINT_FIELDS),
        description="Prioritized field identifiers checked in order for story point values",
    )
    general_max_results: int = Field(
        default=200,
        description="Result cap for plain search queries",
    )
    aggregation_max_results: int = Field(
        default=1000,
        description="Result cap for worklog and story point aggregation queries",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="jira_board_",
        extra="ignore",
    )
