from __future__ import annotations

from jira_ai_assistant import DEFAULT_PATH
from jira_ai_assistant.settings.api_settings import ApiServerSettings
from jira_ai_assistant.settings.gemini_settings import GeminiConnectionSetting
from jira_ai_assistant.settings.jira_board_config import JiraBoardSettings
from jira_ai_assistant.settings.jira_settings import JiraConnectionSettings

JIRA_SETTINGS = JiraConnectionSettings(_env_file=f"{DEFAULT_PATH}/.env")
JIRA_BOARD_SETTINGS = JiraBoardSettings(_env_file=f"{DEFAULT_PATH}/.env")
GEMINI_SETTINGS = GeminiConnectionSetting(_env_file=f"{DEFAULT_PATH}/.env")
API_SETTINGS = ApiServerSettings(_env_file=f"{DEFAULT_PATH}/.env")
