__all__ = ["fastapi_information", "fastapi_tags_metadata"]

from jira_ai_assistant.frameworks.api.configs.fastapi_doc import fastapi_information
from jira_ai_assistant.frameworks.api.configs.fastapi_doc import fastapi_tags_metadata
