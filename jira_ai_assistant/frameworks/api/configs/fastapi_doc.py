"""FastAPI configuration settings."""

from __future__ import annotations

from typing import Dict, List, Any

from jira_ai_assistant import __version__

# FastAPI information dictionary
fastapi_information: Dict[str, Any] = {
    "title": "Jira AI Assistant API",
    "description": "Natural-language search, worklog and story point reporting over Jira",
    "version": __version__,
}

# FastAPI tags metadata for API documentation
fastapi_tags_metadata: List[Dict[str, str]] = [
    {
        "name": "Query",
        "description": "Translate free text into JQL and fetch the matching issues",
    },
    {
        "name": "Assistant",
        "description": "Free-form questions answered by the AI assistant",
    },
    {
        "name": "Reports",
        "description": "Worklog hours and story point aggregation",
    },
    {
        "name": "Stats",
        "description": "LLM token usage and model cache operations",
    },
    {
        "name": "Health",
        "description": "Health check endpoints for monitoring service status",
    },
]
