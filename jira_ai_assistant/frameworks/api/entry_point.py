"""FastAPI application entry point."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jira_ai_assistant import LOGGER
from jira_ai_assistant.app_container import get_container, startup, shutdown
from jira_ai_assistant.frameworks.api.configs import fastapi_information
from jira_ai_assistant.frameworks.api.configs import fastapi_tags_metadata
from jira_ai_assistant.frameworks.api.registry import SubServiceEndpoints
from jira_ai_assistant.settings.api_settings import ApiServerSettings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Lifecycle manager for the FastAPI application.

    Args:
        app: FastAPI application instance

    Yields:
        None when setup is complete
    """
    LOGGER.info("Starting API server...")
    await startup()
    yield
    LOGGER.info("Shutting down API server...")
    await shutdown()


app = FastAPI(
    **fastapi_information,
    openapi_tags=fastapi_tags_metadata,
    lifespan=lifespan,
)

container = get_container()

app.add_middleware(
    CORSMiddleware,
    allow_origins=container[ApiServerSettings].allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

container[SubServiceEndpoints].include_in(app)
