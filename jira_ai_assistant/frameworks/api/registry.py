"""Registry collecting the API endpoints mounted on the FastAPI app."""

from __future__ import annotations

from typing import Iterator
from typing import List

from fastapi import FastAPI

from jira_ai_assistant import LOGGER
from jira_ai_assistant.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint


class SubServiceEndpoints:
    """Ordered set of endpoint services, at most one per endpoint class."""

    def __init__(self):
        self.endpoints: List[ServiceAPIEndpointBluePrint] = []

    def __iter__(self) -> Iterator[ServiceAPIEndpointBluePrint]:
        return iter(self.endpoints)

    def __len__(self) -> int:
        return len(self.endpoints)

    def register(self, endpoint: ServiceAPIEndpointBluePrint) -> None:
        """Register an endpoint, ignoring a second instance of the same class.

        Args:
            endpoint: The endpoint to register
        """
        name = endpoint.__class__.__name__
        if any(type(registered) is type(endpoint) for registered in self.endpoints):
            LOGGER.warning(f"Endpoint {name} is already registered, skipping")
            return
        LOGGER.info(f"Registering endpoint: {name}")
        self.endpoints.append(endpoint)

    def include_in(self, app: FastAPI) -> None:
        """Mount the routers of every registered endpoint on ``app``."""
        for endpoint in self.endpoints:
            app.include_router(endpoint.create_rest_api_route())
        LOGGER.info(f"Mounted {len(self.endpoints)} endpoint routers")
