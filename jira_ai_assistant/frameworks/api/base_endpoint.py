"""Base blueprint for API endpoints."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fastapi import APIRouter


class ServiceAPIEndpointBluePrint(ABC):
    """Blueprint for API endpoints.

    Endpoints receive their use cases through the constructor and expose their
    routes through ``create_rest_api_route``, which keeps FastAPI out of the use cases.
    """

    @abstractmethod
    def create_rest_api_route(self) -> APIRouter:
        """Create and return a configured APIRouter with route handlers.

        Returns:
            APIRouter with all endpoint routes properly configured
        """
        pass
