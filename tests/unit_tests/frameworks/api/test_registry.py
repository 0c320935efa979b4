"""Unit tests for the endpoint registry."""

import unittest
from unittest.mock import MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from jira_ai_assistant.frameworks.api.endpoints.health_check import HealthCheckEndpoint
from jira_ai_assistant.frameworks.api.endpoints.token_stats import TokenStatsEndpoint
from jira_ai_assistant.frameworks.api.registry import SubServiceEndpoints


class TestSubServiceEndpoints(unittest.TestCase):
    """Test suite for SubServiceEndpoints."""

    def setUp(self):
        """Set up test fixtures."""
        self.registry = SubServiceEndpoints()
        self.health = HealthCheckEndpoint(issue_repository=MagicMock(), llm=MagicMock())
        self.stats = TokenStatsEndpoint(token_tracker=MagicMock(), query_orchestrator=MagicMock())

    def test_register_keeps_order(self):
        # Act
        self.registry.register(self.health)
        self.registry.register(self.stats)

        # Assert
        self.assertEqual(list(self.registry), [self.health, self.stats])

    def test_register_skips_duplicate_class(self):
        # Act
        self.registry.register(self.health)
        self.registry.register(
            HealthCheckEndpoint(issue_repository=MagicMock(), llm=MagicMock())
        )

        # Assert
        self.assertEqual(len(self.registry), 1)
        self.assertIs(self.registry.endpoints[0], self.health)

    def test_include_in_mounts_routers(self):
        # Arrange
        self.registry.register(self.health)
        app = FastAPI()

        # Act
        self.registry.include_in(app)

        # Assert
        response = TestClient(app).get("/health/ping")
        self.assertEqual(response.json(), {"ping": "pong"})


if __name__ == "__main__":
    unittest.main()
