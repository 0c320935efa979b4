"""Unit tests for AssistantEndpoint."""

import unittest
from unittest.mock import AsyncMock, MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from jira_ai_assistant.frameworks.api.endpoints.assistant import AssistantEndpoint


class TestAssistantEndpoint(unittest.TestCase):
    """Test suite for AssistantEndpoint."""

    def setUp(self):
        """Set up test fixtures."""
        self.ai_insights = MagicMock()
        self.ai_insights.generate_response = AsyncMock(return_value="Use status != Done")
        self.endpoint = AssistantEndpoint(ai_insights=self.ai_insights)

        self.app = FastAPI()
        self.app.include_router(self.endpoint.create_rest_api_route())
        self.client = TestClient(self.app)

    def test_create_rest_api_route(self):
        # Act
        router = self.endpoint.create_rest_api_route()

        # Assert
        self.assertEqual(router.prefix, "/ai")
        self.assertEqual(router.tags, ["Assistant"])

    def test_ask_assistant(self):
        # Act
        response = self.client.post(
            "/ai/query",
            json={"prompt": "How do I find open work?", "context": [{"key": "MSC-1"}]},
        )

        # Assert
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["response"], "Use status != Done")
        self.assertEqual(data["prompt"], "How do I find open work?")
        self.ai_insights.generate_response.assert_awaited_once_with(
            "How do I find open work?", [{"key": "MSC-1"}]
        )

    def test_blank_prompt_is_rejected(self):
        # Act
        response = self.client.post("/ai/query", json={"prompt": " "})

        # Assert
        self.assertEqual(response.status_code, 400)
        self.ai_insights.generate_response.assert_not_awaited()

    def test_unexpected_error(self):
        # Arrange
        self.ai_insights.generate_response.side_effect = RuntimeError("boom")

        # Act
        response = self.client.post("/ai/query", json={"prompt": "hello"})

        # Assert
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"], {"error": "boom"})


if __name__ == "__main__":
    unittest.main()
