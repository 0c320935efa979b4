"""Unit tests for the in-process token tracker."""

import unittest

from jira_ai_assistant.adapters.token_usage.token_tracker import TokenTracker
from jira_ai_assistant.adapters.token_usage.token_tracker import estimate_tokens


class TestTokenTracker(unittest.TestCase):
    """Test suite for TokenTracker."""

    def setUp(self):
        """Set up test fixtures."""
        self.tracker = TokenTracker()

    def test_estimate_tokens_rounds_up(self):
        self.assertEqual(estimate_tokens(""), 0)
        self.assertEqual(estimate_tokens("abcd"), 1)
        self.assertEqual(estimate_tokens("abcde"), 2)

    def test_track_usage_estimates_missing_counts(self):
        # Act
        usage = self.tracker.track_usage("a" * 8, "b" * 5)

        # Assert
        self.assertEqual(usage.input_tokens, 2)
        self.assertEqual(usage.output_tokens, 2)
        self.assertEqual(usage.total_tokens, 4)
        self.assertEqual(usage.query_count, 1)

    def test_exact_counts_take_precedence(self):
        # Act
        usage = self.tracker.track_usage(
            "a" * 400, "b" * 40, exact_input_tokens=7, exact_output_tokens=0
        )

        # Assert
        self.assertEqual(usage.input_tokens, 7)
        self.assertEqual(usage.output_tokens, 0)

    def test_get_stats_accumulates(self):
        # Arrange
        self.tracker.track_usage("prompt", "answer", exact_input_tokens=10, exact_output_tokens=4)
        self.tracker.track_usage("prompt", "answer", exact_input_tokens=6, exact_output_tokens=2)

        # Act
        stats = self.tracker.get_stats()

        # Assert
        self.assertEqual(stats.total_queries, 2)
        self.assertEqual(stats.total_input_tokens, 16)
        self.assertEqual(stats.total_output_tokens, 6)
        self.assertEqual(stats.total_tokens, 22)

    def test_get_stats_returns_a_copy(self):
        # Arrange
        stats = self.tracker.get_stats()

        # Act
        stats.total_queries = 99

        # Assert
        self.assertEqual(self.tracker.get_stats().total_queries, 0)

    def test_reset(self):
        # Arrange
        self.tracker.track_usage("prompt", "answer")

        # Act
        self.tracker.reset()

        # Assert
        self.assertEqual(self.tracker.get_stats().total_tokens, 0)


if __name__ == "__main__":
    unittest.main()
