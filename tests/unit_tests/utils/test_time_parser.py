"""Unit tests for Jira time-tracking string parsing."""

import unittest

from jira_ai_assistant.utils.time_parser import format_hours
from jira_ai_assistant.utils.time_parser import parse_time_spent


class TestParseTimeSpent(unittest.TestCase):
    """Test suite for parse_time_spent."""

    def test_days_hours_minutes(self):
        self.assertEqual(parse_time_spent("1d 4h 30m"), 12.5)

    def test_weeks_use_working_calendar(self):
        self.assertEqual(parse_time_spent("2w 3d 2h"), 106.0)

    def test_minutes_only(self):
        self.assertEqual(parse_time_spent("45m"), 0.75)

    def test_bare_number_is_hours(self):
        self.assertEqual(parse_time_spent("3"), 3.0)

    def test_unparsable_values(self):
        """Test that empty, missing and garbage input yield zero."""
        self.assertEqual(parse_time_spent(""), 0.0)
        self.assertEqual(parse_time_spent(None), 0.0)
        self.assertEqual(parse_time_spent("soon"), 0.0)

    def test_case_and_whitespace_insensitive(self):
        self.assertEqual(parse_time_spent("  2H 15M "), 2.25)


class TestFormatHours(unittest.TestCase):
    """Test suite for format_hours."""

    def test_zero(self):
        self.assertEqual(format_hours(0), "0h")

    def test_whole_hours(self):
        self.assertEqual(format_hours(2.0), "2h")

    def test_hours_and_minutes(self):
        self.assertEqual(format_hours(1.5), "1h 30m")

    def test_minutes_round_up_to_next_hour(self):
        self.assertEqual(format_hours(1.999), "2h")


if __name__ == "__main__":
    unittest.main()
