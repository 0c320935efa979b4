"""Unit tests for entity extraction from free text and JQL."""

import unittest

from jira_ai_assistant.entities.query import DateRange
from jira_ai_assistant.use_cases.query_translation.entity_extractor import (
    extract_assignee_names,
    extract_date_range,
    extract_entities,
    extract_issue_keys,
    extract_sprint_name,
    extract_team_ids,
    extract_user_names,
    split_names,
)


class TestEntityExtractor(unittest.TestCase):
    """Test suite for the entity extraction helpers."""

    def test_split_names(self):
        self.assertEqual(split_names("alice, bob and carol."), ["alice", "bob", "carol"])

    def test_issue_keys_are_deduplicated(self):
        self.assertEqual(extract_issue_keys("msc-1 and MSC-1, abc-2"), ["MSC-1", "ABC-2"])

    def test_date_range_from_text(self):
        # Act
        date_range = extract_date_range("hours by Bob from 2025-01-01 to 2025-01-31")

        # Assert
        self.assertEqual(date_range, DateRange(start="2025-01-01", end="2025-01-31"))

    def test_date_range_prefers_jql(self):
        # Arrange
        jql = 'created >= "2025-02-01" AND created <= "2025-02-28"'

        # Act
        date_range = extract_date_range("between 2025-01-01 and 2025-01-31", jql)

        # Assert
        self.assertEqual(date_range, DateRange(start="2025-02-01", end="2025-02-28"))

    def test_date_range_needs_same_field_bounds(self):
        jql = 'created >= "2025-02-01" AND updated <= "2025-02-28"'
        self.assertIsNone(extract_date_range("recent issues", jql))

    def test_user_names_from_text(self):
        # Act
        names = extract_user_names("hours logged by Alice and Bob between 2025-01-01 and 2025-01-31")

        # Assert
        self.assertEqual(names, ["Alice", "Bob"])

    def test_team_span_is_not_a_user(self):
        # Act
        names = extract_user_names("worklog of team platform between 2025-01-01 and 2025-01-31")

        # Assert
        self.assertEqual(names, [])

    def test_user_names_prefer_jql(self):
        # Arrange
        jql = 'worklogAuthor in ("Alice", "Carol") AND worklogDate >= "2025-01-01"'

        # Act
        names = extract_user_names("hours by Bob between 2025-01-01 and 2025-01-31", jql)

        # Assert
        self.assertEqual(names, ["Alice", "Carol"])

    def test_assignee_names_from_text(self):
        self.assertEqual(extract_assignee_names("story points of Dana"), ["Dana"])
        self.assertEqual(
            extract_assignee_names("points for Eve and Frank in the sprint Nova"),
            ["Eve", "Frank"],
        )

    def test_assignee_names_stop_before_sprint_scope(self):
        self.assertEqual(
            extract_assignee_names("story points for alice and bob in the current sprint"),
            ["alice", "bob"],
        )
        self.assertEqual(
            extract_assignee_names("story points of Dana for the current sprint"),
            ["Dana"],
        )

    def test_assignee_names_from_jql(self):
        self.assertEqual(
            extract_assignee_names("story points", 'assignee ~ "Grace" AND Sprint = "Nova"'),
            ["Grace"],
        )

    def test_team_ids(self):
        self.assertEqual(extract_team_ids("hours for team ids 42, 77 and core"), ["42", "77"])
        self.assertEqual(
            extract_team_ids("anything", 'Team[Team] in ("12", "34")'), ["12", "34"]
        )

    def test_sprint_name(self):
        self.assertEqual(extract_sprint_name("backlog for sprint 2025.3"), "2025.3")
        self.assertEqual(extract_sprint_name("story points", 'Sprint = "Orion"'), "Orion")
        self.assertIsNone(extract_sprint_name("show bugs"))

    def test_extract_entities(self):
        # Act
        entities = extract_entities(
            "hours logged by Alice between 2025-01-01 and 2025-01-31 on MSC-9"
        )

        # Assert
        self.assertEqual(entities.user_names, ["Alice"])
        self.assertEqual(entities.date_range, DateRange(start="2025-01-01", end="2025-01-31"))
        self.assertEqual(entities.issue_keys, ["MSC-9"])
        self.assertEqual(entities.team_ids, [])
        self.assertIsNone(entities.sprint_name)


if __name__ == "__main__":
    unittest.main()
