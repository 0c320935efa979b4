"""Unit tests for the rule based fallback JQL builder."""

import unittest

from jira_ai_assistant.use_cases.query_translation.fallback_query_builder import (
    FallbackRule,
    build_fallback_jql,
    escape_jql_string,
    quote_list,
)


class TestBuildFallbackJql(unittest.TestCase):
    """Test suite for build_fallback_jql."""

    def test_single_issue_key(self):
        self.assertEqual(build_fallback_jql("MSC-12345"), 'key = "MSC-12345"')

    def test_issue_key_is_upper_cased(self):
        self.assertEqual(build_fallback_jql("what is msc-7 about"), 'key = "MSC-7"')

    def test_multiple_issue_keys(self):
        # Act
        jql = build_fallback_jql("compare MSC-1 with MSC-2 and msc-1")

        # Assert
        self.assertEqual(jql, 'key in ("MSC-1", "MSC-2")')

    def test_backlog(self):
        # Act
        jql = build_fallback_jql("show backlog issues")

        # Assert
        self.assertEqual(
            jql, 'status IN ("New", "To Do", "Blocked") AND Sprint not in openSprints()'
        )

    def test_backlog_for_named_sprint(self):
        # Act
        jql = build_fallback_jql("backlog for sprint Orion")

        # Assert
        self.assertEqual(jql, 'status IN ("New", "To Do", "Blocked") AND Sprint = "Orion"')

    def test_bug_query_gets_sprint_filter(self):
        # Act
        jql = build_fallback_jql("show bugs in login")

        # Assert
        self.assertEqual(
            jql,
            'type = Bug AND (summary ~ "show bugs in login" OR description ~ "show bugs in login") '
            "AND sprint in openSprints() ORDER BY updated DESC",
        )

    def test_high_priority(self):
        jql = build_fallback_jql("high priority payments")
        self.assertTrue(jql.startswith("priority = High AND ("))
        self.assertTrue(jql.endswith("AND sprint in openSprints() ORDER BY updated DESC"))

    def test_open_issues(self):
        jql = build_fallback_jql("open checkout tickets")
        self.assertTrue(jql.startswith("status != Done AND ("))

    def test_worklog_with_dates(self):
        # Act
        jql = build_fallback_jql("hours logged by John Smith between 2025-01-01 and 2025-01-31")

        # Assert
        self.assertEqual(
            jql,
            '(worklogAuthor = "John Smith" AND worklogDate >= "2025-01-01" AND '
            'worklogDate <= "2025-01-31") OR (assignee = "John Smith" AND '
            'updated >= "2025-01-01" AND updated <= "2025-01-31")',
        )

    def test_worklog_for_several_users(self):
        # Act
        jql = build_fallback_jql("hours for Alice and Bob from 2025-01-01 to 2025-01-15")

        # Assert
        self.assertIn('worklogAuthor in ("Alice", "Bob")', jql)
        self.assertIn('assignee in ("Alice", "Bob")', jql)
        self.assertNotIn("openSprints", jql)

    def test_worklog_without_users_falls_through_to_text_search(self):
        # Act
        jql = build_fallback_jql("worklog for Alice")

        # Assert
        self.assertEqual(
            jql,
            'summary ~ "worklog for Alice" OR description ~ "worklog for Alice" '
            "ORDER BY updated DESC",
        )

    def test_assigned_to(self):
        # Act
        jql = build_fallback_jql("issues assigned to Jane Doe")

        # Assert
        self.assertEqual(
            jql, 'assignee ~ "Jane Doe" AND sprint in openSprints() ORDER BY updated DESC'
        )

    def test_issues_for_several_assignees(self):
        # Act
        jql = build_fallback_jql("tickets for alice and bob")

        # Assert
        self.assertEqual(
            jql,
            'assignee in ("alice", "bob") AND sprint in openSprints() ORDER BY updated DESC',
        )

    def test_team_reference_is_not_an_assignee(self):
        for query in ("issues for team Alpha", "tickets assigned to team Alpha"):
            with self.subTest(query=query):
                # Act
                jql = build_fallback_jql(query)

                # Assert
                self.assertNotIn("assignee", jql)
                self.assertTrue(jql.startswith(f'(summary ~ "{query}"'))

    def test_story_points_for_assignees(self):
        # Act
        jql = build_fallback_jql("story points for Alice and Bob")

        # Assert
        self.assertTrue(jql.startswith('assignee in ("Alice", "Bob") AND "Story Points" is not EMPTY'))
        self.assertIn('status NOT IN ("Done", "Closed", "Resolved"', jql)
        self.assertIn("AND sprint in openSprints()", jql)
        self.assertTrue(jql.endswith('ORDER BY assignee, "Story Points" DESC'))

    def test_story_points_for_named_sprint(self):
        # Act
        jql = build_fallback_jql("story points for Alice in sprint Phoenix 3")

        # Assert
        self.assertTrue(jql.startswith('assignee ~ "Alice" AND Sprint = "Phoenix 3"'))
        self.assertNotIn("openSprints", jql)

    def test_created_date_range(self):
        # Act
        jql = build_fallback_jql("issues created between 2025-03-01 and 2025-03-31")

        # Assert
        self.assertEqual(
            jql,
            'created >= "2025-03-01" AND created <= "2025-03-31" AND sprint in openSprints() '
            "ORDER BY updated DESC",
        )

    def test_default_text_search(self):
        # Act
        jql = build_fallback_jql("login page crash")

        # Assert
        self.assertEqual(
            jql,
            '(summary ~ "login page crash" OR description ~ "login page crash") '
            "AND sprint in openSprints() ORDER BY updated DESC",
        )

    def test_quotes_are_escaped(self):
        jql = build_fallback_jql('crash in "checkout"')
        self.assertIn('summary ~ "crash in \\"checkout\\""', jql)

    def test_custom_rules_without_match_fall_back_to_text_search(self):
        # Arrange
        rules = (FallbackRule("never", lambda lowered: True, lambda text: None),)

        # Act
        jql = build_fallback_jql("login page crash", rules=rules)

        # Assert
        self.assertEqual(jql, build_fallback_jql("login page crash"))


class TestJqlQuoting(unittest.TestCase):
    """Test suite for JQL string helpers."""

    def test_escape_jql_string(self):
        self.assertEqual(escape_jql_string('say "hi" \\ bye'), 'say \\"hi\\" \\\\ bye')

    def test_quote_list(self):
        self.assertEqual(quote_list(["To Do", "Done"]), '"To Do", "Done"')


if __name__ == "__main__":
    unittest.main()
