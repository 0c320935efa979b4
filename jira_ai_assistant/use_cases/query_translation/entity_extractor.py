"""Pattern based extraction of users, dates, teams, sprints and issue keys.

Every function accepts the free-text query and, optionally, a JQL string that was
already generated for it. When both are given the JQL is consulted first since it
already reflects disambiguation done upstream.
"""

from __future__ import annotations

import re
from typing import List
from typing import Optional

from jira_ai_assistant.entities.query import DateRange
from jira_ai_assistant.entities.query import ExtractedEntities

ISSUE_KEY_PATTERN = re.compile(r"[A-Z]+-\d+", re.IGNORECASE)

_NAME_SEPARATOR = re.compile(r"\s+and\s+|\s*,\s*", re.IGNORECASE)

_TEXT_USERS = re.compile(
    r"(?:by|for|of)\s+(.+?)\s+(?:between|for the period|from)", re.IGNORECASE
)
_TEXT_DATE_RANGE = re.compile(
    r"(?:between|period of|from)\s+(\d{4}-\d{2}-\d{2})\s+(?:and|to)\s+(\d{4}-\d{2}-\d{2})",
    re.IGNORECASE,
)
_TEXT_ASSIGNEES = re.compile(
    r"(?:assigned to|story points?\s+(?:of|for)|points\s+(?:of|for))\s+(.+?)"
    r"(?=\s+(?:for|in)\s+(?:the\s+)?(?:current\s+)?sprint\b|[.?!]?\s*$)",
    re.IGNORECASE,
)
_TEXT_SPRINT = re.compile(
    r"(?:for|in)\s+(?:the\s+)?sprint\s+([a-zA-Z0-9.\s-]+)", re.IGNORECASE
)
_TEXT_TEAM_IDS = re.compile(
    r"team\s+ids?\s+([\w-]+(?:(?:\s*,\s*|\s+and\s+)[\w-]+)*)", re.IGNORECASE
)

_JQL_WORKLOG_AUTHOR = re.compile(
    r'worklogAuthor\s*=\s*"([^"]+)"|worklogAuthor\s+in\s*\(([^)]+)\)', re.IGNORECASE
)
_JQL_ASSIGNEE = re.compile(
    r'assignee\s*[=~]\s*"([^"]+)"|assignee\s+in\s*\(([^)]+)\)', re.IGNORECASE
)
_JQL_DATE_RANGE = re.compile(
    r'(worklogDate|created|updated)\s*>=\s*"([^"]+)".*\1\s*<=\s*"([^"]+)"',
    re.IGNORECASE,
)
_JQL_SPRINT = re.compile(r'\bSprint\s*=\s*"([^"]+)"', re.IGNORECASE)
_JQL_TEAM = re.compile(
    r'Team\[Team\]\s*=\s*"([^"]+)"|Team\[Team\]\s+in\s*\(([^)]+)\)', re.IGNORECASE
)


def split_names(span: str) -> List[str]:
    """Split ``"alice, bob and carol"`` into individual names."""
    names = []
    for name in _NAME_SEPARATOR.split(span):
        name = name.strip().strip(".?!").strip()
        if name:
            names.append(name)
    return names


def _split_jql_list(values: str) -> List[str]:
    return [value.strip().strip('"').strip() for value in values.split(",") if value.strip()]


def _values_from_match(match: Optional[re.Match]) -> List[str]:
    if not match:
        return []
    if match.group(1):
        return [match.group(1)]
    return _split_jql_list(match.group(2))


def extract_issue_keys(free_text: str) -> List[str]:
    keys = []
    for key in ISSUE_KEY_PATTERN.findall(free_text or ""):
        key = key.upper()
        if key not in keys:
            keys.append(key)
    return keys


def extract_date_range(free_text: str, jql: Optional[str] = None) -> Optional[DateRange]:
    """Find a ``start..end`` date pair.

    From JQL the same date field must be bounded on both sides, e.g.
    ``worklogDate >= "2025-01-01" AND worklogDate <= "2025-01-31"``.
    """
    if jql:
        match = _JQL_DATE_RANGE.search(jql)
        if match:
            return DateRange(start=match.group(2), end=match.group(3))

    match = _TEXT_DATE_RANGE.search(free_text or "")
    if match:
        return DateRange(start=match.group(1), end=match.group(2))
    return None


def extract_user_names(free_text: str, jql: Optional[str] = None) -> List[str]:
    """Find the worklog authors a query is about.

    A span mentioning a team is a team reference, not a person, and yields nothing.
    """
    if jql:
        names = _values_from_match(_JQL_WORKLOG_AUTHOR.search(jql))
        if names:
            return names

    match = _TEXT_USERS.search(free_text or "")
    if not match:
        return []
    span = match.group(1).strip()
    if "team" in span.lower():
        return []
    return split_names(span)


def extract_assignee_names(free_text: str, jql: Optional[str] = None) -> List[str]:
    if jql:
        names = _values_from_match(_JQL_ASSIGNEE.search(jql))
        if names:
            return names

    match = _TEXT_ASSIGNEES.search((free_text or "").strip())
    if not match:
        return []
    span = match.group(1).strip()
    if "team" in span.lower():
        return []
    return split_names(span)


def extract_team_ids(free_text: str, jql: Optional[str] = None) -> List[str]:
    """Find team identifiers, either from ``Team[Team]`` clauses or ``team id(s) ...`` text."""
    if jql:
        team_ids = _values_from_match(_JQL_TEAM.search(jql))
        if team_ids:
            return team_ids

    match = _TEXT_TEAM_IDS.search(free_text or "")
    if not match:
        return []
    return [token for token in split_names(match.group(1)) if any(c.isdigit() for c in token)]


def extract_sprint_name(free_text: str, jql: Optional[str] = None) -> Optional[str]:
    if jql:
        match = _JQL_SPRINT.search(jql)
        if match:
            return match.group(1).strip()

    match = _TEXT_SPRINT.search(free_text or "")
    if match:
        sprint_name = match.group(1).strip()
        return sprint_name or None
    return None


def extract_entities(free_text: str, jql: Optional[str] = None) -> ExtractedEntities:
    return ExtractedEntities(
        user_names=extract_user_names(free_text, jql),
        team_ids=extract_team_ids(free_text, jql),
        date_range=extract_date_range(free_text, jql),
        sprint_name=extract_sprint_name(free_text, jql),
        issue_keys=extract_issue_keys(free_text),
    )
