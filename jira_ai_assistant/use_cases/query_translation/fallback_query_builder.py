"""Deterministic free text to JQL translation used when the LLM is unavailable.

Rules are evaluated top to bottom and the first one whose template produces a
query wins. A template may return ``None`` to let later rules try.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable
from typing import List
from typing import Optional
from typing import Sequence

from jira_ai_assistant import LOGGER
from jira_ai_assistant.entities.constants import BACKLOG_STATUSES
from jira_ai_assistant.entities.constants import COMPLETED_LIKE_STATUSES
from jira_ai_assistant.entities.constants import CURRENT_SPRINT_FILTER
from jira_ai_assistant.entities.constants import NOT_CURRENT_SPRINT_FILTER
from jira_ai_assistant.entities.constants import STORY_POINT_KEYWORDS
from jira_ai_assistant.entities.constants import WORKLOG_KEYWORDS
from jira_ai_assistant.use_cases.query_translation.default_filter import (
    augment_with_default_filter,
)
from jira_ai_assistant.use_cases.query_translation.entity_extractor import (
    extract_assignee_names,
    extract_date_range,
    extract_issue_keys,
    extract_sprint_name,
    extract_user_names,
    split_names,
)

_ASSIGNED_TO = re.compile(r"assigned to ([a-zA-Z\s]+?)(?:\s+between|\s*$)", re.IGNORECASE)
_ISSUES_FOR = re.compile(
    r"(?:issues|tickets) for ([a-zA-Z\s]+?)(?:\s+between|\s*$)", re.IGNORECASE
)

ORDER_BY_UPDATED = "ORDER BY updated DESC"


@dataclass(frozen=True)
class FallbackRule:
    name: str
    predicate: Callable[[str], bool]
    template: Callable[[str], Optional[str]]
    augment: bool = True


def escape_jql_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def quote_list(values: Sequence[str]) -> str:
    return ", ".join(f'"{escape_jql_string(value)}"' for value in values)


def _text_search(free_text: str) -> str:
    text = escape_jql_string(free_text)
    return f'summary ~ "{text}" OR description ~ "{text}"'


def _contains_any(*keywords: str) -> Callable[[str], bool]:
    return lambda lowered: any(keyword in lowered for keyword in keywords)


def _issue_key_template(free_text: str) -> Optional[str]:
    keys = extract_issue_keys(free_text)
    if len(keys) == 1:
        return f'key = "{keys[0]}"'
    return f"key in ({quote_list(keys)})"


def _backlog_template(free_text: str) -> str:
    statuses = f"status IN ({quote_list(BACKLOG_STATUSES)})"
    sprint_name = extract_sprint_name(free_text)
    if sprint_name:
        return f'{statuses} AND Sprint = "{escape_jql_string(sprint_name)}"'
    return f"{statuses} AND {NOT_CURRENT_SPRINT_FILTER}"


def _bug_template(free_text: str) -> str:
    return f"type = Bug AND ({_text_search(free_text)}) {ORDER_BY_UPDATED}"


def _high_priority_template(free_text: str) -> str:
    return f"priority = High AND ({_text_search(free_text)}) {ORDER_BY_UPDATED}"


def _open_template(free_text: str) -> str:
    return f"status != Done AND ({_text_search(free_text)}) {ORDER_BY_UPDATED}"


def _field_filter(field: str, names: List[str], operator: str = "=") -> str:
    if len(names) == 1:
        return f'{field} {operator} "{escape_jql_string(names[0])}"'
    return f"{field} in ({quote_list(names)})"


def _worklog_template(free_text: str) -> Optional[str]:
    user_names = extract_user_names(free_text)
    if not user_names:
        return None

    author = _field_filter("worklogAuthor", user_names)
    assignee = _field_filter("assignee", user_names)
    date_range = extract_date_range(free_text)
    if date_range is None:
        return f"{author} OR {assignee}"

    start, end = date_range.start, date_range.end
    return (
        f'({author} AND worklogDate >= "{start}" AND worklogDate <= "{end}") '
        f'OR ({assignee} AND updated >= "{start}" AND updated <= "{end}")'
    )


def _person_names(span: str) -> List[str]:
    # "team Alpha" names a team, not an assignee
    if "team" in span.lower():
        return []
    return split_names(span)


def _assignees_with_dates(names: List[str], free_text: str) -> str:
    jql = _field_filter("assignee", names, operator="~")
    date_range = extract_date_range(free_text)
    if date_range is not None:
        jql += f' AND created >= "{date_range.start}" AND created <= "{date_range.end}"'
    return f"{jql} {ORDER_BY_UPDATED}"


def _assigned_to_template(free_text: str) -> Optional[str]:
    match = _ASSIGNED_TO.search(free_text)
    if not match:
        return None
    names = _person_names(match.group(1))
    if not names:
        return None
    return _assignees_with_dates(names, free_text)


def _story_points_template(free_text: str) -> Optional[str]:
    assignees = extract_assignee_names(free_text)
    sprint_name = extract_sprint_name(free_text)
    if not assignees and not sprint_name:
        return None

    clauses = []
    if assignees:
        clauses.append(_field_filter("assignee", assignees, operator="~"))
    if sprint_name:
        clauses.append(f'Sprint = "{escape_jql_string(sprint_name)}"')
    clauses.append('"Story Points" is not EMPTY')
    clauses.append(f"status NOT IN ({quote_list(COMPLETED_LIKE_STATUSES)})")
    if not sprint_name:
        clauses.append(CURRENT_SPRINT_FILTER)
    return " AND ".join(clauses) + ' ORDER BY assignee, "Story Points" DESC'


def _issues_for_template(free_text: str) -> Optional[str]:
    match = _ISSUES_FOR.search(free_text)
    if not match:
        return None
    names = _person_names(match.group(1))
    if not names:
        return None
    return _assignees_with_dates(names, free_text)


def _date_range_template(free_text: str) -> Optional[str]:
    date_range = extract_date_range(free_text)
    if date_range is None:
        return None
    return (
        f'created >= "{date_range.start}" AND created <= "{date_range.end}" '
        f"{ORDER_BY_UPDATED}"
    )


def _default_template(free_text: str) -> str:
    return f"{_text_search(free_text)} {ORDER_BY_UPDATED}"


FALLBACK_RULES = (
    FallbackRule(
        "issue_keys",
        lambda lowered: bool(extract_issue_keys(lowered)),
        _issue_key_template,
        augment=False,
    ),
    FallbackRule("backlog", _contains_any("backlog"), _backlog_template),
    FallbackRule("bug", _contains_any("bug"), _bug_template),
    FallbackRule("high_priority", _contains_any("high priority"), _high_priority_template),
    FallbackRule("open", _contains_any("open", "todo"), _open_template),
    FallbackRule("worklog", _contains_any(*WORKLOG_KEYWORDS), _worklog_template),
    FallbackRule("assigned_to", _contains_any("assigned to"), _assigned_to_template),
    FallbackRule(
        "story_points",
        _contains_any(*STORY_POINT_KEYWORDS),
        _story_points_template,
        augment=False,
    ),
    FallbackRule("issues_for", _contains_any("issues for", "tickets for"), _issues_for_template),
    FallbackRule("date_range", lambda lowered: True, _date_range_template),
    FallbackRule("default", lambda lowered: True, _default_template),
)


def build_fallback_jql(free_text: str, rules: Sequence[FallbackRule] = FALLBACK_RULES) -> str:
    """Translate free text into JQL with the first matching rule.

    Args:
        free_text: The user's query
        rules: Ordered rule table, the last entry must always produce a query

    Returns:
        A JQL string, never empty
    """
    text = (free_text or "").strip()
    lowered = text.lower()
    for rule in rules:
        if not rule.predicate(lowered):
            continue
        jql = rule.template(text)
        if jql is None:
            continue
        LOGGER.info(f"Fallback rule '{rule.name}' produced JQL: {jql}")
        if rule.augment:
            jql = augment_with_default_filter(jql, text)
        return jql

    LOGGER.warning(f"No fallback rule matched '{text}', using text search")
    return augment_with_default_filter(_default_template(text), text)
