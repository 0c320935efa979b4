from __future__ import annotations

import re

from jira_ai_assistant.entities.constants import CURRENT_SPRINT_FILTER
from jira_ai_assistant.entities.constants import SPRINT_SCOPE_KEYWORDS
from jira_ai_assistant.entities.constants import SPRINT_SCOPE_MARKERS
from jira_ai_assistant.use_cases.query_translation.entity_extractor import ISSUE_KEY_PATTERN

_ORDER_BY = re.compile(r"\s+ORDER\s+BY\s", re.IGNORECASE)
_OR_KEYWORD = re.compile(r"\bor\b", re.IGNORECASE)


def has_sprint_scope(jql: str) -> bool:
    lowered = jql.lower()
    return any(marker in lowered for marker in SPRINT_SCOPE_MARKERS)


def should_add_default_filter(jql: str, free_text: str) -> bool:
    """Whether the current-sprint filter applies to this query.

    Explicit scope keywords, issue key lookups and time tracking queries opt out,
    as does JQL that already scopes the sprint.
    """
    lowered = free_text.lower()
    if any(keyword in lowered for keyword in SPRINT_SCOPE_KEYWORDS):
        return False
    if ISSUE_KEY_PATTERN.search(free_text):
        return False
    return not has_sprint_scope(jql)


def _has_top_level_or(clause: str) -> bool:
    # OR outside parentheses and string literals binds looser than the appended AND.
    depth = 0
    in_quote = False
    escaped = False
    masked = []
    for char in clause:
        if in_quote:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_quote = False
            masked.append(" ")
            continue
        if char == '"':
            in_quote = True
            masked.append(" ")
        elif char == "(":
            depth += 1
            masked.append(" ")
        elif char == ")":
            depth -= 1
            masked.append(" ")
        else:
            masked.append(char if depth == 0 else " ")
    return _OR_KEYWORD.search("".join(masked)) is not None


def augment_with_default_filter(jql: str, free_text: str) -> str:
    """AND the current-sprint filter into ``jql`` ahead of any ORDER BY clause.

    Applying it twice is a no-op because the second call finds the filter present.
    """
    if not should_add_default_filter(jql, free_text):
        return jql

    order_by = _ORDER_BY.search(jql)
    if order_by:
        clause, ordering = jql[: order_by.start()], jql[order_by.start():]
    else:
        clause, ordering = jql, ""

    clause = clause.strip()
    if _has_top_level_or(clause):
        clause = f"({clause})"
    return f"{clause} AND {CURRENT_SPRINT_FILTER}{ordering}"
