from __future__ import annotations

from enum import Enum


class StatusCategory(Enum):
    """Buckets used when rolling up story points."""
    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    TODO = "todo"


# Standing filter appended to queries that do not scope the sprint themselves.
CURRENT_SPRINT_FILTER = "sprint in openSprints()"
NOT_CURRENT_SPRINT_FILTER = "Sprint not in openSprints()"

# Lower-cased forms of filters that already scope the sprint.
SPRINT_SCOPE_MARKERS = (
    "sprint in opensprints()",
    "sprint not in opensprints()",
    "sprint is empty",
)

# Free-text keywords that disable the standing sprint filter.
SPRINT_SCOPE_KEYWORDS = (
    "sprint",
    "worklog",
    "hours",
    "time spent",
    "all sprint",
    "any sprint",
)

WORKLOG_KEYWORDS = ("worklog", "hours", "time spent")

STORY_POINT_KEYWORDS = (
    "story point",
    "story points",
    "points assigned",
    "points for",
    "total points",
    "remaining points",
)

BACKLOG_STATUSES = ("New", "To Do", "Blocked")

# Statuses excluded from "open work" story point queries.
COMPLETED_LIKE_STATUSES = (
    "Done",
    "Closed",
    "Resolved",
    "Cancelled",
    "Ready for Release",
    "Released",
    "Deployed",
    "In Review",
)

COMPLETED_STATUS_MARKERS = ("done", "closed", "resolved")
IN_PROGRESS_STATUS_MARKERS = ("progress", "review", "development")

UNASSIGNED = "Unassigned"
