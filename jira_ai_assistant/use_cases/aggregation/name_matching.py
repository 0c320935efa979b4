from __future__ import annotations

from typing import Optional
from typing import Sequence


def names_match(candidate: str, target: str) -> bool:
    """Loose, case-insensitive match: either name contains the other."""
    candidate = candidate.lower()
    target = target.lower()
    return target in candidate or candidate in target


def match_target_name(candidate: str, targets: Sequence[str]) -> Optional[str]:
    """Return the first target matching ``candidate``.

    Short names are ambiguous ("Al" matches "Alice" and "Albert"); ties go to
    whichever target was listed first.
    """
    if not candidate:
        return None
    for target in targets:
        if target and names_match(candidate, target):
            return target
    return None
