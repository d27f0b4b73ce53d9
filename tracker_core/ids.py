"""ID allocation for Tracker - sequential numeric IDs that never collide."""

import re
from typing import Iterable

from tracker_core.models import Issue

__all__ = [
    "next_id",
]

_INTEGER_ID = re.compile(r"^([+-]?)(\d+)$", re.ASCII)


def next_id(issues: Iterable[Issue]) -> str:
    """Allocate the ID for a new issue.

    Args:
        issues: Current collection

    Returns:
        An ID string not used by any issue in the collection

    Implementation notes:
        - Starts one past the largest integer ID (non-numeric IDs are
          ignored, floor 0)
        - Keeps incrementing while the candidate matches an existing ID,
          which covers string IDs such as "07" or "+3" that never parse to
          the same text
        - Works on decimal strings, so IDs of any length are handled without
          int() conversion limits
    """
    existing_ids = {issue.id for issue in issues}

    highest = "0"
    for issue_id in existing_ids:
        match = _INTEGER_ID.match(issue_id)
        if match is None or match.group(1) == "-":
            continue
        digits = match.group(2).lstrip("0") or "0"
        if (len(digits), digits) > (len(highest), highest):
            highest = digits

    candidate = _increment(highest)

    while candidate in existing_ids:
        candidate = _increment(candidate)

    return candidate


def _increment(digits: str) -> str:
    """Add one to a non-negative decimal string without leading zeros.

    Examples:
        >>> _increment("199")
        '200'
    """
    stripped = digits.rstrip("9")
    carried = len(digits) - len(stripped)

    if not stripped:
        return "1" + "0" * carried

    return stripped[:-1] + str(int(stripped[-1]) + 1) + "0" * carried
