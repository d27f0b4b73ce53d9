"""Query engine for Tracker - search, status filtering and sorting."""

from typing import Iterable, List

from tracker_core.constants import DEFAULT_SORT, SORT_DESC, SORT_ORDERS, STATUS_ALL, STATUS_FILTERS
from tracker_core.models import Issue

__all__ = [
    "matches_search",
    "sort_by_updated",
    "derive_view",
]


def matches_search(issue: Issue, search: str) -> bool:
    """Case-insensitive substring match against the issue title.

    Whitespace-only search text matches everything.
    """
    if not search.strip():
        return True
    return search.casefold() in issue.title.casefold()


def sort_by_updated(issues: Iterable[Issue], sort: str = DEFAULT_SORT) -> List[Issue]:
    """Stable sort by updated_at, issues without a timestamp always last.

    Args:
        issues: Issues to sort (not modified)
        sort: "desc" for newest first, "asc" for oldest first

    Returns:
        New sorted list
    """
    dated = []
    undated = []

    for issue in issues:
        if issue.updated_at is None:
            undated.append(issue)
        else:
            dated.append(issue)

    # reverse=True keeps equal instants in input order
    dated.sort(key=lambda issue: issue.updated_instant, reverse=(sort == SORT_DESC))

    return dated + undated


def derive_view(
    issues: Iterable[Issue],
    search: str = "",
    status: str = STATUS_ALL,
    sort: str = DEFAULT_SORT,
) -> List[Issue]:
    """Compute the displayed collection.

    Args:
        issues: Working collection (not modified)
        search: Title substring, case-insensitive; blank means no filter
        status: "all" or one of the issue statuses
        sort: "asc" or "desc" by updated_at

    Returns:
        Fresh list of matching issues in display order

    Raises:
        ValueError: If status or sort is not recognized
    """
    if status not in STATUS_FILTERS:
        raise ValueError(f"Invalid status filter: {status}. Must be one of {STATUS_FILTERS}")

    if sort not in SORT_ORDERS:
        raise ValueError(f"Invalid sort order: {sort}. Must be one of {SORT_ORDERS}")

    filtered = [
        issue
        for issue in issues
        if matches_search(issue, search) and (status == STATUS_ALL or issue.status == status)
    ]

    return sort_by_updated(filtered, sort)
