"""Issue operations for Tracker - create, update and look up in a collection.

All functions are pure over the collection: they return new lists and never
modify their input.
"""

from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from tracker_core.constants import MIN_TITLE_LENGTH, VALID_STATUSES
from tracker_core.exceptions import TitleValidationError
from tracker_core.ids import next_id
from tracker_core.models import Issue, IssueDraft
from tracker_core.utils import get_iso_timestamp

__all__ = [
    "validate_title",
    "create_issue",
    "update_issue",
    "get_issue",
]


def validate_title(title: str) -> str:
    """Check a new issue title.

    Args:
        title: Raw title as entered

    Returns:
        The trimmed title

    Raises:
        TitleValidationError: If the title is empty or too short
    """
    trimmed = title.strip()

    if not trimmed:
        raise TitleValidationError("Title is required")

    if len(trimmed) < MIN_TITLE_LENGTH:
        raise TitleValidationError(f"Title must be at least {MIN_TITLE_LENGTH} characters")

    return trimmed


def create_issue(
    issues: Sequence[Issue],
    draft: IssueDraft,
    now: Optional[datetime] = None,
) -> Tuple[List[Issue], Issue]:
    """Create a new issue from user input.

    Args:
        issues: Current collection
        draft: Title and description as entered
        now: Creation instant (defaults to current time)

    Returns:
        (updated collection with the new issue first, new issue)

    Raises:
        TitleValidationError: If the title is empty or too short
    """
    title = validate_title(draft.title)

    issue = Issue(
        id=next_id(issues),
        title=title,
        status="open",
        updated_at=get_iso_timestamp(now),
        description=draft.description.strip(),
    )

    return [issue, *issues], issue


def update_issue(
    issues: Sequence[Issue],
    issue: Issue,
    now: Optional[datetime] = None,
) -> List[Issue]:
    """Replace the issue with the same ID.

    Args:
        issues: Current collection
        issue: Edited issue; every field but id replaces the stored one
        now: Modification instant (defaults to current time)

    Returns:
        Updated collection; unchanged when no issue has that ID

    Raises:
        ValueError: If status is invalid
    """
    if issue.status not in VALID_STATUSES:
        raise ValueError(f"Invalid status: {issue.status}. Must be one of {VALID_STATUSES}")

    edited = issue.with_changes(
        title=issue.title.strip(),
        description=issue.description.strip(),
        updated_at=get_iso_timestamp(now),
    )

    return [edited if existing.id == issue.id else existing for existing in issues]


def get_issue(issues: Sequence[Issue], issue_id: str) -> Optional[Issue]:
    for issue in issues:
        if issue.id == issue_id:
            return issue
    return None
