"""Issue models for Tracker - typed records and drafts."""

from dataclasses import asdict, dataclass, replace
from datetime import datetime
from typing import Any, Dict, Optional

from tracker_core.constants import VALID_STATUSES
from tracker_core.utils import parse_instant

__all__ = [
    "Issue",
    "IssueDraft",
]


@dataclass(frozen=True)
class Issue:
    """A tracked unit of work.

    updated_at is a normalized UTC ISO string, or None when the issue has
    never been stamped.
    """

    id: str
    title: str
    status: str
    updated_at: Optional[str]
    description: str = ""

    @property
    def updated_instant(self) -> Optional[datetime]:
        """updated_at as an aware datetime, or None when absent."""
        if self.updated_at is None:
            return None
        return parse_instant(self.updated_at)

    def with_changes(self, **changes: Any) -> "Issue":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Issue":
        """Build an Issue from its serialized form.

        Raises:
            ValueError: If a field is missing or has the wrong type, or the
                status is not valid
        """
        try:
            issue_id = data["id"]
            title = data["title"]
            status = data["status"]
            updated_at = data.get("updated_at")
            description = data.get("description", "")
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Malformed issue record: {data!r}") from e

        for name, value in (("id", issue_id), ("title", title), ("description", description)):
            if not isinstance(value, str):
                raise ValueError(f"Issue field '{name}' must be a string, got {value!r}")

        if status not in VALID_STATUSES:
            raise ValueError(f"Invalid status: {status}. Must be one of {VALID_STATUSES}")

        if updated_at is not None:
            if not isinstance(updated_at, str):
                raise ValueError(f"Issue field 'updated_at' must be a string, got {updated_at!r}")
            parse_instant(updated_at)

        return cls(
            id=issue_id,
            title=title,
            status=status,
            updated_at=updated_at,
            description=description,
        )


@dataclass(frozen=True)
class IssueDraft:
    """User input for a new issue."""

    title: str
    description: str = ""
