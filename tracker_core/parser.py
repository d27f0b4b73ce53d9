"""Flat-file parser for Tracker - turns issues.dat text into Issue records.

Format, one record per line:

    # comment lines start with '#' and are ignored
    <id>|<title>|<status>|<updatedAt?>|<description>

A 4-field line omits updatedAt. A 5-field line carries it, possibly empty.
Malformed lines, invalid statuses, unparseable timestamps and duplicate ids
are dropped without raising.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Set, Union

from tracker_core.constants import COMMENT_MARKER, FIELD_SEPARATOR, VALID_STATUSES
from tracker_core.models import Issue
from tracker_core.utils import normalize_timestamp

__all__ = [
    "Accepted",
    "Skipped",
    "SKIP_FIELD_COUNT",
    "SKIP_DUPLICATE_ID",
    "SKIP_INVALID_STATUS",
    "SKIP_INVALID_TIMESTAMP",
    "parse_lines",
    "parse_issues",
    "load_source",
]

logger = logging.getLogger(__name__)

SKIP_FIELD_COUNT = "field_count"
SKIP_DUPLICATE_ID = "duplicate_id"
SKIP_INVALID_STATUS = "invalid_status"
SKIP_INVALID_TIMESTAMP = "invalid_timestamp"


@dataclass(frozen=True)
class Accepted:
    """A line that produced an issue."""

    line_number: int
    issue: Issue


@dataclass(frozen=True)
class Skipped:
    """A record candidate that was dropped, and why."""

    line_number: int
    reason: str
    line: str


ParseOutcome = Union[Accepted, Skipped]


def _split_fields(line: str) -> Optional[List[Optional[str]]]:
    """Split a line into [id, title, status, updated_at, description].

    Returns None when the field count is not 4 or 5.
    """
    parts: List[Optional[str]] = list(line.split(FIELD_SEPARATOR))

    if len(parts) == 4:
        # updatedAt omitted entirely
        parts.insert(3, None)
        return parts

    if len(parts) == 5:
        return parts

    return None


def parse_lines(text: str) -> Iterator[ParseOutcome]:
    """Parse source text, yielding one outcome per record candidate.

    Blank lines and comment lines are not candidates and yield nothing.

    Args:
        text: Raw flat-file content

    Yields:
        Accepted or Skipped, in file order

    Notes:
        - The duplicate check runs before status validation, and the id is
          claimed as soon as it passes, so a line with a bad status or
          timestamp still blocks later lines reusing its id
        - Fields are taken verbatim (no trimming)
    """
    seen_ids: Set[str] = set()

    for line_number, line in enumerate(text.split("\n"), 1):
        if line.endswith("\r"):
            line = line[:-1]

        if line.startswith(COMMENT_MARKER) or not line.strip():
            continue

        fields = _split_fields(line)
        if fields is None:
            yield Skipped(line_number, SKIP_FIELD_COUNT, line)
            continue

        issue_id, title, status, raw_updated_at, description = fields

        if issue_id in seen_ids:
            yield Skipped(line_number, SKIP_DUPLICATE_ID, line)
            continue
        seen_ids.add(issue_id)

        if status not in VALID_STATUSES:
            yield Skipped(line_number, SKIP_INVALID_STATUS, line)
            continue

        try:
            updated_at = normalize_timestamp(raw_updated_at)
        except ValueError:
            yield Skipped(line_number, SKIP_INVALID_TIMESTAMP, line)
            continue

        yield Accepted(
            line_number,
            Issue(
                id=issue_id,
                title=title,
                status=status,
                updated_at=updated_at,
                description=description,
            ),
        )


def parse_issues(text: str) -> List[Issue]:
    """Parse source text into de-duplicated, validated issues.

    Args:
        text: Raw flat-file content

    Returns:
        Issues in first-occurrence file order
    """
    issues = []

    for outcome in parse_lines(text):
        if isinstance(outcome, Skipped):
            logger.debug("Skipping line %d (%s): %r", outcome.line_number, outcome.reason, outcome.line)
            continue
        issues.append(outcome.issue)

    return issues


def load_source(path: Union[str, Path]) -> List[Issue]:
    """Load and parse the flat-file issue source.

    Args:
        path: Path to issues.dat

    Returns:
        Parsed issues, or an empty list if the file cannot be read
    """
    path = Path(path)

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to load %s: %s", path, e)
        return []

    issues = parse_issues(content)
    logger.info("Loaded %d issues from %s", len(issues), path)
    return issues
