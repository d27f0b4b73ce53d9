"""Shared utilities for Tracker - timestamps and file locking."""

import fcntl
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator, Optional

from tracker_core.constants import LOCK_TIMEOUT
from tracker_core.exceptions import LockError

__all__ = [
    "get_iso_timestamp",
    "parse_instant",
    "format_instant",
    "normalize_timestamp",
    "file_lock",
]


def format_instant(moment: datetime) -> str:
    """Format an aware datetime as a UTC ISO string with millisecond precision.

    Returns:
        ISO 8601 string with Z suffix (e.g., "2024-01-15T10:30:00.123Z")
    """
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def get_iso_timestamp(now: Optional[datetime] = None) -> str:
    """Get current UTC timestamp in normalized ISO format.

    Args:
        now: Moment to format instead of the current time (optional)

    Returns:
        ISO 8601 formatted timestamp string (e.g., "2024-01-15T10:30:00.123Z")
    """
    if now is None:
        now = datetime.now(timezone.utc)
    return format_instant(now)


def parse_instant(value: str) -> datetime:
    """Parse an ISO 8601 date or date-time into an aware UTC datetime.

    Accepts a trailing "Z" or a numeric offset. Values without an offset,
    including bare dates, are taken as UTC.

    Args:
        value: Raw time string

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        ValueError: If value is not a recognizable time

    Examples:
        >>> parse_instant("2024-01-01")
        datetime.datetime(2024, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    text = value.strip()
    if not text:
        raise ValueError("Empty time value")

    if text[-1] in "zZ":
        text = text[:-1] + "+00:00"

    moment = datetime.fromisoformat(text)

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)

    try:
        return moment.astimezone(timezone.utc)
    except OverflowError as e:
        # Offset pushes the instant past year 1 or 9999
        raise ValueError(f"Time value out of range: {value}") from e


def normalize_timestamp(value: Optional[str]) -> Optional[str]:
    """Normalize a raw time string; empty or missing values become None.

    Raises:
        ValueError: If a non-empty value is not a recognizable time
    """
    if not value:
        return None
    return format_instant(parse_instant(value))


@contextmanager
def file_lock(lock_path: Path, timeout: float = LOCK_TIMEOUT) -> Generator[object, None, None]:
    """Acquire an exclusive file lock.

    Args:
        lock_path: Path to lock file
        timeout: Maximum time to wait for lock (seconds)

    Yields:
        The lock file object

    Raises:
        LockError: If unable to acquire lock within timeout

    Usage:
        with file_lock(Path("~/.tracker/.lock")):
            # Critical section
            pass
    """
    lock_path = Path(lock_path)
    lock_path.parent.mkdir(parents=True, exist_ok=True)

    lock_file = open(lock_path, "w")

    try:
        start_time = time.time()
        while True:
            try:
                # Non-blocking lock attempt
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                break
            except BlockingIOError:
                # Lock held by another process
                if time.time() - start_time >= timeout:
                    raise LockError(
                        f"Could not acquire lock on {lock_path} within {timeout}s"
                    )
                time.sleep(0.01)

        yield lock_file

    finally:
        try:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)
        except OSError:
            pass
        lock_file.close()
