"""Tracker - flat-file issue tracker with local edits and shareable views.

This package provides the core functionality for the tracker.
Import from here for the public API.
"""

from tracker_core.exceptions import TrackerError, TitleValidationError, LockError
from tracker_core.constants import (
    VALID_STATUSES,
    STATUS_ALL,
    STATUS_FILTERS,
    SORT_ORDERS,
    DEFAULT_SORT,
    FIELD_SEPARATOR,
    COMMENT_MARKER,
    STORAGE_SLOT,
    MIN_TITLE_LENGTH,
)
from tracker_core.utils import (
    get_iso_timestamp,
    parse_instant,
    format_instant,
    normalize_timestamp,
    file_lock,
)
from tracker_core.models import Issue, IssueDraft
from tracker_core.parser import (
    Accepted,
    Skipped,
    parse_lines,
    parse_issues,
    load_source,
)
from tracker_core.ids import next_id
from tracker_core.merge import reconcile
from tracker_core.query import derive_view
from tracker_core.storage import IssueStore, JsonSlotStore, MemoryStore
from tracker_core.url_state import QueryState, UrlStateSync, rewrite_location
from tracker_core.issues import (
    validate_title,
    create_issue,
    update_issue,
    get_issue,
)
from tracker_core.session import IssueSession
from tracker_core.config import (
    get_tracker_home,
    get_store_path,
    get_lock_path,
    get_source_path,
)
from tracker_core.cli import app, main

__all__ = [
    # Exceptions
    "TrackerError",
    "TitleValidationError",
    "LockError",
    # Constants
    "VALID_STATUSES",
    "STATUS_ALL",
    "STATUS_FILTERS",
    "SORT_ORDERS",
    "DEFAULT_SORT",
    "FIELD_SEPARATOR",
    "COMMENT_MARKER",
    "STORAGE_SLOT",
    "MIN_TITLE_LENGTH",
    # Utils
    "get_iso_timestamp",
    "parse_instant",
    "format_instant",
    "normalize_timestamp",
    "file_lock",
    # Models
    "Issue",
    "IssueDraft",
    # Parser
    "Accepted",
    "Skipped",
    "parse_lines",
    "parse_issues",
    "load_source",
    # IDs
    "next_id",
    # Reconciliation
    "reconcile",
    # Query
    "derive_view",
    # Storage
    "IssueStore",
    "JsonSlotStore",
    "MemoryStore",
    # URL state
    "QueryState",
    "UrlStateSync",
    "rewrite_location",
    # Issues
    "validate_title",
    "create_issue",
    "update_issue",
    "get_issue",
    # Session
    "IssueSession",
    # Config
    "get_tracker_home",
    "get_store_path",
    "get_lock_path",
    "get_source_path",
    # CLI
    "app",
    "main",
]
