"""Constants for Tracker - magic strings, numbers, and configuration."""

__all__ = [
    "VALID_STATUSES",
    "STATUS_ALL",
    "STATUS_FILTERS",
    "SORT_ASC",
    "SORT_DESC",
    "SORT_ORDERS",
    "DEFAULT_SORT",
    "FIELD_SEPARATOR",
    "COMMENT_MARKER",
    "STORAGE_SLOT",
    "MIN_TITLE_LENGTH",
    "LOCK_TIMEOUT",
    "PARAM_SEARCH",
    "PARAM_STATUS",
    "PARAM_SORT",
]

# Issue statuses (ordered for display)
VALID_STATUSES = ("open", "in_progress", "closed")

# Status filter sentinel meaning "no filtering"
STATUS_ALL = "all"
STATUS_FILTERS = (STATUS_ALL,) + VALID_STATUSES

# Sort orders by updated_at
SORT_ASC = "asc"
SORT_DESC = "desc"
SORT_ORDERS = (SORT_ASC, SORT_DESC)
DEFAULT_SORT = SORT_DESC

# Flat-file source format
FIELD_SEPARATOR = "|"
COMMENT_MARKER = "#"

# Persistence slot name
STORAGE_SLOT = "issue-tracker-issues"

# Creation validation
MIN_TITLE_LENGTH = 3

# File locking
LOCK_TIMEOUT = 5.0

# Shareable location query parameters
PARAM_SEARCH = "q"
PARAM_STATUS = "status"
PARAM_SORT = "sort"
