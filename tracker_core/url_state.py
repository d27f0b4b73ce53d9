"""URL state for Tracker - mirror search, status and sort in a shareable location.

A location is a path with an optional query string, e.g.
"/issues?q=login&status=open&sort=asc". Three parameters are owned here:

    q       search text     (omitted when empty)
    status  status filter   (omitted when "all")
    sort    sort order      (always written)

Other query parameters are carried through untouched.
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from tracker_core.constants import (
    DEFAULT_SORT,
    PARAM_SEARCH,
    PARAM_SORT,
    PARAM_STATUS,
    SORT_ORDERS,
    STATUS_ALL,
    STATUS_FILTERS,
)

__all__ = [
    "QueryState",
    "rewrite_location",
    "UrlStateSync",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryState:
    """Current search text, status filter and sort order."""

    search: str = ""
    status: str = STATUS_ALL
    sort: str = DEFAULT_SORT

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "QueryState":
        """Read state from query parameters, falling back to defaults.

        Values that are missing or not valid for their parameter are ignored.
        """
        search = params.get(PARAM_SEARCH) or ""

        status = params.get(PARAM_STATUS)
        if status not in STATUS_FILTERS:
            status = STATUS_ALL

        sort = params.get(PARAM_SORT)
        if sort not in SORT_ORDERS:
            sort = DEFAULT_SORT

        return cls(search=search, status=status, sort=sort)

    @classmethod
    def from_location(cls, location: str) -> "QueryState":
        # First occurrence wins for repeated parameters
        params = {}
        for key, value in parse_qsl(urlsplit(location).query, keep_blank_values=True):
            params.setdefault(key, value)
        return cls.from_params(params)

    def to_params(self) -> List[Tuple[str, Optional[str]]]:
        """Parameter assignments for the location; None means remove."""
        return [
            (PARAM_SEARCH, self.search or None),
            (PARAM_STATUS, self.status if self.status != STATUS_ALL else None),
            (PARAM_SORT, self.sort),
        ]


def _set_param(pairs: List[Tuple[str, str]], key: str, value: Optional[str]) -> List[Tuple[str, str]]:
    """Set or delete a parameter, keeping the position of its first occurrence."""
    result = []
    placed = False

    for existing_key, existing_value in pairs:
        if existing_key != key:
            result.append((existing_key, existing_value))
        elif value is not None and not placed:
            result.append((key, value))
            placed = True

    if value is not None and not placed:
        result.append((key, value))

    return result


def rewrite_location(location: str, state: QueryState) -> str:
    """Return location with the query reflecting state.

    Args:
        location: Current location (path and optional query)
        state: State to write

    Returns:
        New location; the path, fragment and unrelated parameters are kept
    """
    parts = urlsplit(location)
    pairs = parse_qsl(parts.query, keep_blank_values=True)

    for key, value in state.to_params():
        pairs = _set_param(pairs, key, value)

    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(pairs), parts.fragment))


class UrlStateSync:
    """Keeps a QueryState and a location in step.

    Every change rewrites the location in place and reports it through
    on_replace, which stands in for a router's replace (no new history
    entry).

    Args:
        location: Initial location to read state from
        on_replace: Called with the new location after each change (optional)
    """

    def __init__(self, location: str = "/", on_replace: Optional[Callable[[str], None]] = None):
        self.location = location
        self.state = QueryState.from_location(location)
        self._on_replace = on_replace

    def set_search(self, search: str) -> None:
        self.update(search=search)

    def set_status(self, status: str) -> None:
        self.update(status=status)

    def set_sort(self, sort: str) -> None:
        self.update(sort=sort)

    def update(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> None:
        """Change any of the parameters with a single location rewrite.

        Parameters left as None keep their current value.

        Raises:
            ValueError: If status is not "all" or a valid issue status, or
                sort is not "asc" or "desc"
        """
        if status is not None and status not in STATUS_FILTERS:
            raise ValueError(f"Invalid status filter: {status}. Must be one of {STATUS_FILTERS}")

        if sort is not None and sort not in SORT_ORDERS:
            raise ValueError(f"Invalid sort order: {sort}. Must be one of {SORT_ORDERS}")

        changes = {}
        if search is not None:
            changes["search"] = search
        if status is not None:
            changes["status"] = status
        if sort is not None:
            changes["sort"] = sort

        self._apply(replace(self.state, **changes))

    def _apply(self, state: QueryState) -> None:
        self.state = state
        self.location = rewrite_location(self.location, state)
        logger.debug("Location replaced: %s", self.location)

        if self._on_replace is not None:
            self._on_replace(self.location)
