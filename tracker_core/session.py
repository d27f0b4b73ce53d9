"""Session state for Tracker - owns the working collection for one session."""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from tracker_core.issues import create_issue, get_issue, update_issue
from tracker_core.merge import reconcile
from tracker_core.models import Issue, IssueDraft
from tracker_core.parser import load_source
from tracker_core.query import derive_view
from tracker_core.storage import IssueStore
from tracker_core.url_state import QueryState

__all__ = [
    "IssueSession",
]

logger = logging.getLogger(__name__)


class IssueSession:
    """The working collection plus its persistence collaborator.

    Construction reconciles whatever the store holds with the freshly loaded
    issues. Every mutation is written through to the store before returning.

    Args:
        loaded: Issues parsed from the flat-file source
        store: Persistence collaborator (save/load)
    """

    def __init__(self, loaded: Sequence[Issue], store: IssueStore):
        self._store = store
        self._issues: List[Issue] = reconcile(store.load(), loaded)
        logger.info("Session started with %d issues", len(self._issues))

    @classmethod
    def open(cls, source_path: Union[str, Path], store: IssueStore) -> "IssueSession":
        """Load the flat-file source and start a session over it."""
        return cls(load_source(source_path), store)

    @property
    def issues(self) -> Tuple[Issue, ...]:
        return tuple(self._issues)

    def get(self, issue_id: str) -> Optional[Issue]:
        return get_issue(self._issues, issue_id)

    def view(self, state: Optional[QueryState] = None) -> List[Issue]:
        """Derived collection for the given search/status/sort state."""
        if state is None:
            state = QueryState()
        return derive_view(self._issues, state.search, state.status, state.sort)

    def create(self, draft: IssueDraft) -> Issue:
        """Create and persist a new issue.

        Raises:
            TitleValidationError: If the title is empty or too short
        """
        self._issues, issue = create_issue(self._issues, draft)
        self._store.save(self._issues)
        logger.info("Created issue %s", issue.id)
        return issue

    def update(self, issue: Issue) -> Optional[Issue]:
        """Replace and persist an existing issue.

        Returns:
            The stored issue after the update, or None if the ID is unknown

        Raises:
            ValueError: If status is invalid
        """
        if self.get(issue.id) is None:
            logger.warning("Update ignored: issue %s not found", issue.id)
            return None

        self._issues = update_issue(self._issues, issue)
        self._store.save(self._issues)
        logger.info("Updated issue %s", issue.id)
        return self.get(issue.id)
