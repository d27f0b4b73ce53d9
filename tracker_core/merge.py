"""Reconciliation for Tracker - merge persisted issues with the loaded source."""

import logging
from typing import List, Optional, Sequence

from tracker_core.models import Issue

__all__ = [
    "reconcile",
]

logger = logging.getLogger(__name__)


def reconcile(
    persisted: Optional[Sequence[Issue]],
    loaded: Sequence[Issue],
) -> List[Issue]:
    """Combine the persisted collection with freshly loaded issues.

    Args:
        persisted: Collection read from local storage, or None if absent
        loaded: Collection parsed from the flat-file source

    Returns:
        New list: persisted issues verbatim, followed by loaded issues whose
        IDs are not already persisted, in loaded order

    Notes:
        - Local edits win on ID collision
        - Runs once per session start, not as a continuous sync
    """
    if persisted is None:
        return list(loaded)

    merged = list(persisted)
    known_ids = {issue.id for issue in persisted}

    for issue in loaded:
        if issue.id not in known_ids:
            merged.append(issue)

    logger.debug(
        "Reconciled %d persisted with %d loaded issues (%d new)",
        len(persisted),
        len(loaded),
        len(merged) - len(persisted),
    )
    return merged
