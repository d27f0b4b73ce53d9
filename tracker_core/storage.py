"""Persistence for Tracker - save and restore the working collection.

Stores behave like a key-value slot: the whole collection is written under one
named key. Neither save() nor load() raises; the in-memory collection stays
authoritative when storage misbehaves.
"""

import json
import logging
import os
from contextlib import nullcontext
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from typing_extensions import Protocol

from tracker_core.constants import STORAGE_SLOT
from tracker_core.exceptions import LockError
from tracker_core.models import Issue
from tracker_core.utils import file_lock

__all__ = [
    "IssueStore",
    "JsonSlotStore",
    "MemoryStore",
]

logger = logging.getLogger(__name__)


class IssueStore(Protocol):
    """Persistence collaborator used by IssueSession."""

    def save(self, issues: Sequence[Issue]) -> None:
        ...

    def load(self) -> Optional[List[Issue]]:
        ...


def _encode_issues(issues: Sequence[Issue]) -> List[Dict[str, Any]]:
    return [issue.to_dict() for issue in issues]


def _decode_issues(payload: Any) -> List[Issue]:
    """Rebuild issues from a stored payload.

    Raises:
        ValueError: If the payload is not a list of valid issue records
    """
    if not isinstance(payload, list):
        raise ValueError(f"Stored payload must be a list, got {type(payload).__name__}")
    return [Issue.from_dict(item) for item in payload]


class JsonSlotStore:
    """Key-value store backed by a single JSON document on disk.

    Args:
        path: JSON file holding all slots
        slot: Key the issue collection is stored under
        lock_path: Lock file guarding writes (optional)

    File format:
        {"<slot>": [{"id": ..., "title": ..., ...}, ...], "<other slot>": ...}
    """

    def __init__(
        self,
        path: Union[str, Path],
        slot: str = STORAGE_SLOT,
        lock_path: Optional[Union[str, Path]] = None,
    ):
        self.path = Path(path)
        self.slot = slot
        self.lock_path = Path(lock_path) if lock_path is not None else None

    def _read_document(self) -> Dict[str, Any]:
        document = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(document, dict):
            raise ValueError(f"Store document must be an object, got {type(document).__name__}")
        return document

    def load(self) -> Optional[List[Issue]]:
        if not self.path.exists():
            logger.debug("No store at %s", self.path)
            return None

        try:
            document = self._read_document()
            if self.slot not in document:
                logger.debug("Slot '%s' not present in %s", self.slot, self.path)
                return None
            return _decode_issues(document[self.slot])
        except (OSError, ValueError, RecursionError) as e:
            logger.warning("Failed to load issues from %s: %s", self.path, e)
            return None

    def save(self, issues: Sequence[Issue]) -> None:
        lock = file_lock(self.lock_path) if self.lock_path is not None else nullcontext()

        try:
            with lock:
                self._write(_encode_issues(issues))
        except (OSError, LockError, TypeError, ValueError) as e:
            logger.error("Failed to save issues to %s: %s", self.path, e)

    def _write(self, payload: List[Dict[str, Any]]) -> None:
        document: Dict[str, Any] = {}

        if self.path.exists():
            try:
                document = self._read_document()
            except (OSError, ValueError, RecursionError) as e:
                # Corrupt document is replaced rather than merged
                logger.warning("Discarding unreadable store %s: %s", self.path, e)
                document = {}

        document[self.slot] = payload

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp_path, self.path)


class MemoryStore:
    """In-process key-value store holding serialized strings per slot."""

    def __init__(self, slot: str = STORAGE_SLOT, data: Optional[Dict[str, str]] = None):
        self.slot = slot
        self.data: Dict[str, str] = data if data is not None else {}

    def load(self) -> Optional[List[Issue]]:
        raw = self.data.get(self.slot)
        if raw is None:
            return None

        try:
            return _decode_issues(json.loads(raw))
        except (ValueError, RecursionError) as e:
            logger.warning("Failed to load issues from memory slot '%s': %s", self.slot, e)
            return None

    def save(self, issues: Sequence[Issue]) -> None:
        try:
            self.data[self.slot] = json.dumps(_encode_issues(issues))
        except (TypeError, ValueError) as e:
            logger.error("Failed to save issues to memory slot '%s': %s", self.slot, e)
