"""Configuration for Tracker - paths and logging setup."""

import logging
import os
from pathlib import Path

__all__ = [
    "get_tracker_home",
    "get_store_path",
    "get_lock_path",
    "get_source_path",
    "configure_logging",
]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_tracker_home() -> Path:
    """Get the tracker home directory (~/.tracker).

    Can be overridden via TRACKER_HOME environment variable.
    This is primarily used for test isolation to prevent tests
    from modifying real user data.
    """
    tracker_home = os.environ.get("TRACKER_HOME")
    if tracker_home:
        return Path(tracker_home)
    return Path.home() / ".tracker"


def get_store_path() -> Path:
    """Get the local persistence store path."""
    return get_tracker_home() / "store.json"


def get_lock_path() -> Path:
    """Get the file lock path (~/.tracker/.lock)."""
    return get_tracker_home() / ".lock"


def get_source_path() -> Path:
    """Get the flat-file issue source.

    Defaults to issues.dat in the current directory; override with
    TRACKER_SOURCE.
    """
    source = os.environ.get("TRACKER_SOURCE")
    if source:
        return Path(source)
    return Path.cwd() / "issues.dat"


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
