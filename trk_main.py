"""Tracker - flat-file issue tracker with local edits and shareable views."""

from tracker_core.cli import app, main

__all__ = ["app", "main"]

if __name__ == "__main__":
    main()
