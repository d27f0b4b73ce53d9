"""Shared pytest fixtures for tracker tests."""

import pytest

from tracker_core import Issue, MemoryStore

SAMPLE_SOURCE = """\
# sample issues
1|Fix login bug|open|2024-03-01T10:00:00Z|Users cannot log in
2|Add dark mode|in_progress|2024-02-01T09:00:00Z|Theme toggle
3|Update docs|closed||Refresh README
4|Crash on BUG report|open|2024-01-15T00:00:00Z|
2|Duplicate of dark mode|closed|2024-05-01T00:00:00Z|ignored
5|Bad status|done|2024-01-01T00:00:00Z|ignored
"""


@pytest.fixture
def tmp_tracker_dir(tmp_path, monkeypatch):
    """Create a temporary tracker home and point TRACKER_HOME at it.

    Returns a dict with paths:
        - home: temporary home directory (~/.tracker)
        - store: path to store.json
        - lock: path to .lock file
    """
    tracker_home = tmp_path / ".tracker"
    tracker_home.mkdir()
    monkeypatch.setenv("TRACKER_HOME", str(tracker_home))

    return {
        "home": tracker_home,
        "store": tracker_home / "store.json",
        "lock": tracker_home / ".lock",
    }


@pytest.fixture
def sample_source(tmp_path, monkeypatch):
    """Write a sample issues.dat and point TRACKER_SOURCE at it."""
    source_path = tmp_path / "issues.dat"
    source_path.write_text(SAMPLE_SOURCE, encoding="utf-8")
    monkeypatch.setenv("TRACKER_SOURCE", str(source_path))
    return source_path


@pytest.fixture
def memory_store():
    return MemoryStore()


def make_issue(issue_id, title="Issue", status="open", updated_at=None, description=""):
    """Build an Issue with sensible defaults for tests."""
    return Issue(
        id=issue_id,
        title=title,
        status=status,
        updated_at=updated_at,
        description=description,
    )


@pytest.fixture
def sample_issues():
    """Issues matching the accepted lines of SAMPLE_SOURCE, in file order."""
    return [
        make_issue("1", "Fix login bug", "open", "2024-03-01T10:00:00.000Z", "Users cannot log in"),
        make_issue("2", "Add dark mode", "in_progress", "2024-02-01T09:00:00.000Z", "Theme toggle"),
        make_issue("3", "Update docs", "closed", None, "Refresh README"),
        make_issue("4", "Crash on BUG report", "open", "2024-01-15T00:00:00.000Z", ""),
    ]
