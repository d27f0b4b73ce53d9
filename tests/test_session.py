"""Tests for the session controller and its write-through persistence."""

from conftest import make_issue

from tracker_core import IssueDraft, IssueSession, JsonSlotStore, MemoryStore, QueryState


def test_session_without_persisted_state_uses_loaded(sample_issues, memory_store):
    session = IssueSession(sample_issues, memory_store)

    assert list(session.issues) == sample_issues


def test_session_rehydrates_persisted_state(sample_issues, memory_store):
    """Persisted edits win; new source issues are appended."""
    memory_store.save([make_issue("2", "Edited locally", "closed")])

    session = IssueSession(sample_issues, memory_store)

    assert [issue.id for issue in session.issues] == ["2", "1", "3", "4"]
    assert session.get("2").title == "Edited locally"


def test_session_create_writes_through(sample_issues, memory_store):
    session = IssueSession(sample_issues, memory_store)

    issue = session.create(IssueDraft(title="Persist me"))

    assert session.issues[0] == issue
    assert memory_store.load() == list(session.issues)


def test_session_update_writes_through(sample_issues, memory_store):
    session = IssueSession(sample_issues, memory_store)

    updated = session.update(session.get("1").with_changes(status="closed"))

    assert updated.status == "closed"
    assert updated.updated_at != sample_issues[0].updated_at
    assert memory_store.load()[0].status == "closed"


def test_session_update_unknown_issue_does_not_persist(sample_issues, memory_store):
    session = IssueSession(sample_issues, memory_store)

    assert session.update(make_issue("99", "Ghost")) is None
    assert memory_store.load() is None


def test_session_update_unknown_issue_logs_once(sample_issues, memory_store, caplog):
    session = IssueSession(sample_issues, memory_store)

    session.update(make_issue("99", "Ghost"))

    ignored = [record for record in caplog.records if "Update ignored" in record.getMessage()]
    assert len(ignored) == 1
    assert ignored[0].levelname == "WARNING"


def test_session_create_after_very_long_id(memory_store):
    """A huge numeric ID in the source does not block creating issues."""
    session = IssueSession([make_issue("9" * 5000)], memory_store)

    issue = session.create(IssueDraft(title="New one"))

    assert issue.id == "1" + "0" * 5000
    assert [existing.id for existing in session.issues] == [issue.id, "9" * 5000]



def test_session_view_applies_query_state(sample_issues, memory_store):
    session = IssueSession(sample_issues, memory_store)

    view = session.view(QueryState(search="BUG", status="open", sort="asc"))

    assert [issue.id for issue in view] == ["4", "1"]
    assert [issue.id for issue in session.view()] == ["1", "2", "4", "3"]


def test_session_issues_is_a_snapshot(sample_issues, memory_store):
    session = IssueSession(sample_issues, memory_store)
    before = session.issues

    session.create(IssueDraft(title="Later"))

    assert len(before) == len(sample_issues)
    assert len(session.issues) == len(sample_issues) + 1


def test_session_open_loads_source(sample_source, sample_issues):
    session = IssueSession.open(sample_source, MemoryStore())

    assert list(session.issues) == sample_issues


def test_session_survives_restart(sample_source, tmp_path):
    """A second session sees the first session's edits."""
    store = JsonSlotStore(tmp_path / "store.json", lock_path=tmp_path / ".lock")

    first = IssueSession.open(sample_source, store)
    created = first.create(IssueDraft(title="Survives restart"))

    second = IssueSession.open(sample_source, store)

    assert second.issues == first.issues
    assert second.get(created.id) == created


def test_session_keeps_working_when_store_fails(sample_issues, tmp_path):
    """Persistence failure leaves the in-memory collection authoritative."""
    session = IssueSession(sample_issues, JsonSlotStore(tmp_path))

    issue = session.create(IssueDraft(title="Still here"))

    assert session.get(issue.id) == issue
