"""Tests for sequential ID allocation."""

from conftest import make_issue

from tracker_core import next_id


def test_next_id_empty_collection():
    """First issue gets ID 1."""
    assert next_id([]) == "1"


def test_next_id_one_past_highest():
    """Should use max numeric ID plus one, not count."""
    issues = [make_issue("1"), make_issue("2"), make_issue("5")]

    assert next_id(issues) == "6"


def test_next_id_ignores_non_numeric_ids():
    """Non-numeric IDs do not contribute to the max."""
    issues = [make_issue("abc"), make_issue("3"), make_issue("12abc")]

    assert next_id(issues) == "4"


def test_next_id_only_non_numeric_ids():
    """Floor of 0 applies when no ID is numeric."""
    issues = [make_issue("abc"), make_issue("xyz")]

    assert next_id(issues) == "1"


def test_next_id_negative_ids_floor_at_zero():
    """Negative IDs never pull the next ID below 1."""
    issues = [make_issue("-5"), make_issue("-1")]

    assert next_id(issues) == "1"


def test_next_id_leading_zeros_count_numerically():
    """'007' counts as 7."""
    issues = [make_issue("007")]

    assert next_id(issues) == "8"


def test_next_id_never_collides():
    """Returned ID is never already present."""
    collections = [
        [],
        [make_issue("1")],
        [make_issue("abc"), make_issue("1"), make_issue("2")],
        [make_issue("+2"), make_issue("3")],
        [make_issue(str(n)) for n in range(1, 50)],
    ]

    for issues in collections:
        new_id = next_id(issues)
        assert new_id not in {issue.id for issue in issues}


def test_next_id_changes_after_insertion():
    """Allocating again after inserting the new issue yields a different ID."""
    issues = [make_issue("1"), make_issue("2")]

    first = next_id(issues)
    issues.append(make_issue(first))
    second = next_id(issues)

    assert first != second
    assert second == "4"


def test_next_id_carries_across_nines():
    assert next_id([make_issue("199")]) == "200"
    assert next_id([make_issue("999")]) == "1000"


def test_next_id_handles_very_long_ids():
    """IDs longer than the int() digit limit still yield the next number."""
    issues = [make_issue("9" * 5000), make_issue("12")]

    assert next_id(issues) == "1" + "0" * 5000
