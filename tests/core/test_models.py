from __future__ import annotations

import dataclasses

import pytest

from weblog_reader.core.errors import MalformedRecordError
from weblog_reader.core.models import LogEntry, Ordering


def test_entries_from_identical_fields_compare_equal() -> None:
    a = LogEntry.from_fields([2025, 3, 17, 9, 45])
    b = LogEntry(year=2025, month=3, day=17, hour=9, minute=45)
    assert a.compare(b) == Ordering.EQUAL
    assert b.compare(a) == Ordering.EQUAL


@pytest.mark.parametrize(
    ("earlier", "later"),
    [
        ((2024, 12, 31, 23, 59), (2025, 1, 1, 0, 0)),
        ((2025, 1, 31, 23, 59), (2025, 2, 1, 0, 0)),
        ((2025, 2, 1, 23, 59), (2025, 2, 2, 0, 0)),
        ((2025, 2, 2, 9, 59), (2025, 2, 2, 10, 0)),
        ((2025, 2, 2, 10, 0), (2025, 2, 2, 10, 1)),
    ],
)
def test_compare_uses_field_priority(earlier, later) -> None:
    a = LogEntry.from_fields(earlier)
    b = LogEntry.from_fields(later)
    assert a.compare(b) == Ordering.LESS
    assert b.compare(a) == Ordering.GREATER
    assert a < b


def test_from_fields_requires_five_values() -> None:
    with pytest.raises(MalformedRecordError, match="expected 5 fields, got 4"):
        LogEntry.from_fields([2025, 3, 17, 9])
    with pytest.raises(MalformedRecordError):
        LogEntry.from_fields([2025, 3, 17, 9, 45, 0])


def test_out_of_range_values_are_stored_as_given() -> None:
    entry = LogEntry.from_fields([2025, 2, 45, 25, 61])
    assert entry.fields() == (2025, 2, 45, 25, 61)


def test_render_matches_log_layout() -> None:
    entry = LogEntry(2025, 3, 17, 9, 45)
    assert entry.render() == "2025 3 17 9 45"
    assert str(entry) == "2025 3 17 9 45"


def test_entry_is_immutable() -> None:
    entry = LogEntry(2025, 3, 17, 9, 45)
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.year = 2026  # type: ignore[misc]


@pytest.mark.parametrize(
    "values",
    [
        [2024.9, 5, 1, 10, 0],
        ["2024", 5, 1, 10, 0],
        [True, 5, 1, 10, 0],
        "12345",
    ],
)
def test_from_fields_rejects_non_integers(values) -> None:
    with pytest.raises(MalformedRecordError):
        LogEntry.from_fields(values)
