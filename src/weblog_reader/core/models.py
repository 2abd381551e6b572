"""Core data models for web-server access log entries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import astuple, dataclass
from enum import Enum

from .errors import MalformedRecordError

FIELD_COUNT = 5
ENTRY_FORMAT = "Year Month(1-12) Day Hour Minute"


class Ordering(str, Enum):
    """Result of comparing two entries."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


@dataclass(frozen=True, slots=True, order=True)
class LogEntry:
    """One access, recorded to the minute.

    Field order defines the sort order: (year, month, day, hour, minute).
    Values are stored as given; calendar validity is not checked.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int

    @classmethod
    def from_fields(cls, values: Sequence[int]) -> LogEntry:
        """Build an entry from exactly five integers in file order."""
        if isinstance(values, (str, bytes)):
            raise MalformedRecordError("fields must be a sequence of integers, not a string")
        if len(values) != FIELD_COUNT:
            raise MalformedRecordError(f"expected {FIELD_COUNT} fields, got {len(values)}")
        for v in values:
            if isinstance(v, bool) or not isinstance(v, int):
                raise MalformedRecordError(f"{v!r} is not an integer")
        return cls(*values)

    def fields(self) -> tuple[int, int, int, int, int]:
        return astuple(self)

    def compare(self, other: LogEntry) -> Ordering:
        """Compare chronologically against another entry."""
        if self < other:
            return Ordering.LESS
        if self > other:
            return Ordering.GREATER
        return Ordering.EQUAL

    def render(self) -> str:
        """Render in the same space-separated layout the log file uses."""
        return " ".join(str(v) for v in self.fields())

    def __str__(self) -> str:
        return self.render()
