"""Restartable forward-only traversal over loaded entries."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import ExhaustedIteratorError
from .models import LogEntry


class Cursor:
    """Position into an immutable sequence of entries.

    Each cursor owns its index, so several cursors over the same entries can
    advance independently. The backing sequence is never modified.
    """

    __slots__ = ("_entries", "_pos")

    def __init__(self, entries: Sequence[LogEntry]) -> None:
        self._entries = tuple(entries)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._entries) - self._pos

    def has_next(self) -> bool:
        """Return True while there are entries left to return."""
        return self._pos < len(self._entries)

    def next(self) -> LogEntry:
        """Return the entry at the cursor and advance by one."""
        if not self.has_next():
            raise ExhaustedIteratorError(
                f"No more entries (all {len(self._entries)} have been returned)"
            )
        entry = self._entries[self._pos]
        self._pos += 1
        return entry

    def reset(self) -> None:
        """Move back to the first entry."""
        self._pos = 0

    def __iter__(self) -> Cursor:
        return self

    def __next__(self) -> LogEntry:
        if not self.has_next():
            raise StopIteration
        return self.next()

    def __repr__(self) -> str:
        return f"Cursor(position={self._pos}, size={len(self._entries)})"
