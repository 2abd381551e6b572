"""Error types raised by the weblog reader core."""

from __future__ import annotations

from pathlib import Path


class WeblogError(Exception):
    """Base class for all weblog reader errors."""


class SourceUnavailableError(WeblogError):
    """The log source could not be opened or read."""

    def __init__(self, source: str | Path, reason: str | None = None) -> None:
        self.source = str(source)
        msg = f"Log source unavailable: {self.source}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class MalformedRecordError(WeblogError):
    """A line does not hold exactly five base-10 integer fields."""

    def __init__(self, reason: str, *, line_no: int | None = None, line: str | None = None) -> None:
        self.reason = reason
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            msg = f"Malformed record on line {line_no}: {reason}"
        else:
            msg = f"Malformed record: {reason}"
        if line is not None:
            msg += f" (line={line!r})"
        super().__init__(msg)


class ExhaustedIteratorError(WeblogError):
    """next() was called after the last entry had been returned."""


class UnsupportedMutationError(WeblogError):
    """Entries are read-only once loaded."""
