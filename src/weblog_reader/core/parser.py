"""Line parser for the fixed-field access log format."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from .errors import MalformedRecordError
from .models import FIELD_COUNT, LogEntry


class LogParser(Protocol):
    """Parser interface: return a LogEntry or raise MalformedRecordError."""

    def parse(self, line_no: int, line: str) -> LogEntry:
        """Parse a log line into a LogEntry."""
        ...


@dataclass(frozen=True, slots=True)
class WeblogParser:
    """Parse ``year month day hour minute`` lines."""

    _int_re = re.compile(r"^[+-]?[0-9]+$")

    def parse(self, line_no: int, line: str) -> LogEntry:
        """Split on whitespace and convert exactly five integer tokens."""
        text = line.rstrip("\r\n")
        tokens = text.split()

        for tok in tokens:
            if not self._int_re.match(tok):
                raise MalformedRecordError(
                    f"{tok!r} is not a base-10 integer", line_no=line_no, line=text
                )

        if len(tokens) != FIELD_COUNT:
            raise MalformedRecordError(
                f"expected {FIELD_COUNT} fields, got {len(tokens)}", line_no=line_no, line=text
            )

        try:
            values = [int(tok) for tok in tokens]
        except ValueError as exc:
            # digit strings longer than sys.get_int_max_str_digits() are refused by int()
            raise MalformedRecordError(
                "integer field too long to convert", line_no=line_no, line=text
            ) from exc

        return LogEntry(*values)


def parse_lines(lines: Iterable[str], parser: LogParser | None = None) -> list[LogEntry]:
    """Parse every line, aborting on the first malformed one."""
    parser = parser or WeblogParser()
    return [parser.parse(line_no, line) for line_no, line in enumerate(lines, start=1)]
