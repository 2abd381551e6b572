"""Access log loading, ordering and traversal.

Parses fixed-field ``year month day hour minute`` logs into sorted entries.
"""

from __future__ import annotations

from .config import ReaderConfig, resolve_reader_config
from .cursor import Cursor
from .errors import (
    ExhaustedIteratorError,
    MalformedRecordError,
    SourceUnavailableError,
    UnsupportedMutationError,
    WeblogError,
)
from .models import ENTRY_FORMAT, LogEntry, Ordering
from .parser import LogParser, WeblogParser, parse_lines
from .reader import LogfileReader
from .simulated import EntrySource, LogfileCreator, simulated_entries

__all__ = [
    "ENTRY_FORMAT",
    "Cursor",
    "EntrySource",
    "ExhaustedIteratorError",
    "LogEntry",
    "LogParser",
    "LogfileCreator",
    "LogfileReader",
    "MalformedRecordError",
    "Ordering",
    "ReaderConfig",
    "SourceUnavailableError",
    "UnsupportedMutationError",
    "WeblogError",
    "WeblogParser",
    "parse_lines",
    "resolve_reader_config",
    "simulated_entries",
]
