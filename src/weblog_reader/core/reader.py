"""Load, sort and traverse an access log.

This module is the main integration point: it reads a log file in one pass,
parses every line, sorts the entries and hands them out through a cursor.
"""

from __future__ import annotations

import gzip
import logging
import sys
import zlib
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from .config import ReaderConfig, resolve_reader_config
from .cursor import Cursor
from .errors import SourceUnavailableError, UnsupportedMutationError
from .models import ENTRY_FORMAT, LogEntry
from .parser import LogParser, parse_lines
from .simulated import EntrySource, LogfileCreator, simulated_entries

LOGGER = logging.getLogger(__name__)


def _read_lines(path: Path, *, encoding: str, decode_errors: str) -> list[str]:
    """Read every line of a plain or gzip log file."""
    try:
        if path.suffix.lower() == ".gz":
            with gzip.open(path, mode="rt", encoding=encoding, errors=decode_errors) as f:
                return [line.rstrip("\r\n") for line in f]
        with path.open(encoding=encoding, errors=decode_errors) as f:
            return [line.rstrip("\r\n") for line in f]
    except OSError as exc:
        raise SourceUnavailableError(path, exc.strerror or str(exc)) from exc
    except (EOFError, zlib.error, UnicodeDecodeError) as exc:
        raise SourceUnavailableError(path, str(exc)) from exc


class LogfileReader:
    """Sorted, read-only view of an access log with a restartable cursor.

    Parameters
    ----------
    source:
        Path to the log file. Defaults to the configured default file name.
    parser:
        Line parser; ``WeblogParser`` when omitted.
    fallback:
        Optional supplier of synthetic entries. Without one, an unreadable
        source raises ``SourceUnavailableError``. With one, the reader logs a
        warning and loads ``fallback_count`` produced entries instead.
    logger:
        Where diagnostics go. Defaults to this module's logger.

    Malformed lines abort the load with ``MalformedRecordError``.
    """

    def __init__(
        self,
        source: str | Path | None = None,
        *,
        parser: LogParser | None = None,
        fallback: EntrySource | None = None,
        fallback_count: int | None = None,
        config: ReaderConfig | None = None,
        encoding: str = "utf-8",
        decode_errors: str = "replace",
        logger: logging.Logger | None = None,
    ) -> None:
        log = logger or LOGGER
        if source is None:
            source = resolve_reader_config(config).default_file
        path = Path(source)

        simulated = False
        try:
            lines = _read_lines(path, encoding=encoding, decode_errors=decode_errors)
        except SourceUnavailableError as exc:
            if fallback is None:
                raise
            if fallback_count is None:
                fallback_count = resolve_reader_config(config).fallback_count
            log.warning("%s; using %d simulated entries instead", exc, fallback_count)
            entries = simulated_entries(fallback, fallback_count)
            simulated = True
        else:
            entries = parse_lines(lines, parser)

        self._setup(str(path), entries, simulated=simulated, logger=log)

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[LogEntry],
        *,
        source: str = "<memory>",
        simulated: bool = False,
        logger: logging.Logger | None = None,
    ) -> LogfileReader:
        """Build a reader over entries the caller already has."""
        reader = cls.__new__(cls)
        reader._setup(source, entries, simulated=simulated, logger=logger or LOGGER)
        return reader

    @classmethod
    def simulated_data(
        cls,
        creator: EntrySource | None = None,
        count: int | None = None,
        *,
        config: ReaderConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> LogfileReader:
        """Build a reader over synthetic entries."""
        cfg = resolve_reader_config(config)
        creator = creator or LogfileCreator(seed=cfg.seed)
        count = cfg.fallback_count if count is None else count
        return cls.from_entries(
            simulated_entries(creator, count),
            source="<simulated>",
            simulated=True,
            logger=logger,
        )

    def _setup(
        self,
        source: str,
        entries: Iterable[LogEntry],
        *,
        simulated: bool,
        logger: logging.Logger,
    ) -> None:
        self.source = source
        self.simulated = simulated
        self._log = logger
        self._format = ENTRY_FORMAT
        self._entries: tuple[LogEntry, ...] = tuple(sorted(entries))
        self._cursor = Cursor(self._entries)
        self._log.debug("Loaded %d entries from %s", len(self._entries), source)

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return self._entries

    @property
    def format(self) -> str:
        return self._format

    def get_format(self) -> str:
        """Describe the field layout of the log file."""
        return self._format

    def has_next(self) -> bool:
        return self._cursor.has_next()

    def next(self) -> LogEntry:
        """Return the next entry; raises ExhaustedIteratorError at the end."""
        return self._cursor.next()

    def reset(self) -> None:
        """Start again from the first entry so the data can be reprocessed."""
        self._cursor.reset()

    def remove(self) -> None:
        """Removing entries is not permitted; this only reports the attempt."""
        err = UnsupportedMutationError("It is not permitted to remove entries.")
        self._log.warning("remove() ignored: %s", err)

    def cursor(self) -> Cursor:
        """Return a new cursor, independent of the reader's own."""
        return Cursor(self._entries)

    def dump(self, stream: TextIO | None = None) -> None:
        """Write every entry, in sorted order, one per line."""
        out = stream if stream is not None else sys.stdout
        for entry in self._entries:
            out.write(entry.render() + "\n")

    def print_data(self) -> None:
        self.dump()

    def __iter__(self) -> Cursor:
        return self.cursor()

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"LogfileReader(source={self.source!r}, entries={len(self._entries)}, "
            f"simulated={self.simulated})"
        )
