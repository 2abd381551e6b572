"""Synthetic access data for when no real log is available."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Protocol

from .models import LogEntry

LOGGER = logging.getLogger(__name__)

DEFAULT_YEAR = 2016
# Days stop at 28 so every generated date exists in every month.
MAX_DAY = 28


class EntrySource(Protocol):
    """Anything that can hand out one entry per call."""

    def produce(self) -> LogEntry: ...


class LogfileCreator:
    """Produce random but plausible entries for a single year."""

    def __init__(self, seed: int | None = None, *, year: int = DEFAULT_YEAR) -> None:
        self._rand = random.Random(seed)
        self.year = year

    def create_entry(self) -> LogEntry:
        return LogEntry(
            year=self.year,
            month=self._rand.randint(1, 12),
            day=self._rand.randint(1, MAX_DAY),
            hour=self._rand.randrange(24),
            minute=self._rand.randrange(60),
        )

    def produce(self) -> LogEntry:
        return self.create_entry()

    def create_file(self, path: str | Path, num_entries: int) -> bool:
        """Write ``num_entries`` random lines to ``path``.

        Returns False if the file could not be written.
        """
        if num_entries < 0:
            raise ValueError("num_entries must be >= 0")
        lines = [self.create_entry().render() for _ in range(num_entries)]
        try:
            Path(path).write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        except OSError as exc:
            LOGGER.error("Could not write simulated log %s: %s", path, exc)
            return False
        LOGGER.debug("Wrote %d simulated entries to %s", num_entries, path)
        return True


def simulated_entries(source: EntrySource, count: int) -> list[LogEntry]:
    """Pull ``count`` entries from a fallback source."""
    if count < 0:
        raise ValueError("count must be >= 0")
    return [source.produce() for _ in range(count)]
