"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from weblog_reader.core.config import resolve_reader_config
from weblog_reader.core.models import LogEntry
from weblog_reader.core.reader import LogfileReader
from weblog_reader.core.simulated import LogfileCreator

DEFAULT_LIMIT = 200
HARD_LIMIT = 5000


class EntryPayload(BaseModel):
    year: int
    month: int
    day: int
    hour: int
    minute: int
    text: str = Field(description="Entry rendered in log-file layout.")

    @classmethod
    def from_entry(cls, entry: LogEntry) -> EntryPayload:
        return cls(
            year=entry.year,
            month=entry.month,
            day=entry.day,
            hour=entry.hour,
            minute=entry.minute,
            text=entry.render(),
        )


def _resolve_limit(limit: int | None) -> int:
    if limit is None:
        return DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    return min(limit, HARD_LIMIT)


def read_weblog_impl(
    *,
    log_path: str | None = None,
    simulate: bool = False,
    limit: int | None = None,
    count: int | None = None,
    seed: int | None = None,
) -> dict[str, Any]:
    """Implementation for the `read_weblog` MCP tool.

    Notes
    -----
    - Entries come back in chronological order.
    - simulate=True substitutes synthetic entries when the file is unavailable;
      otherwise a missing file is an error.
    - count/seed only affect simulated data.
    """
    limit = _resolve_limit(limit)
    cfg = resolve_reader_config()
    if seed is None:
        seed = cfg.seed

    fallback = LogfileCreator(seed=seed) if simulate else None
    reader = LogfileReader(log_path, fallback=fallback, fallback_count=count, config=cfg)

    entries = [EntryPayload.from_entry(e).model_dump() for e in reader.entries[:limit]]
    return {
        "source": reader.source,
        "simulated": reader.simulated,
        "format": reader.get_format(),
        "total": len(reader),
        "count": len(entries),
        "entries": entries,
    }
