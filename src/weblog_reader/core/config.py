"""Reader configuration with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

DEFAULT_FILENAME = "weblog.txt"
DEFAULT_FALLBACK_COUNT = 100


@dataclass(frozen=True, slots=True)
class ReaderConfig:
    default_file: str = DEFAULT_FILENAME
    # How many simulated entries replace an unavailable source.
    fallback_count: int = DEFAULT_FALLBACK_COUNT
    seed: int | None = None
    log_level: str = "INFO"


def _env_int(name: str, *, minimum: int) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


def resolve_reader_config(cfg: ReaderConfig | None = None) -> ReaderConfig:
    """Return config with optional env overrides applied."""
    if cfg is None:
        cfg = ReaderConfig()

    overrides: dict[str, object] = {}

    default_file = os.getenv("WEBLOG_DEFAULT_FILE")
    if default_file:
        overrides["default_file"] = default_file

    fallback_count = _env_int("WEBLOG_FALLBACK_COUNT", minimum=0)
    if fallback_count is not None:
        overrides["fallback_count"] = fallback_count

    seed = _env_int("WEBLOG_SEED", minimum=0)
    if seed is not None:
        overrides["seed"] = seed

    log_level = os.getenv("WEBLOG_LOG_LEVEL")
    if log_level:
        overrides["log_level"] = log_level.upper()

    if not overrides:
        return cfg
    return replace(cfg, **overrides)
