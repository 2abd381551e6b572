from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _clean_weblog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("WEBLOG_DEFAULT_FILE", "WEBLOG_FALLBACK_COUNT", "WEBLOG_SEED", "WEBLOG_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_weblog() -> Callable[[Path, list[str]], None]:
    def _write(path: Path, lines: list[str]) -> None:
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")

    return _write


@pytest.fixture
def unsorted_log(tmp_path: Path, write_weblog) -> Path:
    path = tmp_path / "weblog.txt"
    write_weblog(
        path,
        [
            "2024 5 1 10 0",
            "2023 12 31 23 59",
            "2024 5 1 9 0",
        ],
    )
    return path
