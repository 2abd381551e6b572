"""Module entrypoint.

Allows:
    python -m weblog_reader
"""

from __future__ import annotations

from weblog_reader.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
