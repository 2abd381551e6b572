from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from weblog_reader.core.config import resolve_reader_config
from weblog_reader.core.errors import MalformedRecordError, SourceUnavailableError
from weblog_reader.core.models import ENTRY_FORMAT
from weblog_reader.core.reader import LogfileReader
from weblog_reader.core.simulated import LogfileCreator


def _non_negative_int(s: str) -> int:
    try:
        value = int(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got {s!r}") from e
    if value < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return value


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    cfg = resolve_reader_config()

    p = argparse.ArgumentParser(description="Print a web-server access log in date order.")
    p.add_argument("log_path", nargs="?", default=None, help=f"Log file (default: {cfg.default_file})")
    p.add_argument("--simulate", action="store_true", help="Use simulated data if the file can't be read")
    p.add_argument(
        "--count",
        type=_non_negative_int,
        default=cfg.fallback_count,
        help=f"Number of simulated entries (default: {cfg.fallback_count})",
    )
    p.add_argument("--seed", type=_non_negative_int, default=cfg.seed, help="Seed for simulated data")
    p.add_argument("--format", dest="show_format", action="store_true", help="Print the line format and exit")
    p.add_argument("--create", metavar="PATH", default=None, help="Write a simulated log file and exit")

    args = p.parse_args(argv)
    _configure_logging(cfg.log_level)

    if args.show_format:
        print(ENTRY_FORMAT)
        return 0

    creator = LogfileCreator(seed=args.seed)

    if args.create:
        if not creator.create_file(args.create, args.count):
            return 1
        print(f"Wrote {args.count} entries to {args.create}")
        return 0

    try:
        reader = LogfileReader(
            args.log_path,
            fallback=creator if args.simulate else None,
            fallback_count=args.count,
            config=cfg,
        )
    except SourceUnavailableError as e:
        print(str(e), file=sys.stderr)
        print("Use --simulate to fall back to simulated data.", file=sys.stderr)
        return 2
    except MalformedRecordError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    reader.dump(sys.stdout)
    label = "simulated" if reader.simulated else "log"
    print(f"\n{len(reader)} {label} entries ({reader.get_format()}).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
