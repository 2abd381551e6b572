"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: callable actions (read a weblog in chronological order)
- Resources: addressable data blobs (format description, sample log, schema)

Run locally (stdio):
    python -m weblog_reader.server.weblog_server
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from weblog_reader.core.config import resolve_reader_config
from weblog_reader.resources.registry import register_resources
from weblog_reader.tools.weblog import read_weblog_impl

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = resolve_reader_config().log_level
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("weblog-reader", json_response=True)

register_resources(mcp)


@mcp.tool()
def read_weblog(
    log_path: str | None = None,
    simulate: bool = False,
    limit: int | None = None,
    count: int | None = None,
    seed: int | None = None,
) -> dict[str, Any]:
    """Return the entries of an access log sorted by date and time.

    Parameters
    ----------
    log_path:
        Path to a local log file (plain text or .gz), one
        ``year month day hour minute`` record per line. Defaults to the
        configured file (WEBLOG_DEFAULT_FILE, else weblog.txt).
    simulate:
        When true, use synthetic entries if the file cannot be read.
    limit:
        Maximum number of entries returned (hard-capped in the implementation).
    count/seed:
        Size and random seed of the synthetic data.

    Returns
    -------
    dict:
        {"source", "simulated", "format", "total", "count", "entries"}
    """
    return read_weblog_impl(
        log_path=log_path,
        simulate=simulate,
        limit=limit,
        count=count,
        seed=seed,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
