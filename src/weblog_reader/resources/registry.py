"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from weblog_reader.core.models import ENTRY_FORMAT
from weblog_reader.core.simulated import LogfileCreator
from weblog_reader.tools.weblog import EntryPayload

SAMPLE_SEED = 42
SAMPLE_SIZE = 10


def sample_log(count: int = SAMPLE_SIZE, seed: int = SAMPLE_SEED) -> str:
    """Return a small deterministic log in the expected layout."""
    creator = LogfileCreator(seed=seed)
    return "".join(creator.create_entry().render() + "\n" for _ in range(count))


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://weblog/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        return (
            "Resources:\n"
            "- app://weblog/help\n"
            "- app://weblog/format\n"
            "- app://weblog/examples/sample-log\n"
            "- app://weblog/schemas/entry\n"
        )

    @mcp.resource("app://weblog/format")
    def format_resource() -> str:
        """Return the field layout of a log line."""
        return ENTRY_FORMAT

    @mcp.resource("app://weblog/examples/sample-log")
    def sample_log_resource() -> str:
        """Return a tiny sample log for demos and tests."""
        return sample_log()

    @mcp.resource("app://weblog/schemas/entry")
    def entry_schema() -> dict[str, Any]:
        """Return the JSON schema for serialized entries."""
        return EntryPayload.model_json_schema()
