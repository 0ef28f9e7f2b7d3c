"""FastMCP server initialization for todo.txt MCP."""

import logging

from mcp.server.fastmcp import FastMCP

from todotxt_mcp.config import load_settings
from todotxt_mcp.logging_setup import setup_logging
from todotxt_mcp.utils.store import _ensure_todo_file

logger = logging.getLogger(__name__)

# Initialize the MCP server
mcp = FastMCP("todotxt_mcp")


def run() -> None:
    """Run the MCP server over stdio."""
    settings = load_settings()
    setup_logging(settings.log_level)
    _ensure_todo_file(settings.todo_file)
    logger.info("Serving tasks from %s", settings.todo_file)
    mcp.run()


if __name__ == "__main__":
    run()
