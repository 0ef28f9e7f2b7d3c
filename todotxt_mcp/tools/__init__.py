"""MCP tool definitions for todo.txt."""

# Import all tools to register them with the MCP server
from todotxt_mcp.tools.core import (
    todotxt_add,
    todotxt_add_metadata,
    todotxt_batch,
    todotxt_complete,
    todotxt_delete,
    todotxt_remove_metadata,
    todotxt_update,
)
from todotxt_mcp.tools.query import todotxt_filter, todotxt_list, todotxt_search, todotxt_sort

__all__ = [
    # Change tools
    "todotxt_add",
    "todotxt_complete",
    "todotxt_delete",
    "todotxt_update",
    "todotxt_add_metadata",
    "todotxt_remove_metadata",
    "todotxt_batch",
    # Read tools
    "todotxt_list",
    "todotxt_filter",
    "todotxt_search",
    "todotxt_sort",
]
