"""MCP resources for todo.txt MCP."""

from todotxt_mcp.enums import ResponseFormat
from todotxt_mcp.server import mcp
from todotxt_mcp.utils.formatters import _format_tasks
from todotxt_mcp.utils.store import task_transaction


@mcp.resource(
    "tasks://list",
    name="tasks",
    description="Every task in the todo file as '<id>: <line>'",
    mime_type="text/plain",
)
def tasks_resource() -> str:
    """Render the whole todo file with the 1-based IDs the tools accept."""
    with task_transaction(persist=False) as tasks:
        return _format_tasks(tasks, ResponseFormat.NUMBERED)
