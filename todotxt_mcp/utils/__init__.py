"""Utility functions for todo.txt MCP."""

from todotxt_mcp.utils.formatters import _format_task, _format_task_numbered, _format_tasks
from todotxt_mcp.utils.mutations import (
    _add_task,
    _apply_changes,
    _complete_task,
    _delete_task,
    _remove_metadata,
    _run_batch,
    _set_metadata,
    _update_task,
)
from todotxt_mcp.utils.parsers import _parse_task, _parse_tasks
from todotxt_mcp.utils.query import _filter_tasks, _matches_all, _matches_any, _search_tasks, _sort_tasks
from todotxt_mcp.utils.store import (
    _ensure_todo_file,
    _load_tasks,
    _resolve_task_id,
    _save_tasks,
    task_transaction,
)

__all__ = [
    # Line codec
    "_parse_task",
    "_parse_tasks",
    "_format_task",
    "_format_task_numbered",
    "_format_tasks",
    # Store
    "_ensure_todo_file",
    "_load_tasks",
    "_save_tasks",
    "_resolve_task_id",
    "task_transaction",
    # Query
    "_matches_all",
    "_matches_any",
    "_filter_tasks",
    "_search_tasks",
    "_sort_tasks",
    # Mutations
    "_add_task",
    "_apply_changes",
    "_complete_task",
    "_delete_task",
    "_update_task",
    "_set_metadata",
    "_remove_metadata",
    "_run_batch",
]
