"""
MCP Server for todo.txt.

This server exposes a todo.txt file as a set of tools for adding, completing,
deleting, updating, filtering, searching, sorting and batch-editing tasks,
plus a resource listing every task with its ID.
"""

# Re-export enums
from todotxt_mcp.enums import BatchAction, ResponseFormat, SortKey
from todotxt_mcp.errors import TaskNotFoundError

# Re-export models
from todotxt_mcp.models import (
    AddMetadataInput,
    AddTaskInput,
    BatchInput,
    BatchOperation,
    CompleteTaskInput,
    DeleteTaskInput,
    FilterTasksInput,
    ListTasksInput,
    RemoveMetadataInput,
    SearchTasksInput,
    SortTasksInput,
    TaskChanges,
    TaskFilter,
    TaskModel,
    TaskUpdate,
    UpdateTaskInput,
)

# Register prompts and resources on the server
from todotxt_mcp.prompts import suggest_context_tasks, suggest_project_tasks
from todotxt_mcp.resources import tasks_resource

# Re-export MCP server instance
from todotxt_mcp.server import mcp

# Re-export tools
from todotxt_mcp.tools import (
    todotxt_add,
    todotxt_add_metadata,
    todotxt_batch,
    todotxt_complete,
    todotxt_delete,
    todotxt_filter,
    todotxt_list,
    todotxt_remove_metadata,
    todotxt_search,
    todotxt_sort,
    todotxt_update,
)

# Re-export utilities (including private functions used by tests)
from todotxt_mcp.utils import (
    _add_task,
    _complete_task,
    _delete_task,
    _filter_tasks,
    _format_task,
    _format_tasks,
    _load_tasks,
    _matches_any,
    _parse_task,
    _parse_tasks,
    _remove_metadata,
    _resolve_task_id,
    _run_batch,
    _save_tasks,
    _search_tasks,
    _set_metadata,
    _sort_tasks,
    _update_task,
    task_transaction,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "SortKey",
    "BatchAction",
    # Errors
    "TaskNotFoundError",
    # Task model
    "TaskModel",
    # Shared sub-models
    "TaskFilter",
    "TaskChanges",
    "TaskUpdate",
    "BatchOperation",
    # Tool input models
    "AddTaskInput",
    "CompleteTaskInput",
    "DeleteTaskInput",
    "UpdateTaskInput",
    "AddMetadataInput",
    "RemoveMetadataInput",
    "ListTasksInput",
    "FilterTasksInput",
    "SearchTasksInput",
    "SortTasksInput",
    "BatchInput",
    # Utility functions
    "_parse_task",
    "_parse_tasks",
    "_format_task",
    "_format_tasks",
    "_load_tasks",
    "_save_tasks",
    "_resolve_task_id",
    "task_transaction",
    "_filter_tasks",
    "_matches_any",
    "_search_tasks",
    "_sort_tasks",
    "_add_task",
    "_complete_task",
    "_delete_task",
    "_update_task",
    "_set_metadata",
    "_remove_metadata",
    "_run_batch",
    # Tools
    "todotxt_add",
    "todotxt_complete",
    "todotxt_delete",
    "todotxt_update",
    "todotxt_add_metadata",
    "todotxt_remove_metadata",
    "todotxt_batch",
    "todotxt_list",
    "todotxt_filter",
    "todotxt_search",
    "todotxt_sort",
    # Resources and prompts
    "tasks_resource",
    "suggest_context_tasks",
    "suggest_project_tasks",
    # MCP server instance
    "mcp",
]
