"""Core MCP tool definitions for todo.txt task changes."""

from datetime import date

from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import ToolAnnotations

from todotxt_mcp.errors import TaskNotFoundError
from todotxt_mcp.models.inputs import (
    AddMetadataInput,
    AddTaskInput,
    BatchInput,
    CompleteTaskInput,
    DeleteTaskInput,
    RemoveMetadataInput,
    UpdateTaskInput,
)
from todotxt_mcp.server import mcp
from todotxt_mcp.utils.mutations import (
    _add_task,
    _complete_task,
    _delete_task,
    _remove_metadata,
    _run_batch,
    _set_metadata,
    _update_task,
)
from todotxt_mcp.utils.store import task_transaction

_ID_TIP = "Tip: Use todotxt_list with response_format='numbered' to see valid task IDs."


def _not_found(message: str, error: TaskNotFoundError) -> ToolError:
    if error.count == 0:
        return ToolError(f"{message}\nThe task list is empty; add a task with todotxt_add first.")
    return ToolError(f"{message}\nThere are {error.count} task(s); IDs run from 1 to {error.count}. {_ID_TIP}")


@mcp.tool(
    name="todotxt_add",
    annotations=ToolAnnotations(
        title="Add Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def todotxt_add(params: AddTaskInput) -> str:
    """
    Append a new task to the todo file.

    USE THIS WHEN:
    - Adding a new task to track
    - Creating tasks with priority, contexts, projects or key:value metadata

    DO NOT USE WHEN:
    - Changing an existing task → use todotxt_update instead
    - Attaching metadata to an existing task → use todotxt_add_metadata instead

    The description is read as a todo.txt line, so "(A) Call mom @phone +family"
    already sets priority A, context 'phone' and project 'family'.

    Args:
        params: AddTaskInput containing description and optional attributes

    Returns:
        Confirmation message with the new task ID

    Examples:
        - Simple task: params with description="Buy milk"
        - With priority: params with description="Fix bug", priority="A"
        - With tags: params with description="Call mom", contexts=["phone"], projects=["family"]
        - With metadata: params with description="Pay rent", extensions={"due": "2025-02-01"}
    """
    with task_transaction() as tasks:
        task_id = _add_task(
            tasks,
            params.description,
            priority=params.priority,
            contexts=params.contexts,
            projects=params.projects,
            extensions=params.extensions,
            created=date.today() if params.set_creation_date else None,
        )

    return f"Task added successfully. ID: {task_id}"


@mcp.tool(
    name="todotxt_complete",
    annotations=ToolAnnotations(
        title="Complete Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def todotxt_complete(params: CompleteTaskInput) -> str:
    """
    Mark a task as completed with today's date.

    Completed tasks stay in the file (prefixed with "x <date>"); there is no way
    to reopen them.

    Args:
        params: CompleteTaskInput containing the task_id to complete

    Returns:
        Confirmation message

    Examples:
        - Complete task 3: params with task_id=3
    """
    try:
        with task_transaction() as tasks:
            _complete_task(tasks, params.task_id)
    except TaskNotFoundError as e:
        raise _not_found("Task not found.", e) from e

    return f"Task {params.task_id} marked as completed."


@mcp.tool(
    name="todotxt_delete",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def todotxt_delete(params: DeleteTaskInput) -> str:
    """
    Remove a task from the todo file.

    IMPORTANT: Task IDs are line positions. Deleting task N renumbers every task
    after it (N+1 becomes N). List again before using other IDs.

    Args:
        params: DeleteTaskInput containing the task_id to delete

    Returns:
        Confirmation message

    Examples:
        - Delete task 2: params with task_id=2
    """
    try:
        with task_transaction() as tasks:
            _delete_task(tasks, params.task_id)
    except TaskNotFoundError as e:
        raise _not_found("Invalid task ID.", e) from e

    return f"Task {params.task_id} deleted successfully."


@mcp.tool(
    name="todotxt_update",
    annotations=ToolAnnotations(
        title="Update Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def todotxt_update(params: UpdateTaskInput) -> str:
    """
    Change fields of an existing task.

    USE THIS WHEN:
    - Rewriting a task's description
    - Changing priority (empty string removes it)
    - Replacing contexts or projects, or adding/removing individual ones

    DO NOT USE WHEN:
    - Marking a task done → use todotxt_complete instead
    - Changing many tasks at once → use todotxt_batch instead

    SEMANTICS:
    - contexts / projects REPLACE all existing ones
    - add_* / remove_* change individual contexts or projects
    - extensions MERGE: supplied keys are set, other keys are kept
    - description is read as a line: a leading (A) or date sets priority or creation date

    Args:
        params: UpdateTaskInput containing task_id and the updates to apply

    Returns:
        Confirmation message

    Examples:
        - Reword: params with task_id=1, updates={"description": "Buy oat milk"}
        - Re-tag: params with task_id=1, updates={"contexts": ["store"], "projects": ["groceries"]}
        - Clear priority: params with task_id=1, updates={"priority": ""}
    """
    try:
        with task_transaction() as tasks:
            _update_task(tasks, params.task_id, params.updates)
    except TaskNotFoundError as e:
        raise _not_found("Invalid task ID.", e) from e

    return f"Task {params.task_id} updated successfully."


@mcp.tool(
    name="todotxt_add_metadata",
    annotations=ToolAnnotations(
        title="Add Task Metadata",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def todotxt_add_metadata(params: AddMetadataInput) -> str:
    """
    Set key:value metadata on a task.

    Existing keys are overwritten; keys not mentioned are left alone.

    Args:
        params: AddMetadataInput containing task_id and metadata mapping

    Returns:
        Confirmation message

    Examples:
        - Due date: params with task_id=2, metadata={"due": "2025-03-01"}
    """
    try:
        with task_transaction() as tasks:
            _set_metadata(tasks, params.task_id, params.metadata)
    except TaskNotFoundError as e:
        raise _not_found("Invalid task ID.", e) from e

    return "Metadata added successfully."


@mcp.tool(
    name="todotxt_remove_metadata",
    annotations=ToolAnnotations(
        title="Remove Task Metadata",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def todotxt_remove_metadata(params: RemoveMetadataInput) -> str:
    """
    Remove key:value metadata from a task.

    Keys the task does not have are ignored.

    Args:
        params: RemoveMetadataInput containing task_id and keys

    Returns:
        Confirmation message

    Examples:
        - Drop due date: params with task_id=2, keys=["due"]
    """
    try:
        with task_transaction() as tasks:
            _remove_metadata(tasks, params.task_id, params.keys)
    except TaskNotFoundError as e:
        raise _not_found("Invalid task ID.", e) from e

    return "Metadata removed successfully."


@mcp.tool(
    name="todotxt_batch",
    annotations=ToolAnnotations(
        title="Batch Operations",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def todotxt_batch(params: BatchInput) -> str:
    """
    Apply several update / delete / mark-complete operations in one call.

    USE THIS WHEN:
    - Changing every task in a context, project or priority at once
    - Cleaning up: delete or complete groups of tasks

    IMPORTANT: CRITERIA MATCH ANY FIELD (OR)
    criteria={"priority": "A", "context": "home"} selects tasks with priority A
    OR context home. This differs from todotxt_list / todotxt_filter, which
    require every field. An operation without criteria selects nothing.

    Operations run in order on the same task list, so later operations see
    earlier changes. The file is written once, after all of them succeed.

    Args:
        params: BatchInput containing the ordered operations

    Returns:
        Confirmation message with per-operation counts

    Examples:
        - Delete all +oldproject tasks: operations=[{"action": "delete", "criteria": {"project": "oldproject"}}]
        - Finish @errands: operations=[{"action": "mark-complete", "criteria": {"context": "errands"}}]
        - Bump priority: operations=[{"action": "update", "criteria": {"priority": "C"}, "updates": {"priority": "B"}}]
    """
    with task_transaction() as tasks:
        counts = _run_batch(tasks, params.operations)

    lines = ["Batch operations completed successfully."]
    for number, (operation, count) in enumerate(zip(params.operations, counts), start=1):
        lines.append(f"{number}. {operation.action.value}: {count} task(s)")
    return "\n".join(lines)
