"""In-memory task mutations.

Every function here edits the list it is given and nothing else; callers wrap
them in ``task_transaction`` so one request is one load and one persist.
"""

import logging
from collections.abc import Mapping
from datetime import date

from todotxt_mcp.enums import BatchAction
from todotxt_mcp.models.inputs import BatchOperation, TaskChanges, TaskUpdate
from todotxt_mcp.models.task import TaskModel
from todotxt_mcp.utils.parsers import _parse_task
from todotxt_mcp.utils.query import _matches_any
from todotxt_mcp.utils.store import _resolve_task_id

logger = logging.getLogger(__name__)


def _set_description(task: TaskModel, description: str) -> None:
    """
    Replace the body with ``description`` read as a todo.txt line.

    A leading "(A)" or date in the description becomes the priority or
    creation date, so the saved line reloads to the same task.

    Raises:
        ValueError: If the description starts with the completion marker
    """
    parsed = _parse_task(description)
    if parsed.completed:
        raise ValueError("A description cannot mark a task completed")
    if parsed.priority:
        task.set_priority(parsed.priority)
    if parsed.creation_date is not None:
        task.creation_date = parsed.creation_date
    task.set_body(parsed.body)


def _add_task(
    tasks: list[TaskModel],
    description: str,
    priority: str | None = None,
    contexts: list[str] | None = None,
    projects: list[str] | None = None,
    extensions: Mapping[str, str] | None = None,
    created: date | None = None,
) -> int:
    """
    Append a new task built from ``description`` and the optional fields.

    The description is read as a todo.txt line, so text like "(B) Call mom @phone"
    already carries a priority and a context.

    Returns:
        The new task's 1-based ID
    """
    task = TaskModel()
    _set_description(task, description)
    if priority:
        task.set_priority(priority)
    for context in contexts or []:
        task.add_context(context)
    for project in projects or []:
        task.add_project(project)
    if extensions:
        task.merge_extensions(extensions)
    if created is not None:
        task.creation_date = created

    tasks.append(task)
    task.id = len(tasks)
    logger.info("Added task %d: %s", task.id, task.body)
    return task.id


def _complete_task(tasks: list[TaskModel], task_id: int, today: date | None = None) -> TaskModel:
    """Mark a task completed as of ``today`` (defaults to the local date)."""
    task = tasks[_resolve_task_id(task_id, tasks)]
    task.complete(today or date.today())
    logger.info("Completed task %d", task_id)
    return task


def _delete_task(tasks: list[TaskModel], task_id: int) -> TaskModel:
    """Remove a task; every later task's ID drops by one."""
    task = tasks.pop(_resolve_task_id(task_id, tasks))
    logger.info("Deleted task %d", task_id)
    return task


def _apply_changes(task: TaskModel, changes: TaskChanges) -> None:
    """Apply field changes to one task, in a fixed order."""
    if changes.priority is not None:
        task.set_priority(changes.priority)

    if changes.contexts is not None:
        for context in task.contexts:
            task.remove_context(context)
        for context in changes.contexts:
            task.add_context(context)

    if changes.projects is not None:
        for project in task.projects:
            task.remove_project(project)
        for project in changes.projects:
            task.add_project(project)

    for context in changes.add_contexts or []:
        task.add_context(context)
    for context in changes.remove_contexts or []:
        task.remove_context(context)
    for project in changes.add_projects or []:
        task.add_project(project)
    for project in changes.remove_projects or []:
        task.remove_project(project)

    if changes.extensions:
        task.merge_extensions(changes.extensions)


def _update_task(tasks: list[TaskModel], task_id: int, updates: TaskUpdate) -> TaskModel:
    """Apply ``updates`` to one task; a new description replaces the body first."""
    task = tasks[_resolve_task_id(task_id, tasks)]
    if updates.description is not None:
        _set_description(task, updates.description)
    _apply_changes(task, updates)
    logger.info("Updated task %d", task_id)
    return task


def _set_metadata(tasks: list[TaskModel], task_id: int, metadata: Mapping[str, str]) -> TaskModel:
    task = tasks[_resolve_task_id(task_id, tasks)]
    task.merge_extensions(metadata)
    logger.info("Set metadata %s on task %d", sorted(metadata), task_id)
    return task


def _remove_metadata(tasks: list[TaskModel], task_id: int, keys: list[str]) -> TaskModel:
    task = tasks[_resolve_task_id(task_id, tasks)]
    for key in keys:
        task.remove_extension(key)
    logger.info("Removed metadata %s from task %d", keys, task_id)
    return task


def _run_batch(tasks: list[TaskModel], operations: list[BatchOperation], today: date | None = None) -> list[int]:
    """
    Run batch operations in order against the same task list.

    Criteria select a task when ANY supplied field matches, unlike
    ``_filter_tasks`` which needs all of them. An operation without criteria
    selects nothing.

    Returns:
        Number of tasks each operation touched, in operation order
    """
    completed_on = today or date.today()
    counts: list[int] = []

    for operation in operations:
        selected = [t for t in tasks if _matches_any(t, operation.criteria)]

        if operation.action == BatchAction.DELETE:
            tasks[:] = [t for t in tasks if not _matches_any(t, operation.criteria)]
        elif operation.action == BatchAction.UPDATE:
            if operation.updates is not None:
                for task in selected:
                    _apply_changes(task, operation.updates)
        elif operation.action == BatchAction.MARK_COMPLETE:
            for task in selected:
                task.complete(completed_on)

        logger.info("Batch %s touched %d task(s)", operation.action.value, len(selected))
        counts.append(len(selected))

    return counts
