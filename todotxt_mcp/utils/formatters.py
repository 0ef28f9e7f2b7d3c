"""Formatting utilities for task output."""

import json

from todotxt_mcp.enums import ResponseFormat
from todotxt_mcp.models.task import TaskModel


def _format_task(task: TaskModel) -> str:
    """
    Serialize a task back to its todo.txt line.

    Output: "x (A) 2024-06-02 2024-06-01 Call mom @phone +family due:2024-06-03"
    """
    parts: list[str] = []
    if task.completed:
        parts.append("x")
    if task.priority:
        parts.append(f"({task.priority})")
    if task.completed and task.completion_date:
        parts.append(task.completion_date.isoformat())
    if task.creation_date:
        parts.append(task.creation_date.isoformat())
    if task.body:
        parts.append(task.body)
    return " ".join(parts)


def _format_task_numbered(task: TaskModel) -> str:
    """Format a task as "<id>: <line>"."""
    task_id = task.id if task.id is not None else "?"
    return f"{task_id}: {_format_task(task)}"


def _format_tasks(tasks: list[TaskModel], response_format: ResponseFormat = ResponseFormat.RAW) -> str:
    """Format a list of tasks in the requested output format."""
    if response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "count": len(tasks),
                "tasks": [{**t.model_dump(mode="json"), "line": _format_task(t)} for t in tasks],
            },
            indent=2,
        )

    if response_format == ResponseFormat.NUMBERED:
        return "\n".join(_format_task_numbered(t) for t in tasks)

    return "\n".join(_format_task(t) for t in tasks)
