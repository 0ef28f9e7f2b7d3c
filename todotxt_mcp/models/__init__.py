"""Pydantic models for todo.txt MCP."""

from todotxt_mcp.models.inputs import (
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
    TaskUpdate,
    UpdateTaskInput,
)
from todotxt_mcp.models.task import TaskModel

__all__ = [
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
]
