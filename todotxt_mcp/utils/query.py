"""Read-only selection and ordering of tasks."""

from collections.abc import Callable
from datetime import date
from typing import Any

from todotxt_mcp.enums import SortKey
from todotxt_mcp.models.inputs import TaskFilter
from todotxt_mcp.models.task import TaskModel
from todotxt_mcp.utils.formatters import _format_task

# Missing dates sort as if set to the Unix epoch.
EPOCH = date(1970, 1, 1)


def _matches_all(task: TaskModel, criteria: TaskFilter) -> bool:
    """True when the task satisfies every supplied criteria field."""
    if criteria.priority and task.priority != criteria.priority:
        return False
    if criteria.context and criteria.context not in task.contexts:
        return False
    if criteria.project and criteria.project not in task.projects:
        return False
    if criteria.extensions:
        extensions = task.extensions
        if any(extensions.get(key) != value for key, value in criteria.extensions.items()):
            return False
    return True


def _matches_any(task: TaskModel, criteria: TaskFilter | None) -> bool:
    """
    True when the task satisfies at least one supplied criteria field.

    Used by batch operations. With no criteria, or criteria with every field
    empty, nothing matches.
    """
    if criteria is None:
        return False
    if criteria.priority and task.priority == criteria.priority:
        return True
    if criteria.context and criteria.context in task.contexts:
        return True
    if criteria.project and criteria.project in task.projects:
        return True
    if criteria.extensions:
        extensions = task.extensions
        if any(extensions.get(key) == value for key, value in criteria.extensions.items()):
            return True
    return False


def _filter_tasks(tasks: list[TaskModel], criteria: TaskFilter | None) -> list[TaskModel]:
    """Return the tasks matching every supplied criteria field, in file order."""
    if criteria is None:
        return list(tasks)
    return [t for t in tasks if _matches_all(t, criteria)]


def _search_tasks(tasks: list[TaskModel], query: str) -> list[TaskModel]:
    """Return tasks whose serialized line contains ``query`` (case-sensitive)."""
    return [t for t in tasks if query in _format_task(t)]


_SORT_KEYS: dict[SortKey, Callable[[TaskModel], Any]] = {
    SortKey.PRIORITY: lambda t: t.priority or "",
    SortKey.CREATION_DATE: lambda t: t.creation_date or EPOCH,
    SortKey.COMPLETION_DATE: lambda t: t.completion_date or EPOCH,
}


def _sort_tasks(tasks: list[TaskModel], key: SortKey) -> list[TaskModel]:
    """
    Return a stably sorted copy of ``tasks``.

    Priority sorts alphabetically with no priority first; dates sort
    oldest first with missing dates treated as 1970-01-01.
    """
    return sorted(tasks, key=_SORT_KEYS[key])
