"""Parser helpers for todo.txt lines."""

import logging
import re
from datetime import date

from todotxt_mcp.models.task import TaskModel

logger = logging.getLogger(__name__)

_COMPLETED_RE = re.compile(r"x")
_PRIORITY_RE = re.compile(r"\(([A-Z])\)")
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def _take_token(rest: str, pattern: re.Pattern[str]) -> tuple[re.Match[str] | None, str]:
    """Match ``pattern`` against the leading token, which must end at a single space or end of line."""
    head, _, tail = rest.partition(" ")
    match = pattern.fullmatch(head)
    if match is None:
        return None, rest
    return match, tail


def _take_date(rest: str) -> tuple[date | None, str]:
    match, tail = _take_token(rest, _DATE_RE)
    if match is None:
        return None, rest
    try:
        return date.fromisoformat(match.group(0)), tail
    except ValueError:
        # Shaped like a date but not a real one (e.g. 2024-13-40): leave it in the body.
        return None, rest


def _parse_task(line: str) -> TaskModel:
    """
    Parse one todo.txt line into a TaskModel.

    Leading fields are read in order: ``x`` (completed), ``(A)`` priority, then
    one or two ``YYYY-MM-DD`` dates. On a completed line the first date is the
    completion date and the second the creation date; on an open line the only
    date is the creation date. Everything after that is the body, from which
    contexts, projects and extensions are derived.

    Args:
        line: A single line of the todo file, without its newline

    Returns:
        TaskModel instance; an empty line gives an empty task
    """
    rest = line.rstrip("\r\n")

    completed_match, rest = _take_token(rest, _COMPLETED_RE)
    completed = completed_match is not None

    priority_match, rest = _take_token(rest, _PRIORITY_RE)
    priority = priority_match.group(1) if priority_match else None

    completion_date = None
    first_date, rest = _take_date(rest)
    if completed and first_date is not None:
        completion_date = first_date
        creation_date, rest = _take_date(rest)
    else:
        creation_date = first_date

    return TaskModel(
        completed=completed,
        completion_date=completion_date,
        creation_date=creation_date,
        priority=priority,
        body=rest,
    )


def _parse_tasks(content: str) -> list[TaskModel]:
    """
    Parse the full text of a todo file into TaskModel instances.

    Lines end at "\\n" only, so form feeds and other Unicode line breaks stay
    inside their task. Blank lines are skipped. A line that cannot be parsed is kept as a plain
    body so one bad line never hides the rest of the file.

    Args:
        content: Whole file content

    Returns:
        List of TaskModel instances in file order
    """
    tasks: list[TaskModel] = []
    for line in content.split("\n"):
        if not line.strip():
            continue
        try:
            tasks.append(_parse_task(line))
        except ValueError as e:
            logger.warning("Keeping unparseable line as plain text: %r (%s)", line, e)
            tasks.append(TaskModel(body=line))
    return tasks
