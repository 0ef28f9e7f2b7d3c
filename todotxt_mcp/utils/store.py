"""Loading and persisting the todo file."""

import logging
import os
import shutil
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from todotxt_mcp.config import load_settings
from todotxt_mcp.errors import TaskNotFoundError
from todotxt_mcp.models.task import TaskModel
from todotxt_mcp.utils.formatters import _format_task
from todotxt_mcp.utils.parsers import _parse_tasks

logger = logging.getLogger(__name__)

# Undecodable bytes load as U+FFFD.
_ENCODING_ERRORS = "replace"

# One writer at a time: load -> mutate -> persist runs under this lock.
_STORE_LOCK = threading.Lock()


def _atomic_write(target_path: Path, content: str) -> None:
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile("w", encoding="utf-8", dir=target_path.parent, delete=False) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        if target_path.exists():
            shutil.copymode(target_path, temp_path)
        os.replace(temp_path, target_path)
    finally:
        if temp_path is not None and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass


def _ensure_todo_file(path: Path) -> None:
    """Create an empty todo file (and its directory) if it does not exist yet."""
    if path.exists():
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")
    logger.info("Created empty todo file at %s", path)


def _load_tasks(path: Path) -> list[TaskModel]:
    """
    Read and parse every task in the todo file.

    Each task's ``id`` is set to its 1-based line position among non-blank lines.

    Raises:
        OSError: If the file cannot be read
    """
    try:
        content = path.read_text(encoding="utf-8", errors=_ENCODING_ERRORS)
    except OSError:
        logger.error("Failed to read todo file %s", path)
        raise

    tasks = _parse_tasks(content)
    for position, task in enumerate(tasks, start=1):
        task.id = position
    logger.debug("Loaded %d task(s) from %s", len(tasks), path)
    return tasks


def _save_tasks(tasks: list[TaskModel], path: Path) -> None:
    """
    Rewrite the whole todo file from ``tasks``.

    Raises:
        OSError: If the file cannot be written
    """
    content = "\n".join(_format_task(t) for t in tasks)
    try:
        _atomic_write(path, content)
    except OSError:
        logger.error("Failed to write todo file %s", path)
        raise
    logger.debug("Saved %d task(s) to %s", len(tasks), path)


def _resolve_task_id(task_id: int, tasks: list[TaskModel]) -> int:
    """
    Convert a 1-based task ID into a list index.

    Raises:
        TaskNotFoundError: If ``task_id`` is outside 1..len(tasks)
    """
    if task_id < 1 or task_id > len(tasks):
        raise TaskNotFoundError(task_id, len(tasks))
    return task_id - 1


@contextmanager
def task_transaction(path: Path | None = None, *, persist: bool = True) -> Iterator[list[TaskModel]]:
    """
    Load the task list, hand it to the caller, then persist it.

    The list is written back only when the block finishes without raising, so a
    failing operation leaves the file untouched.

    Args:
        path: Todo file to use; defaults to the configured TODO_FILE_PATH
        persist: Set to False for read-only access

    Yields:
        Mutable list of tasks in file order
    """
    target = path if path is not None else load_settings().todo_file
    with _STORE_LOCK:
        tasks = _load_tasks(target)
        yield tasks
        if persist:
            _save_tasks(tasks, target)
