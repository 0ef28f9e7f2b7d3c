"""Pytest configuration and fixtures for todotxt-mcp tests."""

import pytest

from todotxt_mcp import _parse_task


@pytest.fixture
def todo_file(tmp_path, monkeypatch):
    """An empty todo file wired in through TODO_FILE_PATH."""
    path = tmp_path / "todo.txt"
    path.write_text("", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TODO_FILE_PATH", str(path))
    return path


@pytest.fixture
def sample_lines():
    """Raw todo.txt lines shared by query and batch tests."""
    return [
        "(A) Clean kitchen @home +chores",
        "(A) Write report @work +job due:2024-02-01",
        "(B) Fix sink @home +chores",
        "Call bank @phone due:2024-02-01 who:me",
    ]


@pytest.fixture
def sample_tasks(sample_lines):
    """The sample lines parsed into TaskModel instances with IDs."""
    tasks = [_parse_task(line) for line in sample_lines]
    for position, task in enumerate(tasks, start=1):
        task.id = position
    return tasks


@pytest.fixture
def populated_todo_file(todo_file, sample_lines):
    """The todo file pre-filled with the sample lines."""
    todo_file.write_text("\n".join(sample_lines), encoding="utf-8")
    return todo_file
