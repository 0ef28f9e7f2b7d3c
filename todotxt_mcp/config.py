"""Configuration loading for the todo.txt MCP server."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

TODO_FILE_ENV = "TODO_FILE_PATH"
LOG_LEVEL_ENV = "TODOTXT_MCP_LOG_LEVEL"
DEFAULT_TODO_FILE = "todo.txt"


class ConfigError(RuntimeError):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    todo_file: Path
    log_level: int


def _read_dotenv_value(dotenv_path: Path, key: str) -> str | None:
    """Read a single key from a .env file without mutating the environment."""
    if not dotenv_path.is_file():
        return None
    try:
        content = dotenv_path.read_text(encoding="utf-8")
    except OSError:
        return None

    for line in content.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if stripped.startswith("export "):
            stripped = stripped[len("export ") :].strip()
        if "=" not in stripped:
            continue
        name, value = stripped.split("=", 1)
        if name.strip() != key:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]
        return value or None
    return None


def _lookup(key: str, dotenv_path: Path) -> str | None:
    value = os.environ.get(key)
    if value is None or not value.strip():
        value = _read_dotenv_value(dotenv_path, key)
    return value.strip() if value else None


def _read_log_level(raw_value: str | None) -> int:
    if raw_value is None:
        return logging.INFO
    level = logging.getLevelName(raw_value.upper())
    if not isinstance(level, int):
        raise ConfigError(f"{LOG_LEVEL_ENV} must be a logging level name, got {raw_value!r}.")
    return level


def load_settings() -> Settings:
    """Load settings from the environment, falling back to ./.env."""
    cwd = Path.cwd()
    dotenv_path = cwd / ".env"

    raw_path = _lookup(TODO_FILE_ENV, dotenv_path) or DEFAULT_TODO_FILE
    todo_file = Path(raw_path).expanduser()
    if not todo_file.is_absolute():
        todo_file = cwd / todo_file

    return Settings(
        todo_file=todo_file,
        log_level=_read_log_level(_lookup(LOG_LEVEL_ENV, dotenv_path)),
    )
