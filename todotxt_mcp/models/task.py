"""Core task model for todo.txt MCP."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from datetime import date

from pydantic import BaseModel, Field, computed_field, field_validator

CONTEXT_RE = re.compile(r"@(\w+)")
PROJECT_RE = re.compile(r"\+(\w+)")
EXTENSION_RE = re.compile(r"(\w+):(\S+)")
NAME_RE = re.compile(r"\w+")
PRIORITY_RE = re.compile(r"[A-Z]")


def _token_name(value: str, sigil: str) -> str:
    """Strip an optional leading sigil and check the rest is a bare word."""
    name = value.strip()
    if name.startswith(sigil):
        name = name[len(sigil) :]
    if not NAME_RE.fullmatch(name):
        raise ValueError(f"Invalid name '{value}': use letters, digits or underscores only")
    return name


def _check_priority(value: str) -> str:
    if not PRIORITY_RE.fullmatch(value):
        raise ValueError(f"Invalid priority '{value}': must be a single uppercase letter A-Z")
    return value


def _check_extension(key: str, value: str) -> None:
    if not NAME_RE.fullmatch(key):
        raise ValueError(f"Invalid metadata key '{key}': use letters, digits or underscores only")
    if not value or any(ch.isspace() for ch in value):
        raise ValueError(f"Invalid value for metadata key '{key}': must be non-empty with no whitespace")


def _collect_names(pattern: re.Pattern[str], body: str) -> list[str]:
    names: list[str] = []
    for token in body.split():
        if (match := pattern.fullmatch(token)) and match.group(1) not in names:
            names.append(match.group(1))
    return names


class TaskModel(BaseModel):
    """Model representing one todo.txt line.

    ``body`` is the source of truth for contexts, projects and extensions; those
    are read-only views extracted from it, and the mutators below rewrite the
    body so the two never drift apart.
    """

    id: int | None = Field(default=None, description="1-based position in the todo file at load time")
    completed: bool = False
    completion_date: date | None = None
    creation_date: date | None = None
    priority: str | None = None
    body: str = ""

    @field_validator("priority")
    @classmethod
    def validate_priority(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _check_priority(v)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def contexts(self) -> list[str]:
        return _collect_names(CONTEXT_RE, self.body)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def projects(self) -> list[str]:
        return _collect_names(PROJECT_RE, self.body)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def extensions(self) -> dict[str, str]:
        # Duplicate keys: the last token wins.
        found: dict[str, str] = {}
        for token in self.body.split():
            if match := EXTENSION_RE.fullmatch(token):
                found[match.group(1)] = match.group(2)
        return found

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_body(self, body: str) -> None:
        self.body = body

    def set_priority(self, priority: str | None) -> None:
        """Set the priority letter, or clear it with None / empty string."""
        self.priority = _check_priority(priority) if priority else None

    def complete(self, on: date) -> None:
        self.completed = True
        self.completion_date = on

    def add_context(self, context: str) -> None:
        name = _token_name(context, "@")
        if name not in self.contexts:
            self._append_token(f"@{name}")

    def remove_context(self, context: str) -> None:
        token = f"@{_token_name(context, '@')}"
        self._drop_tokens(lambda t: t == token)

    def add_project(self, project: str) -> None:
        name = _token_name(project, "+")
        if name not in self.projects:
            self._append_token(f"+{name}")

    def remove_project(self, project: str) -> None:
        token = f"+{_token_name(project, '+')}"
        self._drop_tokens(lambda t: t == token)

    def set_extension(self, key: str, value: str) -> None:
        """Insert or overwrite one key:value token.

        An existing key is rewritten where its first token sits and any
        duplicate tokens for that key are dropped; a new key is appended.
        """
        _check_extension(key, value)
        rewritten: list[str] = []
        replaced = False
        for token in self.body.split():
            match = EXTENSION_RE.fullmatch(token)
            if match and match.group(1) == key:
                if not replaced:
                    rewritten.append(f"{key}:{value}")
                    replaced = True
                continue
            rewritten.append(token)
        if not replaced:
            rewritten.append(f"{key}:{value}")
        self.body = " ".join(rewritten)

    def merge_extensions(self, extensions: Mapping[str, str]) -> None:
        for key, value in extensions.items():
            self.set_extension(key, value)

    def remove_extension(self, key: str) -> None:
        """Drop every token for ``key``; unknown keys are ignored."""

        def same_key(token: str) -> bool:
            match = EXTENSION_RE.fullmatch(token)
            return bool(match and match.group(1) == key)

        if key in self.extensions:
            self._drop_tokens(same_key)

    def _append_token(self, token: str) -> None:
        self.body = f"{self.body} {token}" if self.body.strip() else token

    def _drop_tokens(self, predicate: Callable[[str], bool]) -> None:
        tokens = self.body.split()
        kept = [t for t in tokens if not predicate(t)]
        if len(kept) != len(tokens):
            self.body = " ".join(kept)
