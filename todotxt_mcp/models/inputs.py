"""Input models for todo.txt MCP tools."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from todotxt_mcp.enums import BatchAction, ResponseFormat, SortKey
from todotxt_mcp.models.task import _check_extension, _check_priority, _token_name


def _validate_priority(v: str | None, allow_clear: bool = False) -> str | None:
    if v is None:
        return v
    if v == "":
        return "" if allow_clear else None
    return _check_priority(v)


def _validate_description(v: str) -> str:
    description = v.strip()
    if not description:
        raise ValueError("Description cannot be empty")
    if description.partition(" ")[0] == "x":
        raise ValueError("Description cannot start with the completion marker 'x'; use todotxt_complete instead")
    return description


def _validate_names(v: list[str] | None, sigil: str) -> list[str] | None:
    if v is None:
        return v
    return [_token_name(name, sigil) for name in v]


def _validate_extensions(v: dict[str, str] | None) -> dict[str, str] | None:
    if v is None:
        return v
    for key, value in v.items():
        _check_extension(key, value)
    return v


# ============================================================================
# Shared Sub-Models
# ============================================================================


class TaskFilter(BaseModel):
    """Field criteria used to select tasks.

    ``todotxt_list`` and ``todotxt_filter`` require every supplied field to
    match (AND). Batch operations select a task when any supplied field
    matches (OR).
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    priority: str | None = Field(default=None, description="Exact priority letter, e.g. 'A'")
    context: str | None = Field(default=None, description="Context name, with or without '@'")
    project: str | None = Field(default=None, description="Project name, with or without '+'")
    extensions: dict[str, str] | None = Field(
        default=None, description="key:value metadata pairs, e.g. {'due': '2025-01-31'}"
    )

    @field_validator("priority")
    @classmethod
    def validate_priority(cls, v: str | None) -> str | None:
        return _validate_priority(v)

    @field_validator("context")
    @classmethod
    def validate_context(cls, v: str | None) -> str | None:
        return _token_name(v, "@") if v else None

    @field_validator("project")
    @classmethod
    def validate_project(cls, v: str | None) -> str | None:
        return _token_name(v, "+") if v else None

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: dict[str, str] | None) -> dict[str, str] | None:
        return _validate_extensions(v)


class TaskChanges(BaseModel):
    """Field changes applied to a task.

    ``contexts`` / ``projects`` replace every existing one; the ``add_*`` and
    ``remove_*`` lists adjust incrementally; ``extensions`` are merged key by
    key, leaving unmentioned keys alone.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    priority: str | None = Field(default=None, description="New priority A-Z, or empty string to remove")
    contexts: list[str] | None = Field(default=None, description="Replace all contexts with these")
    projects: list[str] | None = Field(default=None, description="Replace all projects with these")
    add_contexts: list[str] | None = Field(default=None, description="Contexts to add")
    remove_contexts: list[str] | None = Field(default=None, description="Contexts to remove")
    add_projects: list[str] | None = Field(default=None, description="Projects to add")
    remove_projects: list[str] | None = Field(default=None, description="Projects to remove")
    extensions: dict[str, str] | None = Field(default=None, description="key:value metadata to set or overwrite")

    @field_validator("priority")
    @classmethod
    def validate_priority(cls, v: str | None) -> str | None:
        return _validate_priority(v, allow_clear=True)

    @field_validator("contexts", "add_contexts", "remove_contexts")
    @classmethod
    def validate_contexts(cls, v: list[str] | None) -> list[str] | None:
        return _validate_names(v, "@")

    @field_validator("projects", "add_projects", "remove_projects")
    @classmethod
    def validate_projects(cls, v: list[str] | None) -> list[str] | None:
        return _validate_names(v, "+")

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: dict[str, str] | None) -> dict[str, str] | None:
        return _validate_extensions(v)


class TaskUpdate(TaskChanges):
    """Changes for a single task, which may also replace its description."""

    description: str | None = Field(
        default=None, description="New task text; a leading (A) or YYYY-MM-DD sets priority or creation date"
    )

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        return _validate_description(v) if v is not None else v


class BatchOperation(BaseModel):
    """One step of a batch request."""

    action: BatchAction = Field(..., description="'update', 'delete' or 'mark-complete'")
    criteria: TaskFilter | None = Field(
        default=None,
        description="Tasks matching ANY supplied field are selected; no criteria selects nothing",
    )
    updates: TaskChanges | None = Field(default=None, description="Changes for the 'update' action")


# ============================================================================
# Tool Input Models
# ============================================================================


class AddTaskInput(BaseModel):
    """Input model for adding a new task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    description: str = Field(..., description="Task text (required); may contain @contexts, +projects and key:value")
    priority: str | None = Field(default=None, description="Priority A-Z (A is highest)")
    contexts: list[str] | None = Field(default=None, description="Contexts to add (with or without '@')", max_length=20)
    projects: list[str] | None = Field(default=None, description="Projects to add (with or without '+')", max_length=20)
    extensions: dict[str, str] | None = Field(default=None, description="key:value metadata to attach")
    set_creation_date: bool = Field(default=False, description="Stamp today's date as the creation date")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        return _validate_description(v)

    @field_validator("priority")
    @classmethod
    def validate_priority(cls, v: str | None) -> str | None:
        return _validate_priority(v)

    @field_validator("contexts")
    @classmethod
    def validate_contexts(cls, v: list[str] | None) -> list[str] | None:
        return _validate_names(v, "@")

    @field_validator("projects")
    @classmethod
    def validate_projects(cls, v: list[str] | None) -> list[str] | None:
        return _validate_names(v, "+")

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: dict[str, str] | None) -> dict[str, str] | None:
        return _validate_extensions(v)


class CompleteTaskInput(BaseModel):
    """Input model for completing a task."""

    task_id: int = Field(..., description="1-based task ID to complete")


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    task_id: int = Field(..., description="1-based task ID to delete")


class UpdateTaskInput(BaseModel):
    """Input model for updating a task."""

    task_id: int = Field(..., description="1-based task ID to update")
    updates: TaskUpdate = Field(..., description="Fields to change; omitted fields are left alone")


class AddMetadataInput(BaseModel):
    """Input model for setting key:value metadata on a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: int = Field(..., description="1-based task ID")
    metadata: dict[str, str] = Field(..., description="key:value pairs to set; existing keys are overwritten")

    @field_validator("metadata")
    @classmethod
    def validate_metadata(cls, v: dict[str, str]) -> dict[str, str]:
        for key, value in v.items():
            _check_extension(key, value)
        return v


class RemoveMetadataInput(BaseModel):
    """Input model for removing metadata keys from a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: int = Field(..., description="1-based task ID")
    keys: list[str] = Field(..., description="Metadata keys to remove; unknown keys are ignored")


class ListTasksInput(BaseModel):
    """Input model for listing tasks."""

    filter: TaskFilter | None = Field(default=None, description="Optional criteria; every supplied field must match")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.RAW,
        description="Output format: 'raw' todo.txt lines, 'numbered' with IDs, or 'json'",
    )


class FilterTasksInput(BaseModel):
    """Input model for filtering tasks."""

    criteria: TaskFilter = Field(..., description="Every supplied field must match")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.RAW,
        description="Output format: 'raw' todo.txt lines, 'numbered' with IDs, or 'json'",
    )


class SearchTasksInput(BaseModel):
    """Input model for text search."""

    query: str = Field(..., description="Text to look for anywhere in the task line (case-sensitive)", min_length=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.RAW,
        description="Output format: 'raw' todo.txt lines, 'numbered' with IDs, or 'json'",
    )


class SortTasksInput(BaseModel):
    """Input model for sorting tasks."""

    by: SortKey = Field(..., description="Sort key: 'priority', 'creation_date' or 'completion_date'")
    response_format: ResponseFormat = Field(
        default=ResponseFormat.RAW,
        description="Output format: 'raw' todo.txt lines, 'numbered' with IDs, or 'json'",
    )


class BatchInput(BaseModel):
    """Input model for batch operations."""

    operations: list[BatchOperation] = Field(
        ..., description="Operations applied in order; later ones see earlier effects", min_length=1
    )
