"""Enums for todo.txt MCP."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for read tool responses."""

    RAW = "raw"  # todo.txt lines, exactly as stored (default)
    NUMBERED = "numbered"  # "<id>: <line>" for chaining into id-based tools
    JSON = "json"  # Machine-readable with ids and extracted tokens


class SortKey(str, Enum):
    """Fields tasks can be sorted by."""

    PRIORITY = "priority"
    CREATION_DATE = "creation_date"
    COMPLETION_DATE = "completion_date"


class BatchAction(str, Enum):
    """Actions available inside a batch operation."""

    UPDATE = "update"
    DELETE = "delete"
    MARK_COMPLETE = "mark-complete"
