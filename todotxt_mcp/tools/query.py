"""Read-only MCP tool definitions for listing, filtering, searching and sorting tasks."""

from mcp.types import ToolAnnotations

from todotxt_mcp.models.inputs import FilterTasksInput, ListTasksInput, SearchTasksInput, SortTasksInput
from todotxt_mcp.server import mcp
from todotxt_mcp.utils.formatters import _format_tasks
from todotxt_mcp.utils.query import _filter_tasks, _search_tasks, _sort_tasks
from todotxt_mcp.utils.store import task_transaction

_READ_ONLY = ToolAnnotations(
    readOnlyHint=True,
    destructiveHint=False,
    idempotentHint=True,
    openWorldHint=False,
)


@mcp.tool(name="todotxt_list", annotations=_READ_ONLY.model_copy(update={"title": "List Tasks"}))
async def todotxt_list(params: ListTasksInput) -> str:
    """
    List tasks, optionally narrowed by priority, context, project or metadata.

    USE THIS WHEN:
    - Showing the whole todo list (no filter)
    - Getting task IDs before completing, updating or deleting (response_format="numbered")

    DO NOT USE WHEN:
    - Looking for free text → use todotxt_search instead
    - You need an ordering → use todotxt_sort instead

    FILTER: every supplied field must match (AND). Names may be given with or
    without their '@' / '+' sigil.

    Args:
        params: ListTasksInput containing an optional filter and response_format

    Returns:
        Matching tasks, one per line (or JSON)

    Examples:
        - Everything: params with no filter
        - Priority A at home: params with filter={"priority": "A", "context": "home"}
        - By metadata: params with filter={"extensions": {"due": "2025-02-01"}}
    """
    with task_transaction(persist=False) as tasks:
        matches = _filter_tasks(tasks, params.filter)
    return _format_tasks(matches, params.response_format)


@mcp.tool(name="todotxt_filter", annotations=_READ_ONLY.model_copy(update={"title": "Filter Tasks"}))
async def todotxt_filter(params: FilterTasksInput) -> str:
    """
    Return tasks matching ALL of the given criteria.

    Same matching as todotxt_list, but the criteria are required.

    Args:
        params: FilterTasksInput containing criteria and response_format

    Returns:
        Matching tasks, one per line (or JSON)

    Examples:
        - Context home: params with criteria={"context": "home"}
    """
    with task_transaction(persist=False) as tasks:
        matches = _filter_tasks(tasks, params.criteria)
    return _format_tasks(matches, params.response_format)


@mcp.tool(name="todotxt_search", annotations=_READ_ONLY.model_copy(update={"title": "Search Tasks"}))
async def todotxt_search(params: SearchTasksInput) -> str:
    """
    Find tasks whose full todo.txt line contains the query text.

    The match is case-sensitive and covers every visible part of the line,
    including priority, dates, @contexts, +projects and key:value metadata.

    Args:
        params: SearchTasksInput containing query and response_format

    Returns:
        Matching tasks, one per line (or JSON)

    Examples:
        - By word: params with query="milk"
        - By date: params with query="2025-01"
    """
    with task_transaction(persist=False) as tasks:
        matches = _search_tasks(tasks, params.query)
    return _format_tasks(matches, params.response_format)


@mcp.tool(name="todotxt_sort", annotations=_READ_ONLY.model_copy(update={"title": "Sort Tasks"}))
async def todotxt_sort(params: SortTasksInput) -> str:
    """
    Return all tasks sorted by priority, creation date or completion date.

    Tasks without the sort field come first (no priority before A; missing
    dates as 1970-01-01). Ties keep file order. The file is not reordered.

    Args:
        params: SortTasksInput containing the sort key and response_format

    Returns:
        All tasks in sorted order, one per line (or JSON)

    Examples:
        - By priority: params with by="priority"
        - Oldest first: params with by="creation_date"
    """
    with task_transaction(persist=False) as tasks:
        ordered = _sort_tasks(tasks, params.by)
    return _format_tasks(ordered, params.response_format)
