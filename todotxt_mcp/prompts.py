"""MCP prompt templates for todo.txt MCP."""

from todotxt_mcp.server import mcp


@mcp.prompt(name="suggest_context_tasks", description="Suggest new tasks for a context such as 'home' or 'phone'")
def suggest_context_tasks(context: str) -> str:
    return f"Based on the context provided, suggest new tasks:\n\nContext: {context}"


@mcp.prompt(name="suggest_project_tasks", description="Suggest new tasks for a project")
def suggest_project_tasks(project: str) -> str:
    return f"Based on the project provided, suggest new tasks:\n\nProject: {project}"
