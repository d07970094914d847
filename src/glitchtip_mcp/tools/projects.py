"""Project tools: list and get project details."""

from __future__ import annotations

from glitchtip_mcp.lifespan import get_glitchtip_client
from glitchtip_mcp.server import mcp
from glitchtip_mcp.tools.common import advertise_required, passthrough
from glitchtip_mcp.utils.timing import timed


@mcp.tool()
@timed
async def list_projects() -> str:
    """List all Glitchtip projects in the organization."""
    client = get_glitchtip_client()
    return await passthrough("projects", client.list_projects())


@mcp.tool()
@timed
async def get_project(project_slug: str | None = None) -> str:
    """Get details of a specific Glitchtip project.

    Args:
        project_slug: The slug of the project to retrieve.
    """
    if not project_slug:
        return "Error: project_slug is required"
    client = get_glitchtip_client()
    return await passthrough("project", client.get_project(project_slug))


advertise_required(get_project, "project_slug")
