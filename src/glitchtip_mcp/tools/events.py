"""Event tools: list events of a project."""

from __future__ import annotations

from glitchtip_mcp.glitchtip.client import DEFAULT_LIMIT
from glitchtip_mcp.lifespan import get_glitchtip_client
from glitchtip_mcp.server import mcp
from glitchtip_mcp.tools.common import advertise_required, passthrough
from glitchtip_mcp.utils.timing import timed


@mcp.tool()
@timed
async def list_events(project_slug: str | None = None, limit: int = DEFAULT_LIMIT) -> str:
    """List events for a specific project (requires event:read scope).

    Args:
        project_slug: The slug of the project.
        limit: Maximum number of events to return (default: 25).

    Returns:
        JSON text with the events as returned by Glitchtip.
    """
    if not project_slug:
        return "Error: project_slug is required"
    client = get_glitchtip_client()
    return await passthrough("events", client.list_events(project_slug, limit=limit))


advertise_required(list_events, "project_slug")
