"""Organization tools: organization details and teams."""

from __future__ import annotations

from glitchtip_mcp.lifespan import get_glitchtip_client
from glitchtip_mcp.server import mcp
from glitchtip_mcp.tools.common import passthrough
from glitchtip_mcp.utils.timing import timed


@mcp.tool()
@timed
async def get_organization() -> str:
    """Get organization details."""
    client = get_glitchtip_client()
    return await passthrough("organization", client.get_organization())


@mcp.tool()
@timed
async def list_teams() -> str:
    """List all teams in the organization."""
    client = get_glitchtip_client()
    return await passthrough("teams", client.list_teams())
