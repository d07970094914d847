"""Glitchtip MCP server for AI agents."""

from glitchtip_mcp.glitchtip.client import GlitchtipClient
from glitchtip_mcp.server import mcp
from glitchtip_mcp.settings import GlitchtipSettings

__all__ = ["mcp", "GlitchtipSettings", "GlitchtipClient"]
