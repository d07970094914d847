"""Importing this package registers every tool with the FastMCP server."""

from glitchtip_mcp.tools import events, issues, organization, projects

__all__ = ["events", "issues", "organization", "projects"]
