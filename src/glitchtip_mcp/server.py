"""FastMCP server instance."""

from fastmcp import FastMCP

from glitchtip_mcp.lifespan import lifespan

mcp = FastMCP("glitchtip-mcp", lifespan=lifespan)
