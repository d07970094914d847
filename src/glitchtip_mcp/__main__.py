"""Entry point for running the Glitchtip MCP server: python -m glitchtip_mcp"""

import sys

from pydantic import ValidationError

import glitchtip_mcp.tools  # noqa: F401  registers all tools with the server
from glitchtip_mcp.lifespan import load_settings
from glitchtip_mcp.server import mcp


def main() -> None:
    try:
        load_settings()
    except ValidationError as e:
        sys.exit(
            "glitchtip-mcp: invalid configuration. "
            "GLITCHTIP_API_TOKEN and GLITCHTIP_ORGANIZATION_SLUG are required.\n"
            f"{e}"
        )
    mcp.run()


if __name__ == "__main__":
    main()
