"""Text rendering shared by all tools.

Every tool answers with a single text payload: indented JSON on success or a
one-line (plus body) error message. Errors never escape as exceptions.
"""

from __future__ import annotations

import json
from typing import Any, Awaitable

from fastmcp.tools import Tool

from glitchtip_mcp.glitchtip.errors import GlitchtipAPIError


def to_json_text(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def fetch_error_text(resource: str, error: GlitchtipAPIError) -> str:
    return f"Error fetching {resource}: {error.status_code} {error.reason}\n{error.body}"


def error_text(error: Exception) -> str:
    return f"Error: {error}"


async def passthrough(resource: str, request: Awaitable[Any]) -> str:
    """Await a single API request and render its JSON payload unmodified."""
    try:
        return to_json_text(await request)
    except GlitchtipAPIError as e:
        return fetch_error_text(resource, e)
    except Exception as e:
        return error_text(e)


def advertise_required(tool: Tool, *names: str) -> Tool:
    """Mark arguments as required in the tool's published input schema.

    The handler keeps a default for them, so a call that omits one still
    reaches the handler and gets the textual "is required" error back.
    """
    required = list(tool.parameters.get("required", []))
    required.extend(name for name in names if name not in required)
    tool.parameters["required"] = required
    return tool
