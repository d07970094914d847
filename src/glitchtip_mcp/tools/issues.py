"""Issue tools: aggregated issue details and issue listing."""

from __future__ import annotations

import logging
from typing import Any, Awaitable

import httpx

from glitchtip_mcp.glitchtip.client import DEFAULT_LIMIT, GlitchtipClient
from glitchtip_mcp.glitchtip.errors import GlitchtipAPIError
from glitchtip_mcp.glitchtip.shaping import shape_event, shape_issue
from glitchtip_mcp.lifespan import get_glitchtip_client
from glitchtip_mcp.server import mcp
from glitchtip_mcp.tools.common import (
    advertise_required,
    error_text,
    fetch_error_text,
    passthrough,
    to_json_text,
)
from glitchtip_mcp.utils.timing import timed

logger = logging.getLogger("glitchtip_mcp")


async def _fetch_optional(request: Awaitable[Any], what: str) -> Any | None:
    """Await a best-effort request; any upstream or transport failure yields None."""
    try:
        return await request
    except (GlitchtipAPIError, httpx.HTTPError, ValueError) as e:
        logger.debug("Skipping %s: %s", what, e)
        return None


async def issue_details(client: GlitchtipClient, issue_id: str | None) -> str:
    """Build the aggregated ``{issue, latestEvent, comments}`` payload as text.

    Only the issue itself is mandatory. The latest event and the comments are
    fetched best-effort, and comments only when the issue reports any.
    """
    if not issue_id:
        return "Error: issue_id is required"

    try:
        issue = await client.get_issue(issue_id)
        result: dict[str, Any] = {
            "issue": shape_issue(issue),
            "latestEvent": None,
            "comments": [],
        }

        event = await _fetch_optional(
            client.get_latest_event(issue_id), f"latest event of issue {issue_id}"
        )
        if isinstance(event, dict):
            result["latestEvent"] = shape_event(event)

        if (issue.get("numComments") or 0) > 0:
            comments = await _fetch_optional(
                client.get_issue_comments(issue_id), f"comments of issue {issue_id}"
            )
            if comments is not None:
                result["comments"] = comments

        return to_json_text(result)
    except GlitchtipAPIError as e:
        return fetch_error_text("issue", e)
    except Exception as e:
        return error_text(e)


@mcp.tool()
@timed
async def get_issue(issue_id: str | None = None) -> str:
    """Get complete details of a specific Glitchtip issue including latest event and comments (requires event:read scope).

    The issue's project metadata, the event's SDK and package listings are
    omitted. Breadcrumbs are limited to the 10 most recent and large messenger
    payloads are truncated.

    Args:
        issue_id: The ID of the issue to retrieve.

    Returns:
        JSON text with ``issue``, ``latestEvent`` (or null) and ``comments``.
    """
    return await issue_details(get_glitchtip_client(), issue_id)


advertise_required(get_issue, "issue_id")


@mcp.tool()
@timed
async def list_issues(project_slug: str | None = None, limit: int = DEFAULT_LIMIT) -> str:
    """List issues in the organization or a specific project (requires event:read scope).

    Args:
        project_slug: Optional project slug to filter issues by project.
        limit: Maximum number of issues to return (default: 25).

    Returns:
        JSON text with the issues as returned by Glitchtip.
    """
    client = get_glitchtip_client()
    return await passthrough("issues", client.list_issues(project_slug, limit=limit))
