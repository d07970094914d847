from glitchtip_mcp.glitchtip.client import GlitchtipClient
from glitchtip_mcp.glitchtip.errors import (
    GlitchtipAPIError,
    GlitchtipAuthenticationError,
    GlitchtipNotFoundError,
    GlitchtipPermissionError,
    GlitchtipValidationError,
)
from glitchtip_mcp.glitchtip.shaping import shape_event, shape_issue

__all__ = [
    "GlitchtipClient",
    "GlitchtipAPIError",
    "GlitchtipAuthenticationError",
    "GlitchtipNotFoundError",
    "GlitchtipPermissionError",
    "GlitchtipValidationError",
    "shape_event",
    "shape_issue",
]
