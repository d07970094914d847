"""Per-call logging for MCP tools."""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Awaitable, Callable

logger = logging.getLogger("glitchtip_mcp")


def timed(fn: Callable[..., Awaitable[str]]) -> Callable[..., Awaitable[str]]:
    """Log a tool call with its arguments, outcome and duration.

    Tools answer with text; a reply starting with ``Error`` is logged as a
    failed call even though it is delivered to the client as a normal result.
    """

    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> str:
        start = time.monotonic()
        outcome = "raised"
        try:
            text = await fn(*args, **kwargs)
            outcome = "error" if text.startswith("Error") else "ok"
            return text
        finally:
            logger.debug(
                "tool %s(%s) -> %s in %.3fs",
                fn.__name__,
                ", ".join(f"{key}={value!r}" for key, value in kwargs.items()),
                outcome,
                time.monotonic() - start,
            )

    return wrapper
