"""Logging configuration. Outputs to stderr to avoid conflict with stdio MCP transport."""

import logging
import sys

_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def setup_logger(name: str = "glitchtip_mcp", level: str = "INFO") -> logging.Logger:
    """Create the server logger, writing to stderr.

    At DEBUG the httpx request log is routed to the same handler, so every
    upstream Glitchtip request shows up next to the tool call that made it.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)

    if logger.level <= logging.DEBUG:
        httpx_logger = logging.getLogger("httpx")
        httpx_logger.setLevel(logging.DEBUG)
        httpx_logger.addHandler(handler)
    return logger
