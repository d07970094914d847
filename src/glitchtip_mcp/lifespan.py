"""Server lifespan: creates GlitchtipClient on startup, closes on shutdown."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from glitchtip_mcp.glitchtip.client import GlitchtipClient
from glitchtip_mcp.logging.logger import setup_logger
from glitchtip_mcp.settings import GlitchtipSettings

_client: GlitchtipClient | None = None
_settings: GlitchtipSettings | None = None


def load_settings() -> GlitchtipSettings:
    """Read and validate settings from the environment.

    Raises pydantic.ValidationError when a required variable is missing.
    """
    global _settings
    _settings = GlitchtipSettings()
    return _settings


def get_glitchtip_client() -> GlitchtipClient:
    """Return the active GlitchtipClient. Only valid during server lifespan."""
    if _client is None:
        raise RuntimeError("GlitchtipClient not initialized. Is the server running?")
    return _client


def get_settings() -> GlitchtipSettings:
    """Return the loaded settings. Only valid during server lifespan."""
    if _settings is None:
        raise RuntimeError("Settings not loaded. Is the server running?")
    return _settings


@asynccontextmanager
async def lifespan(server) -> AsyncIterator[None]:  # noqa: ARG001
    """Async context manager that manages the GlitchtipClient lifecycle."""
    global _client, _settings

    settings = _settings if _settings is not None else load_settings()
    logger = setup_logger(level=settings.log_level)
    logger.info(
        "Starting glitchtip-mcp server (endpoint=%s, organization=%s)",
        settings.api_endpoint,
        settings.organization_slug,
    )

    _client = GlitchtipClient(settings)

    try:
        yield
    finally:
        logger.info("Shutting down glitchtip-mcp server")
        await _client.close()
        _client = None
        _settings = None
