"""Configuration settings loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class GlitchtipSettings(BaseSettings):
    """Glitchtip MCP server settings.

    All settings are loaded from environment variables prefixed with GLITCHTIP_
    (e.g. GLITCHTIP_API_TOKEN). The settings object is built once at startup
    and handed to the API client.
    """

    model_config = {"env_prefix": "GLITCHTIP_"}

    # Required
    api_token: str = Field(min_length=1)
    organization_slug: str = Field(min_length=1)

    # Optional
    api_endpoint: str = "https://app.glitchtip.com"
    timeout: int = 30
    log_level: str = "INFO"
