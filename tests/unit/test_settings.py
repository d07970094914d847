"""Tests for environment-driven settings and startup validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from glitchtip_mcp import __main__ as entrypoint
from glitchtip_mcp.settings import GlitchtipSettings


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "GLITCHTIP_API_TOKEN",
        "GLITCHTIP_ORGANIZATION_SLUG",
        "GLITCHTIP_API_ENDPOINT",
        "GLITCHTIP_TIMEOUT",
        "GLITCHTIP_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_loads_from_environment(clean_env):
    clean_env.setenv("GLITCHTIP_API_TOKEN", "tok")
    clean_env.setenv("GLITCHTIP_ORGANIZATION_SLUG", "acme")

    settings = GlitchtipSettings()

    assert settings.api_token == "tok"
    assert settings.organization_slug == "acme"
    assert settings.api_endpoint == "https://app.glitchtip.com"
    assert settings.timeout == 30
    assert settings.log_level == "INFO"


def test_endpoint_override(clean_env):
    clean_env.setenv("GLITCHTIP_API_TOKEN", "tok")
    clean_env.setenv("GLITCHTIP_ORGANIZATION_SLUG", "acme")
    clean_env.setenv("GLITCHTIP_API_ENDPOINT", "https://errors.example.com")

    assert GlitchtipSettings().api_endpoint == "https://errors.example.com"


def test_missing_token(clean_env):
    clean_env.setenv("GLITCHTIP_ORGANIZATION_SLUG", "acme")
    with pytest.raises(ValidationError, match="api_token"):
        GlitchtipSettings()


def test_missing_organization(clean_env):
    clean_env.setenv("GLITCHTIP_API_TOKEN", "tok")
    with pytest.raises(ValidationError, match="organization_slug"):
        GlitchtipSettings()


def test_empty_token_rejected(clean_env):
    clean_env.setenv("GLITCHTIP_API_TOKEN", "")
    clean_env.setenv("GLITCHTIP_ORGANIZATION_SLUG", "acme")
    with pytest.raises(ValidationError):
        GlitchtipSettings()


def test_main_exits_before_serving_without_config(clean_env, monkeypatch):
    started = []
    monkeypatch.setattr(entrypoint.mcp, "run", lambda *a, **kw: started.append(True))

    with pytest.raises(SystemExit) as excinfo:
        entrypoint.main()

    assert "GLITCHTIP_API_TOKEN" in str(excinfo.value.code)
    assert started == []
