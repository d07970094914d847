"""Shared pytest configuration."""

import pytest

from glitchtip_mcp.settings import GlitchtipSettings

BASE_URL = "https://glitchtip.test"
ORG = "acme"


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless explicitly requested."""
    if not config.getoption("-m", default=None) or "integration" not in config.getoption("-m", default=""):
        skip_integration = pytest.mark.skip(reason="use -m integration to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


@pytest.fixture
def settings():
    return GlitchtipSettings(api_token="tok", organization_slug=ORG, api_endpoint=BASE_URL)


@pytest.fixture
def glitchtip_env(monkeypatch):
    """Environment the server lifespan reads its settings from."""
    monkeypatch.setenv("GLITCHTIP_API_TOKEN", "tok")
    monkeypatch.setenv("GLITCHTIP_ORGANIZATION_SLUG", ORG)
    monkeypatch.setenv("GLITCHTIP_API_ENDPOINT", BASE_URL)
