"""Async Glitchtip REST API client using httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from glitchtip_mcp.glitchtip.errors import (
    GlitchtipAPIError,
    GlitchtipAuthenticationError,
    GlitchtipNotFoundError,
    GlitchtipPermissionError,
    GlitchtipValidationError,
)
from glitchtip_mcp.settings import GlitchtipSettings

logger = logging.getLogger("glitchtip_mcp")

_ERROR_MAP: dict[int, type[GlitchtipAPIError]] = {
    400: GlitchtipValidationError,
    401: GlitchtipAuthenticationError,
    403: GlitchtipPermissionError,
    404: GlitchtipNotFoundError,
}

DEFAULT_LIMIT = 25


class GlitchtipClient:
    """Async wrapper around the Glitchtip (Sentry-compatible) REST API.

    Every request carries the bearer token and asks for JSON. Organization
    scoped endpoints use the organization slug from the settings.
    """

    def __init__(self, settings: GlitchtipSettings):
        self._base_url = settings.api_endpoint.rstrip("/")
        self._organization = settings.organization_slug
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "Authorization": f"Bearer {settings.api_token}",
                "Accept": "application/json",
            },
            timeout=settings.timeout,
            follow_redirects=True,
        )

    @property
    def organization(self) -> str:
        return self._organization

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    async def _get(self, path: str, **params: Any) -> Any:
        response = await self._client.get(path, params=params)
        logger.debug("GET %s -> %d", path, response.status_code)
        if not response.is_success:
            error_cls = _ERROR_MAP.get(response.status_code, GlitchtipAPIError)
            raise error_cls(
                f"Glitchtip API GET {path} failed ({response.status_code})",
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=response.text,
            )
        return response.json()

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------

    async def get_issue(self, issue_id: str) -> dict[str, Any]:
        return await self._get(f"/api/0/issues/{issue_id}/")

    async def get_latest_event(self, issue_id: str) -> dict[str, Any]:
        return await self._get(f"/api/0/issues/{issue_id}/events/latest/")

    async def get_issue_comments(self, issue_id: str) -> list[dict[str, Any]]:
        return await self._get(f"/api/0/issues/{issue_id}/comments/")

    async def list_issues(
        self, project_slug: str | None = None, limit: int = DEFAULT_LIMIT
    ) -> list[dict[str, Any]]:
        if project_slug:
            path = f"/api/0/projects/{self._organization}/{project_slug}/issues/"
        else:
            path = f"/api/0/organizations/{self._organization}/issues/"
        return await self._get(path, limit=limit)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    async def list_events(
        self, project_slug: str, limit: int = DEFAULT_LIMIT
    ) -> list[dict[str, Any]]:
        return await self._get(
            f"/api/0/projects/{self._organization}/{project_slug}/events/", limit=limit
        )

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    async def list_projects(self) -> list[dict[str, Any]]:
        return await self._get(f"/api/0/organizations/{self._organization}/projects/")

    async def get_project(self, project_slug: str) -> dict[str, Any]:
        return await self._get(f"/api/0/projects/{self._organization}/{project_slug}/")

    # ------------------------------------------------------------------
    # Organization
    # ------------------------------------------------------------------

    async def get_organization(self) -> dict[str, Any]:
        return await self._get(f"/api/0/organizations/{self._organization}/")

    async def list_teams(self) -> list[dict[str, Any]]:
        return await self._get(f"/api/0/organizations/{self._organization}/teams/")
