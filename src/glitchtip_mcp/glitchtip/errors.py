"""Glitchtip API exception hierarchy."""

from __future__ import annotations


class GlitchtipAPIError(Exception):
    """Base exception for Glitchtip API errors.

    Carries the HTTP status, reason phrase and raw response body so callers
    can render the upstream failure verbatim.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        reason: str = "",
        body: str = "",
    ):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(message)


class GlitchtipAuthenticationError(GlitchtipAPIError):
    """Raised when authentication fails (401)."""

    def __init__(
        self,
        message: str = "Authentication failed. Check GLITCHTIP_API_TOKEN.",
        status_code: int | None = 401,
        reason: str = "",
        body: str = "",
    ):
        super().__init__(message, status_code=status_code, reason=reason, body=body)


class GlitchtipNotFoundError(GlitchtipAPIError):
    """Raised when a resource is not found (404)."""

    def __init__(
        self,
        message: str = "Resource not found.",
        status_code: int | None = 404,
        reason: str = "",
        body: str = "",
    ):
        super().__init__(message, status_code=status_code, reason=reason, body=body)


class GlitchtipPermissionError(GlitchtipAPIError):
    """Raised when the token lacks the required scope (403)."""

    def __init__(
        self,
        message: str = "Permission denied. Check the token scopes.",
        status_code: int | None = 403,
        reason: str = "",
        body: str = "",
    ):
        super().__init__(message, status_code=status_code, reason=reason, body=body)


class GlitchtipValidationError(GlitchtipAPIError):
    """Raised when the request is rejected as invalid (400)."""

    def __init__(
        self,
        message: str = "Validation error.",
        status_code: int | None = 400,
        reason: str = "",
        body: str = "",
    ):
        super().__init__(message, status_code=status_code, reason=reason, body=body)
