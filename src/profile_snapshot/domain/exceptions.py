"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations


class ProfileSnapshotError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidUsernameError(ProfileSnapshotError):
    """The supplied username is not a syntactically valid GitHub login."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class NotFoundError(ProfileSnapshotError):
    """The requested GitHub resource does not exist (404)."""


class RateLimitError(ProfileSnapshotError):
    """GitHub API quota exhausted (403 with remaining=0, or 429).

    ``wait_minutes`` is ``None`` when the reset time is unknown.
    """

    def __init__(
        self,
        message: str,
        *,
        wait_minutes: int | None = None,
        authenticated: bool = False,
        reset_at: int | None = None,
    ) -> None:
        super().__init__(message)
        self.wait_minutes = wait_minutes
        self.authenticated = authenticated
        self.reset_at = reset_at


class UpstreamError(ProfileSnapshotError):
    """Any other non-2xx response or a transport failure (no status code)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidResponseError(ProfileSnapshotError):
    """GitHub answered 2xx but the payload has an unexpected shape."""
