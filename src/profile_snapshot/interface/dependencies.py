"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from profile_snapshot.infrastructure.config import get_settings
from profile_snapshot.interface.sync_client import build_use_case
from profile_snapshot.services.get_snapshot import GetSnapshotUseCase

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds)
    )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_use_case() -> GetSnapshotUseCase:
    """Build the use case with the shared HTTP client injected."""
    assert _http_client is not None, "startup() was not called"
    return build_use_case(_http_client, get_settings())
