"""Synchronous facade — one call, one snapshot."""

from __future__ import annotations

import asyncio

import httpx

from profile_snapshot.domain.entities import AnalysisSnapshot
from profile_snapshot.infrastructure.config import Settings, get_settings
from profile_snapshot.infrastructure.github_rest_adapter import GitHubRestAdapter
from profile_snapshot.services.get_snapshot import GetSnapshotUseCase


def build_use_case(client: httpx.AsyncClient, settings: Settings) -> GetSnapshotUseCase:
    """Wire the use case with a GitHub adapter bound to *client*."""
    adapter = GitHubRestAdapter(
        client=client,
        token=settings.token,
        api_url=settings.github_api_url,
    )
    return GetSnapshotUseCase(
        fetcher=adapter,
        repo_list_limit=settings.repo_list_limit,
        deep_dive_limit=settings.deep_dive_limit,
        commit_limit=settings.commit_limit,
        event_limit=settings.event_limit,
        readme_storage_chars=settings.readme_storage_chars,
        readme_excerpt_chars=settings.readme_excerpt_chars,
    )


async def fetch_snapshot(
    username: str,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AnalysisSnapshot:
    """Build a snapshot with a short-lived HTTP client."""
    settings = settings or get_settings()
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        transport=transport,
    ) as client:
        return await build_use_case(client, settings).execute(username)


def get_snapshot(
    username: str,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AnalysisSnapshot:
    """Blocking wrapper around :func:`fetch_snapshot`.

    Must not be called from inside a running event loop.
    """
    return asyncio.run(fetch_snapshot(username, settings, transport))
