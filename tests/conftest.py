from __future__ import annotations

from typing import AsyncIterator

import httpx
import pytest

from factories import FakeGitHub
from profile_snapshot.infrastructure.config import get_settings
from profile_snapshot.infrastructure.github_rest_adapter import GitHubRestAdapter


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for name in ("GITHUB_TOKEN", "GH_TOKEN", "GITHUB_PAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)  # no stray .env
    get_settings.cache_clear()


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
async def http_client(github: FakeGitHub) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(transport=github.transport) as client:
        yield client


@pytest.fixture
def adapter(http_client: httpx.AsyncClient) -> GitHubRestAdapter:
    return GitHubRestAdapter(client=http_client)
