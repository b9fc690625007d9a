"""GitHub REST API adapter — implements the GitHubFetcher port."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from profile_snapshot.domain.exceptions import (
    InvalidResponseError,
    NotFoundError,
    UpstreamError,
)
from profile_snapshot.infrastructure.rate_limit import (
    build_rate_limit_error,
    is_quota_exhausted,
)

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_JSON_MEDIA_TYPE = "application/vnd.github.v3+json"
_RAW_MEDIA_TYPE = "application/vnd.github.raw"
_USER_AGENT = "profile-snapshot/1.0"


class GitHubRestAdapter:
    """Concrete GitHubFetcher backed by the GitHub v3 REST API.

    The token is injected at construction time; nothing here reads the
    environment.  The adapter holds no per-request state, so one instance
    can serve many concurrent calls.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        api_url: str = _GITHUB_API,
    ) -> None:
        self._client = client
        self._api_url = api_url.rstrip("/")
        self._token = token or None
        self._api_headers: dict[str, str] = {
            "Accept": _JSON_MEDIA_TYPE,
            "User-Agent": _USER_AGENT,
            "Cache-Control": "no-cache",
        }
        if self._token:
            self._api_headers["Authorization"] = f"Bearer {self._token}"

    @property
    def authenticated(self) -> bool:
        return self._token is not None

    async def fetch_user(self, username: str) -> Any:
        """GET /users/{username} → profile JSON."""
        resp = await self.fetch(f"/users/{username}")
        return _decode_json(resp)

    async def fetch_repos(self, username: str, limit: int = 30) -> Any:
        """GET /users/{username}/repos?sort=updated → repository list JSON."""
        resp = await self.fetch(
            f"/users/{username}/repos",
            params={"sort": "updated", "per_page": str(limit)},
        )
        return _decode_json(resp)

    async def fetch_events(self, username: str, limit: int = 100) -> Any:
        """GET /users/{username}/events/public → event list JSON."""
        resp = await self.fetch(
            f"/users/{username}/events/public",
            params={"per_page": str(limit)},
        )
        return _decode_json(resp)

    async def fetch_readme(self, owner: str, repo: str) -> str:
        """GET /repos/{owner}/{repo}/readme as raw text."""
        resp = await self.fetch(f"/repos/{owner}/{repo}/readme", accept=_RAW_MEDIA_TYPE)
        return resp.text

    async def fetch_commits(self, owner: str, repo: str, limit: int = 5) -> Any:
        """GET /repos/{owner}/{repo}/commits?per_page={limit} → commit list JSON."""
        resp = await self.fetch(
            f"/repos/{owner}/{repo}/commits",
            params={"per_page": str(limit)},
        )
        return _decode_json(resp)

    async def fetch(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
        accept: str | None = None,
    ) -> httpx.Response:
        """Perform a GitHub API GET request with error translation.

        2xx responses are returned undecoded.
        """
        url = f"{self._api_url}{endpoint}"
        headers = dict(self._api_headers)
        if accept:
            headers["Accept"] = accept

        try:
            resp = await self._client.get(url, headers=headers, params=params)
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Network error fetching {url}: {exc}") from exc

        if resp.is_success:
            return resp

        if resp.status_code == 404:
            raise NotFoundError(f"GitHub resource not found: {endpoint}")

        if resp.status_code == 403:
            if is_quota_exhausted(resp.headers):
                raise build_rate_limit_error(
                    resp.headers, authenticated=self.authenticated
                )
            raise UpstreamError(
                f"Access denied by GitHub for {endpoint} (HTTP 403).",
                status_code=403,
            )

        if resp.status_code == 429:
            raise build_rate_limit_error(resp.headers, authenticated=self.authenticated)

        raise UpstreamError(
            f"GitHub API returned HTTP {resp.status_code} for {url}",
            status_code=resp.status_code,
        )


def _decode_json(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError as exc:
        raise InvalidResponseError(
            f"GitHub returned a non-JSON body for {resp.request.url}"
        ) from exc
