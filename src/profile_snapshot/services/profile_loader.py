"""Profile & repository loader — the two upfront calls of every snapshot.

Any failure here aborts the snapshot: there is nothing to aggregate
without a profile and a repository listing.
"""

from __future__ import annotations

import logging
from typing import Any

from profile_snapshot.domain.entities import Profile, RepositorySummary
from profile_snapshot.domain.exceptions import InvalidResponseError, NotFoundError
from profile_snapshot.domain.ports.github_fetcher import GitHubFetcher

logger = logging.getLogger(__name__)


class ProfileLoader:
    """Fetches the user profile, then the most recently updated repositories."""

    def __init__(self, fetcher: GitHubFetcher, repo_limit: int = 30) -> None:
        self._fetcher = fetcher
        self._repo_limit = repo_limit

    async def load(self, username: str) -> tuple[Profile, list[RepositorySummary]]:
        try:
            user = await self._fetcher.fetch_user(username)
        except NotFoundError as exc:
            raise NotFoundError(f"User '{username}' not found on GitHub.") from exc

        if not isinstance(user, dict):
            raise InvalidResponseError(
                f"Unexpected profile payload for '{username}': {type(user).__name__}"
            )
        profile = to_profile(user, username)

        repos = await self._fetcher.fetch_repos(username, limit=self._repo_limit)
        if not isinstance(repos, list):
            raise InvalidResponseError(
                f"Could not retrieve repository list for '{username}'."
            )

        summaries = [to_repository_summary(r) for r in repos if isinstance(r, dict)]
        logger.info("Loaded profile %s with %d repositories", profile.login, len(summaries))
        return profile, summaries


# ── Projections ─────────────────────────────────────────────────────────────


def to_profile(data: dict[str, Any], fallback_login: str) -> Profile:
    """Project a ``GET /users/{u}`` payload onto :class:`Profile`."""
    return Profile(
        login=data.get("login") or fallback_login,
        name=data.get("name"),
        bio=data.get("bio"),
        location=data.get("location"),
        public_repos=_int(data.get("public_repos")),
        followers=_int(data.get("followers")),
        following=_int(data.get("following")),
        created_at=data.get("created_at"),
        html_url=data.get("html_url"),
    )


def to_repository_summary(data: dict[str, Any]) -> RepositorySummary:
    """Project one entry of ``GET /users/{u}/repos`` onto :class:`RepositorySummary`."""
    return RepositorySummary(
        name=data.get("name") or "unknown",
        description=data.get("description"),
        language=data.get("language"),
        stars=_int(data.get("stargazers_count")),
        forks=_int(data.get("forks_count")),
        watchers=_int(data.get("watchers_count")),
        open_issues=_int(data.get("open_issues_count")),
        fork=bool(data.get("fork", False)),
        updated_at=data.get("updated_at"),
        html_url=data.get("html_url"),
    )


def _int(value: Any) -> int:
    return value if isinstance(value, int) and value >= 0 else 0
