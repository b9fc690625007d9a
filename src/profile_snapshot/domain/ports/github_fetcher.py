"""Port: GitHub fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Any, Protocol


class GitHubFetcher(Protocol):
    """Abstract contract for fetching a user's public GitHub data.

    Implementations raise :class:`~profile_snapshot.domain.exceptions.ProfileSnapshotError`
    subclasses for every classified failure.
    """

    @property
    def authenticated(self) -> bool:
        """Whether requests carry an access token."""
        ...

    async def fetch_user(self, username: str) -> Any:
        """Return the decoded user profile payload."""
        ...

    async def fetch_repos(self, username: str, limit: int = 30) -> Any:
        """Return the decoded repository listing, most recently updated first."""
        ...

    async def fetch_events(self, username: str, limit: int = 100) -> Any:
        """Return the decoded public event feed."""
        ...

    async def fetch_readme(self, owner: str, repo: str) -> str:
        """Return the raw README text of a repository."""
        ...

    async def fetch_commits(self, owner: str, repo: str, limit: int = 5) -> Any:
        """Return the decoded commit list, newest first."""
        ...
