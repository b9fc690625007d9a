"""Repository deep-dive fan-out — README and recent commits per repository.

Two recovery layers keep the output length equal to the input length:

* the *inner* guard turns a classified fetch failure of one sub-fetch into
  a sentinel (``NO_README`` / no commits) while the sibling sub-fetch
  still contributes its data;
* the *outer* guard turns anything else escaping a repository task into a
  fully-sentineled detail (``DETAILS_UNAVAILABLE``).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, Sequence

from profile_snapshot.domain.entities import (
    CommitRecord,
    RepositoryDetail,
    RepositorySummary,
)
from profile_snapshot.domain.exceptions import ProfileSnapshotError
from profile_snapshot.domain.ports.github_fetcher import GitHubFetcher

logger = logging.getLogger(__name__)

NO_README = "No README found"
DETAILS_UNAVAILABLE = "Could not fetch details"


def select_deep_dive_subset(
    repos: Iterable[RepositorySummary], limit: int = 10
) -> list[RepositorySummary]:
    """The first *limit* non-fork repositories, in listing (recency) order."""
    return [r for r in repos if not r.fork][:limit]


def to_commit_record(item: dict[str, Any]) -> CommitRecord:
    """Project a commit-list entry down to message and author date.

    Missing fields project to empty strings.
    """
    commit = item.get("commit")
    if not isinstance(commit, dict):
        commit = {}
    author = commit.get("author")
    if not isinstance(author, dict):
        author = {}
    return CommitRecord(
        message=commit.get("message") or "",
        date=author.get("date") or "",
    )


class RepoDeepDive:
    """Concurrently fetches README and commits for each repository."""

    def __init__(
        self,
        fetcher: GitHubFetcher,
        readme_chars: int = 3000,
        commit_limit: int = 5,
    ) -> None:
        self._fetcher = fetcher
        self._readme_chars = readme_chars
        self._commit_limit = commit_limit

    async def run(
        self, top_repos: Sequence[RepositorySummary], username: str
    ) -> list[RepositoryDetail]:
        """Return one detail per input repository, in input order."""
        results = await asyncio.gather(
            *(self._detail(repo, username) for repo in top_repos),
            return_exceptions=True,
        )

        details: list[RepositoryDetail] = []
        for repo, result in zip(top_repos, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.warning(
                    "Deep-dive of %s/%s failed — using placeholder: %r",
                    username, repo.name, result,
                )
                details.append(RepositoryDetail.from_summary(repo, DETAILS_UNAVAILABLE))
            else:
                details.append(result)

        logger.info("Deep-dived %d repositories for %s", len(details), username)
        return details

    # ── Per-repository task ─────────────────────────────────────────────

    async def _detail(self, repo: RepositorySummary, username: str) -> RepositoryDetail:
        readme, commits = await asyncio.gather(
            self._readme(username, repo.name),
            self._commits(username, repo.name),
        )
        return RepositoryDetail.from_summary(
            repo,
            readme=readme[: self._readme_chars],
            commits=commits,
        )

    # ── Sub-fetches (inner guard) ───────────────────────────────────────

    async def _readme(self, owner: str, repo: str) -> str:
        try:
            return await self._fetcher.fetch_readme(owner, repo)
        except ProfileSnapshotError as exc:
            logger.debug("No README for %s/%s: %s", owner, repo, exc)
            return NO_README

    async def _commits(self, owner: str, repo: str) -> tuple[CommitRecord, ...]:
        try:
            data = await self._fetcher.fetch_commits(owner, repo, limit=self._commit_limit)
        except ProfileSnapshotError as exc:
            logger.debug("No commits for %s/%s: %s", owner, repo, exc)
            return ()

        if not isinstance(data, list):
            return ()
        return tuple(
            to_commit_record(item)
            for item in data[: self._commit_limit]
            if isinstance(item, dict)
        )
