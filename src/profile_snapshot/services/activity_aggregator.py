"""Activity aggregator — language, engagement and recent-event rollups.

Rollups span the *full* repository listing, forks included.  The public
event feed is decorative context: if it cannot be fetched the counters
stay at zero and the snapshot carries on.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from profile_snapshot.domain.entities import (
    ActivityAggregate,
    LanguageCount,
    RepositorySummary,
)
from profile_snapshot.domain.exceptions import ProfileSnapshotError
from profile_snapshot.domain.ports.github_fetcher import GitHubFetcher

logger = logging.getLogger(__name__)

PUSH_EVENT = "PushEvent"
PULL_REQUEST_EVENT = "PullRequestEvent"
ISSUES_EVENT = "IssuesEvent"


def build_language_breakdown(repos: Iterable[RepositorySummary]) -> tuple[LanguageCount, ...]:
    """Histogram of declared languages, most common first.

    Ties keep first-encountered order (``sorted`` is stable and dicts
    preserve insertion order).
    """
    histogram: dict[str, int] = {}
    for repo in repos:
        if repo.language:
            histogram[repo.language] = histogram.get(repo.language, 0) + 1
    ranked = sorted(histogram.items(), key=lambda item: -item[1])
    return tuple(LanguageCount(language=lang, count=count) for lang, count in ranked)


def sum_engagement(repos: Iterable[RepositorySummary]) -> tuple[int, int, int]:
    """Return ``(stars, forks, watchers)`` summed across *repos*."""
    stars = forks = watchers = 0
    for repo in repos:
        stars += repo.stars
        forks += repo.forks
        watchers += repo.watchers
    return stars, forks, watchers


def count_events(events: Iterable[Any]) -> tuple[int, int, int]:
    """Return ``(pushes, pull_requests, issues)`` counted by event type."""
    pushes = pulls = issues = 0
    for event in events:
        if not isinstance(event, dict):
            continue
        kind = event.get("type")
        if kind == PUSH_EVENT:
            pushes += 1
        elif kind == PULL_REQUEST_EVENT:
            pulls += 1
        elif kind == ISSUES_EVENT:
            issues += 1
    return pushes, pulls, issues


class ActivityAggregator:
    """Builds an :class:`ActivityAggregate` for one user."""

    def __init__(self, fetcher: GitHubFetcher, event_limit: int = 100) -> None:
        self._fetcher = fetcher
        self._event_limit = event_limit

    async def aggregate(
        self, all_repos: Sequence[RepositorySummary], username: str
    ) -> ActivityAggregate:
        stars, forks, watchers = sum_engagement(all_repos)
        events = await self._fetch_events(username)
        pushes, pulls, issues = count_events(events or [])

        return ActivityAggregate(
            languages=build_language_breakdown(all_repos),
            total_stars=stars,
            total_forks=forks,
            total_watchers=watchers,
            push_events=pushes,
            pull_request_events=pulls,
            issue_events=issues,
            repo_count=len(all_repos),
            events_available=events is not None,
        )

    async def _fetch_events(self, username: str) -> list[Any] | None:
        """Best-effort event feed; ``None`` when unavailable."""
        try:
            data = await self._fetcher.fetch_events(username, limit=self._event_limit)
        except ProfileSnapshotError as exc:
            logger.warning("Event feed unavailable for %s — counting zero: %s", username, exc)
            return None

        if not isinstance(data, list):
            logger.warning("Unexpected event feed payload for %s — counting zero", username)
            return None
        return data
