"""Get-snapshot use case — the main orchestration pipeline.

This is the single entry point for the business logic.  It depends only on
the :class:`GitHubFetcher` port and the service modules.  The interface
layer injects the concrete adapter at runtime.
"""

from __future__ import annotations

import logging

from profile_snapshot.domain.entities import AnalysisSnapshot
from profile_snapshot.domain.ports.github_fetcher import GitHubFetcher
from profile_snapshot.domain.value_objects import GitHubUsername
from profile_snapshot.services.activity_aggregator import ActivityAggregator
from profile_snapshot.services.profile_loader import ProfileLoader
from profile_snapshot.services.repo_deep_dive import (
    RepoDeepDive,
    select_deep_dive_subset,
)
from profile_snapshot.services.summary_synthesizer import synthesize

logger = logging.getLogger(__name__)


class GetSnapshotUseCase:
    """Orchestrates the username → snapshot pipeline.

    Parameters
    ----------
    fetcher:
        Adapter that talks to the GitHub REST API.
    repo_list_limit:
        How many recently-updated repositories to list.
    deep_dive_limit:
        How many non-fork repositories get README / commit retrieval.
    commit_limit:
        Recent commits fetched per deep-dived repository.
    event_limit:
        Public events inspected for activity counts.
    readme_storage_chars:
        README characters kept per repository.
    readme_excerpt_chars:
        README characters rendered into the summary text.
    """

    def __init__(
        self,
        fetcher: GitHubFetcher,
        repo_list_limit: int = 30,
        deep_dive_limit: int = 10,
        commit_limit: int = 5,
        event_limit: int = 100,
        readme_storage_chars: int = 3000,
        readme_excerpt_chars: int = 1200,
    ) -> None:
        self._loader = ProfileLoader(fetcher, repo_limit=repo_list_limit)
        self._aggregator = ActivityAggregator(fetcher, event_limit=event_limit)
        self._deep_dive = RepoDeepDive(
            fetcher, readme_chars=readme_storage_chars, commit_limit=commit_limit
        )
        self._deep_dive_limit = deep_dive_limit
        self._excerpt_chars = readme_excerpt_chars

    async def execute(self, username: str) -> AnalysisSnapshot:
        """Run the full pipeline and return the snapshot.

        Loader failures (not found, rate limited, upstream, invalid shape)
        propagate; nothing partial is returned.
        """
        login = str(GitHubUsername.from_string(username))
        logger.info("Building snapshot for %s", login)

        # 1. Profile + repository listing (fatal on failure)
        profile, all_repos = await self._loader.load(login)

        # 2. Rollups over the full listing (+ optional event feed)
        aggregate = await self._aggregator.aggregate(all_repos, login)

        # 3. Deep-dive on the most recent non-fork repositories
        top_repos = select_deep_dive_subset(all_repos, limit=self._deep_dive_limit)
        details = await self._deep_dive.run(top_repos, login)

        # 4. Synthesize
        snapshot = synthesize(profile, aggregate, details, self._excerpt_chars)
        logger.info(
            "Snapshot for %s: %d repos listed, %d analyzed",
            login, len(all_repos), len(details),
        )
        return snapshot
