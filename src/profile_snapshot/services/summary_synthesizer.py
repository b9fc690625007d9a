"""Summary synthesizer — renders the snapshot text blob.

Pure function of its inputs: timestamps are echoed verbatim and nothing
reads the clock, so identical inputs give byte-identical output.
"""

from __future__ import annotations

from typing import Sequence

from profile_snapshot.domain.entities import (
    ActivityAggregate,
    AnalysisSnapshot,
    CommitRecord,
    Profile,
    RepositoryDetail,
)

NOT_AVAILABLE = "N/A"
NO_DESCRIPTION = "No description"
NO_COMMITS = "No commits"


def synthesize(
    profile: Profile,
    aggregate: ActivityAggregate,
    details: Sequence[RepositoryDetail],
    readme_excerpt_chars: int = 1200,
) -> AnalysisSnapshot:
    """Combine profile, aggregate and per-repo detail into the final snapshot."""
    sections = [
        _profile_section(profile),
        _impact_section(aggregate),
        _language_section(aggregate),
        _repositories_section(details, readme_excerpt_chars),
    ]
    return AnalysisSnapshot(
        profile=profile,
        aggregate=aggregate,
        repositories=tuple(details),
        summary_string="\n\n".join(sections) + "\n",
    )


# ── Sections ────────────────────────────────────────────────────────────────


def _profile_section(profile: Profile) -> str:
    return "\n".join(
        [
            f"USER: {profile.login}",
            f"NAME: {_or_na(profile.name)}",
            f"BIO: {_or_na(profile.bio)}",
            f"LOCATION: {_or_na(profile.location)}",
            f"PUBLIC REPOS: {profile.public_repos}",
            f"FOLLOWERS: {profile.followers}",
            f"FOLLOWING: {profile.following}",
            f"ACCOUNT CREATED: {_or_na(profile.created_at)}",
        ]
    )


def _impact_section(aggregate: ActivityAggregate) -> str:
    return "\n".join(
        [
            "CONTRIBUTION & COMMUNITY IMPACT (positive signals):",
            f"TOTAL STARS EARNED: {aggregate.total_stars}",
            f"TOTAL FORKS: {aggregate.total_forks}",
            f"TOTAL WATCHERS: {aggregate.total_watchers}",
            f"RECENT PUSHES: {aggregate.push_events}",
            f"RECENT PULL REQUESTS: {aggregate.pull_request_events}",
            f"RECENT ISSUES: {aggregate.issue_events}",
        ]
    )


def _language_section(aggregate: ActivityAggregate) -> str:
    breakdown = ", ".join(f"{lc.language}: {lc.count} repos" for lc in aggregate.languages)
    return (
        f"LANGUAGE DISTRIBUTION (across {aggregate.repo_count} repos): "
        f"{breakdown or NOT_AVAILABLE}"
    )


def _repositories_section(details: Sequence[RepositoryDetail], excerpt_chars: int) -> str:
    header = f"ANALYZED REPOSITORIES ({len(details)} original, non-fork repos):"
    blocks = [_repository_block(d, excerpt_chars) for d in details]
    return "\n\n".join([header, *blocks])


def _repository_block(detail: RepositoryDetail, excerpt_chars: int) -> str:
    return "\n".join(
        [
            f"--- REPO: {detail.name} ---",
            f"LANGUAGE: {_or_na(detail.language)}",
            f"STARS: {detail.stars}",
            f"FORKS: {detail.forks}",
            f"OPEN ISSUES: {detail.open_issues}",
            f"DESCRIPTION: {detail.description or NO_DESCRIPTION}",
            f"README (excerpt): {detail.readme[:excerpt_chars]}",
            f"RECENT COMMITS: {render_commits(detail.commits)}",
        ]
    )


def render_commits(commits: Sequence[CommitRecord]) -> str:
    """``[date] message`` entries on one line, pipe-joined, upstream order kept.

    Only the first line (subject) of each commit message is rendered; message
    bodies are dropped.  The full text stays available on
    :attr:`CommitRecord.message`.
    """
    if not commits:
        return NO_COMMITS
    return " | ".join(f"[{c.date}] {_first_line(c.message)}" for c in commits)


def _first_line(message: str) -> str:
    return message.strip().splitlines()[0] if message.strip() else ""


def _or_na(value: str | None) -> str:
    return value if value else NOT_AVAILABLE
