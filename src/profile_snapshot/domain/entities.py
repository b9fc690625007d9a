"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Profile:
    """Account-level identity and counters of a GitHub user."""

    login: str
    name: str | None = None
    bio: str | None = None
    location: str | None = None
    public_repos: int = 0
    followers: int = 0
    following: int = 0
    created_at: str | None = None
    html_url: str | None = None


@dataclass(frozen=True, slots=True)
class RepositorySummary:
    """One entry of the user's repository listing."""

    name: str
    description: str | None = None
    language: str | None = None
    stars: int = 0
    forks: int = 0
    watchers: int = 0
    open_issues: int = 0
    fork: bool = False
    updated_at: str | None = None
    html_url: str | None = None


@dataclass(frozen=True, slots=True)
class CommitRecord:
    """A commit reduced to what downstream consumers read."""

    message: str
    date: str


@dataclass(frozen=True, slots=True)
class RepositoryDetail:
    """A deep-dived repository: listing fields plus README and recent commits."""

    name: str
    description: str | None = None
    language: str | None = None
    stars: int = 0
    forks: int = 0
    watchers: int = 0
    open_issues: int = 0
    fork: bool = False
    updated_at: str | None = None
    html_url: str | None = None
    readme: str = ""
    commits: tuple[CommitRecord, ...] = ()

    @classmethod
    def from_summary(
        cls,
        summary: RepositorySummary,
        readme: str,
        commits: tuple[CommitRecord, ...] = (),
    ) -> RepositoryDetail:
        return cls(
            name=summary.name,
            description=summary.description,
            language=summary.language,
            stars=summary.stars,
            forks=summary.forks,
            watchers=summary.watchers,
            open_issues=summary.open_issues,
            fork=summary.fork,
            updated_at=summary.updated_at,
            html_url=summary.html_url,
            readme=readme,
            commits=commits,
        )


@dataclass(frozen=True, slots=True)
class LanguageCount:
    """Number of listed repositories declaring a primary language."""

    language: str
    count: int


@dataclass(frozen=True, slots=True)
class ActivityAggregate:
    """Rollups over the full repository listing and the public event feed."""

    languages: tuple[LanguageCount, ...] = ()
    total_stars: int = 0
    total_forks: int = 0
    total_watchers: int = 0
    push_events: int = 0
    pull_request_events: int = 0
    issue_events: int = 0
    repo_count: int = 0
    events_available: bool = False


@dataclass(frozen=True, slots=True)
class AnalysisSnapshot:
    """The final artifact handed to external collaborators."""

    profile: Profile
    aggregate: ActivityAggregate
    repositories: tuple[RepositoryDetail, ...] = field(default_factory=tuple)
    summary_string: str = ""
