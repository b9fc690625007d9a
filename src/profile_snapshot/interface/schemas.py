"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from profile_snapshot.domain.entities import AnalysisSnapshot


class _FromDomain(BaseModel):
    """Base for DTOs validated straight from frozen domain dataclasses."""

    model_config = ConfigDict(from_attributes=True)


class ProfileOut(_FromDomain):
    login: str
    name: str | None = None
    bio: str | None = None
    location: str | None = None
    public_repos: int
    followers: int
    following: int
    created_at: str | None = None
    html_url: str | None = None


class CommitOut(_FromDomain):
    message: str
    date: str


class RepositoryOut(_FromDomain):
    name: str
    description: str | None = None
    language: str | None = None
    stars: int
    forks: int
    watchers: int
    open_issues: int
    updated_at: str | None = None
    html_url: str | None = None
    readme: str
    commits: list[CommitOut]


class LanguageOut(_FromDomain):
    language: str
    count: int


class AggregateOut(_FromDomain):
    languages: list[LanguageOut]
    total_stars: int
    total_forks: int
    total_watchers: int
    push_events: int
    pull_request_events: int
    issue_events: int
    repo_count: int
    events_available: bool


class SnapshotResponse(_FromDomain):
    """Successful response from ``GET /snapshot/{username}``."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    profile: ProfileOut
    aggregate: AggregateOut
    repositories: list[RepositoryOut]
    summary_string: str = Field(alias="summaryString")

    @classmethod
    def from_snapshot(cls, snapshot: AnalysisSnapshot) -> SnapshotResponse:
        return cls.model_validate(snapshot)


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
