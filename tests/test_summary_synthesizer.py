from __future__ import annotations

from profile_snapshot.domain.entities import (
    ActivityAggregate,
    CommitRecord,
    LanguageCount,
    Profile,
    RepositoryDetail,
)
from profile_snapshot.services.summary_synthesizer import render_commits, synthesize

PROFILE = Profile(
    login="alice",
    public_repos=3,
    followers=10,
    following=1,
    created_at="2015-06-01T12:00:00Z",
)

AGGREGATE = ActivityAggregate(
    languages=(LanguageCount("Go", 2), LanguageCount("Python", 1)),
    total_stars=12,
    total_forks=3,
    total_watchers=12,
    push_events=7,
    pull_request_events=2,
    issue_events=1,
    repo_count=3,
    events_available=True,
)

DETAILS = (
    RepositoryDetail(
        name="repoA",
        description="A Go service",
        language="Go",
        stars=10,
        forks=2,
        open_issues=1,
        readme="R" * 3000,
        commits=(
            CommitRecord("Add handler\n\nLong body", "2024-03-02T00:00:00Z"),
            CommitRecord("Initial commit", "2024-03-01T00:00:00Z"),
        ),
    ),
    RepositoryDetail(name="repoB", readme="Could not fetch details"),
)


def test_sections_in_fixed_order():
    text = synthesize(PROFILE, AGGREGATE, DETAILS).summary_string

    positions = [
        text.index("USER: alice"),
        text.index("CONTRIBUTION & COMMUNITY IMPACT"),
        text.index("LANGUAGE DISTRIBUTION (across 3 repos): Go: 2 repos, Python: 1 repos"),
        text.index("ANALYZED REPOSITORIES (2 original, non-fork repos):"),
        text.index("--- REPO: repoA ---"),
        text.index("--- REPO: repoB ---"),
    ]
    assert positions == sorted(positions)


def test_missing_scalars_render_as_na():
    text = synthesize(PROFILE, AGGREGATE, DETAILS).summary_string

    assert "BIO: N/A" in text
    assert "LOCATION: N/A" in text
    assert "NAME: N/A" in text


def test_impact_metrics_are_rendered():
    text = synthesize(PROFILE, AGGREGATE, DETAILS).summary_string

    assert "TOTAL STARS EARNED: 12" in text
    assert "TOTAL FORKS: 3" in text
    assert "RECENT PUSHES: 7" in text
    assert "RECENT PULL REQUESTS: 2" in text
    assert "RECENT ISSUES: 1" in text


def test_readme_excerpt_is_truncated_at_render_time():
    snapshot = synthesize(PROFILE, AGGREGATE, DETAILS)

    assert "README (excerpt): " + "R" * 1200 + "\n" in snapshot.summary_string
    assert "R" * 1201 not in snapshot.summary_string
    assert len(snapshot.repositories[0].readme) == 3000


def test_commits_keep_upstream_order_on_one_line():
    line = render_commits(DETAILS[0].commits)

    assert line == "[2024-03-02T00:00:00Z] Add handler | [2024-03-01T00:00:00Z] Initial commit"


def test_repository_without_commits_or_language():
    text = synthesize(PROFILE, AGGREGATE, DETAILS).summary_string
    block = text[text.index("--- REPO: repoB ---"):]

    assert "LANGUAGE: N/A" in block
    assert "DESCRIPTION: No description" in block
    assert "RECENT COMMITS: No commits" in block


def test_no_languages_renders_na():
    text = synthesize(PROFILE, ActivityAggregate(), ()).summary_string

    assert "LANGUAGE DISTRIBUTION (across 0 repos): N/A" in text
    assert "ANALYZED REPOSITORIES (0 original, non-fork repos):" in text


def test_output_is_deterministic():
    first = synthesize(PROFILE, AGGREGATE, DETAILS)
    second = synthesize(PROFILE, AGGREGATE, list(DETAILS))

    assert first.summary_string == second.summary_string
    assert first == second


def test_snapshot_carries_inputs():
    snapshot = synthesize(PROFILE, AGGREGATE, DETAILS)

    assert snapshot.profile is PROFILE
    assert snapshot.aggregate is AGGREGATE
    assert snapshot.repositories == DETAILS
