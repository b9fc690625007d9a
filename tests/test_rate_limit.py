from __future__ import annotations

from profile_snapshot.domain.exceptions import RateLimitError
from profile_snapshot.infrastructure.rate_limit import (
    build_rate_limit_error,
    is_quota_exhausted,
    minutes_until_reset,
)

NOW = 1_700_000_000.0


def test_quota_exhausted_only_when_remaining_is_zero():
    assert is_quota_exhausted({"x-ratelimit-remaining": "0"})
    assert not is_quota_exhausted({"x-ratelimit-remaining": "12"})
    assert not is_quota_exhausted({})


def test_minutes_until_reset_rounds_up():
    headers = {"x-ratelimit-reset": str(int(NOW) + 61)}
    assert minutes_until_reset(headers, now=NOW) == 2


def test_minutes_until_reset_exact_minute():
    headers = {"x-ratelimit-reset": str(int(NOW) + 300)}
    assert minutes_until_reset(headers, now=NOW) == 5


def test_minutes_until_reset_never_negative():
    headers = {"x-ratelimit-reset": str(int(NOW) - 500)}
    assert minutes_until_reset(headers, now=NOW) == 0


def test_minutes_until_reset_unknown():
    assert minutes_until_reset({}, now=NOW) is None
    assert minutes_until_reset({"x-ratelimit-reset": "soon"}, now=NOW) is None


def test_unauthenticated_message_suggests_token():
    err = build_rate_limit_error(
        {"x-ratelimit-reset": str(int(NOW) + 600)}, authenticated=False, now=NOW
    )
    assert isinstance(err, RateLimitError)
    assert err.wait_minutes == 10
    assert not err.authenticated
    assert "GITHUB_TOKEN" in str(err)
    assert "5000" in str(err)


def test_authenticated_message_reports_wait():
    err = build_rate_limit_error(
        {"x-ratelimit-reset": str(int(NOW) + 600)}, authenticated=True, now=NOW
    )
    assert err.authenticated
    assert "Resets in ~10 min" in str(err)
    assert err.reset_at == int(NOW) + 600


def test_unknown_wait():
    err = build_rate_limit_error({}, authenticated=True, now=NOW)
    assert err.wait_minutes is None
    assert "unknown" in str(err)
