"""Rate-limit interpretation of GitHub 403 / 429 responses.

GitHub answers an exhausted quota with ``403`` and
``x-ratelimit-remaining: 0``; any other 403 is a plain "forbidden".
"""

from __future__ import annotations

import math
import time
from typing import Mapping

from profile_snapshot.domain.exceptions import RateLimitError

REMAINING_HEADER = "x-ratelimit-remaining"
RESET_HEADER = "x-ratelimit-reset"

UNAUTHENTICATED_QUOTA = 60
AUTHENTICATED_QUOTA = 5000


def is_quota_exhausted(headers: Mapping[str, str]) -> bool:
    """True when the remaining-calls header is present and equals zero."""
    return headers.get(REMAINING_HEADER, "").strip() == "0"


def reset_epoch(headers: Mapping[str, str]) -> int | None:
    """Epoch seconds at which the quota resets, or ``None`` if unknown."""
    raw = headers.get(RESET_HEADER, "").strip()
    try:
        return int(raw)
    except ValueError:
        return None


def minutes_until_reset(
    headers: Mapping[str, str], now: float | None = None
) -> int | None:
    """Whole minutes (rounded up) until the quota resets; ``None`` if unknown."""
    reset = reset_epoch(headers)
    if reset is None:
        return None
    current = time.time() if now is None else now
    return max(0, math.ceil((reset - current) / 60))


def build_rate_limit_error(
    headers: Mapping[str, str],
    *,
    authenticated: bool,
    now: float | None = None,
) -> RateLimitError:
    """Build the error surfaced to callers, including the remediation hint."""
    wait = minutes_until_reset(headers, now)
    wait_str = f"~{wait} min" if wait is not None else "an unknown time"

    if authenticated:
        message = (
            f"GitHub API rate limit exceeded. Resets in {wait_str}. "
            "Verify that the configured token is valid."
        )
    else:
        message = (
            f"GitHub API rate limit exceeded (resets in {wait_str}). "
            "Set GITHUB_TOKEN to get "
            f"{AUTHENTICATED_QUOTA} requests/hour "
            f"(currently using unauthenticated: {UNAUTHENTICATED_QUOTA}/hour)."
        )

    return RateLimitError(
        message,
        wait_minutes=wait,
        authenticated=authenticated,
        reset_at=reset_epoch(headers),
    )
