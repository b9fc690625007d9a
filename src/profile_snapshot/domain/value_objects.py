"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from profile_snapshot.domain.exceptions import InvalidUsernameError

# Older GitHub logins may contain consecutive or trailing hyphens.
_USERNAME_RE = re.compile(r"^[A-Za-z0-9-]{1,39}$")


@dataclass(frozen=True, slots=True)
class GitHubUsername:
    """Validated GitHub login.

    Accepts a bare login such as ``octocat`` (surrounding whitespace and a
    leading ``@`` are stripped).  Rejects anything that could not be a
    GitHub account name, so no request is issued for garbage input.
    """

    value: str

    @classmethod
    def from_string(cls, raw: str) -> GitHubUsername:
        """Parse and validate a raw username string."""
        login = raw.strip().lstrip("@")
        if not _USERNAME_RE.match(login):
            raise InvalidUsernameError(
                f"Invalid GitHub username: '{raw.strip()}'. "
                "Usernames contain only letters, digits and hyphens."
            )
        return cls(value=login)

    def __str__(self) -> str:
        return self.value
