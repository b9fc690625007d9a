"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file).

    The GitHub token is looked up under several names; the first one set
    wins.  Without a token the service still works, on the 60 requests/hour
    unauthenticated quota.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
        populate_by_name=True,
    )

    github_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_TOKEN", "GH_TOKEN", "GITHUB_PAT"),
    )
    github_api_url: str = "https://api.github.com"
    http_timeout_seconds: float = 30.0
    repo_list_limit: int = 30
    deep_dive_limit: int = 10
    commit_limit: int = 5
    event_limit: int = 100
    readme_storage_chars: int = 3000
    readme_excerpt_chars: int = 1200
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("github_token", mode="before")
    @classmethod
    def _blank_token_is_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def token(self) -> str | None:
        """Plain-text token, or ``None`` when running unauthenticated."""
        return self.github_token.get_secret_value() if self.github_token else None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
