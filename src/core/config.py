"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) outside the CLI.
- Environment lookup happens once; the values are passed down explicitly.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://api.github.com"


class AppSettings(BaseSettings):
    """Central application settings.

    The two token variables are read without the `GISTPOST_` prefix so that an
    existing `GIST_TOKEN` / `GITHUB_TOKEN` keeps working.
    """

    model_config = SettingsConfigDict(
        env_prefix="GISTPOST_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    gist_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GIST_TOKEN", "gist_token"),
        description="Token consulted first when -token is empty.",
    )
    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_TOKEN", "github_token"),
        description="Token consulted when both -token and GIST_TOKEN are empty.",
    )

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        min_length=8,
        description="Base URL of the gists REST API.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for the single API request (seconds).",
    )
    user_agent: str = Field(
        default="gistpost/0.1",
        min_length=1,
        description="User-Agent sent to the API (GitHub rejects requests without one).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for stderr diagnostics.",
    )
