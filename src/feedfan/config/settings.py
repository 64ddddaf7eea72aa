"""Configuration management using pydantic-settings.

Supports environment variables (prefixed FEEDFAN_) and .env file loading.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FEEDFAN_",
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # Set True in production for structured logs

    # HTTP
    fetch_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout in seconds",
    )
    follow_redirects: bool = True
    user_agent: str | None = Field(
        default=None,
        description="User-Agent header value; no header is sent when unset",
    )

    # Entry handling
    skip_bad_dates: bool = Field(
        default=False,
        description=(
            "Skip only entries with an unparseable date instead of stopping "
            "at the first one"
        ),
    )

    # Feed URLs used by scripts/fetch_feeds.py when none are given
    feed_urls: list[str] = Field(default_factory=list)


# Global singleton instance
settings = Settings()
