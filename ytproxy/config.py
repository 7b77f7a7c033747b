"""Configuration management for the YouTube RSS proxy."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="YTRSS_", extra="ignore"
    )

    # Server; PORT is read unprefixed so hosting platforms can inject it
    host: str = "0.0.0.0"
    port: int = Field(
        default=3000, validation_alias=AliasChoices("PORT", "YTRSS_PORT")
    )

    # Upstream YouTube feed endpoint
    upstream_feed_url: str = "https://www.youtube.com/feeds/videos.xml"
    upstream_timeout_seconds: float = Field(default=15.0, gt=0)

    # Rendered feed cache
    cache_ttl_seconds: int = Field(default=3600, ge=0)  # 1 hour

    # Environment
    env: str = Field(default="dev", pattern="^(dev|prod)$")
    log_level: str = Field(
        default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$"
    )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
