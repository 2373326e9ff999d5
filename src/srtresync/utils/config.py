"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Attributes:
        max_upload_bytes: Largest accepted SRT upload
        max_offset_seconds: Largest accepted offset magnitude
        log_level: Minimum level for emitted log events
        log_json: Render logs as JSON instead of console output
        cors_allow_origins: Origins allowed to call the API
    """

    max_upload_bytes: int = 2 * 1024 * 1024
    max_offset_seconds: float = 3600.0

    log_level: str = "INFO"
    log_json: bool = False

    cors_allow_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings instance loaded from environment

    Note:
        Settings are cached for performance. Use get_settings.cache_clear()
        to reload settings in tests.
    """
    return Settings()
