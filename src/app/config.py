"""Application configuration."""
import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings.

    Values are read from the environment or a .env file, case-insensitively.
    Example: DATABASE_URL=postgresql+asyncpg://blog:secret@db/blog PORT=9000
    """

    # Application metadata
    app_name: str = "Blog API"
    app_version: str = "1.0.0"

    # Database
    database_url: str = "postgresql+asyncpg://localhost/blog"
    test_database_url: str | None = None

    # HTTP listener
    host: str = "0.0.0.0"
    port: int = 8080

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
