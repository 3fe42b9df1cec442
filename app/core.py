"""Application configuration and settings management.

This module defines the application settings loaded from environment
variables and provides a helper for accessing the cached settings.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Attributes:
        DATABASE_URL: Database connection string.
        ALLOWED_ORIGINS: Allowed origins for CORS.
        LOG_LEVEL: Root logger level name.
        LOG_FILE: Optional path of a log file.
        BCRYPT_ROUNDS: Cost factor used when hashing passwords.
        DEFAULT_PAGE_SIZE: Page size used by contact search when none is given.
        MAX_PAGE_SIZE: Largest page size accepted by contact search.
    """

    DATABASE_URL: str = "sqlite:///./app.db"
    ALLOWED_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None
    BCRYPT_ROUNDS: int = 10
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    class Config:
        """Pydantic configuration for loading environment variables."""

        env_file = ".env"
        extra = "allow"


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings.

    The settings object is cached to prevent reloading environment
    variables multiple times during application lifetime.
    """

    return Settings()
