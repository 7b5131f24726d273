"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Document store settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="DOCSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Store behaviour
    strict_fields: bool = Field(
        default=True,
        description="Raise on documents missing a searched field instead of skipping them",
    )
    thread_safe: bool = Field(default=False, description="Guard the store with a lock")

    # Application
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
