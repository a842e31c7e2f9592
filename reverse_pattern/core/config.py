"""Generator configuration loaded from the environment."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Generator settings loaded from environment."""

    # Randomness
    random_source: str = "mersenne"
    default_seed: int | None = None

    # Guards
    max_occurrences_limit: int | None = None

    # Diagnostics
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="REVERSE_PATTERN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
