from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Cache configuration"""

    # Cache Settings
    default_capacity: int = Field(default=128, ge=0)  # used when no capacity is given

    # Logging Settings
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="LRUCACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use."""
    return Settings()
