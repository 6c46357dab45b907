"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - The core never reads settings; values reach it through arguments

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - MAPCATALOG_ prefix keeps the service's variables apart in shared environments
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="MAPCATALOG_", case_sensitive=False,
    )

    # Catalog import
    catalog_max_bytes: int = 1_000_000
    # Visibility reported for a source reference the registry does not know
    unknown_source_visibility: bool = False

    @field_validator("catalog_max_bytes")
    @classmethod
    def positive_limit(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("catalog_max_bytes must be positive")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:4000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
