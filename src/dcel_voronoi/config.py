from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings pulled from VORONOI_DCEL_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VORONOI_DCEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Traversal
    max_cycle_length: int = Field(
        default=1_000_000,
        ge=0,
        description="Max half-edges walked per face cycle before reporting corruption (0 = unchecked)",
    )

    # Builder
    weld_decimals: int = Field(default=6, ge=0, description="Rounding used to weld cell vertices")

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(default="plain", description="Logging format (plain or json)")


@lru_cache
def get_settings() -> Settings:
    return Settings()
