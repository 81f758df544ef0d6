"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import RecommendationLimit


class StorageSettings(BaseModel):
    """Where the catalog and listener documents live."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    data_dir: Path = Field(
        default=Path("data"),
        validation_alias=AliasChoices("data_dir", "data_path"),
    )
    catalog_file: str = Field(default="catalog.json", min_length=1)
    listeners_file: str = Field(default="listeners.json", min_length=1)
    seed_when_missing: bool = True

    @property
    def catalog_path(self) -> Path:
        return self.data_dir / self.catalog_file

    @property
    def listeners_path(self) -> Path:
        return self.data_dir / self.listeners_file


class CatalogSettings(BaseModel):
    """Catalog query configuration."""

    model_config = SettingsConfigDict(frozen=True)

    recommendation_limit: RecommendationLimit = 5


class PlayerSettings(BaseModel):
    """Playback queue configuration."""

    model_config = SettingsConfigDict(frozen=True)

    shuffle_seed: int | None = None


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - STORAGE__DATA_DIR, STORAGE__CATALOG_FILE, STORAGE__SEED_WHEN_MISSING
    - CATALOG__RECOMMENDATION_LIMIT
    - PLAYER__SHUFFLE_SEED
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    storage: StorageSettings = Field(default_factory=StorageSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    player: PlayerSettings = Field(default_factory=PlayerSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=sorted(valid_levels))
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
