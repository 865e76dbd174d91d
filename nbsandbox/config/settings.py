"""Configuration settings using Pydantic."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Profile inputs
    permissions_path: Path | None = Field(
        default=None,
        alias="NBSANDBOX_PERMISSIONS_PATH",
        description="Path to permissions YAML file",
    )
    template_path: Path | None = Field(
        default=None,
        alias="NBSANDBOX_TEMPLATE_PATH",
        description="Path to profile template (default: embedded notebook profile)",
    )

    # Profile output
    minify: bool = Field(
        default=False,
        alias="NBSANDBOX_MINIFY",
        description="Collapse generated profiles onto a single line",
    )
    resolve_paths: bool = Field(
        default=False,
        alias="NBSANDBOX_RESOLVE_PATHS",
        description="Resolve symlinks in declared paths",
    )

    # Logging
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    """Get application settings (cached)."""
    return Settings()
