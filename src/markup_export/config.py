"""Configuration management for Markup Export."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FONT_SIZE = 10


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Export target used when --format is not given
    default_format: str = Field(
        default="html",
        alias="MARKUP_EXPORT_FORMAT",
    )

    # Pygments style providing colors, bold and italic per token type
    style_name: str = Field(
        default="default",
        alias="MARKUP_EXPORT_STYLE",
    )

    # Editor settings
    tab_width: int = Field(
        default=8,
        ge=1,
        alias="MARKUP_EXPORT_TAB_WIDTH",
    )
    editor_font: str = Field(
        default="Monospace 10",
        alias="MARKUP_EXPORT_FONT",
    )
    zoom: int = Field(
        default=0,
        alias="MARKUP_EXPORT_ZOOM",
    )


def parse_font_description(description: str) -> tuple[str, int]:
    """Split a font description like "DejaVu Sans Mono 11" into family and size.

    The size is the trailing number, if any; otherwise DEFAULT_FONT_SIZE.
    """
    family, _, size = description.strip().rpartition(" ")
    if family and size.isdigit():
        return family, int(size)
    return description.strip(), DEFAULT_FONT_SIZE


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
