"""
Configuration management for QuranLO library.

Uses Pydantic Settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables with the QURANLO_ prefix.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from quranlo.models.passage import Layout


class QuranLOSettings(BaseSettings):
    """
    Configuration settings for QuranLO library.

    All settings can be overridden via environment variables with QURANLO_ prefix.

    Example:
        export QURANLO_DATA_DIR="/opt/quranlo"
        export QURANLO_ARABIC_FONT="me_quran"
        export QURANLO_LAYOUT="lines"
    """

    model_config = SettingsConfigDict(
        env_prefix="QURANLO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ============ Data Files ============

    data_dir: Path = Field(
        default=Path("."),
        description="Base directory that source data filenames are resolved against",
    )

    font_table: Path | None = Field(
        default=None,
        description="JSON glyph table to use instead of the bundled one",
    )

    # ============ Fonts ============

    arabic_font: str = Field(
        default="Scheherazade New quran",
        description="Font for right-to-left sources",
    )

    latin_font: str = Field(
        default="Liberation Serif",
        description="Font for left-to-right sources",
    )

    # ============ Composition ============

    layout: Layout = Field(
        default=Layout.BLOCK,
        description="Verse layout: one block per source, or one line per verse",
    )

    include_bismillah: bool = Field(
        default=True,
        description="Prefix whole-surah blocks with the Bismillah (not surahs 1 and 9)",
    )

    include_reference: bool = Field(
        default=True,
        description="Follow each block with a '(Name [S:F-T])' reference line",
    )

    # ============ Validators ============

    @field_validator("data_dir", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path) -> Path:
        """Convert string paths to Path objects."""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("arabic_font", "latin_font")
    @classmethod
    def strip_font_name(cls, v: str) -> str:
        return v.strip()


# Default settings instance
_default_settings: QuranLOSettings | None = None


def get_settings() -> QuranLOSettings:
    """
    Get the default settings instance (lazily created).

    Returns:
        QuranLOSettings: The default settings
    """
    global _default_settings
    if _default_settings is None:
        _default_settings = QuranLOSettings()
    return _default_settings


def configure(**kwargs) -> QuranLOSettings:
    """
    Create and set new default settings.

    Args:
        **kwargs: Settings to override

    Returns:
        QuranLOSettings: The new settings instance
    """
    global _default_settings
    _default_settings = QuranLOSettings(**kwargs)
    return _default_settings
