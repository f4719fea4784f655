"""
Reference data module for QuranLO library.

Provides the surah and source catalogs and the path of the bundled
font glyph table.
"""

from functools import lru_cache
from pathlib import Path

from quranlo.data.sources import BUNDLED_SOURCES, SourceCatalog
from quranlo.data.surahs import SurahCatalog

FONT_TABLE_PATH = Path(__file__).parent / "fonts.json"


@lru_cache(maxsize=1)
def get_surah_catalog() -> SurahCatalog:
    """Shared default surah catalog (built on first use)."""
    return SurahCatalog.default()


@lru_cache(maxsize=1)
def get_source_catalog() -> SourceCatalog:
    """Shared default source catalog (built on first use)."""
    return SourceCatalog.default()


__all__ = [
    "BUNDLED_SOURCES",
    "FONT_TABLE_PATH",
    "SourceCatalog",
    "SurahCatalog",
    "get_source_catalog",
    "get_surah_catalog",
]
