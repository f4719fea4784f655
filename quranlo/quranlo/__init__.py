"""
QuranLO - Quran verse lookup and formatting for document editors.

Reads Quran text sources (original Arabic, transliteration, translations)
from XML data files and formats verse ranges with font-appropriate verse
numbers, ready for a word processor add-on to insert.
"""

from quranlo.config import QuranLOSettings, configure, get_settings
from quranlo.core import (
    CompositionOptions,
    GlyphPolicy,
    PassageComposer,
    QuranReader,
    compose_passage,
)
from quranlo.data import SourceCatalog, SurahCatalog
from quranlo.exceptions import (
    DataAccessError,
    InvalidRangeError,
    QuranLOError,
    ReaderClosedError,
    SurahNotFoundError,
    VerseNotFoundError,
)

__version__ = "1.0.0"

__all__ = [
    "CompositionOptions",
    "DataAccessError",
    "GlyphPolicy",
    "InvalidRangeError",
    "PassageComposer",
    "QuranLOError",
    "QuranLOSettings",
    "QuranReader",
    "ReaderClosedError",
    "SourceCatalog",
    "SurahCatalog",
    "SurahNotFoundError",
    "VerseNotFoundError",
    "compose_passage",
    "configure",
    "get_settings",
]
