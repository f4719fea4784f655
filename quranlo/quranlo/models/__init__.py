"""
Pydantic data models for the QuranLO library.

These models represent the core data structures used throughout the library:
- Surah: Surah metadata
- Source: A scripture source (original, translation, transliteration)
- FontAttributes: Numeral and bracket glyphs of a font
- Passage: Composed, ready-to-insert paragraphs
"""

from quranlo.models.surah import Surah
from quranlo.models.source import (
    Source,
    SourceLanguage,
    SourceType,
    WritingDirection,
)
from quranlo.models.font import FontAttributes
from quranlo.models.passage import (
    ComposedParagraph,
    Layout,
    ParagraphKind,
    Passage,
    SourceSelection,
)

__all__ = [
    "Surah",
    "Source",
    "SourceLanguage",
    "SourceType",
    "WritingDirection",
    "FontAttributes",
    "ComposedParagraph",
    "Layout",
    "ParagraphKind",
    "Passage",
    "SourceSelection",
]
