"""
Core modules for QuranLO library.

This package contains the verse lookup and formatting logic:
- Reading verses from Quran XML data files
- Font-specific numeral and bracket glyphs
- Verse decoration and passage composition

Primary API:
    from quranlo.core import PassageComposer, QuranReader

    # Read verses
    with QuranReader("QuranText.English.Pickthall.xml") as reader:
        texts = reader.verse_range(112, 1, 4)

    # Compose a passage for insertion
    passage = PassageComposer(data_dir="/opt/quranlo").compose(112, 1, 4, selections)
"""

# Primary API - what most users need
from quranlo.core.composer import CompositionOptions, PassageComposer, compose_passage
from quranlo.core.reader import QuranReader

# Formatting utilities
from quranlo.core.formatter import decorate_verse, format_block, format_lines
from quranlo.core.glyphs import GlyphPolicy, render_number, transfont

__all__ = [
    # Primary API
    "CompositionOptions",
    "PassageComposer",
    "QuranReader",
    "compose_passage",
    # Formatting
    "GlyphPolicy",
    "decorate_verse",
    "format_block",
    "format_lines",
    "render_number",
    "transfont",
]
