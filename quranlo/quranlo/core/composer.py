"""
Passage composition.

Combines the verse store, glyph policy and formatter into the one
operation a host needs: "give me surah S, verses F..T, in these sources".
Every source file is read in full before any text is formatted, and the
result is handed back only once the whole passage is built, so a failure
never leaves a half-written passage behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from pydantic import BaseModel, Field

from quranlo.config import QuranLOSettings, get_settings
from quranlo.core.formatter import decorate_verse, format_block
from quranlo.core.glyphs import GlyphPolicy, render_number, transfont
from quranlo.core.reader import QuranReader
from quranlo.data import SourceCatalog, SurahCatalog, get_surah_catalog
from quranlo.exceptions import InvalidRangeError, SurahNotFoundError, VerseNotFoundError
from quranlo.models import (
    ComposedParagraph,
    FontAttributes,
    Layout,
    ParagraphKind,
    Passage,
    SourceSelection,
    SourceType,
    Surah,
    WritingDirection,
)
from quranlo.models.source import COMPOSITION_ORDER, NO_LINGUISTIC_CONTENT_LOCALE

logger = logging.getLogger(__name__)

# Surahs that are never preceded by a separate Bismillah
NO_BISMILLAH_SURAHS = frozenset({1, 9})


class CompositionOptions(BaseModel):
    """
    Options of one composition request.

    Attributes:
        layout: One block per source, or one paragraph per verse
        include_bismillah: Prefix whole-surah blocks with the Bismillah
        include_reference: Follow each block with "(Name [S:F-T])"
        arabic_font: Font for right-to-left sources without an explicit font
        latin_font: Font for left-to-right sources without an explicit font
    """

    layout: Layout = Field(default=Layout.BLOCK)
    include_bismillah: bool = Field(default=True)
    include_reference: bool = Field(default=True)
    arabic_font: str = Field(default="")
    latin_font: str = Field(default="")

    model_config = {"frozen": True}

    @classmethod
    def from_settings(cls, settings: QuranLOSettings | None = None) -> "CompositionOptions":
        settings = settings or get_settings()
        return cls(
            layout=settings.layout,
            include_bismillah=settings.include_bismillah,
            include_reference=settings.include_reference,
            arabic_font=settings.arabic_font,
            latin_font=settings.latin_font,
        )


@dataclass
class _SourceText:
    """Everything read and resolved for one selected source."""

    selection: SourceSelection
    attrs: FontAttributes
    texts: list[str] = field(default_factory=list)
    bismillah: str | None = None

    @property
    def source_type(self) -> SourceType:
        return self.selection.source.type

    @property
    def direction(self) -> WritingDirection:
        return self.selection.source.direction

    @property
    def locale(self) -> str:
        if self.source_type is SourceType.TRANSLITERATION:
            return NO_LINGUISTIC_CONTENT_LOCALE
        return self.selection.source.language.locale


def _ordered(selections: Iterable[SourceSelection]) -> list[SourceSelection]:
    rank = {source_type: i for i, source_type in enumerate(COMPOSITION_ORDER)}
    return sorted(selections, key=lambda s: rank[s.source.type])


class PassageComposer:
    """
    Builds ready-to-insert passages from the bundled sources.

    Example:
        >>> composer = PassageComposer(data_dir="/opt/quranlo")
        >>> arabic = SourceCatalog.default().sources_of_type(SourceType.ORIGINAL)[0]
        >>> passage = composer.compose(112, 1, 4, [SourceSelection(source=arabic)])
        >>> passage.text
    """

    def __init__(
        self,
        surahs: SurahCatalog | None = None,
        glyphs: GlyphPolicy | None = None,
        data_dir: str | Path | None = None,
        settings: QuranLOSettings | None = None,
    ):
        self.settings = settings or get_settings()
        self.surahs = surahs or get_surah_catalog()
        if glyphs is None:
            if self.settings.font_table is not None:
                glyphs = GlyphPolicy.from_file(self.settings.font_table)
            else:
                glyphs = GlyphPolicy.default()
        self.glyphs = glyphs
        self.data_dir = Path(data_dir) if data_dir is not None else self.settings.data_dir

    def compose(
        self,
        surah_id: int,
        start: int,
        end: int,
        selections: Iterable[SourceSelection],
        options: CompositionOptions | None = None,
    ) -> Passage:
        """
        Compose verses ``start`` to ``end`` of a surah in the selected sources.

        Args:
            surah_id: Surah number (1-114)
            start: First ayah (1-based)
            end: Last ayah (inclusive)
            selections: Sources to include, with their fonts
            options: Layout and decoration options (defaults from settings)

        Returns:
            The complete passage

        Raises:
            SurahNotFoundError: If the surah number is unknown
            InvalidRangeError: If ``start > end``
            VerseNotFoundError: If the range exceeds the surah or a verse is missing
            DataAccessError: If a source file cannot be read
        """
        options = options or CompositionOptions.from_settings(self.settings)
        surah = self._validate(surah_id, start, end)
        selections = _ordered(selections)

        with_bismillah = (
            options.layout is Layout.BLOCK
            and options.include_bismillah
            and start == 1
            and end == surah.total_ayahs
            and surah.id not in NO_BISMILLAH_SURAHS
        )

        logger.debug(
            "Composing %d:%d-%d from %d source(s), layout=%s",
            surah.id, start, end, len(selections), options.layout.value,
        )

        sources = [
            self._read(selection, surah.id, start, end, options, with_bismillah)
            for selection in selections
        ]

        if options.layout is Layout.LINES:
            paragraphs = self._as_lines(sources, surah.id, start)
        else:
            paragraphs = self._as_blocks(sources, surah, start, end, options)

        return Passage(
            surah_id=surah.id,
            first_ayah=start,
            last_ayah=end,
            layout=options.layout,
            paragraphs=paragraphs,
        )

    def _validate(self, surah_id: int, start: int, end: int) -> Surah:
        surah = self.surahs.get(surah_id)
        if surah is None:
            raise SurahNotFoundError(surah_id)
        if start > end:
            raise InvalidRangeError(start, end)
        if start < 1:
            raise VerseNotFoundError(surah_id, start)
        if end > surah.total_ayahs:
            raise VerseNotFoundError(surah_id, end)
        return surah

    def _font_for(self, selection: SourceSelection, options: CompositionOptions) -> str:
        if selection.font_name:
            return selection.font_name
        if selection.source.direction is WritingDirection.RTL:
            return options.arabic_font
        return options.latin_font

    def _read(
        self,
        selection: SourceSelection,
        surah_id: int,
        start: int,
        end: int,
        options: CompositionOptions,
        with_bismillah: bool,
    ) -> _SourceText:
        source = selection.source
        attrs = self.glyphs.attributes_for(self._font_for(selection, options), source.direction)
        path = SourceCatalog.path_of(source, self.data_dir)

        with QuranReader(path) as reader:
            texts = reader.verse_range(surah_id, start, end)
            bismillah = reader.bismillah() if with_bismillah else None

        return _SourceText(selection=selection, attrs=attrs, texts=texts, bismillah=bismillah)

    def _reference(self, source: _SourceText, surah: Surah, start: int, end: int) -> str:
        def num(n: int) -> str:
            return render_number(n, source.attrs)

        verses = f"{num(start)}-{num(end)}" if end > start else num(end)
        return f"({surah.name} [{num(surah.id)}:{verses}])"

    def _paragraph(
        self,
        source: _SourceText,
        text: str,
        kind: ParagraphKind,
        surah_id: int,
        first: int,
        last: int,
    ) -> ComposedParagraph:
        return ComposedParagraph(
            text=text,
            kind=kind,
            source_type=source.source_type,
            direction=source.direction,
            locale=source.locale,
            surah_id=surah_id,
            first_ayah=first,
            last_ayah=last,
        )

    def _as_blocks(
        self,
        sources: list[_SourceText],
        surah: Surah,
        start: int,
        end: int,
        options: CompositionOptions,
    ) -> list[ComposedParagraph]:
        paragraphs: list[ComposedParagraph] = []

        for source in sources:
            if source.bismillah is not None:
                paragraphs.append(self._paragraph(
                    source, transfont(source.bismillah, source.attrs),
                    ParagraphKind.BISMILLAH, 1, 1, 1,
                ))

            block = format_block(source.texts, start, source.direction, source.attrs)
            paragraphs.append(self._paragraph(
                source, block, ParagraphKind.VERSES, surah.id, start, end,
            ))

            if options.include_reference:
                paragraphs.append(self._paragraph(
                    source, self._reference(source, surah, start, end),
                    ParagraphKind.REFERENCE, surah.id, start, end,
                ))

        return paragraphs

    def _as_lines(
        self,
        sources: list[_SourceText],
        surah_id: int,
        start: int,
    ) -> list[ComposedParagraph]:
        paragraphs: list[ComposedParagraph] = []
        count = len(sources[0].texts) if sources else 0

        for offset in range(count):
            ayah = start + offset
            for source in sources:
                line = decorate_verse(ayah, source.texts[offset], source.direction, source.attrs)
                paragraphs.append(self._paragraph(
                    source, line, ParagraphKind.VERSES, surah_id, ayah, ayah,
                ))

        return paragraphs


def compose_passage(
    surah_id: int,
    start: int,
    end: int,
    selections: Iterable[SourceSelection],
    options: CompositionOptions | None = None,
) -> Passage:
    """
    Compose a passage with the default catalogs, glyph table and settings.

    See :meth:`PassageComposer.compose`.
    """
    return PassageComposer().compose(surah_id, start, end, selections, options)
