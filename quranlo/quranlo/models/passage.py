"""
Passage data models.

A passage is the fully composed output of one "insert verses" request:
an ordered list of paragraphs, each tagged with the direction and locale
the document writer should apply to it.
"""

from enum import Enum

from pydantic import BaseModel, Field

from quranlo.models.source import Source, SourceType, WritingDirection


class Layout(str, Enum):
    """How verses of a range are laid out."""

    BLOCK = "block"  # all verses of a source in one paragraph
    LINES = "lines"  # one paragraph per verse


class ParagraphKind(str, Enum):
    """Role of a paragraph within a passage."""

    BISMILLAH = "bismillah"
    VERSES = "verses"
    REFERENCE = "reference"  # e.g. "(Al-Ikhlȃṣ [112:1-4])"


class SourceSelection(BaseModel):
    """A source picked for insertion and the font it will be set in."""

    source: Source
    font_name: str = Field(
        default="",
        description="Font the source text is set in (selects numeral glyphs)",
    )

    model_config = {"frozen": True}


class ComposedParagraph(BaseModel):
    """
    One paragraph of a composed passage.

    Attributes:
        text: Final paragraph text
        kind: Role of the paragraph
        source_type: Type of the source the text came from
        direction: Writing direction to apply
        locale: Locale tag to apply ("zxx" disables spell checking)
        surah_id: Surah the text belongs to
        first_ayah: First verse covered by the paragraph
        last_ayah: Last verse covered by the paragraph
    """

    text: str
    kind: ParagraphKind
    source_type: SourceType
    direction: WritingDirection
    locale: str
    surah_id: int = Field(..., ge=1, le=114)
    first_ayah: int = Field(..., ge=1)
    last_ayah: int = Field(..., ge=1)

    model_config = {"frozen": True}

    @property
    def is_rtl(self) -> bool:
        return self.direction is WritingDirection.RTL

    def __str__(self) -> str:
        return f"Paragraph({self.kind.value}, {self.surah_id}:{self.first_ayah}-{self.last_ayah})"


class Passage(BaseModel):
    """A complete, ready-to-insert sequence of paragraphs."""

    surah_id: int = Field(..., ge=1, le=114)
    first_ayah: int = Field(..., ge=1)
    last_ayah: int = Field(..., ge=1)
    layout: Layout
    paragraphs: list[ComposedParagraph] = Field(default_factory=list)

    @property
    def text(self) -> str:
        """All paragraph texts joined with newlines."""
        return "\n".join(p.text for p in self.paragraphs)

    def of_type(self, source_type: SourceType) -> list[ComposedParagraph]:
        """Paragraphs that came from sources of the given type."""
        return [p for p in self.paragraphs if p.source_type is source_type]

    def __len__(self) -> int:
        return len(self.paragraphs)

    def __str__(self) -> str:
        return f"Passage({self.surah_id}:{self.first_ayah}-{self.last_ayah}, {len(self)} paragraphs)"
