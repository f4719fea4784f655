"""
Scripture source models.

A source is one rendition of the Quran (the Arabic original, a
transliteration or a translation) backed by one XML data file.
"""

from enum import Enum

from pydantic import BaseModel, Field


class WritingDirection(str, Enum):
    """Paragraph writing direction of a language."""

    LTR = "ltr"
    RTL = "rtl"


class SourceType(str, Enum):
    """Category of a source text."""

    ORIGINAL = "Original"
    TRANSLATION = "Translation"
    TRANSLITERATION = "Transliteration"


# Order in which selected sources are written into a passage
COMPOSITION_ORDER: tuple[SourceType, ...] = (
    SourceType.ORIGINAL,
    SourceType.TRANSLITERATION,
    SourceType.TRANSLATION,
)


class SourceLanguage(str, Enum):
    """
    Languages a source can be written in.

    Declaration order is the display order of the source catalog.
    """

    ARABIC = "Arabic"
    DUTCH = "Dutch"
    ENGLISH = "English"
    INDONESIAN = "Indonesian"

    @property
    def direction(self) -> WritingDirection:
        """Writing direction of the language."""
        return _LANGUAGE_INFO[self][0]

    @property
    def locale(self) -> str:
        """BCP 47 locale tag, e.g. "ar-SA"."""
        return _LANGUAGE_INFO[self][1]

    @property
    def is_rtl(self) -> bool:
        return self.direction is WritingDirection.RTL

    @classmethod
    def from_id(cls, language_id: str) -> "SourceLanguage | None":
        """Look up a language by its name ("Arabic", "English", ...)."""
        try:
            return cls(language_id)
        except ValueError:
            return None


_LANGUAGE_INFO: dict[SourceLanguage, tuple[WritingDirection, str]] = {
    SourceLanguage.ARABIC: (WritingDirection.RTL, "ar-SA"),
    SourceLanguage.DUTCH: (WritingDirection.LTR, "nl-NL"),
    SourceLanguage.ENGLISH: (WritingDirection.LTR, "en-US"),
    SourceLanguage.INDONESIAN: (WritingDirection.LTR, "id-ID"),
}

# Locale for text with no linguistic content (disables spell checking)
NO_LINGUISTIC_CONTENT_LOCALE = "zxx"


class Source(BaseModel):
    """
    A scripture source and the data file that backs it.

    Attributes:
        type: Original, translation or transliteration
        language: Language the text is written in
        version: Version label or translator name (e.g. "Pickthall")
        filename: Path of the XML data file, relative to the data directory
    """

    type: SourceType = Field(
        ...,
        description="Source category",
    )
    language: SourceLanguage = Field(
        ...,
        description="Language of the source text",
    )
    version: str = Field(
        ...,
        description="Version label or translator name",
        min_length=1,
    )
    filename: str = Field(
        ...,
        description="Path to the XML data file, relative to the data directory",
        min_length=1,
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "type": "Translation",
                    "language": "English",
                    "version": "Pickthall",
                    "filename": "data/quran/QuranText.English.Pickthall.xml",
                }
            ]
        },
    }

    @property
    def label(self) -> str:
        """Display label, e.g. "English (Pickthall)"."""
        return f"{self.language.value} ({self.version})"

    @property
    def direction(self) -> WritingDirection:
        return self.language.direction

    def __str__(self) -> str:
        return f"{self.type.value}: {self.label}"
