"""
Font glyph policy: numeral scripts, verse brackets and diacritic swaps.

Which digits and brackets a verse number is drawn with depends on the
font the text is set in. The mapping is data: a JSON table of font names
to glyph code points, loaded into :class:`FontAttributes` records.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from quranlo.data import FONT_TABLE_PATH
from quranlo.exceptions import DataAccessError
from quranlo.models import FontAttributes, WritingDirection
from quranlo.models.font import ARABIC_SMALL_HIGH_ROUNDED_ZERO, ARABIC_SUKUN

logger = logging.getLogger(__name__)

_SUKUN = chr(ARABIC_SUKUN)
_HIGH_ROUNDED_ZERO = chr(ARABIC_SMALL_HIGH_ROUNDED_ZERO)

# Record for left-to-right text: ASCII digits, parentheses, Arabic marks removed
LATIN_ATTRIBUTES = FontAttributes(sukun=0, high_rounded_zero=0)


class GlyphPolicy:
    """
    Lookup of font glyph attributes by exact font name.

    Fonts missing from the table get the default record (ASCII digits,
    plain parentheses, no diacritic substitution), so an uncurated font
    still produces readable verse numbers. Left-to-right text always gets
    the Latin record, whatever the font.
    """

    def __init__(
        self,
        fonts: dict[str, FontAttributes] | None = None,
        default: FontAttributes | None = None,
        latin: FontAttributes | None = None,
    ):
        self._fonts = dict(fonts or {})
        self._default = default or FontAttributes()
        self._latin = latin or LATIN_ATTRIBUTES

    @classmethod
    def from_file(cls, path: str | Path) -> "GlyphPolicy":
        """
        Load a glyph table from JSON.

        The file holds an optional ``"default"`` record, an optional
        ``"latin"`` record for left-to-right text and a ``"fonts"`` object
        mapping font names to records; omitted fields take the
        :class:`FontAttributes` defaults.

        Raises:
            DataAccessError: If the file cannot be read or a record is invalid
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                table = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load font table %s: %s", path, e)
            raise DataAccessError(f"Cannot read font table {path}: {e}") from e

        try:
            default = FontAttributes(**table.get("default", {}))
            latin = FontAttributes(**table["latin"]) if "latin" in table else None
            fonts = {
                name: FontAttributes(font_name=name, **record)
                for name, record in table.get("fonts", {}).items()
            }
        except (AttributeError, TypeError, ValidationError) as e:
            logger.error("Invalid font table %s: %s", path, e)
            raise DataAccessError(f"Invalid font table {path}: {e}") from e

        logger.debug("Loaded %d font records from %s", len(fonts), path)
        return cls(fonts, default, latin)

    @classmethod
    def default(cls) -> "GlyphPolicy":
        """Policy built from the glyph table bundled with the package."""
        return cls.from_file(FONT_TABLE_PATH)

    @property
    def fallback(self) -> FontAttributes:
        return self._default

    @property
    def latin(self) -> FontAttributes:
        return self._latin

    def fonts(self) -> list[str]:
        """Names of all fonts with a curated record, sorted case-insensitively."""
        return sorted(self._fonts, key=str.casefold)

    def attributes_for(
        self,
        font_name: str,
        direction: WritingDirection | None = None,
    ) -> FontAttributes:
        """
        Glyph attributes of a font.

        Args:
            font_name: Font family name, matched exactly
            direction: Writing direction of the text; left-to-right text
                always gets the Latin record (ASCII digits, parentheses)

        Returns:
            The font's record, or the Latin or fallback record named after the font
        """
        if direction is WritingDirection.LTR:
            return self._latin.model_copy(update={"font_name": font_name})

        attrs = self._fonts.get(font_name)
        if attrs is not None:
            return attrs
        return self._default.model_copy(update={"font_name": font_name})

    def __contains__(self, font_name: object) -> bool:
        return font_name in self._fonts

    def __len__(self) -> int:
        return len(self._fonts)


def render_number(n: int, attrs: FontAttributes) -> str:
    """
    Write a non-negative integer in a font's numeral script.

    Each decimal digit ``d`` becomes the code point ``number_base + d``.

    Args:
        n: Number to render
        attrs: Glyph attributes of the target font

    Returns:
        The digit string, most significant digit first (least significant
        first for fonts with ``reversed_digits``)

    Examples:
        >>> render_number(286, FontAttributes(number_base=0x0660))
        '٢٨٦'
        >>> render_number(0, FontAttributes())
        '0'
    """
    if n < 0:
        raise ValueError(f"Cannot render negative number: {n}")

    digits = [chr(attrs.number_base + int(d)) for d in str(n)]
    if attrs.reversed_digits:
        digits.reverse()
    return "".join(digits)


def transfont(text: str, attrs: FontAttributes) -> str:
    """
    Swap generic Arabic marks for the glyphs a font prefers.

    Replaces ARABIC SUKUN, then ARABIC SMALL HIGH ROUNDED ZERO.
    """
    return (
        text.replace(_SUKUN, attrs.sukun_str)
        .replace(_HIGH_ROUNDED_ZERO, attrs.high_rounded_zero_str)
    )
