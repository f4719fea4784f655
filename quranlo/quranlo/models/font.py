"""
Font glyph attribute model.
"""

from pydantic import BaseModel, Field

DIGIT_ZERO = 0x0030
ARABIC_INDIC_DIGIT_ZERO = 0x0660
EXTENDED_ARABIC_INDIC_DIGIT_ZERO = 0x06F0
ORNATE_LEFT_PARENTHESIS = 0xFD3E
ORNATE_RIGHT_PARENTHESIS = 0xFD3F
ARABIC_SUKUN = 0x0652
ARABIC_SMALL_HIGH_ROUNDED_ZERO = 0x06DF
ARABIC_SMALL_DOTLESS_HEAD_OF_KHAH = 0x06E1

_MAX_CODE_POINT = 0x10FFFF


def _glyph(code_point: int) -> str:
    return chr(code_point) if code_point else ""


class FontAttributes(BaseModel):
    """
    Glyph choices used to number verses in a given font.

    Code points are stored as integers; 0 means the glyph is absent and
    renders as an empty string.

    Attributes:
        font_name: Font family name the record applies to
        number_base: Code point of digit zero in the font's numeral script
        left_bracket: Code point of the left verse-number bracket
        right_bracket: Code point of the right verse-number bracket
        sukun: Glyph that replaces U+0652 (ARABIC SUKUN) in verse text
        high_rounded_zero: Glyph that replaces U+06DF in verse text
        reversed_digits: Emit digits least-significant first
    """

    font_name: str = Field(
        default="",
        description="Font family name (empty for the fallback record)",
    )
    number_base: int = Field(
        default=DIGIT_ZERO,
        description="Code point representing digit zero",
        gt=0,
        le=_MAX_CODE_POINT - 9,
    )
    left_bracket: int = Field(
        default=ord("("),
        description="Code point of the left bracket (0 if absent)",
        ge=0,
        le=_MAX_CODE_POINT,
    )
    right_bracket: int = Field(
        default=ord(")"),
        description="Code point of the right bracket (0 if absent)",
        ge=0,
        le=_MAX_CODE_POINT,
    )
    sukun: int = Field(
        default=ARABIC_SUKUN,
        description="Replacement for ARABIC SUKUN (0 removes it)",
        ge=0,
        le=_MAX_CODE_POINT,
    )
    high_rounded_zero: int = Field(
        default=ARABIC_SMALL_HIGH_ROUNDED_ZERO,
        description="Replacement for ARABIC SMALL HIGH ROUNDED ZERO (0 removes it)",
        ge=0,
        le=_MAX_CODE_POINT,
    )
    reversed_digits: bool = Field(
        default=False,
        description="Whether multi-digit numbers are written least-significant first",
    )

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "json_schema_extra": {
            "examples": [
                {
                    "font_name": "Scheherazade New",
                    "number_base": ARABIC_INDIC_DIGIT_ZERO,
                    "left_bracket": ORNATE_LEFT_PARENTHESIS,
                    "right_bracket": ORNATE_RIGHT_PARENTHESIS,
                    "sukun": ARABIC_SUKUN,
                    "high_rounded_zero": ARABIC_SMALL_HIGH_ROUNDED_ZERO,
                    "reversed_digits": False,
                }
            ]
        },
    }

    @property
    def left_bracket_str(self) -> str:
        return _glyph(self.left_bracket)

    @property
    def right_bracket_str(self) -> str:
        return _glyph(self.right_bracket)

    @property
    def sukun_str(self) -> str:
        return _glyph(self.sukun)

    @property
    def high_rounded_zero_str(self) -> str:
        return _glyph(self.high_rounded_zero)

    def __str__(self) -> str:
        return f"FontAttributes({self.font_name or '<default>'}, base=U+{self.number_base:04X})"
