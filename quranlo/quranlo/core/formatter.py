"""
Verse formatting.

Turns verse texts into numbered fragments. Left-to-right text gets its
number in front, "(1) text "; right-to-left text gets it behind, with the
brackets in mirrored order, "text﴿١﴾ ". All functions are pure.
"""

from typing import Sequence

from quranlo.core.glyphs import LATIN_ATTRIBUTES, render_number, transfont
from quranlo.models import FontAttributes, WritingDirection


def decorate_verse(
    number: int,
    text: str,
    direction: WritingDirection,
    attrs: FontAttributes,
) -> str:
    """
    Number a single verse.

    Args:
        number: Verse number within its surah
        text: Verse text as read from the data file
        direction: Writing direction of the source language
        attrs: Glyph attributes of the font the verse is set in; left-to-right
            verses take only the diacritic swaps from it

    Returns:
        The decorated fragment, always ending in one space

    Examples:
        >>> decorate_verse(1, "Say: He is Allah, the One!", WritingDirection.LTR, FontAttributes())
        '(1) Say: He is Allah, the One! '
    """
    body = transfont(text, attrs)

    # Latin-script verses are always numbered "(N)" in ASCII digits
    if direction is WritingDirection.LTR:
        return f"({render_number(number, LATIN_ATTRIBUTES)}) {body} "

    rendered = render_number(number, attrs)
    return f"{body}{attrs.right_bracket_str}{rendered}{attrs.left_bracket_str} "


def format_lines(
    texts: Sequence[str],
    first_verse: int,
    direction: WritingDirection,
    attrs: FontAttributes,
) -> list[str]:
    """
    Decorate consecutive verses, one fragment per verse.

    Args:
        texts: Verse texts in ascending verse order
        first_verse: Number of the first verse in ``texts``
        direction: Writing direction of the source language
        attrs: Glyph attributes of the font

    Returns:
        One decorated fragment per input text
    """
    return [
        decorate_verse(number, text, direction, attrs)
        for number, text in enumerate(texts, start=first_verse)
    ]


def format_block(
    texts: Sequence[str],
    first_verse: int,
    direction: WritingDirection,
    attrs: FontAttributes,
) -> str:
    """Decorate consecutive verses and join them into one block."""
    return "".join(format_lines(texts, first_verse, direction, attrs))
