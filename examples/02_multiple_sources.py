"""
Multiple Sources Example

This example demonstrates:
- Listing the available sources
- Combining original, transliteration and translation
- Block and line layouts
- Fonts with different numeral glyphs
"""

from quranlo.core import CompositionOptions, GlyphPolicy, PassageComposer, render_number
from quranlo.data import get_source_catalog
from quranlo.models import Layout, SourceLanguage, SourceSelection, SourceType


def main():
    catalog = get_source_catalog()

    print("Available sources")
    print("=" * 80)
    for source_type in SourceType:
        print(f"{source_type.value:16s} {catalog.display_string_of_type(source_type)}")

    selections = [
        SourceSelection(
            source=catalog.find(SourceType.TRANSLATION, SourceLanguage.ENGLISH, "Pickthall"),
            font_name="Liberation Serif",
        ),
        SourceSelection(
            source=catalog.find(SourceType.ORIGINAL, SourceLanguage.ARABIC, "Uthmani"),
            font_name="KFGQPC HAFS Uthmanic Script",
        ),
        SourceSelection(
            source=catalog.find(SourceType.TRANSLITERATION, SourceLanguage.ENGLISH, "International"),
            font_name="Liberation Serif",
        ),
    ]

    composer = PassageComposer(data_dir=".")

    for layout in Layout:
        print(f"\nAn-Nas 1-3, layout={layout.value}")
        print("-" * 80)
        passage = composer.compose(114, 1, 3, selections, CompositionOptions(layout=layout))
        for paragraph in passage.paragraphs:
            print(paragraph.text)

    print("\nVerse 286 in each curated font")
    print("-" * 80)
    glyphs = GlyphPolicy.default()
    for font_name in glyphs.fonts():
        attrs = glyphs.attributes_for(font_name)
        print(f"{font_name:30s} {attrs.right_bracket_str}{render_number(286, attrs)}{attrs.left_bracket_str}")


if __name__ == "__main__":
    main()
