"""
Basic Usage Example for QuranLO

This example demonstrates the simplest way to use QuranLO:
1. Look up a surah in the catalog
2. Read verses from a data file
3. Compose a passage ready for insertion
4. Inspect the paragraphs
"""

from quranlo.core import QuranReader, compose_passage
from quranlo.data import SourceCatalog, get_source_catalog, get_surah_catalog
from quranlo.models import SourceSelection, SourceType
from quranlo.config import configure


def main():
    # Directory holding data/quran/QuranText.*.xml
    settings = configure(data_dir=".")
    surah_number = 112

    # Step 1: Look up the surah
    surahs = get_surah_catalog()
    print(f"Surah {surahs.name_of(surah_number)} has {surahs.size_of(surah_number)} ayahs\n")

    # Step 2: Read the raw verse texts
    arabic = get_source_catalog().source_at(SourceType.ORIGINAL, 0)
    print(f"Reading {arabic.label}...")
    with QuranReader(SourceCatalog.path_of(arabic, settings.data_dir)) as reader:
        for number, text in enumerate(reader.verse_range(surah_number, 1, 4), start=1):
            print(f"  {number}: {text}")

    # Step 3: Compose the whole surah in the configured Arabic font
    print("\nComposing passage...")
    passage = compose_passage(
        surah_number, 1, 4,
        [SourceSelection(source=arabic, font_name=settings.arabic_font)],
    )

    # Step 4: Display the paragraphs
    print("-" * 80)
    for paragraph in passage.paragraphs:
        print(f"[{paragraph.kind.value:9s} {paragraph.direction.value} {paragraph.locale}] "
              f"{paragraph.text}")


if __name__ == "__main__":
    main()
