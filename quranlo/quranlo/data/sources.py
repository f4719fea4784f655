"""
Source catalog.

Describes the scripture sources the add-on ships and resolves a source to
its backing XML file. Query results are sorted by (language, version), so
the order sources are registered in never shows through.
"""

from pathlib import Path
from typing import Iterable, Optional

from quranlo.models import Source, SourceLanguage, SourceType

# (type, language, version, filename) of every bundled source
BUNDLED_SOURCES: tuple[tuple[SourceType, SourceLanguage, str, str], ...] = (
    (SourceType.ORIGINAL, SourceLanguage.ARABIC, "Uthmani",
     "data/quran/QuranText.Arabic.Uthmani.xml"),
    (SourceType.TRANSLATION, SourceLanguage.DUTCH, "Leemhuis",
     "data/quran/QuranText.Dutch.Leemhuis.xml"),
    (SourceType.TRANSLATION, SourceLanguage.DUTCH, "Siregar",
     "data/quran/QuranText.Dutch.Siregar.xml"),
    (SourceType.TRANSLATION, SourceLanguage.ENGLISH, "Pickthall",
     "data/quran/QuranText.English.Pickthall.xml"),
    (SourceType.TRANSLATION, SourceLanguage.ENGLISH, "Sahih International",
     "data/quran/QuranText.English.Sahih_International.xml"),
    (SourceType.TRANSLATION, SourceLanguage.INDONESIAN, "Ministry of Religious Affairs",
     "data/quran/QuranText.Indonesian.Ministry_of_Religious_Affairs.xml"),
    (SourceType.TRANSLITERATION, SourceLanguage.ENGLISH, "International",
     "data/quran/QuranText.English.Transliteration.xml"),
)

_LANGUAGE_ORDER = {language: i for i, language in enumerate(SourceLanguage)}


def _sort_key(source: Source) -> tuple[int, str, str]:
    return (_LANGUAGE_ORDER[source.language], source.version.casefold(), source.version)


class SourceCatalog:
    """
    Immutable catalog of scripture sources.

    Example:
        >>> catalog = SourceCatalog.default()
        >>> catalog.display_string_of_type(SourceType.ORIGINAL)
        'Arabic (Uthmani)'
    """

    def __init__(self, sources: Iterable[Source]):
        by_type: dict[SourceType, list[Source]] = {t: [] for t in SourceType}
        seen: set[tuple[SourceType, SourceLanguage, str]] = set()

        for source in sources:
            identity = (source.type, source.language, source.version.casefold())
            if identity in seen:
                raise ValueError(f"Duplicate source: {source}")
            seen.add(identity)
            by_type[source.type].append(source)

        self._by_type: dict[SourceType, tuple[Source, ...]] = {
            t: tuple(sorted(items, key=_sort_key)) for t, items in by_type.items()
        }

    @classmethod
    def default(cls) -> "SourceCatalog":
        """Catalog of the sources bundled with the add-on."""
        return cls(
            Source(type=t, language=lang, version=version, filename=filename)
            for t, lang, version, filename in BUNDLED_SOURCES
        )

    def sources_of_type(self, source_type: SourceType) -> list[Source]:
        """
        All sources of a type, sorted by language then version.

        Args:
            source_type: Source category

        Returns:
            Sorted list of sources (empty if none)
        """
        return list(self._by_type.get(source_type, ()))

    def find(
        self,
        source_type: SourceType,
        language: SourceLanguage,
        version: str,
    ) -> Optional[Source]:
        """
        Find a source by its identity. The version match ignores case.

        Returns:
            Source if found, None otherwise
        """
        wanted = version.strip().casefold()
        for source in self._by_type.get(source_type, ()):
            if source.language is language and source.version.casefold() == wanted:
                return source
        return None

    def filename_of(
        self,
        source_type: SourceType,
        language: SourceLanguage,
        version: str,
    ) -> Optional[str]:
        """Data filename of a source, or None if the catalog lacks it."""
        source = self.find(source_type, language, version)
        return source.filename if source else None

    def display_string_of_type(self, source_type: SourceType) -> str:
        """Comma-separated "Language (Version)" labels, in catalog order."""
        return ", ".join(s.label for s in self._by_type.get(source_type, ()))

    def source_at(self, source_type: SourceType, index: int) -> Optional[Source]:
        """Source at a position of :meth:`sources_of_type`, or None."""
        sources = self._by_type.get(source_type, ())
        if 0 <= index < len(sources):
            return sources[index]
        return None

    @staticmethod
    def path_of(source: Source, base_dir: str | Path) -> Path:
        """Resolve a source's data file against a base directory."""
        return Path(base_dir) / source.filename

    def __iter__(self):
        for source_type in SourceType:
            yield from self._by_type[source_type]

    def __len__(self) -> int:
        return sum(len(items) for items in self._by_type.values())
