"""
Surah catalog.

Read-only lookup of the 114 surahs by ordinal or by name. Lookups that
find nothing return ``None``; ordinals outside 1-114 have no meaning and
are never mapped to a neighbouring surah.
"""

from typing import Iterable, Iterator, Optional

from quranlo.models import Surah


class SurahCatalog:
    """
    Immutable catalog of surah metadata.

    Build one with :meth:`default` and pass it to whatever needs it.

    Example:
        >>> catalog = SurahCatalog.default()
        >>> catalog.size_of(112)
        4
        >>> catalog.ordinal_of("001 al-fâtihah")
        1
    """

    def __init__(self, surahs: Iterable[Surah]):
        by_id: dict[int, Surah] = {}
        for surah in surahs:
            if surah.id in by_id:
                raise ValueError(f"Duplicate surah id: {surah.id}")
            by_id[surah.id] = surah

        self._by_id = dict(sorted(by_id.items()))
        self._by_name = {s.name.casefold(): s.id for s in self._by_id.values()}
        self._by_display_name = {
            s.display_name.casefold(): s.id for s in self._by_id.values()
        }

    @classmethod
    def default(cls) -> "SurahCatalog":
        """Catalog of all 114 surahs from the built-in metadata."""
        return cls(Surah.from_id(i) for i in range(1, 115))

    def get(self, surah_id: int) -> Optional[Surah]:
        """
        Get the metadata of a surah.

        Args:
            surah_id: Surah number (1-114)

        Returns:
            Surah if found, None otherwise
        """
        return self._by_id.get(surah_id)

    def size_of(self, surah_id: int) -> Optional[int]:
        """Number of ayahs in a surah, or None for an unknown ordinal."""
        surah = self._by_id.get(surah_id)
        return surah.total_ayahs if surah else None

    def name_of(self, surah_id: int) -> Optional[str]:
        """Display name of a surah (e.g. "001 Al-Fâtihah"), or None."""
        surah = self._by_id.get(surah_id)
        return surah.display_name if surah else None

    def ordinal_of(self, name: Optional[str]) -> Optional[int]:
        """
        Find a surah by name.

        Accepts the zero-padded display form ("001 Al-Fâtihah") as well as
        the bare name ("Al-Fâtihah"). Matching ignores case and surrounding
        whitespace.

        Args:
            name: Surah name to look up

        Returns:
            Surah number (1-114), or None if no surah matches
        """
        if name is None or not name.strip():
            return None

        key = name.strip().casefold()
        found = self._by_display_name.get(key)
        if found is None:
            found = self._by_name.get(key)
        return found

    def surahs(self) -> list[Surah]:
        """All surahs in canonical order."""
        return list(self._by_id.values())

    def display_names(self) -> list[str]:
        """Display names of all surahs in canonical order."""
        return [s.display_name for s in self._by_id.values()]

    def total_ayahs(self) -> int:
        """Sum of the ayah counts of all surahs."""
        return sum(s.total_ayahs for s in self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[Surah]:
        return iter(self._by_id.values())

    def __contains__(self, surah_id: object) -> bool:
        return surah_id in self._by_id
