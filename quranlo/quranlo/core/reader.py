"""
Verse store over one Quran XML data file.

Data files look like::

    <quran>
      <surah no="1">
        <ayah no="1" text="بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ"/>
        ...
      </surah>
      ...
    </quran>

The file is parsed once when the reader is created and indexed by
(surah, ayah), so point and range lookups never rescan the document.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from quranlo.exceptions import (
    DataAccessError,
    InvalidRangeError,
    ReaderClosedError,
    VerseNotFoundError,
)

logger = logging.getLogger(__name__)

ROOT_TAG = "quran"
SURAH_TAG = "surah"
AYAH_TAG = "ayah"

# Surah and ayah of the Bismillah as stored in every data file
BISMILLAH_REF = (1, 1)


def _make_parser() -> etree.XMLParser:
    # No DTD loading, entity expansion or network access
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        huge_tree=False,
    )


def _number(element: etree._Element) -> int | None:
    raw = element.get("no")
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


class QuranReader:
    """
    Read-only access to the verses of one data file.

    A reader is bound to a single file for its whole life: create it, run
    any number of queries, then close it (or use it as a context manager).
    Creating a reader on a missing or malformed file raises
    :class:`DataAccessError`; a closed reader raises :class:`ReaderClosedError`.

    Example:
        >>> with QuranReader("QuranText.English.Pickthall.xml") as reader:
        ...     reader.verse_range(112, 1, 4)
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._tree: etree._ElementTree | None = None
        self._index: dict[tuple[int, int], str] = {}
        self._closed = False

        try:
            tree = etree.parse(str(self.path), _make_parser())
        except (OSError, etree.XMLSyntaxError) as e:
            logger.error("Failed to parse Quran data file %s: %s", self.path, e)
            raise DataAccessError(f"Cannot read Quran data file {self.path}: {e}") from e

        root = tree.getroot()
        if root.tag != ROOT_TAG:
            logger.error(
                "Unexpected root element <%s> in %s (expected <%s>)",
                root.tag, self.path, ROOT_TAG,
            )
            raise DataAccessError(
                f"{self.path} is not a Quran data file: root element is <{root.tag}>"
            )

        self._tree = tree
        self._index = self._build_index(root)
        logger.debug("Opened %s (%d ayahs indexed)", self.path, len(self._index))

    def _build_index(self, root: etree._Element) -> dict[tuple[int, int], str]:
        index: dict[tuple[int, int], str] = {}

        for surah in root.iterchildren(SURAH_TAG):
            surah_no = _number(surah)
            if surah_no is None:
                logger.warning("Skipping <surah> without a numeric 'no' in %s", self.path)
                continue

            for ayah in surah.iterchildren(AYAH_TAG):
                ayah_no = _number(ayah)
                if ayah_no is None:
                    logger.warning(
                        "Skipping <ayah> without a numeric 'no' in surah %d of %s",
                        surah_no, self.path,
                    )
                    continue

                key = (surah_no, ayah_no)
                if key in index:
                    logger.warning("Duplicate ayah %d:%d in %s", surah_no, ayah_no, self.path)
                    continue
                index[key] = ayah.get("text", "")

        return index

    def _check_open(self) -> None:
        if self._closed:
            raise ReaderClosedError(f"Reader for {self.path} is closed")

    def _count(self, expression: str) -> int:
        self._check_open()
        return int(self._tree.xpath(expression))

    # ============ Verse Queries ============

    def verse(self, surah: int, ayah: int) -> str:
        """
        Get the text of one ayah.

        Args:
            surah: Surah number
            ayah: Ayah number within the surah (1-based)

        Returns:
            The ayah text exactly as stored

        Raises:
            VerseNotFoundError: If the ayah is missing or its text is blank
            ReaderClosedError: If the reader was closed
        """
        self._check_open()
        text = self._index.get((surah, ayah))
        if text is None or not text.strip():
            raise VerseNotFoundError(surah, ayah)
        return text

    def verse_range(self, surah: int, start: int, end: int) -> list[str]:
        """
        Get the texts of ayahs ``start`` to ``end`` (inclusive) of a surah.

        Either every ayah of the range is returned, in ascending order, or
        an error is raised; a range is never returned partially.

        Raises:
            InvalidRangeError: If ``start > end``
            VerseNotFoundError: If any ayah of the range is missing
        """
        self._check_open()
        if start > end:
            raise InvalidRangeError(start, end)
        return [self.verse(surah, ayah) for ayah in range(start, end + 1)]

    def bismillah(self) -> str:
        """Text of the Bismillah (ayah 1 of Al-Fâtihah) in this source."""
        return self.verse(*BISMILLAH_REF)

    # ============ Structure Queries ============

    def total_surah_count(self) -> int:
        """Number of <surah> elements in the file."""
        return self._count(f"count(/{ROOT_TAG}/{SURAH_TAG})")

    def total_verse_count(self) -> int:
        """Number of <ayah> elements across all surahs."""
        return self._count(f"count(/{ROOT_TAG}/{SURAH_TAG}/{AYAH_TAG})")

    def verse_count_in(self, surah: int) -> int:
        """Number of <ayah> elements in the surah whose 'no' is ``surah``."""
        return self._count(f"count(/{ROOT_TAG}/{SURAH_TAG}[@no='{int(surah)}']/{AYAH_TAG})")

    # ============ Lifecycle ============

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the parsed document. The reader cannot be used afterwards."""
        if self._closed:
            return
        self._closed = True
        self._tree = None
        self._index = {}
        logger.debug("Closed %s", self.path)

    def __enter__(self) -> "QuranReader":
        self._check_open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"QuranReader({str(self.path)!r}, {state})"
