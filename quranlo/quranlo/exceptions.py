"""
Exception hierarchy for the QuranLO library.

Catalog lookups signal "not found" with ``None``; everything that reads
verse data or composes a passage raises one of the errors below.
"""


class QuranLOError(Exception):
    """Base class for all QuranLO errors."""


class DataAccessError(QuranLOError):
    """A backing data file is missing, unreadable or malformed."""


class ReaderClosedError(DataAccessError):
    """A verse store was queried after it was closed."""


class VerseNotFoundError(QuranLOError, LookupError):
    """A requested (surah, ayah) pair is absent or empty in the data file."""

    def __init__(self, surah: int, ayah: int):
        self.surah = surah
        self.ayah = ayah
        super().__init__(f"Ayah not found: surah={surah}, ayah={ayah}")


class InvalidRangeError(QuranLOError, ValueError):
    """A verse range whose start lies after its end."""

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end
        super().__init__(f"Invalid ayah range: from={start} must be <= to={end}")


class SurahNotFoundError(QuranLOError, LookupError):
    """A surah ordinal outside the catalog was passed to the composer."""

    def __init__(self, surah: int):
        self.surah = surah
        super().__init__(f"Surah not found: {surah}")
