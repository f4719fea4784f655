"""
Shared fixtures and test configuration for QuranLO tests.
"""

from pathlib import Path

import pytest
from lxml import etree

from quranlo.core import GlyphPolicy, PassageComposer, QuranReader
from quranlo.data import SourceCatalog, SurahCatalog
from quranlo.models import SourceLanguage, SourceSelection, SourceType

FATIHAH_ARABIC = [
    "بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ",
    "ٱلْحَمْدُ لِلَّهِ رَبِّ ٱلْعَٰلَمِينَ",
    "ٱلرَّحْمَٰنِ ٱلرَّحِيمِ",
    "مَٰلِكِ يَوْمِ ٱلدِّينِ",
    "إِيَّاكَ نَعْبُدُ وَإِيَّاكَ نَسْتَعِينُ",
    "ٱهْدِنَا ٱلصِّرَٰطَ ٱلْمُسْتَقِيمَ",
    "صِرَٰطَ ٱلَّذِينَ أَنْعَمْتَ عَلَيْهِمْ غَيْرِ ٱلْمَغْضُوبِ عَلَيْهِمْ وَلَا ٱلضَّآلِّينَ",
]

IKHLAS_ARABIC = [
    "قُلْ هُوَ ٱللَّهُ أَحَدٌ",
    "ٱللَّهُ ٱلصَّمَدُ",
    "لَمْ يَلِدْ وَلَمْ يُولَدْ",
    "وَلَمْ يَكُن لَّهُۥ كُفُوًا أَحَدٌۢ",
]

NAS_ARABIC = [
    "قُلْ أَعُوذُ بِرَبِّ ٱلنَّاسِ",
    "مَلِكِ ٱلنَّاسِ",
    "إِلَٰهِ ٱلنَّاسِ",
    "مِن شَرِّ ٱلْوَسْوَاسِ ٱلْخَنَّاسِ",
    "ٱلَّذِى يُوَسْوِسُ فِى صُدُورِ ٱلنَّاسِ",
    "مِنَ ٱلْجِنَّةِ وَٱلنَّاسِ",
]

FATIHAH_ENGLISH = [
    "In the name of Allah, the Entirely Merciful, the Especially Merciful.",
    "[All] praise is [due] to Allah, Lord of the worlds -",
    "The Entirely Merciful, the Especially Merciful,",
    "Sovereign of the Day of Recompense.",
    "It is You we worship and You we ask for help.",
    "Guide us to the straight path -",
    "The path of those upon whom You have bestowed favor, "
    "not of those who have evoked [Your] anger or of those who are astray.",
]

IKHLAS_ENGLISH = [
    'Say, "He is Allah, [who is] One,',
    "Allah, the Eternal Refuge.",
    "He neither begets nor is born,",
    'Nor is there to Him any equivalent."',
]

NAS_ENGLISH = [
    'Say, "I seek refuge in the Lord of mankind,',
    "The Sovereign of mankind.",
    "The God of mankind,",
    "From the evil of the retreating whisperer -",
    "Who whispers [evil] into the breasts of mankind -",
    'From among the jinn and mankind."',
]

FATIHAH_TRANSLITERATION = [
    "Bismi Allahi alrrahmani alrraheemi",
    "Alhamdu lillahi rabbi alAAalameena",
    "Alrrahmani alrraheemi",
    "Maliki yawmi alddeeni",
    "Iyyaka naAAbudu waiyyaka nastaAAeenu",
    "Ihdina alssirata almustaqeema",
    "Sirata allatheena anAAamta AAalayhim ghayri almaghdoobi AAalayhim wala alddalleena",
]

IKHLAS_TRANSLITERATION = [
    "Qul huwa Allahu ahadun",
    "Allahu alssamadu",
    "Lam yalid walam yooladu",
    "Walam yakun lahu kufuwan ahadun",
]

NAS_TRANSLITERATION = [
    "Qul aAAoothu birabbi alnnasi",
    "Maliki alnnasi",
    "Ilahi alnnasi",
    "Min sharri alwaswasi alkhannasi",
    "Allathee yuwaswisu fee sudoori alnnasi",
    "Mina aljinnati waalnnasi",
]

ARABIC_TEXT = {1: FATIHAH_ARABIC, 112: IKHLAS_ARABIC, 114: NAS_ARABIC}
ENGLISH_TEXT = {1: FATIHAH_ENGLISH, 112: IKHLAS_ENGLISH, 114: NAS_ENGLISH}
TRANSLITERATION_TEXT = {
    1: FATIHAH_TRANSLITERATION,
    112: IKHLAS_TRANSLITERATION,
    114: NAS_TRANSLITERATION,
}


def write_quran_xml(path: Path, surahs: dict[int, list[str | None]]) -> Path:
    """
    Write a Quran data file.

    Ayahs are numbered from 1 in list order; a ``None`` entry leaves a gap
    in the numbering (the ayah element is omitted).
    """
    root = etree.Element("quran")
    for surah_no, ayahs in surahs.items():
        surah = etree.SubElement(root, "surah", attrib={"no": str(surah_no)})
        for ayah_no, text in enumerate(ayahs, start=1):
            if text is None:
                continue
            etree.SubElement(surah, "ayah", attrib={"no": str(ayah_no), "text": text})

    path.parent.mkdir(parents=True, exist_ok=True)
    etree.ElementTree(root).write(str(path), encoding="utf-8", xml_declaration=True)
    return path


@pytest.fixture
def arabic_file(tmp_path):
    """Well-formed Arabic data file with surahs 1, 112 and 114."""
    return write_quran_xml(tmp_path / "quran_arabic.test.xml", ARABIC_TEXT)


@pytest.fixture
def english_file(tmp_path):
    """Well-formed English data file with surahs 1, 112 and 114."""
    return write_quran_xml(tmp_path / "quran_english.test.xml", ENGLISH_TEXT)


@pytest.fixture
def arabic_file_with_errors(tmp_path):
    """
    Arabic data file with integrity problems.

    - 1:1 (Bismillah) has an empty text
    - 112:3 is whitespace only
    - 112:4 is missing
    - surah 114 is missing
    """
    fatihah = [""] + FATIHAH_ARABIC[1:]
    ikhlas = IKHLAS_ARABIC[:2] + ["   "]
    return write_quran_xml(
        tmp_path / "quran_arabic_with_errors.test.xml",
        {1: fatihah, 112: ikhlas},
    )


@pytest.fixture
def malformed_file(tmp_path):
    """File that is not well-formed XML."""
    path = tmp_path / "malformed.xml"
    path.write_text('<quran><surah no="1"><ayah no="1" text="x">', encoding="utf-8")
    return path


@pytest.fixture
def wrong_root_file(tmp_path):
    """Well-formed XML whose root is not <quran>."""
    path = tmp_path / "wrong_root.xml"
    path.write_text('<bible><book no="1"/></bible>', encoding="utf-8")
    return path


@pytest.fixture
def arabic_reader(arabic_file):
    """Open reader over the Arabic test file, closed after the test."""
    reader = QuranReader(arabic_file)
    yield reader
    reader.close()


@pytest.fixture
def surah_catalog():
    return SurahCatalog.default()


@pytest.fixture
def source_catalog():
    return SourceCatalog.default()


@pytest.fixture
def glyph_policy():
    return GlyphPolicy.default()


@pytest.fixture
def data_dir(tmp_path, source_catalog):
    """
    Data directory holding the Arabic Uthmani, English Sahih International
    and English transliteration sources under their catalog filenames.
    """
    base = tmp_path / "install"
    files = {
        (SourceType.ORIGINAL, SourceLanguage.ARABIC, "Uthmani"): ARABIC_TEXT,
        (SourceType.TRANSLATION, SourceLanguage.ENGLISH, "Sahih International"): ENGLISH_TEXT,
        (SourceType.TRANSLITERATION, SourceLanguage.ENGLISH, "International"): TRANSLITERATION_TEXT,
    }
    for (source_type, language, version), surahs in files.items():
        source = source_catalog.find(source_type, language, version)
        write_quran_xml(SourceCatalog.path_of(source, base), surahs)
    return base


@pytest.fixture
def composer(data_dir, surah_catalog, glyph_policy):
    return PassageComposer(surahs=surah_catalog, glyphs=glyph_policy, data_dir=data_dir)


@pytest.fixture
def arabic_selection(source_catalog):
    source = source_catalog.find(SourceType.ORIGINAL, SourceLanguage.ARABIC, "Uthmani")
    return SourceSelection(source=source, font_name="Scheherazade New quran")


@pytest.fixture
def translation_selection(source_catalog):
    source = source_catalog.find(
        SourceType.TRANSLATION, SourceLanguage.ENGLISH, "Sahih International"
    )
    return SourceSelection(source=source, font_name="Liberation Serif")


@pytest.fixture
def transliteration_selection(source_catalog):
    source = source_catalog.find(
        SourceType.TRANSLITERATION, SourceLanguage.ENGLISH, "International"
    )
    return SourceSelection(source=source, font_name="Liberation Serif")
