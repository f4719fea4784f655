"""
Surah metadata model.
"""

from pydantic import BaseModel, Field

# Surah names in Arabic
SURAH_ARABIC_NAMES: dict[int, str] = {
    1: "الفاتحة",
    2: "البقرة",
    3: "آل عمران",
    4: "النساء",
    5: "المائدة",
    6: "الأنعام",
    7: "الأعراف",
    8: "الأنفال",
    9: "التوبة",
    10: "يونس",
    11: "هود",
    12: "يوسف",
    13: "الرعد",
    14: "إبراهيم",
    15: "الحجر",
    16: "النحل",
    17: "الإسراء",
    18: "الكهف",
    19: "مريم",
    20: "طه",
    21: "الأنبياء",
    22: "الحج",
    23: "المؤمنون",
    24: "النور",
    25: "الفرقان",
    26: "الشعراء",
    27: "النمل",
    28: "القصص",
    29: "العنكبوت",
    30: "الروم",
    31: "لقمان",
    32: "السجدة",
    33: "الأحزاب",
    34: "سبأ",
    35: "فاطر",
    36: "يس",
    37: "الصافات",
    38: "ص",
    39: "الزمر",
    40: "غافر",
    41: "فصلت",
    42: "الشورى",
    43: "الزخرف",
    44: "الدخان",
    45: "الجاثية",
    46: "الأحقاف",
    47: "محمد",
    48: "الفتح",
    49: "الحجرات",
    50: "ق",
    51: "الذاريات",
    52: "الطور",
    53: "النجم",
    54: "القمر",
    55: "الرحمن",
    56: "الواقعة",
    57: "الحديد",
    58: "المجادلة",
    59: "الحشر",
    60: "الممتحنة",
    61: "الصف",
    62: "الجمعة",
    63: "المنافقون",
    64: "التغابن",
    65: "الطلاق",
    66: "التحريم",
    67: "الملك",
    68: "القلم",
    69: "الحاقة",
    70: "المعارج",
    71: "نوح",
    72: "الجن",
    73: "المزمل",
    74: "المدثر",
    75: "القيامة",
    76: "الإنسان",
    77: "المرسلات",
    78: "النبأ",
    79: "النازعات",
    80: "عبس",
    81: "التكوير",
    82: "الانفطار",
    83: "المطففين",
    84: "الانشقاق",
    85: "البروج",
    86: "الطارق",
    87: "الأعلى",
    88: "الغاشية",
    89: "الفجر",
    90: "البلد",
    91: "الشمس",
    92: "الليل",
    93: "الضحى",
    94: "الشرح",
    95: "التين",
    96: "العلق",
    97: "القدر",
    98: "البينة",
    99: "الزلزلة",
    100: "العاديات",
    101: "القارعة",
    102: "التكاثر",
    103: "العصر",
    104: "الهمزة",
    105: "الفيل",
    106: "قريش",
    107: "الماعون",
    108: "الكوثر",
    109: "الكافرون",
    110: "النصر",
    111: "المسد",
    112: "الإخلاص",
    113: "الفلق",
    114: "الناس",
}

# Canonical transliterated names, as shown in the surah picker
SURAH_NAMES: dict[int, str] = {
    1: "Al-Fâtihah",
    2: "Al-Baqarah",
    3: "Âli-Imrân",
    4: "An-Nisâ",
    5: "Al-Mâidah",
    6: "Al-Anâm",
    7: "Al-Arâf",
    8: "Al-Anfâl",
    9: "At-Tawbah",
    10: "Yûnus",
    11: "Hûd",
    12: "Yûsuf",
    13: "Ar-Rad",
    14: "Ibrâhîm",
    15: "Al-Ḥijr",
    16: "An-Naḥl",
    17: "Al-Isrâ",
    18: "Al-Kahf",
    19: "Maryam",
    20: "Tâ-Hâ",
    21: "Al-Anbiyâ",
    22: "Al-Ḥajj",
    23: "Al-Muminûm",
    24: "An-Nûr",
    25: "Al-Furqân",
    26: "Ash-Shuarâ",
    27: "Al-Naml",
    28: "Al-Qaṣaṣ",
    29: "Al-Ankabût",
    30: "Ar-Rûm",
    31: "Luqmân",
    32: "As-Sajdah",
    33: "Al-Aḥzâb",
    34: "Saba",
    35: "Fâṭir",
    36: "Yâ-Sîn",
    37: "Aṣ-Ṣâffât",
    38: "Ṣâd",
    39: "Az-Zumar",
    40: "Ghâfir",
    41: "Fuṣṣilat",
    42: "Ash-Shûra",
    43: "Az-Zukhruf",
    44: "Ad-Dukhân",
    45: "Al-Jâthiyah",
    46: "Al-Aḥqâf",
    47: "Muḥammad",
    48: "Al-Fatḥ",
    49: "Al-Ḥujurât",
    50: "Qâf",
    51: "Adh-Dhâriyât",
    52: "Aṭ-Ṭûr",
    53: "An-Najm",
    54: "Al-Qamar",
    55: "Ar-Raḥmân",
    56: "Al-Wâqiah",
    57: "Al-Ḥadîd",
    58: "Al-Mudjâdilah",
    59: "Al-Ḥashr",
    60: "Al-Mumtaḥanah",
    61: "Aṣ-Ṣaf",
    62: "Al-Jumuah",
    63: "Al-Munȃfiqȗn",
    64: "At-Taghȃbun",
    65: "At-Talȃq",
    66: "At-Taḥrîm",
    67: "Al-Mulk",
    68: "Al-Qalam",
    69: "Al-Ḥaqqah",
    70: "Al-Maȃrij",
    71: "Al-Nȗḥ",
    72: "Al-Jinn",
    73: "Al-Muzzammil",
    74: "Al-Muddaththir",
    75: "Al-Qiyȃmah",
    76: "Al-Insȃn",
    77: "Al-Mursalȃt",
    78: "Al-Naba",
    79: "Al-Nȃziat",
    80: "Abasa",
    81: "At-Takwîr",
    82: "Al-Infiṭȃr",
    83: "Al-Muṭaffifîn",
    84: "Al-Inshiqȃq",
    85: "Al-Burȗj",
    86: "At-Ṭȃriq",
    87: "Al-Alȃ",
    88: "Al-Ghȃshiyah",
    89: "Al-Fajr",
    90: "Al-Balad",
    91: "Ash-Shams",
    92: "Al-Layl",
    93: "Aḍ-Ḍuḥȃ",
    94: "Ash-Sharḥ",
    95: "At-Tîn",
    96: "Al-Alaq",
    97: "Al-Qadr",
    98: "Al-Bayyinah",
    99: "Az-Zalzalah",
    100: "Al-Âdiyȃt",
    101: "Al-Qȃriah",
    102: "At-Takȃthur",
    103: "Al-Aṣr",
    104: "Al-Humazah",
    105: "Al-Fîl",
    106: "Quraysh",
    107: "Al-Mȃȗn",
    108: "Al-Kawthar",
    109: "Al-Kȃfirȗn",
    110: "An-Naṣr",
    111: "Al-Masad",
    112: "Al-Ikhlȃṣ",
    113: "Al-Falaq",
    114: "An-Nȃs",
}

# Total ayah count per surah (Hafs numbering, 6236 in all)
SURAH_AYAH_COUNTS: dict[int, int] = {
    1: 7,
    2: 286,
    3: 200,
    4: 176,
    5: 120,
    6: 165,
    7: 206,
    8: 75,
    9: 129,
    10: 109,
    11: 123,
    12: 111,
    13: 43,
    14: 52,
    15: 99,
    16: 128,
    17: 111,
    18: 110,
    19: 98,
    20: 135,
    21: 112,
    22: 78,
    23: 118,
    24: 64,
    25: 77,
    26: 227,
    27: 93,
    28: 88,
    29: 69,
    30: 60,
    31: 34,
    32: 30,
    33: 73,
    34: 54,
    35: 45,
    36: 83,
    37: 182,
    38: 88,
    39: 75,
    40: 85,
    41: 54,
    42: 53,
    43: 89,
    44: 59,
    45: 37,
    46: 35,
    47: 38,
    48: 29,
    49: 18,
    50: 45,
    51: 60,
    52: 49,
    53: 62,
    54: 55,
    55: 78,
    56: 96,
    57: 29,
    58: 22,
    59: 24,
    60: 13,
    61: 14,
    62: 11,
    63: 11,
    64: 18,
    65: 12,
    66: 12,
    67: 30,
    68: 52,
    69: 52,
    70: 44,
    71: 28,
    72: 28,
    73: 20,
    74: 56,
    75: 40,
    76: 31,
    77: 50,
    78: 40,
    79: 46,
    80: 42,
    81: 29,
    82: 19,
    83: 36,
    84: 25,
    85: 22,
    86: 17,
    87: 19,
    88: 26,
    89: 30,
    90: 20,
    91: 15,
    92: 21,
    93: 11,
    94: 8,
    95: 8,
    96: 19,
    97: 5,
    98: 8,
    99: 8,
    100: 11,
    101: 11,
    102: 8,
    103: 3,
    104: 9,
    105: 5,
    106: 4,
    107: 7,
    108: 3,
    109: 6,
    110: 3,
    111: 5,
    112: 4,
    113: 5,
    114: 6,
}


class Surah(BaseModel):
    """
    Represents a Surah (chapter) of the Quran.

    Attributes:
        id: Surah number (1-114)
        name: Canonical transliterated name (e.g. "Al-Fâtihah")
        name_arabic: Arabic name of the surah
        total_ayahs: Total number of ayahs in this surah
    """

    id: int = Field(
        ...,
        description="Surah number (1-114)",
        ge=1,
        le=114,
    )
    name: str = Field(
        ...,
        description="Canonical transliterated name of the surah",
        min_length=1,
    )
    name_arabic: str = Field(
        ...,
        description="Arabic name of the surah",
    )
    total_ayahs: int = Field(
        ...,
        description="Total number of ayahs in this surah",
        ge=1,
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1,
                    "name": "Al-Fâtihah",
                    "name_arabic": "الفاتحة",
                    "total_ayahs": 7,
                }
            ]
        },
    }

    @classmethod
    def from_id(cls, surah_id: int) -> "Surah":
        """
        Create a Surah instance from its ID using built-in metadata.

        Args:
            surah_id: Surah number (1-114)

        Returns:
            Surah instance with metadata
        """
        if surah_id < 1 or surah_id > 114:
            raise ValueError(f"Invalid surah_id: {surah_id}. Must be 1-114.")

        return cls(
            id=surah_id,
            name=SURAH_NAMES[surah_id],
            name_arabic=SURAH_ARABIC_NAMES[surah_id],
            total_ayahs=SURAH_AYAH_COUNTS[surah_id],
        )

    @property
    def display_name(self) -> str:
        """Zero-padded picker form, e.g. "001 Al-Fâtihah"."""
        return f"{self.id:03d} {self.name}"

    def __str__(self) -> str:
        return f"Surah {self.id}: {self.name}"
