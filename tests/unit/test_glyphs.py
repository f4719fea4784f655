"""
Unit tests for the font glyph policy.
"""

import json

import pytest

from quranlo.core import GlyphPolicy, render_number, transfont
from quranlo.exceptions import DataAccessError
from quranlo.models import FontAttributes, WritingDirection
from quranlo.models.font import (
    ARABIC_INDIC_DIGIT_ZERO,
    ARABIC_SMALL_DOTLESS_HEAD_OF_KHAH,
    ARABIC_SMALL_HIGH_ROUNDED_ZERO,
    ARABIC_SUKUN,
    EXTENDED_ARABIC_INDIC_DIGIT_ZERO,
    ORNATE_LEFT_PARENTHESIS,
    ORNATE_RIGHT_PARENTHESIS,
)

SUKUN = chr(ARABIC_SUKUN)
HIGH_ROUNDED_ZERO = chr(ARABIC_SMALL_HIGH_ROUNDED_ZERO)
DOTLESS_HEAD_OF_KHAH = chr(ARABIC_SMALL_DOTLESS_HEAD_OF_KHAH)


class TestRenderNumber:
    """Test numeral rendering."""

    @pytest.mark.parametrize("n,base,expected", [
        (286, 0x0030, "286"),
        (286, ARABIC_INDIC_DIGIT_ZERO, "٢٨٦"),
        (286, EXTENDED_ARABIC_INDIC_DIGIT_ZERO, "۲۸۶"),
        (7, ARABIC_INDIC_DIGIT_ZERO, "٧"),
        (10, ARABIC_INDIC_DIGIT_ZERO, "١٠"),
        (114, 0x0030, "114"),
    ])
    def test_render(self, n, base, expected):
        """Test digits are offset from the font's zero."""
        assert render_number(n, FontAttributes(number_base=base)) == expected

    def test_zero(self):
        """Test zero renders as a single zero glyph."""
        assert render_number(0, FontAttributes()) == "0"
        assert render_number(0, FontAttributes(number_base=ARABIC_INDIC_DIGIT_ZERO)) == "٠"

    def test_negative_rejected(self):
        """Test negative numbers are rejected."""
        with pytest.raises(ValueError):
            render_number(-1, FontAttributes())

    def test_reversed_digits(self):
        """Test fonts that expect least-significant digit first."""
        attrs = FontAttributes(number_base=ARABIC_INDIC_DIGIT_ZERO, reversed_digits=True)

        assert render_number(286, attrs) == "٦٨٢"
        assert render_number(5, attrs) == "٥"

    def test_length_matches_decimal(self):
        """Test one glyph per decimal digit."""
        attrs = FontAttributes(number_base=ARABIC_INDIC_DIGIT_ZERO)
        for n in (1, 9, 10, 99, 100, 286, 6236):
            assert len(render_number(n, attrs)) == len(str(n))


class TestTransfont:
    """Test diacritic substitution."""

    def test_default_record_is_identity(self):
        """Test the default record leaves text untouched."""
        text = f"لَمْ يَلِدْ{HIGH_ROUNDED_ZERO}"
        assert transfont(text, FontAttributes()) == text

    def test_kfgqpc_substitution(self, glyph_policy):
        """Test KFGQPC fonts swap sukun and high rounded zero."""
        attrs = glyph_policy.attributes_for("KFGQPC Uthmanic Script HAFS", WritingDirection.RTL)
        text = f"a{SUKUN}b{HIGH_ROUNDED_ZERO}c"

        assert transfont(text, attrs) == f"a{DOTLESS_HEAD_OF_KHAH}b{SUKUN}c"

    def test_sukun_replaced_before_high_rounded_zero(self):
        """Test a sukun produced by the first swap is not swapped again."""
        attrs = FontAttributes(sukun=ARABIC_SMALL_HIGH_ROUNDED_ZERO, high_rounded_zero=ARABIC_SUKUN)

        # sukun -> high rounded zero, then every high rounded zero -> sukun
        assert transfont(SUKUN, attrs) == SUKUN
        assert transfont(HIGH_ROUNDED_ZERO, attrs) == SUKUN

    def test_zero_code_point_removes_mark(self):
        """Test a 0 replacement deletes the mark."""
        attrs = FontAttributes(sukun=0)
        assert transfont("لَمْ", attrs) == "لَم"

    def test_non_arabic_untouched(self):
        """Test Latin text passes through."""
        attrs = FontAttributes(sukun=ARABIC_SMALL_DOTLESS_HEAD_OF_KHAH, high_rounded_zero=ARABIC_SUKUN)
        assert transfont("Say, He is Allah", attrs) == "Say, He is Allah"


class TestGlyphPolicy:
    """Test font record lookup."""

    def test_bundled_table(self, glyph_policy):
        """Test the bundled table loads with its curated fonts."""
        assert len(glyph_policy) == 10
        assert "me_quran" in glyph_policy
        assert "Times New Roman" not in glyph_policy
        assert glyph_policy.fonts()[0] == "Al Qalam Quran Majeed"

    @pytest.mark.parametrize("font_name,base,left,right", [
        ("Scheherazade New quran", ARABIC_INDIC_DIGIT_ZERO,
         ORNATE_LEFT_PARENTHESIS, ORNATE_RIGHT_PARENTHESIS),
        ("me_quran", ARABIC_INDIC_DIGIT_ZERO,
         ORNATE_LEFT_PARENTHESIS, ORNATE_RIGHT_PARENTHESIS),
        ("Al Qalam Quran Majeed", EXTENDED_ARABIC_INDIC_DIGIT_ZERO,
         ORNATE_LEFT_PARENTHESIS, ORNATE_RIGHT_PARENTHESIS),
        ("KFGQPC HAFS Uthmanic Script", ARABIC_INDIC_DIGIT_ZERO, ord(" "), ord(" ")),
    ])
    def test_curated_fonts(self, glyph_policy, font_name, base, left, right):
        """Test attributes of curated Arabic fonts."""
        attrs = glyph_policy.attributes_for(font_name, WritingDirection.RTL)

        assert attrs.font_name == font_name
        assert attrs.number_base == base
        assert attrs.left_bracket == left
        assert attrs.right_bracket == right

    def test_kfgqpc_reversed(self, glyph_policy):
        """Test KFGQPC fonts write digits least-significant first."""
        attrs = glyph_policy.attributes_for("KFGQPC HAFS Uthmanic Script")

        assert attrs.reversed_digits
        assert render_number(286, attrs) == "٦٨٢"

    def test_unknown_font_gets_fallback(self, glyph_policy):
        """Test uncurated fonts get ASCII digits and parentheses."""
        attrs = glyph_policy.attributes_for("Amiri", WritingDirection.RTL)

        assert attrs.font_name == "Amiri"
        assert attrs.number_base == 0x0030
        assert attrs.left_bracket_str == "("
        assert attrs.right_bracket_str == ")"

    def test_font_name_matched_exactly(self, glyph_policy):
        """Test font names are not case-folded."""
        attrs = glyph_policy.attributes_for("ME_QURAN", WritingDirection.RTL)
        assert attrs.number_base == 0x0030

    def test_ltr_always_ascii(self, glyph_policy):
        """Test left-to-right text never gets Arabic-Indic digits."""
        attrs = glyph_policy.attributes_for("Scheherazade New quran", WritingDirection.LTR)

        assert attrs.number_base == 0x0030
        assert render_number(112, attrs) == "112"
        assert attrs.font_name == "Scheherazade New quran"

    def test_direction_optional(self, glyph_policy):
        """Test lookup without a direction uses the font record."""
        assert glyph_policy.attributes_for("me_quran").number_base == ARABIC_INDIC_DIGIT_ZERO

    def test_empty_policy(self):
        """Test a policy without records."""
        policy = GlyphPolicy()

        assert len(policy) == 0
        assert policy.attributes_for("me_quran").number_base == 0x0030
        assert policy.fallback == FontAttributes()

    def test_latin_record(self, glyph_policy):
        """Test left-to-right text gets ASCII glyphs and loses Arabic marks."""
        attrs = glyph_policy.attributes_for("Liberation Serif", WritingDirection.LTR)

        assert attrs == glyph_policy.latin.model_copy(update={"font_name": "Liberation Serif"})
        assert attrs.left_bracket_str == "("
        assert attrs.right_bracket_str == ")"
        assert transfont(f"Lam{SUKUN} yalid{HIGH_ROUNDED_ZERO}", attrs) == "Lam yalid"

    def test_misspelled_field_rejected(self, tmp_path):
        """Test a misspelled key fails loading instead of falling back to ASCII."""
        path = tmp_path / "fonts.json"
        path.write_text(json.dumps({"fonts": {"Amiri": {"numberbase": 1632}}}), encoding="utf-8")

        with pytest.raises(DataAccessError):
            GlyphPolicy.from_file(path)


class TestGlyphTableFile:
    """Test loading glyph tables from JSON."""

    def test_custom_table(self, tmp_path):
        """Test a minimal custom table with a default record."""
        path = tmp_path / "fonts.json"
        path.write_text(json.dumps({
            "default": {"left_bracket": 91, "right_bracket": 93},
            "fonts": {"Amiri Quran": {"number_base": ARABIC_INDIC_DIGIT_ZERO}},
        }), encoding="utf-8")

        policy = GlyphPolicy.from_file(path)

        assert policy.fonts() == ["Amiri Quran"]
        assert policy.attributes_for("Amiri Quran").number_base == ARABIC_INDIC_DIGIT_ZERO
        assert policy.attributes_for("Arial").left_bracket_str == "["
        assert policy.fallback.right_bracket_str == "]"

    def test_custom_latin_record(self, tmp_path):
        """Test a table can override the left-to-right record."""
        path = tmp_path / "fonts.json"
        path.write_text(json.dumps({"latin": {"sukun": ARABIC_SUKUN}}), encoding="utf-8")

        policy = GlyphPolicy.from_file(path)
        attrs = policy.attributes_for("Arial", WritingDirection.LTR)

        assert attrs.sukun == ARABIC_SUKUN
        assert attrs.high_rounded_zero == ARABIC_SMALL_HIGH_ROUNDED_ZERO

    def test_missing_file(self, tmp_path):
        """Test a missing table raises DataAccessError."""
        with pytest.raises(DataAccessError):
            GlyphPolicy.from_file(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path):
        """Test a table that is not JSON."""
        path = tmp_path / "fonts.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DataAccessError):
            GlyphPolicy.from_file(path)

    @pytest.mark.parametrize("table", [
        {"fonts": {"Bad": {"number_base": 0}}},
        {"fonts": {"Bad": {"sukun": -5}}},
        {"fonts": {"Bad": "not a record"}},
        {"fonts": ["not", "a", "map"]},
        {"fonts": {"Bad": {"numberbase": 1632}}},
        {"default": {"left_paren": 91}},
        {"latin": {"sukun": -1}},
    ])
    def test_invalid_records(self, tmp_path, table):
        """Test invalid records raise DataAccessError."""
        path = tmp_path / "fonts.json"
        path.write_text(json.dumps(table), encoding="utf-8")

        with pytest.raises(DataAccessError):
            GlyphPolicy.from_file(path)
