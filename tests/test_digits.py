"""Tests for digit transliteration."""

import pytest

from stringkit.digits import (
    arabic_to_persian,
    to_arabic_numbers,
    to_english_numbers,
    to_persian_numbers,
    translate,
)
from stringkit.tables import DigitAlphabet

WESTERN = "0123456789"
PERSIAN = "۰۱۲۳۴۵۶۷۸۹"
ARABIC = "٠١٢٣٤٥٦٧٨٩"


class TestTranslate:
    """Tests for translate and its shorthands."""

    def test_western_to_persian(self):
        """Test Western digits to Persian."""
        assert to_persian_numbers(WESTERN) == PERSIAN

    def test_arabic_to_persian_digits(self):
        """Test Arabic-Indic digits to Persian."""
        assert to_persian_numbers(ARABIC) == PERSIAN

    def test_to_arabic(self):
        """Test Western and Persian digits to Arabic-Indic."""
        assert to_arabic_numbers(WESTERN) == ARABIC
        assert to_arabic_numbers(PERSIAN) == ARABIC

    def test_to_english(self):
        """Test Persian and Arabic-Indic digits to Western."""
        assert to_english_numbers(PERSIAN) == WESTERN
        assert to_english_numbers(ARABIC) == WESTERN

    def test_mixed_alphabets(self):
        """Test text mixing all three alphabets."""
        assert to_english_numbers("۱٢3") == "123"

    def test_non_digits_pass_through(self):
        """Test that letters and spaces are left alone."""
        assert to_persian_numbers("abc 12") == "abc ۱۲"
        assert to_english_numbers("قیمت: ۵۰ تومان") == "قیمت: 50 تومان"

    @pytest.mark.parametrize("target", list(DigitAlphabet))
    def test_absent_or_empty_input(self, target):
        """Test that None and empty input give an empty string."""
        assert translate(None, target) == ""
        assert translate("", target) == ""

    @pytest.mark.parametrize("value", ["0", "42", "9876543210", "000"])
    def test_persian_round_trip(self, value):
        """Test that Western digits survive a trip through Persian."""
        persian = translate(value, DigitAlphabet.PERSIAN)
        assert translate(persian, DigitAlphabet.WESTERN) == value


class TestDecimalSeparators:
    """Tests for decimal separator normalization."""

    def test_persian_target_uses_slash(self):
        """Test that dot and Arabic separator become slash for Persian."""
        assert to_persian_numbers("3.14") == "۳/۱۴"
        assert to_persian_numbers("3٫14") == "۳/۱۴"

    def test_arabic_target_uses_slash(self):
        """Test that dot and Arabic separator become slash for Arabic-Indic."""
        assert to_arabic_numbers("3.14") == "٣/١٤"
        assert to_arabic_numbers("٣٫١٤") == "٣/١٤"

    def test_western_target_uses_dot(self):
        """Test that slash and Arabic separator become dot for Western."""
        assert to_english_numbers("۳/۱۴") == "3.14"
        assert to_english_numbers("٣٫١٤") == "3.14"


class TestArabicToPersian:
    """Tests for Arabic letter unification."""

    def test_letter_variants(self):
        """Test replacing Arabic kaf, yeh and teh marbuta."""
        assert arabic_to_persian("كتاب") == "کتاب"
        assert arabic_to_persian("علي") == "علی"
        assert arabic_to_persian("مدرسة") == "مدرسه"

    def test_persian_text_unchanged(self):
        """Test that Persian text is unchanged."""
        assert arabic_to_persian("سلام دنیا") == "سلام دنیا"

    def test_empty(self):
        """Test that None gives an empty string."""
        assert arabic_to_persian(None) == ""
