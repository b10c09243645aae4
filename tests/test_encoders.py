"""Tests for the segment encoders.

Tests cover:
- Name reduction (consonants, vowel fallback, filler padding)
- Non-alphabetic passthrough
- Month table contents
- Day offset for females and zero padding
- Character value converter
- Place code insertion
"""

from __future__ import annotations

from datetime import date

import pytest

from fiscalcode.encoders.dates import MONTH_CODES, encode_date, encode_day, encode_month, encode_year
from fiscalcode.encoders.names import reduce_name
from fiscalcode.encoders.places import insert_place_code
from fiscalcode.encoders.values import char_value
from fiscalcode.errors import InvalidCharacterError, InvalidLengthError
from fiscalcode.models.enums import Sex


class TestReduceName:
    """Test the phonetic name reduction."""

    def test_surname_with_enough_consonants(self) -> None:
        assert reduce_name("Rossi") == "RSS"

    def test_name_falls_back_to_vowels(self) -> None:
        assert reduce_name("Mario") == "MRA"

    def test_first_three_consonants_in_order(self) -> None:
        assert reduce_name("Bianchi") == "BNC"

    def test_consonant_only_input_is_stable(self) -> None:
        """Reducing 3+ consonants gives the first three, in order."""
        assert reduce_name("BNCHRT") == "BNC"
        assert reduce_name(reduce_name("Bianchi")) == "BNC"

    def test_single_consonant_then_vowels(self) -> None:
        assert reduce_name("Eva") == "VEA"

    def test_short_name_padded(self) -> None:
        assert reduce_name("Li") == "LIX"

    def test_all_vowels_padded(self) -> None:
        assert reduce_name("Ai") == "AIX"

    def test_empty_string_all_filler(self) -> None:
        assert reduce_name("") == "XXX"

    def test_custom_filler(self) -> None:
        assert reduce_name("O", filler="Z") == "OZZ"

    def test_custom_width(self) -> None:
        assert reduce_name("Rossi", width=2) == "RS"

    def test_non_alphabetic_passed_through(self) -> None:
        """Apostrophes are not vowels, so they count as consonants."""
        assert reduce_name("O'Neil") == "'NL"

    def test_lowercase_input_upper_cased(self) -> None:
        assert reduce_name("rossi") == "RSS"

    @pytest.mark.parametrize("text", ["", "A", "Bo"])
    def test_output_always_three_characters(self, text: str) -> None:
        assert len(reduce_name(text)) == 3


class TestDateEncoder:
    """Test the birth date segment."""

    def test_month_january(self) -> None:
        assert encode_month(1) == "A"

    def test_month_december(self) -> None:
        assert encode_month(12) == "T"

    def test_month_table_skips_ambiguous_letters(self) -> None:
        assert not set(MONTH_CODES) & set("FGINOQ")
        assert len(MONTH_CODES) == 12

    def test_invalid_month(self) -> None:
        with pytest.raises(ValueError):
            encode_month(13)

    def test_year_last_two_digits(self) -> None:
        assert encode_year(1980) == "80"
        assert encode_year(2005) == "05"

    def test_male_day_padded(self) -> None:
        assert encode_day(1, Sex.MALE) == "01"

    def test_female_day_offset(self) -> None:
        assert encode_day(1, Sex.FEMALE) == "41"
        assert encode_day(31, Sex.FEMALE) == "71"

    def test_full_segment_male(self) -> None:
        assert encode_date(date(1980, 4, 1), Sex.MALE) == "80D01"

    def test_full_segment_female(self) -> None:
        assert encode_date(date(2005, 12, 31), Sex.FEMALE) == "05T71"


class TestCharValue:
    """Test the digit/letter value converter."""

    def test_digits_map_to_themselves(self) -> None:
        assert char_value("0") == 0
        assert char_value("9") == 9

    def test_letters_follow_digits(self) -> None:
        assert char_value("A") == 10
        assert char_value("Z") == 35

    def test_lowercase_rejected(self) -> None:
        with pytest.raises(InvalidCharacterError):
            char_value("a")

    def test_error_carries_position(self) -> None:
        with pytest.raises(InvalidCharacterError) as exc_info:
            char_value("!", 4)
        assert exc_info.value.character == "!"
        assert exc_info.value.position == 4


class TestInsertPlaceCode:
    """Test verbatim place code insertion."""

    def test_copied_at_offset(self) -> None:
        buffer = [""] * 16
        insert_place_code(buffer, "H501")
        assert buffer[11:15] == ["H", "5", "0", "1"]
        assert len(buffer) == 16

    def test_wrong_length_rejected(self) -> None:
        buffer = [""] * 16
        with pytest.raises(InvalidLengthError):
            insert_place_code(buffer, "H50")
        assert buffer == [""] * 16

    def test_lowercase_rejected(self) -> None:
        buffer = [""] * 16
        with pytest.raises(InvalidCharacterError) as exc_info:
            insert_place_code(buffer, "h501")
        assert exc_info.value.position == 11
        assert buffer == [""] * 16

    def test_symbol_rejected(self) -> None:
        with pytest.raises(InvalidCharacterError):
            insert_place_code([""] * 16, "H5-1")
