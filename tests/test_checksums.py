"""Tests for the two control character schemes.

Tests cover:
- Standard mod-26 control letter against known codes
- Case handling and input errors for the standard scheme
- Temporary mod-10 control digit, including the leading-digit rule
- Input errors for the temporary scheme
"""

from __future__ import annotations

import pytest

from fiscalcode.checksums.standard import EVEN_TABLE, ODD_TABLE, compute_standard_control_character
from fiscalcode.checksums.temporary import compute_temporary_control_digit
from fiscalcode.errors import InvalidCharacterError, InvalidLengthError


class TestStandardControlCharacter:
    """Test the mod-26 control letter."""

    @pytest.mark.parametrize(
        ("partial", "expected"),
        [
            ("RSSMRA80D01H501", "A"),
            ("RSSMRA80D41H501", "E"),
            ("RSSMRA80A01H501", "U"),
            ("RSSMRA85H52F205", "C"),
            ("BNCMRC90C15H501", "W"),
            ("VRDLGI50A01L219", "Q"),
        ],
    )
    def test_known_codes(self, partial: str, expected: str) -> None:
        assert compute_standard_control_character(partial) == expected

    def test_lowercase_accepted(self) -> None:
        assert compute_standard_control_character("rssmra85h52f205") == "C"

    def test_tables_have_36_entries(self) -> None:
        assert len(ODD_TABLE) == 36
        assert len(EVEN_TABLE) == 36

    def test_too_short(self) -> None:
        with pytest.raises(InvalidLengthError) as exc_info:
            compute_standard_control_character("RSSMRA80D01H50")
        assert exc_info.value.expected == 15
        assert exc_info.value.actual == 14

    def test_full_code_rejected(self) -> None:
        with pytest.raises(InvalidLengthError):
            compute_standard_control_character("RSSMRA80D01H501A")

    def test_invalid_character(self) -> None:
        with pytest.raises(InvalidCharacterError) as exc_info:
            compute_standard_control_character("RSSMRA80D01H50!")
        assert exc_info.value.position == 14


class TestTemporaryControlDigit:
    """Test the Luhn-style control digit."""

    def test_mixed_digits(self) -> None:
        """Total 47 → leading digit 4 → control 6."""
        assert compute_temporary_control_digit("1234567890") == "6"

    def test_leading_digit_not_last_digit(self) -> None:
        """A plain total % 10 would give 3 here."""
        assert compute_temporary_control_digit("1234567890") != "3"

    def test_all_zeros(self) -> None:
        assert compute_temporary_control_digit("0000000000") == "0"

    def test_all_nines(self) -> None:
        """Doubled 18 reduces to 9: total 90 → control 1."""
        assert compute_temporary_control_digit("9999999999") == "1"

    def test_doubled_ten_reduced(self) -> None:
        """5 at an odd index doubles to 10, reduced to 1: total 1 → control 9."""
        assert compute_temporary_control_digit("0500000000") == "9"

    def test_single_digit_total(self) -> None:
        assert compute_temporary_control_digit("0000000001") == "8"

    def test_wrong_length(self) -> None:
        with pytest.raises(InvalidLengthError):
            compute_temporary_control_digit("123456789")

    def test_non_digit(self) -> None:
        with pytest.raises(InvalidCharacterError) as exc_info:
            compute_temporary_control_digit("12345A7890")
        assert exc_info.value.position == 5
