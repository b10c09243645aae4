"""Digit/letter value converter.

Digits map to themselves (0–9), letters follow them in alphabetical
order (A=10 … Z=35). The resulting 0–35 value indexes the checksum tables.
"""

from __future__ import annotations

from fiscalcode.alphabet import ITALIAN_ALPHABET
from fiscalcode.errors import InvalidCharacterError

DIGITS = "0123456789"

CHAR_VALUES: dict[str, int] = {
    **{d: i for i, d in enumerate(DIGITS)},
    **{letter: len(DIGITS) + i for i, letter in enumerate(ITALIAN_ALPHABET.letters)},
}


def char_value(char: str, position: int | None = None) -> int:
    """Return the 0–35 checksum value of an upper-case letter or digit.

    Raises:
        InvalidCharacterError: If ``char`` is neither a digit nor an
            upper-case alphabet letter.
    """
    try:
        return CHAR_VALUES[char]
    except KeyError:
        raise InvalidCharacterError(char, position) from None
