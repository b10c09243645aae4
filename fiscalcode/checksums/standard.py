"""Control character of the 16-character standard fiscal code.

Weighted mod-26 scheme over the first 15 characters. Each character is
mapped to its 0–35 value, then through the ODD table (1-based odd
positions, i.e. 0-based even indexes) or the EVEN table, summed, and the
sum modulo 26 picks a letter of the alphabet.

Reference: Decreto MEF 12/03/1974.
"""

from __future__ import annotations

from fiscalcode.alphabet import ITALIAN_ALPHABET
from fiscalcode.encoders.values import char_value
from fiscalcode.errors import InvalidLengthError

STANDARD_PAYLOAD_LENGTH = 15

# Indexed by char_value(): 0–9 for digits, 10–35 for A–Z.
ODD_TABLE: tuple[int, ...] = (
    1, 0, 5, 7, 9, 13, 15, 17, 19, 21,
    1, 0, 5, 7, 9, 13, 15, 17, 19, 21, 2, 4, 18, 20, 11, 3,
    6, 8, 12, 14, 16, 10, 22, 25, 24, 23,
)

EVEN_TABLE: tuple[int, ...] = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9,
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12,
    13, 14, 15, 16, 17, 18, 19, 20, 21, 22, 23, 24, 25,
)


def compute_standard_control_character(partial: str) -> str:
    """Compute the control letter for the first 15 characters of a code.

    Args:
        partial: The 15 characters preceding the control slot, any case.

    Returns:
        The upper-case control letter.

    Raises:
        InvalidLengthError: If ``partial`` is not 15 characters long.
        InvalidCharacterError: If a character is not a digit or letter.
    """
    if len(partial) != STANDARD_PAYLOAD_LENGTH:
        raise InvalidLengthError(STANDARD_PAYLOAD_LENGTH, len(partial))

    total = 0
    for i, char in enumerate(partial.upper()):
        value = char_value(char, i)
        if i % 2 == 0:  # odd position (1-indexed)
            total += ODD_TABLE[value]
        else:  # even position (1-indexed)
            total += EVEN_TABLE[value]
    return ITALIAN_ALPHABET[total % len(ITALIAN_ALPHABET)]
