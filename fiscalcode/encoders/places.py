"""Place code insertion."""

from __future__ import annotations

from fiscalcode.encoders.values import char_value
from fiscalcode.errors import InvalidLengthError

PLACE_CODE_LENGTH = 4
PLACE_CODE_OFFSET = 11


def insert_place_code(
    buffer: list[str],
    place_code: str,
    offset: int = PLACE_CODE_OFFSET,
    length: int = PLACE_CODE_LENGTH,
) -> None:
    """Copy a pre-validated place code verbatim into ``buffer`` at ``offset``.

    The buffer is left untouched when the place code is rejected.

    Raises:
        InvalidLengthError: If the place code is not ``length`` characters.
        InvalidCharacterError: If a character is not an upper-case letter
            or a digit.
    """
    if len(place_code) != length:
        raise InvalidLengthError(length, len(place_code), what="place code")
    for i, char in enumerate(place_code):
        char_value(char, offset + i)
    buffer[offset : offset + length] = list(place_code)
