"""Control digit of the 11-digit temporary fiscal code.

Luhn-style mod-10 scheme over the first 10 digits:
  - digits at 0-based even indexes go to the "odd" sum as they are
  - digits at 0-based odd indexes are doubled, two-digit results are
    reduced to the sum of their digits, and go to the "even" sum
  - the control digit is (10 - leading digit of the total) mod 10
"""

from __future__ import annotations

from fiscalcode.errors import InvalidCharacterError, InvalidLengthError

TEMPORARY_PAYLOAD_LENGTH = 10


def _digit_sum(value: int) -> int:
    return sum(int(d) for d in str(value))


def _leading_digit(value: int) -> int:
    return int(str(value)[0])


def compute_temporary_control_digit(partial: str) -> str:
    """Compute the control digit for the first 10 digits of a temporary code.

    Raises:
        InvalidLengthError: If ``partial`` is not 10 characters long.
        InvalidCharacterError: If a character is not a decimal digit.
    """
    if len(partial) != TEMPORARY_PAYLOAD_LENGTH:
        raise InvalidLengthError(TEMPORARY_PAYLOAD_LENGTH, len(partial))

    odd_sum = 0
    even_sum = 0
    for i, char in enumerate(partial):
        if char not in "0123456789":
            raise InvalidCharacterError(char, i)
        digit = int(char)
        if i % 2 == 0:  # odd position (1-indexed)
            odd_sum += digit
        else:
            doubled = digit * 2
            if doubled > 9:
                doubled = _digit_sum(doubled)
            even_sum += doubled

    total = odd_sum + even_sum
    return str((10 - _leading_digit(total)) % 10)
