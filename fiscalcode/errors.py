"""Exceptions raised while building or checking fiscal codes.

Validators never raise these for malformed candidates: they return False.
Builders and checksum functions raise them to the immediate caller.
"""

from __future__ import annotations


class FiscalCodeError(Exception):
    """Base class for every fiscal code error."""


class IncompleteInputError(FiscalCodeError, ValueError):
    """Raised when a required personal data field is missing at build time."""

    def __init__(self, missing_fields: list[str]) -> None:
        super().__init__(f"Missing required fields: {', '.join(missing_fields)}")
        self.missing_fields = missing_fields


class InvalidLengthError(FiscalCodeError, ValueError):
    """Raised when a code or code segment does not have the expected width."""

    def __init__(self, expected: int, actual: int, what: str = "code") -> None:
        super().__init__(f"Invalid {what} length: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class InvalidCharacterError(FiscalCodeError, ValueError):
    """Raised when a character has no entry in a checksum lookup table."""

    def __init__(self, character: str, position: int | None = None) -> None:
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid character {character!r}{where}")
        self.character = character
        self.position = position
