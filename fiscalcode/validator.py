"""Fiscal code validation.

Recomputes the control character of a candidate code and compares it with
the embedded one. Malformed candidates give False, they never raise.

Note that there is no official validator for Italian fiscal codes: a code
passing these checks is well formed, not necessarily assigned.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any

from fiscalcode.checksums.standard import compute_standard_control_character
from fiscalcode.checksums.temporary import compute_temporary_control_digit
from fiscalcode.errors import FiscalCodeError, IncompleteInputError
from fiscalcode.models.enums import CodeKind, Sex

logger = logging.getLogger(__name__)

STANDARD_PATTERN = re.compile(r"^[A-Z]{6}\d{2}[ABCDEHLMPRST]\d{2}[A-Z0-9]{4}[A-Z]$")
TEMPORARY_PATTERN = re.compile(r"^\d{11}$")

PLACE_CODE_LENGTHS: dict[CodeKind, int] = {
    CodeKind.STANDARD: 4,
    CodeKind.TEMPORARY: 2,
}


def _normalize(code: str) -> str:
    return code.strip().upper()


# ---------------------------------------------------------------------------
# Control character checks
# ---------------------------------------------------------------------------


def validate_standard_control_character(code: str) -> bool:
    """Check the control letter of a 16-character code."""
    code = _normalize(code)
    if len(code) != CodeKind.STANDARD.length:
        return False
    idx = CodeKind.STANDARD.control_index
    try:
        return compute_standard_control_character(code[:idx]) == code[idx]
    except FiscalCodeError as exc:
        logger.debug("Standard control check failed: %s", exc)
        return False


def validate_temporary_control_character(code: str) -> bool:
    """Check the control digit of an 11-digit temporary code."""
    code = code.strip()
    if len(code) != CodeKind.TEMPORARY.length:
        return False
    idx = CodeKind.TEMPORARY.control_index
    try:
        return compute_temporary_control_digit(code[:idx]) == code[idx]
    except FiscalCodeError as exc:
        logger.debug("Temporary control check failed: %s", exc)
        return False


def validate_control_character(code: str | None) -> bool:
    """Check the control character of a standard or temporary code.

    The scheme is chosen by length: 16 characters standard, 11 temporary.
    Any other length is not a fiscal code and gives False.

    Raises:
        IncompleteInputError: If ``code`` is None.
    """
    if code is None:
        raise IncompleteInputError(["code"])
    length = len(code.strip())
    if length == CodeKind.STANDARD.length:
        return validate_standard_control_character(code)
    if length == CodeKind.TEMPORARY.length:
        return validate_temporary_control_character(code)
    return False


# ---------------------------------------------------------------------------
# Full code checks
# ---------------------------------------------------------------------------


def validate_standard(code: str | None) -> bool:
    """Check format and control letter of a 16-character code."""
    if code is None:
        return False
    normalized = _normalize(code)
    return bool(STANDARD_PATTERN.match(normalized)) and validate_standard_control_character(normalized)


def validate_temporary(code: str | None) -> bool:
    """Check format and control digit of an 11-digit temporary code."""
    if code is None:
        return False
    stripped = code.strip()
    return bool(TEMPORARY_PATTERN.match(stripped)) and validate_temporary_control_character(stripped)


def validate(code: str | None) -> bool:
    """Check a standard or temporary fiscal code. Never raises."""
    if not isinstance(code, str):
        return False
    if len(code.strip()) == CodeKind.TEMPORARY.length:
        return validate_temporary(code)
    return validate_standard(code)


# ---------------------------------------------------------------------------
# Field checks
# ---------------------------------------------------------------------------


def validate_place_code(place_code: str | None, kind: CodeKind = CodeKind.STANDARD) -> bool:
    """Check the place code width for the given code kind."""
    return place_code is not None and len(place_code) == PLACE_CODE_LENGTHS[kind]


def validate_surname(surname: str | None) -> bool:
    return surname is not None and bool(surname.strip())


def validate_name(name: str | None) -> bool:
    return name is not None and bool(name.strip())


def validate_birth_date(birth_date: Any, today: date | None = None) -> bool:
    """Check that a birth date is a date and not in the future."""
    if not isinstance(birth_date, date):
        return False
    if isinstance(birth_date, datetime):
        birth_date = birth_date.date()
    return birth_date <= (today or date.today())


def validate_sex(sex: Any) -> bool:
    return isinstance(sex, Sex)
