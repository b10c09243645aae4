"""Fiscal code builder.

Pure Python, no I/O. ``build_standard`` is a pure function of its input;
``build_temporary`` additionally draws from a caller-supplied random source.
Every call fills its own buffer, so builds never share mutable state.

Standard layout (16 characters):
  0–2   surname code
  3–5   name code
  6–10  date segment (YY M DD)
  11–14 place code
  15    control character
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from datetime import date

from fiscalcode.checksums.standard import compute_standard_control_character
from fiscalcode.checksums.temporary import (
    TEMPORARY_PAYLOAD_LENGTH,
    compute_temporary_control_digit,
)
from fiscalcode.encoders.dates import DATE_SEGMENT_LENGTH, encode_date
from fiscalcode.encoders.names import NAME_CODE_LENGTH, reduce_name
from fiscalcode.encoders.places import insert_place_code
from fiscalcode.errors import IncompleteInputError
from fiscalcode.models.enums import CodeKind, Sex
from fiscalcode.schemas.fiscal_code import FiscalCode, PersonalData

logger = logging.getLogger(__name__)

SURNAME_OFFSET = 0
NAME_OFFSET = SURNAME_OFFSET + NAME_CODE_LENGTH
DATE_OFFSET = NAME_OFFSET + NAME_CODE_LENGTH


def _require_complete(personal_data: PersonalData) -> None:
    missing = personal_data.missing_fields()
    if missing:
        raise IncompleteInputError(missing)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_standard(personal_data: PersonalData) -> FiscalCode:
    """Build the 16-character standard fiscal code.

    Args:
        personal_data: Complete personal data. The place code must already
            be validated by the caller; it is copied verbatim.

    Returns:
        Immutable FiscalCode of kind STANDARD.

    Raises:
        IncompleteInputError: If any personal data field is missing.
        InvalidLengthError: If the place code is not 4 characters.
        InvalidCharacterError: If a name or place code yields a character
            outside digits and the alphabet.
    """
    _require_complete(personal_data)

    buffer = [""] * CodeKind.STANDARD.length
    buffer[SURNAME_OFFSET:NAME_OFFSET] = reduce_name(personal_data.surname)
    buffer[NAME_OFFSET:DATE_OFFSET] = reduce_name(personal_data.name)
    buffer[DATE_OFFSET : DATE_OFFSET + DATE_SEGMENT_LENGTH] = encode_date(
        personal_data.birth_date, personal_data.sex
    )
    insert_place_code(buffer, personal_data.place_code)

    control = compute_standard_control_character("".join(buffer[: CodeKind.STANDARD.control_index]))
    buffer[CodeKind.STANDARD.control_index] = control

    logger.debug("Built standard fiscal code")
    return FiscalCode(
        value="".join(buffer),
        control_character=control,
        kind=CodeKind.STANDARD,
        personal_data=personal_data,
    )


def build_temporary(personal_data: PersonalData, random_source: random.Random) -> FiscalCode:
    """Build an 11-digit temporary fiscal code.

    The first 10 digits come from ``random_source`` only; personal data is
    carried along as metadata.

    Args:
        personal_data: Complete personal data.
        random_source: Caller-owned source with a ``randrange`` method,
            e.g. ``random.Random(seed)`` or ``random.SystemRandom()``.

    Raises:
        IncompleteInputError: If any personal data field or the random
            source is missing.
    """
    missing = personal_data.missing_fields()
    if random_source is None:
        missing.append("random_source")
    if missing:
        raise IncompleteInputError(missing)

    digits = "".join(str(random_source.randrange(10)) for _ in range(TEMPORARY_PAYLOAD_LENGTH))
    control = compute_temporary_control_digit(digits)

    logger.debug("Built temporary fiscal code")
    return FiscalCode(
        value=digits + control,
        control_character=control,
        kind=CodeKind.TEMPORARY,
        personal_data=personal_data,
    )


# ---------------------------------------------------------------------------
# Fluent builder
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FiscalCodeBuilder:
    """Immutable fluent front end for ``build_standard``/``build_temporary``.

    Each ``with_*`` call returns a new builder, so a partially configured
    builder can be shared and extended safely.

    Usage:
        code = (
            FiscalCodeBuilder()
            .with_surname("Rossi")
            .with_name("Mario")
            .with_birth_date(date(1980, 4, 1))
            .with_sex(Sex.MALE)
            .with_place_code("H501")
            .build()
        )
    """

    surname: str | None = None
    name: str | None = None
    birth_date: date | None = None
    sex: Sex | None = None
    place_code: str | None = None

    def with_surname(self, surname: str) -> FiscalCodeBuilder:
        return replace(self, surname=surname)

    def with_name(self, name: str) -> FiscalCodeBuilder:
        return replace(self, name=name)

    def with_birth_date(self, birth_date: date) -> FiscalCodeBuilder:
        return replace(self, birth_date=birth_date)

    def with_sex(self, sex: Sex) -> FiscalCodeBuilder:
        return replace(self, sex=sex)

    def with_place_code(self, place_code: str) -> FiscalCodeBuilder:
        return replace(self, place_code=place_code)

    def personal_data(self) -> PersonalData:
        return PersonalData(
            surname=self.surname,
            name=self.name,
            birth_date=self.birth_date,
            sex=self.sex,
            place_code=self.place_code,
        )

    def build(self) -> FiscalCode:
        return build_standard(self.personal_data())

    def build_temporary(self, random_source: random.Random) -> FiscalCode:
        return build_temporary(self.personal_data(), random_source)
