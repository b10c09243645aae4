"""Pydantic schemas for fiscal codes.

Pure data classes, no business logic. PersonalData is the builder input,
FiscalCode the immutable builder output, DecodedFiscalCode the decoder output.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict

from fiscalcode.models.enums import CodeKind, Sex


# ---------------------------------------------------------------------------
# Builder input
# ---------------------------------------------------------------------------


class PersonalData(BaseModel):
    """Personal data a fiscal code is derived from.

    Fields may be left unset at construction time; the builder reports
    every missing field at once with IncompleteInputError.
    """

    model_config = ConfigDict(frozen=True)

    surname: str | None = None
    name: str | None = None
    birth_date: date | None = None
    sex: Sex | None = None
    place_code: str | None = None   # Belfiore code, e.g. "H501"

    def missing_fields(self) -> list[str]:
        """Names of the fields that are unset or blank, in declaration order."""
        missing = []
        for field_name in type(self).model_fields:
            value = getattr(self, field_name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(field_name)
        return missing


# ---------------------------------------------------------------------------
# Builder output
# ---------------------------------------------------------------------------


class FiscalCode(BaseModel):
    """A complete fiscal code and the data that produced it."""

    model_config = ConfigDict(frozen=True)

    value: str
    control_character: str
    kind: CodeKind
    personal_data: PersonalData

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Decoder output
# ---------------------------------------------------------------------------


class DecodedFiscalCode(BaseModel):
    """Result of decoding a standard fiscal code."""

    valid: bool
    fiscal_code: str
    surname_code: str | None = None    # e.g. "RSS"
    name_code: str | None = None       # e.g. "MRA"
    birth_date: date | None = None
    sex: Sex | None = None
    place_code: str | None = None
    error: str | None = None
