"""Standard fiscal code decoder.

Pure Python, no lookups. Extracts birth date, sex and birthplace code
from a 16-character standard fiscal code.

Code format: AAABBB 00C00 D000 E
  - AAA:  surname code
  - BBB:  name code
  - 00:   year of birth (last 2 digits)
  - C:    month of birth (letter A–T, non-sequential)
  - 00:   day of birth (1–31 male, 41–71 female)
  - D000: birthplace code (codice catastale / Belfiore)
  - E:    control character
"""

from __future__ import annotations

from datetime import date

from fiscalcode.encoders.dates import MONTH_MAP
from fiscalcode.models.enums import Sex
from fiscalcode.schemas.fiscal_code import DecodedFiscalCode
from fiscalcode.validator import STANDARD_PATTERN, validate_standard_control_character


def decode_fiscal_code(code: str, today: date | None = None) -> DecodedFiscalCode:
    """Decode a standard fiscal code into personal data.

    Args:
        code: The 16-character fiscal code, any case.
        today: Reference date for century inference. Defaults to today.

    Returns:
        DecodedFiscalCode with birth date, sex, place code and validity.
    """
    clean = code.upper().strip()

    if not STANDARD_PATTERN.match(clean):
        return DecodedFiscalCode(
            valid=False,
            fiscal_code=clean,
            error="Invalid format: expected 16 alphanumeric characters",
        )

    if not validate_standard_control_character(clean):
        return DecodedFiscalCode(
            valid=False,
            fiscal_code=clean,
            error="Invalid control character",
        )

    # Day and sex (positions 9–10)
    day_raw = int(clean[9:11])
    if day_raw > Sex.FEMALE.day_addend:
        sex = Sex.FEMALE
        day = day_raw - Sex.FEMALE.day_addend
    else:
        sex = Sex.MALE
        day = day_raw

    # Infer century: two-digit year after this year's means the 1900s
    year_part = int(clean[6:8])
    today = today or date.today()
    if year_part > today.year % 100:
        year = 1900 + year_part
    else:
        year = 2000 + year_part

    month = MONTH_MAP[clean[8]]
    try:
        birth_date = date(year, month, day)
    except ValueError:
        return DecodedFiscalCode(
            valid=False,
            fiscal_code=clean,
            error=f"Invalid birth date: {year}-{month:02d}-{day:02d}",
        )

    return DecodedFiscalCode(
        valid=True,
        fiscal_code=clean,
        surname_code=clean[0:3],
        name_code=clean[3:6],
        birth_date=birth_date,
        sex=sex,
        place_code=clean[11:15],
    )
