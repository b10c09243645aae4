"""Birth date segment encoder.

Segment layout (5 characters): YY M DD
  - YY: last two digits of the year
  - M:  month letter (A–T, non-sequential)
  - DD: day of month, +40 for females
"""

from __future__ import annotations

from datetime import date

from fiscalcode.models.enums import Sex

# Letters that could be confused with digits or other segments are skipped.
MONTH_CODES = "ABCDEHLMPRST"

MONTH_MAP: dict[str, int] = {letter: i + 1 for i, letter in enumerate(MONTH_CODES)}

DATE_SEGMENT_LENGTH = 5


def encode_year(year: int) -> str:
    return f"{year % 100:02d}"


def encode_month(month: int) -> str:
    """Return the month letter for a 1-based month number."""
    if not 1 <= month <= len(MONTH_CODES):
        msg = f"Invalid month: {month}"
        raise ValueError(msg)
    return MONTH_CODES[month - 1]


def encode_day(day: int, sex: Sex) -> str:
    return f"{day + sex.day_addend:02d}"


def encode_date(birth_date: date, sex: Sex) -> str:
    """Encode birth date and sex into the 5-character date segment."""
    return (
        encode_year(birth_date.year)
        + encode_month(birth_date.month)
        + encode_day(birth_date.day, sex)
    )
