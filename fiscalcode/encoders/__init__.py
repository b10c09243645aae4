"""Segment encoders - name codes, date codes, place codes, character values."""

from fiscalcode.encoders.dates import encode_date, encode_day, encode_month, encode_year
from fiscalcode.encoders.names import reduce_name
from fiscalcode.encoders.places import insert_place_code
from fiscalcode.encoders.values import char_value

__all__ = [
    "char_value",
    "encode_date",
    "encode_day",
    "encode_month",
    "encode_year",
    "insert_place_code",
    "reduce_name",
]
