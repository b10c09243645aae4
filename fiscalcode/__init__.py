"""Italian fiscal code (codice fiscale) builder and validator."""

from fiscalcode.alphabet import ITALIAN_ALPHABET, Alphabet
from fiscalcode.builder import FiscalCodeBuilder, build_standard, build_temporary
from fiscalcode.checksums import compute_standard_control_character, compute_temporary_control_digit
from fiscalcode.decoder import decode_fiscal_code
from fiscalcode.errors import (
    FiscalCodeError,
    IncompleteInputError,
    InvalidCharacterError,
    InvalidLengthError,
)
from fiscalcode.models.enums import CodeKind, Sex
from fiscalcode.schemas.fiscal_code import DecodedFiscalCode, FiscalCode, PersonalData
from fiscalcode.validator import (
    validate,
    validate_control_character,
    validate_standard,
    validate_temporary,
)

__all__ = [
    "ITALIAN_ALPHABET",
    "Alphabet",
    "CodeKind",
    "DecodedFiscalCode",
    "FiscalCode",
    "FiscalCodeBuilder",
    "FiscalCodeError",
    "IncompleteInputError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "PersonalData",
    "Sex",
    "build_standard",
    "build_temporary",
    "compute_standard_control_character",
    "compute_temporary_control_digit",
    "decode_fiscal_code",
    "validate",
    "validate_control_character",
    "validate_standard",
    "validate_temporary",
]
