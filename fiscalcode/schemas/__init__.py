"""Pydantic schemas for fiscal code inputs and outputs."""

from fiscalcode.schemas.fiscal_code import DecodedFiscalCode, FiscalCode, PersonalData

__all__ = ["DecodedFiscalCode", "FiscalCode", "PersonalData"]
