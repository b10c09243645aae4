"""Control character schemes for standard and temporary fiscal codes."""

from fiscalcode.checksums.standard import compute_standard_control_character
from fiscalcode.checksums.temporary import compute_temporary_control_digit

__all__ = ["compute_standard_control_character", "compute_temporary_control_digit"]
