"""Domain enums used by schemas, encoders and validators.

All enums use str mixin for JSON serialization.
"""

from __future__ import annotations

from enum import Enum


class Sex(str, Enum):
    """Sex of the person a fiscal code refers to."""

    MALE = "M"
    FEMALE = "F"

    @property
    def day_addend(self) -> int:
        """Offset added to the day of birth in the date segment."""
        return 40 if self is Sex.FEMALE else 0


class CodeKind(str, Enum):
    """Which of the two code layouts a fiscal code uses."""

    STANDARD = "standard"    # 16 characters, mod-26 control letter
    TEMPORARY = "temporary"  # 11 digits, mod-10 control digit

    @property
    def length(self) -> int:
        return 16 if self is CodeKind.STANDARD else 11

    @property
    def control_index(self) -> int:
        return self.length - 1
