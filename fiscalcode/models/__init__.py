"""Domain enums."""

from fiscalcode.models.enums import CodeKind, Sex

__all__ = ["CodeKind", "Sex"]
