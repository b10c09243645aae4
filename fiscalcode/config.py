"""Library configuration via pydantic-settings.

Values are read from FISCALCODE_* environment variables (or a .env file).
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FiscalCodeSettings(BaseSettings):
    """Root settings for the fiscalcode package.

    Usage:
        settings = FiscalCodeSettings()
        settings.log_level
        settings.name_filler
    """

    model_config = SettingsConfigDict(env_prefix="FISCALCODE_", env_file=".env", extra="ignore")

    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")
    name_filler: str = Field(
        default="X",
        description="Character padding a name code when consonants and vowels run out",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @field_validator("name_filler")
    @classmethod
    def validate_name_filler(cls, v: str) -> str:
        """Filler must be a single letter, stored upper case."""
        if len(v) != 1 or not v.isalpha():
            msg = f"Invalid name filler: {v!r}. Must be a single letter"
            raise ValueError(msg)
        return v.upper()

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


# Module-level singleton, import this wherever settings are needed.
settings = FiscalCodeSettings()
