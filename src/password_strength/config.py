"""Package configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from password_strength.constants.strength import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    DEFAULT_REQUIRE_LOWER_CASE,
    DEFAULT_REQUIRE_NUMBER,
    DEFAULT_REQUIRE_SPECIAL_SYMBOL,
    DEFAULT_REQUIRE_UPPER_CASE,
)


class Settings(BaseSettings):
    """Settings loaded from environment variables prefixed with PASSWORD_STRENGTH_."""

    model_config = SettingsConfigDict(
        env_prefix="PASSWORD_STRENGTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = False

    # Default requirements for instances built with create_password_strength()
    require_uppercase: bool = DEFAULT_REQUIRE_UPPER_CASE
    require_lowercase: bool = DEFAULT_REQUIRE_LOWER_CASE
    require_number: bool = DEFAULT_REQUIRE_NUMBER
    require_special_symbol: bool = DEFAULT_REQUIRE_SPECIAL_SYMBOL
    min_length: int | None = Field(
        default=DEFAULT_MIN_LENGTH, description="Minimum password length (0 or unset = no minimum)"
    )
    max_length: int | None = Field(
        default=DEFAULT_MAX_LENGTH, description="Maximum password length (0 or unset = no maximum)"
    )

    @property
    def requirement_options(self) -> dict[str, bool | int | None]:
        """Get the requirement overrides keyed by requirement name."""
        return {
            "upperCase": self.require_uppercase,
            "lowerCase": self.require_lowercase,
            "number": self.require_number,
            "specialSymbol": self.require_special_symbol,
            "minLength": self.min_length,
            "maxLength": self.max_length,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
