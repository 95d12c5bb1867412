"""Password requirements model."""

import math
from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from password_strength.constants.strength import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    DEFAULT_REQUIRE_LOWER_CASE,
    DEFAULT_REQUIRE_NUMBER,
    DEFAULT_REQUIRE_SPECIAL_SYMBOL,
    DEFAULT_REQUIRE_UPPER_CASE,
)
from password_strength.exceptions import InvalidRequirementsError

# snake_case field name -> public option name
FIELD_ALIASES: dict[str, str] = {
    "upper_case": "upperCase",
    "lower_case": "lowerCase",
    "number": "number",
    "special_symbol": "specialSymbol",
    "min_length": "minLength",
    "max_length": "maxLength",
}


def _truthy(value: Any) -> bool:
    """Interpret any option value as a flag; "" and "0" are false like falsy values."""
    if isinstance(value, str):
        return value.strip() not in ("", "0")
    return bool(value)


def _to_number(value: Any) -> int | float | None:
    """Read a numeric option value, None for anything that is not a finite number."""
    if value is None or isinstance(value, int):
        return value
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _min_length(value: Any) -> int | None:
    # length < ceil(x) matches length < x for integer lengths
    number = _to_number(value)
    return None if number is None else math.ceil(number)


def _max_length(value: Any) -> int | None:
    # length > floor(x) matches length > x for integer lengths
    number = _to_number(value)
    return None if number is None else math.floor(number)


Flag = Annotated[bool, BeforeValidator(_truthy)]
MinLength = Annotated[int | None, BeforeValidator(_min_length)]
MaxLength = Annotated[int | None, BeforeValidator(_max_length)]


class Requirements(BaseModel):
    """Composition rules a password is validated against.

    Option values are never rejected: flags take the truthiness of whatever is
    supplied and lengths accept any number, anything else clearing the bound.
    Lengths are not range-checked either: a negative or zero bound simply
    disables the corresponding check.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    upper_case: Flag = Field(
        default=DEFAULT_REQUIRE_UPPER_CASE, alias="upperCase", description="Require uppercase letters"
    )
    lower_case: Flag = Field(
        default=DEFAULT_REQUIRE_LOWER_CASE, alias="lowerCase", description="Require lowercase letters"
    )
    number: Flag = Field(default=DEFAULT_REQUIRE_NUMBER, description="Require numeric digits")
    special_symbol: Flag = Field(
        default=DEFAULT_REQUIRE_SPECIAL_SYMBOL,
        alias="specialSymbol",
        description="Require a character outside A-Z, a-z and 0-9",
    )
    min_length: MinLength = Field(
        default=DEFAULT_MIN_LENGTH, alias="minLength", description="Minimum length (None/0 = no minimum)"
    )
    max_length: MaxLength = Field(
        default=DEFAULT_MAX_LENGTH, alias="maxLength", description="Maximum length (None/0 = no maximum)"
    )

    def merge(self, options: Mapping[str, Any]) -> "Requirements":
        """Return new requirements with the given options applied field by field.

        Args:
            options: Partial configuration keyed by option name (``minLength``)
                or field name (``min_length``). Unknown keys are ignored.

        Returns:
            New Requirements instance

        Raises:
            InvalidRequirementsError: If options is not a mapping
        """
        if not isinstance(options, Mapping):
            raise InvalidRequirementsError(type(options).__name__)

        data = self.model_dump(by_alias=True)
        for key, value in options.items():
            name = FIELD_ALIASES.get(key, key)
            if name in data:
                data[name] = value

        return Requirements.model_validate(data)
