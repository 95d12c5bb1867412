"""Password composition rule validation."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import StrEnum
from typing import Any

from password_strength.constants.strength import LOWER_CASE, NUMBER, SYMBOL, UPPER_CASE
from password_strength.models.requirements import Requirements
from password_strength.utils.character_classes import coerce_password, contains_class
from password_strength.utils.secure_logging import log_evaluation

logger = logging.getLogger(__name__)


class RequirementViolation(StrEnum):
    """Requirement a password failed, in evaluation order."""

    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    MISSING_UPPER_CASE = "missing_upper_case"
    MISSING_LOWER_CASE = "missing_lower_case"
    MISSING_NUMBER = "missing_number"
    MISSING_SPECIAL_SYMBOL = "missing_special_symbol"


class RequirementValidator:
    """Validator checking a password against a Requirements record."""

    def __init__(self, requirements: Requirements | None = None) -> None:
        self.requirements = requirements or Requirements()

    def find_violation(
        self, password: Any, requirements: Requirements | None = None
    ) -> RequirementViolation | None:
        """Find the first requirement the password violates.

        Checks run in a fixed order and stop at the first failure:
        minimum length, maximum length, uppercase, lowercase, digit and
        special symbol. Length checks are skipped when the bound is unset
        or not positive.

        Args:
            password: Password to check, coerced to text
            requirements: Optional requirements (uses own requirements if not provided)

        Returns:
            The violated requirement, or None if all enabled checks pass
        """
        rules = requirements or self.requirements
        password = coerce_password(password)
        length = len(password)

        if rules.min_length and rules.min_length > 0 and length < rules.min_length:
            return RequirementViolation.TOO_SHORT

        if rules.max_length and rules.max_length > 0 and length > rules.max_length:
            return RequirementViolation.TOO_LONG

        if rules.upper_case and not contains_class(password, UPPER_CASE):
            return RequirementViolation.MISSING_UPPER_CASE

        if rules.lower_case and not contains_class(password, LOWER_CASE):
            return RequirementViolation.MISSING_LOWER_CASE

        if rules.number and not contains_class(password, NUMBER):
            return RequirementViolation.MISSING_NUMBER

        if rules.special_symbol and not contains_class(password, SYMBOL):
            return RequirementViolation.MISSING_SPECIAL_SYMBOL

        return None

    def validate(
        self,
        password: Any,
        requirements: Requirements | None = None,
        vague_blacklist: Sequence[str] | None = None,
    ) -> RequirementViolation | None:
        """Validate a password and log the outcome.

        Args:
            password: Password to validate
            requirements: Optional requirements (uses own requirements if not provided)
            vague_blacklist: Accepted for interface compatibility, not consulted

        Returns:
            The violated requirement, or None if the password is valid
        """
        violation = self.find_violation(password, requirements)
        log_evaluation(
            logger,
            "Password validated",
            coerce_password(password),
            valid=violation is None,
            violation=violation.value if violation else None,
        )
        return violation

    def is_valid(
        self,
        password: Any,
        requirements: Requirements | None = None,
        vague_blacklist: Sequence[str] | None = None,
    ) -> bool:
        """Validate password meets every enabled requirement.

        Args:
            password: Password to validate
            requirements: Optional requirements (uses own requirements if not provided)
            vague_blacklist: Accepted for interface compatibility, not consulted

        Returns:
            True if password meets all enabled requirements
        """
        return self.validate(password, requirements, vague_blacklist) is None


def describe_violation(violation: RequirementViolation, requirements: Requirements) -> str:
    """Get a human readable message for a requirement violation.

    Args:
        violation: The violated requirement
        requirements: Requirements the password was checked against

    Returns:
        Error message
    """
    if violation is RequirementViolation.TOO_SHORT:
        return f"Password must be at least {requirements.min_length} characters"
    if violation is RequirementViolation.TOO_LONG:
        return f"Password must be at most {requirements.max_length} characters"
    if violation is RequirementViolation.MISSING_UPPER_CASE:
        return "Password must contain at least one uppercase letter"
    if violation is RequirementViolation.MISSING_LOWER_CASE:
        return "Password must contain at least one lowercase letter"
    if violation is RequirementViolation.MISSING_NUMBER:
        return "Password must contain at least one digit"
    return "Password must contain at least one special character"
