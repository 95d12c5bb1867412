"""Domain-specific exceptions for password strength evaluation.

Password evaluation itself never raises; these exceptions only cover
misconfiguration by the caller.
"""

from typing import Any


class PasswordStrengthError(Exception):
    """Base exception for all password strength errors."""

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Configuration Errors
# =============================================================================


class InvalidRequirementsError(PasswordStrengthError):
    """Raised when requirement options are not a mapping."""

    def __init__(self, options_type: str | None = None) -> None:
        message = "Password requirements must be a mapping"
        details = {"options_type": options_type} if options_type else {}
        super().__init__(message, details)
