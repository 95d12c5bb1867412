"""Security package."""

from password_strength.security.scorer import StrengthScorer
from password_strength.security.strength import PasswordStrength, create_password_strength
from password_strength.security.validator import RequirementValidator, RequirementViolation

__all__ = [
    "PasswordStrength",
    "RequirementValidator",
    "RequirementViolation",
    "StrengthScorer",
    "create_password_strength",
]
