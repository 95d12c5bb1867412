"""Password requirement validation and brute-force strength estimation."""

from password_strength.config import Settings, get_settings
from password_strength.exceptions import InvalidRequirementsError, PasswordStrengthError
from password_strength.models import (
    CharacterClassCounts,
    Requirements,
    ScoreBreakdown,
    StrengthCategory,
)
from password_strength.security import (
    PasswordStrength,
    RequirementValidator,
    RequirementViolation,
    StrengthScorer,
    create_password_strength,
)

WEAK = StrengthCategory.WEAK
AVERAGE = StrengthCategory.AVERAGE
STRONG = StrengthCategory.STRONG
SECURE = StrengthCategory.SECURE

__all__ = [
    "AVERAGE",
    "SECURE",
    "STRONG",
    "WEAK",
    "CharacterClassCounts",
    "InvalidRequirementsError",
    "PasswordStrength",
    "PasswordStrengthError",
    "RequirementValidator",
    "RequirementViolation",
    "Requirements",
    "ScoreBreakdown",
    "Settings",
    "StrengthCategory",
    "StrengthScorer",
    "create_password_strength",
    "get_settings",
]
