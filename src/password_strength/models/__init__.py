"""Domain models package."""

from password_strength.models.requirements import Requirements
from password_strength.models.score import CharacterClassCounts, ScoreBreakdown, StrengthCategory

__all__ = [
    "CharacterClassCounts",
    "Requirements",
    "ScoreBreakdown",
    "StrengthCategory",
]
