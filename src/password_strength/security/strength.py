"""Password strength evaluation entry point."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from password_strength.config import Settings, get_settings
from password_strength.models.requirements import Requirements
from password_strength.models.score import CharacterClassCounts, ScoreBreakdown, StrengthCategory
from password_strength.security.scorer import StrengthScorer
from password_strength.security.validator import RequirementValidator, describe_violation


class PasswordStrength:
    """Validate passwords against requirements and estimate their strength.

    Validation and scoring are independent: a password failing validation is
    still scored. The last computed counts and breakdown are kept for
    inspection, so an instance must not be shared between threads.
    """

    WEAK = StrengthCategory.WEAK
    AVERAGE = StrengthCategory.AVERAGE
    STRONG = StrengthCategory.STRONG
    SECURE = StrengthCategory.SECURE

    def __init__(self, requirements: Requirements | None = None) -> None:
        self._requirements = requirements or Requirements()
        self.last_errors: list[str] = []
        self.last_score: CharacterClassCounts | None = None
        self.last_breakdown: ScoreBreakdown | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> PasswordStrength:
        """Create an instance using the default requirements from settings."""
        return cls(Requirements().merge(settings.requirement_options))

    @property
    def requirements(self) -> Requirements:
        """Get the current requirements."""
        return self._requirements

    def set_requirements(self, options: Mapping[str, Any]) -> None:
        """Merge options over the current requirements.

        Args:
            options: Partial configuration, e.g. ``{"minLength": 8, "number": False}``

        Raises:
            InvalidRequirementsError: If options is not a mapping
        """
        self._requirements = self._requirements.merge(options)

    def is_valid(self, password: Any, vague_blacklist: Sequence[str] | None = None) -> bool:
        """Validate password meets every enabled requirement.

        Args:
            password: Password to validate
            vague_blacklist: Accepted for interface compatibility, not consulted

        Returns:
            True if password meets all enabled requirements
        """
        self.last_errors = []
        violation = RequirementValidator(self._requirements).validate(
            password, vague_blacklist=vague_blacklist
        )
        if violation is None:
            return True
        self.last_errors.append(describe_violation(violation, self._requirements))
        return False

    def get_score(self, password: Any, vague_blacklist: Sequence[str] | None = None) -> CharacterClassCounts:
        """Get the character class counts of a password."""
        self.last_score = StrengthScorer(self._requirements).get_score(password, vague_blacklist)
        return self.last_score

    def get_score_breakdown(
        self, password: Any, vague_blacklist: Sequence[str] | None = None
    ) -> ScoreBreakdown:
        """Get every term of the strength score of a password."""
        breakdown = StrengthScorer(self._requirements).get_score_breakdown(password, vague_blacklist)
        self.last_score = breakdown.counts
        self.last_breakdown = breakdown
        return breakdown

    def get_strength_score(self, password: Any, vague_blacklist: Sequence[str] | None = None) -> float:
        """Get the weighted strength score of a password (never negative)."""
        return self.get_score_breakdown(password, vague_blacklist).weighted_score

    def get_strength(self, password: Any, vague_blacklist: Sequence[str] | None = None) -> StrengthCategory:
        """Get the strength category of a password."""
        return StrengthCategory.from_score(self.get_strength_score(password, vague_blacklist))


def create_password_strength(settings: Settings | None = None) -> PasswordStrength:
    """Create a password strength evaluator configured from settings.

    Args:
        settings: Optional settings (uses cached environment settings if not provided)

    Returns:
        New PasswordStrength instance
    """
    return PasswordStrength.from_settings(settings or get_settings())
