"""Score domain models."""

from decimal import Decimal
from enum import IntEnum

from pydantic import BaseModel, ConfigDict

from password_strength.constants.strength import STRENGTH_THRESHOLDS


class StrengthCategory(IntEnum):
    """Coarse password strength category."""

    WEAK = 1
    AVERAGE = 2
    STRONG = 3
    SECURE = 4

    @property
    def threshold(self) -> int | None:
        """Inclusive upper score bound, None for the unbounded category."""
        return STRENGTH_THRESHOLDS[self.value]

    @classmethod
    def from_score(cls, score: float) -> "StrengthCategory":
        """Get the first category whose threshold the score does not exceed."""
        for category in cls:
            if category.threshold is not None and score <= category.threshold:
                return category
        return cls.SECURE


class CharacterClassCounts(BaseModel):
    """Character class composition of a single password."""

    model_config = ConfigDict(frozen=True)

    uppers: int = 0
    lowers: int = 0
    numbers: int = 0
    symbols: int = 0
    excess: int = 0
    combo: int = 0

    @property
    def classes_present(self) -> int:
        """Number of character classes occurring at least once."""
        return sum(1 for count in (self.uppers, self.lowers, self.numbers, self.symbols) if count > 0)


class ScoreBreakdown(BaseModel):
    """Every term of a strength score computation."""

    model_config = ConfigDict(frozen=True)

    counts: CharacterClassCounts
    length: int

    # Bonus contributions
    length_bonus: int
    excess_bonus: int
    upper_case_bonus: int
    lower_case_bonus: int
    number_bonus: int
    symbol_bonus: int
    combo_bonus: int
    base_score: int

    # Brute force estimate
    keyspace_size: int
    brute_force_minutes: Decimal
    multiplier: float

    weighted_score: float

    @property
    def category(self) -> StrengthCategory:
        """Strength category of the weighted score."""
        return StrengthCategory.from_score(self.weighted_score)
