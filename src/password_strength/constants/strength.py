"""Centralized scoring constants for password strength evaluation.

This module provides a single source of truth for the alphabet sizes, bonus
weights, category thresholds and brute-force brackets used by the scorer.
"""

from decimal import Decimal
from typing import Final

# =============================================================================
# Character Class Alphabets
# =============================================================================

UPPER_CASE: Final[str] = "upperCase"
LOWER_CASE: Final[str] = "lowerCase"
NUMBER: Final[str] = "number"
SYMBOL: Final[str] = "symbol"
SPECIAL_SYMBOL: Final[str] = "specialSymbol"

# Characters an attacker has to try per position when a class is present
ALPHABET_SIZES: Final[dict[str, int]] = {
    UPPER_CASE: 26,
    LOWER_CASE: 26,
    NUMBER: 10,
    SYMBOL: 33,
}

# =============================================================================
# Bonus Weights
# =============================================================================

EXCESS_BONUS: Final[int] = 1

# Symbol units are weighted with SPECIAL_SYMBOL; the SYMBOL weight is unused
BONUS_WEIGHTS: Final[dict[str, int]] = {
    UPPER_CASE: 3,
    LOWER_CASE: 3,
    NUMBER: 3,
    SYMBOL: 4,
    SPECIAL_SYMBOL: 5,
}

# Length beyond max(EXCESS_LENGTH_FLOOR, min_length) counts as excess
EXCESS_LENGTH_FLOOR: Final[int] = 6
LENGTH_BONUS_PER_CHAR: Final[int] = 10
LENGTH_BONUS_CAP: Final[int] = 25

COMBO_BONUS_PER_CLASS: Final[int] = 10

# =============================================================================
# Brute Force Estimate
# =============================================================================

GUESSES_PER_MINUTE: Final[int] = 2_000_000_000
BRUTE_FORCE_PRECISION: Final[int] = 2

# (exclusive upper bound in minutes, score multiplier), ascending
BRUTE_FORCE_MULTIPLIERS: Final[tuple[tuple[Decimal, float], ...]] = (
    (Decimal(100), 0.5),
    (Decimal(1000), 1.0),
    (Decimal(10000), 1.5),
    (Decimal(100000), 2.0),
)
BRUTE_FORCE_MAX_MULTIPLIER: Final[float] = 3.0

# =============================================================================
# Strength Categories
# =============================================================================

# Inclusive upper score bound per category value; None is unbounded
STRENGTH_THRESHOLDS: Final[dict[int, int | None]] = {
    1: 50,
    2: 250,
    3: 300,
    4: None,
}

# =============================================================================
# Requirement Defaults
# =============================================================================

DEFAULT_REQUIRE_UPPER_CASE: Final[bool] = True
DEFAULT_REQUIRE_LOWER_CASE: Final[bool] = True
DEFAULT_REQUIRE_NUMBER: Final[bool] = True
DEFAULT_REQUIRE_SPECIAL_SYMBOL: Final[bool] = True
DEFAULT_MIN_LENGTH: Final[int] = 6
DEFAULT_MAX_LENGTH: Final[int | None] = None
