"""Password strength scoring."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import MAX_PREC, Decimal, localcontext
from typing import Any

from password_strength.constants.strength import (
    ALPHABET_SIZES,
    BONUS_WEIGHTS,
    BRUTE_FORCE_MAX_MULTIPLIER,
    BRUTE_FORCE_MULTIPLIERS,
    BRUTE_FORCE_PRECISION,
    COMBO_BONUS_PER_CLASS,
    EXCESS_BONUS,
    EXCESS_LENGTH_FLOOR,
    GUESSES_PER_MINUTE,
    LENGTH_BONUS_CAP,
    LENGTH_BONUS_PER_CHAR,
    LOWER_CASE,
    NUMBER,
    SPECIAL_SYMBOL,
    SYMBOL,
    UPPER_CASE,
)
from password_strength.models.requirements import Requirements
from password_strength.models.score import CharacterClassCounts, ScoreBreakdown, StrengthCategory
from password_strength.utils.character_classes import coerce_password, count_classes
from password_strength.utils.secure_logging import log_evaluation

logger = logging.getLogger(__name__)


class StrengthScorer:
    """Heuristic scorer estimating resistance to brute-force guessing.

    The score combines character class diversity, length beyond a floor and
    a multiplier derived from the time needed to exhaust the keyspace.
    """

    def __init__(self, requirements: Requirements | None = None) -> None:
        self.requirements = requirements or Requirements()

    @property
    def length_floor(self) -> int:
        """Length after which each extra character counts as excess."""
        return max(EXCESS_LENGTH_FLOOR, self.requirements.min_length or 0)

    def get_score(
        self, password: Any, vague_blacklist: Sequence[str] | None = None
    ) -> CharacterClassCounts:
        """Decompose a password into character class counts.

        Args:
            password: Password to decompose, coerced to text
            vague_blacklist: Accepted for interface compatibility, not consulted

        Returns:
            Fresh CharacterClassCounts for the password
        """
        password = coerce_password(password)
        classes = count_classes(password)
        counts = CharacterClassCounts(
            uppers=classes[UPPER_CASE],
            lowers=classes[LOWER_CASE],
            numbers=classes[NUMBER],
            symbols=classes[SYMBOL],
            excess=max(0, len(password) - self.length_floor),
        )
        return counts.model_copy(
            update={"combo": (counts.classes_present - 1) * COMBO_BONUS_PER_CLASS}
        )

    @staticmethod
    def get_keyspace_size(counts: CharacterClassCounts) -> int:
        """Estimate the number of candidate characters per position.

        Each present class contributes its alphabet size once, however many
        of its characters the password holds.
        """
        return (
            min(counts.uppers, 1) * ALPHABET_SIZES[UPPER_CASE]
            + min(counts.lowers, 1) * ALPHABET_SIZES[LOWER_CASE]
            + min(counts.numbers, 1) * ALPHABET_SIZES[NUMBER]
            + min(counts.symbols, 1) * ALPHABET_SIZES[SYMBOL]
        )

    @staticmethod
    def count_combinations(keyspace_size: int, length: int) -> int:
        """Count the passwords of the given length over the keyspace (``0 ** 0`` is 1)."""
        return keyspace_size**length

    @classmethod
    def estimate_brute_force_minutes(cls, keyspace_size: int, length: int) -> Decimal:
        """Estimate minutes needed to try every password of the keyspace.

        Integer arithmetic keeps the estimate exact for any length; the result
        is truncated, not rounded, to two decimal places.

        Args:
            keyspace_size: Candidate characters per position
            length: Password length

        Returns:
            Estimated minutes
        """
        combinations = cls.count_combinations(keyspace_size, length)
        scaled = combinations * 10**BRUTE_FORCE_PRECISION // GUESSES_PER_MINUTE
        with localcontext() as ctx:
            ctx.prec = MAX_PREC
            return Decimal(scaled).scaleb(-BRUTE_FORCE_PRECISION)

    @staticmethod
    def get_multiplier(brute_force_minutes: Decimal) -> float:
        """Get the score multiplier for a brute force estimate."""
        for limit, multiplier in BRUTE_FORCE_MULTIPLIERS:
            if brute_force_minutes < limit:
                return multiplier
        return BRUTE_FORCE_MAX_MULTIPLIER

    def get_score_breakdown(
        self, password: Any, vague_blacklist: Sequence[str] | None = None
    ) -> ScoreBreakdown:
        """Compute every term of the strength score.

        Args:
            password: Password to score
            vague_blacklist: Accepted for interface compatibility, not consulted

        Returns:
            ScoreBreakdown with the weighted score floored at zero
        """
        password = coerce_password(password)
        counts = self.get_score(password)

        length_bonus = min(LENGTH_BONUS_CAP, counts.excess * LENGTH_BONUS_PER_CHAR)
        excess_bonus = counts.excess * EXCESS_BONUS
        upper_case_bonus = counts.uppers * BONUS_WEIGHTS[UPPER_CASE]
        lower_case_bonus = counts.lowers * BONUS_WEIGHTS[LOWER_CASE]
        number_bonus = counts.numbers * BONUS_WEIGHTS[NUMBER]
        symbol_bonus = counts.symbols * BONUS_WEIGHTS[SPECIAL_SYMBOL]
        base_score = (
            length_bonus
            + excess_bonus
            + upper_case_bonus
            + lower_case_bonus
            + number_bonus
            + symbol_bonus
            + counts.combo
        )

        keyspace_size = self.get_keyspace_size(counts)
        brute_force_minutes = self.estimate_brute_force_minutes(keyspace_size, len(password))
        multiplier = self.get_multiplier(brute_force_minutes)

        breakdown = ScoreBreakdown(
            counts=counts,
            length=len(password),
            length_bonus=length_bonus,
            excess_bonus=excess_bonus,
            upper_case_bonus=upper_case_bonus,
            lower_case_bonus=lower_case_bonus,
            number_bonus=number_bonus,
            symbol_bonus=symbol_bonus,
            combo_bonus=counts.combo,
            base_score=base_score,
            keyspace_size=keyspace_size,
            brute_force_minutes=brute_force_minutes,
            multiplier=multiplier,
            weighted_score=max(0.0, base_score * multiplier),
        )
        log_evaluation(
            logger,
            "Password scored",
            password,
            base_score=base_score,
            multiplier=multiplier,
            weighted_score=breakdown.weighted_score,
        )
        return breakdown

    def get_strength_score(self, password: Any, vague_blacklist: Sequence[str] | None = None) -> float:
        """Get the weighted strength score of a password."""
        return self.get_score_breakdown(password, vague_blacklist).weighted_score

    def get_strength(
        self, password: Any, vague_blacklist: Sequence[str] | None = None
    ) -> StrengthCategory:
        """Get the strength category of a password."""
        return StrengthCategory.from_score(self.get_strength_score(password, vague_blacklist))
