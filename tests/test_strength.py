"""Strength category and evaluator tests."""

import pytest

import password_strength
from password_strength import (
    PasswordStrength,
    Settings,
    StrengthCategory,
    create_password_strength,
)
from password_strength.constants.strength import STRENGTH_THRESHOLDS

PASSWORDS_STRENGTH = [
    ("asdf", StrengthCategory.WEAK),
    ("ASDF", StrengthCategory.WEAK),
    ("strongpassword", StrengthCategory.AVERAGE),
    ("a$%5;", StrengthCategory.WEAK),
    ("a12br", StrengthCategory.WEAK),
    ("AFasd22#$", StrengthCategory.STRONG),
    ("abr12", StrengthCategory.WEAK),
    ("Aasdfqw", StrengthCategory.WEAK),
    ("asdf#$12", StrengthCategory.AVERAGE),
    ("ASDasdf@#$12", StrengthCategory.SECURE),
]


class TestStrengthCategory:
    """Test category constants and threshold lookup."""

    def test_constant_values(self) -> None:
        """Verify the category constants."""
        assert password_strength.WEAK == PasswordStrength.WEAK == 1
        assert password_strength.AVERAGE == PasswordStrength.AVERAGE == 2
        assert password_strength.STRONG == PasswordStrength.STRONG == 3
        assert password_strength.SECURE == PasswordStrength.SECURE == 4

    def test_thresholds_ascending(self) -> None:
        """Verify thresholds ascend and end with the unbounded sentinel."""
        bounds = [STRENGTH_THRESHOLDS[category] for category in StrengthCategory]

        assert bounds[-1] is None
        assert all(a < b for a, b in zip(bounds[:-2], bounds[1:-1]))

    @pytest.mark.parametrize(
        "score,expected",
        [
            (0, StrengthCategory.WEAK),
            (50, StrengthCategory.WEAK),
            (50.5, StrengthCategory.AVERAGE),
            (250, StrengthCategory.AVERAGE),
            (250.5, StrengthCategory.STRONG),
            (300, StrengthCategory.STRONG),
            (300.5, StrengthCategory.SECURE),
            (10**9, StrengthCategory.SECURE),
            (float("inf"), StrengthCategory.SECURE),
        ],
    )
    def test_from_score(self, score: float, expected: StrengthCategory) -> None:
        """Verify the first threshold the score does not exceed wins."""
        assert StrengthCategory.from_score(score) == expected

    @pytest.mark.parametrize("password,expected", PASSWORDS_STRENGTH)
    def test_get_strength(self, password: str, expected: StrengthCategory) -> None:
        """Verify documented password categories."""
        validation = PasswordStrength()

        strength = validation.get_strength(password)

        assert strength == expected, validation.get_strength_score(password)


class TestIndependence:
    """Test that scoring does not depend on validation."""

    def test_invalid_password_still_scored(self) -> None:
        """Verify a password failing validation gets a category."""
        validation = PasswordStrength()

        assert validation.is_valid("strongpassword") is False
        assert validation.get_strength("strongpassword") == StrengthCategory.AVERAGE


class TestDiagnostics:
    """Test the retained last computation."""

    def test_last_score_retained(self) -> None:
        """Verify the last counts and breakdown are kept for inspection."""
        validation = PasswordStrength()
        assert validation.last_score is None
        assert validation.last_breakdown is None

        validation.get_strength("AFasd22#$")

        assert validation.last_score is not None
        assert validation.last_score.uppers == 2
        assert validation.last_breakdown is not None
        assert validation.last_breakdown.weighted_score == 267.0

    def test_get_score_updates_last_score(self) -> None:
        """Verify get_score records the counts it returns."""
        validation = PasswordStrength()

        counts = validation.get_score("abc")

        assert validation.last_score == counts

    def test_last_score_replaced(self) -> None:
        """Verify each call replaces the retained counts."""
        validation = PasswordStrength()
        validation.get_strength_score("abc")
        validation.get_strength_score("12")

        assert validation.last_score is not None
        assert validation.last_score.lowers == 0
        assert validation.last_score.numbers == 2


class TestSettings:
    """Test settings driven construction."""

    def test_settings_defaults_match_requirements(self) -> None:
        """Verify default settings produce the default requirements."""
        validation = create_password_strength(Settings())

        assert validation.requirements == PasswordStrength().requirements

    def test_settings_override_requirements(self) -> None:
        """Verify settings values become the instance requirements."""
        settings = Settings(min_length=10, require_special_symbol=False, max_length=32)

        validation = create_password_strength(settings)

        assert validation.requirements.min_length == 10
        assert validation.requirements.special_symbol is False
        assert validation.requirements.max_length == 32
        assert validation.is_valid("Abcdefgh12") is True

    def test_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Verify settings are read from prefixed environment variables."""
        monkeypatch.setenv("PASSWORD_STRENGTH_MIN_LENGTH", "8")
        monkeypatch.setenv("PASSWORD_STRENGTH_REQUIRE_NUMBER", "false")

        settings = Settings()

        assert settings.min_length == 8
        assert settings.require_number is False

    def test_settings_change_excess_floor(self) -> None:
        """Verify a larger minimum length shrinks the excess."""
        validation = create_password_strength(Settings(min_length=10))

        assert validation.get_score("strongpassword").excess == 4
