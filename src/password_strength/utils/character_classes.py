"""ASCII character class helpers."""

from typing import Any

from password_strength.constants.strength import LOWER_CASE, NUMBER, SYMBOL, UPPER_CASE


def coerce_password(password: Any) -> str:
    """Coerce a candidate password to text.

    Args:
        password: Candidate password of any type

    Returns:
        The password as a string, "" for None
    """
    if password is None:
        return ""
    if isinstance(password, bytes):
        return password.decode("utf-8", errors="replace")
    return str(password)


def classify(char: str) -> str:
    """Get the character class of a single character.

    Only ASCII letters and digits are classified as such; everything else,
    including non-ASCII letters, is a symbol.
    """
    if "A" <= char <= "Z":
        return UPPER_CASE
    if "a" <= char <= "z":
        return LOWER_CASE
    if "0" <= char <= "9":
        return NUMBER
    return SYMBOL


def count_classes(password: str) -> dict[str, int]:
    """Count the characters of each class in one pass.

    Args:
        password: Password to scan

    Returns:
        Count per class name, zero for absent classes
    """
    counts = {UPPER_CASE: 0, LOWER_CASE: 0, NUMBER: 0, SYMBOL: 0}
    for char in password:
        counts[classify(char)] += 1
    return counts


def contains_class(password: str, char_class: str) -> bool:
    """Check whether any character of the password belongs to the class."""
    return any(classify(char) == char_class for char in password)
