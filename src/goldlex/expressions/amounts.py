"""Copper term builders shared by the expression parsers.

Every helper takes raw capture text and returns an exact Decimal. Captured
digits are converted with Decimal(str) only; float never appears.
"""

from decimal import Decimal

from goldlex.constants import (
    COPPER_PER_GOLD,
    COPPER_PER_SILVER,
    GOLD_NOTATION_COPPER_MULTIPLIERS,
    GROUP_SEPARATORS,
)

from .expression_type import Captures

__all__ = [
    "CAPTURE_COPPER",
    "CAPTURE_FRACTIONAL_COPPER",
    "CAPTURE_FRACTIONAL_GOLD",
    "CAPTURE_GOLD",
    "CAPTURE_NEGATIVE",
    "CAPTURE_NOTATION",
    "CAPTURE_SILVER",
    "copper_term",
    "gold_term",
    "is_negative",
    "notation_multiplier",
    "signed",
    "silver_term",
    "strip_group_separators",
]

# Capture slot names shared by regex groups and the GenericGold scanner.
CAPTURE_NEGATIVE: str = "neg"
CAPTURE_GOLD: str = "gold"
CAPTURE_FRACTIONAL_GOLD: str = "fractional_gold"
CAPTURE_NOTATION: str = "notation"
CAPTURE_SILVER: str = "silver"
CAPTURE_COPPER: str = "copper"
CAPTURE_FRACTIONAL_COPPER: str = "fractional_copper"

_SEPARATOR_TABLE = str.maketrans("", "", GROUP_SEPARATORS)


def strip_group_separators(digits: str) -> str:
    """Remove ',' and '_' digit group separators.

    Example:
        >>> strip_group_separators("29_475_839")
        '29475839'
    """
    return digits.translate(_SEPARATOR_TABLE)


def is_negative(captures: Captures) -> bool:
    """True when the expression carried a leading '-'."""
    return bool(captures.get(CAPTURE_NEGATIVE))


def signed(amount: Decimal, negative: bool) -> Decimal:
    """Apply the expression sign to an unsigned amount."""
    return -amount if negative else amount


def notation_multiplier(notation: str | None) -> Decimal:
    """Copper per unit of gold written with the given notation letter.

    A missing notation means plain gold.
    """
    if not notation:
        return COPPER_PER_GOLD
    return GOLD_NOTATION_COPPER_MULTIPLIERS[notation.lower()]


def gold_term(integer: str, fraction: str | None, notation: str | None) -> Decimal:
    """Unsigned copper for INT[.FRAC][NOTATION].

    The fractional part is scaled by the same notation multiplier as the
    integral part: "1.5k" is 1,500 gold, not 1,000 gold and 50 silver.
    Callers run it under a context wide enough for the captured digits.

    Example:
        >>> gold_term("1", "5", "k")
        Decimal('15000000.0')
    """
    amount = Decimal(strip_group_separators(integer))
    if fraction:
        amount += Decimal(f"0.{fraction}")
    return amount * notation_multiplier(notation)


def silver_term(silver: str | None) -> Decimal:
    """Unsigned copper for a silver segment (0 when absent)."""
    if not silver:
        return Decimal(0)
    return Decimal(silver) * COPPER_PER_SILVER


def copper_term(copper: str | None, fraction: str | None = None) -> Decimal:
    """Unsigned copper for a copper segment with optional fraction (0 when absent)."""
    if not copper:
        return Decimal(0)
    digits = strip_group_separators(copper)
    if fraction:
        return Decimal(f"{digits}.{fraction}")
    return Decimal(digits)
