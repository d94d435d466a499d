"""Enumerations for goldlex type-safe constants.

Uses StrEnum for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ExpressionTypeName(StrEnum):
    """Registered gold expression type names.

    StrEnum provides automatic string conversion:
    str(ExpressionTypeName.GENERIC_GOLD) == "GenericGold"
    """

    EXPLICIT_COPPER = "ExplicitCopper"
    """Copper only, any magnitude, optional fraction: 1,234.5c"""

    SILVER_AND_COPPER = "SilverAndCopper"
    """Both silver and copper, silver first: 12s 34c"""

    SILVER_OR_COPPER = "SilverOrCopper"
    """Exactly one of silver or copper: 12s"""

    EXPLICIT_ONLY_GOLD = "ExplicitOnlyGold"
    """Integral gold with mandatory notation: 1,000k"""

    EXPLICIT_GOLD = "ExplicitGold"
    """Gold with mandatory notation and optional fraction: 1.5k"""

    GENERIC_GOLD = "GenericGold"
    """Gold with optional fraction, notation and silver/copper suffix: 1g 23s 45c"""


class FormatterSourceType(StrEnum):
    """Input shape a GoldFormatter callback expects.

    StrEnum provides automatic string conversion: str(FormatterSourceType.SEGMENTS) == "segments"
    """

    GOLD_INSTANCE = "gold_instance"
    """Callback receives the Gold value itself"""

    SEGMENTS = "segments"
    """Callback receives (is_negative, gold, silver, copper)"""


__all__ = [
    "ExpressionTypeName",
    "FormatterSourceType",
]
