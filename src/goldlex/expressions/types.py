"""The six built-in gold expression types.

    Name              Shape                              Example
    ExplicitCopper    -?INT(.FRAC)?c                     29,475,839.99c
    SilverAndCopper   -?SSs CCc                          12s 34c
    SilverOrCopper    -?SSs | -?CCc                      12s
    ExplicitOnlyGold  -?INT NOTATION                     1_000k
    ExplicitGold      -?INT(.FRAC)? NOTATION             1.5k
    GenericGold       -?INT(.FRAC)?NOTATION? SUFFIX?     1g 23s 45c

INT accepts uniform ',' or '_' grouping of three digits. SS and CC are one
or two digits. A leading '-' negates every term of the expression.
"""

from decimal import Decimal

from goldlex.enums import ExpressionTypeName

from .amounts import (
    CAPTURE_COPPER,
    CAPTURE_FRACTIONAL_COPPER,
    CAPTURE_FRACTIONAL_GOLD,
    CAPTURE_GOLD,
    CAPTURE_NOTATION,
    CAPTURE_SILVER,
    copper_term,
    gold_term,
    is_negative,
    signed,
    silver_term,
)
from .expression_type import Captures, ExpressionType
from .generic_gold import match_generic_gold

__all__ = [
    "EXPLICIT_COPPER",
    "EXPLICIT_GOLD",
    "EXPLICIT_ONLY_GOLD",
    "GENERIC_GOLD",
    "SILVER_AND_COPPER",
    "SILVER_OR_COPPER",
]

# ============================================================================
# PATTERN FRAGMENTS
# ============================================================================

_SIGN = r"(?P<neg>-)?"
_INT = r"(?:[0-9]{1,3}(?:(?:,[0-9]{3})+|(?:_[0-9]{3})+)|[0-9]+)"
_SEGMENT = r"[0-9]{1,2}"
_NOTATION = r"(?P<notation>[gkmb])"

# ============================================================================
# PARSERS
# ============================================================================


def _parse_explicit_copper(captures: Captures) -> Decimal | None:
    copper = captures.get(CAPTURE_COPPER)
    if copper is None:
        return None
    amount = copper_term(copper, captures.get(CAPTURE_FRACTIONAL_COPPER))
    return signed(amount, is_negative(captures))


def _parse_silver_and_copper(captures: Captures) -> Decimal | None:
    silver = captures.get(CAPTURE_SILVER)
    copper = captures.get(CAPTURE_COPPER)
    if silver is None or copper is None:
        return None
    return signed(silver_term(silver) + copper_term(copper), is_negative(captures))


def _parse_silver_or_copper(captures: Captures) -> Decimal | None:
    silver = captures.get(CAPTURE_SILVER)
    copper = captures.get(CAPTURE_COPPER)
    if (silver is None) == (copper is None):
        return None
    return signed(silver_term(silver) + copper_term(copper), is_negative(captures))


def _parse_gold(captures: Captures) -> Decimal | None:
    gold = captures.get(CAPTURE_GOLD)
    if gold is None:
        return None
    amount = gold_term(
        gold,
        captures.get(CAPTURE_FRACTIONAL_GOLD),
        captures.get(CAPTURE_NOTATION),
    )
    amount += silver_term(captures.get(CAPTURE_SILVER))
    amount += copper_term(captures.get(CAPTURE_COPPER))
    return signed(amount, is_negative(captures))


# ============================================================================
# EXPRESSION TYPES
# ============================================================================

EXPLICIT_COPPER: ExpressionType = ExpressionType.from_pattern(
    ExpressionTypeName.EXPLICIT_COPPER.value,
    rf"{_SIGN}(?P<copper>{_INT})(?:\.(?P<fractional_copper>[0-9]+))?c",
    _parse_explicit_copper,
    "Copper of any magnitude with optional fractional copper: 1,234.5c",
)

SILVER_AND_COPPER: ExpressionType = ExpressionType.from_pattern(
    ExpressionTypeName.SILVER_AND_COPPER.value,
    rf"{_SIGN}(?P<silver>{_SEGMENT})s[ ]*(?P<copper>{_SEGMENT})c",
    _parse_silver_and_copper,
    "Silver followed by copper, 0-99 each: 12s 34c",
)

SILVER_OR_COPPER: ExpressionType = ExpressionType.from_pattern(
    ExpressionTypeName.SILVER_OR_COPPER.value,
    rf"{_SIGN}(?:(?P<silver>{_SEGMENT})s|(?P<copper>{_SEGMENT})c)",
    _parse_silver_or_copper,
    "Exactly one of silver or copper, 0-99: 12s",
)

EXPLICIT_ONLY_GOLD: ExpressionType = ExpressionType.from_pattern(
    ExpressionTypeName.EXPLICIT_ONLY_GOLD.value,
    rf"{_SIGN}(?P<gold>{_INT}){_NOTATION}",
    _parse_gold,
    "Integral gold with mandatory notation: 1_000k",
)

EXPLICIT_GOLD: ExpressionType = ExpressionType.from_pattern(
    ExpressionTypeName.EXPLICIT_GOLD.value,
    rf"{_SIGN}(?P<gold>{_INT})(?:\.(?P<fractional_gold>[0-9]+))?{_NOTATION}",
    _parse_gold,
    "Gold with mandatory notation and optional fraction: 1.5k",
)

GENERIC_GOLD: ExpressionType = ExpressionType(
    name=ExpressionTypeName.GENERIC_GOLD.value,
    matcher=match_generic_gold,
    parser=_parse_gold,
    description="Gold with optional fraction, notation and silver/copper suffix: 1g 23s 45c",
)
