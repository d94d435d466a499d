"""Shared constants for goldlex.

This module provides centralized constants used across the expression,
value and formatting packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Unit ratios: Copper per silver/gold and per notation multiple of gold
- Notation: Gold notation letters and their multipliers
- Numeric bounds: Safe float integers and SQL BIGINT domains
- Decimal precision: Working precision for all copper arithmetic

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal
from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Unit ratios
    "COPPER_PER_COPPER",
    "COPPER_PER_SILVER",
    "COPPER_PER_GOLD",
    "COPPER_PER_THOUSAND_GOLD",
    "COPPER_PER_MILLION_GOLD",
    "COPPER_PER_BILLION_GOLD",
    # Notation
    "GOLD_NOTATION_COPPER_MULTIPLIERS",
    "GROUP_SEPARATORS",
    # Numeric bounds
    "MIN_SAFE_INTEGER",
    "MAX_SAFE_INTEGER",
    "MIN_SIGNED_BIGINT",
    "MAX_SIGNED_BIGINT",
    "MIN_UNSIGNED_BIGINT",
    "MAX_UNSIGNED_BIGINT",
    # Decimal precision
    "DECIMAL_PRECISION",
    # Formatting
    "DEFAULT_GROUPING_LOCALE",
]

# ============================================================================
# UNIT RATIOS
# ============================================================================
#
# Copper is the storage unit. Every other unit is an exact integral multiple
# of copper, so conversions never leave the Decimal domain:
#
#   1 silver = 100 copper
#   1 gold   = 100 silver = 10,000 copper
#
# ============================================================================

_HUNDRED: Decimal = Decimal(100)

COPPER_PER_COPPER: Decimal = Decimal(1)
COPPER_PER_SILVER: Decimal = COPPER_PER_COPPER * _HUNDRED
COPPER_PER_GOLD: Decimal = COPPER_PER_SILVER * _HUNDRED

COPPER_PER_THOUSAND_GOLD: Decimal = COPPER_PER_GOLD * Decimal(1_000)
COPPER_PER_MILLION_GOLD: Decimal = COPPER_PER_GOLD * Decimal(1_000_000)
COPPER_PER_BILLION_GOLD: Decimal = COPPER_PER_GOLD * Decimal(1_000_000_000)

# ============================================================================
# NOTATION
# ============================================================================

# Copper multiplier per notation letter (lowercase keys; lookups lowercase first).
GOLD_NOTATION_COPPER_MULTIPLIERS: MappingProxyType[str, Decimal] = MappingProxyType({
    "g": COPPER_PER_GOLD,
    "k": COPPER_PER_THOUSAND_GOLD,
    "m": COPPER_PER_MILLION_GOLD,
    "b": COPPER_PER_BILLION_GOLD,
})

# Digit group separators accepted inside integer parts ("1,234" or "1_234").
GROUP_SEPARATORS: str = ",_"

# ============================================================================
# NUMERIC BOUNDS
# ============================================================================

# Largest magnitude a float holds with every integer exactly representable.
# Float segments outside this range have already lost precision.
MAX_SAFE_INTEGER: int = 2**53 - 1
MIN_SAFE_INTEGER: int = -MAX_SAFE_INTEGER

# SQL BIGINT domains (64-bit two's complement and unsigned).
MIN_SIGNED_BIGINT: int = -(2**63)
MAX_SIGNED_BIGINT: int = 2**63 - 1
MIN_UNSIGNED_BIGINT: int = 0
MAX_UNSIGNED_BIGINT: int = 2**64 - 1

# ============================================================================
# DECIMAL PRECISION
# ============================================================================

# Minimum significant digits of every copper context, and the digits division
# keeps beyond its operands. Contexts widen past it to fit their operands.
DECIMAL_PRECISION: int = 50

# ============================================================================
# FORMATTING
# ============================================================================

# Locale whose grouping rules render the gold segment ("1,234,567").
DEFAULT_GROUPING_LOCALE: str = "en_US"
