"""Decimal arithmetic configuration for copper amounts.

Provides a single frozen dataclass describing the decimal context used by
every Gold computation. Arithmetic runs inside ``decimal.localcontext`` with
a context built from it, so the caller's thread-local decimal context is
never read or modified.

Copper amounts have no magnitude limit. ``precision`` is therefore a floor,
not a ceiling: ``context_for`` widens it to cover every digit its operands
span, so addition, subtraction, multiplication, integer division and
remainder are exact. Those contexts also trap ``Inexact``. Division is the
one operation that rounds, keeping ``precision`` digits beyond the
operands' own.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import decimal
from dataclasses import dataclass

from goldlex.constants import DECIMAL_PRECISION

__all__ = [
    "DEFAULT_DECIMAL_CONFIG",
    "GOLD_DECIMAL_CONTEXT",
    "DecimalConfig",
    "digit_span",
    "division_context",
    "exact_context",
]

_ROUNDING_MODES: frozenset[str] = frozenset({
    decimal.ROUND_CEILING,
    decimal.ROUND_DOWN,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_UP,
    decimal.ROUND_05UP,
})

# Room for a carry out of the leading digit plus a sign-change borrow.
_CARRY_DIGITS = 2


def digit_span(value: decimal.Decimal) -> int:
    """Digits from the highest integer place down to the lowest fractional one.

    Zero and non-finite values span one digit.

    Example:
        >>> digit_span(decimal.Decimal("123.45"))
        5
        >>> digit_span(decimal.Decimal("1E+3"))
        4
        >>> digit_span(decimal.Decimal("0.001"))
        4
    """
    if not value.is_finite() or not value:
        return 1
    exponent = int(value.as_tuple().exponent)
    return max(value.adjusted(), 0) + max(-exponent, 0) + 1


@dataclass(frozen=True, slots=True)
class DecimalConfig:
    """Immutable configuration for copper arithmetic.

    Attributes:
        precision: Minimum significant digits of every context, and the
            extra digits kept by division (default: 50).
        rounding: Rounding mode for division results (default: ROUND_HALF_UP).

    Example:
        >>> config = DecimalConfig(precision=80)
        >>> config.to_context().prec
        80
    """

    precision: int = DECIMAL_PRECISION
    rounding: str = decimal.ROUND_HALF_UP

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If precision is not positive or rounding is not a
                decimal module rounding mode.
        """
        if self.precision <= 0:
            msg = "precision must be positive"
            raise ValueError(msg)
        if self.rounding not in _ROUNDING_MODES:
            msg = f"rounding must be a decimal rounding mode, got {self.rounding!r}"
            raise ValueError(msg)

    def to_context(self) -> decimal.Context:
        """Build a decimal Context with the standard traps enabled."""
        return decimal.Context(
            prec=self.precision,
            rounding=self.rounding,
            traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
        )

    def context_for(
        self,
        *operands: decimal.Decimal,
        extra_digits: int = 0,
        exact: bool = True,
    ) -> decimal.Context:
        """Build a context wide enough for the given operands.

        The precision is the sum of the operands' digit spans plus
        ``extra_digits`` and a carry allowance, and never less than
        ``precision``. That bounds every digit of a sum, difference,
        product, integer quotient or remainder of the operands.

        Args:
            *operands: Values the computation reads
            extra_digits: Further digits to reserve, e.g. for the longest
                number in a parsed expression
            exact: Trap ``Inexact`` so that any rounding raises

        Example:
            >>> big = decimal.Decimal(10) ** 60
            >>> context = DEFAULT_DECIMAL_CONFIG.context_for(big, decimal.Decimal(1))
            >>> with decimal.localcontext(context):
            ...     big + 1 - big
            Decimal('1')
        """
        context = self.to_context()
        needed = sum(map(digit_span, operands)) + extra_digits + _CARRY_DIGITS
        context.prec = max(self.precision, needed)
        if exact:
            context.traps[decimal.Inexact] = True
        return context


DEFAULT_DECIMAL_CONFIG: DecimalConfig = DecimalConfig()

# Shared template context. decimal.localcontext() copies it on entry, so the
# template itself is never mutated.
GOLD_DECIMAL_CONTEXT: decimal.Context = DEFAULT_DECIMAL_CONFIG.to_context()


def exact_context(*operands: decimal.Decimal, extra_digits: int = 0) -> decimal.Context:
    """Context under which add, sub, mul, // and % of ``operands`` never round."""
    return DEFAULT_DECIMAL_CONFIG.context_for(*operands, extra_digits=extra_digits)


def division_context(*operands: decimal.Decimal) -> decimal.Context:
    """Context for true division: operand digits plus ``precision`` more, rounded."""
    return DEFAULT_DECIMAL_CONFIG.context_for(
        *operands, extra_digits=DEFAULT_DECIMAL_CONFIG.precision, exact=False
    )
