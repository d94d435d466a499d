"""DecimalConfig validation and the shared arithmetic context."""

from __future__ import annotations

import decimal
from dataclasses import FrozenInstanceError

import pytest

from goldlex.constants import DECIMAL_PRECISION
from goldlex.decimal_config import (
    DEFAULT_DECIMAL_CONFIG,
    GOLD_DECIMAL_CONTEXT,
    DecimalConfig,
    digit_span,
    division_context,
    exact_context,
)


class TestDecimalConfig:
    """Construction-time validation."""

    def test_defaults(self) -> None:
        assert DEFAULT_DECIMAL_CONFIG.precision == DECIMAL_PRECISION == 50
        assert DEFAULT_DECIMAL_CONFIG.rounding == decimal.ROUND_HALF_UP

    @pytest.mark.parametrize("precision", [0, -1])
    def test_precision_must_be_positive(self, precision: int) -> None:
        with pytest.raises(ValueError, match="precision"):
            DecimalConfig(precision=precision)

    def test_rounding_must_be_decimal_mode(self) -> None:
        with pytest.raises(ValueError, match="rounding"):
            DecimalConfig(rounding="HALF_UP")

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            DEFAULT_DECIMAL_CONFIG.precision = 10  # type: ignore[misc]

    def test_to_context(self) -> None:
        context = DecimalConfig(precision=80, rounding=decimal.ROUND_DOWN).to_context()
        assert context.prec == 80
        assert context.rounding == decimal.ROUND_DOWN
        assert context.traps[decimal.InvalidOperation]
        assert context.traps[decimal.DivisionByZero]
        assert not context.traps[decimal.Inexact]


class TestGoldContext:
    """The shared template context."""

    def test_matches_default_config(self) -> None:
        assert GOLD_DECIMAL_CONTEXT.prec == 50
        assert GOLD_DECIMAL_CONTEXT.rounding == decimal.ROUND_HALF_UP

    def test_localcontext_copies_template(self) -> None:
        with decimal.localcontext(GOLD_DECIMAL_CONTEXT) as ctx:
            ctx.prec = 3
        assert GOLD_DECIMAL_CONTEXT.prec == 50


class TestDigitSpan:
    """digit_span counts integer and fractional places."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", 1),
            ("7", 1),
            ("-123.45", 5),
            ("1E+3", 4),
            ("0.001", 4),
            ("1" * 60, 60),
            ("NaN", 1),
        ],
    )
    def test_span(self, text: str, expected: int) -> None:
        assert digit_span(decimal.Decimal(text)) == expected


class TestOperandContexts:
    """Contexts widened to fit their operands."""

    def test_small_operands_keep_configured_precision(self) -> None:
        assert exact_context(decimal.Decimal(5), decimal.Decimal(7)).prec == DECIMAL_PRECISION

    def test_exact_context_traps_inexact(self) -> None:
        context = exact_context(decimal.Decimal(1))
        assert context.traps[decimal.Inexact]
        assert context.traps[decimal.InvalidOperation]

    def test_sixty_digit_sum_is_exact(self) -> None:
        """Past the configured precision, the last digit still survives."""
        big = decimal.Decimal("1" * 48 + "0000")
        one = decimal.Decimal(1)
        with decimal.localcontext(exact_context(big, one)):
            total = big + one
        assert str(total) == "1" * 48 + "0001"

    def test_integer_division_of_huge_magnitude(self) -> None:
        huge = decimal.Decimal(10) ** 60
        unit = decimal.Decimal(10_000)
        with decimal.localcontext(exact_context(huge, unit)):
            assert huge // unit == decimal.Decimal(10) ** 56
            assert huge % unit == 0

    def test_rounding_beyond_context_raises(self) -> None:
        """A result the context cannot hold raises instead of rounding."""
        with decimal.localcontext(exact_context(decimal.Decimal(1))) as ctx:
            with pytest.raises(decimal.Inexact):
                ctx.divide(decimal.Decimal(1), decimal.Decimal(3))

    def test_division_context_rounds(self) -> None:
        context = division_context(decimal.Decimal(1), decimal.Decimal(3))
        assert not context.traps[decimal.Inexact]
        assert context.prec >= DECIMAL_PRECISION
        assert context.rounding == decimal.ROUND_HALF_UP

    def test_template_context_unchanged(self) -> None:
        exact_context(decimal.Decimal(10) ** 90)
        assert GOLD_DECIMAL_CONTEXT.prec == DECIMAL_PRECISION
        assert not GOLD_DECIMAL_CONTEXT.traps[decimal.Inexact]
