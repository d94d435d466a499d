"""Registry resolution, ordered dispatch and copper parsing.

Python 3.13+.
"""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from goldlex.diagnostics import (
    DiagnosticCode,
    InvalidExpressionError,
    UnknownExpressionTypeError,
)
from goldlex.enums import ExpressionTypeName
from goldlex.expressions import (
    DEFAULT_EXPRESSION_TYPES,
    EXPLICIT_COPPER,
    EXPLICIT_GOLD,
    EXPLICIT_ONLY_GOLD,
    EXPRESSION_TYPES,
    GENERIC_GOLD,
    SILVER_AND_COPPER,
    SILVER_OR_COPPER,
    find_expression_type,
    match_generic_gold,
    parse_copper,
    resolve_expression_type,
    test_expression as expression_matches,
)


class TestRegistry:
    """EXPRESSION_TYPES and resolve_expression_type."""

    def test_registry_holds_every_name(self) -> None:
        assert list(EXPRESSION_TYPES) == [name.value for name in ExpressionTypeName]

    def test_default_priority_order(self) -> None:
        assert DEFAULT_EXPRESSION_TYPES == (
            EXPLICIT_COPPER,
            SILVER_AND_COPPER,
            SILVER_OR_COPPER,
            GENERIC_GOLD,
        )

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            EXPRESSION_TYPES["Extra"] = GENERIC_GOLD  # type: ignore[index]

    @pytest.mark.parametrize(
        "spec",
        [EXPLICIT_GOLD, ExpressionTypeName.EXPLICIT_GOLD, "ExplicitGold"],
    )
    def test_resolve_by_instance_enum_or_name(self, spec: object) -> None:
        assert resolve_expression_type(spec) is EXPLICIT_GOLD  # type: ignore[arg-type]

    def test_unknown_name_raises_key_error(self) -> None:
        with pytest.raises(KeyError) as exc_info:
            resolve_expression_type("AnyGold")
        error = exc_info.value
        assert isinstance(error, UnknownExpressionTypeError)
        assert str(error) == "Unknown gold expression type 'AnyGold'"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.EXPRESSION_TYPE_UNKNOWN
        assert "GenericGold" in (error.diagnostic.hint or "")


class TestDispatch:
    """First structural match wins, in priority order."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12c", EXPLICIT_COPPER),
            ("12s 34c", SILVER_AND_COPPER),
            ("12s", SILVER_OR_COPPER),
            ("1g", GENERIC_GOLD),
            ("1.5k", GENERIC_GOLD),
            ("123", GENERIC_GOLD),
            ("-1g 23s 45c", GENERIC_GOLD),
        ],
    )
    def test_first_match_wins(self, text: str, expected: object) -> None:
        assert find_expression_type(text) is expected

    def test_explicit_copper_wins_over_silver_or_copper(self) -> None:
        """'12c' satisfies both grammars; the earlier one is chosen."""
        assert SILVER_OR_COPPER.test("12c")
        assert find_expression_type("12c") is EXPLICIT_COPPER

    def test_no_match_is_none(self) -> None:
        assert find_expression_type("923s 234c") is None

    def test_pinned_type_bypasses_order(self) -> None:
        assert find_expression_type("1k", "ExplicitOnlyGold") is EXPLICIT_ONLY_GOLD
        assert find_expression_type("12c", ExpressionTypeName.SILVER_OR_COPPER) is SILVER_OR_COPPER

    def test_pinned_type_does_not_fall_back(self) -> None:
        assert find_expression_type("12s", EXPLICIT_COPPER) is None

    def test_is_gold_string_false_for_digit_grouped_segments(self) -> None:
        assert not expression_matches("923s 234c")
        for expression_type in DEFAULT_EXPRESSION_TYPES:
            assert not expression_matches("923s 234c", expression_type)

    def test_none_is_not_an_expression(self) -> None:
        assert expression_matches(None) is False
        with pytest.raises(InvalidExpressionError):
            find_expression_type(None)
        with pytest.raises(InvalidExpressionError):
            parse_copper(None)

    def test_none_diagnostic_names_pinned_type(self) -> None:
        with pytest.raises(InvalidExpressionError) as exc_info:
            parse_copper(None, "GenericGold")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.expression_type == "GenericGold"

    def test_unknown_pinned_type_raises_even_for_valid_text(self) -> None:
        with pytest.raises(UnknownExpressionTypeError):
            expression_matches("12c", "Copper")

    def test_trim_control(self) -> None:
        assert expression_matches("  12c  ")
        assert not expression_matches("  12c  ", do_not_trim=True)

    def test_dispatch_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="goldlex.expressions.registry"):
            find_expression_type("12s")
            find_expression_type("nope")
        messages = [record.getMessage() for record in caplog.records]
        assert "Gold expression '12s' matched SilverOrCopper" in messages
        assert "Gold expression 'nope' matched no expression type" in messages


class TestGenericGoldSuffixGate:
    """The suffix attaches only to a notation letter with no fraction before it."""

    @pytest.mark.parametrize(
        ("text", "accepted"),
        [
            ("123", True),
            ("123 1c", False),
            ("123.5", True),
            ("123.5 1c", False),
            ("123.5k", True),
            ("123.5k 1c", False),
            ("123.5k 1s 2c", False),
            ("123k", True),
            ("123k 1c", True),
            ("123k 1s", True),
            ("123k 1s 2c", True),
        ],
    )
    def test_gate(self, text: str, accepted: bool) -> None:
        assert (match_generic_gold(text) is not None) is accepted

    def test_captures(self) -> None:
        captures = match_generic_gold("-1,234.5m")
        assert captures == {
            "neg": "-",
            "gold": "1,234",
            "fractional_gold": "5",
            "notation": "m",
            "silver": None,
            "copper": None,
        }

    def test_suffix_captures(self) -> None:
        captures = match_generic_gold("7K 05s 9c")
        assert captures is not None
        assert captures["notation"] == "k"
        assert captures["silver"] == "05"
        assert captures["copper"] == "9"


class TestParseCopper:
    """Exact copper amounts produced by each grammar."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("29475839.9999876234c", Decimal("29475839.9999876234")),
            ("29,475,839c", Decimal(29475839)),
            ("-29_475_839.5c", Decimal("-29475839.5")),
            ("12s 34c", Decimal(1234)),
            ("-12s 34c", Decimal(-1234)),
            ("5s", Decimal(500)),
            ("-5s", Decimal(-500)),
            ("-7c", Decimal(-7)),
            ("-1g 23s 45c", Decimal(-12345)),
            ("1,234g 12s 05c", Decimal(12341205)),
            ("1K 2S 3C", Decimal(10000203)),
            ("123", Decimal(1230000)),
            ("1.5", Decimal(15000)),
            ("1.5g", Decimal(15000)),
            ("1.5k", Decimal(15000000)),
            ("0.0001g", Decimal(1)),
            ("2b", Decimal(20000000000000)),
            ("-0.00005g", Decimal("-0.5")),
        ],
    )
    def test_default_dispatch_values(self, text: str, expected: Decimal) -> None:
        assert parse_copper(text) == expected

    def test_fractional_copper_is_exact(self) -> None:
        """No digit of the fraction is lost to binary floating point."""
        result = parse_copper("29475839.9999876234c", "ExplicitCopper")
        assert str(result) == "29475839.9999876234"

    def test_fractional_gold_scaled_by_notation(self) -> None:
        assert parse_copper("1.5k", EXPLICIT_GOLD) == Decimal(1500) * Decimal(10000)
        assert parse_copper("-2.25m", EXPLICIT_GOLD) == Decimal(-2250000) * Decimal(10000)

    def test_amounts_beyond_default_precision(self) -> None:
        """Sixty-digit inputs keep their last digit through every grammar."""
        digits = "1" * 60
        assert parse_copper(f"{digits}.5k") == Decimal(f"{digits}5000000")
        assert parse_copper(f"{digits}c") == Decimal(digits)
        assert parse_copper(f"-{digits}k 1s 1c") == Decimal(f"-{digits}0000101")
        fractional = f"{digits}.{digits}"
        assert parse_copper(f"{fractional}c", "ExplicitCopper") == Decimal(fractional)

    def test_explicit_only_gold(self) -> None:
        assert parse_copper("1_000k", EXPLICIT_ONLY_GOLD) == Decimal(10**10)

    def test_sign_applies_to_every_segment(self) -> None:
        assert parse_copper("-1k 1s 1c") == -(Decimal(1000 * 10000) + 100 + 1)

    def test_fraction_blocks_suffix(self) -> None:
        assert parse_copper("123.123g 1c", GENERIC_GOLD) is None
        assert parse_copper("123.123g 1c") is None

    def test_no_match_is_none(self) -> None:
        assert parse_copper("abc") is None
