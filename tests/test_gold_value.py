"""Gold construction, validation, derived segments and conversions."""

from __future__ import annotations

import pickle
from decimal import Decimal

import pytest

from goldlex import (
    Gold,
    GoldSegments,
    InfiniteValueError,
    InvalidExpressionError,
    MalformedExpressionError,
    MutableGold,
    SegmentTypeError,
    UnsafeNumberError,
    ValueNaNError,
)
from goldlex.constants import MAX_SAFE_INTEGER
from goldlex.diagnostics import DiagnosticCode
from goldlex.gold import copper_from_total


class TestConstruction:
    """Gold(raw_copper) and Gold.from_total()."""

    def test_default_is_zero(self) -> None:
        assert Gold().raw_copper == 0
        assert Gold().is_zero

    def test_from_total_without_segments_is_zero(self) -> None:
        assert Gold.from_total().is_zero

    def test_from_total_folds_silver_overflow(self) -> None:
        gold = Gold.from_total(gold=1, silver=150)
        assert gold.raw_copper == Decimal(25000)
        assert gold.segments == GoldSegments(is_negative=False, gold=2, silver=50, copper=0)

    def test_from_total_mixes_segment_types(self) -> None:
        assert Gold.from_total(gold=Decimal("1.5"), silver=2, copper=0.5).raw_copper == Decimal(
            "15200.5"
        )

    def test_float_converted_through_repr(self) -> None:
        assert str(Gold(0.1).raw_copper) == "0.1"

    def test_int_and_decimal_skip_safe_range_check(self) -> None:
        assert Gold(2**80).raw_copper == Decimal(2**80)
        assert Gold(Decimal("1e30")).raw_copper == Decimal("1e30")

    def test_largest_safe_float_accepted(self) -> None:
        assert Gold(float(MAX_SAFE_INTEGER)).raw_copper == MAX_SAFE_INTEGER

    def test_negative_zero_normalized(self) -> None:
        gold = Gold(Decimal("-0"))
        assert not gold.is_negative
        assert gold.is_zero

    @pytest.mark.parametrize("value", ["5", True, [1], Gold(1)])
    def test_unsupported_type_rejected(self, value: object) -> None:
        with pytest.raises(SegmentTypeError) as exc_info:
            Gold(value)  # type: ignore[arg-type]
        assert isinstance(exc_info.value, TypeError)

    def test_type_error_names_segment(self) -> None:
        with pytest.raises(SegmentTypeError) as exc_info:
            Gold.from_total(gold=1, silver="2")  # type: ignore[arg-type]
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.segment_name == "silver"
        assert diagnostic.code is DiagnosticCode.VALUE_TYPE_MISMATCH

    @pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("sNaN"), float("nan")])
    def test_nan_rejected(self, value: object) -> None:
        with pytest.raises(ValueNaNError, match="The amount of 'copper' is NaN"):
            Gold(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "value", [Decimal("Infinity"), Decimal("-Infinity"), float("inf"), float("-inf")]
    )
    def test_infinity_rejected(self, value: object) -> None:
        with pytest.raises(InfiniteValueError) as exc_info:
            Gold.from_total(gold=value)  # type: ignore[arg-type]
        assert isinstance(exc_info.value, ValueError)

    @pytest.mark.parametrize("value", [2.0**53, -(2.0**53), 1e300])
    def test_unsafe_float_rejected(self, value: float) -> None:
        with pytest.raises(UnsafeNumberError) as exc_info:
            Gold.from_total(copper=value)
        assert isinstance(exc_info.value, OverflowError)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.input_value == repr(value)

    def test_copper_from_total_function(self) -> None:
        assert copper_from_total(gold=-1, silver=-23, copper=-45) == Decimal(-12345)

    def test_sixty_digit_amount_is_exact(self) -> None:
        assert Gold(10**60 + 1).raw_copper == Decimal(10**60 + 1)
        assert Gold(Decimal("1" * 60)).raw_copper == Decimal("1" * 60)
        assert Gold(Decimal(f"{10**60}.01")).raw_copper == Decimal(f"{10**60}.01")

    def test_from_total_with_sixty_digit_gold(self) -> None:
        assert Gold.from_total(gold=10**60, copper=1).raw_copper == Decimal(10**64 + 1)
        gold = Decimal("1" * 48)
        assert copper_from_total(gold=gold, copper=1) == Decimal("1" * 48 + "0001")


class TestDerivedValues:
    """Sign, segments and whole-copper views."""

    def test_negative_segments_are_magnitudes(self) -> None:
        gold = Gold(-12345)
        assert gold.is_negative
        assert not gold.is_positive
        assert (gold.gold, gold.silver, gold.copper) == (1, 23, 45)

    def test_fractional_copper_dropped_from_segments(self) -> None:
        assert Gold(Decimal("123.99")).segments == GoldSegments(False, 0, 1, 23)

    def test_segments_of_huge_magnitude(self) -> None:
        assert Gold(-(10**64 + 12_345)).segments == GoldSegments(True, 10**60 + 1, 23, 45)
        assert Gold(Decimal(f"{10**70}.75")).segments == GoldSegments(False, 10**66, 0, 0)
        assert Gold(10**60).gold == 10**56

    def test_total_copper_truncates_toward_zero(self) -> None:
        assert Gold(Decimal("12.9")).total_copper == 12
        assert Gold(Decimal("-12.9")).total_copper == -12

    def test_unit_constants_on_class(self) -> None:
        assert Gold.COPPER_PER_SILVER == 100
        assert Gold.COPPER_PER_GOLD == 10_000
        assert MutableGold.COPPER_PER_BILLION_GOLD == 10_000 * 10**9

    def test_bool_is_non_zero(self) -> None:
        assert not Gold()
        assert Gold(Decimal("0.01"))


class TestParse:
    """Gold.parse and Gold.is_gold_string."""

    def test_parse_returns_gold(self) -> None:
        assert Gold.parse("12s 34c") == Gold(1234)
        assert Gold.parse("-1g 23s 45c").raw_copper == Decimal(-12345)

    def test_parse_classmethod_keeps_subclass(self) -> None:
        parsed = MutableGold.parse("1g")
        assert isinstance(parsed, MutableGold)
        assert parsed.raw_copper == 10_000

    def test_malformed_expression(self) -> None:
        with pytest.raises(MalformedExpressionError) as exc_info:
            Gold.parse("  923s 234c ")
        error = exc_info.value
        assert isinstance(error, ValueError)
        assert error.expression == "923s 234c"
        assert error.expression_type is None
        assert str(error) == "Malformed gold expression '923s 234c'"

    def test_malformed_for_pinned_type(self) -> None:
        with pytest.raises(MalformedExpressionError) as exc_info:
            Gold.parse("12s", "ExplicitCopper")
        assert exc_info.value.expression_type == "ExplicitCopper"
        assert "does not match expression type ExplicitCopper" in str(exc_info.value)

    def test_do_not_trim(self) -> None:
        assert Gold.parse(" 12s ") == 1200
        with pytest.raises(MalformedExpressionError):
            Gold.parse(" 12s ", do_not_trim=True)

    def test_none_is_invalid(self) -> None:
        with pytest.raises(InvalidExpressionError):
            Gold.parse(None)

    def test_is_gold_string(self) -> None:
        assert Gold.is_gold_string("1,234g 12s 05c")
        assert not Gold.is_gold_string("923s 234c")
        assert not Gold.is_gold_string(None)
        assert Gold.is_gold_string("1.5k", "ExplicitGold")
        assert not Gold.is_gold_string("1.5k", "ExplicitOnlyGold")

    def test_parse_sixty_digit_gold_keeps_copper(self) -> None:
        digits = "1" * 60
        assert Gold.parse(f"{digits}g 23s 45c").raw_copper == Decimal(digits + "2345")
        assert Gold.parse(f"-{digits}g 1c").raw_copper == Decimal(f"-{digits}0001")

    def test_parse_sixty_digit_copper(self) -> None:
        digits = "9" * 60
        assert Gold.parse(f"{digits}c").raw_copper == Decimal(digits)
        assert Gold.parse(f"-{digits}.5c").raw_copper == Decimal(f"-{digits}.5")

    def test_parse_grouped_huge_amount_with_notation(self) -> None:
        text = "1" + ",000" * 20 + ".5b"
        assert Gold.parse(text).raw_copper == Decimal(10**73 + 5 * 10**12)


class TestConversion:
    """Integer conversion and 64-bit range checks."""

    def test_to_int_truncates(self) -> None:
        assert Gold(Decimal("-7.9")).to_int() == -7
        assert int(Gold(Decimal("7.9"))) == 7

    def test_to_int_unbounded(self) -> None:
        assert Gold(2**100).to_int() == 2**100

    def test_signed_bigint_bounds(self) -> None:
        assert Gold(2**63 - 1).to_sql_bigint() == 2**63 - 1
        assert Gold(-(2**63)).to_sql_bigint() == -(2**63)
        with pytest.raises(UnsafeNumberError):
            Gold(2**63).to_sql_bigint()
        with pytest.raises(UnsafeNumberError):
            Gold(-(2**63) - 1).to_sql_bigint()

    def test_range_checked_after_truncation(self) -> None:
        almost = Gold(Decimal(2**63 - 1) + Decimal("0.9"))
        assert almost.to_sql_bigint() == 2**63 - 1

    def test_unsigned_bigint_bounds(self) -> None:
        assert Gold(2**64 - 1).to_sql_bigint(unsigned=True) == 2**64 - 1
        assert Gold(Decimal("-0.5")).to_sql_bigint(unsigned=True) == 0
        with pytest.raises(UnsafeNumberError) as exc_info:
            Gold(-1).to_sql_bigint(unsigned=True)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.CONVERSION_OUT_OF_RANGE
        with pytest.raises(UnsafeNumberError):
            Gold(2**64).to_sql_bigint(unsigned=True)

    def test_repr(self) -> None:
        assert repr(Gold(5)) == "Gold(Decimal('5'))"
        assert repr(MutableGold(Decimal("1.5"))) == "MutableGold(Decimal('1.5'))"

    def test_pickle_round_trip(self) -> None:
        for value in (Gold(Decimal("-12.5")), MutableGold(7)):
            restored = pickle.loads(pickle.dumps(value))
            assert type(restored) is type(value)
            assert restored == value


class TestImmutability:
    """Gold is frozen and hashable; MutableGold is neither."""

    def test_attributes_cannot_be_set(self) -> None:
        gold = Gold(1)
        with pytest.raises(AttributeError):
            gold._raw_copper = Decimal(2)  # type: ignore[misc]
        with pytest.raises(AttributeError):
            del gold._raw_copper

    def test_hash_matches_numeric_value(self) -> None:
        assert hash(Gold(5)) == hash(Gold(Decimal("5.00")))
        assert len({Gold(5), Gold(5.0), Gold(Decimal(5))}) == 1

    def test_mutable_gold_is_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(MutableGold(1))

    def test_mutable_and_freeze_copy(self) -> None:
        gold = Gold(10)
        handle = gold.mutable()
        handle.add(5)
        assert gold == 10
        frozen = handle.freeze()
        handle.add(5)
        assert frozen == 15
        assert handle == 20
