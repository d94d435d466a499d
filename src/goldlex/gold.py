"""Gold: exact currency amounts stored as a single copper quantity.

The copper quantity is the only stored state. Gold, silver and copper
segments are derived from its magnitude on demand, and the sign is
reported once through ``is_negative``:

    magnitude = abs(raw_copper)
    gold      = floor(magnitude / 10_000)
    silver    = floor((magnitude mod 10_000) / 100)
    copper    = floor(magnitude mod 100)

Two types share one arithmetic surface:

    Gold         immutable and hashable; every operation returns a new Gold
    MutableGold  owned handle; every operation updates it in place and
                 returns the same handle

Amounts have no magnitude limit. Addition, subtraction, multiplication,
remainder and rounding run in a decimal context sized to their operands
(``exact_context``) and never round; division keeps 50 digits beyond its
operands (``division_context``). No value ever passes through float; float
inputs are converted through their shortest repr.

Thread Safety:
    Gold is safe to share. MutableGold is not synchronised; concurrent
    mutation of one handle must be serialised by the caller.

Python 3.13+.
"""

from __future__ import annotations

import logging
import math
import operator
from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_UP,
    Decimal,
    InvalidOperation,
    localcontext,
)
from typing import TYPE_CHECKING, Any, ClassVar, NamedTuple, Self

from goldlex.constants import (
    COPPER_PER_BILLION_GOLD,
    COPPER_PER_COPPER,
    COPPER_PER_GOLD,
    COPPER_PER_MILLION_GOLD,
    COPPER_PER_SILVER,
    COPPER_PER_THOUSAND_GOLD,
    MAX_SAFE_INTEGER,
    MAX_SIGNED_BIGINT,
    MAX_UNSIGNED_BIGINT,
    MIN_SAFE_INTEGER,
    MIN_SIGNED_BIGINT,
    MIN_UNSIGNED_BIGINT,
)
from goldlex.decimal_config import GOLD_DECIMAL_CONTEXT, division_context, exact_context
from goldlex.diagnostics import (
    ErrorTemplate,
    InfiniteValueError,
    MalformedExpressionError,
    SegmentTypeError,
    UnsafeNumberError,
    ValueNaNError,
)
from goldlex.expressions import (
    ExpressionTypeSpec,
    normalize_expression,
    parse_copper,
    resolve_expression_type,
    test_expression,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from goldlex.formatting import GoldFormatter

__all__ = [
    "Gold",
    "GoldOperand",
    "GoldSegments",
    "MutableGold",
    "SegmentValue",
    "copper_from_total",
]

logger = logging.getLogger(__name__)

type SegmentValue = Decimal | int | float
type GoldOperand = Gold | MutableGold | Decimal | int | float | str

_SEGMENT_GOLD = "gold"
_SEGMENT_SILVER = "silver"
_SEGMENT_COPPER = "copper"
_SEGMENT_OPERAND = "operand"

_COPPER_PER_GOLD_INT = int(COPPER_PER_GOLD)
_COPPER_PER_SILVER_INT = int(COPPER_PER_SILVER)


class GoldSegments(NamedTuple):
    """Sign and non-negative segment magnitudes of a Gold amount.

    Attributes:
        is_negative: Whether the amount is below zero
        gold: Whole gold (unbounded)
        silver: Whole silver, 0-99
        copper: Whole copper, 0-99 (fractional copper is dropped)
    """

    is_negative: bool
    gold: int
    silver: int
    copper: int


# ============================================================================
# VALUE VALIDATION
# ============================================================================


def _segment_decimal(segment_name: str, value: Any) -> Decimal:
    """Validate one numeric input and convert it to Decimal.

    Raises:
        SegmentTypeError: bool or any type other than Decimal, int, float
        ValueNaNError: NaN
        InfiniteValueError: +/-infinity
        UnsafeNumberError: float outside +/-(2**53 - 1)
    """
    if isinstance(value, bool) or not isinstance(value, Decimal | int | float):
        raise SegmentTypeError(
            ErrorTemplate.value_type_mismatch(segment_name, type(value).__name__)
        )
    if isinstance(value, Decimal):
        if value.is_nan():
            raise ValueNaNError(ErrorTemplate.value_nan(segment_name))
        if value.is_infinite():
            raise InfiniteValueError(ErrorTemplate.value_infinite(segment_name))
        return value
    if isinstance(value, float):
        if math.isnan(value):
            raise ValueNaNError(ErrorTemplate.value_nan(segment_name))
        if math.isinf(value):
            raise InfiniteValueError(ErrorTemplate.value_infinite(segment_name))
        if not MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER:
            raise UnsafeNumberError(ErrorTemplate.value_unsafe_number(segment_name, value))
        return Decimal(repr(value))
    return Decimal(value)


def copper_from_total(
    *,
    gold: SegmentValue | None = None,
    silver: SegmentValue | None = None,
    copper: SegmentValue | None = None,
) -> Decimal:
    """Total copper for a partial gold/silver/copper segment map.

    Missing segments contribute nothing; when all three are missing the
    result is zero. Silver and copper are not range-checked, so overflow
    folds upward (150 silver is 1 gold 50 silver).

    Args:
        gold: Gold amount
        silver: Silver amount
        copper: Copper amount

    Returns:
        Exact copper quantity, whatever the number of digits

    Raises:
        SegmentTypeError: A segment is not a Decimal, int or float
        ValueNaNError: A segment is NaN
        InfiniteValueError: A segment is infinite
        UnsafeNumberError: A float segment exceeds +/-(2**53 - 1)

    Example:
        >>> copper_from_total(gold=1, silver=150)
        Decimal('25000')
        >>> copper_from_total(gold=10**60, copper=1) - 10**64
        Decimal('1')
    """
    terms = [
        (_segment_decimal(segment_name, value), ratio)
        for segment_name, value, ratio in (
            (_SEGMENT_GOLD, gold, COPPER_PER_GOLD),
            (_SEGMENT_SILVER, silver, COPPER_PER_SILVER),
            (_SEGMENT_COPPER, copper, COPPER_PER_COPPER),
        )
        if value is not None
    ]
    with localcontext(exact_context(*(number for term in terms for number in term))):
        total = Decimal(0)
        for amount, ratio in terms:
            total += amount * ratio
        return total


def _is_operand(value: object) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, _CopperArithmetic | Decimal | int | float | str)


def _to_copper(value: Any) -> Decimal:
    """Copper quantity of an arithmetic operand.

    Gold operands contribute their raw copper; numbers and numeric strings
    are read directly as copper.
    """
    if isinstance(value, _CopperArithmetic):
        return value.raw_copper
    if isinstance(value, str):
        try:
            with localcontext(GOLD_DECIMAL_CONTEXT):
                number = Decimal(value.strip())
        except InvalidOperation:
            raise SegmentTypeError(ErrorTemplate.operand_not_numeric(value)) from None
        return _segment_decimal(_SEGMENT_OPERAND, number)
    if isinstance(value, bool) or not isinstance(value, Decimal | int | float):
        raise SegmentTypeError(ErrorTemplate.operand_type_mismatch(type(value).__name__))
    return _segment_decimal(_SEGMENT_OPERAND, value)


def _reversed_sub(copper: Decimal, other: Decimal) -> Decimal:
    return other - copper


# ============================================================================
# SHARED ARITHMETIC SURFACE
# ============================================================================


class _CopperArithmetic:
    """Operations shared by Gold and MutableGold.

    Subclasses store ``_raw_copper`` and decide through ``_apply`` whether an
    operation produces a new value or updates the receiver.
    """

    __slots__ = ()

    COPPER_PER_COPPER: ClassVar[Decimal] = COPPER_PER_COPPER
    COPPER_PER_SILVER: ClassVar[Decimal] = COPPER_PER_SILVER
    COPPER_PER_GOLD: ClassVar[Decimal] = COPPER_PER_GOLD
    COPPER_PER_THOUSAND_GOLD: ClassVar[Decimal] = COPPER_PER_THOUSAND_GOLD
    COPPER_PER_MILLION_GOLD: ClassVar[Decimal] = COPPER_PER_MILLION_GOLD
    COPPER_PER_BILLION_GOLD: ClassVar[Decimal] = COPPER_PER_BILLION_GOLD

    _raw_copper: Decimal

    def _apply(self, raw_copper: Decimal) -> Self:
        raise NotImplementedError

    # ------------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------------

    @classmethod
    def from_total(
        cls,
        *,
        gold: SegmentValue | None = None,
        silver: SegmentValue | None = None,
        copper: SegmentValue | None = None,
    ) -> Self:
        """Create an amount from a partial segment map.

        Example:
            >>> Gold.from_total(gold=1, silver=150).raw_copper
            Decimal('25000')
        """
        return cls(copper_from_total(gold=gold, silver=silver, copper=copper))

    @classmethod
    def parse(
        cls,
        value: Any,
        expression_type: ExpressionTypeSpec | None = None,
        *,
        do_not_trim: bool = False,
    ) -> Self:
        """Parse a gold expression.

        Args:
            value: Expression text (converted with str())
            expression_type: Pin one expression type; None tries the
                default priority order
            do_not_trim: Keep leading/trailing whitespace

        Returns:
            The parsed amount

        Raises:
            InvalidExpressionError: If value is None
            MalformedExpressionError: If no expression type matches
            UnknownExpressionTypeError: If a pinned name is not registered

        Example:
            >>> Gold.parse("12s 34c").raw_copper
            Decimal('1234')
        """
        copper = parse_copper(value, expression_type, do_not_trim=do_not_trim)
        if copper is None:
            text = normalize_expression(value, do_not_trim=do_not_trim)
            name = None
            if expression_type is not None:
                name = resolve_expression_type(expression_type).name
            raise MalformedExpressionError(
                ErrorTemplate.expression_malformed(text, name),
                expression=text,
                expression_type=name,
            )
        return cls(copper)

    @staticmethod
    def is_gold_string(
        value: Any,
        expression_type: ExpressionTypeSpec | None = None,
        *,
        do_not_trim: bool = False,
    ) -> bool:
        """Check whether a value is a parseable gold expression. None is never one."""
        return test_expression(value, expression_type, do_not_trim=do_not_trim)

    @classmethod
    def sum(cls, *values: GoldOperand) -> Self:
        """Sum any number of operands; the empty sum is zero.

        Example:
            >>> Gold.sum(Gold(5), 10, "2.5").raw_copper
            Decimal('17.5')
        """
        coppers = [_to_copper(value) for value in values]
        with localcontext(exact_context(*coppers)):
            total = Decimal(0)
            for copper in coppers:
                total += copper
            return cls(total)

    # ------------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------------

    @property
    def raw_copper(self) -> Decimal:
        """Exact signed copper quantity, possibly fractional."""
        return self._raw_copper

    @property
    def is_negative(self) -> bool:
        return self._raw_copper < 0

    @property
    def is_positive(self) -> bool:
        return self._raw_copper > 0

    @property
    def is_zero(self) -> bool:
        return self._raw_copper == 0

    @property
    def total_copper(self) -> int:
        """Whole copper, truncated toward zero."""
        return int(self._raw_copper)

    @property
    def segments(self) -> GoldSegments:
        """Sign plus gold, silver and copper magnitudes.

        Split with int arithmetic, which has no digit limit; fractional
        copper is dropped by the int() truncation.
        """
        whole_copper = int(self._raw_copper.copy_abs())
        gold, rest = divmod(whole_copper, _COPPER_PER_GOLD_INT)
        silver, copper = divmod(rest, _COPPER_PER_SILVER_INT)
        return GoldSegments(
            is_negative=self.is_negative, gold=gold, silver=silver, copper=copper
        )

    @property
    def gold(self) -> int:
        """Whole gold magnitude."""
        return self.segments.gold

    @property
    def silver(self) -> int:
        """Silver magnitude, 0-99."""
        return self.segments.silver

    @property
    def copper(self) -> int:
        """Whole copper magnitude, 0-99."""
        return self.segments.copper

    # ------------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------------

    def _exactly(
        self, value: GoldOperand, operation: Callable[[Decimal, Decimal], Decimal]
    ) -> Decimal:
        other = _to_copper(value)
        with localcontext(exact_context(self._raw_copper, other)):
            return operation(self._raw_copper, other)

    def add(self, value: GoldOperand) -> Self:
        return self._apply(self._exactly(value, operator.add))

    def sub(self, value: GoldOperand) -> Self:
        return self._apply(self._exactly(value, operator.sub))

    def mul(self, value: GoldOperand) -> Self:
        return self._apply(self._exactly(value, operator.mul))

    def _quotient(self, value: GoldOperand) -> Decimal:
        divisor = _to_copper(value)
        if divisor == 0:
            msg = "Gold division by zero"
            raise ZeroDivisionError(msg)
        with localcontext(division_context(self._raw_copper, divisor)):
            return self._raw_copper / divisor

    def _remainder(self, value: GoldOperand) -> Decimal:
        divisor = _to_copper(value)
        if divisor == 0:
            msg = "Gold modulo by zero"
            raise ZeroDivisionError(msg)
        with localcontext(exact_context(self._raw_copper, divisor)):
            return self._raw_copper % divisor

    def div(self, value: GoldOperand) -> Self:
        """Divide the copper quantity.

        The quotient keeps 50 significant digits beyond the operands' own
        and rounds halves away from zero; it is the only rounding operation.

        Raises:
            ZeroDivisionError: If the divisor is zero
        """
        return self._apply(self._quotient(value))

    def mod(self, value: GoldOperand) -> Self:
        """Remainder of the copper quantity; the result keeps the dividend's sign.

        Raises:
            ZeroDivisionError: If the divisor is zero

        Example:
            >>> Gold(-12345).mod(Gold.COPPER_PER_GOLD).raw_copper
            Decimal('-2345')
        """
        return self._apply(self._remainder(value))

    # copy_abs and copy_negate ignore the context, so they never round.
    def abs(self) -> Self:
        return self._apply(self._raw_copper.copy_abs())

    def negate(self) -> Self:
        return self._apply(self._raw_copper.copy_negate())

    def _to_whole(self, unit: Decimal, rounding: str) -> Self:
        with localcontext(exact_context(self._raw_copper, unit)):
            units = (self._raw_copper / unit).to_integral_value(rounding=rounding)
            return self._apply(units * unit)

    def round(self) -> Self:
        """Round to whole copper, halves away from zero."""
        return self._to_whole(COPPER_PER_COPPER, ROUND_HALF_UP)

    def floor(self) -> Self:
        """Round to whole copper toward negative infinity."""
        return self._to_whole(COPPER_PER_COPPER, ROUND_FLOOR)

    def ceil(self) -> Self:
        """Round to whole copper toward positive infinity."""
        return self._to_whole(COPPER_PER_COPPER, ROUND_CEILING)

    def trunc(self) -> Self:
        """Drop fractional copper (round toward zero)."""
        return self._to_whole(COPPER_PER_COPPER, ROUND_DOWN)

    def round_to_gold(self) -> Self:
        """Round to whole gold, halves away from zero.

        Example:
            >>> Gold.parse("1g 50s").round_to_gold().raw_copper
            Decimal('20000')
        """
        return self._to_whole(COPPER_PER_GOLD, ROUND_HALF_UP)

    def floor_to_gold(self) -> Self:
        return self._to_whole(COPPER_PER_GOLD, ROUND_FLOOR)

    def ceil_to_gold(self) -> Self:
        return self._to_whole(COPPER_PER_GOLD, ROUND_CEILING)

    def clamp(self, minimum: GoldOperand, maximum: GoldOperand) -> Self:
        """Limit the copper quantity to [minimum, maximum].

        Raises:
            ValueError: If minimum is greater than maximum
        """
        low = _to_copper(minimum)
        high = _to_copper(maximum)
        if low > high:
            msg = f"clamp minimum {low} is greater than maximum {high}"
            raise ValueError(msg)
        return self._apply(min(max(self._raw_copper, low), high))

    # ------------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------------

    def is_less_than(self, value: GoldOperand) -> bool:
        return self._raw_copper < _to_copper(value)

    def is_less_than_or_equal_to(self, value: GoldOperand) -> bool:
        return self._raw_copper <= _to_copper(value)

    def is_greater_than(self, value: GoldOperand) -> bool:
        return self._raw_copper > _to_copper(value)

    def is_greater_than_or_equal_to(self, value: GoldOperand) -> bool:
        return self._raw_copper >= _to_copper(value)

    def is_equal_to(self, value: GoldOperand) -> bool:
        return self._raw_copper == _to_copper(value)

    # Rich comparisons accept Gold and plain numbers; strings are not
    # compared implicitly. A float is compared by its exact binary value, as
    # Decimal does, so Gold(x) == f implies hash(Gold(x)) == hash(f).
    def _comparable(self, other: object) -> Decimal | None:
        if isinstance(other, str) or not _is_operand(other):
            return None
        if isinstance(other, float):
            _segment_decimal(_SEGMENT_OPERAND, other)
            return Decimal(other)
        return _to_copper(other)

    def __eq__(self, other: object) -> bool:
        value = self._comparable(other)
        if value is None:
            return NotImplemented
        return self._raw_copper == value

    def __lt__(self, other: object) -> bool:
        value = self._comparable(other)
        if value is None:
            return NotImplemented
        return self._raw_copper < value

    def __le__(self, other: object) -> bool:
        value = self._comparable(other)
        if value is None:
            return NotImplemented
        return self._raw_copper <= value

    def __gt__(self, other: object) -> bool:
        value = self._comparable(other)
        if value is None:
            return NotImplemented
        return self._raw_copper > value

    def __ge__(self, other: object) -> bool:
        value = self._comparable(other)
        if value is None:
            return NotImplemented
        return self._raw_copper >= value

    # ------------------------------------------------------------------------
    # Operators (always produce a new value of the receiver's type)
    # ------------------------------------------------------------------------

    def _new(self, raw_copper: Decimal) -> Self:
        return type(self)(raw_copper)

    def __add__(self, other: object) -> Self:
        if not _is_operand(other):
            return NotImplemented
        return self._new(self._exactly(other, operator.add))  # type: ignore[arg-type]

    __radd__ = __add__

    def __sub__(self, other: object) -> Self:
        if not _is_operand(other):
            return NotImplemented
        return self._new(self._exactly(other, operator.sub))  # type: ignore[arg-type]

    def __rsub__(self, other: object) -> Self:
        if not _is_operand(other):
            return NotImplemented
        return self._new(self._exactly(other, _reversed_sub))  # type: ignore[arg-type]

    def __mul__(self, other: object) -> Self:
        if not _is_operand(other):
            return NotImplemented
        return self._new(self._exactly(other, operator.mul))  # type: ignore[arg-type]

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Self:
        if not _is_operand(other):
            return NotImplemented
        return self._new(self._quotient(other))  # type: ignore[arg-type]

    def __mod__(self, other: object) -> Self:
        if not _is_operand(other):
            return NotImplemented
        return self._new(self._remainder(other))  # type: ignore[arg-type]

    def __neg__(self) -> Self:
        return self._new(self._raw_copper.copy_negate())

    def __pos__(self) -> Self:
        return self._new(self._raw_copper)

    def __abs__(self) -> Self:
        return self._new(self._raw_copper.copy_abs())

    def __bool__(self) -> bool:
        return not self.is_zero

    # ------------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------------

    def to_int(self) -> int:
        """Whole copper as an unbounded int, truncated toward zero."""
        return int(self._raw_copper)

    def __int__(self) -> int:
        return self.to_int()

    def to_sql_bigint(self, *, unsigned: bool = False) -> int:
        """Whole copper checked against a 64-bit SQL BIGINT domain.

        The fractional copper remainder is truncated before the range check.

        Args:
            unsigned: Check [0, 2**64 - 1] instead of [-2**63, 2**63 - 1]

        Raises:
            UnsafeNumberError: If the truncated copper is out of range
        """
        total = self.to_int()
        low, high = (
            (MIN_UNSIGNED_BIGINT, MAX_UNSIGNED_BIGINT)
            if unsigned
            else (MIN_SIGNED_BIGINT, MAX_SIGNED_BIGINT)
        )
        if not low <= total <= high:
            raise UnsafeNumberError(ErrorTemplate.bigint_out_of_range(total, unsigned=unsigned))
        return total

    def format(self, formatter: GoldFormatter | None = None) -> str:
        """Render with a formatter; the default gives the canonical form.

        Example:
            >>> Gold.parse("-1234g 5s 6c").format()
            '-1,234g 05s 06c'
        """
        if formatter is None:
            from goldlex.formatting import DEFAULT_GOLD_FORMATTER  # noqa: PLC0415 - circular

            formatter = DEFAULT_GOLD_FORMATTER
        return formatter.format(self)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._raw_copper!r})"

    def __reduce__(self) -> tuple[type[Self], tuple[Decimal]]:
        return (type(self), (self._raw_copper,))


# ============================================================================
# CONCRETE TYPES
# ============================================================================


class Gold(_CopperArithmetic):
    """Immutable exact gold amount.

    Every operation returns a new Gold and leaves the receiver untouched.
    Gold is hashable and compares equal to numbers of the same copper
    quantity. The ``==`` and ``<`` family read a float at its exact binary
    value, so ``Gold(0.1) != 0.1`` just as ``Decimal("0.1") != 0.1``; the
    named comparisons (``is_equal_to`` ...) read it through its repr.

    Args:
        raw_copper: Copper quantity (Decimal, int or float; default 0)

    Raises:
        SegmentTypeError, ValueNaNError, InfiniteValueError, UnsafeNumberError:
            If raw_copper fails validation

    Example:
        >>> price = Gold.parse("1g 23s 45c")
        >>> price.add("55").segments
        GoldSegments(is_negative=False, gold=1, silver=24, copper=0)
        >>> str(price * 3)
        '3g 70s 35c'
    """

    __slots__ = ("_raw_copper",)

    def __init__(self, raw_copper: SegmentValue = 0) -> None:
        object.__setattr__(self, "_raw_copper", copper_from_total(copper=raw_copper))

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"Gold is immutable; cannot set {name!r}"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"Gold is immutable; cannot delete {name!r}"
        raise AttributeError(msg)

    def __hash__(self) -> int:
        return hash(self._raw_copper)

    def _apply(self, raw_copper: Decimal) -> Gold:
        return Gold(raw_copper)

    def mutable(self) -> MutableGold:
        """Return an owned MutableGold holding the same quantity."""
        return MutableGold(self._raw_copper)


class MutableGold(_CopperArithmetic):
    """Owned, mutable gold amount.

    Named operations (add, sub, round, clamp, ...) update this handle in
    place and return it, so calls chain. Binary operators return a new
    MutableGold; augmented assignment (+=, -=, ...) mutates.

    Not hashable and not thread-safe.

    Example:
        >>> wallet = Gold(100).mutable()
        >>> wallet.add(50).mul(2) is wallet
        True
        >>> wallet.raw_copper
        Decimal('300')
    """

    __slots__ = ("_raw_copper",)

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, raw_copper: SegmentValue = 0) -> None:
        self._raw_copper = copper_from_total(copper=raw_copper)

    def _apply(self, raw_copper: Decimal) -> MutableGold:
        # Route through validation so the stored quantity is always normalized.
        normalized = copper_from_total(copper=raw_copper)
        logger.debug("MutableGold %s -> %s", self._raw_copper, normalized)
        self._raw_copper = normalized
        return self

    def copy(self) -> MutableGold:
        """Return an independent MutableGold with the same quantity."""
        return MutableGold(self._raw_copper)

    def freeze(self) -> Gold:
        """Return an immutable Gold snapshot of the current quantity."""
        return Gold(self._raw_copper)

    def __iadd__(self, other: object) -> MutableGold:
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)  # type: ignore[arg-type]

    def __isub__(self, other: object) -> MutableGold:
        if not _is_operand(other):
            return NotImplemented
        return self.sub(other)  # type: ignore[arg-type]

    def __imul__(self, other: object) -> MutableGold:
        if not _is_operand(other):
            return NotImplemented
        return self.mul(other)  # type: ignore[arg-type]

    def __itruediv__(self, other: object) -> MutableGold:
        if not _is_operand(other):
            return NotImplemented
        return self.div(other)  # type: ignore[arg-type]

    def __imod__(self, other: object) -> MutableGold:
        if not _is_operand(other):
            return NotImplemented
        return self.mod(other)  # type: ignore[arg-type]
