"""Gold formatters.

A formatter wraps one callback in one of two input shapes:

    GOLD_INSTANCE   callback(gold) -> str
    SEGMENTS        callback(is_negative, gold, silver, copper) -> str

Segment callbacks receive non-negative magnitudes; the sign arrives once
as ``is_negative``.

The default formatter renders the canonical form
``[-]{gold grouped}g {silver:02}s {copper:02}c`` with the gold magnitude
grouped by Babel using the en_US locale ("1,234,567g 08s 09c").

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from decimal import localcontext
from typing import TYPE_CHECKING

from babel.numbers import format_decimal

from goldlex.constants import DECIMAL_PRECISION, DEFAULT_GROUPING_LOCALE
from goldlex.enums import FormatterSourceType

from .locale_utils import get_babel_locale

if TYPE_CHECKING:
    from goldlex.gold import Gold, MutableGold

__all__ = [
    "DEFAULT_GOLD_FORMATTER",
    "GoldFormatter",
    "InstanceCallback",
    "SegmentsCallback",
    "create_segment_formatter",
    "format_segments",
    "group_gold",
]

type InstanceCallback = Callable[[Gold | MutableGold], str]
type SegmentsCallback = Callable[[bool, int, int, int], str]


def group_gold(gold: int, locale_code: str = DEFAULT_GROUPING_LOCALE) -> str:
    """Group a whole gold magnitude with the locale's thousands separator.

    Babel quantizes under the active decimal context, so the precision is
    raised to hold every digit of very large magnitudes.

    Example:
        >>> group_gold(1234567)
        '1,234,567'
    """
    locale = get_babel_locale(locale_code)
    with localcontext() as ctx:
        ctx.prec = max(DECIMAL_PRECISION, len(str(gold)) + 1)
        return format_decimal(gold, locale=locale)


def format_segments(
    is_negative: bool,
    gold: int,
    silver: int,
    copper: int,
    *,
    locale_code: str = DEFAULT_GROUPING_LOCALE,
) -> str:
    """Render segments in the canonical form.

    Example:
        >>> format_segments(True, 1234, 5, 6)
        '-1,234g 05s 06c'
    """
    sign = "-" if is_negative else ""
    return f"{sign}{group_gold(gold, locale_code)}g {silver:02d}s {copper:02d}c"


@dataclass(frozen=True, slots=True)
class GoldFormatter:
    """Immutable wrapper around a formatting callback.

    Use ``from_instance`` or ``from_segments`` rather than the constructor.

    Attributes:
        source_type: Which input shape the callback expects
        callback: The formatting function

    Example:
        >>> short = GoldFormatter.from_segments(lambda neg, g, s, c: f"{g}g")
        >>> short.format(Gold.parse("12g 34s"))
        '12g'
    """

    source_type: FormatterSourceType
    callback: Callable[..., str]

    @classmethod
    def from_instance(cls, callback: InstanceCallback) -> GoldFormatter:
        """Create a formatter whose callback receives the Gold value."""
        return cls(FormatterSourceType.GOLD_INSTANCE, callback)

    @classmethod
    def from_segments(cls, callback: SegmentsCallback) -> GoldFormatter:
        """Create a formatter whose callback receives sign and segment magnitudes."""
        return cls(FormatterSourceType.SEGMENTS, callback)

    def format(self, gold: Gold | MutableGold) -> str:
        """Format a gold amount."""
        match self.source_type:
            case FormatterSourceType.GOLD_INSTANCE:
                return self.callback(gold)
            case FormatterSourceType.SEGMENTS:
                return self.callback(*gold.segments)


def create_segment_formatter(locale_code: str) -> GoldFormatter:
    """Create a canonical-shape formatter grouping gold for another locale.

    The locale is resolved eagerly so an unknown code fails here rather than
    on first use.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> create_segment_formatter("de-DE").format(Gold.from_total(gold=1234567))
        '1.234.567g 00s 00c'
    """
    get_babel_locale(locale_code)

    def _format(is_negative: bool, gold: int, silver: int, copper: int) -> str:
        return format_segments(is_negative, gold, silver, copper, locale_code=locale_code)

    return GoldFormatter.from_segments(_format)


DEFAULT_GOLD_FORMATTER: GoldFormatter = GoldFormatter.from_segments(format_segments)
