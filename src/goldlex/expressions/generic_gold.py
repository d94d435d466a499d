"""Scanner-based matcher for the GenericGold grammar.

    generic = "-"? integer fraction? notation? suffix?

The suffix is context-sensitive: it may only follow a notation letter, and
only when no fraction was scanned before that letter.

    "123"          no suffix possible
    "123.5 1c"     rejected (no notation)
    "123.5k 1c"    rejected (fraction blocks the suffix)
    "123k 1s 2c"   accepted

A regular language with lookbehind could express this, but Python's re
has no variable-width lookbehind, so the grammar is scanned directly with
one piece of state: whether a fraction was seen.
"""

from goldlex.syntax import (
    Cursor,
    scan_fraction,
    scan_integer,
    scan_notation,
    scan_segment_suffix,
    scan_sign,
)

from .amounts import (
    CAPTURE_COPPER,
    CAPTURE_FRACTIONAL_GOLD,
    CAPTURE_GOLD,
    CAPTURE_NEGATIVE,
    CAPTURE_NOTATION,
    CAPTURE_SILVER,
)
from .expression_type import Captures

__all__ = ["match_generic_gold"]


def match_generic_gold(text: str) -> Captures | None:
    """Match the whole text as a GenericGold expression.

    Args:
        text: Normalized expression text

    Returns:
        Captures with keys neg, gold, fractional_gold, notation, silver,
        copper (absent parts are None), or None if the text does not match

    Example:
        >>> match_generic_gold("-1g 23s 45c")["silver"]
        '23'
        >>> match_generic_gold("123.123g 1c") is None
        True
    """
    sign = scan_sign(Cursor(text, 0))

    integer = scan_integer(sign.cursor)
    if integer is None:
        return None
    cursor = integer.cursor

    fraction = scan_fraction(cursor)
    fraction_seen = fraction is not None
    if fraction is not None:
        cursor = fraction.cursor

    silver: str | None = None
    copper: str | None = None

    notation = scan_notation(cursor)
    if notation is not None:
        cursor = notation.cursor
        if not fraction_seen:
            suffix = scan_segment_suffix(cursor)
            if suffix is not None:
                silver, copper = suffix.value.silver, suffix.value.copper
                cursor = suffix.cursor

    if not cursor.is_eof:
        return None

    return {
        CAPTURE_NEGATIVE: "-" if sign.value else None,
        CAPTURE_GOLD: integer.value,
        CAPTURE_FRACTIONAL_GOLD: fraction.value if fraction is not None else None,
        CAPTURE_NOTATION: notation.value if notation is not None else None,
        CAPTURE_SILVER: silver,
        CAPTURE_COPPER: copper,
    }
