"""Primitive scanners for gold expressions.

Each scanner takes a Cursor and returns ParseResult on success or None on
failure. A failing scanner consumes nothing. Scanners are single-pass and
never backtrack, so scan time is linear in the input length.

Grammar fragments:
    sign      = "-"?
    integer   = d{1,3} ("," ddd)+ | d{1,3} ("_" ddd)+ | d+
    fraction  = "." d+
    notation  = "g" | "k" | "m" | "b"
    segment   = d{1,2} unit
    suffix    = " "* segment_s " "* segment_c | " "* (segment_s | segment_c)

All letters are case-insensitive.
"""

from dataclasses import dataclass

from goldlex.constants import GROUP_SEPARATORS

from .cursor import Cursor, ParseResult

__all__ = [
    "SegmentSuffix",
    "scan_digits",
    "scan_fraction",
    "scan_integer",
    "scan_notation",
    "scan_segment",
    "scan_segment_suffix",
    "scan_sign",
]

# ASCII digits only - str.isdigit() accepts Unicode digits such as superscript two that
# Decimal() rejects or misreads.
_ASCII_DIGITS: str = "0123456789"

_GROUP_WIDTH: int = 3
_MAX_SEGMENT_DIGITS: int = 2

_NOTATION_LETTERS: str = "gkmb"
_SILVER_LETTER: str = "s"
_COPPER_LETTER: str = "c"


@dataclass(frozen=True, slots=True)
class SegmentSuffix:
    """Silver and/or copper digits following a notation letter.

    Attributes:
        silver: Silver digits, or None
        copper: Copper digits, or None
    """

    silver: str | None
    copper: str | None


def scan_sign(cursor: Cursor) -> ParseResult[bool]:
    """Scan optional leading minus. Never fails.

    Returns:
        ParseResult(True, after '-') or ParseResult(False, cursor)
    """
    advanced = cursor.expect("-")
    if advanced is None:
        return ParseResult(False, cursor)
    return ParseResult(True, advanced)


def scan_digits(cursor: Cursor) -> ParseResult[str] | None:
    """Scan a maximal run of ASCII digits (at least one)."""
    end = cursor.take_while(_ASCII_DIGITS)
    if end.pos == cursor.pos:
        return None
    return ParseResult(cursor.text_until(end), end)


def scan_integer(cursor: Cursor) -> ParseResult[str] | None:
    """Scan an integer with optional uniform digit grouping.

    Accepts "1234", "1,234,567" and "1_234_567". A group separator is only
    consumed when the head run has 1-3 digits and the separator is followed
    by exactly three digits; separators must not be mixed. The returned
    value keeps the separators as written.

    Example:
        >>> scan_integer(Cursor("1,234c", 0)).value
        '1,234'
        >>> scan_integer(Cursor("1,2345c", 0)) is None
        True
        >>> scan_integer(Cursor("1234,567", 0)).value  # ',567' left unconsumed
        '1234'
    """
    head = scan_digits(cursor)
    if head is None:
        return None
    end = head.cursor

    separator = end.peek()
    if len(head.value) > _GROUP_WIDTH or separator is None or separator not in GROUP_SEPARATORS:
        return ParseResult(head.value, end)

    while end.peek() == separator:
        group = scan_digits(end.advance())
        if group is None or len(group.value) < _GROUP_WIDTH:
            # Separator without a full group: leave it for the caller to reject
            break
        if len(group.value) > _GROUP_WIDTH:
            return None
        end = group.cursor

    return ParseResult(cursor.text_until(end), end)


def scan_fraction(cursor: Cursor) -> ParseResult[str] | None:
    """Scan "." followed by one or more digits; value excludes the dot."""
    after_dot = cursor.expect(".")
    if after_dot is None:
        return None
    return scan_digits(after_dot)


def scan_notation(cursor: Cursor) -> ParseResult[str] | None:
    """Scan one gold notation letter; value is lowercased."""
    advanced = cursor.expect(_NOTATION_LETTERS)
    if advanced is None:
        return None
    return ParseResult(cursor.current.lower(), advanced)


def scan_segment(cursor: Cursor, unit: str) -> ParseResult[str] | None:
    """Scan 1-2 digits followed by the unit letter; value is the digits."""
    digits = scan_digits(cursor)
    if digits is None or len(digits.value) > _MAX_SEGMENT_DIGITS:
        return None
    after_unit = digits.cursor.expect(unit)
    if after_unit is None:
        return None
    return ParseResult(digits.value, after_unit)


def scan_segment_suffix(cursor: Cursor) -> ParseResult[SegmentSuffix] | None:
    """Scan a silver-and-copper or silver-or-copper suffix.

    Leading spaces are allowed. The combined form is tried first; a lone
    silver segment is returned when no copper follows it.

    Example:
        >>> scan_segment_suffix(Cursor(" 23s 45c", 0)).value
        SegmentSuffix(silver='23', copper='45')
        >>> scan_segment_suffix(Cursor("7c", 0)).value
        SegmentSuffix(silver=None, copper='7')
    """
    start = cursor.skip_spaces()

    silver = scan_segment(start, _SILVER_LETTER)
    if silver is not None:
        copper = scan_segment(silver.cursor.skip_spaces(), _COPPER_LETTER)
        if copper is not None:
            return ParseResult(SegmentSuffix(silver.value, copper.value), copper.cursor)
        return ParseResult(SegmentSuffix(silver.value, None), silver.cursor)

    copper = scan_segment(start, _COPPER_LETTER)
    if copper is not None:
        return ParseResult(SegmentSuffix(None, copper.value), copper.cursor)

    return None
