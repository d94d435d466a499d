"""Non-raising gold expression parsing.

parse_gold() mirrors Gold.parse() but NEVER raises for bad input; failures
are returned as GoldParseError values carrying the same Diagnostic that the
raising API would have attached.

Python 3.13+.
"""

from __future__ import annotations

from typing import Any

from goldlex.diagnostics import (
    GoldParseError,
    InvalidExpressionError,
    MalformedExpressionError,
    UnknownExpressionTypeError,
)
from goldlex.expressions import ExpressionTypeSpec
from goldlex.gold import Gold

__all__ = ["parse_gold"]


def parse_gold(
    value: Any,
    expression_type: ExpressionTypeSpec | None = None,
    *,
    do_not_trim: bool = False,
) -> tuple[Gold | None, tuple[GoldParseError, ...]]:
    """Parse a gold expression without raising.

    Args:
        value: Expression text; None is reported as an error
        expression_type: Pin one expression type; None tries the default
            priority order
        do_not_trim: Keep leading/trailing whitespace

    Returns:
        Tuple of (result, errors):
        - result: Gold, or None if parsing failed
        - errors: Tuple of GoldParseError (empty tuple on success)

    Example:
        >>> result, errors = parse_gold("1,234g 12s 05c")
        >>> str(result)
        '1,234g 12s 05c'
        >>> errors
        ()
        >>> result, errors = parse_gold("923s 234c")
        >>> result is None, errors[0].diagnostic.code.name
        (True, 'EXPRESSION_MALFORMED')

    Thread Safety:
        Thread-safe. No shared mutable state.
    """
    pinned = None if expression_type is None else str(expression_type)
    try:
        return (Gold.parse(value, expression_type, do_not_trim=do_not_trim), ())
    except (InvalidExpressionError, MalformedExpressionError, UnknownExpressionTypeError) as e:
        error = GoldParseError(
            e.diagnostic if e.diagnostic is not None else str(e),
            input_value="" if value is None else str(value),
            expression_type=pinned,
        )
        return (None, (error,))
