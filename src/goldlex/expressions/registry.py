"""Expression type registry and ordered dispatch.

When no expression type is pinned, types are tried in a fixed priority
order and the first structural match wins:

    ExplicitCopper -> SilverAndCopper -> SilverOrCopper -> GenericGold

ExplicitGold and ExplicitOnlyGold are only used when requested; GenericGold
accepts everything they accept. Testing and parsing walk the same order.

Thread-safe. The registry is an immutable mapping built at import time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal
from types import MappingProxyType
from typing import Any

from goldlex.diagnostics import ErrorTemplate, UnknownExpressionTypeError
from goldlex.enums import ExpressionTypeName

from .expression_type import ExpressionType, normalize_expression
from .types import (
    EXPLICIT_COPPER,
    EXPLICIT_GOLD,
    EXPLICIT_ONLY_GOLD,
    GENERIC_GOLD,
    SILVER_AND_COPPER,
    SILVER_OR_COPPER,
)

__all__ = [
    "DEFAULT_EXPRESSION_TYPES",
    "EXPRESSION_TYPES",
    "ExpressionTypeSpec",
    "find_expression_type",
    "parse_copper",
    "resolve_expression_type",
    "test_expression",
]

logger = logging.getLogger(__name__)

type ExpressionTypeSpec = ExpressionType | ExpressionTypeName | str

EXPRESSION_TYPES: MappingProxyType[str, ExpressionType] = MappingProxyType({
    expression_type.name: expression_type
    for expression_type in (
        EXPLICIT_COPPER,
        SILVER_AND_COPPER,
        SILVER_OR_COPPER,
        EXPLICIT_ONLY_GOLD,
        EXPLICIT_GOLD,
        GENERIC_GOLD,
    )
})

DEFAULT_EXPRESSION_TYPES: tuple[ExpressionType, ...] = (
    EXPLICIT_COPPER,
    SILVER_AND_COPPER,
    SILVER_OR_COPPER,
    GENERIC_GOLD,
)


def resolve_expression_type(spec: ExpressionTypeSpec) -> ExpressionType:
    """Resolve an ExpressionType from an instance, enum member or name.

    Raises:
        UnknownExpressionTypeError: If a name is not registered

    Example:
        >>> resolve_expression_type("GenericGold") is GENERIC_GOLD
        True
    """
    if isinstance(spec, ExpressionType):
        return spec
    try:
        return EXPRESSION_TYPES[str(spec)]
    except KeyError:
        diagnostic = ErrorTemplate.expression_type_unknown(str(spec), tuple(EXPRESSION_TYPES))
        raise UnknownExpressionTypeError(diagnostic) from None


def _candidates(expression_type: ExpressionTypeSpec | None) -> Iterable[ExpressionType]:
    if expression_type is None:
        return DEFAULT_EXPRESSION_TYPES
    return (resolve_expression_type(expression_type),)


def find_expression_type(
    expression: Any,
    expression_type: ExpressionTypeSpec | None = None,
    *,
    do_not_trim: bool = False,
) -> ExpressionType | None:
    """Return the first expression type whose grammar matches the expression.

    Args:
        expression: Expression to match (converted with str())
        expression_type: Pin a single expression type; None tries the
            default priority order
        do_not_trim: Keep leading/trailing whitespace

    Returns:
        The matching ExpressionType, or None

    Raises:
        InvalidExpressionError: If expression is None
        UnknownExpressionTypeError: If a pinned name is not registered
    """
    candidates = _candidates(expression_type)
    text = normalize_expression(
        expression,
        do_not_trim=do_not_trim,
        expression_type=None if expression_type is None else str(expression_type),
    )
    for candidate in candidates:
        if candidate.matcher(text) is not None:
            logger.debug("Gold expression %r matched %s", text, candidate.name)
            return candidate
    logger.debug("Gold expression %r matched no expression type", text)
    return None


def test_expression(
    expression: Any,
    expression_type: ExpressionTypeSpec | None = None,
    *,
    do_not_trim: bool = False,
) -> bool:
    """Check whether any candidate expression type matches. None never matches.

    Raises:
        UnknownExpressionTypeError: If a pinned name is not registered
    """
    if expression is None:
        return False
    return find_expression_type(expression, expression_type, do_not_trim=do_not_trim) is not None


def parse_copper(
    expression: Any,
    expression_type: ExpressionTypeSpec | None = None,
    *,
    do_not_trim: bool = False,
) -> Decimal | None:
    """Parse an expression into total copper using the first matching type.

    Returns:
        Exact copper amount, or None if no candidate matches

    Raises:
        InvalidExpressionError: If expression is None
        UnknownExpressionTypeError: If a pinned name is not registered

    Example:
        >>> parse_copper("12s 34c")
        Decimal('1234')
        >>> parse_copper("-1g 23s 45c")
        Decimal('-12345')
    """
    matched = find_expression_type(expression, expression_type, do_not_trim=do_not_trim)
    if matched is None:
        return None
    return matched.parse_copper(expression, do_not_trim=do_not_trim)
