"""Gold expression grammars and dispatch.

Exports:
    ExpressionType: Named grammar paired with a copper parser
    EXPLICIT_COPPER ... GENERIC_GOLD: The six built-in expression types
    EXPRESSION_TYPES: Registry keyed by expression type name
    DEFAULT_EXPRESSION_TYPES: Priority order used when no type is pinned
    find_expression_type / test_expression / parse_copper: Ordered dispatch

Python 3.13+. Zero external dependencies.
"""

from .expression_type import (
    Captures,
    CopperParser,
    ExpressionType,
    Matcher,
    RegexMatcher,
    normalize_expression,
)
from .generic_gold import match_generic_gold
from .registry import (
    DEFAULT_EXPRESSION_TYPES,
    EXPRESSION_TYPES,
    ExpressionTypeSpec,
    find_expression_type,
    parse_copper,
    resolve_expression_type,
    test_expression,
)
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
    "EXPLICIT_COPPER",
    "EXPLICIT_GOLD",
    "EXPLICIT_ONLY_GOLD",
    "EXPRESSION_TYPES",
    "GENERIC_GOLD",
    "SILVER_AND_COPPER",
    "SILVER_OR_COPPER",
    "Captures",
    "CopperParser",
    "ExpressionType",
    "ExpressionTypeSpec",
    "Matcher",
    "RegexMatcher",
    "find_expression_type",
    "match_generic_gold",
    "normalize_expression",
    "parse_copper",
    "resolve_expression_type",
    "test_expression",
]
