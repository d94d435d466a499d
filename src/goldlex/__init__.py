"""goldlex - Exact gold/silver/copper currency expressions.

Parses human-written currency text ("1,234g 12s 05c", "923s",
"29475839.99c", "1.5k") into an exact copper quantity and renders such
quantities back into canonical text. Arithmetic never passes through float.

Public API:
    Gold - Immutable exact amount (parse, arithmetic, segments, formatting)
    MutableGold - Owned handle applying the same operations in place
    GoldSegments - (is_negative, gold, silver, copper) magnitudes
    GoldFormatter - Formatter over a Gold value or its segments
    DEFAULT_GOLD_FORMATTER - Canonical "[-]1,234g 05s 06c" formatter
    ExpressionType - Named grammar paired with a copper parser
    ExpressionTypeName - Registered expression type names
    parse_gold - Non-raising parse returning (result, errors)
    is_valid_gold - TypeIs guard for parse_gold() results

Exceptions:
    GoldError - Base exception class
    InvalidExpressionError - None passed as an expression
    MalformedExpressionError - No expression type matched
    ValueNaNError / InfiniteValueError / UnsafeNumberError - Numeric input rejected
    SegmentTypeError - Unsupported segment or operand type
    UnknownExpressionTypeError - Pinned expression type name not registered

Submodules:
    goldlex.expressions - Grammars, registry and dispatch
    goldlex.syntax - Cursor and scanner primitives
    goldlex.diagnostics - Diagnostic codes, templates and formatter
    goldlex.formatting - Babel-backed gold formatting
    goldlex.parsing - Non-raising parsing API
"""

from .diagnostics import (
    GoldError,
    GoldParseError,
    InfiniteValueError,
    InvalidExpressionError,
    MalformedExpressionError,
    SegmentTypeError,
    UnknownExpressionTypeError,
    UnsafeNumberError,
    ValueNaNError,
)
from .enums import ExpressionTypeName
from .expressions import (
    DEFAULT_EXPRESSION_TYPES,
    EXPLICIT_COPPER,
    EXPLICIT_GOLD,
    EXPLICIT_ONLY_GOLD,
    GENERIC_GOLD,
    SILVER_AND_COPPER,
    SILVER_OR_COPPER,
    ExpressionType,
)
from .formatting import DEFAULT_GOLD_FORMATTER, GoldFormatter
from .gold import Gold, GoldSegments, MutableGold
from .parsing import is_valid_gold, parse_gold

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("goldlex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_EXPRESSION_TYPES",
    "DEFAULT_GOLD_FORMATTER",
    "EXPLICIT_COPPER",
    "EXPLICIT_GOLD",
    "EXPLICIT_ONLY_GOLD",
    "GENERIC_GOLD",
    "SILVER_AND_COPPER",
    "SILVER_OR_COPPER",
    "ExpressionType",
    "ExpressionTypeName",
    "Gold",
    "GoldError",
    "GoldFormatter",
    "GoldParseError",
    "GoldSegments",
    "InfiniteValueError",
    "InvalidExpressionError",
    "MalformedExpressionError",
    "MutableGold",
    "SegmentTypeError",
    "UnknownExpressionTypeError",
    "UnsafeNumberError",
    "ValueNaNError",
    "__version__",
    "is_valid_gold",
    "parse_gold",
]
