"""Non-raising parsing API.

- Functions NEVER raise for malformed or null input; errors are returned
  in a tuple
- Errors carry the same Diagnostic as the raising Gold.parse() API

Public API:
    parse_gold - Returns tuple[Gold | None, tuple[GoldParseError, ...]]
    is_valid_gold - TypeIs guard for Gold (not None)

Example:
    >>> from goldlex.parsing import parse_gold, is_valid_gold
    >>> result, errors = parse_gold("1.5k")
    >>> if not errors and is_valid_gold(result):
    ...     print(result.gold)
    1500

Python 3.13+.
"""

from .gold import parse_gold
from .guards import is_valid_gold

__all__ = [
    "is_valid_gold",
    "parse_gold",
]
