"""Type guard for parse_gold() results.

Provides a TypeIs-based guard so mypy narrows ``Gold | None`` to ``Gold``.
The guard accepts None and returns False, so checking errors first is
optional.

Example:
    >>> from goldlex.parsing import parse_gold, is_valid_gold
    >>> result, errors = parse_gold("12s 34c")
    >>> if is_valid_gold(result):
    ...     # mypy knows result is Gold
    ...     total = result.add(100)

Python 3.13+ with TypeIs support (PEP 742).
"""

from typing import TypeIs

from goldlex.gold import Gold

__all__ = ["is_valid_gold"]


def is_valid_gold(value: Gold | None) -> TypeIs[Gold]:
    """Type guard: Check if a parsed result is a Gold value.

    Args:
        value: Gold from parse_gold() result tuple (may be None on error)

    Returns:
        True if value is a Gold instance, False otherwise
    """
    return isinstance(value, Gold)
