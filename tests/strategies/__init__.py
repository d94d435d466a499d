"""Hypothesis strategies for goldlex property-based testing.

Strategies are organized by domain:

- gold: gold expressions for every grammar and raw copper quantities

Usage:
    from tests.strategies import generic_gold_expressions, gold_amounts
"""

from .gold import (
    default_expressions,
    explicit_copper_expressions,
    expression_noise,
    generic_gold_expressions,
    gold_amounts,
    grouped_integers,
    segment_digits,
    silver_and_copper_expressions,
    silver_or_copper_expressions,
)

__all__ = [
    "default_expressions",
    "explicit_copper_expressions",
    "expression_noise",
    "generic_gold_expressions",
    "gold_amounts",
    "grouped_integers",
    "segment_digits",
    "silver_and_copper_expressions",
    "silver_or_copper_expressions",
]
