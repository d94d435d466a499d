"""ExpressionType: a named gold grammar paired with a copper parser.

An expression type owns two pure callables:
    matcher: normalized text -> captures mapping, or None when the whole
        text does not match
    parser: captures -> exact copper amount as Decimal, or None when the
        captures are structurally insufficient

Expression types hold no mutable state and are safe to share between
threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal, localcontext
from typing import Any

from goldlex.constants import COPPER_PER_BILLION_GOLD
from goldlex.decimal_config import exact_context
from goldlex.diagnostics import ErrorTemplate, InvalidExpressionError

__all__ = [
    "Captures",
    "CopperParser",
    "ExpressionType",
    "Matcher",
    "RegexMatcher",
    "normalize_expression",
]

type Captures = Mapping[str, str | None]
type Matcher = Callable[[str], Captures | None]
type CopperParser = Callable[[Captures], Decimal | None]

# Unit letters are case-insensitive; \d and friends stay ASCII-only.
PATTERN_FLAGS: re.RegexFlag = re.IGNORECASE | re.ASCII


def normalize_expression(
    expression: Any,
    *,
    do_not_trim: bool = False,
    expression_type: str | None = None,
) -> str:
    """Convert an expression to the text that grammars match against.

    Args:
        expression: Any value; converted with str()
        do_not_trim: Keep leading/trailing whitespace
        expression_type: Pinned expression type name, for diagnostics

    Returns:
        Normalized expression text

    Raises:
        InvalidExpressionError: If expression is None
    """
    if expression is None:
        raise InvalidExpressionError(ErrorTemplate.expression_invalid(expression_type))
    text = str(expression)
    return text if do_not_trim else text.strip()


@dataclass(frozen=True, slots=True)
class RegexMatcher:
    """Whole-string regular expression matcher.

    Attributes:
        pattern: Compiled pattern; matched with fullmatch()
    """

    pattern: re.Pattern[str]

    def __call__(self, text: str) -> Captures | None:
        match = self.pattern.fullmatch(text)
        if match is None:
            return None
        return match.groupdict()


@dataclass(frozen=True, slots=True)
class ExpressionType:
    """Named, immutable gold grammar.

    Attributes:
        name: Registry name (e.g. "GenericGold")
        matcher: Text -> captures, or None
        parser: Captures -> copper Decimal, or None
        description: One-line summary of the accepted shape
        pattern: Compiled regular expression, when the grammar is regex-based

    Example:
        >>> from goldlex.expressions import SILVER_AND_COPPER
        >>> SILVER_AND_COPPER.test("12s 34c")
        True
        >>> SILVER_AND_COPPER.parse_copper("-12s 34c")
        Decimal('-1234')
    """

    name: str
    matcher: Matcher = field(repr=False)
    parser: CopperParser = field(repr=False)
    description: str = ""
    pattern: re.Pattern[str] | None = field(default=None, repr=False)

    @classmethod
    def from_pattern(
        cls,
        name: str,
        pattern: str,
        parser: CopperParser,
        description: str = "",
    ) -> ExpressionType:
        """Create a regex-based expression type.

        The pattern is compiled case-insensitive and ASCII-only and is
        always matched against the entire text.
        """
        compiled = re.compile(pattern, PATTERN_FLAGS)
        return cls(
            name=name,
            matcher=RegexMatcher(compiled),
            parser=parser,
            description=description,
            pattern=compiled,
        )

    def match(self, expression: Any, *, do_not_trim: bool = False) -> Captures | None:
        """Match an expression against this grammar.

        Raises:
            InvalidExpressionError: If expression is None
        """
        text = normalize_expression(
            expression, do_not_trim=do_not_trim, expression_type=self.name
        )
        return self.matcher(text)

    def test(self, expression: Any, *, do_not_trim: bool = False) -> bool:
        """Check whether an expression matches this grammar. None never matches."""
        if expression is None:
            return False
        return self.match(expression, do_not_trim=do_not_trim) is not None

    def parse_copper(self, expression: Any, *, do_not_trim: bool = False) -> Decimal | None:
        """Parse an expression into total copper.

        No number in the text is longer than the text itself, so a context
        reserving that many digits on top of the largest notation multiplier
        keeps every term and their sum exact, however long the input.

        Returns:
            Exact copper amount, or None if the expression does not match

        Raises:
            InvalidExpressionError: If expression is None
        """
        text = normalize_expression(
            expression, do_not_trim=do_not_trim, expression_type=self.name
        )
        captures = self.matcher(text)
        if captures is None:
            return None
        with localcontext(exact_context(COPPER_PER_BILLION_GOLD, extra_digits=len(text))):
            return self.parser(captures)

    def __str__(self) -> str:
        return self.name
