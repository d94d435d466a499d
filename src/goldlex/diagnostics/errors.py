"""goldlex exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.
Value errors also derive from the matching built-in exception so callers
can catch them without importing goldlex.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "GoldError",
    "GoldParseError",
    "InfiniteValueError",
    "InvalidExpressionError",
    "MalformedExpressionError",
    "SegmentTypeError",
    "UnknownExpressionTypeError",
    "UnsafeNumberError",
    "ValueNaNError",
]


class GoldError(Exception):
    """Base exception for all goldlex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize GoldError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidExpressionError(GoldError):
    """None was passed where a gold expression was expected.

    This is a caller contract violation, not a parse failure.
    """


class MalformedExpressionError(GoldError, ValueError):
    """No expression type matched the input text.

    Attributes:
        expression: The normalized text that failed to match
        expression_type: Name of the pinned expression type, or None
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        expression: str = "",
        expression_type: str | None = None,
    ) -> None:
        super().__init__(message)
        self.expression = expression
        self.expression_type = expression_type


class UnknownExpressionTypeError(GoldError, KeyError):
    """An expression type was requested by a name that is not registered."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""


class ValueNaNError(GoldError, ValueError):
    """A segment amount is NaN."""


class InfiniteValueError(GoldError, ValueError):
    """A segment amount is infinite."""


class UnsafeNumberError(GoldError, OverflowError):
    """A number exceeds the domain it must be represented in.

    Raised for float segments outside the exactly representable integer
    range and for BIGINT conversions outside the 64-bit domain.
    """


class SegmentTypeError(GoldError, TypeError):
    """A segment amount or arithmetic operand has an unsupported type."""


class GoldParseError(GoldError):
    """Error returned (not raised) by the non-raising parse API.

    Attributes:
        input_value: The string that failed to parse ('' for None input)
        expression_type: Name of the pinned expression type, or None

    Example:
        >>> result, errors = parse_gold("12x")
        >>> for error in errors:
        ...     print(f"Parse failed: {error.input_value}")
        Parse failed: 12x
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        expression_type: str | None = None,
    ) -> None:
        super().__init__(message)
        self.input_value = input_value
        self.expression_type = expression_type
