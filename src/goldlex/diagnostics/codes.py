"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for goldlex diagnostics.

    Categories:
        EXPRESSION: Gold expression input failures (null or malformed text)
        VALUE: Segment value failures (NaN, infinity, unsafe range, type)
        CONVERSION: Bounded integer conversion failures
    """

    EXPRESSION = "expression"
    VALUE = "value"
    CONVERSION = "conversion"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Expression errors (null input, no matching grammar)
        2000-2999: Value errors (segment validation)
        3000-3999: Conversion errors (bounded integer domains)
    """

    # Expression errors (1000-1999)
    EXPRESSION_INVALID = 1001
    EXPRESSION_MALFORMED = 1002
    EXPRESSION_TYPE_UNKNOWN = 1003

    # Value errors (2000-2999)
    VALUE_NAN = 2001
    VALUE_INFINITE = 2002
    VALUE_UNSAFE_NUMBER = 2003
    VALUE_TYPE_MISMATCH = 2004

    # Conversion errors (3000-3999)
    CONVERSION_OUT_OF_RANGE = 3001

    @property
    def category(self) -> ErrorCategory:
        """Category implied by the code's numeric range."""
        if self.value < 2000:
            return ErrorCategory.EXPRESSION
        if self.value < 3000:
            return ErrorCategory.VALUE
        return ErrorCategory.CONVERSION


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        segment_name: Segment that failed validation (value errors)
        input_value: Text or value that triggered the error
        expression_type: Name of the expression type involved, if pinned
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    segment_name: str | None = None
    input_value: str | None = None
    expression_type: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[EXPRESSION_MALFORMED]: Malformed gold expression '12x'
              = input: 12x
              = help: Use a form such as '12g 34s 56c', '923s' or '1.5k'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
