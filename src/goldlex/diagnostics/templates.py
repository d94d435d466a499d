"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]

# Longest input echoed back inside a message; the full value stays on the
# diagnostic's input_value field.
_MAX_ECHO_LENGTH: int = 64


def _echo(value: str) -> str:
    if len(value) > _MAX_ECHO_LENGTH:
        return value[:_MAX_ECHO_LENGTH] + "..."
    return value


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages:
        - Testable
        - Consistent in wording
        - Documented in one place
    """

    _EXPRESSION_HINT = "Use a form such as '12g 34s 56c', '923s', '1,234.5c' or '1.5k'"
    _PRECISION_HINT = "Pass a Decimal or int to preserve precision"

    @staticmethod
    def expression_invalid(expression_type: str | None = None) -> Diagnostic:
        """Null input passed where a gold expression was expected.

        Args:
            expression_type: Name of the pinned expression type, if any

        Returns:
            Diagnostic for EXPRESSION_INVALID
        """
        msg = "Type of None is not a valid gold expression and cannot be matched"
        return Diagnostic(
            code=DiagnosticCode.EXPRESSION_INVALID,
            message=msg,
            hint="Pass the expression as a string",
            expression_type=expression_type,
        )

    @staticmethod
    def expression_malformed(expression: str, expression_type: str | None = None) -> Diagnostic:
        """No expression type matched the input.

        Args:
            expression: The (normalized) expression text
            expression_type: Name of the pinned expression type, if any

        Returns:
            Diagnostic for EXPRESSION_MALFORMED
        """
        if expression_type is None:
            msg = f"Malformed gold expression '{_echo(expression)}'"
        else:
            msg = (
                f"Malformed gold expression '{_echo(expression)}'; "
                f"it does not match expression type {expression_type}"
            )
        return Diagnostic(
            code=DiagnosticCode.EXPRESSION_MALFORMED,
            message=msg,
            hint=ErrorTemplate._EXPRESSION_HINT,
            input_value=expression,
            expression_type=expression_type,
        )

    @staticmethod
    def expression_type_unknown(name: str, known: tuple[str, ...]) -> Diagnostic:
        """Expression type requested by a name that is not registered.

        Args:
            name: The requested name
            known: Registered expression type names

        Returns:
            Diagnostic for EXPRESSION_TYPE_UNKNOWN
        """
        msg = f"Unknown gold expression type '{_echo(name)}'"
        return Diagnostic(
            code=DiagnosticCode.EXPRESSION_TYPE_UNKNOWN,
            message=msg,
            hint=f"Known expression types: {', '.join(known)}",
            input_value=name,
        )

    @staticmethod
    def value_nan(segment_name: str) -> Diagnostic:
        """Segment amount is NaN.

        Args:
            segment_name: 'gold', 'silver' or 'copper'

        Returns:
            Diagnostic for VALUE_NAN
        """
        msg = f"The amount of '{segment_name}' is NaN"
        return Diagnostic(
            code=DiagnosticCode.VALUE_NAN,
            message=msg,
            segment_name=segment_name,
        )

    @staticmethod
    def value_infinite(segment_name: str) -> Diagnostic:
        """Segment amount is infinite.

        Args:
            segment_name: 'gold', 'silver' or 'copper'

        Returns:
            Diagnostic for VALUE_INFINITE
        """
        msg = f"The amount of '{segment_name}' must not be infinite"
        return Diagnostic(
            code=DiagnosticCode.VALUE_INFINITE,
            message=msg,
            segment_name=segment_name,
        )

    @staticmethod
    def value_unsafe_number(segment_name: str, value: float) -> Diagnostic:
        """Float segment lies outside the exactly representable integer range.

        Args:
            segment_name: 'gold', 'silver' or 'copper'
            value: The offending float

        Returns:
            Diagnostic for VALUE_UNSAFE_NUMBER
        """
        msg = (
            f"The amount of '{segment_name}' falls below or exceeds the lower/upper "
            f"safe float integer bounds (+/-(2**53 - 1))"
        )
        return Diagnostic(
            code=DiagnosticCode.VALUE_UNSAFE_NUMBER,
            message=msg,
            hint=ErrorTemplate._PRECISION_HINT,
            segment_name=segment_name,
            input_value=repr(value),
        )

    @staticmethod
    def value_type_mismatch(segment_name: str, received_type: str) -> Diagnostic:
        """Segment amount has an unsupported type.

        Args:
            segment_name: 'gold', 'silver' or 'copper'
            received_type: Type name of the value received

        Returns:
            Diagnostic for VALUE_TYPE_MISMATCH
        """
        msg = (
            f"The amount of '{segment_name}' must be a Decimal, int or float, "
            f"not {received_type}"
        )
        return Diagnostic(
            code=DiagnosticCode.VALUE_TYPE_MISMATCH,
            message=msg,
            segment_name=segment_name,
        )

    @staticmethod
    def operand_type_mismatch(received_type: str) -> Diagnostic:
        """Arithmetic operand has an unsupported type.

        Args:
            received_type: Type name of the operand received

        Returns:
            Diagnostic for VALUE_TYPE_MISMATCH
        """
        msg = f"Gold arithmetic operand must be Gold, Decimal, int, float or str, not {received_type}"
        return Diagnostic(
            code=DiagnosticCode.VALUE_TYPE_MISMATCH,
            message=msg,
        )

    @staticmethod
    def operand_not_numeric(value: str) -> Diagnostic:
        """String operand is not a decimal number.

        Args:
            value: The string operand

        Returns:
            Diagnostic for VALUE_TYPE_MISMATCH
        """
        msg = f"Gold arithmetic operand '{_echo(value)}' is not a decimal number"
        return Diagnostic(
            code=DiagnosticCode.VALUE_TYPE_MISMATCH,
            message=msg,
            hint="Use Gold.parse() for gold expressions such as '12s 34c'",
            input_value=value,
        )

    @staticmethod
    def bigint_out_of_range(total_copper: int, *, unsigned: bool) -> Diagnostic:
        """Truncated copper does not fit the requested BIGINT domain.

        Args:
            total_copper: The truncated copper amount
            unsigned: Whether the unsigned domain was requested

        Returns:
            Diagnostic for CONVERSION_OUT_OF_RANGE
        """
        domain = "unsigned BIGINT [0, 2**64 - 1]" if unsigned else (
            "signed BIGINT [-2**63, 2**63 - 1]"
        )
        msg = f"Cannot convert Gold to {domain}; total copper {total_copper} is out of range"
        return Diagnostic(
            code=DiagnosticCode.CONVERSION_OUT_OF_RANGE,
            message=msg,
            input_value=str(total_copper),
        )
