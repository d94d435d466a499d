"""Diagnostic system for goldlex errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
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
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "GoldError",
    "GoldParseError",
    "InfiniteValueError",
    "InvalidExpressionError",
    "MalformedExpressionError",
    "OutputFormat",
    "SegmentTypeError",
    "UnknownExpressionTypeError",
    "UnsafeNumberError",
    "ValueNaNError",
]
