"""Rendering of gold diagnostics for people and tools.

Three styles share one field extraction step:

    rust    error[EXPRESSION_MALFORMED]: message, then "= label: value" lines
    simple  EXPRESSION_MALFORMED: message
    json    one JSON object per diagnostic

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Diagnostic rendering style."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Configurable diagnostic renderer.

    Attributes:
        output_format: Rendering style (default: rust)
        sanitize: Cut long messages and echoed input to max_content_length
        max_content_length: Characters kept when sanitizing

    Example:
        >>> simple = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(simple.format(ErrorTemplate.value_nan("gold")))
        VALUE_NAN: The amount of 'gold' is NaN
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured style."""
        message = self._clip(diagnostic.message)
        match self.output_format:
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {message}"
            case OutputFormat.JSON:
                return self._as_json(diagnostic, message)
            case OutputFormat.RUST:
                return self._as_rust(diagnostic, message)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics separated by a blank line."""
        return "\n\n".join(map(self.format, diagnostics))

    def _fields(self, diagnostic: Diagnostic) -> list[tuple[str, str, str]]:
        # (rust label, json key, value) for every populated optional field
        fields: list[tuple[str, str, str]] = []
        if diagnostic.expression_type:
            fields.append(("expression type", "expression_type", diagnostic.expression_type))
        if diagnostic.segment_name:
            fields.append(("segment", "segment_name", diagnostic.segment_name))
        if diagnostic.input_value is not None:
            fields.append(("input", "input_value", self._clip(diagnostic.input_value)))
        if diagnostic.hint:
            fields.append(("help", "hint", diagnostic.hint))
        return fields

    def _as_rust(self, diagnostic: Diagnostic, message: str) -> str:
        lines = [f"error[{diagnostic.code.name}]: {message}"]
        lines.extend(f"  = {label}: {value}" for label, _, value in self._fields(diagnostic))
        return "\n".join(lines)

    def _as_json(self, diagnostic: Diagnostic, message: str) -> str:
        payload: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.code.category),
            "message": message,
        }
        payload.update((key, value) for _, key, value in self._fields(diagnostic))
        return json.dumps(payload, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if not self.sanitize or len(text) <= self.max_content_length:
            return text
        return f"{text[: self.max_content_length]}..."
