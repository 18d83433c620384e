"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from combiparse.constants import MAX_DISPLAY_LENGTH

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

# Control characters are rendered as escapes so that untrusted input cannot
# inject newlines or terminal sequences into logs.
_CONTROL_ESCAPES = {i: f"\\x{i:02x}" for i in range(0x20)} | {
    0x09: "\\t",
    0x0A: "\\n",
    0x0D: "\\r",
    0x7F: "\\x7f",
}


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate label/message text to max_content_length
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.unexpected_character("digit", "x", 3)
        >>> print(formatter.format(diagnostic))
        error[UNEXPECTED_CHARACTER]: digit: Unexpected 'x'
          --> offset 3

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        UNEXPECTED_CHARACTER: digit: Unexpected 'x'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = MAX_DISPLAY_LENGTH

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic, indent: str = "") -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[NO_ALTERNATIVE]: "true" or "false": No alternative matched
              --> line 1, column 1
              = context: json value > boolean
              = cause: error[UNEXPECTED_CHARACTER]: string "true": Unexpected 'x'
        """
        severity = "\033[1;31merror\033[0m" if self.color else "error"
        parts = [f"{indent}{severity}[{diagnostic.code.name}]: {self._headline(diagnostic)}"]

        if diagnostic.span is not None:
            parts.append(
                f"{indent}  --> line {diagnostic.span.line}, column {diagnostic.span.column}"
            )
        else:
            parts.append(f"{indent}  --> offset {diagnostic.position}")

        if diagnostic.context:
            frames = " > ".join(self._clean(f) for f in reversed(diagnostic.context))
            parts.append(f"{indent}  = context: {frames}")

        for cause in diagnostic.causes:
            nested = self._format_rust(cause, indent + "    ")
            parts.append(f"{indent}  = cause:\n{nested}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            UNEXPECTED_CHARACTER: character 'a': Unexpected 'b'
        """
        return f"{diagnostic.code.name}: {self._headline(diagnostic)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON (causes nested recursively)."""
        return json.dumps(self._as_dict(diagnostic), ensure_ascii=False)

    def _as_dict(self, diagnostic: Diagnostic) -> dict[str, object]:
        data: dict[str, object] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "label": self._truncate(diagnostic.label),
            "message": self._truncate(diagnostic.message),
            "position": diagnostic.position,
        }

        if diagnostic.span is not None:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column

        if diagnostic.context:
            data["context"] = [self._truncate(f) for f in diagnostic.context]

        if diagnostic.causes:
            data["causes"] = [self._as_dict(c) for c in diagnostic.causes]

        return data

    def _headline(self, diagnostic: Diagnostic) -> str:
        return f"{self._clean(diagnostic.label)}: {self._clean(diagnostic.message)}"

    def _clean(self, text: str) -> str:
        """Escape control characters, then truncate if sanitizing."""
        return self._truncate(text.translate(_CONTROL_ESCAPES))

    def _truncate(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
