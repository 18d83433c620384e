"""Diagnostic system for parse failures.

Provides structured failure diagnostics with codes, spans, and context
chains. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import CombiparseError, ParseFailedError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CombiparseError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "ParseFailedError",
    "SourceSpan",
]
