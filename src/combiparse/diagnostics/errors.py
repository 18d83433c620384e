"""combiparse exception hierarchy with structured diagnostics.

Parsers report non-matches as Failure values, never as exceptions. The
exceptions here exist for callers that opt into raising via run_or_fail().

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["CombiparseError", "ParseFailedError"]


class CombiparseError(Exception):
    """Base exception for all combiparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CombiparseError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(_describe(message))
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseFailedError(CombiparseError):
    """A parser run through run_or_fail() did not match its input.

    The message starts with ``<label>: <message>`` of the diagnostic, followed
    by the location and the context chain when known:

        string "null": Unexpected 'x' (at line 1, column 4)
    """

    diagnostic: Diagnostic

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize ParseFailedError.

        Args:
            diagnostic: Diagnostic of the failed run
        """
        super().__init__(diagnostic)


def _describe(diagnostic: Diagnostic) -> str:
    text = diagnostic.format_error()
    if diagnostic.span is not None:
        text += f" (at line {diagnostic.span.line}, column {diagnostic.span.column})"
    if diagnostic.context:
        text += " in " + " > ".join(reversed(diagnostic.context))
    return text
