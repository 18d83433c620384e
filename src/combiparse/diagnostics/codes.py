"""Diagnostic codes and data structures.

Defines failure codes, source spans, and the Diagnostic record carried by
every failed parse.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, replace
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Failure codes with unique identifiers.

    Organized by category:
        1000-1999: Input errors (primitive matchers rejecting input)
        2000-2999: Combinator errors (choice exhaustion, explicit failure)
        3000-3999: Resource errors (recursion depth)
    """

    # Input errors (1000-1999)
    EMPTY_INPUT = 1001
    UNEXPECTED_CHARACTER = 1002
    UNEXPECTED_END_OF_INPUT = 1003
    EXPECTED_END_OF_INPUT = 1004

    # Combinator errors (2000-2999)
    NO_ALTERNATIVE = 2001
    EXPLICIT_FAILURE = 2002

    # Resource errors (3000-3999)
    NESTING_DEPTH_EXCEEDED = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Why a parser failed at a position.

    The ``label`` names the parser that produced the failure (for example
    ``character 'a'`` or ``string "null"``) and ``message`` explains it.
    Combinators never concatenate labels into the message; instead,
    ``context`` collects the names of enclosing labelled parsers, innermost
    first, as the failure propagates outward.

    Attributes:
        label: Display label of the failing parser
        message: Short human-readable explanation
        code: Failure category
        position: Character offset where the failure was detected
        context: Enclosing labelled parsers, innermost first
        causes: Branch failures collected when every alternative failed
        span: Line/column location, attached once by the run entry points
    """

    label: str
    message: str
    code: DiagnosticCode = DiagnosticCode.UNEXPECTED_CHARACTER
    position: int = 0
    context: tuple[str, ...] = ()
    causes: tuple["Diagnostic", ...] = ()
    span: SourceSpan | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.format_error()

    def format_error(self) -> str:
        """Render ``<label>: <message>``.

        Example:
            >>> Diagnostic('string "null"', "Unexpected 'x'").format_error()
            'string "null": Unexpected \\'x\\''
        """
        return f"{self.label}: {self.message}"

    def within(self, frame: str) -> "Diagnostic":
        """Return a copy with ``frame`` appended to the context chain."""
        return replace(self, context=(*self.context, frame))

    def located(self, span: SourceSpan) -> "Diagnostic":
        """Return a copy carrying ``span``."""
        return replace(self, span=span)
