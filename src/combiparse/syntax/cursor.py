"""Immutable cursor over the unconsumed input.

Implements the immutable cursor pattern that every parser threads through
its Outcome. Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - A cursor is a position into the original text; copying never copies text
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor
    - Line:column computed on-demand (O(n) only for errors)

Pattern Reference:
    - Haskell Parsec
    - F# FParsec
"""

from dataclasses import dataclass

from combiparse.diagnostics import SourceSpan

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable view of the remaining input.

    The view is always a suffix of ``source``: ``source[pos:]``.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.rest
        'ello'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int = 0

    def __post_init__(self) -> None:
        """Validate that pos lies within the source.

        Raises:
            ValueError: If pos is negative or beyond the end of source
        """
        if not 0 <= self.pos <= len(self.source):
            msg = f"Cursor position {self.pos} outside source of length {len(self.source)}"
            raise ValueError(msg)

    @property
    def is_eof(self) -> bool:
        """True when no input remains."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input

        Check is_eof first; matchers never call this at end of input.
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    @property
    def rest(self) -> str:
        """The unconsumed input as a string (allocates a copy)."""
        return self.source[self.pos :]

    @property
    def remaining_length(self) -> int:
        """Number of unconsumed characters."""
        return len(self.source) - self.pos

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions, clamped to EOF.

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(2).pos
            2
            >>> cursor.pos
            0
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def startswith(self, prefix: str) -> bool:
        """True when the remaining input begins with ``prefix`` at this position.

        Anchored at ``pos``: an occurrence of ``prefix`` later in the input
        does not count.

        Example:
            >>> Cursor("xabc").startswith("abc")
            False
            >>> Cursor("xabc", 1).startswith("abc")
            True
        """
        return self.source.startswith(prefix, self.pos)

    def slice_ahead(self, n: int) -> str:
        """Get up to n characters without advancing."""
        return self.source[self.pos : self.pos + n]

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos."""
        return self.source[self.pos : end_pos]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position. Only call for error reporting.

        Example:
            >>> Cursor("line1\\nline2", 8).compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def span(self) -> SourceSpan:
        """Zero-width SourceSpan at the current position."""
        line, col = self.compute_line_col()
        return SourceSpan(start=self.pos, end=self.pos, line=line, column=col)
