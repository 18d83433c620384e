"""Tests for the immutable cursor and the Outcome variants."""

from __future__ import annotations

import pytest

from combiparse.diagnostics import Diagnostic
from combiparse.syntax.cursor import Cursor
from combiparse.syntax.outcome import Failure, Success

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor(self) -> None:
        """Create cursor at position 0 by default."""
        cursor = Cursor("hello")

        assert cursor.source == "hello"
        assert cursor.pos == 0
        assert not cursor.is_eof

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor("hello", 0)

        with pytest.raises(AttributeError):
            cursor.pos = 5  # type: ignore[misc]

    def test_position_outside_source_rejected(self) -> None:
        """A cursor is always a suffix of its source."""
        with pytest.raises(ValueError, match="outside source"):
            Cursor("abc", 4)
        with pytest.raises(ValueError, match="outside source"):
            Cursor("abc", -1)

    def test_equal_cursors_compare_equal(self) -> None:
        assert Cursor("abc", 1) == Cursor("abc", 1)
        assert Cursor("abc", 1) != Cursor("abc", 2)


class TestCursorNavigation:
    """advance(), rest and lookahead."""

    def test_advance_returns_new_cursor(self) -> None:
        cursor = Cursor("hello", 0)
        moved = cursor.advance()

        assert cursor.pos == 0
        assert moved.pos == 1
        assert moved.current == "e"

    def test_advance_clamps_at_eof(self) -> None:
        cursor = Cursor("hi", 1).advance(10)

        assert cursor.pos == 2
        assert cursor.is_eof

    def test_rest_is_the_unconsumed_suffix(self) -> None:
        assert Cursor("abcdef", 3).rest == "def"
        assert Cursor("abc", 3).rest == ""

    def test_remaining_length(self) -> None:
        assert Cursor("abcdef", 2).remaining_length == 4

    def test_current_at_eof_raises(self) -> None:
        with pytest.raises(EOFError, match="position 2"):
            _ = Cursor("hi", 2).current

    def test_peek(self) -> None:
        cursor = Cursor("abc", 1)

        assert cursor.peek() == "b"
        assert cursor.peek(1) == "c"
        assert cursor.peek(2) is None

    def test_slice_ahead_stops_at_eof(self) -> None:
        assert Cursor("hello", 3).slice_ahead(10) == "lo"

    def test_slice_to(self) -> None:
        assert Cursor("hello world", 6).slice_to(11) == "world"


class TestCursorPrefix:
    """startswith() is anchored at the cursor position."""

    def test_prefix_at_position(self) -> None:
        assert Cursor("abcdef").startswith("abc")

    def test_later_occurrence_is_not_a_prefix(self) -> None:
        assert not Cursor("xabc").startswith("abc")

    def test_prefix_from_middle(self) -> None:
        assert Cursor("xabc", 1).startswith("abc")

    def test_prefix_longer_than_input(self) -> None:
        assert not Cursor("ab").startswith("abc")


class TestCursorLocation:
    """Line and column computation."""

    def test_first_line(self) -> None:
        assert Cursor("hello", 0).compute_line_col() == (1, 1)

    def test_second_line(self) -> None:
        assert Cursor("line1\nline2", 6).compute_line_col() == (2, 1)
        assert Cursor("line1\nline2", 8).compute_line_col() == (2, 3)

    def test_span_is_zero_width(self) -> None:
        span = Cursor("ab\ncd", 4).span()

        assert (span.start, span.end, span.line, span.column) == (4, 4, 2, 2)


class TestOutcome:
    """Success and Failure variants."""

    def test_success_fields(self) -> None:
        outcome = Success("a", Cursor("abc", 1))

        assert outcome.is_success
        assert outcome.value == "a"
        assert outcome.remaining.rest == "bc"

    def test_failure_carries_only_diagnostic(self) -> None:
        outcome = Failure(Diagnostic("character 'a'", "Unexpected 'b'"))

        assert not outcome.is_success
        assert not hasattr(outcome, "remaining")
        assert not hasattr(outcome, "value")

    def test_outcomes_compare_by_value(self) -> None:
        assert Success(1, Cursor("x", 0)) == Success(1, Cursor("x", 0))
        assert Success(1, Cursor("x", 0)) != Success(1, Cursor("x", 1))
