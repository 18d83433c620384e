"""Tests for run, run_optional and run_or_fail."""

from __future__ import annotations

import logging
import sys

import pytest

from combiparse import (
    CombiparseError,
    Cursor,
    DiagnosticCode,
    Failure,
    Outcome,
    ParseFailedError,
    Parser,
    Success,
    between,
    char,
    labelled,
    lazy,
    run,
    run_optional,
    run_or_fail,
    string,
    succeed,
)
from combiparse.constants import MAX_NESTING_DEPTH, MAX_SOURCE_SIZE
from combiparse.syntax.parser.text import digit


class TestRun:
    def test_returns_success_with_remainder(self) -> None:
        outcome = run(string("ab"), "abc")

        assert isinstance(outcome, Success)
        assert outcome.value == "ab"
        assert outcome.remaining.rest == "c"

    def test_does_not_require_full_consumption(self) -> None:
        assert isinstance(run(char("a"), "a and more"), Success)

    def test_failure_is_located(self) -> None:
        outcome = run(char("a") >> char("b"), "a\nx")

        assert isinstance(outcome, Failure)
        assert outcome.error.span is not None
        assert outcome.error.position == 1
        assert (outcome.error.span.line, outcome.error.span.column) == (1, 2)

    def test_failure_on_second_line(self) -> None:
        parser = string("a\n") >> char("b")

        outcome = run(parser, "a\nx")
        assert isinstance(outcome, Failure)
        assert outcome.error.span is not None
        assert (outcome.error.span.line, outcome.error.span.column) == (2, 1)

    def test_method_form(self) -> None:
        assert char("a").run("a") == run(char("a"), "a")

    def test_failure_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="combiparse"):
            run(char("a"), "b")

        assert "Parse failed: character 'a': Unexpected 'b'" in caplog.text


class TestSourceSizeLimit:
    def test_default_limit(self) -> None:
        with pytest.raises(ValueError, match="exceeds maximum"):
            run(succeed(None), "x" * (MAX_SOURCE_SIZE + 1))

    def test_custom_limit(self) -> None:
        with pytest.raises(ValueError, match="exceeds maximum"):
            run(succeed(None), "abcd", max_source_size=3)

    def test_at_limit_is_accepted(self) -> None:
        assert isinstance(run(succeed(None), "abc", max_source_size=3), Success)

    def test_zero_disables_check(self) -> None:
        assert isinstance(run(succeed(None), "abcd", max_source_size=0), Success)

    def test_limit_applies_to_every_entry_point(self) -> None:
        with pytest.raises(ValueError, match="exceeds maximum"):
            run_optional(succeed(None), "abcd", max_source_size=3)
        with pytest.raises(ValueError, match="exceeds maximum"):
            run_or_fail(succeed(None), "abcd", max_source_size=3)


def _nested() -> Parser[str]:
    # nested := "(" nested ")" | "x"; "x" inside k parens sits at depth k + 1
    nested: Parser[str]
    nested = lazy(lambda: between(char("("), nested, char(")")) | char("x"), "nested")
    return nested


def _parens(k: int) -> str:
    return "(" * k + "x" + ")" * k


class TestNestingDepth:
    def test_default_limit_reached(self) -> None:
        outcome = run(_nested(), _parens(MAX_NESTING_DEPTH - 1))

        assert isinstance(outcome, Success)
        assert outcome.value == "x"
        assert outcome.remaining.is_eof

    def test_default_limit_exceeded(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="combiparse"):
            outcome = run(_nested(), _parens(MAX_NESTING_DEPTH))

        assert isinstance(outcome, Failure)
        assert outcome.error.code == DiagnosticCode.NESTING_DEPTH_EXCEEDED
        assert outcome.error.label == "nested"
        assert outcome.error.position == MAX_NESTING_DEPTH
        assert "maximum nesting depth (100)" in caplog.text

    def test_exceeding_does_not_backtrack(self) -> None:
        """A branch tried after the deep one must not hide the depth failure."""
        parser = _nested() | string("(((")

        outcome = run(parser, _parens(3), max_nesting_depth=2)

        assert isinstance(outcome, Failure)
        assert outcome.error.code == DiagnosticCode.NESTING_DEPTH_EXCEEDED

    def test_custom_limit(self) -> None:
        assert isinstance(run(_nested(), _parens(4), max_nesting_depth=5), Success)

        outcome = run(_nested(), _parens(5), max_nesting_depth=5)
        assert isinstance(outcome, Failure)
        assert outcome.error.code == DiagnosticCode.NESTING_DEPTH_EXCEEDED

    def test_custom_limit_above_default(self) -> None:
        outcome = run(_nested(), _parens(250), max_nesting_depth=300)

        assert isinstance(outcome, Success)

    def test_limit_applies_to_every_entry_point(self) -> None:
        assert run_optional(_nested(), _parens(3), max_nesting_depth=3) is None
        with pytest.raises(ParseFailedError, match="Maximum nesting depth exceeded"):
            run_or_fail(_nested(), _parens(3), max_nesting_depth=3)
        assert _nested().run_optional(_parens(2), max_nesting_depth=3) == "x"

    @pytest.mark.parametrize("bad", [0, -1])
    def test_limit_must_be_positive(self, bad: int) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            run(_nested(), "x", max_nesting_depth=bad)

    def test_recursion_limit_restored(self) -> None:
        before = sys.getrecursionlimit()

        run(_nested(), _parens(50))
        run(_nested(), _parens(500))

        assert sys.getrecursionlimit() == before

    def test_depth_resets_between_runs(self) -> None:
        parser = _nested()
        run(parser, _parens(MAX_NESTING_DEPTH))

        assert isinstance(run(parser, _parens(MAX_NESTING_DEPTH - 1)), Success)

    def test_recursion_error_becomes_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        def exhaust(cursor: Cursor) -> Outcome[str]:
            raise RecursionError

        with caplog.at_level(logging.WARNING, logger="combiparse"):
            outcome = run(Parser(exhaust, "exhaust"), "x")

        assert isinstance(outcome, Failure)
        assert outcome.error.code == DiagnosticCode.NESTING_DEPTH_EXCEEDED
        assert outcome.error.label == "exhaust"
        assert "recursion limit" in caplog.text


class TestRunOptional:
    def test_value_on_success(self) -> None:
        assert run_optional(digit(), "7") == "7"

    def test_none_on_failure(self) -> None:
        assert run_optional(digit(), "x") is None

    def test_method_form(self) -> None:
        assert digit().run_optional("x") is None


class TestRunOrFail:
    def test_value_on_success(self) -> None:
        assert run_or_fail(digit().map(int), "7") == 7

    def test_raises_with_label_and_message(self) -> None:
        """string("null") on "nulx" -> ParseFailedError."""
        with pytest.raises(ParseFailedError) as exc_info:
            run_or_fail(string("null"), "nulx")

        assert str(exc_info.value).startswith("string \"null\": Unexpected 'x'")
        assert str(exc_info.value) == (
            "string \"null\": Unexpected 'x' (at line 1, column 4)"
        )

    def test_error_carries_diagnostic(self) -> None:
        with pytest.raises(ParseFailedError) as exc_info:
            char("a").run_or_fail("b")

        diagnostic = exc_info.value.diagnostic
        assert diagnostic.code == DiagnosticCode.UNEXPECTED_CHARACTER
        assert diagnostic.span is not None

    def test_message_includes_context_outermost_first(self) -> None:
        parser = labelled(labelled(digit(), "exponent"), "number")

        with pytest.raises(ParseFailedError, match=r"in number > exponent$"):
            run_or_fail(parser, "x")

    def test_is_combiparse_error(self) -> None:
        with pytest.raises(CombiparseError):
            run_or_fail(char("a"), "")
