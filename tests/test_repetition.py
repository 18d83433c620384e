"""Tests for repetition, separated lists and optional parsers."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from combiparse import (
    Failure,
    Success,
    any_of,
    char,
    choice,
    many,
    many1,
    option,
    optional,
    run,
    satisfy,
    sep_by,
    sep_by1,
    skip_many,
    string,
    succeed,
    take_while,
)
from combiparse.syntax.parser.text import digit


def _success(outcome: Any) -> Success[Any]:
    assert isinstance(outcome, Success), outcome
    return outcome


class TestMany:
    def test_collects_matches(self) -> None:
        """many(digit) on "123abc" -> ['1','2','3'], remaining "abc"."""
        outcome = _success(run(many(satisfy(str.isdigit, "digit")), "123abc"))

        assert outcome.value == ["1", "2", "3"]
        assert outcome.remaining.rest == "abc"

    def test_zero_matches(self) -> None:
        outcome = _success(run(many(digit()), "abc"))

        assert outcome.value == []
        assert outcome.remaining.pos == 0

    def test_empty_input(self) -> None:
        assert _success(run(many(digit()), "")).value == []

    def test_long_input_does_not_recurse(self) -> None:
        outcome = _success(run(many(char("a")), "a" * 50_000))

        assert len(outcome.value) == 50_000
        assert outcome.remaining.is_eof

    def test_partial_match_of_element_is_not_consumed(self) -> None:
        outcome = _success(run(many(string("ab")), "ababa"))

        assert outcome.value == ["ab", "ab"]
        assert outcome.remaining.rest == "a"


class TestNonAdvancingRepetition:
    def test_zero_width_parser_terminates(self) -> None:
        outcome = _success(run(many(succeed("x")), "abc"))

        assert outcome.value == []
        assert outcome.remaining.pos == 0

    def test_empty_matching_parser_terminates(self) -> None:
        outcome = _success(run(many(take_while(str.isdigit)), "12ab"))

        assert outcome.value == ["12"]
        assert outcome.remaining.rest == "ab"

    def test_many1_zero_width_keeps_first_value(self) -> None:
        outcome = _success(run(many1(succeed(0)), "abc"))

        assert outcome.value == [0]

    def test_stop_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="combiparse"):
            run(many(succeed(None)), "abc")

        assert "consumed no input" in caplog.text


class TestMany1:
    def test_one_or_more(self) -> None:
        outcome = _success(run(many1(digit()), "42!"))

        assert outcome.value == ["4", "2"]
        assert outcome.remaining.rest == "!"

    def test_fails_with_first_diagnostic(self) -> None:
        outcome = run(many1(digit()), "x")

        assert outcome == run(digit(), "x")


class TestSkipMany:
    def test_discards_values(self) -> None:
        outcome = _success(run(skip_many(char(" ")), "   x"))

        assert outcome.value is None
        assert outcome.remaining.rest == "x"


class TestOption:
    def test_present(self) -> None:
        assert _success(run(option("+", any_of("+-")), "-1")).value == "-"

    def test_absent_uses_default_without_consuming(self) -> None:
        outcome = _success(run(option("+", any_of("+-")), "1"))

        assert outcome.value == "+"
        assert outcome.remaining.pos == 0

    def test_optional_none(self) -> None:
        assert _success(run(optional(char("-")), "1")).value is None

    def test_label(self) -> None:
        assert optional(char("-")).label == "optional character '-'"


class TestSepBy:
    def test_separated_items(self) -> None:
        """sep_by(any_of("aoc"), char(' ')) on "a o c" -> ['a','o','c']."""
        outcome = _success(run(sep_by(any_of("aoc"), char(" ")), "a o c"))

        assert outcome.value == ["a", "o", "c"]
        assert outcome.remaining.is_eof

    def test_separated_choices(self) -> None:
        """sep_by1(choice(char('a'), char('o'), char('c')), char(' ')) on "a o c"."""
        parser = sep_by1(choice(char("a"), char("o"), char("c")), char(" "))

        outcome = _success(run(parser, "a o c"))

        assert outcome.value == ["a", "o", "c"]
        assert outcome.remaining.is_eof

    def test_zero_items(self) -> None:
        outcome = _success(run(sep_by(digit(), char(",")), "x"))

        assert outcome.value == []
        assert outcome.remaining.pos == 0

    def test_single_item(self) -> None:
        assert _success(run(sep_by(digit(), char(",")), "1")).value == ["1"]

    def test_trailing_separator_left_unconsumed(self) -> None:
        outcome = _success(run(sep_by(digit(), char(",")), "1,2,x"))

        assert outcome.value == ["1", "2"]
        assert outcome.remaining.rest == ",x"

    def test_sep_by1_requires_first_item(self) -> None:
        assert isinstance(run(sep_by1(digit(), char(",")), ",1"), Failure)

    def test_label(self) -> None:
        assert sep_by(digit(), char(",")).label == "digit separated by character ','"
