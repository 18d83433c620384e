"""Repetition, separated lists and optional parsers.

All repetition runs as an explicit loop over a local accumulator and cursor,
so stack depth does not grow with the number of matches.

Non-advancing Repetition:
    If the repeated parser succeeds without consuming input, the loop stops
    there: that zero-width value is dropped and the repetition succeeds with
    what it has collected so far. This guarantees termination for any
    parser, including ones that can match the empty string.
"""

import logging
from typing import Any

from combiparse.syntax.cursor import Cursor
from combiparse.syntax.outcome import Failure, Outcome, Success

from .combinators import choice, discard_left
from .core import Parser
from .primitives import succeed

__all__ = [
    "many",
    "many1",
    "option",
    "optional",
    "sep_by",
    "sep_by1",
    "skip_many",
]

logger = logging.getLogger(__name__)


def _collect[T](parser: Parser[T], cursor: Cursor, values: list[T]) -> Cursor:
    """Append values of ``parser`` until it fails or stops advancing.

    Returns:
        Cursor after the last consuming match
    """
    while True:
        outcome = parser(cursor)
        if isinstance(outcome, Failure):
            return cursor
        if outcome.remaining.pos == cursor.pos:
            logger.debug(
                "Repetition of %r stopped at offset %d: match consumed no input",
                parser.label,
                cursor.pos,
            )
            return cursor
        values.append(outcome.value)
        cursor = outcome.remaining


def many[T](parser: Parser[T]) -> Parser[list[T]]:
    """Zero or more ``parser`` matches, in order. Never fails.

    Example:
        >>> from combiparse.syntax.parser.primitives import satisfy
        >>> outcome = many(satisfy(str.isdigit, "digit")).run("123abc")
        >>> outcome.value, outcome.remaining.rest
        (['1', '2', '3'], 'abc')
    """

    def parse(cursor: Cursor) -> Outcome[list[T]]:
        values: list[T] = []
        cursor = _collect(parser, cursor, values)
        return Success(values, cursor)

    return Parser(parse, f"many of {parser.label}")


def many1[T](parser: Parser[T]) -> Parser[list[T]]:
    """One or more ``parser`` matches.

    Fails if and only if the first application fails, with that Diagnostic.
    """

    def parse(cursor: Cursor) -> Outcome[list[T]]:
        first = parser(cursor)
        if isinstance(first, Failure):
            return first
        values = [first.value]
        cursor = _collect(parser, first.remaining, values)
        return Success(values, cursor)

    return Parser(parse, f"many1 of {parser.label}")


def skip_many(parser: Parser[Any]) -> Parser[None]:
    """Zero or more ``parser`` matches, values discarded."""
    repeated = many(parser)

    def parse(cursor: Cursor) -> Outcome[None]:
        outcome = repeated(cursor)
        assert isinstance(outcome, Success)  # many never fails
        return Success(None, outcome.remaining)

    return Parser(parse, f"skip many of {parser.label}")


def option[T](default: T, parser: Parser[T]) -> Parser[T]:
    """``parser``'s value, or ``default`` without consuming input. Never fails."""
    return choice(parser, succeed(default)).with_label(f"optional {parser.label}")


def optional[T](parser: Parser[T]) -> Parser[T | None]:
    """``parser``'s value, or None without consuming input."""
    return option(None, parser)


def sep_by1[T](parser: Parser[T], sep: Parser[Any]) -> Parser[list[T]]:
    """One or more ``parser`` matches separated by ``sep``.

    Fails only if the first ``parser`` fails. A trailing separator that is not
    followed by another match is left unconsumed.

    Example:
        >>> from combiparse.syntax.parser.primitives import any_of, char
        >>> sep_by1(any_of("aoc"), char(" ")).run_or_fail("a o c")
        ['a', 'o', 'c']
    """
    tail = discard_left(sep, parser)

    def parse(cursor: Cursor) -> Outcome[list[T]]:
        first = parser(cursor)
        if isinstance(first, Failure):
            return first
        values = [first.value]
        cursor = _collect(tail, first.remaining, values)
        return Success(values, cursor)

    return Parser(parse, f"{parser.label} separated by {sep.label}")


def sep_by[T](parser: Parser[T], sep: Parser[Any]) -> Parser[list[T]]:
    """Zero or more ``parser`` matches separated by ``sep``. Never fails."""
    some = sep_by1(parser, sep)

    def parse(cursor: Cursor) -> Outcome[list[T]]:
        outcome = some(cursor)
        if isinstance(outcome, Failure):
            return Success([], cursor)
        return outcome

    return Parser(parse, some.label)
