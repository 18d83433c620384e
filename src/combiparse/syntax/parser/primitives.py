"""Primitive parser constructors.

Base-case parsers that every grammar is ultimately built from. Each one
inspects the cursor directly; everything else in the package is composed
from these.

Failure Messages:
    All diagnostics come from ErrorTemplate:
    - "Empty input" when a matcher runs at end of input
    - "Unexpected '<c>'" when the character at the cursor is rejected
    - "Unexpected end of input" when a literal is cut short
"""

from collections.abc import Callable, Iterable
from typing import Any

from combiparse.diagnostics import ErrorTemplate
from combiparse.syntax.cursor import Cursor
from combiparse.syntax.outcome import Failure, Outcome, Success

from .core import Parser

__all__ = [
    "any_char",
    "any_of",
    "char",
    "eof",
    "fail",
    "none_of",
    "satisfy",
    "skip_while",
    "string",
    "succeed",
    "take_while",
]


def succeed[T](value: T) -> Parser[T]:
    """Always succeed with ``value``, consuming nothing.

    The unit of the parser monad: ``bind(succeed(x), f)`` behaves as ``f(x)``.
    """

    def parse(cursor: Cursor) -> Outcome[T]:
        return Success(value, cursor)

    return Parser(parse, "succeed")


def fail(message: str, label: str = "fail") -> Parser[Any]:
    """Always fail with ``message``, consuming nothing."""

    def parse(cursor: Cursor) -> Outcome[Any]:
        return Failure(ErrorTemplate.explicit_failure(label, message, cursor.pos))

    return Parser(parse, label)


def satisfy(predicate: Callable[[str], bool], label: str) -> Parser[str]:
    """Consume one character if ``predicate`` accepts it.

    Args:
        predicate: Test applied to the character at the cursor
        label: Label reported in diagnostics

    Returns:
        Parser yielding the matched character

    Example:
        >>> satisfy(str.isdigit, "digit").run_or_fail("7up")
        '7'
    """

    def parse(cursor: Cursor) -> Outcome[str]:
        if cursor.is_eof:
            return Failure(ErrorTemplate.empty_input(label, cursor.pos))
        ch = cursor.current
        if predicate(ch):
            return Success(ch, cursor.advance())
        return Failure(ErrorTemplate.unexpected_character(label, ch, cursor.pos))

    return Parser(parse, label)


def char(c: str) -> Parser[str]:
    """Match exactly the character ``c``.

    Raises:
        ValueError: If c is not a single character
    """
    if len(c) != 1:
        msg = f"char() expects a single character, got {c!r}"
        raise ValueError(msg)
    return satisfy(lambda ch: ch == c, f"character '{c}'")


def string(s: str) -> Parser[str]:
    """Match the literal ``s`` starting exactly at the cursor.

    Only a true prefix match succeeds; ``s`` appearing further along the
    input is not a match and nothing before it is skipped.

    Example:
        >>> string("abc").run("abcdef").remaining.rest
        'def'
        >>> string("abc").run_optional("xabc") is None
        True
    """
    label = f'string "{s}"'

    def parse(cursor: Cursor) -> Outcome[str]:
        if cursor.startswith(s):
            return Success(s, cursor.advance(len(s)))
        if cursor.is_eof:
            return Failure(ErrorTemplate.empty_input(label, cursor.pos))
        # Locate the first mismatch for the diagnostic.
        ahead = cursor.slice_ahead(len(s))
        for offset, (expected, found) in enumerate(zip(s, ahead, strict=False)):
            if expected != found:
                return Failure(
                    ErrorTemplate.unexpected_character(label, found, cursor.pos + offset)
                )
        return Failure(ErrorTemplate.unexpected_end_of_input(label, cursor.pos + len(ahead)))

    return Parser(parse, label)


def any_char() -> Parser[str]:
    """Match any single character."""
    return satisfy(lambda _: True, "any character")


def any_of(chars: Iterable[str]) -> Parser[str]:
    """Match any single character from ``chars``."""
    allowed = "".join(chars)
    return satisfy(lambda ch: ch in allowed, f"any of: {allowed}")


def none_of(chars: Iterable[str]) -> Parser[str]:
    """Match any single character not in ``chars``."""
    excluded = "".join(chars)
    return satisfy(lambda ch: ch not in excluded, f"none of: {excluded}")


def eof() -> Parser[None]:
    """Succeed with None only when no input remains."""
    label = "end of input"

    def parse(cursor: Cursor) -> Outcome[None]:
        if cursor.is_eof:
            return Success(None, cursor)
        return Failure(ErrorTemplate.expected_end_of_input(label, cursor.current, cursor.pos))

    return Parser(parse, label)


def take_while(predicate: Callable[[str], bool], label: str = "take while") -> Parser[str]:
    """Consume the longest run of characters accepted by ``predicate``.

    Never fails; yields an empty string when the first character is rejected.
    """

    def parse(cursor: Cursor) -> Outcome[str]:
        start = cursor
        while not cursor.is_eof and predicate(cursor.current):
            cursor = cursor.advance()
        return Success(start.slice_to(cursor.pos), cursor)

    return Parser(parse, label)


def skip_while(predicate: Callable[[str], bool], label: str = "skip while") -> Parser[None]:
    """As :func:`take_while`, discarding the characters."""
    taker = take_while(predicate, label)

    def parse(cursor: Cursor) -> Outcome[None]:
        outcome = taker(cursor)
        assert isinstance(outcome, Success)  # take_while never fails
        return Success(None, outcome.remaining)

    return Parser(parse, label)
