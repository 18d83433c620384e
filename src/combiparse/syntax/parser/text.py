"""Common character-class parsers built from the primitives.

Nothing here inspects the cursor directly; these are ordinary compositions
of :mod:`~combiparse.syntax.parser.primitives` and the combinators.
"""

from typing import Any

from .combinators import combine, discard_right
from .core import Parser
from .primitives import char, satisfy, take_while
from .repetition import many1, option

__all__ = [
    "decimal",
    "digit",
    "digits",
    "integer",
    "letter",
    "not_char",
    "space",
    "spaces",
    "token",
]

# ASCII digits only. str.isdigit() accepts characters such as '²' that int()
# rejects.
_ASCII_DIGITS: str = "0123456789"


def digit() -> Parser[str]:
    """A single ASCII digit."""
    return satisfy(lambda ch: ch in _ASCII_DIGITS, "digit")


def digits() -> Parser[str]:
    """One or more ASCII digits as a string."""
    return many1(digit()).map("".join).with_label("digits")


def decimal() -> Parser[int]:
    """An unsigned decimal number."""
    return digits().map(int).with_label("decimal")


def integer() -> Parser[int]:
    """A decimal number with an optional leading minus sign."""
    return combine(lambda sign, ds: int(sign + ds), option("", char("-")), digits()).with_label(
        "integer"
    )


def letter() -> Parser[str]:
    """A single letter, as per str.isalpha()."""
    return satisfy(str.isalpha, "letter")


def space() -> Parser[str]:
    """A single whitespace character, as per str.isspace()."""
    return satisfy(str.isspace, "space")


def spaces() -> Parser[str]:
    """Zero or more whitespace characters. Never fails."""
    return take_while(str.isspace, "spaces")


def not_char(c: str) -> Parser[str]:
    """Any single character except ``c``."""
    return satisfy(lambda ch: ch != c, f"not character '{c}'")


def token[T](parser: Parser[T]) -> Parser[T]:
    """``parser`` followed by optional whitespace, which is skipped."""
    skipped: Parser[Any] = spaces()
    return discard_right(parser, skipped).with_label(parser.label)
