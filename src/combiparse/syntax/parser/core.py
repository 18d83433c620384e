"""Parser value type and the run entry points.

A :class:`Parser` wraps a pure function from :class:`~combiparse.syntax.cursor.Cursor`
to :data:`~combiparse.syntax.outcome.Outcome`. Composing parsers builds a new
value; nothing runs until one of the entry points is called with real input.

Architecture:
    - Every parse function takes a Cursor (immutable) as input
    - Every parse function returns Success(value, remaining) or Failure(diagnostic)
    - Parsers carry no mutable state, so they are freely shared and reused

Entry Points:
    - :func:`run` - full Outcome (value and unconsumed remainder, or Diagnostic)
    - :func:`run_optional` - value or None
    - :func:`run_or_fail` - value, or raises ParseFailedError

Security:
    - Input size is validated before parsing (configurable max_source_size)
    - Recursion through lazy() is capped (configurable max_nesting_depth);
      exceeding the cap is a NESTING_DEPTH_EXCEEDED failure
    - A RecursionError that still escapes the grammar is reported the same way
      instead of reaching the caller
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from combiparse.constants import DEFAULT_LABEL, MAX_NESTING_DEPTH, MAX_SOURCE_SIZE
from combiparse.diagnostics import ErrorTemplate, ParseFailedError
from combiparse.syntax.cursor import Cursor
from combiparse.syntax.outcome import Failure, Outcome, Success

from .depth import NestingDepthExceededError, nesting_limit

__all__ = ["Parser", "run", "run_optional", "run_or_fail"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Parser[T]:
    """Composable parser producing a value of type T.

    Attributes:
        parse_function: Pure function from Cursor to Outcome
        label: Display label used when composing diagnostics

    Operators:
        ``p1 | p2``  alternation (p2 tried at the original cursor)
        ``p1 >> p2`` sequence, keep the right value
        ``p1 << p2`` sequence, keep the left value

    Example:
        >>> from combiparse.syntax.parser.primitives import char
        >>> (char("a") | char("b")).run_or_fail("beef")
        'b'
    """

    parse_function: Callable[[Cursor], Outcome[T]]
    label: str = DEFAULT_LABEL

    def __call__(self, cursor: Cursor) -> Outcome[T]:
        return self.parse_function(cursor)

    def __repr__(self) -> str:
        return f"Parser({self.label!r})"

    def with_label(self, label: str) -> Parser[T]:
        """Return a copy with a different display label."""
        return replace(self, label=label)

    # -- algebra ------------------------------------------------------------
    # Thin delegates; the combinator modules import this one.

    def map[U](self, f: Callable[[T], U]) -> Parser[U]:
        """Transform the parsed value with ``f``. See :func:`fmap`."""
        from .combinators import fmap  # noqa: PLC0415 - circular

        return fmap(self, f)

    def apply(self: Parser[Callable[[Any], Any]], parser_x: Parser[Any]) -> Parser[Any]:
        """Apply the parsed function to ``parser_x``'s value. See :func:`apply`."""
        from .combinators import apply  # noqa: PLC0415 - circular

        return apply(self, parser_x)

    def bind[U](self, f: Callable[[T], Parser[U]]) -> Parser[U]:
        """Continue with the parser ``f`` builds from the value. See :func:`bind`."""
        from .combinators import bind  # noqa: PLC0415 - circular

        return bind(self, f)

    def labelled(self, name: str) -> Parser[T]:
        """Add ``name`` to the context chain of failures. See :func:`labelled`."""
        from .combinators import labelled  # noqa: PLC0415 - circular

        return labelled(self, name)

    def __or__(self, other: Parser[T]) -> Parser[T]:
        from .combinators import alternation  # noqa: PLC0415 - circular

        return alternation(self, other)

    def __rshift__[U](self, other: Parser[U]) -> Parser[U]:
        from .combinators import discard_left  # noqa: PLC0415 - circular

        return discard_left(self, other)

    def __lshift__(self, other: Parser[Any]) -> Parser[T]:
        from .combinators import discard_right  # noqa: PLC0415 - circular

        return discard_right(self, other)

    # -- execution ----------------------------------------------------------

    def run(
        self,
        text: str,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> Outcome[T]:
        """Run against ``text``. See :func:`run`."""
        return run(
            self, text, max_source_size=max_source_size, max_nesting_depth=max_nesting_depth
        )

    def run_optional(
        self,
        text: str,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> T | None:
        """Run against ``text``. See :func:`run_optional`."""
        return run_optional(
            self, text, max_source_size=max_source_size, max_nesting_depth=max_nesting_depth
        )

    def run_or_fail(
        self,
        text: str,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> T:
        """Run against ``text``. See :func:`run_or_fail`."""
        return run_or_fail(
            self, text, max_source_size=max_source_size, max_nesting_depth=max_nesting_depth
        )


def run[T](
    parser: Parser[T],
    text: str,
    *,
    max_source_size: int | None = None,
    max_nesting_depth: int | None = None,
) -> Outcome[T]:
    """Run ``parser`` against the complete input ``text``.

    Args:
        parser: Parser to run
        text: The whole input; it is not required to be fully consumed
        max_source_size: Maximum input length in characters
                         (default: MAX_SOURCE_SIZE, 10 MiB; 0 disables the check)
        max_nesting_depth: Maximum number of nested lazy() entries
                           (default: MAX_NESTING_DEPTH, 100)

    Returns:
        Success with the value and the unconsumed remainder, or Failure whose
        Diagnostic carries a line/column span.

    Raises:
        ValueError: If text exceeds max_source_size, or max_nesting_depth
                    is not positive

    Example:
        >>> from combiparse.syntax.parser.primitives import char
        >>> outcome = run(char("a"), "abc")
        >>> outcome.value, outcome.remaining.rest
        ('a', 'bc')
    """
    limit = max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
    if limit > 0 and len(text) > limit:
        msg = (
            f"Source size ({len(text):,} characters) exceeds maximum "
            f"({limit:,} characters). Pass max_source_size to increase the limit."
        )
        raise ValueError(msg)
    depth_limit = max_nesting_depth if max_nesting_depth is not None else MAX_NESTING_DEPTH

    try:
        with nesting_limit(depth_limit):
            outcome = parser(Cursor(text, 0))
    except NestingDepthExceededError as e:
        logger.warning(
            "Parser %r exceeded maximum nesting depth (%d) at offset %d",
            parser.label,
            depth_limit,
            e.diagnostic.position,
        )
        outcome = Failure(e.diagnostic)
    except RecursionError:
        logger.warning(
            "Parser %r exceeded the interpreter recursion limit on input of %d characters",
            parser.label,
            len(text),
        )
        outcome = Failure(ErrorTemplate.nesting_depth_exceeded(parser.label, 0))

    match outcome:
        case Failure(error=error):
            logger.debug("Parse failed: %s", error)
            return Failure(error.located(Cursor(text, error.position).span()))
        case _:
            return outcome


def run_optional[T](
    parser: Parser[T],
    text: str,
    *,
    max_source_size: int | None = None,
    max_nesting_depth: int | None = None,
) -> T | None:
    """Run ``parser`` and return its value, or None on failure.

    The Diagnostic and the unconsumed remainder are discarded. A parser whose
    value is legitimately None is indistinguishable from a failure here; use
    :func:`run` when that matters.
    """
    outcome = run(
        parser, text, max_source_size=max_source_size, max_nesting_depth=max_nesting_depth
    )
    if isinstance(outcome, Success):
        return outcome.value
    return None


def run_or_fail[T](
    parser: Parser[T],
    text: str,
    *,
    max_source_size: int | None = None,
    max_nesting_depth: int | None = None,
) -> T:
    """Run ``parser`` and return its value.

    Raises:
        ParseFailedError: If the parser fails; the message starts with
            ``<label>: <message>`` of the Diagnostic
        ValueError: If text exceeds max_source_size, or max_nesting_depth
                    is not positive

    Example:
        >>> from combiparse.syntax.parser.primitives import string
        >>> run_or_fail(string("null"), "nulx")
        Traceback (most recent call last):
        ...
        combiparse.diagnostics.errors.ParseFailedError: string "null": Unexpected 'x' (at line 1, column 4)
    """
    outcome = run(
        parser, text, max_source_size=max_source_size, max_nesting_depth=max_nesting_depth
    )
    match outcome:
        case Success(value=value):
            return value
        case Failure(error=error):
            raise ParseFailedError(error)
