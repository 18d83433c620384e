"""Combinator algebra: functor, applicative, monad, choice and sequencing.

Each function takes existing parsers (and possibly a pure function) and
returns a new Parser. The only state during a parse is the cursor threaded
from one sub-parser's Outcome into the next.

Failure Propagation:
    A failing step aborts the whole sequence and its Diagnostic is returned
    unchanged. The only recovery points here are choice and alternation, which
    retry the next branch at the ORIGINAL cursor.

Choice Exhaustion:
    alternation returns the second branch's Outcome as is. When every
    alternative of choice fails, the Diagnostic is synthetic: code
    NO_ALTERNATIVE, the combined "a or b" label, message
    "No alternative matched", and every branch's Diagnostic in ``causes``.
"""

from collections.abc import Callable, Sequence
from typing import Any

from combiparse.constants import DEFAULT_LABEL
from combiparse.diagnostics import ErrorTemplate
from combiparse.syntax.cursor import Cursor
from combiparse.syntax.outcome import Failure, Outcome, Success

from .core import Parser
from .depth import NestingGuard

__all__ = [
    "alternation",
    "apply",
    "between",
    "bind",
    "choice",
    "combine",
    "discard_left",
    "discard_right",
    "fmap",
    "labelled",
    "lazy",
    "sequence",
]


# ============================================================================
# FUNCTOR / APPLICATIVE / MONAD
# ============================================================================


def fmap[T, U](parser: Parser[T], f: Callable[[T], U]) -> Parser[U]:
    """Apply ``f`` to the value of ``parser``, keeping its remaining cursor.

    Laws:
        fmap(p, identity) == p
        fmap(fmap(p, f), g) == fmap(p, lambda x: g(f(x)))
    """

    def parse(cursor: Cursor) -> Outcome[U]:
        outcome = parser(cursor)
        match outcome:
            case Success(value=value, remaining=remaining):
                return Success(f(value), remaining)
            case _:
                return outcome

    return Parser(parse, parser.label)


def apply[T, U](parser_f: Parser[Callable[[T], U]], parser_x: Parser[T]) -> Parser[U]:
    """Run ``parser_f`` then ``parser_x`` and apply the function to the value.

    ``parser_x`` is never run when ``parser_f`` fails. The result keeps
    ``parser_x``'s remaining cursor. Chaining ``apply`` over a curried
    constructor builds multi-field values; :func:`combine` does the same with
    a plain N-argument function.
    """

    def parse(cursor: Cursor) -> Outcome[U]:
        outcome_f = parser_f(cursor)
        if isinstance(outcome_f, Failure):
            return outcome_f
        outcome_x = parser_x(outcome_f.remaining)
        if isinstance(outcome_x, Failure):
            return outcome_x
        return Success(outcome_f.value(outcome_x.value), outcome_x.remaining)

    return Parser(parse, parser_f.label)


def bind[T, U](parser: Parser[T], f: Callable[[T], Parser[U]]) -> Parser[U]:
    """Run ``parser``, then the parser that ``f`` builds from its value.

    Laws:
        bind(succeed(x), f) == f(x)
        bind(p, succeed) == p
        bind(bind(p, f), g) == bind(p, lambda x: bind(f(x), g))
    """

    def parse(cursor: Cursor) -> Outcome[U]:
        outcome = parser(cursor)
        if isinstance(outcome, Failure):
            return outcome
        return f(outcome.value)(outcome.remaining)

    return Parser(parse, parser.label)


def combine[U](f: Callable[..., U], *parsers: Parser[Any]) -> Parser[U]:
    """Run ``parsers`` in order and call ``f`` with all of their values.

    Example:
        >>> from combiparse.syntax.parser.primitives import char
        >>> combine(lambda a, b: a + b, char("x"), char("y")).run_or_fail("xy")
        'xy'
    """
    joined = sequence(parsers)

    def parse(cursor: Cursor) -> Outcome[U]:
        outcome = joined(cursor)
        if isinstance(outcome, Failure):
            return outcome
        return Success(f(*outcome.value), outcome.remaining)

    return Parser(parse, joined.label)


def lazy[T](factory: Callable[[], Parser[T]], label: str = DEFAULT_LABEL) -> Parser[T]:
    """Defer building a parser until it first runs.

    Lets a recursive grammar refer to itself:

        value = lazy(lambda: number | array, "value")
        array = between(char("["), sep_by(value, char(",")), char("]"))

    The factory is called at most once per lazy parser; later runs reuse it.
    Every entry counts as one nesting level. Past the limit set by run()
    (``max_nesting_depth``) the whole run fails with NESTING_DEPTH_EXCEEDED
    at the offending position; enclosing choices do not try other branches.
    """
    resolved: list[Parser[T]] = []

    def parse(cursor: Cursor) -> Outcome[T]:
        if not resolved:
            resolved.append(factory())
        with NestingGuard(label, cursor.pos):
            return resolved[0](cursor)

    return Parser(parse, label)



# ============================================================================
# CHOICE
# ============================================================================


def choice[T](*parsers: Parser[T]) -> Parser[T]:
    """Try ``parsers`` left to right at the same cursor; first success wins.

    A branch that consumed input before failing leaves no trace: the next
    branch starts from the original cursor.

    Raises:
        ValueError: If called without parsers
    """
    if not parsers:
        msg = "choice() requires at least one parser"
        raise ValueError(msg)
    label = " or ".join(p.label for p in parsers)

    def parse(cursor: Cursor) -> Outcome[T]:
        failures = []
        for parser in parsers:
            outcome = parser(cursor)
            if isinstance(outcome, Success):
                return outcome
            failures.append(outcome.error)
        return Failure(ErrorTemplate.no_alternative(label, cursor.pos, tuple(failures)))

    return Parser(parse, label)


def alternation[T](p1: Parser[T], p2: Parser[T]) -> Parser[T]:
    """``p1``, or ``p2`` from the original cursor if ``p1`` fails.

    When ``p1`` fails its Diagnostic is dropped and ``p2``'s Outcome is
    returned unchanged, failure included. Use :func:`choice` to keep every
    branch's Diagnostic.
    """

    def parse(cursor: Cursor) -> Outcome[T]:
        outcome = p1(cursor)
        if isinstance(outcome, Success):
            return outcome
        return p2(cursor)

    return Parser(parse, f"{p1.label} or {p2.label}")



# ============================================================================
# SEQUENCING
# ============================================================================


def discard_left[U](p1: Parser[Any], p2: Parser[U]) -> Parser[U]:
    """Run ``p1`` then ``p2``; keep ``p2``'s value."""

    def parse(cursor: Cursor) -> Outcome[U]:
        first = p1(cursor)
        if isinstance(first, Failure):
            return first
        return p2(first.remaining)

    return Parser(parse, f"{p1.label} and then {p2.label}")


def discard_right[T](p1: Parser[T], p2: Parser[Any]) -> Parser[T]:
    """Run ``p1`` then ``p2``; keep ``p1``'s value.

    ``p2`` failing fails the whole sequence, even though its value would have
    been discarded.
    """

    def parse(cursor: Cursor) -> Outcome[T]:
        first = p1(cursor)
        if isinstance(first, Failure):
            return first
        second = p2(first.remaining)
        if isinstance(second, Failure):
            return second
        return Success(first.value, second.remaining)

    return Parser(parse, f"{p1.label} and then {p2.label}")


def between[T](open_: Parser[Any], parser: Parser[T], close: Parser[Any]) -> Parser[T]:
    """Run ``open_``, ``parser``, ``close``; keep the middle value."""
    return discard_right(discard_left(open_, parser), close).with_label(
        f"{parser.label} between {open_.label} and {close.label}"
    )


def sequence[T](parsers: Sequence[Parser[T]]) -> Parser[list[T]]:
    """Run ``parsers`` strictly in order and collect their values.

    The first failing element aborts the sequence with its own Diagnostic.
    """
    steps = tuple(parsers)
    label = "sequence of " + ", ".join(p.label for p in steps)

    def parse(cursor: Cursor) -> Outcome[list[T]]:
        values: list[T] = []
        for step in steps:
            outcome = step(cursor)
            if isinstance(outcome, Failure):
                return outcome
            values.append(outcome.value)
            cursor = outcome.remaining
        return Success(values, cursor)

    return Parser(parse, label)


# ============================================================================
# DIAGNOSTIC CONTEXT
# ============================================================================


def labelled[T](parser: Parser[T], name: str) -> Parser[T]:
    """Name ``parser`` for diagnostics.

    The display label becomes ``name`` and, on failure, ``name`` is appended
    to the Diagnostic's context chain. The inner failure's own label and
    message are kept, so the most specific cause stays visible.
    """

    def parse(cursor: Cursor) -> Outcome[T]:
        outcome = parser(cursor)
        match outcome:
            case Failure(error=error):
                return Failure(error.within(name))
            case _:
                return outcome

    return Parser(parse, name)
