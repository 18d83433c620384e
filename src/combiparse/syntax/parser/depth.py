"""Nesting depth limiting for recursive grammars.

Only lazy() lets a grammar refer to itself, so counting active lazy() entries
bounds how deep any parse can recurse. The count and the limit live in
contextvars set up by run(), which keeps concurrent runs in different threads
or async tasks independent.

Architecture:
    - nesting_limit(): Scope opened by run(); resets the depth, sets the limit
      and makes room on the interpreter stack for that many levels
    - NestingGuard: Entered by lazy() on every re-entry; raises
      NestingDepthExceededError once the limit is reached

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

from combiparse.constants import FRAMES_PER_NESTING_LEVEL, MAX_NESTING_DEPTH
from combiparse.diagnostics import CombiparseError, Diagnostic, ErrorTemplate

__all__ = ["NestingDepthExceededError", "NestingGuard", "nesting_limit"]

logger = logging.getLogger(__name__)

_nesting_depth: ContextVar[int] = ContextVar("combiparse_nesting_depth", default=0)
_nesting_limit: ContextVar[int] = ContextVar(
    "combiparse_nesting_limit", default=MAX_NESTING_DEPTH
)


class NestingDepthExceededError(CombiparseError):
    """A lazy parser was re-entered past the nesting limit.

    run() catches this and returns the diagnostic as a Failure. It only reaches
    callers that invoke a parser's parse function directly.
    """

    diagnostic: Diagnostic

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize NestingDepthExceededError.

        Args:
            diagnostic: NESTING_DEPTH_EXCEEDED diagnostic at the offending entry
        """
        super().__init__(diagnostic)


class NestingGuard:
    """Context manager counting one level of lazy() recursion.

    Usage:
        with NestingGuard("json value", cursor.pos):
            return inner(cursor)

    The limit is checked BEFORE incrementing, so a rejected entry leaves the
    depth unchanged.
    """

    __slots__ = ("_label", "_position", "_token")

    def __init__(self, label: str, position: int) -> None:
        self._label = label
        self._position = position
        self._token: Token[int] | None = None

    def __enter__(self) -> NestingGuard:
        current = _nesting_depth.get()
        if current >= _nesting_limit.get():
            raise NestingDepthExceededError(
                ErrorTemplate.nesting_depth_exceeded(self._label, self._position)
            )
        self._token = _nesting_depth.set(current + 1)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        if self._token is not None:
            _nesting_depth.reset(self._token)


@contextmanager
def nesting_limit(max_depth: int) -> Iterator[int]:
    """Limit lazy() nesting to ``max_depth`` levels for the enclosed parse.

    The interpreter recursion limit is raised so that ``max_depth`` levels of
    FRAMES_PER_NESTING_LEVEL frames each fit on top of the current one, and
    put back on exit. A grammar that recurses harder than that per level
    still ends in RecursionError, which run() reports.

    Args:
        max_depth: Maximum number of active lazy() entries (must be positive)

    Yields:
        The effective limit

    Raises:
        ValueError: If max_depth is not positive
    """
    if max_depth <= 0:
        msg = f"max_nesting_depth must be positive, got {max_depth}"
        raise ValueError(msg)

    previous_limit = sys.getrecursionlimit()
    required_limit = previous_limit + max_depth * FRAMES_PER_NESTING_LEVEL
    sys.setrecursionlimit(required_limit)
    logger.debug(
        "Raised recursion limit from %d to %d for nesting depth %d",
        previous_limit,
        required_limit,
        max_depth,
    )
    depth_token = _nesting_depth.set(0)
    limit_token = _nesting_limit.set(max_depth)
    try:
        yield max_depth
    finally:
        _nesting_limit.reset(limit_token)
        _nesting_depth.reset(depth_token)
        # Another thread may have changed it meanwhile; leave theirs alone.
        if sys.getrecursionlimit() == required_limit:
            sys.setrecursionlimit(previous_limit)
