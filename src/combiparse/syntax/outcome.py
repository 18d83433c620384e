"""Outcome of running a parser: Success or Failure.

Every parser returns exactly one of the two variants. A Failure never carries
a cursor, so no partial progress is visible to a caller that only inspects
the Outcome.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from combiparse.diagnostics import Diagnostic

from .cursor import Cursor

__all__ = ["Failure", "Outcome", "Success"]


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Parser matched.

    Type Parameters:
        T: The type of the parsed value

    Example:
        >>> outcome = Success("h", Cursor("hello", 1))
        >>> outcome.value
        'h'
        >>> outcome.remaining.rest
        'ello'
    """

    value: T
    remaining: Cursor

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """Parser did not match at the position it was run."""

    error: Diagnostic

    @property
    def is_success(self) -> bool:
        return False


type Outcome[T] = Success[T] | Failure
