"""Parsing engine package.

Provides the cursor, the Outcome type, and the parser combinator engine.

Python 3.13+.
"""

from .cursor import Cursor
from .outcome import Failure, Outcome, Success
from .parser import Parser, run, run_optional, run_or_fail

__all__ = [
    "Cursor",
    "Failure",
    "Outcome",
    "Parser",
    "Success",
    "run",
    "run_optional",
    "run_or_fail",
]
