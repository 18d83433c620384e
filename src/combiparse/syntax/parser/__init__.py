"""Parser combinator engine.

Module Organization:
- core.py: Parser value type and run/run_optional/run_or_fail entry points
- primitives.py: Base-case parsers (succeed, satisfy, char, string, ...)
- combinators.py: Functor/applicative/monad operations, choice, sequencing
- depth.py: Nesting depth guard used by lazy() and run()
- repetition.py: many, many1, option, sep_by and friends (iterative)
- text.py: Character-class parsers composed from the above
"""

from .combinators import (
    alternation,
    apply,
    between,
    bind,
    choice,
    combine,
    discard_left,
    discard_right,
    fmap,
    labelled,
    lazy,
    sequence,
)
from .core import Parser, run, run_optional, run_or_fail
from .depth import NestingDepthExceededError
from .primitives import (
    any_char,
    any_of,
    char,
    eof,
    fail,
    none_of,
    satisfy,
    skip_while,
    string,
    succeed,
    take_while,
)
from .repetition import many, many1, option, optional, sep_by, sep_by1, skip_many
from .text import decimal, digit, digits, integer, letter, not_char, space, spaces, token

__all__ = [
    "NestingDepthExceededError",
    "Parser",
    "alternation",
    "any_char",
    "any_of",
    "apply",
    "between",
    "bind",
    "char",
    "choice",
    "combine",
    "decimal",
    "digit",
    "digits",
    "discard_left",
    "discard_right",
    "eof",
    "fail",
    "fmap",
    "integer",
    "labelled",
    "lazy",
    "letter",
    "many",
    "many1",
    "none_of",
    "not_char",
    "option",
    "optional",
    "run",
    "run_optional",
    "run_or_fail",
    "satisfy",
    "sep_by",
    "sep_by1",
    "sequence",
    "skip_many",
    "skip_while",
    "space",
    "spaces",
    "string",
    "succeed",
    "take_while",
    "token",
]
