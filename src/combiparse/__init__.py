"""combiparse - composable parser combinators for small text formats.

Build a grammar by combining primitive matchers (characters, predicates,
literals) with sequencing, alternation, repetition and separated lists, then
run it against an in-memory string. Alternation is PEG-style: the first
successful branch wins and failed branches never leak consumed input.

Public API:
    Parser - Composable parser value (operators: |, >>, <<)
    run / run_optional / run_or_fail - Entry points
    Success / Failure / Outcome - Result of running a parser
    Cursor - Immutable position in the input
    succeed, fail, satisfy, char, string, any_char, any_of, none_of, eof,
    take_while, skip_while - Primitive parsers
    fmap, apply, bind, combine, lazy, choice, alternation, discard_left,
    discard_right, between, sequence, labelled - Combinators
    many, many1, skip_many, option, optional, sep_by, sep_by1 - Repetition

Exceptions:
    CombiparseError - Base exception class
    ParseFailedError - Raised by run_or_fail()
    NestingDepthExceededError - Raised by lazy() past the nesting limit

Submodules:
    combiparse.syntax.parser.text - digit, letter, decimal, spaces, token, ...
    combiparse.diagnostics - Diagnostic, codes, templates and formatter
    combiparse.grammars - Example JSON and record grammars
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import CombiparseError, Diagnostic, DiagnosticCode, ParseFailedError
from .syntax import Cursor, Failure, Outcome, Success
from .syntax.parser import (
    NestingDepthExceededError,
    Parser,
    alternation,
    any_char,
    any_of,
    apply,
    between,
    bind,
    char,
    choice,
    combine,
    discard_left,
    discard_right,
    eof,
    fail,
    fmap,
    labelled,
    lazy,
    many,
    many1,
    none_of,
    option,
    optional,
    run,
    run_optional,
    run_or_fail,
    satisfy,
    sep_by,
    sep_by1,
    sequence,
    skip_many,
    skip_while,
    string,
    succeed,
    take_while,
)

try:
    __version__ = _get_version("combiparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CombiparseError",
    "Cursor",
    "Diagnostic",
    "DiagnosticCode",
    "Failure",
    "NestingDepthExceededError",
    "Outcome",
    "ParseFailedError",
    "Parser",
    "Success",
    "__version__",
    "alternation",
    "any_char",
    "any_of",
    "apply",
    "between",
    "bind",
    "char",
    "choice",
    "combine",
    "discard_left",
    "discard_right",
    "eof",
    "fail",
    "fmap",
    "labelled",
    "lazy",
    "many",
    "many1",
    "none_of",
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
    "string",
    "succeed",
    "take_while",
]
