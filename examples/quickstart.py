"""Quickstart example for combiparse.

This example demonstrates building small parsers from primitives and
combinators, running them, and reading their diagnostics.

Note: run() never raises for input that does not match; it returns a
Failure value. Use run_or_fail() when an exception is more convenient.
"""

from combiparse import (
    Failure,
    ParseFailedError,
    Success,
    char,
    choice,
    labelled,
    many,
    run,
    run_or_fail,
    sep_by,
    string,
)
from combiparse.diagnostics import DiagnosticFormatter, OutputFormat
from combiparse.syntax.parser.text import decimal, digit, letter, token

# Example 1: Literals
print("=" * 50)
print("Example 1: Literals")
print("=" * 50)

outcome = run(string("abc"), "abcdef")
match outcome:
    case Success(value=value, remaining=remaining):
        print(f"matched {value!r}, remaining {remaining.rest!r}")
# Output: matched 'abc', remaining 'def'

outcome = run(string("abc"), "xabc")
match outcome:
    case Failure(error=error):
        print(error)
# Output: string "abc": Unexpected 'x'

# Example 2: Choice and repetition
print("\n" + "=" * 50)
print("Example 2: Choice and Repetition")
print("=" * 50)

print(run_or_fail(choice(char("a"), char("b")), "beef"))
# Output: b

outcome = run(many(digit()), "123abc")
assert isinstance(outcome, Success)
print(outcome.value, repr(outcome.remaining.rest))
# Output: ['1', '2', '3'] 'abc'

# Example 3: Separated lists and mapping
print("\n" + "=" * 50)
print("Example 3: Separated Lists")
print("=" * 50)

numbers = sep_by(token(decimal()), token(char(",")))
print(run_or_fail(numbers, "1, 2,  3"))
# Output: [1, 2, 3]

total = numbers.map(sum)
print(run_or_fail(total, "10,20,30"))
# Output: 60

# Example 4: Operators
print("\n" + "=" * 50)
print("Example 4: Operators")
print("=" * 50)

# | is alternation, >> keeps the right value, << keeps the left value
assignment = (token(letter()) << token(char("="))) | (char("_") >> letter())
print(run_or_fail(assignment, "x = 1"))
# Output: x
print(run_or_fail(assignment, "_y"))
# Output: y

# Example 5: Diagnostics
print("\n" + "=" * 50)
print("Example 5: Diagnostics")
print("=" * 50)

boolean = labelled(choice(string("true"), string("false")), "boolean")
try:
    run_or_fail(boolean, "maybe")
except ParseFailedError as e:
    print(e)
    # Output: string "true" or string "false": No alternative matched (at line 1, column 1) in boolean
    print()
    print(DiagnosticFormatter().format(e.diagnostic))
    print()
    print(DiagnosticFormatter(output_format=OutputFormat.JSON).format(e.diagnostic))

print("\n" + "=" * 50)
print("All examples completed successfully!")
print("=" * 50)
