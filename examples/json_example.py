"""JSON Example - A Complete Grammar From Combinators.

Demonstrates the bundled JSON grammar:

1. Parse documents into Python values
2. Reuse json_value() inside a larger grammar
3. Inspect diagnostics for invalid input
4. Nesting is capped at 100 levels by default (max_nesting_depth)

Python 3.13+.
"""

from __future__ import annotations


def example_1_parse_documents() -> None:
    """Parse JSON text into plain Python values."""
    from combiparse.grammars import parse_json

    print("=" * 60)
    print("Example 1: Parse Documents")
    print("=" * 60)

    document = parse_json('{"hello": 12, "world": {"nested": [1, 2.5, null, true]}}')
    print(document)
    # Output: {'hello': 12, 'world': {'nested': [1, 2.5, None, True]}}

    print(parse_json(r'"café 😀"'))
    print()


def example_2_embedded_grammar() -> None:
    """Use json_value() as one piece of a bigger grammar."""
    from combiparse import char, combine, run_or_fail, string
    from combiparse.grammars import json_value
    from combiparse.syntax.parser.text import letter, token

    print("=" * 60)
    print("Example 2: Embedded Grammar")
    print("=" * 60)

    # key=<json> settings lines, e.g. "x={"debug": true}"
    key = token(letter())
    setting = combine(lambda k, _, v: (k, v), key, token(string("=")), json_value())
    settings = (setting << token(char(";"))).bind(
        lambda first: setting.map(lambda second: dict([first, second]))
    )

    print(run_or_fail(settings, 'a = [1, 2]; b = {"on": false}'))
    # Output: {'a': [1, 2], 'b': {'on': False}}
    print()


def example_3_diagnostics() -> None:
    """Inspect the diagnostic of an invalid document."""
    from combiparse import Failure, run
    from combiparse.diagnostics import DiagnosticFormatter
    from combiparse.grammars import json_document

    print("=" * 60)
    print("Example 3: Diagnostics")
    print("=" * 60)

    outcome = run(json_document(), '{"a": [1, 2]} trailing')
    match outcome:
        case Failure(error=error):
            print(DiagnosticFormatter().format(error))
            # Output:
            # error[EXPECTED_END_OF_INPUT]: end of input: Expected end of input, found 't'
            #   --> line 1, column 15
    print()


def example_4_deep_nesting() -> None:
    """Nesting past max_nesting_depth reports NESTING_DEPTH_EXCEEDED."""
    from combiparse import ParseFailedError
    from combiparse.grammars import json_document, parse_json

    print("=" * 60)
    print("Example 4: Deep Nesting")
    print("=" * 60)

    print(len(parse_json("[" * 99 + "]" * 99)))
    # Output: 1

    try:
        parse_json("[" * 50_000 + "]" * 50_000)
    except ParseFailedError as e:
        print(e.diagnostic.code.name)
        # Output: NESTING_DEPTH_EXCEEDED

    deep = "[" * 200 + "]" * 200
    print(len(json_document().run_or_fail(deep, max_nesting_depth=201)))
    # Output: 1
    print()


def main() -> None:
    """Run all JSON examples."""
    print()
    print("combiparse JSON Examples")
    print()

    example_1_parse_documents()
    example_2_embedded_grammar()
    example_3_diagnostics()
    example_4_deep_nesting()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
