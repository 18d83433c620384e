"""Hypothesis strategies for combiparse property-based testing.

Usage:
    from tests.strategies import parser_inputs, parsers, pure_functions
"""

from .parsers import (
    PARSER_ALPHABET,
    parser_continuations,
    parser_inputs,
    parsers,
    pure_functions,
)

__all__ = [
    "PARSER_ALPHABET",
    "parser_continuations",
    "parser_inputs",
    "parsers",
    "pure_functions",
]
