"""Example grammars built on the combinator engine.

- json_value: JSON text to Python values
- record: ``<name> <age>`` records
"""

from .json_value import JsonValue, json_document, json_value, parse_json
from .record import Person, parse_person, person, person_applicative

__all__ = [
    "JsonValue",
    "Person",
    "json_document",
    "json_value",
    "parse_json",
    "parse_person",
    "person",
    "person_applicative",
]
