"""Two-field record grammar: ``<name> <age>``.

Shows the two ways of building a multi-field value: :func:`combine` with a
plain constructor, and applicative :meth:`Parser.apply` over a curried one.

Example:
    >>> parse_person("Alexander 23")
    Person(name='Alexander', age=23)
"""

from dataclasses import dataclass

from combiparse.syntax.parser import Parser, char, combine, decimal, eof, letter, many1, succeed

__all__ = ["Person", "parse_person", "person", "person_applicative"]


@dataclass(frozen=True, slots=True)
class Person:
    """A parsed record."""

    name: str
    age: int


def _name() -> Parser[str]:
    return many1(letter()).map("".join).with_label("name")


def person() -> Parser[Person]:
    """Name, a single space, and a decimal age."""
    return combine(Person, _name() << char(" "), decimal())


def person_applicative() -> Parser[Person]:
    """Same grammar as :func:`person`, built with applicative apply."""
    curried = succeed(lambda name: lambda age: Person(name, age))
    return curried.apply(_name() << char(" ")).apply(decimal())


def parse_person(text: str) -> Person:
    """Parse a complete ``<name> <age>`` record.

    Raises:
        ParseFailedError: If text does not match
    """
    return (person() << eof()).run_or_fail(text)
