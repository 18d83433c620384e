"""JSON value grammar built entirely from combiparse combinators.

Parses RFC 8259 JSON text into plain Python values:

    null -> None, true/false -> bool, numbers -> int or float,
    strings -> str, arrays -> list, objects -> dict

Example:
    >>> parse_json('{"hello": 12, "world": {"nested": null}}')
    {'hello': 12, 'world': {'nested': None}}
"""

from combiparse.syntax.parser import (
    Parser,
    any_of,
    between,
    char,
    choice,
    combine,
    digits,
    eof,
    fail,
    labelled,
    lazy,
    many,
    none_of,
    option,
    satisfy,
    sep_by,
    sequence,
    string,
    succeed,
    take_while,
)

__all__ = ["JsonValue", "json_document", "json_value", "parse_json"]

type JsonValue = None | bool | int | float | str | list[JsonValue] | dict[str, JsonValue]

_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

# Unescaped quote, backslash and control characters are not allowed in strings.
_STRING_EXCLUDED: str = '"\\' + "".join(chr(i) for i in range(0x20))

# Only these four count as insignificant whitespace; str.isspace() accepts more.
_WHITESPACE: str = " \t\n\r"

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


def _skip_whitespace() -> Parser[str]:
    return take_while(lambda ch: ch in _WHITESPACE, "whitespace")


def _token[T](parser: Parser[T]) -> Parser[T]:
    return (parser << _skip_whitespace()).with_label(parser.label)


def _keyword(text: str, value: JsonValue) -> Parser[JsonValue]:
    return (string(text) >> succeed(value)).with_label(f'string "{text}"')


def _hex4() -> Parser[int]:
    hex_digit = any_of("0123456789abcdefABCDEF").with_label("hex digit")
    return sequence([hex_digit] * 4).map(lambda ds: int("".join(ds), 16))


def _unicode_escape() -> Parser[str]:
    """``uXXXX`` after the backslash; joins a valid surrogate pair."""
    hex4 = _hex4()

    def low_half(high: int) -> Parser[str]:
        def join(low: int) -> Parser[str]:
            if low in _LOW_SURROGATES:
                return succeed(chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00)))
            return fail("Expected low surrogate", "unicode escape")

        return option(chr(high), (string("\\u") >> hex4).bind(join))

    def decode(code: int) -> Parser[str]:
        if code in _HIGH_SURROGATES:
            return low_half(code)
        return succeed(chr(code))

    return (char("u") >> hex4).bind(decode)


def _string() -> Parser[str]:
    simple = choice(*(char(k) >> succeed(v) for k, v in _ESCAPES.items()))
    escape = char("\\") >> (simple | _unicode_escape())
    body = many(none_of(_STRING_EXCLUDED) | escape.labelled("escape sequence"))
    return between(char('"'), body, char('"')).map("".join).with_label("string")


def _number() -> Parser[int | float]:
    nonzero = satisfy(lambda ch: ch in "123456789", "nonzero digit")
    int_part = string("0") | combine(
        lambda head, tail: head + tail,
        nonzero,
        take_while(lambda ch: ch in "0123456789", "digits"),
    )
    frac = option("", combine(lambda dot, ds: dot + ds, char("."), digits()))
    exp = option(
        "",
        combine(lambda e, sign, ds: e + sign + ds, any_of("eE"), option("", any_of("+-")), digits()),
    )

    def to_number(sign: str, whole: str, fraction: str, exponent: str) -> int | float:
        text = sign + whole + fraction + exponent
        if fraction or exponent:
            return float(text)
        return int(text)

    return combine(to_number, option("", char("-")), int_part, frac, exp).with_label("number")


def json_value() -> Parser[JsonValue]:
    """Parser for one JSON value followed by optional whitespace."""

    def comma() -> Parser[str]:
        return _token(char(","))

    value: Parser[JsonValue] = lazy(lambda: grammar, "json value")

    array = between(_token(char("[")), sep_by(value, comma()), char("]"))
    member = combine(
        lambda key, _, item: (key, item),
        _token(_string()),
        _token(char(":")),
        value,
    )
    obj = between(_token(char("{")), sep_by(member, comma()), char("}")).map(dict)

    grammar = labelled(
        _token(
            choice(
                _keyword("null", None),
                _keyword("true", True),
                _keyword("false", False),
                _number(),
                _string(),
                labelled(array, "array"),
                labelled(obj, "object"),
            )
        ),
        "json value",
    )
    return value


def json_document() -> Parser[JsonValue]:
    """A complete JSON text: whitespace, one value, end of input."""
    return (_skip_whitespace() >> json_value()) << eof()


def parse_json(text: str) -> JsonValue:
    """Parse a JSON text.

    Raises:
        ParseFailedError: If text is not valid JSON
    """
    return json_document().run_or_fail(text)
