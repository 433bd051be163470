"""JSON grammar built by chaining :class:`Parser` methods.

Values come out as plain Python objects: ``None``, ``bool``, ``float`` (every
number is a float), ``str``, ``list`` and ``dict``.
"""

from __future__ import annotations

import functools
from typing import Any

from combiparse.chars import character, character_range, digit, token
from combiparse.parser import Parser

_ESCAPED = {"b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t"}


def _unescape(c: str) -> str:
    return _ESCAPED.get(c, c)


def _decode_unicode(parsed: Any) -> str:
    """Turn the parts of a ``\\u`` escape into a character.

    Each hex part is written in upper-case hex and the pieces are joined.
    Digits carry their value and letters their character code, so only
    escapes made of decimal digits decode to the usual code point.
    """
    (((_, a), b), c), d = parsed
    code = int("".join(f"{part:X}" for part in (a, b, c, d)), 16)
    if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
        raise ValueError(f"escape decodes to invalid code point {code:#x}")
    return chr(code)


def _fold_digits(digits: list[int]) -> int:
    return functools.reduce(lambda acc, d: acc * 10 + d, digits, 0)


def _signed(parsed: tuple[str, int]) -> int:
    sign, number = parsed
    return -number if sign == "-" else number


def _to_number(parsed: Any) -> float:
    (integer, fraction), exponent = parsed
    if fraction is not None and exponent is not None:
        return float(f"{integer}.{fraction}E{exponent[1]}")
    if fraction is not None:
        return float(f"{integer}.{fraction}")
    return float(integer)


def _member(parsed: Any) -> tuple[str, Any]:
    ((((_, key), _), _), item) = parsed
    return key, item


def parse(text: str) -> Any:
    """Parse a JSON document; text after the first value is ignored.

    Raises :class:`~combiparse.parser.ParseError` if no value can be parsed.
    """
    result, _ = element().parse(text)
    return result


def element() -> Parser[Any]:
    """A value surrounded by optional whitespace."""
    return Parser(lambda s: _element_grammar()(s))


@functools.cache
def _element_grammar() -> Parser[Any]:
    return (
        whitespace()
        .and_then(value())
        .and_then(whitespace())
        .map(lambda parsed: parsed[0][1])
    )


def value() -> Parser[Any]:
    """Any JSON value."""
    return Parser(lambda s: _value_grammar()(s))


@functools.cache
def _value_grammar() -> Parser[Any]:
    return (
        json_null()
        .or_else(boolean())
        .or_else(json_number())
        .or_else(json_string())
        .or_else(json_array())
        .or_else(json_object())
    )


def json_object() -> Parser[dict[str, Any]]:
    """An object; a repeated key keeps its last value."""
    pair = (
        whitespace()
        .and_then(json_string())
        .and_then(whitespace())
        .and_then(character(":"))
        .and_then(element())
        .map(_member)
    )
    members = pair.sep_by(character(","))
    empty = whitespace().between(character("{"), character("}")).map(lambda _: {})
    non_empty = members.between(character("{"), character("}")).map(dict)
    return empty.or_else(non_empty)


def json_array() -> Parser[list[Any]]:
    """An array of values."""
    empty = whitespace().between(character("["), character("]")).map(lambda _: [])
    non_empty = element().sep_by(character(",")).between(character("["), character("]"))
    return empty.or_else(non_empty)


def json_null() -> Parser[None]:
    """The literal ``null``."""
    return token("null").map(lambda _: None)


def boolean() -> Parser[bool]:
    """The literals ``true`` and ``false``."""
    return token("true").or_else(token("false")).map(lambda parsed: parsed == "true")


def json_string() -> Parser[str]:
    """A double-quoted string with escapes."""
    hex_digit = (
        digit()
        .or_else(character_range("a", "f").map(ord))
        .or_else(character_range("A", "F").map(ord))
    )
    unicode = (
        character("u")
        .and_then(hex_digit)
        .and_then(hex_digit)
        .and_then(hex_digit)
        .and_then(hex_digit)
        .map(_decode_unicode)
    )
    escape = functools.reduce(Parser.or_else, map(character, '"\\/bfnrt')).or_else(unicode)
    valid_chars = character_range(" ", "\U0010ffff").except_(
        character('"').or_else(character("\\"))
    )
    valid_escape = character("\\").and_then(escape).map(lambda parsed: _unescape(parsed[1]))
    characters = valid_chars.or_else(valid_escape).many()
    return (
        character('"')
        .and_then(characters)
        .and_then(character('"'))
        .map(lambda parsed: "".join(parsed[0][1]))
    )


def json_number() -> Parser[float]:
    """A number: integer part, optional fraction, optional signed exponent.

    The fraction's digits are read as an integer, and an exponent is only
    applied when a fraction is present.
    """
    digits = digit().many1().map(_fold_digits)
    sign = character("+").or_else(character("-"))
    integer = digits.or_else(character("-").and_then(digits).map(lambda parsed: -parsed[1]))
    fraction = character(".").skip().and_then(digits).map(lambda parsed: parsed[1])
    exponent = (
        character("E")
        .or_else(character("e"))
        .skip()
        .and_then(sign.and_then(digits).map(_signed))
    )
    return integer.and_then(fraction.optional()).and_then(exponent.optional()).map(_to_number)


def whitespace() -> Parser[None]:
    """Zero or more spaces, newlines, carriage returns and tabs."""
    return functools.reduce(Parser.or_else, map(character, " \n\r\t")).many().skip()