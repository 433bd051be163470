"""JSON grammar built from the free-function combinators.

It yields the same Python values as :mod:`combiparse.json_method`.
"""

from __future__ import annotations

from functools import reduce
from typing import Any

from combiparse.chars import character, character_range, digit, token
from combiparse.combinators import (
    and_,
    between,
    except_,
    lazy,
    many,
    many1,
    map_,
    optional,
    or_,
    sep_by,
    skip,
)
from combiparse.json_method import (
    _decode_unicode,
    _fold_digits,
    _member,
    _signed,
    _to_number,
    _unescape,
)
from combiparse.parser import Parser


def parse(text: str) -> Any:
    """Parse a JSON document; text after the first value is ignored.

    Raises :class:`~combiparse.parser.ParseError` if no value can be parsed.
    """
    result, _ = element().parse(text)
    return result


def element() -> Parser[Any]:
    """A value surrounded by optional whitespace."""
    return lazy(lambda: between(value(), whitespace(), whitespace()))


def value() -> Parser[Any]:
    """Any JSON value."""
    return reduce(
        or_,
        [json_null(), boolean(), json_number(), json_string(), json_array(), json_object()],
    )


def json_object() -> Parser[dict[str, Any]]:
    """An object; a repeated key keeps its last value."""
    pair = map_(
        and_(
            and_(and_(and_(whitespace(), json_string()), whitespace()), character(":")),
            element(),
        ),
        _member,
    )
    members = sep_by(pair, character(","))
    empty = map_(between(whitespace(), character("{"), character("}")), lambda _: {})
    non_empty = map_(between(members, character("{"), character("}")), dict)
    return or_(empty, non_empty)


def json_array() -> Parser[list[Any]]:
    """An array of values."""
    empty = map_(between(whitespace(), character("["), character("]")), lambda _: [])
    non_empty = between(sep_by(element(), character(",")), character("["), character("]"))
    return or_(empty, non_empty)


def json_null() -> Parser[None]:
    """The literal ``null``."""
    return map_(token("null"), lambda _: None)


def boolean() -> Parser[bool]:
    """The literals ``true`` and ``false``."""
    return map_(or_(token("true"), token("false")), lambda parsed: parsed == "true")


def json_string() -> Parser[str]:
    """A double-quoted string with escapes."""
    hex_digit = reduce(
        or_,
        [digit(), map_(character_range("a", "f"), ord), map_(character_range("A", "F"), ord)],
    )
    unicode = map_(
        and_(and_(and_(and_(character("u"), hex_digit), hex_digit), hex_digit), hex_digit),
        _decode_unicode,
    )
    escape = or_(reduce(or_, map(character, '"\\/bfnrt')), unicode)
    valid_chars = except_(
        character_range(" ", "\U0010ffff"), or_(character('"'), character("\\"))
    )
    valid_escape = map_(and_(character("\\"), escape), lambda parsed: _unescape(parsed[1]))
    characters = many(or_(valid_chars, valid_escape))
    return map_(
        and_(and_(character('"'), characters), character('"')),
        lambda parsed: "".join(parsed[0][1]),
    )


def json_number() -> Parser[float]:
    """A number: integer part, optional fraction, optional signed exponent.

    The fraction's digits are read as an integer, and an exponent is only
    applied when a fraction is present.
    """
    digits = map_(many1(digit()), _fold_digits)
    sign = or_(character("+"), character("-"))
    integer = or_(digits, map_(and_(character("-"), digits), lambda parsed: -parsed[1]))
    fraction = map_(and_(skip(character(".")), digits), lambda parsed: parsed[1])
    exponent = and_(
        skip(or_(character("E"), character("e"))),
        map_(and_(sign, digits), _signed),
    )
    return map_(and_(and_(integer, optional(fraction)), optional(exponent)), _to_number)


def whitespace() -> Parser[None]:
    """Zero or more spaces, newlines, carriage returns and tabs."""
    return skip(many(reduce(or_, map(character, " \n\r\t"))))