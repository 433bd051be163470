import json

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from combiparse import json_method
from combiparse.cli import SAMPLE_DOCUMENT
from combiparse.json_functional import (
    boolean,
    element,
    json_array,
    json_null,
    json_number,
    json_object,
    json_string,
    parse,
    value,
    whitespace,
)
from combiparse.parser import ParseError

_text = st.text(st.characters(min_codepoint=32, max_codepoint=0xD7FF), max_size=8)
_scalars = st.none() | st.booleans() | st.integers(-(10**6), 10**6) | _text
_documents = st.recursive(
    _scalars,
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(_text, children, max_size=4),
    max_leaves=12,
)


def _outcome(parse_func, text):
    try:
        return True, parse_func(text)
    except ParseError:
        return False, None


@settings(deadline=None)
@given(_documents, st.sampled_from([None, 2]))
def test_round_trip_through_stdlib_dump(document, indent):
    text = json.dumps(document, ensure_ascii=False, indent=indent)
    assert parse(text) == json.loads(text, parse_int=float)


@pytest.mark.parametrize(
    "text",
    [
        "1.05",
        "-0.5",
        "1E+5",
        "1e5",
        '"\\u00ab"',
        '"\\u0041"',
        "[1,]",
        "[ ]",
        "{ }",
        '{"a": 1, "a": 2}',
        "tru",
        "",
        '  [1, {"k": [null]}]  trailing',
    ],
)
def test_agrees_with_method_grammar(text):
    assert _outcome(parse, text) == _outcome(json_method.parse, text)


def test_whitespace_rest():
    assert whitespace().parse(" \n\r\thello") == (None, "hello")


def test_string_rest():
    assert json_string().parse('"hello"1') == ("hello", "1")


def test_number_values():
    assert json_number().parse("1.2") == (1.2, "")
    assert json_number().parse("1.234E-567") == (1.234e-567, "")


def test_boolean_and_null():
    assert boolean().parse("false") == (False, "")
    assert json_null().parse("null") == (None, "")


def test_array_and_object():
    assert json_array().parse('[1, ["a", false], null]')[0] == [1.0, ["a", False], None]
    assert json_object().parse('{"a": true}')[0] == {"a": True}


def test_element_strips_whitespace():
    assert element().parse("  true  x") == (True, "x")


def test_value_requires_no_leading_whitespace():
    with pytest.raises(ParseError):
        value().parse(" true")


def test_escapes():
    assert parse(r'"\n\t\/"') == "\n\t/"


def test_parse_error():
    with pytest.raises(ParseError) as info:
        parse("nul")
    assert info.value.remaining == "nul"


def test_trailing_text_ignored():
    assert parse("true false") is True