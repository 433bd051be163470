import pytest
from hypothesis import given
from hypothesis import strategies as st

from combiparse.chars import any_char, character, digit, token
from combiparse.combinators import (
    and_,
    between,
    except_,
    filter_,
    lazy,
    many,
    many1,
    map_,
    optional,
    or_,
    sep_by,
    skip,
)
from combiparse.parser import ParseError


def _letter_x(s):
    return ("x", s[1:]) if s.startswith("x") else None


def test_and_pairs_values():
    assert and_(character("a"), character("b"))("abz") == (("a", "b"), "z")


def test_and_accepts_plain_functions():
    assert and_(_letter_x, _letter_x)("xxy") == (("x", "x"), "y")
    assert and_(_letter_x, _letter_x)("xy") is None


def test_or_fallback():
    p = or_(token("null"), token("true"))
    assert p("true") == ("true", "")
    assert p("null") == ("null", "")
    assert p("false") is None


def test_many_and_many1():
    assert many(digit())("") == ([], "")
    assert many(_letter_x)("xxa") == (["x", "x"], "a")
    assert many1(digit())("") is None


def test_skip_whitespace():
    ws = skip(many(or_(character(" "), character("\t"))))
    assert ws(" \t x") == (None, "x")


def test_between():
    assert between(token("null"), character("("), character(")"))("(null)") == ("null", "")


def test_sep_by():
    assert sep_by(digit(), character(","))("4,5;") == ([4, 5], ";")
    assert sep_by(digit(), character(","))("") is None


def test_filter_and_map():
    upper = filter_(any_char(), str.isupper)
    assert upper("Ab") == ("A", "b")
    assert upper("ab") is None
    assert map_(digit(), lambda d: d * 10)("3") == (30, "")


def test_optional():
    assert optional(character("+"))("+1") == ("+", "1")
    assert optional(character("+"))("1") == (None, "1")


def test_except():
    p = except_(any_char(), character("\\"))
    assert p("\\n") is None
    assert p("n\\") == ("n", "\\")


def _nesting():
    inner = between(lazy(_nesting), character("("), character(")"))
    return or_(map_(inner, lambda depth: depth + 1), map_(token(""), lambda _: 0))


def test_lazy_supports_recursive_grammar():
    p = lazy(_nesting)
    assert p("((()))rest") == (3, "rest")
    assert p("(()") == (0, "(()")


def test_lazy_builds_once():
    calls = []

    def factory():
        calls.append(1)
        return character("a")

    p = lazy(factory)
    assert calls == []
    assert p("a") == ("a", "")
    assert p("b") is None
    assert len(calls) == 1


def test_parse_error_from_combined_parser():
    with pytest.raises(ParseError):
        and_(character("a"), character("b")).parse("ax")


@given(st.lists(st.integers(min_value=0, max_value=9), min_size=1))
def test_sep_by_round_trip(numbers):
    text = ",".join(map(str, numbers))
    assert sep_by(digit(), character(",")).parse(text) == (numbers, "")