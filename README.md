# combiparse

Small parser combinators for text, and a JSON parser built from them in two
styles.

A parser is a `combiparse.parser.Parser`. Calling it on a string returns a
pair made of the parsed value and the rest of the input, or `None` when it
does not match. Its `parse` method returns the same pair but raises
`combiparse.parser.ParseError` (a `ValueError`) instead of returning `None`.

## Installing

```
pip install .
```

## Character parsers

`combiparse.chars` provides the building blocks:

- `any_char()` matches any single character.
- `digit()` matches an ASCII digit and yields its value as an `int`.
- `letter()` matches an ASCII letter.
- `character(c)` matches exactly `c`.
- `character_range(low, high)` matches a character from `low` to `high`,
  both included.
- `token(text)` matches the literal string `text`.

`character` and `character_range` raise `ValueError` if given anything but
single characters.

## Method style

```python
from combiparse.chars import character, digit, token

number = digit().many1().map(lambda ds: int("".join(map(str, ds))))
pair = number.and_then(character(",")).and_then(number).map(
    lambda v: (v[0][0], v[1])
)
print(pair.parse("12,34 rest"))   # ((12, 34), ' rest')
print(token("null")("nope"))      # None
```

`Parser` provides `and_then`, `or_else`, `optional`, `map`, `filter`, `many`,
`many1`, `skip`, `except_`, `sep_by` and `between`. Any of them accepts as its
other parser either a `Parser` or a plain function from a string to a
`(value, rest)` pair or `None`.

- `many` stops when the parser stops matching or stops consuming input.
- `sep_by` needs at least one item; a trailing separator is left unconsumed.
- `except_(other)` fails where `other` parses the same value from the same
  input.

## Functional style

`combiparse.combinators` offers the same operations as plain functions:
`and_`, `or_`, `many`, `many1`, `skip`, `between`, `sep_by`, `filter_`,
`map_`, `optional` and `except_`. It also has `lazy(factory)`, which builds a
parser from `factory` on first use so that a grammar can refer to itself.

## JSON

Two JSON parsers built from the same grammar are included, one in each style:
`combiparse.json_method` and `combiparse.json_functional`. Each has a `parse`
function as well as the parsers for the pieces of the grammar (`element`,
`value`, `json_object`, `json_array`, `json_null`, `boolean`, `json_string`,
`json_number`, `whitespace`).

```python
from combiparse import json_method, json_functional

doc = '{"a": [1, 2.5, "x", true, null]}'
assert json_method.parse(doc) == json_functional.parse(doc)
# {'a': [1.0, 2.5, 'x', True, None]}
```

Objects become `dict` (a repeated key keeps its last value), arrays become
`list`, every number becomes a `float`, and `null` becomes `None`. `parse`
raises `ParseError` when no value can be parsed; text after the first value
is ignored.

The grammar has some quirks worth knowing:

- The digits after a decimal point are read as an integer, so `1.05` parses
  as `1.5`.
- An exponent is applied only when a fraction is present, and it needs an
  explicit sign (`1.5E+3`, not `1.5E3`).
- `\u` escapes decode correctly only when all four hex digits are decimal
  digits; hex letters are taken by their character code.

## Command line

```
combiparse [PATH]
```

This parses a JSON document with both parsers and checks that they agree.
`PATH` is a file to read, or `-` for standard input; without it a built-in
sample document is used. The exit status is 0 when the parsers agree, 1 when
they do not, and 2 when the file cannot be read.

## What it does not do

The package only reads JSON. It does not write JSON, validate it against a
schema, or report where in the input a parse went wrong beyond the remaining
text held by `ParseError`.

## Tests

```
pip install .[test]
pytest
```