"""Parser objects that are composed by chaining methods."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

ParseResult = Optional[tuple[Any, str]]
ParseFunc = Callable[[str], ParseResult]


class ParseError(ValueError):
    """Raised when a parser does not match its input."""

    def __init__(self, remaining: str) -> None:
        self.remaining = remaining
        super().__init__(f"no parse at {remaining[:30]!r}")


class Parser(Generic[T]):
    """A parser: a function from text to ``(value, rest)`` or ``None``.

    Calling the parser returns ``None`` on failure, which is what the
    combinators use to backtrack; :meth:`parse` raises instead.
    """

    __slots__ = ("_func",)

    def __init__(self, func: ParseFunc) -> None:
        self._func = func

    def __call__(self, s: str) -> ParseResult:
        return self._func(s)

    def parse(self, s: str) -> tuple[T, str]:
        """Run the parser, raising :class:`ParseError` if it does not match."""
        result = self._func(s)
        if result is None:
            raise ParseError(s)
        return result

    def and_then(self, other: ParseFunc) -> Parser[tuple[T, Any]]:
        """Run this parser, then ``other`` on the rest; yield both values."""

        def run(s: str) -> ParseResult:
            first = self._func(s)
            if first is None:
                return None
            v1, r1 = first
            second = other(r1)
            if second is None:
                return None
            v2, r2 = second
            return (v1, v2), r2

        return Parser(run)

    def or_else(self, other: ParseFunc) -> Parser[Any]:
        """Try this parser; if it fails, try ``other`` on the same input."""

        def run(s: str) -> ParseResult:
            result = self._func(s)
            return result if result is not None else other(s)

        return Parser(run)

    def optional(self) -> Parser[Optional[T]]:
        """Always succeed, yielding ``None`` and consuming nothing on a miss."""

        def run(s: str) -> ParseResult:
            result = self._func(s)
            return result if result is not None else (None, s)

        return Parser(run)

    def map(self, func: Callable[[T], U]) -> Parser[U]:
        """Transform the parsed value with ``func``."""

        def run(s: str) -> ParseResult:
            result = self._func(s)
            if result is None:
                return None
            value, rest = result
            return func(value), rest

        return Parser(run)

    def filter(self, pred: Callable[[T], bool]) -> Parser[T]:
        """Fail unless the parsed value satisfies ``pred``."""

        def run(s: str) -> ParseResult:
            result = self._func(s)
            if result is None or not pred(result[0]):
                return None
            return result

        return Parser(run)

    def many(self) -> Parser[list[T]]:
        """Apply the parser repeatedly, collecting zero or more values."""

        def run(s: str) -> ParseResult:
            values = []
            rest = s
            while (result := self._func(rest)) is not None:
                value, new_rest = result
                values.append(value)
                if len(new_rest) == len(rest):
                    break  # no progress; repeating would never end
                rest = new_rest
            return values, rest

        return Parser(run)

    def many1(self) -> Parser[list[T]]:
        """Like :meth:`many`, but at least one value is required."""
        return self.many().filter(bool)

    def skip(self) -> Parser[None]:
        """Match as this parser does, discarding the value."""
        return self.map(lambda _: None)

    def except_(self, other: ParseFunc) -> Parser[T]:
        """Fail where ``other`` parses the same value from the same input."""

        def run(s: str) -> ParseResult:
            result = self._func(s)
            if result is None:
                return None
            excluded = other(s)
            if excluded is not None and excluded[0] == result[0]:
                return None
            return result

        return Parser(run)

    def sep_by(self, sep: ParseFunc) -> Parser[list[T]]:
        """One or more values separated by ``sep``.

        A trailing separator with nothing after it is left unconsumed.
        """

        def run(s: str) -> ParseResult:
            first = self._func(s)
            if first is None:
                return None
            value, rest = first
            values = [value]
            while (separated := sep(rest)) is not None:
                item = self._func(separated[1])
                if item is None:
                    break
                value, rest = item
                values.append(value)
            return values, rest

        return Parser(run)

    def between(self, start: ParseFunc, end: ParseFunc) -> Parser[T]:
        """Parse ``start``, this parser, then ``end``; keep the middle value."""

        def run(s: str) -> ParseResult:
            opened = start(s)
            if opened is None:
                return None
            inner = self._func(opened[1])
            if inner is None:
                return None
            value, rest = inner
            closed = end(rest)
            if closed is None:
                return None
            return value, closed[1]

        return Parser(run)