"""Combinators as free functions over parsers or plain parse functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

from combiparse.parser import ParseFunc, Parser, ParseResult


def _as_parser(parser: ParseFunc) -> Parser[Any]:
    return parser if isinstance(parser, Parser) else Parser(parser)


def and_(parser1: ParseFunc, parser2: ParseFunc) -> Parser[tuple[Any, Any]]:
    """Sequence two parsers, yielding a pair of their values."""
    return _as_parser(parser1).and_then(parser2)


def or_(parser1: ParseFunc, parser2: ParseFunc) -> Parser[Any]:
    """Try ``parser1``, falling back to ``parser2``."""
    return _as_parser(parser1).or_else(parser2)


def many(parser: ParseFunc) -> Parser[list[Any]]:
    """Zero or more repetitions."""
    return _as_parser(parser).many()


def many1(parser: ParseFunc) -> Parser[list[Any]]:
    """One or more repetitions."""
    return _as_parser(parser).many1()


def skip(parser: ParseFunc) -> Parser[None]:
    """Match, discarding the value."""
    return _as_parser(parser).skip()


def between(parser: ParseFunc, start: ParseFunc, end: ParseFunc) -> Parser[Any]:
    """Parse ``parser`` enclosed by ``start`` and ``end``."""
    return _as_parser(parser).between(start, end)


def sep_by(parser: ParseFunc, sep: ParseFunc) -> Parser[list[Any]]:
    """One or more values separated by ``sep``."""
    return _as_parser(parser).sep_by(sep)


def filter_(parser: ParseFunc, pred: Callable[[Any], bool]) -> Parser[Any]:
    """Fail unless the parsed value satisfies ``pred``."""
    return _as_parser(parser).filter(pred)


def map_(parser: ParseFunc, func: Callable[[Any], Any]) -> Parser[Any]:
    """Transform the parsed value."""
    return _as_parser(parser).map(func)


def optional(parser: ParseFunc) -> Parser[Optional[Any]]:
    """Succeed with ``None`` where ``parser`` does not match."""
    return _as_parser(parser).optional()


def except_(parser1: ParseFunc, parser2: ParseFunc) -> Parser[Any]:
    """Parse with ``parser1`` unless ``parser2`` yields the same value."""
    return _as_parser(parser1).except_(parser2)


def lazy(factory: Callable[[], ParseFunc]) -> Parser[Any]:
    """Build the parser from ``factory`` on first use.

    This lets a grammar refer to itself without recursing while it is built.
    """
    built: list[ParseFunc] = []

    def run(s: str) -> ParseResult:
        if not built:
            built.append(factory())
        return built[0](s)

    return Parser(run)