"""Parsers for single characters and literal tokens."""

from __future__ import annotations

from combiparse.parser import Parser, ParseResult


def _first_char(s: str) -> ParseResult:
    return (s[0], s[1:]) if s else None


def any_char() -> Parser[str]:
    """Match any single character."""
    return Parser(_first_char)


def digit() -> Parser[int]:
    """Match an ASCII decimal digit, yielding its numeric value."""
    return any_char().filter(lambda c: "0" <= c <= "9").map(int)


def letter() -> Parser[str]:
    """Match an ASCII letter."""
    return any_char().filter(lambda c: c.isascii() and c.isalpha())


def character(c: str) -> Parser[str]:
    """Match exactly the character ``c``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return any_char().filter(lambda parsed: parsed == c)


def character_range(low: str, high: str) -> Parser[str]:
    """Match a character between ``low`` and ``high``, both included."""
    if len(low) != 1 or len(high) != 1:
        raise ValueError("range bounds must be single characters")
    return any_char().filter(lambda parsed: low <= parsed <= high)


def token(text: str) -> Parser[str]:
    """Match the literal string ``text``."""

    def run(s: str) -> ParseResult:
        if s.startswith(text):
            return text, s[len(text):]
        return None

    return Parser(run)