"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from calclex.errors import LexError
from calclex.lexer import lex as tokenize
from calclex.tokens import Number, Symbol, Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def lex_error():
    """Return a helper that tokenizes source and returns the LexError it raises."""

    def _lex_error(source: str) -> LexError:
        with pytest.raises(LexError) as exc_info:
            tokenize(source)
        return exc_info.value

    return _lex_error


def kinds(tokens: list[Token]) -> list[TokenKind]:
    return [t.value for t in tokens]


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = kinds(tokens)
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_spans(tokens: list[Token], expected: list[tuple[int, int]]) -> None:
    """Assert that the token spans match the expected (start, end) pairs."""
    actual = [(t.span.start, t.span.end) for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def n(value: int) -> Number:
    """Shorthand for a Number kind in expected lists."""
    return Number(value)


PLUS = Symbol.PLUS
MINUS = Symbol.MINUS
ASTERISK = Symbol.ASTERISK
SLASH = Symbol.SLASH
LPAREN = Symbol.LPAREN
RPAREN = Symbol.RPAREN
