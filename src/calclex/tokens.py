"""Token kinds, source spans, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")

# Largest value a Number token may carry (unsigned 64-bit)
MAX_NUMBER = 2**64 - 1


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open source range [start, end) of 0-based offsets."""

    start: int
    end: int

    def merge(self, other: Span) -> Span:
        """Return the smallest span covering both self and other."""
        return Span(min(self.start, other.start), max(self.end, other.end))

    def slice(self, source: str) -> str:
        return source[self.start : self.end]

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class Annot(Generic[T]):
    """A value annotated with the span it was recognized at."""

    value: T
    span: Span


class Symbol(Enum):
    # Single-character kinds, valued by their literal
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"
    LPAREN = "("
    RPAREN = ")"


@dataclass(frozen=True, slots=True)
class Number:
    """Integer literal: [0-9][0-9]*"""

    value: int


TokenKind = Union[Number, Symbol]

Token = Annot[TokenKind]


def number(value: int, span: Span) -> Token:
    return Annot(Number(value), span)


def symbol(sym: Symbol, span: Span) -> Token:
    return Annot(sym, span)


def kind_name(kind: TokenKind) -> str:
    """Return the display name of a token kind (e.g. 'Number', 'LParen')."""
    if isinstance(kind, Number):
        return "Number"
    return _SYMBOL_NAMES[kind]


_SYMBOL_NAMES = {
    Symbol.PLUS: "Plus",
    Symbol.MINUS: "Minus",
    Symbol.ASTERISK: "Asterisk",
    Symbol.SLASH: "Slash",
    Symbol.LPAREN: "LParen",
    Symbol.RPAREN: "RParen",
}

DIGITS = frozenset("0123456789")
WHITESPACE = frozenset(" \n\t")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch in DIGITS


def is_whitespace(ch: str) -> bool:
    """Return True if ch is a space, newline or tab."""
    return ch in WHITESPACE
