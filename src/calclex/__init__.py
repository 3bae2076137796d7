"""Lexical analyzer for integer arithmetic expressions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calclex.tokens import Token

__version__ = "0.1.0"


def lex(source: str) -> list[Token]:
    """Tokenize an arithmetic expression, raising LexError on the first problem."""
    from calclex.lexer import lex as _lex

    return _lex(source)
