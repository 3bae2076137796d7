"""calclex lexer: converts an arithmetic expression into a flat token list."""

from __future__ import annotations

import logging
from collections.abc import Callable

from calclex.errors import Eof, InvalidChar, LexError, LexErrorKind, NumberOverflow
from calclex.tokens import (
    MAX_NUMBER,
    Annot,
    Span,
    Symbol,
    Token,
    is_digit,
    is_whitespace,
    number,
    symbol,
)

logger = logging.getLogger(__name__)

# A sub-lexer consumes one token starting at pos and returns it with the next offset
SubLexer = Callable[[str, int], tuple[Token, int]]

# Digits in MAX_NUMBER; longer runs (ignoring leading zeros) always overflow
_MAX_DIGITS = len(str(MAX_NUMBER))


def _error(kind: LexErrorKind, start: int, end: int, source: str) -> LexError:
    return LexError(Annot(kind, Span(start, end)), source)


def _unexpected(source: str, pos: int) -> LexError:
    """Error for a sub-lexer that cannot start at pos."""
    if pos >= len(source):
        return _error(Eof(), pos, pos, source)
    return _error(InvalidChar(source[pos]), pos, pos + 1, source)


# ----------------------------------------------------------------------
# Sub-lexers
# ----------------------------------------------------------------------


def lex_symbol(source: str, pos: int, sym: Symbol) -> tuple[Token, int]:
    """Consume the single character sym.value at pos."""
    if pos >= len(source) or source[pos] != sym.value:
        raise _unexpected(source, pos)
    return symbol(sym, Span(pos, pos + 1)), pos + 1


def _symbol_lexer(sym: Symbol) -> SubLexer:
    def lexer(source: str, pos: int) -> tuple[Token, int]:
        return lex_symbol(source, pos, sym)

    lexer.__name__ = lexer.__qualname__ = f"lex_{sym.name.lower()}"
    lexer.__doc__ = f"Consume a {sym.value!r} at pos."
    return lexer


lex_plus = _symbol_lexer(Symbol.PLUS)
lex_minus = _symbol_lexer(Symbol.MINUS)
lex_asterisk = _symbol_lexer(Symbol.ASTERISK)
lex_slash = _symbol_lexer(Symbol.SLASH)
lex_lparen = _symbol_lexer(Symbol.LPAREN)
lex_rparen = _symbol_lexer(Symbol.RPAREN)

_SYMBOL_LEXERS: dict[str, SubLexer] = {
    "+": lex_plus,
    "-": lex_minus,
    "*": lex_asterisk,
    "/": lex_slash,
    "(": lex_lparen,
    ")": lex_rparen,
}


def lex_number(source: str, pos: int) -> tuple[Token, int]:
    """Consume the maximal run of digits at pos as a Number token."""
    start = pos
    while pos < len(source) and is_digit(source[pos]):
        pos += 1
    if pos == start:
        raise _unexpected(source, start)

    digits = source[start:pos]
    # Convert only the significant digits: int() refuses very long digit strings
    significant = digits.lstrip("0")
    if len(significant) > _MAX_DIGITS:
        raise _error(NumberOverflow(digits), start, pos, source)
    value = int(significant or "0")
    if value > MAX_NUMBER:
        raise _error(NumberOverflow(digits), start, pos, source)
    return number(value, Span(start, pos)), pos


def skip_whitespace(source: str, pos: int) -> int:
    """Return the offset after the run of spaces, newlines and tabs at pos."""
    while pos < len(source) and is_whitespace(source[pos]):
        pos += 1
    return pos


# ----------------------------------------------------------------------
# Driver
# ----------------------------------------------------------------------


class Lexer:
    """Tokenize an arithmetic expression into a list of Token objects.

    Lexer instances are single-use; create one per source string. The scan
    is all-or-nothing: the first LexError ends it and no tokens are returned.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        source = self._source
        while self._pos < len(source):
            ch = source[self._pos]
            if is_digit(ch):
                self._lex_a_token(lex_number)
            elif ch in _SYMBOL_LEXERS:
                self._lex_a_token(_SYMBOL_LEXERS[ch])
            elif is_whitespace(ch):
                self._pos = skip_whitespace(source, self._pos)
            else:
                raise _error(InvalidChar(ch), self._pos, self._pos + 1, source)

        logger.debug("lexed %d tokens from %d characters", len(self._tokens), len(source))
        return self._tokens

    def _lex_a_token(self, sub_lexer: SubLexer) -> None:
        tok, self._pos = sub_lexer(self._source, self._pos)
        self._tokens.append(tok)


def lex(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source).tokenize()
