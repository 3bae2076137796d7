"""Lexing error kinds and the LexError exception with formatted source context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from calclex.tokens import Annot, Span


@dataclass(frozen=True, slots=True)
class InvalidChar:
    """A character no sub-lexer accepts at this position."""

    char: str


@dataclass(frozen=True, slots=True)
class Eof:
    """Input ended where at least one more character was expected."""


@dataclass(frozen=True, slots=True)
class NumberOverflow:
    """An integer literal larger than an unsigned 64-bit value."""

    digits: str


LexErrorKind = Union[InvalidChar, Eof, NumberOverflow]


def describe(kind: LexErrorKind) -> str:
    """Return a one-line human description of an error kind."""
    if isinstance(kind, InvalidChar):
        return f"invalid character {kind.char!r}"
    if isinstance(kind, Eof):
        return "unexpected end of input"
    return f"integer literal {kind.digits} does not fit in 64 bits"


def line_col(source: str, offset: int) -> tuple[int, int]:
    """Convert a 0-based offset into a 1-based (line, column) pair."""
    offset = min(offset, len(source))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


class LexError(Exception):
    """Raised on the first lexing error, with span and source context."""

    def __init__(self, error: Annot[LexErrorKind], source: str) -> None:
        self.error = error
        self.source = source
        self.message = describe(error.value)
        super().__init__(self.format())

    @property
    def kind(self) -> LexErrorKind:
        return self.error.value

    @property
    def span(self) -> Span:
        return self.error.span

    def format(self, filename: str = "<input>") -> str:
        line, col = line_col(self.source, self.span.start)
        lines = self.source.split("\n")

        if 0 <= line - 1 < len(lines):
            source_line = lines[line - 1]
        else:
            source_line = ""

        # Underline the span on its first line, at least one caret
        underline_len = max(1, min(len(self.span), len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )
