"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from calclex.tokens import Number, Token, kind_name


def dump_tokens(tokens: list[Token], source: str, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable token listing to *file*."""
    file.write(f"Tokens ({len(tokens)})\n")
    for tok in tokens:
        _dump_token(tok, source, file)


def _dump_token(tok: Token, source: str, f: TextIO) -> None:
    span = f"[{tok.span.start},{tok.span.end})"
    kind = tok.value
    if isinstance(kind, Number):
        label = f"Number({kind.value})"
    else:
        label = kind_name(kind)
    f.write(f"  {span:<10} {label:<24} {tok.span.slice(source)!r}\n")
