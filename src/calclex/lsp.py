"""Minimal LSP server for calclex — diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from calclex import __version__
from calclex.errors import LexError, line_col
from calclex.lexer import lex
from calclex.tokens import Span

server = LanguageServer(
    "calclex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _span_to_range(source: str, span: Span) -> Range:
    """Convert an offset span to a 0-based LSP range, at least one character wide."""
    end = span.end if span.end > span.start else span.start + 1
    start_line, start_col = line_col(source, span.start)
    end_line, end_col = line_col(source, end)
    if end > len(source):
        # Past the last character: extend by one column on the same line
        end_line, end_col = start_line, start_col + 1
    return Range(
        start=Position(line=start_line - 1, character=start_col - 1),
        end=Position(line=end_line - 1, character=end_col - 1),
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Lex the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    diagnostics: list[Diagnostic] = []

    try:
        lex(source)
    except LexError as exc:
        diagnostics.append(
            Diagnostic(
                range=_span_to_range(source, exc.span),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="calclex",
            )
        )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
