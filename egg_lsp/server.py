from __future__ import annotations

"""
A minimal pygls-based Language Server for Egg.

Features:
- Text synchronization and document store
- Diagnostics: syntax errors with position, unmatched parens, unmatched quotes
- Hover: special form and builtin signatures, locally defined bindings
- Completion: special forms, builtins, local bindings and parameters
- Document Symbols: from the indexer

Note: We avoid evaluating the buffer. We build a static index per document.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)
from pygls.server import LanguageServer

from egg.config import get_log_level
from egg_lsp.indexer import BUILTIN_SIGNATURES, DocumentIndex, SymbolDef, build_index

logger = logging.getLogger(__name__)

WORD_DELIMITERS = ' \t\r\n(),#"'


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class EggLanguageServer(LanguageServer):
    CMD_NAME = "egg-ls"
    VERSION = "0.1.0"

    def __init__(self):
        super().__init__(self.CMD_NAME, self.VERSION)
        self.documents: Dict[str, DocumentState] = {}


ls = EggLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _update(uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    _update(uri, text)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


def _update(uri: str, text: str) -> None:
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    logger.debug("Indexed %s: %d bindings", uri, len(idx.symbols))
    ls.publish_diagnostics(uri, build_diagnostics(idx))


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def build_diagnostics(idx: DocumentIndex) -> List[Diagnostic]:
    diags: List[Diagnostic] = []

    for d in idx.diagnostics:
        diags.append(
            Diagnostic(
                range=_mk_range(d.line, d.col),
                message=d.message,
                severity=DiagnosticSeverity.Error,
                source=EggLanguageServer.CMD_NAME,
            )
        )

    if idx.paren_balance != 0:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message="Unmatched parentheses detected",
                severity=DiagnosticSeverity.Warning,
                source=EggLanguageServer.CMD_NAME,
            )
        )

    if idx.has_unmatched_quote:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message="Unmatched quote detected",
                severity=DiagnosticSeverity.Warning,
                source=EggLanguageServer.CMD_NAME,
            )
        )
    return diags


# --- Hover ---
def hover_text(idx: DocumentIndex, word: str) -> Optional[str]:
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    sdef = idx.symbols.get(word) or idx.params.get(word)
    if sdef is None:
        return None
    return f"{word} — {sdef.kind} (defined at {sdef.line + 1}:{sdef.col + 1})"


@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    word = extract_word_at(state.text, params.position)
    if not word:
        return None
    contents = hover_text(state.index, word)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["(", ","]))
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    items: List[CompletionItem] = []
    for name, sig in BUILTIN_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig))
    if state:
        for name, sdef in state.index.symbols.items():
            items.append(CompletionItem(label=name, kind=_completion_kind(sdef)))
        for name in state.index.params:
            if name not in state.index.symbols:
                items.append(CompletionItem(label=name, kind=CompletionItemKind.Variable))
    return CompletionList(is_incomplete=False, items=items)


def _completion_kind(sdef: SymbolDef) -> CompletionItemKind:
    if sdef.kind == "function":
        return CompletionItemKind.Function
    if sdef.kind == "class":
        return CompletionItemKind.Class
    return CompletionItemKind.Variable


# --- Document Symbols ---
def _symbol_kind(sdef: SymbolDef) -> SymbolKind:
    if sdef.kind == "function":
        return SymbolKind.Function
    if sdef.kind == "class":
        return SymbolKind.Class
    return SymbolKind.Variable


@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []
    for name, sdef in state.index.symbols.items():
        rng = _mk_range(sdef.line, sdef.col, len(name))
        symbols.append(
            DocumentSymbol(name=name, kind=_symbol_kind(sdef), range=rng, selection_range=rng)
        )
    return symbols


# --- Helpers ---
def extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    start = min(pos.character, len(line))
    while start > 0 and line[start - 1] not in WORD_DELIMITERS:
        start -= 1
    end = min(pos.character, len(line))
    while end < len(line) and line[end] not in WORD_DELIMITERS:
        end += 1
    return line[start:end] or None


def main() -> None:
    # stdout carries the protocol; logs go to stderr.
    logging.basicConfig(level=get_log_level())
    ls.start_io()


if __name__ == "__main__":
    main()
