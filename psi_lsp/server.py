from __future__ import annotations

"""
A minimal pygls-based Language Server for psi.

Features:
- Text synchronization and document store
- Diagnostics: syntax errors, unbalanced parens, ignored trailing input,
  symbols not bound to a built-in
- Hover: builtin signatures
- Completion: builtins
- Signature Help: for builtins

Note: We avoid evaluating the buffer. We build a static index per document.
"""

from typing import Dict, Optional, List
from dataclasses import dataclass

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_SIGNATURE_HELP,
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
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    ParameterInformation,
    Position,
    Range,
    SignatureHelp,
    SignatureHelpOptions,
    SignatureHelpParams,
    SignatureInformation,
)

from psi import __version__
from psi.builtins import BUILTIN_SIGNATURES
from psi_lsp.indexer import (
    SEVERITY_ERROR,
    SEVERITY_WARNING,
    DocumentIndex,
    build_index,
)

SOURCE = "psi-ls"

_SEVERITIES = {
    SEVERITY_ERROR: DiagnosticSeverity.Error,
    SEVERITY_WARNING: DiagnosticSeverity.Warning,
}


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class PsiLanguageServer(LanguageServer):
    CMD_NAME = "psi-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__)
        self.documents: Dict[str, DocumentState] = {}

    def update_document(self, uri: str, text: str) -> DocumentState:
        state = DocumentState(text=text, index=build_index(text))
        self.documents[uri] = state
        return state


ls = PsiLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    state = ls.update_document(uri, params.text_document.text or "")
    _publish_diagnostics(uri, state.index)


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    # The workspace has already applied incremental edits
    text = ls.workspace.get_text_document(uri).source
    state = ls.update_document(uri, text)
    _publish_diagnostics(uri, state.index)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def diagnostics_for(idx: DocumentIndex) -> List[Diagnostic]:
    return [
        Diagnostic(
            range=Range(
                start=Position(line=d.line, character=d.col),
                end=Position(line=d.line, character=max(d.end_col, d.col + 1)),
            ),
            message=d.message,
            severity=_SEVERITIES.get(d.severity, DiagnosticSeverity.Information),
            source=SOURCE,
        )
        for d in idx.diagnostics
    ]


def _publish_diagnostics(uri: str, idx: DocumentIndex):
    ls.publish_diagnostics(uri, diagnostics_for(idx))


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = _extract_word_at(state.text, params.position)
    if not word:
        return None

    if word in BUILTIN_SIGNATURES:
        contents = f"{BUILTIN_SIGNATURES[word]} (builtin)"
    else:
        ref = state.index.symbol_at(params.position.line, params.position.character)
        if ref is None:
            return None
        contents = f"{ref.name}: not bound to a function"
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(params: CompletionParams) -> CompletionList:
    items = [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in BUILTIN_SIGNATURES.items()
    ]
    return CompletionList(is_incomplete=False, items=items)


# --- Signature Help ---
@ls.feature(TEXT_DOCUMENT_SIGNATURE_HELP, SignatureHelpOptions(trigger_characters=["(", " "]))
def on_signature_help(params: SignatureHelpParams) -> Optional[SignatureHelp]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    callee = _extract_callee_name(_get_line_prefix(state.text, params.position))
    sig = BUILTIN_SIGNATURES.get(callee) if callee else None
    if not sig:
        return None

    # "(name p1 p2)" -> parameters p1, p2
    params_list = sig.strip("()").split()[1:]
    parameters = [ParameterInformation(label=p) for p in params_list]
    return SignatureHelp(
        signatures=[SignatureInformation(label=sig, parameters=parameters)],
        active_signature=0,
        active_parameter=0,
    )


# --- Helpers ---
def _get_line_prefix(text: str, pos: Position) -> str:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return ""
    return lines[pos.line][: pos.character]


def _extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    start = end = pos.character
    while start > 0 and line[start - 1] not in " \t()\n\r":
        start -= 1
    while end < len(line) and line[end] not in " \t()\n\r":
        end += 1
    return line[start:end] or None


def _extract_callee_name(prefix: str) -> Optional[str]:
    lp = prefix.rfind("(")
    if lp == -1:
        return None
    tail = prefix[lp + 1:].split()
    if not tail:
        return None
    return tail[0].split(")")[0] or None


def main():
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
