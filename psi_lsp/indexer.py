from __future__ import annotations

"""
Lightweight indexer for psi source buffers, without evaluating code.

A psi buffer is read the way the REPL reads it: every non-blank line is one
input. For each line we run the same checks the REPL runs before evaluation
(size, balanced parentheses, parse) and record:
- diagnostics: syntax errors, unbalanced parentheses, trailing input the REPL
  would ignore, symbols that are not bound to a built-in,
- symbol occurrences with their positions, for hover.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from psi.builtins import lookup_builtin
from psi.config import DEFAULT_INPUT_BUFFER_SIZE
from psi.reader import Cursor, Parser
from psi.repl import check_balanced_parens
from psi.types import END_OF_INPUT, ErrorValue, Symbol

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"
SEVERITY_INFO = "info"

MAX_LINE_BYTES = DEFAULT_INPUT_BUFFER_SIZE - 1


@dataclass
class SymbolRef:
    name: str
    line: int
    col: int
    bound: bool


@dataclass
class LineDiagnostic:
    line: int
    col: int
    end_col: int
    message: str
    severity: str


@dataclass
class DocumentIndex:
    symbols: List[SymbolRef] = field(default_factory=list)
    diagnostics: List[LineDiagnostic] = field(default_factory=list)

    def symbol_at(self, line: int, col: int) -> Optional[SymbolRef]:
        for ref in self.symbols:
            if ref.line == line and ref.col <= col < ref.col + len(ref.name):
                return ref
        return None


def _unbalanced_column(text: str) -> int:
    # First unmatched ')' or, failing that, the last unmatched '('
    open_cols: List[int] = []
    for col, ch in enumerate(text):
        if ch == "(":
            open_cols.append(col)
        elif ch == ")":
            if not open_cols:
                return col
            open_cols.pop()
    return open_cols[-1] if open_cols else 0


def _iter_atoms(text: str, end: int) -> Iterator[Tuple[object, int]]:
    """Yield (atom, column) for every atom before `end`."""
    cursor = Cursor(text)
    while True:
        cursor.skip_whitespace()
        if cursor.pos >= end:
            return
        if cursor.peek() in ("(", ")"):
            cursor.advance()
            continue
        start = cursor.pos
        atom = Parser(cursor).parse_expr()
        if atom is END_OF_INPUT or isinstance(atom, ErrorValue):
            return
        yield atom, start


def _index_line(idx: DocumentIndex, line_no: int, text: str) -> None:
    if len(text.encode("utf-8", "surrogatepass")) >= MAX_LINE_BYTES:
        idx.diagnostics.append(LineDiagnostic(
            line_no, 0, len(text),
            f"Input exceeds maximum size of {MAX_LINE_BYTES} bytes", SEVERITY_ERROR))
        return
    if not check_balanced_parens(text):
        col = _unbalanced_column(text)
        idx.diagnostics.append(LineDiagnostic(
            line_no, col, col + 1, "Unbalanced parentheses", SEVERITY_ERROR))
        return

    cursor = Cursor(text)
    expr = Parser(cursor).parse_expr()
    if isinstance(expr, ErrorValue):
        col = min(cursor.pos, max(len(text) - 1, 0))
        idx.diagnostics.append(LineDiagnostic(
            line_no, col, col + 1, f"{expr.kind}: {expr.message}", SEVERITY_ERROR))
        return
    end = cursor.pos

    for atom, col in _iter_atoms(text, end):
        if not isinstance(atom, Symbol):
            continue
        bound = lookup_builtin(atom.id) is not None
        idx.symbols.append(SymbolRef(atom.id, line_no, col, bound))
        if not bound:
            idx.diagnostics.append(LineDiagnostic(
                line_no, col, col + len(atom.id),
                f"Symbol '{atom.id}' not bound to a function", SEVERITY_INFO))

    cursor.skip_whitespace()
    if not cursor.at_end():
        idx.diagnostics.append(LineDiagnostic(
            line_no, cursor.pos, len(text),
            "Trailing input ignored: only the first expression on a line is evaluated",
            SEVERITY_WARNING))


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    for line_no, line in enumerate(text.splitlines()):
        if not line.strip():
            continue
        _index_line(idx, line_no, line)
    return idx
