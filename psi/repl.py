"""Line-oriented read-eval-print loop.

Each input line is checked (size, emptiness, balanced parentheses), its first
expression is parsed and evaluated, and the printed result is written back.
`(quit)`, the quit sentinel produced by evaluation, or end of input end the
session.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import TextIO

from psi.builtins import is_quit_signal
from psi.config import PsiConfig, load_config
from psi.errors import INPUT_ERROR, SYNTAX_ERROR
from psi.evaluation import evaluate
from psi.printer import format_value
from psi.reader import Cursor, parse
from psi.types import END_OF_INPUT, ErrorValue, Symbol, ValueType, type_of

logger = logging.getLogger(__name__)

QUIT_MESSAGE = "Quitting..."


@dataclass(frozen=True)
class LineResult:
    output: str | None
    quit: bool = False


def check_balanced_parens(text: str) -> bool:
    stack: list[str] = []
    for ch in text:
        if ch == "(":
            stack.append(ch)
        elif ch == ")":
            if not stack:
                return False
            stack.pop()
    return not stack


def is_quit_form(expr) -> bool:
    """True for the literal one-element list `(quit)`."""
    return (
        type_of(expr) == ValueType.LIST
        and len(expr) == 1
        and expr[0] == Symbol("quit")
    )


def _error_line(kind: str, message: str) -> LineResult:
    return LineResult(format_value(ErrorValue(kind, message)))


class Repl:
    def __init__(
        self,
        config: PsiConfig | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ):
        self.config = config or load_config()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def handle_line(self, line: str) -> LineResult:
        """Process one raw input line (a trailing newline is allowed)."""
        content = line[:-1] if line.endswith("\n") else line
        limit = self.config.max_input_bytes
        if len(content.encode("utf-8", "surrogatepass")) >= limit:
            logger.warning("discarding input line of %d characters", len(content))
            return _error_line(INPUT_ERROR, f"Input exceeds maximum size of {limit} bytes")

        if not content:
            return _error_line(SYNTAX_ERROR, "Empty input")
        if not check_balanced_parens(content):
            return _error_line(SYNTAX_ERROR, "Unbalanced parentheses")

        parsed = parse(
            Cursor(content),
            max_depth=self.config.max_depth,
            max_list_capacity=self.config.max_list_capacity,
        )
        if parsed is END_OF_INPUT:
            return _error_line(SYNTAX_ERROR, "Empty input or unparsable")
        if isinstance(parsed, ErrorValue):
            return LineResult(format_value(parsed))
        if is_quit_form(parsed):
            return LineResult(QUIT_MESSAGE, quit=True)

        result = evaluate(parsed, max_depth=self.config.max_depth)
        if is_quit_signal(result):
            return LineResult(QUIT_MESSAGE, quit=True)
        return LineResult(format_value(result))

    def run(self) -> None:
        while True:
            self.stdout.write(self.config.prompt)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                self.stdout.write("\n" + QUIT_MESSAGE + "\n")
                break
            result = self.handle_line(line)
            if result.output is not None:
                self.stdout.write(result.output + "\n")
            if result.quit:
                break
        self.stdout.flush()
