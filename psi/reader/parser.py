"""
  psi reader: recursive descent over a Cursor

- One call to `parse` reads one expression and leaves the cursor just after it
- Emits psi values directly, there is no separate token stream:

    - numbers -> float (decimal or hexadecimal, as strtod reads them)
    - #t / #f -> bool
    - lists -> PsiList
    - anything else up to whitespace or a paren -> Symbol

- Failures come back as ErrorValue("SyntaxError", ...), never as exceptions
- Running out of input before any token is END_OF_INPUT, which is not an error
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from psi.errors import SYNTAX_ERROR, MEMORY_ERROR, CAPACITY_ERROR, PsiCapacityError
from psi.types import END_OF_INPUT, EndOfInputType, ErrorValue, PsiList, Symbol, Value
from psi.types.psi_list import DEFAULT_MAX_CAPACITY
from psi.recursion import DEFAULT_MAX_DEPTH, recursion_headroom
from psi.reader.cursor import Cursor, DIGITS, WHITESPACE

logger = logging.getLogger(__name__)


MAX_SYMBOL_LENGTH = 255

# The prefixes a C strtod accepts once the first character looks numeric
HEX_NUMBER_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?",
    re.ASCII,
)
DECIMAL_NUMBER_RE = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?",
    re.ASCII,
)

SYMBOL_TERMINATORS = WHITESPACE | {"(", ")"}


def _syntax_error(message: str) -> ErrorValue:
    return ErrorValue(SYNTAX_ERROR, message)


def _hex_to_float(token: str) -> float:
    try:
        return float.fromhex(token)
    except OverflowError:
        # strtod saturates to HUGE_VAL
        return float("-inf") if token.startswith("-") else float("inf")


class Parser:
    def __init__(
        self,
        source: str | Cursor,
        max_depth: int = DEFAULT_MAX_DEPTH,
        max_list_capacity: int = DEFAULT_MAX_CAPACITY,
    ):
        self.cursor = source if isinstance(source, Cursor) else Cursor(source)
        self.max_depth = max_depth
        self.max_list_capacity = max_list_capacity

    def parse_expr(self) -> Value | EndOfInputType:
        with recursion_headroom(self.max_depth):
            try:
                expr = self._parse(0)
            except MemoryError:
                return ErrorValue(MEMORY_ERROR, "Failed to allocate while parsing")
            except RecursionError:
                logger.warning("parser ran out of stack below depth %d", self.max_depth)
                return _syntax_error("Maximum nesting depth exceeded")
            logger.debug("parsed %r, rest %r", expr, self.cursor.rest())
        return expr

    def parse_all(self) -> Iterator[Value]:
        """Yield expressions until input runs out. Stops after the first error."""
        while True:
            expr = self.parse_expr()
            if expr is END_OF_INPUT:
                break
            yield expr
            if isinstance(expr, ErrorValue):
                break

    # ------------------------
    # Recursive descent
    # ------------------------
    def _parse(self, depth: int) -> Value | EndOfInputType:
        cursor = self.cursor
        cursor.skip_whitespace()
        if cursor.at_end():
            return END_OF_INPUT

        ch = cursor.peek()
        if ch == "(":
            return self._parse_list(depth + 1)
        if ch in DIGITS or ch == "." or (ch == "-" and cursor.peek(1) in DIGITS):
            return self._parse_number()
        if cursor.startswith("#t"):
            cursor.advance(2)
            return True
        if cursor.startswith("#f"):
            cursor.advance(2)
            return False
        return self._parse_symbol()

    def _parse_list(self, depth: int) -> Value:
        cursor = self.cursor
        if depth > self.max_depth:
            return _syntax_error("Maximum nesting depth exceeded")
        cursor.advance()  # consume '('
        items = PsiList(max_capacity=self.max_list_capacity)

        while True:
            cursor.skip_whitespace()
            if cursor.at_end():
                return _syntax_error("Unexpected EOF, expected ')'")
            if cursor.peek() == ")":
                cursor.advance()
                return items
            item = self._parse(depth)
            if item is END_OF_INPUT:
                return _syntax_error("Invalid expression inside list")
            if isinstance(item, ErrorValue):
                return item
            try:
                items.append(item)
            except PsiCapacityError as ex:
                logger.warning("list literal refused: %s", ex)
                return ErrorValue(CAPACITY_ERROR, "List capacity exceeded")

    def _parse_number(self) -> Value:
        cursor = self.cursor
        match = HEX_NUMBER_RE.match(cursor.text, cursor.pos) or DECIMAL_NUMBER_RE.match(cursor.text, cursor.pos)
        if match is None:
            return _syntax_error("Invalid number format")
        token = match.group(0)
        cursor.advance(len(token))
        if "x" in token or "X" in token:
            return _hex_to_float(token)
        return float(token)

    def _parse_symbol(self) -> Value:
        cursor = self.cursor
        start = end = cursor.pos
        text = cursor.text
        while end < len(text) and text[end] not in SYMBOL_TERMINATORS:
            end += 1
        if end - start > MAX_SYMBOL_LENGTH:
            cursor.advance(MAX_SYMBOL_LENGTH)
            return _syntax_error("Symbol too long")
        if end == start:
            return _syntax_error("Empty symbol or unparsable token")
        cursor.advance(end - start)
        return Symbol(text[start:end])


def parse(cursor: Cursor, **limits) -> Value | EndOfInputType:
    """Read one expression at `cursor` and advance past it."""
    return Parser(cursor, **limits).parse_expr()


def read(text: str, **limits) -> Value | EndOfInputType:
    """Read the first expression of `text`; anything after it is ignored."""
    return parse(Cursor(text), **limits)
