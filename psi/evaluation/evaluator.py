"""Core evaluator for the psi interpreter.

Reduces a parsed expression to a value:
- literals and errors evaluate to copies of themselves,
- symbols resolve against the built-in table,
- non-empty lists are applications: every element is evaluated left to
  right, the head must be a Function and the rest become its arguments.

Errors are values. The first error met while evaluating a list stops the
evaluation of that list and a copy of it becomes the result. Nothing here
raises for well-formed input, and the input tree is never mutated or shared
with the result.
"""

from __future__ import annotations

import logging
from typing import Sequence

from psi.builtins import BUILTINS, lookup_builtin
from psi.errors import (
    EVAL_ERROR,
    INAPPLICABLE_HEAD_ERROR,
    MEMORY_ERROR,
    UNBOUND_ERROR,
)
from psi.recursion import DEFAULT_MAX_DEPTH, recursion_headroom
from psi.types import ErrorValue, Function, PsiList, Value, ValueType, copy_value, type_of
from psi.types.function import BuiltinFn

logger = logging.getLogger(__name__)

BuiltinTable = Sequence[tuple[str, BuiltinFn]]


def evaluate(
    expr: Value,
    table: BuiltinTable = BUILTINS,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Value:
    """Evaluate `expr` and return a new value."""
    with recursion_headroom(max_depth):
        try:
            result = evaluate0(expr, table, max_depth, 0)
        except MemoryError:
            return ErrorValue(MEMORY_ERROR, "Failed to allocate during evaluation")
        except RecursionError:
            logger.warning("evaluator ran out of stack below depth %d", max_depth)
            return ErrorValue(EVAL_ERROR, "Maximum evaluation depth exceeded")
        logger.debug("evaluated %r -> %r", expr, result)
    return result


def evaluate0(expr: Value, table: BuiltinTable, max_depth: int, depth: int) -> Value:
    """Single step of the recursive evaluator."""
    match type_of(expr):
        case ValueType.NUMBER | ValueType.BOOL | ValueType.ERROR | ValueType.FUNCTION:
            return copy_value(expr)

        case ValueType.SYMBOL:
            fn = lookup_builtin(expr.id, table)
            if fn is None:
                return ErrorValue(UNBOUND_ERROR, "Symbol not bound to a function")
            return fn

        case ValueType.LIST:
            if not expr:
                return PsiList()
            if depth >= max_depth:
                return ErrorValue(EVAL_ERROR, "Maximum evaluation depth exceeded")
            return _apply_list(expr, table, max_depth, depth + 1)

    return ErrorValue(EVAL_ERROR, "Unsupported pval type for evaluation")


def _apply_list(expr, table: BuiltinTable, max_depth: int, depth: int) -> Value:
    evaluated: list[Value] = []
    for item in expr:
        value = evaluate0(item, table, max_depth, depth)
        if isinstance(value, ErrorValue):
            return copy_value(value)
        evaluated.append(value)

    head, args = evaluated[0], evaluated[1:]
    if not isinstance(head, Function):
        return ErrorValue(INAPPLICABLE_HEAD_ERROR, "Expression head is not a function")
    return _call_builtin(head, args)


def _call_builtin(head: Function, args: list[Value]) -> Value:
    try:
        result = head(args)
    except MemoryError:
        raise
    except Exception as ex:
        # Built-ins report failures as values; an exception is a bug in one
        logger.warning("built-in %s raised %r", head.name, ex, exc_info=True)
        return ErrorValue(EVAL_ERROR, f"Built-in {head.name} failed: {ex}")
    if type_of(result) is None:
        logger.warning("built-in %s returned a non-value %r", head.name, result)
        return ErrorValue(EVAL_ERROR, "Null evaluation result")
    return result
