from __future__ import annotations
from typing import Sequence

from psi.types import ErrorValue, Function, Symbol, Value, ValueType, type_of, is_number
from psi.types.function import BuiltinFn
from psi.errors import ARITY_ERROR, TYPE_ERROR, DIVISION_BY_ZERO_ERROR

# Absolute tolerance used by '=' on numbers
NUMBER_TOLERANCE = 1e-10

QUIT_SENTINEL = "quitting"


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: Sequence[Value]) -> Value:
    total = 0.0
    for arg in args:
        if not is_number(arg):
            return ErrorValue(TYPE_ERROR, "Arguments to + must be numbers")
        total += arg
    return total

def sub(args: Sequence[Value]) -> Value:
    if not args:
        return ErrorValue(ARITY_ERROR, "'-' requires at least one argument")
    if not is_number(args[0]):
        return ErrorValue(TYPE_ERROR, "First argument to - must be a number")
    if len(args) == 1:
        return -float(args[0])
    if len(args) == 2:
        if not is_number(args[1]):
            return ErrorValue(TYPE_ERROR, "Second argument to - must be a number")
        return float(args[0] - args[1])
    return ErrorValue(ARITY_ERROR, "'-' currently supports 1 or 2 arguments")

def mul(args: Sequence[Value]) -> Value:
    product = 1.0
    for arg in args:
        if not is_number(arg):
            return ErrorValue(TYPE_ERROR, "Arguments to * must be numbers")
        product *= arg
    return product

def div(args: Sequence[Value]) -> Value:
    if len(args) != 2:
        return ErrorValue(ARITY_ERROR, "'/' requires exactly 2 arguments")
    dividend, divisor = args
    if not is_number(dividend) or not is_number(divisor):
        return ErrorValue(TYPE_ERROR, "Arguments to / must be numbers")
    if divisor == 0.0:
        return ErrorValue(DIVISION_BY_ZERO_ERROR, "Division by zero")
    return dividend / divisor

# -------------------------------
# Equality
# -------------------------------
def equals(args: Sequence[Value]) -> Value:
    if len(args) != 2:
        return ErrorValue(ARITY_ERROR, "'=' requires exactly 2 arguments")
    first, second = args
    tag = type_of(first)
    if tag != type_of(second):
        return False
    if tag == ValueType.NUMBER:
        return abs(first - second) < NUMBER_TOLERANCE
    if tag in (ValueType.BOOL, ValueType.SYMBOL):
        return first == second
    return ErrorValue(TYPE_ERROR, "Unsupported types for equality comparison")

# -------------------------------
# Session control
# -------------------------------
def quit_(args: Sequence[Value]) -> Value:
    if args:
        return ErrorValue(ARITY_ERROR, "quit takes no arguments")
    return Symbol(QUIT_SENTINEL)

def is_quit_signal(value: object) -> bool:
    return isinstance(value, Symbol) and value.id == QUIT_SENTINEL

# -------------------------------
# Table
# -------------------------------
# Scanned front to back; the first entry with a matching name wins.
BUILTINS: tuple[tuple[str, BuiltinFn], ...] = (
    ("+", add),
    ("-", sub),
    ("*", mul),
    ("/", div),
    ("=", equals),
    ("quit", quit_),
)

# Usage strings for editor tooling
BUILTIN_SIGNATURES: dict[str, str] = {
    "+": "(+ &rest nums)",
    "-": "(- x &optional y)",
    "*": "(* &rest nums)",
    "/": "(/ x y)",
    "=": "(= a b)",
    "quit": "(quit)",
}


def lookup_builtin(
    name: str, table: Sequence[tuple[str, BuiltinFn]] = BUILTINS
) -> Function | None:
    for entry_name, fn in table:
        if entry_name == name:
            return Function(entry_name, fn)
    return None
