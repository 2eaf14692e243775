"""The closed union of psi values and the operations every tag supports.

- Number   -> float (int accepted from API callers; bool is never a Number)
- Bool     -> bool
- Symbol   -> Symbol
- List     -> PsiList (plain Python lists are read as lists too)
- Function -> Function
- Error    -> ErrorValue
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from psi.types.error_value import ErrorValue
from psi.types.function import Function
from psi.types.psi_list import PsiList, DEFAULT_MAX_CAPACITY
from psi.types.symbol import Symbol


Value = Union[float, bool, Symbol, PsiList, Function, ErrorValue]


class ValueType(Enum):
    NUMBER = "number"
    BOOL = "bool"
    SYMBOL = "symbol"
    LIST = "list"
    FUNCTION = "function"
    ERROR = "error"


def is_number(value: object) -> bool:
    # bool subclasses int, so it has to be excluded explicitly
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def type_of(value: object) -> ValueType | None:
    """Return the tag of `value`, or None if it is not a psi value."""
    if isinstance(value, bool):
        return ValueType.BOOL
    if is_number(value):
        return ValueType.NUMBER
    if isinstance(value, Symbol):
        return ValueType.SYMBOL
    if isinstance(value, (PsiList, list)):
        return ValueType.LIST
    if isinstance(value, Function):
        return ValueType.FUNCTION
    if isinstance(value, ErrorValue):
        return ValueType.ERROR
    return None


def copy_value(value: Value) -> Value:
    """Structural copy: composite values come back as new objects."""
    match type_of(value):
        case ValueType.NUMBER:
            return float(value)
        case ValueType.LIST:
            if isinstance(value, PsiList):
                limit = value.max_capacity
            else:
                limit = max(DEFAULT_MAX_CAPACITY, 2 * len(value))
            return PsiList((copy_value(item) for item in value), max_capacity=limit)
        case ValueType.ERROR:
            return ErrorValue(value.kind, value.message)
        case ValueType.FUNCTION:
            return Function(value.name, value.fn)
        case ValueType.SYMBOL:
            return Symbol(value.id)
    return value


def values_equal(a: object, b: object) -> bool:
    """Structural equality that also compares tags."""
    tag = type_of(a)
    if tag is None or tag != type_of(b):
        return False
    if tag == ValueType.LIST:
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    if tag == ValueType.NUMBER:
        # nan is still "the same number" structurally
        return a == b or (a != a and b != b)
    return a == b
