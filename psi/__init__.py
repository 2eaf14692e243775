# Core data model for the psi interpreter.
# Values are plain Python objects wherever Python already has the right type:
# Numbers are floats and Bools are bools. Symbols, lists, built-in functions
# and errors get small dedicated classes under psi.types.
#
# Naming guidance:
# - Value: any member of the closed union (see psi.types.value).
# - Expression: a Value produced by the reader, before evaluation.
# Both names refer to the same union; evaluation maps Expression -> Value.

from psi.types import (
    END_OF_INPUT,
    ErrorValue,
    Function,
    PsiList,
    Symbol,
    Value,
    ValueType,
    copy_value,
    type_of,
    values_equal,
)
from psi.printer import format_value, print_value
from psi.reader import Cursor, Parser, parse, read
from psi.evaluation import evaluate
from psi.builtins import BUILTINS, lookup_builtin

Expression = Value

__version__ = "0.1.0"

__all__ = [
    "BUILTINS",
    "END_OF_INPUT",
    "Cursor",
    "ErrorValue",
    "Expression",
    "Function",
    "Parser",
    "PsiList",
    "Symbol",
    "Value",
    "ValueType",
    "copy_value",
    "evaluate",
    "format_value",
    "lookup_builtin",
    "parse",
    "print_value",
    "read",
    "type_of",
    "values_equal",
]
