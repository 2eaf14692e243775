from psi.types.symbol import Symbol
from psi.types.psi_list import PsiList
from psi.types.function import Function, BuiltinFn
from psi.types.error_value import ErrorValue
from psi.types.end_of_input import END_OF_INPUT, EndOfInputType
from psi.types.value import Value, ValueType, type_of, is_number, copy_value, values_equal

__all__ = [
    "BuiltinFn",
    "END_OF_INPUT",
    "EndOfInputType",
    "ErrorValue",
    "Function",
    "PsiList",
    "Symbol",
    "Value",
    "ValueType",
    "copy_value",
    "is_number",
    "type_of",
    "values_equal",
]
