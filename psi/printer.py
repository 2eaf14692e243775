"""Textual rendering of psi values.

The output format is exact: the REPL transcript is made of these strings.
"""

from __future__ import annotations

import math
import sys
from typing import TextIO

from psi.types import ValueType, type_of


FUNCTION_PLACEHOLDER = "<function>"


def format_number(number: float) -> str:
    # Integral values print without a fraction, everything else with 3 digits
    if math.isfinite(number) and float(number).is_integer():
        return str(int(number))
    return "%.3f" % number


def format_value(value) -> str:
    match type_of(value):
        case ValueType.NUMBER:
            return format_number(value)
        case ValueType.BOOL:
            return "#t" if value else "#f"
        case ValueType.SYMBOL:
            return value.id
        case ValueType.LIST:
            return "(" + " ".join(format_value(item) for item in value) + ")"
        case ValueType.ERROR:
            return f"$error{{{value.kind} {value.message}}}"
        case ValueType.FUNCTION:
            return FUNCTION_PLACEHOLDER
    return repr(value)


def print_value(value, stream: TextIO | None = None) -> None:
    """Write the rendering of `value` with no trailing newline."""
    (stream or sys.stdout).write(format_value(value))
