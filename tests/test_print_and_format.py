import io
import math

import pytest

from psi.builtins import add
from psi.printer import format_value, print_value
from psi.types import ErrorValue, Function, PsiList, Symbol


@pytest.mark.parametrize(
    "value, expected",
    [
        (6.0, "6"),
        (-3.0, "-3"),
        (-0.0, "0"),
        (10.0, "10"),
        (1e20, "100000000000000000000"),
        (2.5, "2.500"),
        (-7.5, "-7.500"),
        (1 / 3, "0.333"),
        (2 / 3, "0.667"),
        (7 / 3, "2.333"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "nan"),
        (True, "#t"),
        (False, "#f"),
        (Symbol("quitting"), "quitting"),
        (PsiList(), "()"),
        (PsiList([1.0, PsiList([True, Symbol("x")])]), "(1 (#t x))"),
        (ErrorValue("TypeError", "Arguments to + must be numbers"),
         "$error{TypeError Arguments to + must be numbers}"),
        (Function("+", add), "<function>"),
        (PsiList([Function("+", add), 0.5]), "(<function> 0.500)"),
    ]
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_print_value_has_no_trailing_newline():
    out = io.StringIO()
    print_value(PsiList([1.0, 2.0]), out)
    print_value(True, out)
    assert out.getvalue() == "(1 2)#t"


def test_print_value_defaults_to_stdout(capsys):
    print_value(ErrorValue("UnboundError", "Symbol not bound to a function"))
    assert capsys.readouterr().out == "$error{UnboundError Symbol not bound to a function}"
