import contextlib
import math

import pytest
from hypothesis import given, strategies as st

import psi.reader.parser
from psi.printer import format_value
from psi.reader import Cursor, Parser, parse, read
from psi.types import END_OF_INPUT, ErrorValue, PsiList, Symbol, values_equal


def _syntax(message):
    return ErrorValue("SyntaxError", message)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("42", 42.0),
        ("-7", -7.0),
        ("3.14", 3.14),
        (".5", 0.5),
        ("1.", 1.0),
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
        ("0x1A", 26.0),
        ("0x1.8p1", 3.0),
        ("#t", True),
        ("#f", False),
        ("foo", Symbol("foo")),
        ("+", Symbol("+")),
        ("-", Symbol("-")),
        ("-x", Symbol("-x")),
        ("-.5", Symbol("-.5")),
        ("#x", Symbol("#x")),
        ("a\u00a0b", Symbol("a\u00a0b")),  # only ASCII whitespace separates tokens
        ("٣", Symbol("٣")),      # non-ASCII digits are not numbers
        ("()", PsiList()),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("( a   b )", [Symbol("a"), Symbol("b")]),
        ("\t(1\n2)\v", [1.0, 2.0]),
        ("(#t#f)", [True, False]),
        ("(1abc)", [1.0, Symbol("abc")]),
        ("(1.2.3)", [1.2, 0.3]),
        ("(0x)", [0.0, Symbol("x")]),
        ("(1e)", [1.0, Symbol("e")]),
    ]
)
def test_parser(source, expected):
    result = read(source)
    assert values_equal(result, expected), f"{source!r} read as {result!r}"


def test_nested_lists():
    assert read("(+ 1 (* 2 3))") == [Symbol("+"), 1.0, [Symbol("*"), 2.0, 3.0]]
    assert read("((a b) (c d))") == [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]


def test_parsed_lists_are_psi_lists():
    result = read("(1 (2))")
    assert isinstance(result, PsiList)
    assert isinstance(result[1], PsiList)


def test_bool_is_not_number():
    assert not values_equal(read("(#t)"), [1.0])


@pytest.mark.parametrize("source", ["1e999", "0x1p99999"])
def test_number_overflow_saturates(source):
    assert read(source) == math.inf


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(1 2", _syntax("Unexpected EOF, expected ')'")),
        ("(", _syntax("Unexpected EOF, expected ')'")),
        ("(a (b", _syntax("Unexpected EOF, expected ')'")),
        (")", _syntax("Empty symbol or unparsable token")),
        (".", _syntax("Invalid number format")),
        ("(. 1)", _syntax("Invalid number format")),
        ("(1 (2 .x) 3)", _syntax("Invalid number format")),
        ("a" * 256, _syntax("Symbol too long")),
        ("(x " + "a" * 300 + ")", _syntax("Symbol too long")),
    ]
)
def test_syntax_errors(source, expected):
    assert read(source) == expected


@pytest.mark.parametrize("source", ["", "   ", "\t\n\r\f\v"])
def test_end_of_input(source):
    assert read(source) is END_OF_INPUT


def test_symbol_length_boundary():
    assert read("a" * 255) == Symbol("a" * 255)
    assert read("a" * 256) == _syntax("Symbol too long")


def test_cursor_advances_past_expression():
    cursor = Cursor("(+ 1 2) rest")
    assert parse(cursor) == [Symbol("+"), 1.0, 2.0]
    assert cursor.rest() == " rest"


def test_cursor_after_bool_consumes_two_characters():
    cursor = Cursor("#tx")
    assert parse(cursor) is True
    assert cursor.rest() == "x"


def test_cursor_after_number_stops_where_strtod_would():
    cursor = Cursor("12.5e+2x")
    assert parse(cursor) == 1250.0
    assert cursor.rest() == "x"


def test_invalid_number_does_not_move_cursor():
    cursor = Cursor(".x")
    assert parse(cursor) == _syntax("Invalid number format")
    assert cursor.pos == 0


def test_parse_all():
    assert list(Parser("1 #t foo (a)").parse_all()) == [
        1.0, True, Symbol("foo"), PsiList([Symbol("a")])
    ]


def test_parse_all_stops_after_error():
    exprs = list(Parser("1 . 2").parse_all())
    assert exprs == [1.0, _syntax("Invalid number format")]


def test_nesting_depth_limit():
    source = "(((1)))"
    assert read(source, max_depth=3) == [[[1.0]]]
    assert read(source, max_depth=2) == _syntax("Maximum nesting depth exceeded")


def test_default_depth_limit_admits_a_full_line_of_nesting():
    source = "(" * 511 + ")" * 511
    parsed = read(source)
    for _ in range(510):
        assert len(parsed) == 1
        parsed = parsed[0]
    assert parsed == []


def test_default_depth_limit_does_not_blow_the_stack():
    source = "(" * 600 + ")" * 600
    assert read(source) == _syntax("Maximum nesting depth exceeded")


def test_running_out_of_stack_is_a_syntax_error(monkeypatch):
    monkeypatch.setattr(psi.reader.parser, "recursion_headroom", lambda depth: contextlib.nullcontext())
    source = "(" * 5000 + ")" * 5000
    assert read(source, max_depth=10_000) == _syntax("Maximum nesting depth exceeded")


def test_list_capacity_exceeded_is_an_error_value():
    source = "(1 2 3 4 5)"
    assert read(source, max_list_capacity=8) == [1.0, 2.0, 3.0, 4.0, 5.0]
    assert read(source, max_list_capacity=4) == ErrorValue("CapacityError", "List capacity exceeded")


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.text(
    st.sampled_from("abcdefghijklmnopqrstuvwxyzABCXYZ+*/=<>!?_"),
    min_size=1, max_size=20,
).map(Symbol)

number_strat = st.integers(min_value=-10**6, max_value=10**6).map(float)

atom_strat = st.one_of(symbol_strat, number_strat, st.booleans())

tree_strat = st.recursive(
    atom_strat,
    lambda children: st.lists(children, max_size=5).map(PsiList),
    max_leaves=25,
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(tree_strat)
def test_printed_form_reads_back(value):
    assert values_equal(read(format_value(value)), value)


@given(st.text(max_size=200))
def test_parser_is_total(source):
    cursor = Cursor(source)
    result = parse(cursor)
    assert result is END_OF_INPUT or values_equal(result, result)
    assert 0 <= cursor.pos <= len(source)


@given(st.text(alphabet="()ab1.-# \t#tf", max_size=60))
def test_parser_is_deterministic(source):
    assert values_equal(read(source), read(source)) or read(source) is END_OF_INPUT
