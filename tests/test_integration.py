"""End-to-end tests: text in, rendered text out."""

import pytest

from lispish import LispishRepl, evaluate, parse, read, render
from lispish.values import VFloat, VInt


def _out(text):
    return LispishRepl().eval_text(text)


@pytest.mark.parametrize("source,expected", [
    ("(+ 1 2)", "3"),
    ("(- 5)", "-5"),
    ("(/ 10 0)", "ERROR: Cannot divide by 0!"),
    ("(min 3 7 1)", "1"),
    ("(* 2.5 4)", "10.000000"),
    ("(foo 1 2)", "ERROR: Given an invalid op!"),
])
def test_scenarios(source, expected):
    assert _out(source) == expected


@pytest.mark.parametrize("source,expected", [
    ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
    ("(- 10 3 2)", "5"),
    ("(- 2.5)", "-2.500000"),
    ("(^ 2 10)", "1024"),
    ("(^ 2.0 0.5)", "1.414214"),
    ("(% 10 3)", "1"),
    ("(max 1.5 3)", "3.000000"),
    ("(+ 1 2.5)", "3.500000"),
    ("(add 1 (mul 2 3))", "7"),
    ("(/ 1 0 (+ 1 2))", "ERROR: Cannot divide by 0!"),
    ("(+ 1 (+))", "ERROR: Expected a number to operate on!"),
    ("(% 5.0 2)", "ERROR: Given an invalid op!"),
    ("(1 2 3)", "ERROR: S-Expression did not start with a symbol!"),
    ("(+ 9223372036854775807 1)", "ERROR: Integer overflow!"),
    ("9223372036854775808", "ERROR: invalid number"),
    ("(^ 0.0 -1)", "inf"),
    ("()", "()"),
    ("", "()"),
    ("(+)", "+"),
    ("(((7)))", "7"),
])
def test_expressions(source, expected):
    assert _out(source) == expected


@pytest.mark.parametrize("literal", ["0", "42", "-17", "9223372036854775807"])
def test_int_literal_roundtrip(literal):
    value = evaluate(read(parse(literal)))
    assert value == VInt(int(literal))
    assert render(value) == literal


@pytest.mark.parametrize("literal,text", [("1.5", "1.500000"), ("-0.25", "-0.250000"), ("3.0", "3.000000")])
def test_float_literal_roundtrip(literal, text):
    value = evaluate(read(parse(literal)))
    assert value == VFloat(float(literal))
    assert render(value) == text


def test_division_by_zero_ignores_remaining_operands():
    assert _out("(/ 8 2 0)") == "ERROR: Cannot divide by 0!"
    assert _out("(/ 8 2 0 5 6)") == "ERROR: Cannot divide by 0!"
    assert _out("(/ 8 0 (+ 1 0.5))") == "ERROR: Cannot divide by 0!"
