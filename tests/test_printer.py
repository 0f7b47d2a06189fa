"""Tests for lispish.printer."""

import io
import math

import pytest

from lispish.printer import println, render, render_tree
from lispish.values import VErr, VFloat, VInt, VSExpr, VSym


@pytest.mark.parametrize("value,text", [
    (VInt(3), "3"),
    (VInt(-5), "-5"),
    (VFloat(10.0), "10.000000"),
    (VFloat(-2.5), "-2.500000"),
    (VFloat(math.inf), "inf"),
    (VErr("Cannot divide by 0!"), "ERROR: Cannot divide by 0!"),
    (VSym("min"), "min"),
    (VSExpr(), "()"),
])
def test_render(value, text):
    assert render(value) == text

def test_render_nested_sexpr():
    inner = VSExpr().append(VSym("-")).append(VInt(1))
    outer = VSExpr().append(VSym("+")).append(inner).append(VFloat(0.5))
    assert render(outer) == "(+ (- 1) 0.500000)"

def test_render_rejects_foreign_values():
    with pytest.raises(TypeError):
        render(3)

def test_println():
    buf = io.StringIO()
    println(VInt(7), buf)
    assert buf.getvalue() == "7\n"

def test_render_tree():
    value = VSExpr().append(VSym("+")).append(VInt(1)).append(VSExpr())
    assert render_tree(value) == "SExpr\n  Sym +\n  Int 1\n  SExpr ()"

def test_render_tree_leaf():
    assert render_tree(VErr("boom")) == "Err boom"
    assert render_tree(VFloat(1.5)) == "Float 1.500000"
