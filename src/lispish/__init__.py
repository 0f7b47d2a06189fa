"""Lispish: s-expression arithmetic interpreter."""

__version__ = "0.1.0"

from .errors import LispishError, LispishSyntaxError
from .evaluator import evaluate, eval_sexpr
from .builtins import apply_op
from .parser import parse
from .printer import render, render_tree
from .reader import read, read_number
from .values import (
    INT_MAX,
    INT_MIN,
    Value,
    VErr,
    VFloat,
    VInt,
    VSExpr,
    VSym,
)
from .repl import LispishRepl

__all__ = [
    "__version__",
    "parse",
    "read",
    "read_number",
    "evaluate",
    "eval_sexpr",
    "apply_op",
    "render",
    "render_tree",
    "Value",
    "VInt",
    "VFloat",
    "VErr",
    "VSym",
    "VSExpr",
    "INT_MIN",
    "INT_MAX",
    "LispishError",
    "LispishSyntaxError",
    "LispishRepl",
]
