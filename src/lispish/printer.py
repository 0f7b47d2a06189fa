"""Printer: canonical text for values."""

from __future__ import annotations

import sys
from typing import IO

from .values import Value, VErr, VFloat, VInt, VSExpr, VSym


def render(value: Value) -> str:
    """Render *value* the way the REPL prints it."""
    if isinstance(value, VInt):
        return str(value.value)
    if isinstance(value, VFloat):
        return f"{value.value:f}"
    if isinstance(value, VErr):
        return f"ERROR: {value.message}"
    if isinstance(value, VSym):
        return value.name
    if isinstance(value, VSExpr):
        return "(" + " ".join(render(cell) for cell in value.cells) + ")"
    raise TypeError(f"not a Lispish value: {value!r}")


def println(value: Value, dest: IO[str] | None = None) -> None:
    print(render(value), file=dest if dest is not None else sys.stdout)


def render_tree(value: Value, indent: int = 0) -> str:
    """Indented view of *value*, one node per line, labelled by variant.

    Example::

        SExpr
          Sym +
          Int 1
          Float 2.500000
    """
    pad = "  " * indent
    if isinstance(value, VSExpr):
        if not value.cells:
            return f"{pad}SExpr ()"
        lines = [f"{pad}SExpr"]
        lines.extend(render_tree(cell, indent + 1) for cell in value.cells)
        return "\n".join(lines)
    if isinstance(value, VInt):
        return f"{pad}Int {render(value)}"
    if isinstance(value, VFloat):
        return f"{pad}Float {render(value)}"
    if isinstance(value, VErr):
        return f"{pad}Err {value.message}"
    if isinstance(value, VSym):
        return f"{pad}Sym {value.name}"
    raise TypeError(f"not a Lispish value: {value!r}")
