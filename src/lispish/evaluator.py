"""Evaluator: eager, innermost-first reduction of a Value tree."""

from __future__ import annotations

import logging

from .builtins import apply_op
from .errors import ERR_NO_SYMBOL
from .values import Value, VErr, VSExpr, VSym

logger = logging.getLogger(__name__)


def evaluate(value: Value) -> Value:
    """Reduce *value*; anything other than an s-expression is returned as is."""
    if isinstance(value, VSExpr):
        return eval_sexpr(value)
    return value


def eval_sexpr(sexpr: VSExpr) -> Value:
    """Evaluate an s-expression in place and return its single result.

    *sexpr* is consumed unless it is returned unchanged (the empty case).
    """
    for i, cell in enumerate(sexpr.cells):
        sexpr.cells[i] = evaluate(cell)

    # First error wins; its siblings are dropped.
    for i, cell in enumerate(sexpr.cells):
        if isinstance(cell, VErr):
            logger.debug("propagating error: %s", cell.message)
            return sexpr.take(i)

    if len(sexpr) == 0:
        return sexpr

    if len(sexpr) == 1:
        return sexpr.take(0)

    head = sexpr.pop(0)
    if not isinstance(head, VSym):
        sexpr.discard()
        return VErr(ERR_NO_SYMBOL)

    logger.debug("applying %r to %d operand(s)", head.name, len(sexpr))
    return apply_op(head.name, sexpr)
