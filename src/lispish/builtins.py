"""Operator dispatcher: folds a built-in operator over evaluated operands."""

from __future__ import annotations

import logging
import math

from .errors import ERR_DIV_ZERO, ERR_INVALID_OP, ERR_NOT_A_NUMBER, ERR_OVERFLOW
from .values import Value, VErr, VFloat, VInt, VSExpr, in_int_range, is_number

logger = logging.getLogger(__name__)

ADD = "+"
SUB = "-"
MUL = "*"
DIV = "/"
MOD = "%"
POW = "^"
MIN = "min"
MAX = "max"

OPERATORS = frozenset({ADD, SUB, MUL, DIV, MOD, POW, MIN, MAX})

# Word spellings accepted by the grammar's infix form.
ALIASES = {
    "add": ADD,
    "sub": SUB,
    "mul": MUL,
    "div": DIV,
    "mod": MOD,
}


def resolve_op(name: str) -> str | None:
    """Canonical operator for *name*, or None when it is not a builtin."""
    name = ALIASES.get(name, name)
    return name if name in OPERATORS else None


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def apply_op(name: str, operands: VSExpr) -> Value:
    """Apply operator *name* to the cells of *operands*, left to right.

    *operands* is consumed: on return it is empty whatever the outcome.
    """
    for cell in operands:
        if not is_number(cell):
            operands.discard()
            return VErr(ERR_NOT_A_NUMBER)

    op = resolve_op(name)
    if op is None:
        logger.debug("unknown operator %r", name)
        operands.discard()
        return VErr(ERR_INVALID_OP)

    acc = operands.pop(0)

    if op == SUB and len(operands) == 0:
        return _negate(acc)

    while len(operands) > 0:
        rhs = operands.pop(0)
        acc = combine(op, acc, rhs)
        if isinstance(acc, VErr):
            operands.discard()
            break

    return acc


def combine(op: str, lhs: Value, rhs: Value) -> Value:
    """Combine one pair; a float on either side promotes the pair to float."""
    if isinstance(lhs, VFloat) or isinstance(rhs, VFloat):
        return float_op(op, float(lhs.value), float(rhs.value))
    return int_op(op, lhs.value, rhs.value)


def _negate(value: Value) -> Value:
    if isinstance(value, VFloat):
        value.value = -value.value
        return value
    if not in_int_range(-value.value):
        return VErr(ERR_OVERFLOW)
    value.value = -value.value
    return value


# ---------------------------------------------------------------------------
# Floating point
# ---------------------------------------------------------------------------

def float_op(op: str, x: float, y: float) -> Value:
    if op == ADD:
        return VFloat(x + y)
    if op == SUB:
        return VFloat(x - y)
    if op == MUL:
        return VFloat(x * y)
    if op == DIV:
        if y == 0:
            return VErr(ERR_DIV_ZERO)
        return VFloat(x / y)
    if op == POW:
        return VFloat(float_pow(x, y))
    if op == MIN:
        return VFloat(x if x < y else y)
    if op == MAX:
        return VFloat(x if x > y else y)
    # MOD is integer only
    return VErr(ERR_INVALID_OP)


def float_pow(x: float, y: float) -> float:
    """``x ** y`` with IEEE results instead of Python exceptions."""
    try:
        return math.pow(x, y)
    except OverflowError:
        odd_exponent = y.is_integer() and int(y) % 2 == 1
        return math.copysign(math.inf, x) if odd_exponent else math.inf
    except ValueError:
        # 0 to a negative power, or a negative base to a fractional power
        return math.inf if x == 0 else math.nan


# ---------------------------------------------------------------------------
# Integer
# ---------------------------------------------------------------------------

def int_op(op: str, x: int, y: int) -> Value:
    if op == ADD:
        return _checked(x + y)
    if op == SUB:
        return _checked(x - y)
    if op == MUL:
        return _checked(x * y)
    if op == DIV:
        if y == 0:
            return VErr(ERR_DIV_ZERO)
        return _checked(trunc_div(x, y))
    if op == MOD:
        if y == 0:
            return VErr(ERR_DIV_ZERO)
        return VInt(trunc_mod(x, y))
    if op == POW:
        if x == 0 and y < 0:
            return VErr(ERR_DIV_ZERO)
        result = float_pow(float(x), float(y))
        if not math.isfinite(result):
            return VErr(ERR_OVERFLOW)
        return _checked(int(result))
    if op == MIN:
        return VInt(x if x < y else y)
    if op == MAX:
        return VInt(x if x > y else y)
    return VErr(ERR_INVALID_OP)


def trunc_div(x: int, y: int) -> int:
    """Integer quotient rounded toward zero."""
    q = abs(x) // abs(y)
    return -q if (x < 0) != (y < 0) else q


def trunc_mod(x: int, y: int) -> int:
    """Remainder carrying the sign of the dividend."""
    r = abs(x) % abs(y)
    return -r if x < 0 else r


def _checked(n: int) -> Value:
    return VInt(n) if in_int_range(n) else VErr(ERR_OVERFLOW)
