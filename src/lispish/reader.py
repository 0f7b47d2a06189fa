"""Reader layer: converts a lark syntax tree into a Value tree."""

from __future__ import annotations

import logging
import math
import re

from lark import Token, Tree

from .errors import ERR_INVALID_NUMBER
from .values import Value, VErr, VFloat, VInt, VSExpr, VSym, in_int_range

logger = logging.getLogger(__name__)

_ROOT_TAG = "start"
_PAREN_TEXT = ("(", ")")
_RAW_TAGS = ("regex", "WS")
_NONZERO_DIGIT_RE = re.compile(r"[1-9]")


# ---------------------------------------------------------------------------
# Node accessors
# ---------------------------------------------------------------------------

def node_tag(node: Tree | Token) -> str:
    """Grammar label of *node*: rule name for trees, terminal type for tokens."""
    if isinstance(node, Tree):
        return str(node.data)
    return node.type


def node_text(node: Tree | Token) -> str:
    if isinstance(node, Tree):
        return ""
    return str(node)


def node_children(node: Tree | Token) -> list:
    if isinstance(node, Tree):
        return node.children
    return []


def _is_skipped(node: Tree | Token) -> bool:
    """Parenthesis tokens and raw/whitespace leaves carry no value."""
    if isinstance(node, Tree):
        return False
    return node_text(node) in _PAREN_TEXT or node_tag(node) in _RAW_TAGS


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------

def read_number(text: str) -> Value:
    """Convert numeric literal text to VInt / VFloat.

    Out-of-range magnitudes become ``VErr("invalid number")``.
    """
    if "." in text:
        try:
            x = float(text)
        except ValueError:
            return VErr(ERR_INVALID_NUMBER)
        if math.isinf(x):
            return VErr(ERR_INVALID_NUMBER)
        if x == 0.0 and _NONZERO_DIGIT_RE.search(text):
            # underflow
            return VErr(ERR_INVALID_NUMBER)
        return VFloat(x)

    try:
        n = int(text, 10)
    except ValueError:
        return VErr(ERR_INVALID_NUMBER)
    if not in_int_range(n):
        return VErr(ERR_INVALID_NUMBER)
    return VInt(n)


# ---------------------------------------------------------------------------
# Tree walk
# ---------------------------------------------------------------------------

def read(node: Tree | Token) -> Value:
    """Read one syntax tree node (and its subtree) into a Value."""
    tag = node_tag(node)

    if "number" in tag.lower():
        return read_number(node_text(node))

    if "symbol" in tag.lower():
        return VSym(node_text(node))

    if isinstance(node, Token):
        # Unknown leaf kinds are deferred to the dispatcher as symbols.
        return VSym(node_text(node))

    if tag != _ROOT_TAG and "sexpr" not in tag:
        logger.debug("reading unrecognised node %r as an s-expression", tag)

    sexpr = VSExpr()
    for child in node_children(node):
        if _is_skipped(child):
            continue
        sexpr.append(read(child))
    return sexpr
