"""Grammar and parse entry point.

The parser produces a lark syntax tree that the Reader walks:

- the root is a ``Tree`` labelled ``start``
- parenthesized forms are ``Tree`` nodes labelled ``sexpr``; their ``(`` and
  ``)`` tokens are kept in ``children``
- literals are ``Token`` leaves of type ``NUMBER`` or ``SYMBOL``
"""

from __future__ import annotations

import logging

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput

from . import config
from .errors import LispishSyntaxError

logger = logging.getLogger(__name__)


GRAMMAR = r"""
    start: expr*

    ?expr: NUMBER
         | SYMBOL
         | sexpr

    sexpr: "(" expr* ")"

    NUMBER.2: /-?[0-9]+(?:\.[0-9]+)?/
    SYMBOL: /[+\-*\/%^]/
          | /[A-Za-z_][A-Za-z0-9_]*/

    %import common.WS
    %ignore WS
"""

_parser = Lark(GRAMMAR, parser="lalr", keep_all_tokens=True)


def parse(text: str, max_depth: int | None = None) -> Tree:
    """Parse *text* into a syntax tree.

    Raises ``LispishSyntaxError`` when the text does not match the grammar or
    nests deeper than *max_depth* (``config.get_max_depth()`` by default).
    The limit never exceeds ``config.max_safe_depth()``.
    """
    try:
        tree = _parser.parse(text)
    except UnexpectedInput as exc:
        line = exc.line if exc.line and exc.line > 0 else None
        column = exc.column if exc.column and exc.column > 0 else None
        if line is None:
            message = "unexpected end of input"
        else:
            message = f"unexpected input at line {line}, column {column}\n{exc.get_context(text)}"
        logger.debug("rejected input %r: %s", text, message)
        raise LispishSyntaxError(message, line, column) from exc

    limit = config.get_max_depth() if max_depth is None else min(max_depth, config.max_safe_depth())
    depth = tree_depth(tree)
    if depth > limit:
        raise LispishSyntaxError(f"expression nested too deeply ({depth} > {limit})")
    return tree


def tree_depth(tree: Tree) -> int:
    """Number of nested ``sexpr`` levels below *tree* (iterative)."""
    deepest = 0
    stack = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        for child in node.children:
            if isinstance(child, Tree):
                stack.append((child, depth + 1))
    return deepest
