"""LispishRepl: line-at-a-time evaluation for interactive or programmatic use.

Also provides the ``lispish`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from . import __version__, config
from .errors import LispishError
from .evaluator import evaluate
from .parser import parse
from .printer import println, render, render_tree
from .reader import read
from .values import Value

logger = logging.getLogger(__name__)

PROMPT = "lispish> "


# ---------------------------------------------------------------------------
# LispishRepl class (programmatic use)
# ---------------------------------------------------------------------------

class LispishRepl:
    """Evaluates one input line at a time.

    No value survives from one call to the next; every line is read and
    evaluated on its own.

    Usage::

        repl = LispishRepl()
        repl.eval("(+ 1 2)")          # → VInt(3)
        repl.eval_text("(/ 10 0)")    # → "ERROR: Cannot divide by 0!"
    """

    def read(self, text: str) -> Value:
        """Parse and read *text* without evaluating it."""
        return read(parse(text))

    def eval(self, text: str) -> Value:
        """Parse, read and evaluate *text*.

        Raises ``LispishSyntaxError`` when *text* is not valid input.
        """
        return evaluate(self.read(text))

    def eval_text(self, text: str) -> str:
        """Evaluate *text* and return the rendered result."""
        return render(self.eval(text))


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _eval_expr(repl: LispishRepl, expr: str, dest: IO[str]) -> None:
    """Evaluate *expr* and print the result (or the syntax error) to *dest*."""
    try:
        println(repl.eval(expr), dest)
    except LispishError as exc:
        logger.info("rejected input %r", expr)
        print(f"<stdin>: error: {exc}", file=dest)


def _read_expr(repl: LispishRepl, expr: str, dest: IO[str]) -> None:
    """Print the unevaluated value tree of *expr* to *dest*."""
    try:
        print(render_tree(repl.read(expr)), file=dest)
    except LispishError as exc:
        print(f"<stdin>: error: {exc}", file=dest)


def _run_file(repl: LispishRepl, filepath: str, dest: IO[str]) -> None:
    try:
        with open(filepath, encoding="utf-8") as fh:
            for file_line in fh:
                _process_line(repl, file_line.rstrip("\n"), dest)
    except OSError as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)


def _redirect(filepath: str, current: IO[str] | None) -> IO[str] | None:
    """Close *current* and open *filepath* for results; an empty path means stdout."""
    if current:
        current.close()
    if not filepath:
        return None
    try:
        return open(filepath, "w", encoding="utf-8")
    except OSError as exc:
        print(f"Error opening '{filepath}': {exc}", file=sys.stderr)
        return None


def _process_line(repl: LispishRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── :read <expr> ──────────────────────────────────────────────────────
    if line == ":read" or line.startswith(":read "):
        _read_expr(repl, line[len(":read"):].strip(), dest)
        return True

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        _run_file(repl, line[4:].strip(), dest)
        return True

    # ── Expression ────────────────────────────────────────────────────────
    _eval_expr(repl, line, dest)
    return True


# ---------------------------------------------------------------------------
# Line editing / history
# ---------------------------------------------------------------------------

def _load_history() -> None:
    try:
        import readline
    except ImportError:
        return
    readline.set_history_length(1000)
    try:
        readline.read_history_file(str(config.get_history_path()))
    except OSError:
        pass


def _save_history() -> None:
    try:
        import readline
    except ImportError:
        return
    try:
        readline.write_history_file(str(config.get_history_path()))
    except OSError as exc:
        logger.warning("could not write history file: %s", exc)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Interactive shell (``lispish`` / ``python -m lispish.repl``)."""
    logging.basicConfig(level=config.get_log_level())

    repl = LispishRepl()
    dest: IO[str] = sys.stdout
    _file: IO[str] | None = None

    print(f"Lispish Version {__version__}")
    print("Press ctrl+c or :q to quit.  (:read <expr>  |  ?<< file  |  ?>> file)\n")

    _load_history()

    while True:
        try:
            line = input(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line:
            continue

        # ── Output redirect: ?>> filepath  /  ?>> ─────────────────────────
        if line == "?>>" or line.startswith("?>> "):
            _file = _redirect(line[3:].strip(), _file)
            dest = _file or sys.stdout
            continue

        if not _process_line(repl, line, dest):
            break

    if _file:
        _file.close()

    _save_history()


if __name__ == "__main__":
    main()
