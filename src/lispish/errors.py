"""Error messages carried by VErr values, and exceptions for the outer surface."""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Runtime error messages (language level, never raised)
# ---------------------------------------------------------------------------

ERR_INVALID_NUMBER = "invalid number"
ERR_NOT_A_NUMBER = "Expected a number to operate on!"
ERR_DIV_ZERO = "Cannot divide by 0!"
ERR_INVALID_OP = "Given an invalid op!"
ERR_NO_SYMBOL = "S-Expression did not start with a symbol!"
ERR_OVERFLOW = "Integer overflow!"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class LispishError(Exception):
    """Base class for all Lispish errors."""


class LispishSyntaxError(LispishError):
    """Raised when input text cannot be turned into a syntax tree."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.line = line
        self.column = column
