"""Value types for Lispish."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


@dataclass
class VInt:
    value: int


@dataclass
class VFloat:
    value: float


@dataclass
class VErr:
    message: str


@dataclass
class VSym:
    name: str


@dataclass
class VSExpr:
    """Ordered container that exclusively owns its cells."""

    cells: list["Value"] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.cells)

    def append(self, child: "Value") -> "VSExpr":
        self.cells.append(child)
        return self

    def pop(self, index: int) -> "Value":
        """Remove and return the cell at *index*, shifting the rest left."""
        return self.cells.pop(index)

    def take(self, index: int) -> "Value":
        """Return the cell at *index* and discard every other cell."""
        value = self.cells.pop(index)
        self.cells.clear()
        return value

    def discard(self) -> None:
        self.cells.clear()


Value = Union[VInt, VFloat, VErr, VSym, VSExpr]


def is_number(value: Value) -> bool:
    return isinstance(value, (VInt, VFloat))


def in_int_range(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX
