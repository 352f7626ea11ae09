"""Integer matrices with addition, multiplication, transposition and parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

TEMP_NAME = "!"

_DIMENSIONS = re.compile(r"\s*(\d+)\s+(\d+)")
_INTEGER = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Matrix:
    """A named matrix of integers stored in row-major order."""

    num_rows: int
    num_cols: int
    values: tuple[int, ...]
    name: str = TEMP_NAME

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(int(v) for v in self.values))
        if self.num_rows < 0 or self.num_cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        if len(self.values) != self.num_rows * self.num_cols:
            raise ValueError(
                f"expected {self.num_rows * self.num_cols} values for a "
                f"{self.num_rows}x{self.num_cols} matrix, got {len(self.values)}"
            )

    @property
    def shape(self) -> tuple[int, int]:
        return self.num_rows, self.num_cols

    def rows(self) -> list[tuple[int, ...]]:
        """Return the rows of the matrix as tuples."""
        c = self.num_cols
        return [self.values[i * c:(i + 1) * c] for i in range(self.num_rows)]

    def columns(self) -> list[tuple[int, ...]]:
        """Return the columns of the matrix as tuples."""
        return [self.values[j::self.num_cols] for j in range(self.num_cols)]

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError(f"cannot add {self.shape} and {other.shape} matrices")
        return Matrix(
            self.num_rows,
            self.num_cols,
            tuple(a + b for a, b in zip(self.values, other.values)),
        )

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.num_cols != other.num_rows:
            raise ValueError(f"cannot multiply {self.shape} and {other.shape} matrices")
        columns = other.columns()
        return Matrix(
            self.num_rows,
            other.num_cols,
            tuple(
                sum(a * b for a, b in zip(row, column))
                for row in self.rows()
                for column in columns
            ),
        )

    def transpose(self) -> Matrix:
        """Return the transpose as a new, temporarily named matrix."""
        return Matrix(
            self.num_cols,
            self.num_rows,
            tuple(v for column in self.columns() for v in column),
        )

    def renamed(self, name: str) -> Matrix:
        """Return a copy of the matrix carrying another name."""
        return replace(self, name=name)

    def format(self) -> str:
        """Return the dimensions followed by the values, separated by spaces."""
        return f"{self.num_rows} {self.num_cols} " + " ".join(map(str, self.values))


def parse_matrix(name: str, expr: str) -> Matrix:
    """Parse a definition such as ``"2 2 [1 2 ; 3 4 ;]"`` into a matrix."""
    match = _DIMENSIONS.match(expr)
    if match is None:
        raise ValueError(f"missing matrix dimensions in {expr!r}")
    num_rows, num_cols = (int(group) for group in match.groups())
    start = expr.find("[", match.end())
    if start < 0:
        raise ValueError(f"missing '[' in {expr!r}")
    end = expr.find("]", start)
    body = expr[start + 1:] if end < 0 else expr[start + 1:end]
    total = num_rows * num_cols
    numbers = _INTEGER.findall(body)
    if len(numbers) < total:
        raise ValueError(f"expected {total} values, found {len(numbers)} in {expr!r}")
    return Matrix(num_rows, num_cols, tuple(int(n) for n in numbers[:total]), name)