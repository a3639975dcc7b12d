"""Dense real matrices with row operations, products and conversions."""

from __future__ import annotations

import math
from enum import IntEnum
from numbers import Real
from typing import Iterable, Iterator

from linalgkit.vector import DimensionError, Vector

_ZERO_APPROX = 1e-13


class Orientation(IntEnum):
    """Whether vectors are read as the rows or the columns of a matrix."""

    ROW = 0
    COLUMN = 1


class Matrix:
    """A mutable matrix of floats with positive dimensions."""

    __slots__ = ("_rows",)
    __hash__ = None  # mutable

    def __init__(self, rows: Iterable[Iterable[float]]) -> None:
        data = [[float(value) for value in row] for row in rows]
        if not data or not data[0]:
            raise DimensionError("Improper matrix dimensions.")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise DimensionError("Improper matrix dimensions.")
        self._rows = data

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "Matrix":
        """Return a rows x columns matrix filled with zeros."""
        if rows <= 0 or columns <= 0:
            raise DimensionError("Improper matrix dimensions.")
        return cls([[0.0] * columns for _ in range(rows)])

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        """Return the size x size identity matrix."""
        if size <= 0:
            raise DimensionError("Improper matrix dimensions.")
        return cls(
            [[1.0 if i == j else 0.0 for j in range(size)] for i in range(size)]
        )

    @classmethod
    def from_vectors(
        cls, vectors: Iterable[Vector], orientation: Orientation
    ) -> "Matrix":
        """Build a matrix whose rows or columns are the given vectors."""
        vectors = list(vectors)
        if not vectors:
            raise DimensionError("Improper array length.")
        dimension = len(vectors[0])
        if any(len(vector) != dimension for vector in vectors):
            raise DimensionError("Matrix dimensions differ.")
        rows = [list(vector) for vector in vectors]
        if Orientation(orientation) is Orientation.ROW:
            return cls(rows)
        return cls(zip(*rows))

    @property
    def shape(self) -> tuple[int, int]:
        """The pair (rows, columns)."""
        return len(self._rows), len(self._rows[0])

    def _check_row(self, row: int) -> None:
        if not 0 <= row < len(self._rows):
            raise DimensionError("Improper matrix dimensions.")

    def __getitem__(self, index):
        if isinstance(index, tuple):
            row, column = index
            return self._rows[row][column]
        return tuple(self._rows[index])

    def __setitem__(self, index, value) -> None:
        if isinstance(index, tuple):
            row, column = index
            self._rows[row][column] = float(value)
            return
        new_row = [float(item) for item in value]
        if len(new_row) != self.shape[1]:
            raise DimensionError("Misaligned dimensions.")
        self._rows[index] = new_row

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return (tuple(row) for row in self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(
            abs(a - b) <= _ZERO_APPROX
            for row_a, row_b in zip(self._rows, other._rows)
            for a, b in zip(row_a, row_b)
        )

    def __repr__(self) -> str:
        return f"Matrix({self._rows!r})"

    def __str__(self) -> str:
        return "\n".join(
            "| " + ", ".join(f"{value:10.3G}" for value in row) + " |"
            for row in self._rows
        )

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise DimensionError("Improper matrix dimensions.")
        return Matrix(
            [a + b for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._rows, other._rows)
        )

    def __mul__(self, scalar: float) -> "Matrix":
        if not isinstance(scalar, Real):
            return NotImplemented
        factor = float(scalar)
        return Matrix([value * factor for value in row] for row in self._rows)

    def __rmul__(self, scalar: float) -> "Matrix":
        return self.__mul__(scalar)

    def __matmul__(self, other):
        if isinstance(other, Vector):
            if self.shape[1] != len(other):
                raise DimensionError("Improper matrix/vector dimensions.")
            values = list(other)
            return Vector(
                sum(a * b for a, b in zip(row, values)) for row in self._rows
            )
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape[1] != other.shape[0]:
            raise DimensionError("Improper matrix dimensions.")
        columns = list(zip(*other._rows))
        result = []
        for row in self._rows:
            new_row = []
            for column in columns:
                total = 0.0
                for a, b in zip(row, column):
                    total += a * b
                new_row.append(total)
            result.append(new_row)
        return Matrix(result)

    def copy(self) -> "Matrix":
        """Return an independent copy of this matrix."""
        return Matrix(self._rows)

    def transpose(self) -> "Matrix":
        """Return the transpose as a new matrix."""
        return Matrix(zip(*self._rows))

    def swap_rows(self, row1: int, row2: int) -> None:
        """Exchange two rows in place."""
        self._check_row(row1)
        self._check_row(row2)
        self._rows[row1], self._rows[row2] = self._rows[row2], self._rows[row1]

    def multiply_row(self, row: int, scalar: float) -> None:
        """Multiply one row in place by a scalar."""
        if math.isnan(scalar):
            raise ValueError("Improper scalar value.")
        self._check_row(row)
        factor = float(scalar)
        self._rows[row] = [value * factor for value in self._rows[row]]

    def add_row(self, base: int, secondary: int) -> None:
        """Add row ``secondary`` onto row ``base`` in place."""
        self._check_row(base)
        self._check_row(secondary)
        self._rows[base] = [
            a + b for a, b in zip(self._rows[base], self._rows[secondary])
        ]

    def determinant(self) -> float:
        """Return the determinant by cofactor expansion along the first row."""
        rows, columns = self.shape
        if rows != columns:
            raise DimensionError("Improper matrix dimensions.")
        if rows == 1:
            return self._rows[0][0]
        if rows == 2:
            (a, b), (c, d) = self._rows
            return a * d - c * b
        total = 0.0
        for i, entry in enumerate(self._rows[0]):
            if entry == 0:
                continue
            minor = Matrix(row[:i] + row[i + 1:] for row in self._rows[1:])
            sign = -1.0 if i % 2 else 1.0
            total += sign * entry * minor.determinant()
        return total

    def find_nonzero_in_column(self, column: int, start_row: int) -> int | None:
        """Return the first row at or below ``start_row`` with a non-zero entry.

        Returns None when every such entry is zero.
        """
        rows, columns = self.shape
        if not 0 <= column < columns or not 0 <= start_row < rows:
            raise DimensionError("Improper matrix dimensions.")
        for index in range(start_row, rows):
            if self._rows[index][column] != 0:
                return index
        return None

    def substitute(
        self, vector: Vector, index: int, orientation: Orientation
    ) -> None:
        """Replace a row or column in place with the values of ``vector``."""
        rows, columns = self.shape
        values = [float(value) for value in vector]
        if Orientation(orientation) is Orientation.ROW:
            if not 0 <= index < rows or columns != len(values):
                raise DimensionError("Misaligned dimensions.")
            self._rows[index] = values
            return
        if not 0 <= index < columns or rows != len(values):
            raise DimensionError("Misaligned dimensions.")
        for row, value in zip(self._rows, values):
            row[index] = value

    def to_vectors(self, orientation: Orientation) -> list[Vector]:
        """Split the matrix into its row or column vectors."""
        if Orientation(orientation) is Orientation.ROW:
            return [Vector(row) for row in self._rows]
        return [Vector(column) for column in zip(*self._rows)]