"""Dense real vectors with the usual arithmetic and geometric operations."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Iterator


class DimensionError(ValueError):
    """Raised when an operand has an improper or mismatched dimension."""


class Vector:
    """A mutable vector of floats with a positive dimension."""

    __slots__ = ("_values",)
    __hash__ = None  # mutable

    def __init__(self, values: Iterable[float]) -> None:
        data = [float(value) for value in values]
        if not data:
            raise DimensionError("Improper vector dimension.")
        self._values = data

    @classmethod
    def zeros(cls, dimension: int) -> "Vector":
        """Return a vector of the given dimension filled with zeros."""
        if dimension <= 0:
            raise DimensionError("Improper vector dimension.")
        return cls([0.0] * dimension)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._values[index] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Vector({self._values!r})"

    def __str__(self) -> str:
        return "{" + ", ".join(f"{value:f}" for value in self._values) + "}"

    def _check_same_dimension(self, other: "Vector") -> None:
        if len(self) != len(other):
            raise DimensionError("Improper vector dimensions.")

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __iadd__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_dimension(other)
        self._values = [a + b for a, b in zip(self._values, other._values)]
        return self

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __isub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_dimension(other)
        self._values = [a - b for a, b in zip(self._values, other._values)]
        return self

    def __mul__(self, coefficient: float) -> "Vector":
        if not isinstance(coefficient, Real):
            return NotImplemented
        result = self.copy()
        result *= coefficient
        return result

    def __rmul__(self, coefficient: float) -> "Vector":
        return self.__mul__(coefficient)

    def __imul__(self, coefficient: float) -> "Vector":
        if not isinstance(coefficient, Real):
            return NotImplemented
        factor = float(coefficient)
        self._values = [value * factor for value in self._values]
        return self

    def copy(self) -> "Vector":
        """Return an independent copy of this vector."""
        return Vector(self._values)

    def dot(self, other: "Vector") -> float:
        """Return the dot product with another vector of the same dimension."""
        self._check_same_dimension(other)
        total = 0.0
        for a, b in zip(self._values, other._values):
            total += a * b
        return total

    def cross(self, other: "Vector") -> "Vector":
        """Return the cross product of two three-dimensional vectors.

        The middle component is a0*b2 - a2*b0.
        """
        if len(self) != 3 or len(other) != 3:
            raise DimensionError("Improper vector dimensions.")
        a0, a1, a2 = self._values
        b0, b1, b2 = other._values
        return Vector([
            a1 * b2 - a2 * b1,
            a0 * b2 - a2 * b0,
            a0 * b1 - a1 * b0,
        ])

    def norm(self) -> float:
        """Return the Euclidean length of the vector."""
        total = 0.0
        for value in self._values:
            total += value * value
        return math.sqrt(total)

    def unit(self) -> "Vector":
        """Return a new vector of length one pointing the same way."""
        result = self.copy()
        result.normalize()
        return result

    def normalize(self) -> "Vector":
        """Scale this vector in place to length one and return it."""
        length = self.norm()
        if length == 0.0:
            raise ZeroDivisionError("cannot normalize a zero vector")
        self *= 1.0 / length
        return self

    def project(self, base: "Vector") -> "Vector":
        """Return the projection of this vector onto ``base``."""
        base._check_same_dimension(self)
        denominator = base.dot(base)
        if denominator == 0.0:
            raise ZeroDivisionError("cannot project onto a zero vector")
        return base * (base.dot(self) / denominator)