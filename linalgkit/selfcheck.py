"""Built-in self check that exercises the vector and matrix operations."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from typing import Callable, Sequence

from linalgkit.decompositions import invert, moore_penrose_inverse, qr_decomposition
from linalgkit.matrix import Matrix
from linalgkit.vector import Vector

_GREEN = "\x1b[32m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"


@dataclass(frozen=True)
class CheckResult:
    """The outcome of one named check."""

    section: str
    name: str
    passed: bool


def _create_vector() -> bool:
    v = Vector.zeros(2)
    return len(v) == 2 and not v[0] and not v[1]


def _compare_vectors() -> bool:
    return Vector.zeros(2) == Vector.zeros(2)


def _array_to_vector() -> bool:
    expected = Vector.zeros(2)
    expected[0], expected[1] = 1, 2
    return Vector([1.0, 2.0]) == expected


def _duplicate_vector() -> bool:
    original = Vector([1, 2])
    return original.copy() == original


def _sum_vectors() -> bool:
    return Vector([3, 3]) + Vector([1, 2]) == Vector([4, 5])


def _subtract_vectors() -> bool:
    return Vector([3, 3]) - Vector([1, 2]) == Vector([2, 1])


def _multiply_vector() -> bool:
    return Vector([1, 2]) * 2 == Vector([2, 4])


def _cross_product() -> bool:
    a = Vector([1, 3, 2])
    b = Vector([1.5, 4, 13])
    return a.cross(b) == Vector([31, 10, -0.5])


def _vector_length() -> bool:
    v = Vector([31, 10, -0.5])
    return v.norm() == math.sqrt(31 * 31 + 100 + 0.25)


def _unit_vector() -> bool:
    return math.isclose(Vector([31, 10, -0.5]).unit().norm(), 1.0)


def _dot_product() -> bool:
    return Vector([1, 3, 2]).dot(Vector([1.5, 4, 13])) == 39.5


def _project_vector() -> bool:
    projection = Vector([1.0, 1.0]).project(Vector([2.0, 0.0]))
    return bool(projection[0]) and not projection[1]


def _create_matrix() -> bool:
    m = Matrix.zeros(2, 2)
    if m.shape != (2, 2):
        return False
    i = Matrix.identity(2)
    basic = not any(value for row in m for value in row)
    identity = bool(i[0, 0]) and not i[0, 1] and not i[1, 0] and bool(i[1, 1])
    return basic and identity


def _compare_matrices() -> bool:
    a = Matrix([[1.0], [2.0]])
    b = Matrix([[1.0], [2.0]])
    c = Matrix([[1.0], [23.4]])
    return a == b and not a == c


def _transpose_matrix() -> bool:
    a = Matrix([[1, 2, 3], [4, 5, 6]])
    b = Matrix([[1, 4], [2, 5], [3, 6]])
    return b == a.transpose()


def _array_to_matrix() -> bool:
    expected = Matrix.zeros(2, 2)
    expected[0, 0], expected[0, 1] = 1, 23.4
    expected[1, 0], expected[1, 1] = -321, 323.4
    return Matrix([[1, 23.4], [-321, 323.4]]) == expected


def _duplicate_matrix() -> bool:
    original = Matrix([[1, 23.4], [-321, 323.4]])
    return original == original.copy()


def _multiply_matrices() -> bool:
    a = Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    b = Matrix([[3.0, 4.0], [5.0, 6.0], [1.0, 2.0]])
    return Matrix([[16.0, 22.0], [43.0, 58.0]]) == a @ b


def _sum_matrices() -> bool:
    a = Matrix([[1.0], [2.0]])
    b = Matrix([[1.0], [2.0]])
    return Matrix([[2.0], [4.0]]) == a + b


def _scalar_multiplication() -> bool:
    b = Matrix([[3, 4], [5, 6], [1, 2]])
    return Matrix([[9, 12], [15, 18], [3, 6]]) == b * 3.0


def _swap_rows() -> bool:
    b = Matrix([[3, 4], [5, 6], [1, 2]])
    b.swap_rows(1, 2)
    return Matrix([[3, 4], [1, 2], [5, 6]]) == b


def _row_manipulation() -> bool:
    b = Matrix([[1, 1], [1, 1]])
    b.add_row(1, 0)
    b.multiply_row(0, 2)
    return Matrix([[2, 2], [2, 2]]) == b


def _determinant() -> bool:
    m = Matrix.identity(4)
    return m.determinant() == 1 and (m * 3.0).determinant() == 81


def _invert_square_matrix() -> bool:
    c = Matrix([[4.0, 0.0], [-3.0, 323.4]])
    return invert(c) @ c == Matrix.identity(2)


def _multiply_matrix_vector() -> bool:
    c = Matrix([[4.5, 0.0], [-3.0, 323.4]])
    return c @ Vector([2.0, 0.0]) == Vector([9.0, -6.0])


def _moore_penrose_inverse() -> bool:
    c = Matrix([[4.5, 0.0], [-3.0, 323.4]])
    return moore_penrose_inverse(c) == invert(c)


def _qr_decomposition() -> bool:
    c = Matrix([[12.0, -51.0, 4.0], [6.0, 167.0, -68.0], [-4.0, 24.0, -41.0]])
    q, r = qr_decomposition(c)
    return q @ r == c


_SECTIONS: tuple[tuple[str, tuple[tuple[str, Callable[[], bool]], ...]], ...] = (
    (
        "Vectors",
        (
            ("CreateVector()", _create_vector),
            ("CompareVectors()", _compare_vectors),
            ("ArrayToVector()", _array_to_vector),
            ("DuplicateVector()", _duplicate_vector),
            ("SumVectors()", _sum_vectors),
            ("SubtractVectors()", _subtract_vectors),
            ("MultiplyVector()", _multiply_vector),
            ("CrossProduct()", _cross_product),
            ("VectorLength()", _vector_length),
            ("UnitVector()", _unit_vector),
            ("DotProduct()", _dot_product),
            ("ProjectVector()", _project_vector),
        ),
    ),
    (
        "Matrices",
        (
            ("CreateMatrix()", _create_matrix),
            ("CompareMatrices()", _compare_matrices),
            ("TransposeMatrix()", _transpose_matrix),
            ("ArrayToMatrix()", _array_to_matrix),
            ("DuplicateMatrix()", _duplicate_matrix),
            ("MultiplyMatrices()", _multiply_matrices),
            ("SumMatrices()", _sum_matrices),
            ("MatrixScalarMultiplication()", _scalar_multiplication),
            ("SwapMatrixRows()", _swap_rows),
            ("Add/MultiplyRow()", _row_manipulation),
            ("DeterminantRecursive()", _determinant),
            ("InvertSquareMatrix()", _invert_square_matrix),
            ("MultiplyMatrixVector()", _multiply_matrix_vector),
            ("MoorePenroseInverse()", _moore_penrose_inverse),
            ("QRDecomposition()", _qr_decomposition),
        ),
    ),
)


def run_checks() -> list[CheckResult]:
    """Run every check in order; a check that raises counts as failed."""
    results = []
    for section, checks in _SECTIONS:
        for name, check in checks:
            try:
                passed = bool(check())
            except Exception:
                passed = False
            results.append(CheckResult(section, name, passed))
    return results


def _status(passed: bool, color: bool) -> str:
    word = "Clear" if passed else "Error"
    if not color:
        return f" {word}"
    return f"{_GREEN if passed else _RED} {word}{_RESET}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the result of every check; return 0 only if all passed."""
    parser = argparse.ArgumentParser(
        prog="linalgkit-selfcheck",
        description="Run the built-in checks of the vector and matrix operations.",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="print results without colours"
    )
    args = parser.parse_args(argv)
    color = not args.no_color

    results = run_checks()
    current = None
    for result in results:
        if result.section != current:
            if current is not None:
                print()
            print(f"Testing {result.section}...")
            current = result.section
        print(f"{result.name} {_status(result.passed, color)}")

    return 0 if all(result.passed for result in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())