"""Matrix inversion, the Moore-Penrose pseudo-inverse and QR decomposition."""

from __future__ import annotations

from linalgkit.matrix import Matrix, Orientation
from linalgkit.vector import DimensionError, Vector


class SingularMatrixError(ValueError):
    """Raised when a matrix that must be inverted is not invertible."""


def invert(matrix: Matrix) -> Matrix:
    """Return the inverse of a square matrix by Gauss-Jordan elimination.

    The argument is left unchanged.
    """
    rows, columns = matrix.shape
    if rows != columns:
        raise DimensionError("Improper matrix dimensions.")

    inverse = Matrix.identity(rows)
    work = matrix.copy()

    for i in range(columns):
        # Ensure the diagonal entry is non-zero.
        if work[i, i] == 0:
            pivot = work.find_nonzero_in_column(i, i)
            if pivot is None:
                raise SingularMatrixError("Matrix is noninvertible.")
            work.swap_rows(i, pivot)
            inverse.swap_rows(i, pivot)

        # Clear every other entry in this column.
        for y in range(rows):
            if y == i or work[y, i] == 0:
                continue
            scalar = -work[y, i] / work[i, i]
            work.multiply_row(i, scalar)
            inverse.multiply_row(i, scalar)
            work.add_row(y, i)
            inverse.add_row(y, i)

    # Reduce the diagonal entries to one.
    for i in range(rows):
        scalar = 1.0 / work[i, i]
        work.multiply_row(i, scalar)
        inverse.multiply_row(i, scalar)

    return inverse


def moore_penrose_inverse(matrix: Matrix) -> Matrix:
    """Return the Moore-Penrose inverse built from the normal equations.

    A matrix with more rows than columns uses M^T (M M^T)^-1; any other
    matrix uses (M^T M)^-1 M^T. A singular product raises
    SingularMatrixError.
    """
    rows, columns = matrix.shape
    transposed = matrix.transpose()
    if rows > columns:
        return transposed @ invert(matrix @ transposed)
    return invert(transposed @ matrix) @ transposed


def qr_decomposition(matrix: Matrix) -> tuple[Matrix, Matrix]:
    """Return (Q, R) with Q @ R equal to the matrix, by Gram-Schmidt.

    Q has orthonormal columns and R is square and upper triangular.
    Linearly dependent columns raise SingularMatrixError.
    """
    columns = matrix.to_vectors(Orientation.COLUMN)

    orthogonal: list[Vector] = []
    units: list[Vector] = []
    for column in columns:
        offset = Vector.zeros(len(column))
        for previous in orthogonal:
            offset += column.project(previous)
        u = column - offset
        length = u.norm()
        if length == 0.0:
            raise SingularMatrixError("Matrix columns are linearly dependent.")
        orthogonal.append(u)
        units.append(u * (1.0 / length))

    q = Matrix.from_vectors(units, Orientation.COLUMN)

    size = len(columns)
    r = Matrix.zeros(size, size)
    for i, unit in enumerate(units):
        for j in range(i, size):
            r[i, j] = unit.dot(columns[j])

    return q, r