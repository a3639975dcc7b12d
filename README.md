# linalgkit

Linear algebra in plain Python with no dependencies. The package covers vectors, matrices, determinants, Gauss–Jordan inversion, the Moore–Penrose pseudoinverse and Gram–Schmidt QR decomposition.

## Installation

```
pip install linalgkit
```

## Vectors

```python
from linalgkit.vector import Vector, DimensionError

a = Vector([1, 3, 2])
b = Vector([1.5, 4, 13])

a + b            # element-wise sum (a += b works in place)
a - b            # element-wise difference
2 * a            # scalar multiple
a.dot(b)         # 39.5
a.cross(b)       # 3-dimensional vectors only
a.norm()         # Euclidean length
a.unit()         # new unit vector; a.normalize() changes a in place
a.project(b)     # projection of a onto the base vector b
a.copy()         # independent copy
Vector.zeros(4)  # zero vector of dimension 4
```

Vectors can be indexed, assigned by index, iterated and measured with `len()`. Two vectors are equal only when every entry matches exactly.

An empty vector, a non-positive dimension or mismatched dimensions raise `DimensionError`, which is a subclass of `ValueError`. Normalizing a zero vector, or projecting onto one, raises `ZeroDivisionError`.

## Matrices

```python
from linalgkit.matrix import Matrix, Orientation
from linalgkit.vector import Vector

m = Matrix([[1, 2, 3], [4, 5, 6]])
m.shape                   # (2, 3)
m[0, 1]                   # 2.0
m[1]                      # (4.0, 5.0, 6.0)
m.transpose()
m @ m.transpose()         # matrix product
m @ Vector([1, 0, 0])     # matrix-vector product, gives a Vector
3 * m                     # scalar multiple
m + m                     # element-wise sum
Matrix.identity(3).determinant()   # 1.0

m.swap_rows(0, 1)
m.multiply_row(0, 2.0)
m.add_row(1, 0)           # row 1 += row 0
m.find_nonzero_in_column(0, 0)     # first row index with a non-zero entry, or None
m.substitute(Vector([7, 8, 9]), 0, Orientation.ROW)

columns = m.to_vectors(Orientation.COLUMN)
Matrix.from_vectors(columns, Orientation.COLUMN) == m   # True
```

Matrices compare equal when their shapes match and every entry agrees to within 1e-13. `str(m)` lays the matrix out row by row between `|` bars. The determinant is computed by cofactor expansion along the first row. Operations on matrices of unsuitable shape, and row indices out of range, raise `DimensionError`.

## Inverses and decompositions

```python
from linalgkit.decompositions import (
    SingularMatrixError,
    invert,
    moore_penrose_inverse,
    qr_decomposition,
)
from linalgkit.matrix import Matrix

c = Matrix([[4.0, 0.0], [-3.0, 323.4]])
invert(c) @ c == Matrix.identity(2)      # True

pinv = moore_penrose_inverse(Matrix([[1, 2], [3, 4], [5, 6]]))

q, r = qr_decomposition(Matrix([[12, -51, 4], [6, 167, -68], [-4, 24, -41]]))
q @ r   # reproduces the original matrix
```

- `invert` works on square matrices only and leaves its argument unchanged. It raises `SingularMatrixError` (a subclass of `ValueError`) when the matrix has no inverse.
- `moore_penrose_inverse` uses the normal equations: `Mᵀ(MMᵀ)⁻¹` when the matrix has more rows than columns, `(MᵀM)⁻¹Mᵀ` otherwise. It raises `SingularMatrixError` when that product cannot be inverted.
- `qr_decomposition` returns `Q` with orthonormal columns and a square upper-triangular `R`. It raises `SingularMatrixError` when the columns are linearly dependent.

## Self-check

To run the built-in checks of every operation:

```
linalgkit-selfcheck
```

Each check prints `Clear` or `Error`. Pass `--no-color` to print without terminal colours. The exit status is non-zero if any check fails. From Python, `linalgkit.selfcheck.run_checks()` returns the results as a list of `CheckResult` records with `section`, `name` and `passed` fields.

## Scope

The package is meant for small, dense, real-valued problems. It does no pivoting for numerical stability beyond swapping out zero pivots. It has no sparse or complex support and no eigenvalue solver.