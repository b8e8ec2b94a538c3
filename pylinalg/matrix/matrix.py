"""
Matrix: dense rectangular array of scalars.

Wraps a read-only 2D numpy array of shape (rows, cols). Construction
validates that every row has the same length and that the matrix is
non-empty. All arithmetic returns a new Matrix.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.capabilities import DEFAULT_DTYPE, check_multiplier, check_scalar_dtype
from pylinalg.core.compute.tolerances import select_tolerance
from pylinalg.core.exceptions import DimensionError, IndexOutOfBoundsError
from pylinalg.core.validation import (
    check_array,
    check_index,
    check_inner_dims,
    check_ndim,
    check_not_tall,
    check_rows,
    check_same_shape,
)
from pylinalg.matrix._pivot import pivot_matrix
from pylinalg.matrix.decomposition import LUPDecomposed, lup_decompose


def _check_extent(value: Any, name: str) -> int:
    """Validate a requested row/column count."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise DimensionError(f"{name}: must be an integer, got {value!r}")
    if value < 1:
        raise DimensionError(f"{name}: must be at least 1, got {value}")
    return int(value)


class Matrix:
    """
    Dense matrix of signed integer or floating point scalars.

    Construction:
        Matrix([[1, 2, 3], [4, 5, 6]])
        Matrix.zeroes(2, 3)
        Matrix.diag([1, 2, 3])
        Matrix.identity(3)

    Raises on construction:
        RaggedMatrixError: rows of unequal length
        DimensionError: no rows or no columns
        ScalarTypeError: non-numeric or unsupported element type
    """

    def __init__(self, rows: ArrayLike, dtype: Any = None):
        values = check_rows(rows, 'rows', dtype=dtype)
        values.setflags(write=False)
        self._values = values

    @classmethod
    def _wrap(cls, values: NDArray[Any]) -> Matrix:
        """Adopt a freshly computed 2D array without re-validating."""
        mat = cls.__new__(cls)
        values.setflags(write=False)
        mat._values = values
        return mat

    @classmethod
    def zeroes(cls, n: int, m: int, dtype: Any = DEFAULT_DTYPE) -> Matrix:
        """n x m matrix of zeros."""
        n = _check_extent(n, 'n')
        m = _check_extent(m, 'm')
        dt = check_scalar_dtype(dtype, 'dtype')
        return cls._wrap(np.zeros((n, m), dtype=dt))

    @classmethod
    def diag(cls, values: ArrayLike, dtype: Any = None) -> Matrix:
        """Square matrix with values on the diagonal and zeros elsewhere."""
        diagonal = check_array(values, 'values', dtype=dtype)
        check_ndim(diagonal, 1, 'values')
        if diagonal.shape[0] < 1:
            raise DimensionError("values: diagonal needs at least 1 element")
        return cls._wrap(np.diag(diagonal))

    @classmethod
    def identity(cls, n: int, dtype: Any = DEFAULT_DTYPE) -> Matrix:
        """n x n identity matrix."""
        n = _check_extent(n, 'n')
        dt = check_scalar_dtype(dtype, 'dtype')
        return cls._wrap(np.eye(n, dtype=dt))

    # --- Shape ---

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return self._values.shape

    @property
    def n_rows(self) -> int:
        return self._values.shape[0]

    @property
    def n_cols(self) -> int:
        return self._values.shape[1]

    @property
    def values(self) -> NDArray[Any]:
        """Read-only element array, shape (rows, cols)."""
        return self._values

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    def is_square(self) -> bool:
        return self.n_rows == self.n_cols

    # --- Slicing ---

    def row(self, i: int) -> Matrix:
        """
        Copy of row i as a 1 x cols matrix.

        Raises:
            IndexOutOfBoundsError: If i is not in [0, rows)
        """
        i = check_index(i, self.n_rows, 'row')
        return Matrix._wrap(self._values[i:i + 1, :].copy())

    def column(self, j: int) -> Matrix:
        """
        Copy of column j as a rows x 1 matrix.

        Raises:
            IndexOutOfBoundsError: If j is not in [0, cols)
        """
        j = check_index(j, self.n_cols, 'column')
        return Matrix._wrap(self._values[:, j:j + 1].copy())

    # --- Arithmetic ---

    def add(self, other: Matrix) -> Matrix:
        """
        Elementwise sum.

        Raises:
            ShapeMismatchError: If shapes differ
        """
        check_same_shape(self.shape, other.shape, 'add')
        return Matrix._wrap(self._values + other._values)

    def transpose(self) -> Matrix:
        return Matrix._wrap(self._values.T.copy())

    def mul(self, other: Matrix) -> Matrix:
        """
        Matrix product, shape (self.rows, other.cols).

        Raises:
            ShapeMismatchError: If self.cols != other.rows
        """
        check_inner_dims(self.shape, other.shape, 'mul')
        return Matrix._wrap(self._values @ other._values)

    def scalar(self, n: Any) -> Matrix:
        """
        Multiply every entry by n.

        Raises:
            ScalarTypeError: If n does not convert to the element type
        """
        check_multiplier(n, self.dtype)
        return Matrix._wrap(self._values * self.dtype.type(n))

    # --- Pivoting & decomposition ---

    def pivot(self) -> Matrix:
        """
        Permutation matrix for partial pivoting.

        Raises:
            ShapeMismatchError: If the matrix has more rows than columns
        """
        check_not_tall(self.shape, 'pivot')
        perm, _ = pivot_matrix(self._values)
        return Matrix._wrap(perm)

    def decompose(self) -> LUPDecomposed:
        """
        PLU decomposition, P·A = L·U.

        Raises:
            ShapeMismatchError: If the matrix is not square
            SingularMatrixError: On a zero pivot that would be divided by
        """
        return lup_decompose(self)

    # --- Comparison & conversion ---

    def isclose(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Same shape and entries equal within tolerance.

        Tolerances default to the tier for the wider of the two dtypes.
        """
        if self.shape != other.shape:
            return False
        tier = select_tolerance(np.result_type(self.dtype, other.dtype))
        return bool(np.allclose(
            self._values,
            other._values,
            rtol=tier.rtol if rtol is None else rtol,
            atol=tier.atol if atol is None else atol,
        ))

    def to_list(self) -> list[list]:
        return self._values.tolist()

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mul(other)

    def __getitem__(self, index: tuple[int, int]) -> Any:
        if not isinstance(index, tuple) or len(index) != 2:
            raise IndexOutOfBoundsError(
                f"matrix index must be a (row, column) pair, got {index!r}"
            )
        i, j = index
        return self._values[check_index(i, self.n_rows, 'row'), check_index(j, self.n_cols, 'column')]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._values, other._values))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self._values.tolist()})"
