"""
Vector: fixed-dimension sequence of scalars.

Wraps a read-only 1D numpy array. Every operation returns a new Vector;
operands are never modified.
"""

from __future__ import annotations

from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.capabilities import check_multiplier
from pylinalg.core.exceptions import InvalidDimensionError
from pylinalg.core.validation import check_array, check_ndim, check_same_dim

# Dimensions for which the cross product is defined
CROSS_DIMS = (2, 3)


class Vector:
    """
    Ordered sequence of signed integer or floating point scalars.

    The dimension is taken from the input length and never changes.
    Zero-length vectors are allowed.

    Examples:
        >>> Vector([1, 2, 3]).dot(Vector([1, 2, 3]))
        14
        >>> Vector([1, 2, 3]).inverse()
        Vector([-1, -2, -3])
    """

    def __init__(self, elements: ArrayLike, dtype: Any = None):
        values = check_array(elements, 'elements', dtype=dtype)
        check_ndim(values, 1, 'elements')
        values.setflags(write=False)
        self._values = values

    @classmethod
    def _wrap(cls, values: NDArray[Any]) -> Vector:
        """Adopt a freshly computed array without re-validating."""
        vec = cls.__new__(cls)
        values.setflags(write=False)
        vec._values = values
        return vec

    @property
    def dim(self) -> int:
        """Number of elements."""
        return self._values.shape[0]

    @property
    def values(self) -> NDArray[Any]:
        """Read-only element array, shape (dim,)."""
        return self._values

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    def add(self, other: Vector) -> Vector:
        """
        Elementwise sum.

        Raises:
            DimensionMismatchError: If dimensions differ
        """
        check_same_dim(self.dim, other.dim, 'add')
        return Vector._wrap(self._values + other._values)

    def dot(self, other: Vector) -> Any:
        """
        Sum of elementwise products, starting from 0.

        Raises:
            DimensionMismatchError: If dimensions differ
        """
        check_same_dim(self.dim, other.dim, 'dot')
        zero = np.result_type(self.dtype, other.dtype).type(0)
        return (zero + np.dot(self._values, other._values)).item()

    def cross(self, other: Vector) -> Vector:
        """
        Cross product for 2D and 3D vectors.

        In 2D the result is a length-1 vector holding the scalar
        a0*b1 - a1*b0. In 3D it is the usual cross product.

        Raises:
            InvalidDimensionError: If dimensions differ or are not 2 or 3
        """
        if self.dim != other.dim or self.dim not in CROSS_DIMS:
            raise InvalidDimensionError(
                f"cross: vectors must both have dimension 2 or 3, "
                f"got {self.dim} and {other.dim}",
                dims=(self.dim, other.dim),
                allowed=CROSS_DIMS,
            )
        a, b = self._values, other._values
        if self.dim == 2:
            return Vector._wrap(np.array([a[0] * b[1] - a[1] * b[0]]))
        return Vector._wrap(np.array([
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ]))

    def scalar(self, n: Any) -> Vector:
        """
        Multiply every element by n.

        Raises:
            ScalarTypeError: If n does not convert to the element type
        """
        check_multiplier(n, self.dtype)
        return Vector._wrap(self._values * self.dtype.type(n))

    def inverse(self) -> Vector:
        """Additive inverse, same as scalar(-1)."""
        return self.scalar(-1)

    def to_list(self) -> list:
        return self._values.tolist()

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __neg__(self) -> Vector:
        return self.inverse()

    def __len__(self) -> int:
        return self.dim

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __getitem__(self, index: int) -> Any:
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dim == other.dim and bool(np.array_equal(self._values, other._values))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector({self._values.tolist()})"
