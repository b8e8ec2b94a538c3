"""
Input validation utilities for PyLinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent truncation or padding of ragged input
    - No silent type coercion beyond the scalar capability set
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.capabilities import check_scalar_dtype
from pylinalg.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    RaggedMatrixError,
    ScalarTypeError,
    ShapeMismatchError,
)


def check_array(
    array: ArrayLike,
    name: str,
    dtype: Any = None,
) -> NDArray[Any]:
    """
    Validate and convert input to a numpy array of a supported scalar dtype.

    The result is always a fresh copy, so the caller owns it exclusively.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Requested dtype, or None to infer from the data

    Returns:
        numpy.ndarray with signed integer or floating dtype

    Raises:
        ScalarTypeError: If input is non-numeric or outside the capability set
    """
    try:
        result = np.array(array, dtype=dtype, copy=True)
    except (ValueError, TypeError) as e:
        raise ScalarTypeError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ScalarTypeError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data",
            dtype=result.dtype,
        )

    check_scalar_dtype(result.dtype, name)
    return result


def check_rows(
    rows: ArrayLike,
    name: str,
    dtype: Any = None,
) -> NDArray[Any]:
    """
    Validate row-major matrix data and convert it to a 2D array.

    Row lengths are checked before conversion so that ragged input is
    reported as such rather than as an object array.

    Args:
        rows: Sequence of rows, or a 2D array
        name: Parameter name for error messages
        dtype: Requested dtype, or None to infer from the data

    Returns:
        2D numpy.ndarray with at least one row and one column

    Raises:
        RaggedMatrixError: If rows have unequal lengths
        DimensionError: If data is not 2D or is empty
        ScalarTypeError: If data is non-numeric
    """
    if not isinstance(rows, np.ndarray) and isinstance(rows, Sequence):
        row_lengths = tuple(
            len(row) if isinstance(row, (Sequence, np.ndarray)) else -1
            for row in rows
        )
        if any(length < 0 for length in row_lengths):
            raise DimensionError(f"{name}: every row must be a sequence")
        if len(set(row_lengths)) > 1:
            raise RaggedMatrixError(
                f"{name}: rows have unequal lengths {list(row_lengths)}",
                row_lengths=row_lengths,
            )

    result = check_array(rows, name, dtype=dtype)
    check_ndim(result, 2, name)

    n_rows, n_cols = result.shape
    if n_rows < 1 or n_cols < 1:
        raise DimensionError(
            f"{name}: matrix needs at least 1 row and 1 column, got shape {result.shape}"
        )
    return result


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_same_dim(left: int, right: int, operation: str) -> None:
    """
    Verify two vectors have the same dimension.

    Raises:
        DimensionMismatchError: If the dimensions differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: vector dimensions differ ({left} vs {right})",
            left=left,
            right=right,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two matrices have identical shapes.

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if left != right:
        raise ShapeMismatchError(
            f"{operation}: matrix shapes differ ({left} vs {right})",
            left_shape=left,
            right_shape=right,
            operation=operation,
        )


def check_inner_dims(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two matrices can be multiplied (left cols == right rows).

    Raises:
        ShapeMismatchError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise ShapeMismatchError(
            f"{operation}: cannot multiply {left} by {right}, "
            f"inner dimensions {left[1]} and {right[0]} differ",
            left_shape=left,
            right_shape=right,
            operation=operation,
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        ShapeMismatchError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise ShapeMismatchError(
            f"{operation}: requires a square matrix, got shape {shape}",
            left_shape=shape,
            operation=operation,
        )


def check_not_tall(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix has no more rows than columns.

    Raises:
        ShapeMismatchError: If rows > cols
    """
    if shape[0] > shape[1]:
        raise ShapeMismatchError(
            f"{operation}: requires rows <= columns, got shape {shape}",
            left_shape=shape,
            operation=operation,
        )


def check_index(index: Any, size: int, axis: str) -> int:
    """
    Verify an index lies in [0, size).

    Negative indices are rejected rather than wrapped.

    Returns:
        The index as a plain int

    Raises:
        IndexOutOfBoundsError: If index is not an integer in range
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise IndexOutOfBoundsError(
            f"{axis} index must be an integer, got {index!r}",
            index=None,
            size=size,
            axis=axis,
        )
    idx = int(index)
    if not 0 <= idx < size:
        raise IndexOutOfBoundsError(
            f"{axis} index {idx} out of range for size {size}",
            index=idx,
            size=size,
            axis=axis,
        )
    return idx
