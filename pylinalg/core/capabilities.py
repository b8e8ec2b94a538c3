"""
Scalar capability set for PyLinalg.

This module is the SINGLE SOURCE OF TRUTH for which scalar types vectors
and matrices may hold. A scalar type must support negation, addition,
multiplication, ordering and conversion from small integers (0, 1, -1);
in NumPy terms that is a signed integer or floating dtype. Division is a
separate capability, needed only by decomposition.

Usage:
    from pylinalg.core.capabilities import (
        check_scalar_dtype,
        division_dtype,
    )

    dtype = check_scalar_dtype(values.dtype, 'rows')
    work = values.astype(division_dtype(dtype))
"""

from __future__ import annotations

from typing import Any
import numpy as np

from pylinalg.core.exceptions import ScalarTypeError

# NumPy dtype kinds
KIND_SIGNED_INTEGER = 'i'
KIND_FLOATING = 'f'

# Kinds accepted as vector/matrix elements
SCALAR_KINDS = frozenset({KIND_SIGNED_INTEGER, KIND_FLOATING})

# Kinds on which true division is closed
DIVISION_KINDS = frozenset({KIND_FLOATING})

# Default element dtype for zero/identity construction
DEFAULT_DTYPE = np.dtype(np.int64)

# Dtype that signed integers are promoted to for division
DIVISION_PROMOTION = np.dtype(np.float64)


def check_scalar_dtype(dtype: Any, name: str) -> np.dtype:
    """
    Verify a dtype belongs to the scalar capability set.

    Args:
        dtype: dtype, type or dtype string
        name: Parameter name for error messages

    Returns:
        The normalised numpy dtype

    Raises:
        ScalarTypeError: If the dtype is not a signed integer or float
    """
    try:
        dt = np.dtype(dtype)
    except TypeError as e:
        raise ScalarTypeError(f"{name}: not a dtype: {dtype!r}", dtype=dtype) from e

    if dt.kind not in SCALAR_KINDS:
        raise ScalarTypeError(
            f"{name}: unsupported scalar dtype {dt}, "
            f"expected signed integer or floating point",
            dtype=dt,
        )
    return dt


def supports_division(dtype: Any) -> bool:
    """Whether true division is closed over the dtype."""
    return np.dtype(dtype).kind in DIVISION_KINDS


def division_dtype(dtype: Any) -> np.dtype:
    """
    Dtype in which division-dependent work is carried out.

    Floating dtypes are kept; signed integers are promoted to float64.
    """
    dt = check_scalar_dtype(dtype, 'dtype')
    if supports_division(dt):
        return dt
    return DIVISION_PROMOTION


def check_multiplier(n: Any, dtype: np.dtype, name: str = 'n') -> None:
    """
    Verify a scalar multiplier converts to the operand's scalar kind.

    Integers convert to any supported dtype whose range holds them;
    floats only to floating dtypes.

    Raises:
        ScalarTypeError: If n is not numeric, does not convert, or
            overflows an integer dtype
    """
    if isinstance(n, (bool, np.bool_)):
        raise ScalarTypeError(f"{name}: boolean multiplier {n!r} not supported", dtype=type(n))
    try:
        n_dtype = np.min_scalar_type(n)
    except TypeError as e:
        raise ScalarTypeError(f"{name}: not a scalar: {n!r}", dtype=type(n)) from e

    if n_dtype.kind not in SCALAR_KINDS and n_dtype.kind != 'u':
        raise ScalarTypeError(
            f"{name}: multiplier of dtype {n_dtype} is not numeric", dtype=n_dtype
        )
    if not np.can_cast(n_dtype, dtype, casting='same_kind'):
        raise ScalarTypeError(
            f"{name}: multiplier {n!r} ({n_dtype}) does not convert to {dtype}",
            dtype=n_dtype,
        )
    if np.dtype(dtype).kind == KIND_SIGNED_INTEGER:
        info = np.iinfo(dtype)
        if not info.min <= int(n) <= info.max:
            raise ScalarTypeError(
                f"{name}: multiplier {n!r} out of range for {dtype} "
                f"[{info.min}, {info.max}]",
                dtype=n_dtype,
            )


__all__ = [
    'KIND_SIGNED_INTEGER',
    'KIND_FLOATING',
    'SCALAR_KINDS',
    'DIVISION_KINDS',
    'DEFAULT_DTYPE',
    'DIVISION_PROMOTION',
    'check_scalar_dtype',
    'supports_division',
    'division_dtype',
    'check_multiplier',
]
