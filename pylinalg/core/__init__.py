"""
Core infrastructure for PyLinalg.

This module provides shared abstractions and utilities used by the
vector and matrix submodules.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    capabilities: Supported scalar types
    compute: Tolerance tiers
"""

from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    ScalarTypeError,
    DimensionError,
    DimensionMismatchError,
    ShapeMismatchError,
    InvalidDimensionError,
    RaggedMatrixError,
    IndexOutOfBoundsError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "PyLinalgError",
    "ValidationError",
    "ScalarTypeError",
    "DimensionError",
    "DimensionMismatchError",
    "ShapeMismatchError",
    "InvalidDimensionError",
    "RaggedMatrixError",
    "IndexOutOfBoundsError",
    "NumericalError",
    "SingularMatrixError",
]
