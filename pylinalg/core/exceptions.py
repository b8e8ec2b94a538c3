"""
Exception hierarchy for PyLinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Operand-size problems share the DimensionError
base so callers can handle every incompatible-shape failure at once.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import Any


class PyLinalgError(Exception):
    """Base exception for all PyLinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ScalarTypeError(ValidationError):
    """
    Scalar type is outside the supported capability set.

    Raised for unsigned, boolean, complex, string or object data, and for
    scalar multipliers that cannot be converted to the operand's kind.

    Attributes:
        dtype: The offending dtype, if known
    """

    def __init__(self, message: str, dtype: Any = None):
        super().__init__(message)
        self.dtype = dtype


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or inconsistent.

    Base class for every size-related failure of vector and matrix
    operations.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Two vectors have different dimensions.

    Attributes:
        left: Dimension of the left operand
        right: Dimension of the right operand
    """

    def __init__(self, message: str, left: int | None = None, right: int | None = None):
        super().__init__(message)
        self.left = left
        self.right = right


class ShapeMismatchError(DimensionError):
    """
    Two matrices have incompatible shapes for the requested operation.

    Attributes:
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand, None for unary checks
        operation: Name of the operation that failed ('add', 'mul', ...)
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation


class InvalidDimensionError(DimensionError):
    """
    Operation is not defined for the operand dimension.

    Raised by the vector cross product outside dimensions 2 and 3.

    Attributes:
        dims: Dimensions of the operands involved
        allowed: Dimensions for which the operation is defined
    """

    def __init__(
        self,
        message: str,
        dims: tuple[int, ...] = (),
        allowed: tuple[int, ...] = (),
    ):
        super().__init__(message)
        self.dims = dims
        self.allowed = allowed


class RaggedMatrixError(DimensionError):
    """
    Matrix rows have unequal lengths.

    Attributes:
        row_lengths: Length of every input row
    """

    def __init__(self, message: str, row_lengths: tuple[int, ...] = ()):
        super().__init__(message)
        self.row_lengths = row_lengths


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Row or column index is outside the matrix extent.

    Also an IndexError so that generic sequence handling keeps working.

    Attributes:
        index: The requested index
        size: Extent of the indexed axis
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        size: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.size = size
        self.axis = axis


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular under the chosen pivoting.

    Raised when LU decomposition meets a zero pivot on the diagonal of U
    and would otherwise divide by zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Diagonal position of the zero pivot
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
