"""
Function entry points for matrix decomposition.

Provides lup() and det(), which accept either a Matrix or raw row data.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pylinalg.matrix.decomposition import LUPDecomposed, ParityRule
from pylinalg.matrix.matrix import Matrix


def _ensure_matrix(a: ArrayLike | Matrix) -> Matrix:
    """Convert raw rows to Matrix if needed."""
    if isinstance(a, Matrix):
        return a
    return Matrix(a)


def lup(a: ArrayLike | Matrix) -> LUPDecomposed:
    """
    PLU decomposition of a square matrix.

    Parameters
    ----------
    a : array-like or Matrix
        Square matrix, as a Matrix or as a sequence of equal-length rows.

    Returns
    -------
    LUPDecomposed with P·A = L·U.
    """
    return _ensure_matrix(a).decompose()


def det(a: ArrayLike | Matrix, *, parity: ParityRule = 'diagonal') -> float:
    """
    Determinant via PLU decomposition.

    Parameters
    ----------
    a : array-like or Matrix
        Square matrix.
    parity : str
        'diagonal' (default) or 'swaps'. See LUPDecomposed.determinant.

    Returns
    -------
    float
    """
    return lup(a).determinant(parity=parity)
