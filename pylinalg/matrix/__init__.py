"""
Matrix module.

Public API:
    Matrix(rows)      - Dense matrix with add, mul, transpose, scalar,
                        row/column slicing, pivot and decompose
    LUPDecomposed     - P, L, U factors with determinant()
    lup(a)            - PLU decomposition of raw rows or a Matrix
    det(a)            - Determinant via PLU decomposition
"""

from pylinalg.matrix.matrix import Matrix
from pylinalg.matrix.decomposition import LUPDecomposed
from pylinalg.matrix.solvers import lup, det

__all__ = [
    "Matrix",
    "LUPDecomposed",
    "lup",
    "det",
]
