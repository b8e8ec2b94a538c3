"""
Partial pivoting for LU decomposition.

Builds the row permutation applied before elimination. Comparisons read
the input matrix as given; only the freshly allocated permutation array
is modified.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.capabilities import DEFAULT_DTYPE


def pivot_matrix(values: NDArray[Any]) -> tuple[NDArray[Any], int]:
    """
    Permutation matrix for partial pivoting of an n x m array, n <= m.

    For each column j, every row i >= j whose entry |A[i, j]| exceeds
    |A[j, j]| swaps rows i and j of the permutation. A[j, j] is always
    read from the input, never from a partially permuted copy.

    Args:
        values: Array A (n x m) with n <= m

    Returns:
        (P, swaps): integer permutation matrix P (n x n) and the number of
        row transpositions applied to build it
    """
    n = values.shape[0]
    perm = np.eye(n, dtype=DEFAULT_DTYPE)
    magnitude = np.abs(values)
    swaps = 0

    for j in range(n):
        for i in range(j, n):
            if magnitude[i, j] > magnitude[j, j]:
                perm[[i, j]] = perm[[j, i]]
                swaps += 1

    return perm, swaps
