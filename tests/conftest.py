"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def symmetric_4x4():
    """Symmetric matrix whose pivot is the identity."""
    return [
        [7, 3, -1, 2],
        [3, 8, 1, -4],
        [-1, 1, 4, -1],
        [2, -4, -1, 6],
    ]


@pytest.fixture
def pivoted_4x4():
    """Matrix needing three row swaps; determinant is -22."""
    return [
        [3, 1, 1, 2],
        [5, 1, 3, 4],
        [2, 0, 1, 0],
        [1, 3, 2, 1],
    ]


@pytest.fixture
def column_dominant(rng):
    """
    Strictly column diagonally dominant 5x5 matrix.

    Partial pivoting performs no row exchanges on such matrices, so the
    factors can be compared entry by entry with LAPACK's.
    """
    a = rng.standard_normal((5, 5))
    return a + np.diag(np.abs(a).sum(axis=0) + 1.0)
