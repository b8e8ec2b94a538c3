"""
PLU decomposition and determinant.

Factors a square matrix A as P·A = L·U where P is a permutation matrix,
L is unit lower-triangular and U is upper-triangular. Columns are filled
left to right; each column depends on the ones before it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TYPE_CHECKING
import warnings
import numpy as np

from pylinalg.core.capabilities import division_dtype
from pylinalg.core.compute.tolerances import ToleranceTier, select_tolerance
from pylinalg.core.exceptions import SingularMatrixError, ValidationError
from pylinalg.core.validation import check_square
from pylinalg.matrix._pivot import pivot_matrix

if TYPE_CHECKING:
    from pylinalg.matrix.matrix import Matrix


ParityRule = Literal['diagonal', 'swaps']


@dataclass(frozen=True)
class LUPDecomposed:
    """
    Result of PLU decomposition.

    Attributes:
        P: Permutation matrix (n x n), integer
        L: Unit lower-triangular matrix (n x n)
        U: Upper-triangular matrix (n x n)
        swaps: Row transpositions performed while building P
    """
    P: 'Matrix'
    L: 'Matrix'
    U: 'Matrix'
    swaps: int = 0

    @property
    def shape(self) -> tuple[int, int]:
        return self.P.shape

    def determinant(self, parity: ParityRule = 'diagonal') -> float:
        """
        Determinant of the decomposed matrix.

        Computed as sign · prod(diag(L)) · prod(diag(U)).

        Parameters
        ----------
        parity : str
            How the sign of the permutation is obtained.
            'diagonal' (default): sign starts at -1 and is multiplied by +1
            for every zero on the diagonal of P and by -1 for every
            nonzero. This is the historical rule; it does not match the
            true permutation parity in general (e.g. P = I of even size),
            and a RuntimeWarning is emitted whenever the two disagree.
            'swaps': sign is (-1)**swaps, the parity of the row
            transpositions used to build P.

        Returns
        -------
        float

        Raises
        ------
        ValidationError
            If parity is not one of 'diagonal', 'swaps'.
        """
        swap_sign = -1 if self.swaps % 2 else 1

        if parity == 'diagonal':
            sign = -1
            for entry in np.diag(self.P.values):
                sign *= 1 if entry == 0 else -1
            if sign != swap_sign:
                warnings.warn(
                    f"Diagonal parity rule gives sign {sign:+d} but P was built "
                    f"from {self.swaps} row swap(s) (sign {swap_sign:+d}); "
                    f"use parity='swaps' for the permutation parity",
                    RuntimeWarning,
                    stacklevel=2,
                )
        elif parity == 'swaps':
            sign = swap_sign
        else:
            raise ValidationError(
                f"parity must be 'diagonal' or 'swaps', got {parity!r}"
            )

        l_prod = np.prod(np.diag(self.L.values))
        u_prod = np.prod(np.diag(self.U.values))
        return float(sign * l_prod * u_prod)

    def reconstructs(
        self,
        a: Any,
        tolerance: ToleranceTier | None = None,
    ) -> bool:
        """
        Check P·A == L·U within tolerance.

        Args:
            a: The decomposed matrix (Matrix or nested sequence)
            tolerance: Tolerance tier, selected from L's dtype if None
        """
        from pylinalg.matrix.matrix import Matrix

        a_matrix = a if isinstance(a, Matrix) else Matrix(a)
        if a_matrix.shape != self.shape:
            return False
        tier = tolerance if tolerance is not None else select_tolerance(self.L.dtype)
        lhs = self.P.values @ a_matrix.values
        rhs = self.L.values @ self.U.values
        return bool(np.allclose(lhs, rhs, rtol=tier.rtol, atol=tier.atol))


def lup_decompose(a: 'Matrix') -> LUPDecomposed:
    """
    PLU decomposition of a square matrix.

    With PA = P·A, for each column j:
        U[i, j] = PA[i, j] - sum_{k<i} U[k, j]·L[i, k]            for i <= j
        L[i, j] = (PA[i, j] - sum_{k<j} L[i, k]·U[k, j]) / U[j, j]  for i > j
    and L[j, j] = 1.

    Integer input is promoted to float64; floating input keeps its dtype.

    Args:
        a: Square matrix to decompose

    Returns:
        LUPDecomposed with P·A = L·U

    Raises:
        ShapeMismatchError: If a is not square
        SingularMatrixError: If a zero pivot U[j, j] has rows below it
    """
    from pylinalg.matrix.matrix import Matrix

    check_square(a.shape, 'decompose')
    n = a.n_rows
    work_dtype = division_dtype(a.dtype)

    perm, swaps = pivot_matrix(a.values)
    pa = (perm @ a.values).astype(work_dtype)

    lower = np.zeros((n, n), dtype=work_dtype)
    upper = np.zeros((n, n), dtype=work_dtype)

    for j in range(n):
        for i in range(j + 1):
            upper[i, j] = pa[i, j] - upper[:i, j] @ lower[i, :i]

        lower[j, j] = 1
        if j + 1 < n and upper[j, j] == 0:
            raise SingularMatrixError(
                f"Zero pivot at U[{j}, {j}] after partial pivoting; "
                f"matrix is singular or needs a different row order",
                matrix_name='A',
                pivot_index=j,
            )
        for i in range(j + 1, n):
            lower[i, j] = (pa[i, j] - lower[i, :j] @ upper[:j, j]) / upper[j, j]

    return LUPDecomposed(
        P=Matrix._wrap(perm),
        L=Matrix._wrap(lower),
        U=Matrix._wrap(upper),
        swaps=swaps,
    )
