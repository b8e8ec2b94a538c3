"""
Tests for PLU decomposition.

Factors from strictly column diagonally dominant matrices are checked
against LAPACK (scipy.linalg.lu), which performs no row exchanges on
them either.
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest
import scipy.linalg

from pylinalg import LUPDecomposed, Matrix, lup
from pylinalg.core.compute.tolerances import ToleranceTier
from pylinalg.core.exceptions import ShapeMismatchError, SingularMatrixError


def assert_triangular_factors(result: LUPDecomposed) -> None:
    L = result.L.values
    U = result.U.values
    np.testing.assert_array_equal(np.diag(L), np.ones(L.shape[0]))
    np.testing.assert_array_equal(np.triu(L, k=1), 0)
    np.testing.assert_array_equal(np.tril(U, k=-1), 0)


class TestKnownValues:

    def test_symmetric_entries(self, symmetric_4x4):
        result = Matrix(symmetric_4x4).decompose()
        assert result.L[1, 0] == pytest.approx(0.42857142857142855)
        assert result.U[1, 1] == pytest.approx(6.714285714285714)

    def test_symmetric_no_swaps(self, symmetric_4x4):
        result = Matrix(symmetric_4x4).decompose()
        assert result.P == Matrix.identity(4)
        assert result.swaps == 0

    def test_first_row_of_u_is_first_row_of_pa(self, pivoted_4x4):
        result = Matrix(pivoted_4x4).decompose()
        np.testing.assert_array_equal(result.U.values[0], [5, 1, 3, 4])

    def test_pivoted_factors(self, pivoted_4x4):
        result = Matrix(pivoted_4x4).decompose()
        np.testing.assert_allclose(result.L.values[1:, 0], [0.2, 0.6, 0.4], rtol=1e-12)
        np.testing.assert_allclose(
            np.diag(result.U.values), [5.0, 2.8, -1.0, -11.0 / 7.0], rtol=1e-12
        )

    def test_single_entry(self):
        result = Matrix([[5]]).decompose()
        assert result.P == Matrix([[1]])
        assert result.L == Matrix([[1.0]])
        assert result.U == Matrix([[5.0]])


class TestStructure:

    def test_triangular(self, symmetric_4x4, pivoted_4x4):
        assert_triangular_factors(Matrix(symmetric_4x4).decompose())
        assert_triangular_factors(Matrix(pivoted_4x4).decompose())

    def test_shapes(self, pivoted_4x4):
        result = Matrix(pivoted_4x4).decompose()
        assert result.shape == (4, 4)
        assert result.L.shape == result.U.shape == result.P.shape == (4, 4)

    def test_integer_input_promoted(self, pivoted_4x4):
        result = Matrix(pivoted_4x4).decompose()
        assert result.L.dtype == np.float64
        assert result.U.dtype == np.float64
        assert result.P.dtype.kind == 'i'

    def test_float32_kept(self, symmetric_4x4):
        result = Matrix(symmetric_4x4, dtype=np.float32).decompose()
        assert result.L.dtype == np.float32
        assert result.U.dtype == np.float32

    def test_input_untouched(self, pivoted_4x4):
        a = Matrix(pivoted_4x4)
        a.decompose()
        assert a == Matrix(pivoted_4x4)

    def test_result_frozen(self, symmetric_4x4):
        result = Matrix(symmetric_4x4).decompose()
        with pytest.raises(FrozenInstanceError):
            result.swaps = 1

    def test_non_square_rejected(self):
        with pytest.raises(ShapeMismatchError) as exc_info:
            Matrix([[1, 2, 3], [4, 5, 6]]).decompose()
        assert exc_info.value.operation == 'decompose'


class TestReconstruction:

    def test_symmetric(self, symmetric_4x4):
        assert Matrix(symmetric_4x4).decompose().reconstructs(symmetric_4x4)

    def test_pivoted(self, pivoted_4x4):
        a = Matrix(pivoted_4x4)
        assert a.decompose().reconstructs(a)

    def test_pa_equals_lu(self, pivoted_4x4):
        a = Matrix(pivoted_4x4)
        result = a.decompose()
        assert result.P.mul(a).isclose(result.L.mul(result.U))

    def test_other_matrix_does_not_reconstruct(self, symmetric_4x4, pivoted_4x4):
        assert not Matrix(symmetric_4x4).decompose().reconstructs(pivoted_4x4)

    def test_shape_mismatch_does_not_reconstruct(self, symmetric_4x4):
        assert not Matrix(symmetric_4x4).decompose().reconstructs([[1, 2], [3, 4]])

    @pytest.mark.parametrize("n", [2, 3, 5, 8])
    def test_random(self, rng, n):
        a = rng.standard_normal((n, n))
        loose = ToleranceTier(rtol=1e-8, atol=1e-8, name='loose', description='test')
        assert lup(a).reconstructs(a, tolerance=loose)


class TestSingular:

    def test_zero_leading_pivot(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            Matrix([[0, 0], [0, 1]]).decompose()
        assert exc_info.value.pivot_index == 0
        assert exc_info.value.matrix_name == 'A'

    def test_zero_pivot_without_row_exchange(self):
        # Nonsingular (det = -1) but no entry below the diagonal exceeds
        # the input diagonal, so U[1, 1] comes out zero.
        with pytest.raises(SingularMatrixError) as exc_info:
            Matrix([[1, 1, 0], [1, 1, 1], [0, 1, 1]]).decompose()
        assert exc_info.value.pivot_index == 1

    def test_zero_trailing_pivot_is_not_divided(self):
        result = Matrix([[1, 2], [2, 4]]).decompose()
        assert result.U[1, 1] == 0
        assert result.L[1, 1] == 1
        assert np.all(np.isfinite(result.L.values))
        assert result.reconstructs([[1, 2], [2, 4]])


class TestAgainstLapack:

    def test_factors_match(self, column_dominant):
        p, l, u = scipy.linalg.lu(column_dominant)
        np.testing.assert_array_equal(p, np.eye(5))

        result = lup(column_dominant)
        assert result.swaps == 0
        np.testing.assert_allclose(result.L.values, l, rtol=1e-10, atol=1e-12)
        np.testing.assert_allclose(result.U.values, u, rtol=1e-10, atol=1e-12)

    def test_functional_entry_accepts_matrix(self, column_dominant):
        m = Matrix(column_dominant)
        assert lup(m).U == m.decompose().U
