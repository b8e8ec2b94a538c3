"""
Tests for Matrix arithmetic: add, transpose, mul, scalar.
"""

import numpy as np
import pytest

from pylinalg import Matrix
from pylinalg.core.exceptions import ScalarTypeError, ShapeMismatchError


class TestAdd:

    def test_add(self):
        a = Matrix([[1, 2, 3], [1, 2, 3]])
        assert a.add(a) == Matrix([[2, 4, 6], [2, 4, 6]])

    def test_operator(self):
        assert Matrix([[1]]) + Matrix([[2]]) == Matrix([[3]])

    def test_shape_mismatch(self):
        with pytest.raises(ShapeMismatchError) as exc_info:
            Matrix([[1, 2, 3]]).add(Matrix([[1, 2]]))
        assert exc_info.value.left_shape == (1, 3)
        assert exc_info.value.right_shape == (1, 2)
        assert exc_info.value.operation == 'add'

    def test_transposed_shape_mismatch(self):
        a = Matrix([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(ShapeMismatchError):
            a.add(a.transpose())

    def test_operands_untouched(self):
        a = Matrix([[1, 2]])
        a.add(Matrix([[5, 5]]))
        assert a == Matrix([[1, 2]])


class TestTranspose:

    def test_transpose(self):
        m = Matrix([[1, 2, 3], [1, 2, 3]])
        assert m.transpose() == Matrix([[1, 1], [2, 2], [3, 3]])

    def test_shape_swapped(self):
        assert Matrix([[1, 2, 3]]).transpose().shape == (3, 1)


class TestMul:

    def test_with_transpose(self):
        a = Matrix([[1, 2, 3], [4, 5, 6]])
        assert a.mul(a.transpose()) == Matrix([[14, 32], [32, 77]])

    def test_operator(self):
        a = Matrix([[1, 2], [3, 4]])
        assert a @ a == Matrix([[7, 10], [15, 22]])

    def test_result_shape(self):
        a = Matrix.zeroes(2, 3)
        b = Matrix.zeroes(3, 4)
        assert a.mul(b).shape == (2, 4)

    def test_row_times_column(self):
        r = Matrix([[1, 2, 3]])
        assert r.mul(r.transpose()) == Matrix([[14]])

    def test_inner_dims_mismatch(self):
        a = Matrix([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(ShapeMismatchError) as exc_info:
            a.mul(a)
        assert exc_info.value.operation == 'mul'

    def test_matches_numpy(self, rng):
        a = rng.standard_normal((3, 4))
        b = rng.standard_normal((4, 2))
        np.testing.assert_allclose(Matrix(a).mul(Matrix(b)).values, a @ b, rtol=1e-12)


class TestScalar:

    def test_scalar(self):
        assert Matrix([[1, 2], [3, 4]]).scalar(2) == Matrix([[2, 4], [6, 8]])

    def test_negative(self):
        assert Matrix([[1, -2]]).scalar(-1) == Matrix([[-1, 2]])

    def test_float(self):
        assert Matrix([[1.0, 2.0]]).scalar(0.5) == Matrix([[0.5, 1.0]])

    def test_float_on_int_rejected(self):
        with pytest.raises(ScalarTypeError):
            Matrix([[1, 2]]).scalar(1.5)

    def test_keeps_dtype(self):
        m = Matrix([[1, 2]], dtype=np.float32)
        assert m.scalar(3).dtype == np.float32

    def test_multiplier_overflowing_dtype_rejected(self):
        with pytest.raises(ScalarTypeError, match="out of range for int32"):
            Matrix([[1, 2]], dtype=np.int32).scalar(2**40)
