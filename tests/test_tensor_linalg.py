"""Tests for matrix multiplication and transpose."""
import numpy as np
import pytest

from src.domain.entities.errors import DimensionIncompatible, ErrorKind, InvalidArgument
from src.domain.entities.tensor import (
    Tensor,
    multiply,
    scale,
    scale_scalar_first,
    transpose_in_place,
    transposed,
)


class TestMultiply:
    """Tests for the algebraic matrix product."""

    def test_two_by_two(self):
        a = Tensor.from_rows([[1, 2], [3, 4]])
        b = Tensor.from_rows([[5, 6], [7, 8]])
        assert multiply(a, b).to_rows() == [[19, 22], [43, 50]]

    def test_result_shape(self):
        """(m x n) times (n x p) yields (m x p)."""
        result = multiply(Tensor(2, 3), Tensor(3, 4))
        assert result.shape == (2, 4)

    def test_incompatible_dimensions_raise(self):
        """Multiplying a 2x3 by a 2x3 tensor fails."""
        with pytest.raises(DimensionIncompatible) as excinfo:
            multiply(Tensor(2, 3), Tensor(2, 3))
        assert excinfo.value.kind is ErrorKind.DIMENSION_INCOMPATIBLE

    def test_incompatible_dimensions_via_operators(self):
        with pytest.raises(DimensionIncompatible):
            Tensor(2, 3) @ Tensor(2, 3)
        with pytest.raises(DimensionIncompatible):
            Tensor(2, 3) * Tensor(2, 3)

    def test_operators_match_function(self):
        a = Tensor.from_rows([[1, 2, 3]])
        b = Tensor.from_rows([[4], [5], [6]])
        assert a @ b == multiply(a, b)
        assert a * b == multiply(a, b)
        assert (a @ b).to_rows() == [[32]]

    def test_outer_product(self):
        column = Tensor.from_rows([[1], [2]])
        row = Tensor.from_rows([[3, 4, 5]])
        assert multiply(column, row).to_rows() == [[3, 4, 5], [6, 8, 10]]

    def test_one_by_one_operands(self):
        assert multiply(Tensor.from_rows([[6]]), Tensor.from_rows([[7]])).to_rows() == [[42]]

    def test_identity_is_neutral(self):
        a = Tensor.from_rows([[2, -1, 0], [4, 3, 7]])
        identity = Tensor(3, 3, int)
        for k in range(3):
            identity.set(k, k, 1)
        assert multiply(a, identity) == a

    def test_zero_inner_products_start_at_zero(self):
        """Cells whose products cancel must be exactly zero."""
        a = Tensor.from_rows([[1, -1]])
        b = Tensor.from_rows([[5], [5]])
        assert multiply(a, b).to_rows() == [[0]]

    def test_operands_are_unchanged(self):
        a = Tensor.from_rows([[1, 2], [3, 4]])
        b = Tensor.from_rows([[0, 1], [1, 0]])
        multiply(a, b)
        assert a.to_rows() == [[1, 2], [3, 4]]
        assert b.to_rows() == [[0, 1], [1, 0]]

    def test_int_times_float_gives_float(self):
        result = multiply(Tensor.from_rows([[1, 2]]), Tensor.from_rows([[0.5], [0.25]]))
        assert result.dtype is float
        assert result.to_rows() == [[1.0]]

    def test_matches_numpy(self):
        rng = np.random.default_rng(7)
        left = rng.integers(-9, 10, size=(4, 5))
        right = rng.integers(-9, 10, size=(5, 3))
        a = Tensor.from_rows(left.tolist())
        b = Tensor.from_rows(right.tolist())
        assert multiply(a, b).to_rows() == (left @ right).tolist()

    def test_non_tensor_operand_raises(self):
        with pytest.raises(InvalidArgument):
            multiply(Tensor(1, 1), [[1.0]])

    def test_scaled_vectors_scenario(self):
        """[15, 15] times the transpose of [30, 30] is [[900]]."""
        a = Tensor(1, 2, int)
        a.fill(5)
        a = scale(a, 3)
        assert a.to_rows() == [[15, 15]]

        b = Tensor(2, 1, int)
        b.fill(3)
        b = scale_scalar_first(10, b)
        assert b.to_rows() == [[30], [30]]

        b_t = transposed(b)
        assert b_t.shape == (1, 2)
        assert b_t.to_rows() == [[30, 30]]

        assert multiply(a, b).to_rows() == [[900]]
        assert multiply(a, transposed(b_t)).to_rows() == [[900]]


class TestTranspose:
    """Tests for out-of-place and in-place transpose."""

    def test_transposed_values(self):
        a = Tensor.from_rows([[1, 2, 3], [4, 5, 6]])
        result = transposed(a)
        assert result.shape == (3, 2)
        assert result.to_rows() == [[1, 4], [2, 5], [3, 6]]

    def test_element_relation(self):
        a = Tensor.from_rows([[1, 2, 3], [4, 5, 6]])
        result = transposed(a)
        for i in range(a.rows):
            for j in range(a.cols):
                assert result.get(j, i) == a.get(i, j)

    @pytest.mark.parametrize("rows", [[[1]], [[1, 2, 3]], [[1], [2]], [[1, 2], [3, 4]]])
    def test_double_transpose_is_identity(self, rows):
        a = Tensor.from_rows(rows)
        assert transposed(transposed(a)) == a

    def test_transposed_does_not_mutate(self):
        a = Tensor.from_rows([[1, 2]])
        transposed(a)
        assert a.shape == (1, 2)

    def test_property_form(self):
        a = Tensor.from_rows([[1, 2]])
        assert a.T == transposed(a)
        assert a.transpose() == transposed(a)

    def test_in_place(self):
        a = Tensor.from_rows([[1, 2, 3], [4, 5, 6]])
        expected = transposed(a)
        assert transpose_in_place(a) is None
        assert a.shape == (3, 2)
        assert a == expected

    def test_in_place_method_twice_restores(self):
        a = Tensor.from_rows([[1.5, 2.5, 3.5]])
        original = a.copy()
        a.transpose_in_place()
        a.transpose_in_place()
        assert a == original

    def test_in_place_keeps_indexing_consistent(self):
        a = Tensor.from_rows([[1, 2, 3]])
        a.transpose_in_place()
        assert a.get(2, 0) == 3
        a.set(2, 0, 9)
        assert a.to_rows() == [[1], [2], [9]]
