"""
Tests for linear_solve(), matrix_inverse() and null_space().

Reference solutions from numpy.linalg (solve, lstsq, pinv).
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pyalgebra.core.exceptions import DimensionError, SingularMatrixError
from pyalgebra.core.tolerances import KERNEL_FP64
from pyalgebra.linalg import linear_solve, matrix_inverse, null_space


# ═══════════════════════════════════════════════════════════════════════
# Square systems
# ═══════════════════════════════════════════════════════════════════════


class TestSquareSolve:
    """Nonsingular square systems have a unique solution."""

    @pytest.mark.parametrize("pivot", [False, True])
    def test_solution_satisfies_system(self, square_system, pivot):
        A, b, x_true = square_system
        x = linear_solve(A, b, pivot=pivot)
        assert x.shape == (5,)
        assert_allclose(A @ x, b, atol=KERNEL_FP64.atol)
        assert_allclose(x, x_true, atol=KERNEL_FP64.atol)

    def test_matches_numpy(self, square_system):
        A, b, _ = square_system
        assert_allclose(linear_solve(A, b), np.linalg.solve(A, b), rtol=KERNEL_FP64.rtol)

    def test_matrix_right_hand_side(self, rng, square_system):
        A, _, _ = square_system
        B = rng.standard_normal((5, 3))
        X = linear_solve(A, B)
        assert X.shape == (5, 3)
        assert_allclose(A @ X, B, atol=KERNEL_FP64.atol)

    def test_accepts_nested_lists(self):
        x = linear_solve([[2, 1], [1, 3]], [3, 5])
        assert_allclose(x, [0.8, 1.4], atol=1e-12)

    def test_one_by_one(self):
        assert_allclose(linear_solve([[4.0]], [2.0]), [0.5])


# ═══════════════════════════════════════════════════════════════════════
# Rectangular systems
# ═══════════════════════════════════════════════════════════════════════


class TestRectangularSolve:
    """Least squares (m > n) and minimum norm (m < n) solutions."""

    @pytest.mark.parametrize("pivot", [False, True])
    def test_overdetermined_is_least_squares(self, rng, pivot):
        A = rng.standard_normal((12, 4))
        b = rng.standard_normal(12)
        x = linear_solve(A, b, pivot=pivot)
        x_ref = np.linalg.lstsq(A, b, rcond=None)[0]
        assert x.shape == (4,)
        assert_allclose(x, x_ref, atol=KERNEL_FP64.atol)

    def test_overdetermined_consistent_system_is_exact(self, rng):
        A = rng.standard_normal((8, 3))
        x_true = np.array([1.0, -2.0, 0.5])
        assert_allclose(linear_solve(A, A @ x_true), x_true, atol=KERNEL_FP64.atol)

    @pytest.mark.parametrize("pivot", [False, True])
    def test_underdetermined_is_minimum_norm(self, rng, pivot):
        A = rng.standard_normal((3, 7))
        b = rng.standard_normal(3)
        x = linear_solve(A, b, pivot=pivot)
        assert x.shape == (7,)
        assert_allclose(A @ x, b, atol=KERNEL_FP64.atol)
        assert_allclose(x, np.linalg.pinv(A) @ b, atol=KERNEL_FP64.atol)

    def test_underdetermined_matrix_right_hand_side(self, rng):
        A = rng.standard_normal((2, 5))
        B = rng.standard_normal((2, 4))
        X = linear_solve(A, B)
        assert X.shape == (5, 4)
        assert_allclose(A @ X, B, atol=KERNEL_FP64.atol)
        assert_allclose(X, np.linalg.pinv(A) @ B, atol=KERNEL_FP64.atol)

    def test_single_row(self):
        """One equation, three unknowns: x is parallel to the row."""
        x = linear_solve([[1.0, 2.0, 2.0]], [9.0])
        assert_allclose(x, [1.0, 2.0, 2.0], atol=1e-12)


# ═══════════════════════════════════════════════════════════════════════
# Singular systems
# ═══════════════════════════════════════════════════════════════════════


class TestSingularSolve:
    """Rank deficiency returns None, or raises on request."""

    def test_rank_one_returns_none(self, rng, rank_one_matrix):
        assert linear_solve(rank_one_matrix, rng.standard_normal(4)) is None

    def test_rank_one_with_pivoting_returns_none(self, rng, rank_one_matrix):
        assert linear_solve(rank_one_matrix, rng.standard_normal(4), pivot=True) is None

    def test_zero_matrix_returns_none(self):
        assert linear_solve(np.zeros((3, 3)), np.ones(3)) is None

    def test_rank_deficient_overdetermined(self):
        A = [[1.0, 2.0], [2.0, 4.0], [3.0, 6.0]]
        assert linear_solve(A, [1.0, 2.0, 3.0]) is None

    def test_rank_deficient_underdetermined(self):
        A = [[1.0, 2.0, 3.0], [2.0, 4.0, 6.0]]
        assert linear_solve(A, [1.0, 2.0]) is None

    def test_check_rank_raises(self, rng, rank_one_matrix):
        with pytest.raises(SingularMatrixError, match="rank-deficient") as exc_info:
            linear_solve(rank_one_matrix, rng.standard_normal(4), check_rank=True)
        assert exc_info.value.matrix_name == 'A'
        assert exc_info.value.expected_rank == 4
        assert exc_info.value.rank is not None

    def test_check_rank_passes_nonsingular(self, square_system):
        A, b, x_true = square_system
        x = linear_solve(A, b, check_rank=True)
        assert_allclose(x, x_true, atol=KERNEL_FP64.atol)


class TestSolveValidation:

    def test_vector_length_mismatch(self, square_system):
        A, _, _ = square_system
        with pytest.raises(DimensionError, match="leading dimension 4 does not match 5"):
            linear_solve(A, np.ones(4))

    def test_matrix_rows_mismatch(self, square_system):
        A, _, _ = square_system
        with pytest.raises(DimensionError):
            linear_solve(A, np.ones((6, 2)))

    def test_rejects_vector_matrix(self):
        with pytest.raises(DimensionError):
            linear_solve([1.0, 2.0], [1.0, 2.0])


# ═══════════════════════════════════════════════════════════════════════
# matrix_inverse
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixInverse:

    def test_inverse(self, square_system):
        A, _, _ = square_system
        A_inv = matrix_inverse(A)
        assert_allclose(A @ A_inv, np.eye(5), atol=KERNEL_FP64.atol)
        assert_allclose(A_inv, np.linalg.inv(A), rtol=KERNEL_FP64.rtol, atol=1e-12)

    def test_exact_inverse(self):
        A_inv = matrix_inverse([[2.0, 0.0], [0.0, 4.0]])
        assert_allclose(A_inv, [[0.5, 0.0], [0.0, 0.25]], atol=1e-15)

    def test_singular_returns_none(self, rank_one_matrix):
        assert matrix_inverse(rank_one_matrix) is None

    def test_rejects_non_square(self):
        with pytest.raises(DimensionError, match="square"):
            matrix_inverse(np.ones((2, 3)))


# ═══════════════════════════════════════════════════════════════════════
# null_space
# ═══════════════════════════════════════════════════════════════════════


class TestNullSpace:

    def test_rank_one_rows(self):
        A = np.array([[1.0, 2.0, 3.0], [2.0, 4.0, 6.0]])
        N = null_space(A)
        assert N.shape == (2, 3)
        assert_allclose(A @ N.T, np.zeros((2, 2)), atol=KERNEL_FP64.atol)
        assert_allclose(N @ N.T, np.eye(2), atol=KERNEL_FP64.atol)

    def test_wide_full_rank(self):
        A = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
        N = null_space(A)
        assert N.shape == (1, 3)
        assert_allclose(np.abs(N[0]), [0.0, 0.0, 1.0], atol=1e-15)

    def test_trivial_null_space(self, square_system):
        A, _, _ = square_system
        assert null_space(A).shape == (0, 5)

    def test_rank_one_square(self, rank_one_matrix):
        N = null_space(rank_one_matrix)
        assert N.shape == (3, 4)
        assert_allclose(rank_one_matrix @ N.T, np.zeros((4, 3)), atol=KERNEL_FP64.atol)
