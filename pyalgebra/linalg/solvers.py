"""
Dense linear system solvers built on QR.

linear_solve() is the entry point for square, overdetermined and
underdetermined systems. A singular or rank-deficient system is not an
error: the solvers return None and callers branch on it. Pass
check_rank=True to get a SingularMatrixError instead.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.exceptions import SingularMatrixError, ValidationError
from pyalgebra.core.tolerances import NULL_SPACE_EPS, PIVOT_ATOL
from pyalgebra.core.validation import (
    check_array,
    check_finite,
    check_matrix,
    check_rows,
    check_square,
)
from pyalgebra.linalg.qr import qr_factor
from pyalgebra.linalg.triangular import _back_substitute, _back_substitute_transposed


def linear_solve(
    A: ArrayLike,
    b: ArrayLike,
    *,
    pivot: bool = False,
    check_rank: bool = False,
) -> NDArray[np.floating[Any]] | None:
    """
    Solve A @ x = b via QR decomposition.

    Cases, for A with m rows and n columns:
        m == n: the unique solution
        m > n:  the least squares solution, min ||A x - b||
        m < n:  the minimum norm solution among all exact solutions

    For m >= n, A @ P = Q R and x = P R⁻¹ Q'b.
    For m < n, A' @ P = Q R, so A = P R' Q' and x = Q R'⁻¹ P'b.

    Args:
        A: Coefficient matrix (m x n)
        b: Right hand side, shape (m,) or (m, k) for k systems at once
        pivot: Use column pivoting in the factorization
        check_rank: If True, raise SingularMatrixError on rank-deficient A
            instead of returning None

    Returns:
        Solution of shape (n,) or (n, k), or None if A is rank deficient
        (some diagonal entry of R within PIVOT_ATOL of zero)

    Raises:
        DimensionError: If b does not have m rows
        SingularMatrixError: If A is rank-deficient and check_rank=True
    """
    A_arr = check_matrix(A, 'A')
    b_arr = check_array(b, 'b')
    m, n = A_arr.shape
    check_rows(b_arr, m, 'b')
    check_finite(b_arr, 'b')

    underdetermined = m < n
    qr_result = qr_factor(A_arr.T if underdetermined else A_arr, pivot=pivot)
    maxdim, mindim = max(m, n), min(m, n)
    Q = qr_result.Q[:maxdim, :mindim]
    R = qr_result.R[:mindim, :mindim]
    P = qr_result.P

    zero_pivots = np.flatnonzero(np.abs(np.diag(R)) <= PIVOT_ATOL)
    if zero_pivots.size > 0:
        if check_rank:
            raise SingularMatrixError(
                f"Matrix is rank-deficient: rank={qr_result.rank}, expected={mindim}. "
                f"Zero pivots in R at {zero_pivots.tolist()}.",
                matrix_name='A',
                rank=qr_result.rank,
                expected_rank=mindim,
            )
        return None

    if underdetermined:
        return Q @ _back_substitute_transposed(R, P.T @ b_arr)

    # Solve R z = Q'b, then undo the column permutation
    return P @ _back_substitute(R, Q.T @ b_arr)


def matrix_inverse(A: ArrayLike) -> NDArray[np.floating[Any]] | None:
    """
    Inverse of a square matrix, or None if it is singular.

    Raises:
        DimensionError: If A is not square
    """
    A_arr = check_matrix(A, 'A')
    check_square(A_arr, 'A')
    return linear_solve(A_arr, np.eye(A_arr.shape[0]))


def null_space(
    A: ArrayLike,
    eps: float = NULL_SPACE_EPS,
) -> NDArray[np.floating[Any]]:
    """
    Orthonormal basis for the null space of A.

    Factors A' @ P = Q R with pivoting. Rows of R that are all (near) zero
    correspond to columns of Q that A maps to zero.

    Args:
        A: Matrix (m x n)
        eps: Magnitude at or below which an R entry counts as zero

    Returns:
        (k, n) array whose rows span {x : A x = 0}; k == 0 when A has
        full column rank
    """
    if eps < 0:
        raise ValidationError(f"eps: must be non-negative, got {eps}")
    A_arr = check_matrix(A, 'A')
    qr_result = qr_factor(A_arr.T, pivot=True)
    zero_rows = np.all(np.abs(qr_result.R) <= eps, axis=1)
    return qr_result.Q.T[zero_rows].copy()
