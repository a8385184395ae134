"""
Back substitution for upper triangular systems.

Entries below the diagonal of R are never read; they are assumed to be
zero. A zero pivot means the system has no unique solution and is
reported by returning None.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.validation import (
    check_array,
    check_finite,
    check_matrix,
    check_rows,
    check_square,
)


def back_substitute(
    R: ArrayLike,
    b: ArrayLike,
    transpose: bool = False,
) -> NDArray[np.floating[Any]] | None:
    """
    Solve R @ x = b (or R.T @ x = b) for upper triangular R.

    `b` may be a vector (one solve) or a matrix (batched: every column
    is an independent right hand side and the solutions are returned as
    the columns of the result).

    The transposed system is solved by reversing the order of unknowns:
    the anti-transpose of R is upper triangular, so R.T @ x = b becomes
    an ordinary back substitution on reversed b whose solution is then
    reversed.

    Args:
        R: Square upper triangular matrix (n x n)
        b: Right hand side, shape (n,) or (n, k)
        transpose: Solve against R.T instead of R

    Returns:
        Solution with the same shape as b, or None if a diagonal entry
        of R is exactly zero

    Raises:
        DimensionError: If R is not square or b does not have n rows
    """
    R_arr = check_matrix(R, 'R')
    check_square(R_arr, 'R')
    b_arr = check_array(b, 'b')
    check_rows(b_arr, R_arr.shape[0], 'b')
    check_finite(b_arr, 'b')

    if transpose:
        return _back_substitute_transposed(R_arr, b_arr)
    return _back_substitute(R_arr, b_arr)


def _back_substitute_transposed(R: NDArray, b: NDArray) -> NDArray | None:
    """Unchecked kernel for R.T @ x = b via the anti-transpose of R."""
    x = _back_substitute(R[::-1, ::-1].T, b[::-1])
    return None if x is None else x[::-1].copy()


def _back_substitute(R: NDArray, b: NDArray) -> NDArray | None:
    """Unchecked kernel: solve unknowns from the last index backward."""
    n = R.shape[0]
    x = np.zeros(b.shape, dtype=np.float64)
    for ind in range(n - 1, -1, -1):
        pivot = R[ind, ind]
        if pivot == 0:
            return None
        x[ind] = (b[ind] - R[ind, ind + 1:] @ x[ind + 1:]) / pivot
    return x
