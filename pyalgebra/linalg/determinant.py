"""
Determinants by cofactor expansion.

The general case costs O(n!) and is meant for the small matrices of
geometric work. 2x2 and 3x3 use closed forms.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.exceptions import DimensionError
from pyalgebra.core.validation import check_matrix, check_square


def det2(M: ArrayLike) -> float:
    """Determinant of a 2x2 matrix."""
    M = _as_square(M, 2)
    return float(M[0, 0] * M[1, 1] - M[0, 1] * M[1, 0])


def det3(M: ArrayLike) -> float:
    """Determinant of a 3x3 matrix, expanded along the first column."""
    M = _as_square(M, 3)
    return float(_det3(M))


def determinant(M: ArrayLike) -> float:
    """
    Determinant of a square matrix.

    Args:
        M: Square matrix (n x n), n >= 1

    Returns:
        det(M)

    Raises:
        DimensionError: If M is not square
    """
    M_arr = check_matrix(M, 'M')
    check_square(M_arr, 'M')
    return float(_determinant(M_arr))


def _as_square(M: ArrayLike, size: int) -> NDArray[np.floating[Any]]:
    M_arr = check_matrix(M, 'M')
    check_square(M_arr, 'M')
    if M_arr.shape[0] != size:
        raise DimensionError(
            f"M: expected {size}x{size} matrix, got shape {M_arr.shape}"
        )
    return M_arr


def _det3(M: NDArray) -> float:
    return (
        M[0, 0] * (M[1, 1] * M[2, 2] - M[2, 1] * M[1, 2])
        - M[1, 0] * (M[0, 1] * M[2, 2] - M[2, 1] * M[0, 2])
        + M[2, 0] * (M[0, 1] * M[1, 2] - M[1, 1] * M[0, 2])
    )


def _determinant(M: NDArray) -> float:
    n = M.shape[0]
    if n == 1:
        return M[0, 0]
    if n == 2:
        return M[0, 0] * M[1, 1] - M[0, 1] * M[1, 0]
    if n == 3:
        return _det3(M)

    total = 0.0
    minor_cols = M[:, 1:]
    for row in range(n):
        if M[row, 0] == 0:
            continue
        sign = 1.0 if row % 2 == 0 else -1.0
        minor = np.delete(minor_cols, row, axis=0)
        total += sign * M[row, 0] * _determinant(minor)
    return total
