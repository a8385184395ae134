"""
QR decomposition by Householder reflections.

Computes A @ P = Q @ R with Q square orthogonal (m x m), R upper
triangular with the shape of A (m x n), and P a column permutation
(the identity unless pivoting is requested). Used by linear_solve(),
matrix_inverse() and null_space().
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.validation import check_matrix


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthogonal matrix (m x m)
        R: Upper triangular matrix (m x n), strict lower triangle exactly 0
        P: Column permutation matrix (n x n) with A @ P = Q @ R
        rank: Numerical rank determined from R diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    P: NDArray[np.floating[Any]]
    rank: int


def qr_factor(A: ArrayLike, pivot: bool = False) -> QRResult:
    """
    QR decomposition using Householder reflections.

    For each column col < min(m-1, n), the reflector
        H = I - 2 v v'
    maps the active sub-column x = R[col:, col] onto alpha * e1, zeroing
    everything below the diagonal. alpha takes the sign opposite to x[0]
    so that u = x - alpha * e1 never suffers cancellation. A zero column
    (alpha == 0) gives v = 0, i.e. H = I.

    Args:
        A: Matrix to decompose (m x n)
        pivot: If True, move the remaining column of largest norm into
               position before each reflection (rank revealing)

    Returns:
        QRResult with Q, R, P and numerical rank
    """
    R = check_matrix(A, 'A').copy()
    m, n = R.shape
    Q = np.eye(m)
    P = np.eye(n)

    for col in range(min(m - 1, n)):
        if pivot:
            norms = np.sum(R[col:, col:] ** 2, axis=0)
            swap = col + int(np.argmax(norms))
            if swap != col:
                R[:, [col, swap]] = R[:, [swap, col]]
                P[:, [col, swap]] = P[:, [swap, col]]

        x = R[col:, col]
        alpha = (1.0 if x[0] <= 0 else -1.0) * np.linalg.norm(x)
        u = x.copy()
        u[0] -= alpha
        v = u if alpha == 0 else u / np.linalg.norm(u)

        reflector = np.eye(m)
        reflector[col:, col:] -= 2 * np.outer(v, v)
        R = reflector @ R
        Q = Q @ reflector

    # Clear residual rounding noise below the diagonal
    R[np.tril_indices(m, k=-1, m=n)] = 0.0

    # Determine numerical rank from R diagonal
    diag_R = np.abs(np.diag(R))
    max_diag = diag_R.max() if diag_R.size > 0 else 0.0
    if max_diag > 0:
        # Tolerance based on matrix size and machine epsilon
        tol = max(m, n) * np.finfo(R.dtype).eps * max_diag
        rank = int(np.sum(diag_R > tol))
    else:
        rank = 0

    return QRResult(Q=Q, R=R, P=P, rank=rank)
