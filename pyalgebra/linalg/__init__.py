"""
Dense linear algebra kernels.

All functions follow these conventions:
    - Inputs are array-likes, converted to float64 and validated at entry
    - Results are new NumPy arrays; inputs are never modified
    - Singular systems return None; bad input raises immediately

Submodules:
    qr: Householder QR decomposition
    triangular: Back substitution
    solvers: Linear solve, inverse, null space
    determinant: Cofactor expansion determinants

Example:
    >>> from pyalgebra.linalg import linear_solve
    >>> x = linear_solve([[2, 1], [1, 3]], [3, 5])
    >>> if x is None:
    ...     print("singular")
"""

from pyalgebra.linalg.qr import QRResult, qr_factor
from pyalgebra.linalg.triangular import back_substitute
from pyalgebra.linalg.solvers import linear_solve, matrix_inverse, null_space
from pyalgebra.linalg.determinant import det2, det3, determinant

__all__ = [
    # QR decomposition
    "QRResult",
    "qr_factor",
    # Solvers
    "back_substitute",
    "linear_solve",
    "matrix_inverse",
    "null_space",
    # Determinants
    "det2",
    "det3",
    "determinant",
]
