"""
PyAlgebra: dense matrix and polynomial kernels for Python.

Small, exact-to-the-algorithm implementations of the numerical building
blocks used by geometric code: QR factorization, linear solves of every
shape, determinants, and all complex roots of a real polynomial.

Submodules:
    linalg: QR, back substitution, linear solve, inverse, determinant
    polynomial: Complex pairs, polynomial algebra, Aberth root finder
"""

__version__ = "0.1.0"

from pyalgebra import linalg
from pyalgebra import polynomial

__all__ = [
    "__version__",
    "linalg",
    "polynomial",
]
