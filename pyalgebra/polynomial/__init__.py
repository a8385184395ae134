"""
Polynomials and complex numbers.

Polynomials are coefficient arrays, highest degree first. Complex numbers
are (re, im) pairs, so a set of k roots is a (k, 2) array.

Public API:
    complex_mul, complex_div, complex_conj, complex_abs
    polyval, polymul, polyadd, polydiv, polytrim, polyder
    poly_roots, real_roots, quadratic_roots

Example:
    >>> from pyalgebra.polynomial import poly_roots, real_roots
    >>> poly_roots([1, 0, 1])          # x² + 1
    >>> real_roots([1, -6, 11, -6])    # (x-1)(x-2)(x-3)
"""

from pyalgebra.polynomial.complex import (
    complex_abs,
    complex_conj,
    complex_div,
    complex_mul,
)
from pyalgebra.polynomial.algebra import (
    polyadd,
    polyder,
    polydiv,
    polymul,
    polytrim,
    polyval,
)
from pyalgebra.polynomial.roots import poly_roots, quadratic_roots, real_roots

__all__ = [
    # Complex pairs
    "complex_mul",
    "complex_div",
    "complex_conj",
    "complex_abs",
    # Algebra
    "polyval",
    "polymul",
    "polyadd",
    "polydiv",
    "polytrim",
    "polyder",
    # Roots
    "poly_roots",
    "real_roots",
    "quadratic_roots",
]
