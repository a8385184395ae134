"""
Polynomial algebra on coefficient arrays.

Coefficients are stored highest degree first, so [1, -3, 2] is
x² - 3x + 2. The empty array is the zero polynomial; canonical results
have a nonzero leading coefficient.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.exceptions import InvalidDivisorError, ValidationError
from pyalgebra.core.validation import check_array, check_1d, check_finite
from pyalgebra.polynomial.complex import _cmul, _as_complex


def _as_polynomial(p: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    arr = check_array(p, name)
    check_1d(arr, name)
    check_finite(arr, name)
    return arr


def _trim(p: NDArray, eps: float = 0.0) -> NDArray:
    nonzero = np.flatnonzero(np.abs(p) > eps)
    if nonzero.size == 0:
        return p[:0].copy()
    return p[nonzero[0]:].copy()


def _horner_real(p: NDArray, x: Any) -> Any:
    # x may be a scalar or an array of real points
    total = np.zeros_like(x, dtype=np.float64)
    for coef in p:
        total = total * x + coef
    return total


def _horner_complex(p: NDArray, z: NDArray) -> NDArray:
    total = np.zeros_like(z, dtype=np.float64)
    for coef in p:
        total = _cmul(total, z)
        total[..., 0] += coef
    return total


def _polymul(p: NDArray, q: NDArray) -> NDArray:
    if p.size == 0 or q.size == 0:
        return np.empty(0)
    return _trim(np.convolve(p, q))


def polytrim(p: ArrayLike, eps: float = 0.0) -> NDArray[np.floating[Any]]:
    """
    Strip leading coefficients with magnitude at or below `eps`.

    Args:
        p: Coefficients, highest degree first
        eps: Magnitude treated as zero (default: exact zeros only)

    Returns:
        Trimmed coefficients; empty if every coefficient is within eps of 0
    """
    if eps < 0:
        raise ValidationError(f"eps: must be non-negative, got {eps}")
    return _trim(_as_polynomial(p, 'p'), eps)


def polyval(p: ArrayLike, z: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """
    Evaluate a polynomial with Horner's scheme.

    The arithmetic follows the type of `z`:
        - scalar z: real evaluation, returns float
        - (re, im) pair or (..., 2) batch: complex evaluation, returns pairs

    Args:
        p: Coefficients, highest degree first
        z: Evaluation point(s)

    Returns:
        p(z); the empty polynomial evaluates to 0
    """
    coeffs = _as_polynomial(p, 'p')
    if np.ndim(z) == 0:
        x = float(z)
        if not np.isfinite(x):
            raise ValidationError(f"z: non-finite evaluation point {x}")
        return float(_horner_real(coeffs, x))
    zarr = _as_complex(z, 'z')
    check_finite(zarr, 'z')
    return _horner_complex(coeffs, zarr)


def polyder(p: ArrayLike) -> NDArray[np.floating[Any]]:
    """Derivative coefficients of `p`. Constants differentiate to empty."""
    coeffs = _as_polynomial(p, 'p')
    return _polyder(coeffs)


def _polyder(p: NDArray) -> NDArray:
    degree = p.size - 1
    if degree <= 0:
        return np.empty(0)
    return p[:-1] * np.arange(degree, 0, -1, dtype=np.float64)


def polymul(
    p: ArrayLike | Sequence[ArrayLike],
    q: ArrayLike | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Multiply polynomials.

    Called with two arguments, returns p·q. Called with one argument, `p`
    is a sequence of polynomials and their product is returned.

    The result has length len(p)+len(q)-1 before trimming leading zeros;
    a zero factor gives the empty polynomial.

    Example:
        >>> polymul([1, -1], [1, 1])
        array([ 1.,  0., -1.])
        >>> polymul([[1, -1], [1, -2], [1, -3]])
        array([  1.,  -6.,  11.,  -6.])
    """
    if q is None:
        polys = [_as_polynomial(poly, f'p[{i}]') for i, poly in enumerate(p)]
        if not polys:
            raise ValidationError("p: empty sequence of polynomials")
        result = _trim(polys[0])
        for poly in polys[1:]:
            result = _polymul(result, poly)
        return result
    return _polymul(_as_polynomial(p, 'p'), _as_polynomial(q, 'q'))


def polyadd(p: ArrayLike, q: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Add polynomials.

    Coefficients are aligned at the constant term, so the shorter input
    is zero-padded at the front. The sum is trimmed of leading zeros.
    """
    long = _as_polynomial(p, 'p')
    short = _as_polynomial(q, 'q')
    if long.size < short.size:
        long, short = short, long
    total = long.copy()
    total[total.size - short.size:] += short
    return _trim(total)


def polydiv(
    n: ArrayLike,
    d: ArrayLike,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Polynomial long division.

    Computes quotient and remainder with n = quotient·d + remainder and
    len(remainder) < len(d). Either may be empty (the zero polynomial).

    Args:
        n: Numerator coefficients
        d: Divisor coefficients; must be non-empty with d[0] != 0

    Returns:
        (quotient, remainder)

    Raises:
        InvalidDivisorError: If d is empty or has a zero leading coefficient
    """
    num = _trim(_as_polynomial(n, 'n'))
    den = _as_polynomial(d, 'd')
    if den.size == 0:
        raise InvalidDivisorError("d: divisor polynomial is empty")
    if den[0] == 0:
        raise InvalidDivisorError(
            f"d: leading coefficient is zero in {den.tolist()}"
        )

    if num.size < den.size:
        return np.empty(0), num

    rem = num.copy()
    quotient = np.empty(num.size - den.size + 1)
    for i in range(quotient.size):
        t = rem[i] / den[0]
        quotient[i] = t
        rem[i:i + den.size] -= t * den

    return quotient, _trim(rem[quotient.size:])
