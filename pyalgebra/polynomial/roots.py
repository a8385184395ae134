"""
Polynomial root finding.

poly_roots() finds every complex root of a real polynomial with the
Aberth (Ehrlich) simultaneous iteration. Stopping and error bounds use
the running error polynomial from:

    D. A. Bini, "Numerical computation of polynomial zeros by means of
    Aberth's method", Numerical Algorithms 13 (1996), 179-200.

Roots are returned as (re, im) pairs, one row per root.
"""

from __future__ import annotations

import math
import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.exceptions import (
    ConvergenceError,
    DegenerateInputError,
    ValidationError,
)
from pyalgebra.core.tolerances import POLY_ROOT_MAX_ITERATIONS, POLY_ROOT_TOL
from pyalgebra.polynomial.algebra import (
    _as_polynomial,
    _horner_complex,
    _horner_real,
    _polyder,
    _trim,
)
from pyalgebra.polynomial.complex import _cdiv, _cmul


RootsWithErrors = tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]


def poly_roots(
    p: ArrayLike,
    tol: float = POLY_ROOT_TOL,
    *,
    error_bound: bool = False,
    max_iterations: int = POLY_ROOT_MAX_ITERATIONS,
) -> NDArray[np.floating[Any]] | RootsWithErrors:
    """
    Find all complex roots of a real polynomial.

    Leading zero coefficients are ignored. Each trailing zero coefficient
    is factored out as a root at (0, 0); these come first in the result.
    The remaining polynomial is solved in closed form for degree 1 and
    with the Aberth iteration otherwise.

    Args:
        p: Coefficients, highest degree first
        tol: Relative stopping tolerance. A root is done once
             |p(z)| <= tol * s(|z|), s being the error bound polynomial
        error_bound: If True, also return a bound on the error of each root
        max_iterations: Number of Aberth rounds before giving up

    Returns:
        (k, 2) array of roots, or (roots, errors) if error_bound is True

    Raises:
        ValidationError: If p is empty or tol is negative
        DegenerateInputError: If every coefficient of p is zero
        ConvergenceError: If the iteration does not finish in max_iterations
    """
    coeffs = _as_polynomial(p, 'p')
    if coeffs.size == 0:
        raise ValidationError("p: polynomial has no coefficients")
    if tol < 0:
        raise ValidationError(f"tol: must be non-negative, got {tol}")
    coeffs = _trim(coeffs)
    if coeffs.size == 0:
        raise DegenerateInputError(
            "p: every coefficient is zero, the zero polynomial has no isolated roots"
        )

    nonzero = np.flatnonzero(coeffs)
    n_zero_roots = coeffs.size - 1 - int(nonzero[-1])
    coeffs = coeffs[:coeffs.size - n_zero_roots]

    roots, errors = _solve_deflated(coeffs, tol, error_bound, max_iterations)

    if n_zero_roots:
        roots = np.vstack([np.zeros((n_zero_roots, 2)), roots])
        errors = np.concatenate([np.zeros(n_zero_roots), errors])

    if error_bound:
        return roots, errors
    return roots


def _solve_deflated(
    p: NDArray,
    tol: float,
    error_bound: bool,
    max_iterations: int,
) -> RootsWithErrors:
    """Roots of a polynomial with nonzero leading and constant terms."""
    degree = p.size - 1
    if degree == 0:
        return np.empty((0, 2)), np.empty(0)
    if degree == 1:
        return np.array([[-p[1] / p[0], 0.0]]), np.zeros(1)

    pderiv = _polyder(p)
    s = np.abs(p) * (4 * np.arange(degree, -1, -1) + 1)

    # Initial guesses on a circle around the centroid of the roots
    beta = -p[1] / p[0] / degree
    radius = 1 + abs(_horner_real(p, beta) / p[0]) ** (1 / degree)
    angles = 2 * math.pi * np.arange(degree) / degree + 1.5 / degree
    init = np.column_stack([
        beta + radius * np.cos(angles),
        radius * np.sin(angles),
    ])

    roots = _aberth(p, pderiv, s, init, tol, max_iterations)

    if not error_bound:
        return roots, np.zeros(degree)

    moduli = np.hypot(roots[:, 0], roots[:, 1])
    svals = tol * _horner_real(s, moduli)
    p_abs = _modulus(_horner_complex(p, roots))
    dp_abs = _modulus(_horner_complex(pderiv, roots))
    with np.errstate(divide='ignore'):
        errors = degree * (p_abs + svals) / np.abs(dp_abs - svals)
    return roots, errors


def _modulus(z: NDArray) -> NDArray:
    return np.hypot(z[..., 0], z[..., 1])


def _aberth(
    p: NDArray,
    pderiv: NDArray,
    s: NDArray,
    z: NDArray,
    tol: float,
    max_iterations: int,
) -> NDArray:
    """
    Aberth iteration from the starting estimates `z` ((n, 2) array).

    Every round, each estimate that is not yet done moves by
        w_k = N_k / (1 - N_k * sum_{j != k} 1 / (z_k - z_j))
    where N_k = p(z_k) / p'(z_k) is the Newton correction. All estimates
    move at once. Done estimates stay fixed.
    """
    n = z.shape[0]
    one = np.array([1.0, 0.0])
    off_diagonal = ~np.eye(n, dtype=bool)

    for iteration in range(max_iterations):
        p_of_z = _horner_complex(p, z)
        svals = tol * _horner_real(s, _modulus(z))
        done = _modulus(p_of_z) <= svals
        if done.all():
            return z

        active = np.flatnonzero(~done)
        newton = _cdiv(p_of_z[active], _horner_complex(pderiv, z[active]))

        # Pairwise separations z_k - z_j for active k, excluding j == k
        diffs = z[active][:, None, :] - z[None, :, :]
        mask = off_diagonal[active]
        coupling = _cdiv(np.broadcast_to(one, (int(mask.sum()), 2)), diffs[mask])
        zdiff = np.zeros((active.size, 2))
        np.add.at(zdiff, np.nonzero(mask)[0], coupling)

        w = _cdiv(newton, one - _cmul(newton, zdiff))
        z = z.copy()
        z[active] -= w

    raise ConvergenceError(
        f"Aberth iteration did not converge in {max_iterations} iterations; "
        f"current estimate: {z.tolist()}",
        iterations=max_iterations,
        estimate=z,
        reason='max_iterations',
        threshold=tol,
    )


def real_roots(
    p: ArrayLike,
    eps: float | None = None,
    tol: float = POLY_ROOT_TOL,
) -> NDArray[np.floating[Any]]:
    """
    Real roots of a real polynomial.

    Runs poly_roots() with error bounds and keeps the real part of every
    root whose imaginary part is within its error bound of zero. With
    `eps` given, a root is kept instead when |im| / (1 + |z|) < eps.

    Repeated roots converge slowly under Aberth's method and their
    imaginary parts can stay above the bound; such roots may be missing
    from the result. A RuntimeWarning is emitted when the count of real
    roots has the wrong parity for the degree, which always means a real
    root was dropped.

    Args:
        p: Coefficients, highest degree first
        eps: Optional relative tolerance on the imaginary part
        tol: Stopping tolerance passed to poly_roots()

    Returns:
        1D array of real roots (possibly empty), in poly_roots() order
    """
    roots, errors = poly_roots(p, tol, error_bound=True)
    if eps is not None:
        keep = np.abs(roots[:, 1]) / (1 + _modulus(roots)) < eps
    else:
        keep = np.abs(roots[:, 1]) <= errors
    result = roots[keep, 0]

    if (roots.shape[0] - result.size) % 2 == 1:
        warnings.warn(
            f"real_roots: found {result.size} real roots of a degree "
            f"{roots.shape[0]} polynomial; a repeated real root was likely "
            f"excluded (imaginary parts: {roots[~keep, 1].tolist()})",
            RuntimeWarning,
            stacklevel=2,
        )
    return result


def quadratic_roots(
    a: float,
    b: float,
    c: float,
    real: bool = False,
) -> NDArray[np.floating[Any]]:
    """
    Roots of a·x² + b·x + c in closed form.

    Uses the cancellation-free form of the quadratic formula: the root
    with the larger magnitude comes from -b - sign(b)·sqrt(D), the other
    from Vieta's relation c / (a·x1).

    Args:
        a, b, c: Coefficients, not all zero
        real: If True, return only the real roots as a 1D array

    Returns:
        (k, 2) array of (re, im) pairs, k in {0, 1, 2}; or real roots only

    Raises:
        DegenerateInputError: If a == b == c == 0
    """
    a, b, c = (float(v) for v in (a, b, c))
    if not all(math.isfinite(v) for v in (a, b, c)):
        raise ValidationError(f"coefficients must be finite, got {(a, b, c)}")
    if a == 0 and b == 0 and c == 0:
        raise DegenerateInputError("quadratic must have a nonzero coefficient")

    if a == 0 and b == 0:
        roots = np.empty((0, 2))
    elif a == 0:
        roots = np.array([[-c / b, 0.0]])
    elif c == 0:
        roots = np.array([[0.0, 0.0], [-b / a, 0.0]])
    else:
        discriminant = b * b - 4 * a * c
        sqrt_d = math.sqrt(abs(discriminant))
        if discriminant < 0:
            roots = np.array([[-b, sqrt_d], [-b, -sqrt_d]]) / (2 * a)
        else:
            q = -(b + math.copysign(sqrt_d, b)) / 2
            roots = np.array([[q / a, 0.0], [c / q, 0.0]])

    if real:
        return roots[roots[:, 1] == 0, 0]
    return roots
