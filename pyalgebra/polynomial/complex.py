"""
Complex arithmetic on (re, im) pairs.

Complex numbers are length-2 real arrays interpreted positionally. All
operations broadcast over leading axes, so a (k, 2) array is a batch of
k complex values.

The unchecked kernels _cmul and _cdiv are shared with the root finder;
the public functions validate first.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.exceptions import DivisionByZeroError
from pyalgebra.core.validation import check_array, check_complex


def _cmul(z1: NDArray, z2: NDArray) -> NDArray:
    a, b = z1[..., 0], z1[..., 1]
    c, d = z2[..., 0], z2[..., 1]
    return np.stack([a * c - b * d, a * d + b * c], axis=-1)


def _cdiv(z1: NDArray, z2: NDArray) -> NDArray:
    a, b = z1[..., 0], z1[..., 1]
    c, d = z2[..., 0], z2[..., 1]
    den = c * c + d * d
    if np.any(den == 0):
        raise DivisionByZeroError(
            f"complex division by zero: divisor {np.asarray(z2).tolist()}"
        )
    return np.stack([(a * c + b * d) / den, (b * c - a * d) / den], axis=-1)


def _as_complex(z: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    arr = check_array(z, name)
    check_complex(arr, name)
    return arr


def complex_mul(z1: ArrayLike, z2: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Multiply complex pairs: (a+bi)(c+di) = (ac-bd) + (ad+bc)i.

    Args:
        z1, z2: (re, im) pairs or broadcast-compatible batches of pairs

    Returns:
        Product as (..., 2) array
    """
    return _cmul(_as_complex(z1, 'z1'), _as_complex(z2, 'z2'))


def complex_div(z1: ArrayLike, z2: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Divide complex pairs z1 / z2.

    Args:
        z1, z2: (re, im) pairs or broadcast-compatible batches of pairs

    Returns:
        Quotient as (..., 2) array

    Raises:
        DivisionByZeroError: If any divisor is (0, 0)
    """
    return _cdiv(_as_complex(z1, 'z1'), _as_complex(z2, 'z2'))


def complex_conj(z: ArrayLike) -> NDArray[np.floating[Any]]:
    """Complex conjugate of (re, im) pairs."""
    arr = _as_complex(z, 'z')
    return np.stack([arr[..., 0], -arr[..., 1]], axis=-1)


def complex_abs(z: ArrayLike) -> NDArray[np.floating[Any]] | float:
    """Modulus of (re, im) pairs. Returns a float for a single pair."""
    arr = _as_complex(z, 'z')
    result = np.hypot(arr[..., 0], arr[..., 1])
    if result.ndim == 0:
        return float(result)
    return result
