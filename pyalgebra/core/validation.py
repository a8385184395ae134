"""
Input validation utilities for PyAlgebra.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages

Validation happens at the public boundary. Internal kernels (leading
underscore) trust their inputs.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyalgebra.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like. Rejects ragged nested sequences (a Matrix must
    be rectangular) and inputs that result in non-numeric dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        New float64 ndarray (never a view of the caller's data)

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    if result.size > 0 and not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, pass complex values as (re, im) pairs"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        ValidationError: If array is empty
    """
    if array.size == 0:
        raise ValidationError(f"{name}: empty input with shape {array.shape}")


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        DimensionError: If the number of rows and columns differ
    """
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(
            f"{name}: expected square matrix, got shape {array.shape}"
        )


def check_rows(array: NDArray[np.floating[Any]], rows: int, name: str) -> None:
    """
    Verify a right hand side is a vector of length `rows` or a matrix with
    `rows` rows.

    Raises:
        DimensionError: If the leading dimension does not match
    """
    if array.ndim not in (1, 2):
        raise DimensionError(
            f"{name}: expected 1D or 2D array, got {array.ndim}D with shape {array.shape}"
        )
    if array.shape[0] != rows:
        raise DimensionError(
            f"{name}: leading dimension {array.shape[0]} does not match {rows} rows"
        )


def check_complex(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array holds complex values as (re, im) pairs on its last axis.

    Raises:
        DimensionError: If the last axis is missing or not of length 2
    """
    if array.ndim == 0 or array.shape[-1] != 2:
        raise DimensionError(
            f"{name}: expected (re, im) pairs with last axis of length 2, got shape {array.shape}"
        )


def check_matrix(A: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert and validate a matrix argument in one step.

    Returns:
        Non-empty, finite, 2D float64 array
    """
    arr = check_array(A, name)
    check_2d(arr, name)
    check_nonempty(arr, name)
    check_finite(arr, name)
    return arr


def is_matrix(
    A: Any,
    m: int | None = None,
    n: int | None = None,
    square: bool = False,
) -> bool:
    """
    Predicate form of matrix validation.

    Returns True if `A` converts to a non-empty, finite, 2D numeric array,
    optionally with `m` rows, `n` columns, and/or square shape. Never raises.
    """
    try:
        arr = check_matrix(A, 'A')
    except ValidationError:
        return False
    rows, cols = arr.shape
    if m is not None and rows != m:
        return False
    if n is not None and cols != n:
        return False
    if square and rows != cols:
        return False
    return True
