"""
Exception hierarchy for PyAlgebra.

All exceptions inherit from PyAlgebraError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Degenerate-but-valid results (singular systems, zero pivots) are
      NOT exceptions; those return None
"""

from typing import Any


class PyAlgebraError(Exception):
    """Base exception for all PyAlgebra errors."""
    pass


class ValidationError(PyAlgebraError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a matrix is not square where a square matrix is required,
    or when a right hand side does not match the matrix it is solved against.
    """
    pass


class InvalidDivisorError(ValidationError):
    """Polynomial divisor is empty or has a zero leading coefficient."""
    pass


class DegenerateInputError(ValidationError):
    """
    Input is well-formed but carries no information to work on.

    Raised by the root finder for the zero polynomial, which has every
    point as a root.
    """
    pass


class NumericalError(PyAlgebraError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DivisionByZeroError(NumericalError):
    """Complex division by (0, 0)."""
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or numerically rank-deficient.

    Only raised on request (check_rank=True); by default the solvers
    return None for singular systems.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(m, n))
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank


class ConvergenceError(PyAlgebraError):
    """
    Iterative algorithm failed to converge.

    Raised when the Aberth root iteration fails to meet its stopping
    criterion within the maximum number of iterations. There is no safe
    partial answer, so the last estimate travels with the exception.

    Attributes:
        iterations: Number of iterations completed
        estimate: Last iterate (e.g. the (k, 2) array of root estimates)
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        estimate: Any = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.estimate = estimate
        self.reason = reason
        self.threshold = threshold
