"""
Core infrastructure for PyAlgebra.

Shared abstractions used by the linalg and polynomial submodules.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Default tolerances and iteration limits
"""

from pyalgebra.core.exceptions import (
    PyAlgebraError,
    ValidationError,
    DimensionError,
    InvalidDivisorError,
    DegenerateInputError,
    NumericalError,
    DivisionByZeroError,
    SingularMatrixError,
    ConvergenceError,
)
from pyalgebra.core.validation import is_matrix

__all__ = [
    # Exceptions
    "PyAlgebraError",
    "ValidationError",
    "DimensionError",
    "InvalidDivisorError",
    "DegenerateInputError",
    "NumericalError",
    "DivisionByZeroError",
    "SingularMatrixError",
    "ConvergenceError",
    # Validation
    "is_matrix",
]
