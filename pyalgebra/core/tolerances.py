"""
Tolerances and iteration limits.

Module-level constants are the defaults used by the kernels; every
kernel that reads one also accepts an override argument.

The ToleranceTier objects describe how closely results are expected to
match a reference. Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer-valued inputs whose arithmetic is exact in float64
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bit-for-bit equality',
)

# Dense factorizations and solves on well-conditioned inputs
KERNEL_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-9,
    name='kernel_fp64',
    description='Double precision reconstruction (QR, solve, inverse)',
)

# Simple polynomial roots after Aberth convergence
ROOTS_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-9,
    name='roots_fp64',
    description='Double precision simple roots',
)

# An R diagonal entry within this distance of zero marks the system as
# rank deficient in linear_solve().
PIVOT_ATOL = 1e-9

# Relative stopping tolerance for the Aberth iteration (scaled by the
# error bound polynomial).
POLY_ROOT_TOL = 1e-14

# Hard cap on Aberth rounds.
POLY_ROOT_MAX_ITERATIONS = 45

# Rows of R with all entries at or below this are treated as zero in
# null_space().
NULL_SPACE_EPS = 1e-12
