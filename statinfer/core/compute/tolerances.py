"""
Numerical tolerances and iteration limits.

Single place for every constant that controls solver accuracy:
- inverse-CDF root finding (tolerances on x and iteration cap)
- comparison tiers used by the test suite
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Closed-form and LAPACK paths: machine precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, direct computation',
)

# Quantities obtained by iterative root finding
ROOT_FINDING = ToleranceTier(
    rtol=1e-8,
    atol=1e-9,
    name='root_finding',
    description='Iterative inverse-CDF solve at QUANTILE_RTOL',
)

# Absolute tolerance on x for inverse-CDF solves: the smallest normal
# double. Quantiles near a support bound at 0 can lie far below any fixed
# absolute tolerance, so convergence is governed by QUANTILE_RTOL.
QUANTILE_XTOL = 2.2250738585072014e-308

# Relative tolerance on x; scipy.optimize.brentq accepts nothing below 4 eps
QUANTILE_RTOL = 4.0 * 2.220446049250313e-16

# Iteration cap for the Brent solve and the discrete search. Driving a
# bracket [0, 1] down to QUANTILE_XTOL takes about 1023 halvings and Brent
# may spend up to twice that.
QUANTILE_MAX_ITER = 5000

# Bracket doublings before declaring that the CDF never crosses p
QUANTILE_MAX_BRACKET = 1000
