"""
Inverse-CDF solvers by monotone root finding.

Used for every family without a closed-form quantile function.

Continuous: find x with F(x) = p with scipy.optimize.brentq. The bracket
starts at the support bound (or at ±1 for an unbounded side) and is
doubled until the CDF crosses p. The solve stops within

    QUANTILE_XTOL + QUANTILE_RTOL * |x|

of the root. QUANTILE_XTOL is the smallest normal double, so roots close
to a support bound at 0 are still found to relative precision.

Discrete: find the smallest integer k with F(k) >= p, the usual
definition of the quantile of a discrete law (R's qbinom, qpois).

Both solvers keep the invariant F(lo) < p <= F(hi) and raise
ConvergenceError when the bracket cannot be found or the iteration cap
is reached.
"""

from __future__ import annotations

import math
from typing import Callable

from scipy.optimize import brentq

from statinfer.core.exceptions import ConvergenceError
from statinfer.core.compute.tolerances import (
    QUANTILE_XTOL,
    QUANTILE_RTOL,
    QUANTILE_MAX_ITER,
    QUANTILE_MAX_BRACKET,
)


def invert_continuous(
    cdf: Callable[[float], float],
    p: float,
    lower: float,
    upper: float,
    *,
    xtol: float = QUANTILE_XTOL,
    max_iter: int = QUANTILE_MAX_ITER,
) -> float:
    """
    Solve F(x) = p for a continuous, non-decreasing CDF.

    Brent's method (scipy.optimize.brentq) on F(x) - p inside a bracket
    found by geometric expansion.

    Args:
        cdf: Scalar CDF
        p: Target probability, strictly inside (0, 1)
        lower: Lower support bound (may be -inf)
        upper: Upper support bound (may be inf)
        xtol: Absolute tolerance on x
        max_iter: Iteration cap for the Brent solve

    Returns:
        x within xtol + QUANTILE_RTOL * |x| of the root

    Raises:
        ConvergenceError: If no bracket is found or max_iter is exceeded
    """
    lo, hi = _bracket(cdf, p, lower, upper)

    x, r = brentq(
        lambda x: cdf(x) - p, lo, hi,
        xtol=xtol, rtol=QUANTILE_RTOL, maxiter=max_iter,
        full_output=True, disp=False,
    )
    if not r.converged:
        raise ConvergenceError(
            f"Inverse CDF did not converge for p={p} after {r.iterations} "
            f"iterations (tolerance {xtol:.3g} + {QUANTILE_RTOL:.3g}*|x|)",
            iterations=r.iterations,
            reason='max_iterations',
            threshold=xtol,
        )
    return float(x)


def invert_discrete(
    cdf: Callable[[float], float],
    p: float,
    lower: int,
    upper: float,
    *,
    max_iter: int = QUANTILE_MAX_ITER,
) -> int:
    """
    Smallest integer k in [lower, upper] with F(k) >= p.

    Args:
        cdf: Scalar CDF defined on integers
        p: Target probability, strictly inside (0, 1)
        lower: Smallest value in the support
        upper: Largest value in the support (may be inf)
        max_iter: Iteration cap shared by bracketing and bisection

    Raises:
        ConvergenceError: If the search exceeds max_iter steps
    """
    if cdf(lower) >= p:
        return int(lower)

    # F(lo) < p <= F(hi)
    lo = int(lower)
    step = 1
    hi = lo + step
    iterations = 0
    while cdf(hi) < p:
        if hi >= upper:
            return int(upper)
        lo = hi
        step *= 2
        hi = lo + step
        if not math.isinf(upper):
            hi = min(hi, int(upper))
        iterations += 1
        if iterations > max_iter:
            raise ConvergenceError(
                f"Could not bracket discrete quantile for p={p} "
                f"within {max_iter} steps",
                iterations=iterations,
                reason='no_bracket',
            )

    while hi - lo > 1:
        mid = (lo + hi) // 2
        if cdf(mid) < p:
            lo = mid
        else:
            hi = mid
        iterations += 1
        if iterations > max_iter:
            raise ConvergenceError(
                f"Discrete quantile search for p={p} exceeded "
                f"{max_iter} iterations",
                iterations=iterations,
                final_change=float(hi - lo),
                reason='max_iterations',
                threshold=1.0,
            )

    return hi


def _bracket(
    cdf: Callable[[float], float],
    p: float,
    lower: float,
    upper: float,
) -> tuple[float, float]:
    """Find lo < hi with F(lo) < p <= F(hi) by geometric expansion."""
    if math.isinf(lower):
        lo = -1.0
        for _ in range(QUANTILE_MAX_BRACKET):
            if cdf(lo) < p:
                break
            lo *= 2.0
        else:
            raise _no_bracket(p, 'lower')
    else:
        lo = lower

    if math.isinf(upper):
        hi = max(1.0, lo + 1.0)
        for _ in range(QUANTILE_MAX_BRACKET):
            if cdf(hi) >= p:
                break
            hi = hi * 2.0 if hi > 0 else 1.0
        else:
            raise _no_bracket(p, 'upper')
    else:
        hi = upper

    return lo, hi


def _no_bracket(p: float, side: str) -> ConvergenceError:
    return ConvergenceError(
        f"Inverse CDF could not bracket p={p} on the {side} side after "
        f"{QUANTILE_MAX_BRACKET} doublings",
        iterations=QUANTILE_MAX_BRACKET,
        reason='no_bracket',
    )
