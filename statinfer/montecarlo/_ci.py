"""
Bootstrap confidence interval computation.

Implements three of the methods from R's boot.ci():
- perc: percentile method (the default)
- basic: basic (pivotal) bootstrap interval
- normal: bias-corrected normal approximation

Percentile bounds are type-7 quantiles of the replicate distribution.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from statinfer.core.exceptions import InvalidParameterError
from statinfer.descriptive._quantile import type7_quantile
from statinfer.distributions import Normal
from statinfer.montecarlo._common import BootParams, VALID_CI_TYPES


def compute_ci(
    params: BootParams,
    types: list[str],
    conf_level: float,
) -> dict[str, NDArray]:
    """
    Compute bootstrap confidence intervals.

    Args:
        params: Bootstrap payload with t0 and replicates.
        types: CI types to compute.
        conf_level: Confidence level (e.g., 0.95).

    Returns:
        Dict mapping CI type name to an array [lower, upper].

    Raises:
        InvalidParameterError: If a CI type is unknown.
    """
    alpha = 1.0 - conf_level
    finite = params.replicates[np.isfinite(params.replicates)]
    t_sorted = np.sort(finite)

    ci_dict: dict[str, NDArray] = {}
    for ci_type in types:
        if ci_type == "perc":
            ci_dict["perc"] = _ci_percentile(t_sorted, alpha)
        elif ci_type == "basic":
            ci_dict["basic"] = _ci_basic(params.t0, t_sorted, alpha)
        elif ci_type == "normal":
            ci_dict["normal"] = _ci_normal(params.t0, finite, alpha)
        else:
            raise InvalidParameterError(
                f"Unknown CI type: {ci_type!r}. Must be one of {VALID_CI_TYPES}"
            )

    return ci_dict


def _ci_percentile(t_sorted: NDArray, alpha: float) -> NDArray:
    """
    Percentile bootstrap CI.

    CI = [Q(alpha/2), Q(1-alpha/2)]
    """
    if len(t_sorted) == 0:
        return np.array([np.nan, np.nan])
    return type7_quantile(t_sorted, np.array([alpha / 2.0, 1.0 - alpha / 2.0]))


def _ci_basic(t0: float, t_sorted: NDArray, alpha: float) -> NDArray:
    """
    Basic (pivotal) bootstrap CI.

    CI = [2*t0 - Q(1-alpha/2), 2*t0 - Q(alpha/2)]

    Note: upper quantile of bootstrap gives lower bound.
    """
    if len(t_sorted) == 0:
        return np.array([np.nan, np.nan])
    q_lo, q_hi = type7_quantile(
        t_sorted, np.array([alpha / 2.0, 1.0 - alpha / 2.0])
    )
    return np.array([2.0 * t0 - q_hi, 2.0 * t0 - q_lo])


def _ci_normal(t0: float, t: NDArray, alpha: float) -> NDArray:
    """
    Normal approximation CI with bias correction.

    CI = [2*t0 - mean(t) + z_{alpha/2} * se,
          2*t0 - mean(t) + z_{1-alpha/2} * se]

    Centered at 2*t0 - mean(t) (bias-corrected), not at t0.
    """
    if len(t) < 2:
        return np.array([np.nan, np.nan])
    z = Normal()
    center = 2.0 * t0 - np.mean(t)
    se = np.std(t, ddof=1)
    return np.array([
        center + z.quantile_of(alpha / 2.0) * se,
        center + z.quantile_of(1.0 - alpha / 2.0) * se,
    ])
