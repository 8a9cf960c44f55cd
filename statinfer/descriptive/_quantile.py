"""
Type-7 sample quantiles (Hyndman & Fan 1996).

For sorted data x(1) <= ... <= x(n) and probability p, the 1-based
plotting position is

    h = 1 + p (n - 1)

and the quantile interpolates linearly between x(floor(h)) and
x(ceil(h)). This is R's default quantile type and numpy's 'linear'
method.

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray


def type7_quantile(x_sorted: NDArray, probs: NDArray) -> NDArray:
    """
    Linear-interpolation quantiles of pre-sorted data.

    Parameters
    ----------
    x_sorted : NDArray
        1D sorted array with at least one finite value.
    probs : NDArray
        1D array of probabilities in [0, 1].

    Returns
    -------
    NDArray
        Quantile values, one per probability.
    """
    n = len(x_sorted)
    result = np.empty(len(probs), dtype=np.float64)
    if n == 1:
        result[:] = x_sorted[0]
        return result

    # R fuzz factor: 4 * machine epsilon
    fuzz = 4.0 * np.finfo(np.float64).eps

    for i, p in enumerate(probs):
        h = 1.0 + p * (n - 1.0)
        j = int(math.floor(h + fuzz))
        g = h - j

        # Rounding noise at an exact order statistic
        if abs(g) < fuzz:
            g = 0.0

        if j >= n:
            result[i] = x_sorted[n - 1]
        else:
            # j is 1-based, so x(j) is x_sorted[j - 1]
            result[i] = (1.0 - g) * x_sorted[j - 1] + g * x_sorted[j]

    return result
