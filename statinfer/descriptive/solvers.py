"""
Descriptive statistics for a single sample.

Provides mean(), median(), variance(), stddev(), quantile(), iqr() and
summary(). All functions are pure: the input is converted to a private
float64 copy and never modified.

Minimum sample sizes:
    mean, median, quantile, iqr, summary: n >= 1
    variance, stddev:                      n >= 2
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statinfer.core.validation import check_sample, check_probabilities, check_1d
from statinfer.descriptive._quantile import type7_quantile


def mean(x: ArrayLike) -> float:
    """
    Arithmetic mean.

    Raises
    ------
    InsufficientDataError
        If x is empty.
    """
    arr = check_sample(x, 'x', min_samples=1)
    return float(np.mean(arr))


def median(x: ArrayLike) -> float:
    """Sample median (type-7 quantile at 0.5)."""
    arr = check_sample(x, 'x', min_samples=1)
    return float(np.median(arr))


def variance(x: ArrayLike) -> float:
    """
    Bessel-corrected sample variance.

    Sum of squared deviations from the mean divided by n - 1.

    Raises
    ------
    InsufficientDataError
        If x has fewer than 2 observations.
    """
    arr = check_sample(x, 'x', min_samples=2)
    return float(np.var(arr, ddof=1))


def stddev(x: ArrayLike) -> float:
    """Sample standard deviation, sqrt(variance(x))."""
    return float(np.sqrt(variance(x)))


def quantile(
    x: ArrayLike,
    probs: ArrayLike = (0.0, 0.25, 0.5, 0.75, 1.0),
) -> float | NDArray[np.floating]:
    """
    Sample quantiles by linear interpolation (type 7).

    Parameters
    ----------
    x : array-like
        1D sample, n >= 1.
    probs : float or array-like
        Probabilities in [0, 1]. Default matches R's quantile().

    Returns
    -------
    float or ndarray
        A float for scalar probs, otherwise an array parallel to probs.

    Raises
    ------
    InsufficientDataError
        If x is empty.
    DomainError
        If any probability lies outside [0, 1].
    """
    arr = check_sample(x, 'x', min_samples=1)
    p_arr = check_probabilities(probs, 'probs')
    scalar = p_arr.ndim == 0
    p_flat = np.atleast_1d(p_arr)
    check_1d(p_flat, 'probs')

    values = type7_quantile(np.sort(arr), p_flat)
    if scalar:
        return float(values[0])
    return values


def iqr(x: ArrayLike) -> float:
    """Interquartile range, quantile(0.75) - quantile(0.25)."""
    q = quantile(x, [0.25, 0.75])
    return float(q[1] - q[0])


def summary(x: ArrayLike) -> dict[str, float]:
    """
    Six-number summary matching R's summary() for numeric vectors.

    Returns
    -------
    dict
        Keys 'min', 'q1', 'median', 'mean', 'q3', 'max'.
    """
    arr = check_sample(x, 'x', min_samples=1)
    q = type7_quantile(np.sort(arr), np.array([0.0, 0.25, 0.5, 0.75, 1.0]))
    return {
        'min': float(q[0]),
        'q1': float(q[1]),
        'median': float(q[2]),
        'mean': float(np.mean(arr)),
        'q3': float(q[3]),
        'max': float(q[4]),
    }
