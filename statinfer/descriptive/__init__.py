"""
Descriptive statistics module.

Public API:
    mean(x)            - Arithmetic mean
    median(x)          - Median
    variance(x)        - Variance (Bessel-corrected)
    stddev(x)          - Standard deviation
    quantile(x, probs) - Quantiles (type 7, linear interpolation)
    iqr(x)             - Interquartile range
    summary(x)         - Six-number summary (Min, Q1, Median, Mean, Q3, Max)
"""

from statinfer.descriptive.solvers import (
    mean,
    median,
    variance,
    stddev,
    quantile,
    iqr,
    summary,
)

__all__ = [
    "mean",
    "median",
    "variance",
    "stddev",
    "quantile",
    "iqr",
    "summary",
]
