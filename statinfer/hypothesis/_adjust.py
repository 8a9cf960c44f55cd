"""
Multiple testing correction matching R's p.adjust() for the
"bonferroni" and "BH" (alias "fdr") methods.

This is a standalone utility function (no Design/Backend pipeline).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray, ArrayLike

from statinfer.core.exceptions import EmptyInputError, InvalidParameterError
from statinfer.core.validation import check_1d, check_probabilities

VALID_METHODS = ("bonferroni", "BH", "fdr")


def adjust(
    p_values: ArrayLike,
    method: str = "BH",
) -> NDArray[np.floating]:
    """
    Adjust p-values for multiple comparisons. Matches R p.adjust().

    Parameters
    ----------
    p_values : array-like
        Vector of p-values in [0, 1].
    method : str
        "BH" (default; Benjamini-Hochberg false discovery rate), "fdr"
        (alias for BH), or "bonferroni" (family-wise error rate).

    Returns
    -------
    ndarray
        Adjusted p-values in input order, same length as input, clipped
        to [0, 1]. BH values never exceed the Bonferroni values.

    Raises
    ------
    InvalidParameterError
        If method is unknown.
    EmptyInputError
        If p_values is empty.
    DomainError
        If any p-value is NaN or outside [0, 1].
    """
    if method not in VALID_METHODS:
        raise InvalidParameterError(
            f"method must be one of {VALID_METHODS}, got {method!r}"
        )

    p_arr = check_probabilities(p_values, 'p_values')
    p_arr = np.atleast_1d(p_arr)
    check_1d(p_arr, 'p_values')

    m = len(p_arr)
    if m == 0:
        raise EmptyInputError("p_values: cannot adjust an empty set of p-values")

    if method == "bonferroni":
        adjusted = p_arr * m
    else:
        adjusted = _bh(p_arr, m)

    return np.clip(adjusted, 0.0, 1.0)


def _bh(pv: NDArray, n: int) -> NDArray:
    """Benjamini-Hochberg (controls FDR, needs independence/PRDS)."""
    lp = len(pv)
    # Stable sort keeps tied p-values in input order
    order = np.argsort(pv, kind="stable")[::-1]  # descending
    sorted_p = pv[order]

    # p * n / rank, ranks counted from the largest p downward
    ranks = np.arange(lp, 0, -1, dtype=np.float64)
    adjusted_sorted = sorted_p * n / ranks

    # Enforce monotonicity (cumulative min going from largest to smallest)
    adjusted_sorted = np.minimum.accumulate(adjusted_sorted)

    # Unsort
    result = np.empty(lp, dtype=np.float64)
    result[order] = adjusted_sorted
    return result
