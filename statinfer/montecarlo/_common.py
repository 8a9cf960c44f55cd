"""
Common data structures for Monte Carlo methods.

BootParams and PermutationParams are the parameter payloads
wrapped by Result[P] and exposed through Solution classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


WITH_REPLACEMENT = "with_replacement"
WITHOUT_REPLACEMENT = "without_replacement"

VALID_ALTERNATIVES = ("two.sided", "less", "greater")
VALID_CI_TYPES = ("perc", "basic", "normal")


@dataclass(frozen=True)
class BootParams:
    """
    Parameter payload for bootstrap results.

    - t0: statistic on the original data
    - replicates: statistic on each resample, shape (R,)
    - bias: mean(replicates) - t0
    - se: sd(replicates), Bessel-corrected
    - ci: interval bounds keyed by CI type (populated by bootstrap_ci)
    """
    t0: float
    replicates: NDArray[np.floating[Any]]      # shape (R,)
    R: int
    mode: str                                   # always WITH_REPLACEMENT
    bias: float
    se: float
    ci: dict[str, NDArray] | None = None       # each shape (2,)
    ci_conf_level: float | None = None


@dataclass(frozen=True)
class PermutationParams:
    """
    Parameter payload for permutation test results.

    - observed_stat: statistic on the original group assignment
    - replicates: statistic on each relabelled assignment, shape (R,)
    - count: replicates at least as extreme as observed_stat
    - p_value: count / R, exactly 0.0 when count == 0
    - p_value_floor: 1 / R, the smallest nonzero value p_value can take
    - p_value_corrected: (count + 1) / (R + 1), Phipson-Smyth
    """
    observed_stat: float
    replicates: NDArray[np.floating[Any]]      # shape (R,)
    R: int
    mode: str                                   # always WITHOUT_REPLACEMENT
    count: int
    p_value: float
    p_value_floor: float
    p_value_corrected: float
    alternative: str                            # "two.sided" | "less" | "greater"
