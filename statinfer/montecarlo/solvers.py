"""
Solver dispatch for Monte Carlo methods.

Public API:
    bootstrap(data, statistic, R, seed)      -> BootstrapSolution
    bootstrap_ci(data, statistic, R, ...)    -> BootstrapSolution with CI
    permutation_test(x, y, statistic, R,...) -> PermutationSolution

Results are reproducible only when a seed is given. Without one the
generator is seeded from OS entropy and every call differs.
"""

from __future__ import annotations

import dataclasses
import warnings
from typing import Callable, Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statinfer.core.exceptions import InvalidParameterError
from statinfer.core.random import SeedLike
from statinfer.core.result import Result
from statinfer.core.validation import check_conf_level
from statinfer.montecarlo._ci import compute_ci
from statinfer.montecarlo._common import VALID_CI_TYPES
from statinfer.montecarlo.backends.cpu import (
    CPUBootstrapBackend,
    CPUPermutationBackend,
)
from statinfer.montecarlo.design import (
    BootstrapDesign,
    PermutationDesign,
    mean_diff,
)
from statinfer.montecarlo.solution import BootstrapSolution, PermutationSolution


BackendChoice = Literal['cpu']


def _get_backend(choice: str, kind: str):
    if choice in ('cpu', 'auto'):
        if kind == 'bootstrap':
            return CPUBootstrapBackend()
        return CPUPermutationBackend()
    raise InvalidParameterError(
        f"Unknown backend: {choice!r}. Only 'cpu' is available."
    )


def bootstrap(
    data: ArrayLike | BootstrapDesign,
    statistic: Callable[[NDArray], float] = np.mean,
    R: int = 999,
    *,
    seed: SeedLike = None,
    backend: BackendChoice = 'cpu',
) -> BootstrapSolution:
    """
    Nonparametric bootstrap of a scalar statistic.

    Draws R resamples of size n with replacement (rows for 2D data) and
    evaluates `statistic` on each.

    Parameters
    ----------
    data : array-like or BootstrapDesign
        1D sample or 2D data matrix (rows are observations).
    statistic : callable
        fn(resampled_data) -> float. Default np.mean.
    R : int
        Number of bootstrap replicates. Must be >= 1.
    seed : int, SeedSequence, Generator or None
        Seed for reproducibility. None gives a non-reproducible result.
    backend : str
        'cpu'.

    Returns
    -------
    BootstrapSolution
        t0, replicates, bias, se.

    Raises
    ------
    InvalidParameterError
        If R < 1.
    InsufficientDataError
        If data is empty.
    """
    if isinstance(data, BootstrapDesign):
        design = data
    else:
        design = BootstrapDesign.for_bootstrap(data, statistic, R, seed=seed)

    be = _get_backend(backend, 'bootstrap')
    result = be.solve(design)
    return BootstrapSolution(_result=result, _design=design)


def bootstrap_ci(
    data: ArrayLike | BootstrapDesign | BootstrapSolution,
    statistic: Callable[[NDArray], float] = np.mean,
    R: int = 999,
    *,
    conf_level: float = 0.95,
    type: str | list[str] = "perc",
    seed: SeedLike = None,
    backend: BackendChoice = 'cpu',
) -> BootstrapSolution:
    """
    Bootstrap confidence interval.

    The default percentile interval is the empirical
    [(1 - conf_level)/2, 1 - (1 - conf_level)/2] quantile pair of the
    replicate distribution: 2.5% and 97.5% for conf_level=0.95.

    Parameters
    ----------
    data : array-like, BootstrapDesign or BootstrapSolution
        Sample to resample, or an existing bootstrap result whose
        replicates are reused without resampling.
    statistic : callable
        fn(resampled_data) -> float. Default np.mean.
    R : int
        Number of bootstrap replicates.
    conf_level : float
        Confidence level in (0, 1). Default 0.95.
    type : str or list of str
        "perc" (default), "basic", "normal".
    seed : int, SeedSequence, Generator or None
        Seed for reproducibility.
    backend : str
        'cpu'.

    Returns
    -------
    BootstrapSolution
        With ci, interval, lower and upper populated.
    """
    conf_level = check_conf_level(conf_level)
    types = [type] if isinstance(type, str) else list(type)
    for t in types:
        if t not in VALID_CI_TYPES:
            raise InvalidParameterError(
                f"Unknown CI type: {t!r}. Must be one of {VALID_CI_TYPES}"
            )

    if isinstance(data, BootstrapSolution):
        boot = data
    else:
        boot = bootstrap(data, statistic, R, seed=seed, backend=backend)

    params = boot._result.params
    ci = compute_ci(params, types, conf_level)

    new_params = dataclasses.replace(params, ci=ci, ci_conf_level=conf_level)
    new_result = Result(
        params=new_params,
        info={**boot.info, 'ci_types': tuple(types)},
        timing=boot.timing,
        backend_name=boot.backend_name,
        warnings=boot.warnings,
    )
    return BootstrapSolution(_result=new_result, _design=boot._design)


def permutation_test(
    x: ArrayLike | PermutationDesign,
    y: ArrayLike | None = None,
    statistic: Callable[[NDArray, NDArray], float] = mean_diff,
    R: int = 9999,
    *,
    alternative: Literal["two.sided", "less", "greater"] = "two.sided",
    seed: SeedLike = None,
    backend: BackendChoice = 'cpu',
) -> PermutationSolution:
    """
    Two-sample permutation test.

    Under H0 the group labels are exchangeable. The pooled values are
    shuffled R times, split back into groups of the original sizes, and
    the statistic recomputed each time.

    p-value (two.sided): fraction of replicates with
    |stat| >= |observed|, i.e. as extreme or more extreme in either
    direction. "greater" and "less" count one tail only.

    A p-value of exactly 0 is a valid result meaning no replicate was as
    extreme; it is bounded below by 1/R in the true permutation
    distribution. Both are exposed (p_value, p_value_floor) and a
    RuntimeWarning is emitted.

    Parameters
    ----------
    x : array-like or PermutationDesign
        Treatment group, or a pre-built design.
    y : array-like
        Control group. Required unless x is a design.
    statistic : callable
        fn(x, y) -> float. Default difference of means.
    R : int
        Number of permutations. Must be >= 1.
    alternative : str
        "two.sided" (default), "less", or "greater".
    seed : int, SeedSequence, Generator or None
        Seed for reproducibility.
    backend : str
        'cpu'.

    Returns
    -------
    PermutationSolution
    """
    if isinstance(x, PermutationDesign):
        design = x
    else:
        if y is None:
            raise InvalidParameterError("y is required unless x is a PermutationDesign")
        design = PermutationDesign.for_permutation_test(
            x, y, statistic, R, alternative=alternative, seed=seed,
        )

    be = _get_backend(backend, 'permutation')
    result = be.solve(design)

    if result.params.count == 0:
        warnings.warn(
            f"Permutation p-value is 0 with R={design.R}; the true p-value "
            f"is only known to be below 1/R = {1.0 / design.R:.3g}",
            RuntimeWarning,
            stacklevel=2,
        )

    return PermutationSolution(_result=result, _design=design)
