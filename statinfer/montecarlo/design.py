"""
Design classes for Monte Carlo methods.

BootstrapDesign and PermutationDesign encapsulate all inputs needed
by backends to perform resampling. Immutable, validated at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statinfer.core.exceptions import (
    DimensionMismatchError,
    InvalidParameterError,
    ValidationError,
)
from statinfer.core.random import SeedLike
from statinfer.core.validation import (
    check_array,
    check_finite,
    check_min_samples,
    check_replicates,
    check_sample,
)
from statinfer.montecarlo._common import VALID_ALTERNATIVES


def mean_diff(x: NDArray, y: NDArray) -> float:
    """Default permutation statistic: mean(x) - mean(y)."""
    return float(np.mean(x) - np.mean(y))


@dataclass(frozen=True)
class BootstrapDesign:
    """
    Frozen design for nonparametric bootstrap resampling.

    Attributes:
        data: Original data, shape (n,) or (n, p). Rows are resampled.
        statistic: fn(resampled_data) -> float.
        R: Number of bootstrap replicates.
        seed: Seed, SeedSequence or Generator; None is non-reproducible.
    """
    data: NDArray[np.floating[Any]]
    statistic: Callable[[NDArray], float]
    R: int
    seed: SeedLike

    @classmethod
    def for_bootstrap(
        cls,
        data: ArrayLike,
        statistic: Callable[[NDArray], float] = np.mean,
        R: int = 999,
        *,
        seed: SeedLike = None,
    ) -> BootstrapDesign:
        """
        Create a bootstrap design with validation.

        Args:
            data: Input data, 1D or 2D array-like.
            statistic: Function computing the statistic of interest.
            R: Number of bootstrap replicates. Must be >= 1.
            seed: Random seed.

        Returns:
            Validated BootstrapDesign.

        Raises:
            InvalidParameterError: If R < 1 or statistic is not callable.
            InsufficientDataError: If data has no observations.
        """
        data_arr = check_array(data, 'data')
        if data_arr.ndim == 0:
            raise DimensionMismatchError("data must be an array, not a scalar")
        if data_arr.ndim > 2:
            raise DimensionMismatchError(
                f"data must be 1D or 2D, got {data_arr.ndim}D"
            )
        check_min_samples(data_arr, 1, 'data')
        check_finite(data_arr, 'data')

        R = check_replicates(R)

        if not callable(statistic):
            raise InvalidParameterError(
                f"statistic must be callable, got {type(statistic).__name__}"
            )

        return cls(
            data=data_arr.copy(),
            statistic=statistic,
            R=R,
            seed=seed,
        )

    @property
    def n(self) -> int:
        return self.data.shape[0]


@dataclass(frozen=True)
class PermutationDesign:
    """
    Frozen design for a two-sample permutation test.

    Attributes:
        x: Treatment group, shape (n1,).
        y: Control group, shape (n2,).
        statistic: fn(x, y) -> float. Defaults to difference of means.
        R: Number of permutations.
        alternative: "two.sided", "less", or "greater".
        seed: Seed, SeedSequence or Generator; None is non-reproducible.
    """
    x: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]
    statistic: Callable[[NDArray, NDArray], float]
    R: int
    alternative: str
    seed: SeedLike

    @classmethod
    def for_permutation_test(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        statistic: Callable[[NDArray, NDArray], float] = mean_diff,
        R: int = 9999,
        *,
        alternative: str = "two.sided",
        seed: SeedLike = None,
    ) -> PermutationDesign:
        """
        Create a permutation test design with validation.

        Args:
            x: Treatment group data.
            y: Control group data.
            statistic: fn(x, y) -> float. The test statistic.
            R: Number of permutations. Must be >= 1.
            alternative: "two.sided", "less", or "greater".
            seed: Random seed.

        Returns:
            Validated PermutationDesign.

        Raises:
            InsufficientDataError: If either group is empty.
            InvalidParameterError: If R < 1 or alternative is unknown.
        """
        x_arr = check_sample(x, 'x', min_samples=1)
        y_arr = check_sample(y, 'y', min_samples=1)

        R = check_replicates(R)

        if alternative not in VALID_ALTERNATIVES:
            raise InvalidParameterError(
                f"alternative must be one of {VALID_ALTERNATIVES}, "
                f"got {alternative!r}"
            )

        if not callable(statistic):
            raise InvalidParameterError(
                f"statistic must be callable, got {type(statistic).__name__}"
            )

        return cls(
            x=x_arr,
            y=y_arr,
            statistic=statistic,
            R=R,
            alternative=alternative,
            seed=seed,
        )

    @classmethod
    def from_labels(
        cls,
        values: ArrayLike,
        labels: ArrayLike,
        *,
        treatment: Any,
        statistic: Callable[[NDArray, NDArray], float] = mean_diff,
        R: int = 9999,
        alternative: str = "two.sided",
        seed: SeedLike = None,
    ) -> PermutationDesign:
        """
        Build a design from a pooled sample and one group label per value.

        The labels must take exactly two distinct values; observations
        labelled `treatment` form x, the rest form y. Order within each
        group follows the pooled order.

        Raises:
            DimensionMismatchError: If values and labels differ in length.
            ValidationError: If labels do not form exactly two groups or
                treatment is not one of them.
        """
        values_arr = check_sample(values, 'values', min_samples=2)
        labels_arr = np.asarray(labels)
        if labels_arr.ndim != 1 or labels_arr.shape[0] != values_arr.shape[0]:
            raise DimensionMismatchError(
                f"labels must be 1D with one label per value: "
                f"values={values_arr.shape[0]}, labels shape={labels_arr.shape}"
            )

        groups = np.unique(labels_arr)
        if len(groups) != 2:
            raise ValidationError(
                f"labels must define exactly 2 groups, got {len(groups)}: "
                f"{groups.tolist()}"
            )

        mask = labels_arr == treatment
        if not np.any(mask):
            raise ValidationError(
                f"treatment label {treatment!r} not found in labels "
                f"{groups.tolist()}"
            )

        return cls.for_permutation_test(
            values_arr[mask],
            values_arr[~mask],
            statistic,
            R,
            alternative=alternative,
            seed=seed,
        )
