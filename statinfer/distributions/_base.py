"""
Abstract base for distribution descriptors.

A descriptor is an immutable, validated parameterization of one family.
Evaluation is delegated to scipy.stats (pdf/pmf, cdf, sf); the inverse
CDF is either a closed form supplied by the subclass or a monotone root
solve on the CDF (see _inverse). Random variates come from a seeded
numpy Generator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statinfer.core.exceptions import DomainError, InvalidParameterError, ValidationError
from statinfer.core.random import SeedLike, make_rng
from statinfer.core.validation import check_array, check_probabilities
from statinfer.core.compute.tolerances import QUANTILE_MAX_ITER, QUANTILE_XTOL
from statinfer.distributions._inverse import invert_continuous, invert_discrete


class Distribution(ABC):
    """
    Common interface of every distribution descriptor.

    Subclasses are frozen dataclasses that validate their parameters in
    __post_init__ and supply the scipy.stats object, its shape arguments,
    the support, and a sampler.
    """

    #: True for integer-valued families (pmf instead of pdf)
    discrete: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def support(self) -> tuple[float, float]:
        """Closed support interval (lower, upper); bounds may be infinite."""
        ...

    @abstractmethod
    def _scipy(self) -> tuple[Any, tuple[float, ...]]:
        """scipy.stats distribution object and its positional arguments."""
        ...

    @abstractmethod
    def _draw(self, rng: np.random.Generator, n: int) -> NDArray:
        """Draw n variates from rng."""
        ...

    # =================================================================
    # Public API
    # =================================================================

    def density(self, x: ArrayLike) -> float | NDArray[np.floating]:
        """
        Probability density (continuous) or mass (discrete) at x.

        Raises:
            DomainError: If any x lies outside the support, or is not an
                integer for a discrete family
        """
        arr = self._check_x(x)
        self._check_support(arr)
        dist, args = self._scipy()
        if self.discrete:
            values = dist.pmf(arr, *args)
        else:
            values = dist.pdf(arr, *args)
        return _unwrap(values, arr)

    def cumulative(
        self,
        x: ArrayLike,
        upper_tail: bool = False,
    ) -> float | NDArray[np.floating]:
        """
        Lower-tail P(X <= x), or upper-tail P(X > x) when upper_tail=True.

        The upper tail is evaluated with the survival function, not as
        1 - CDF, so far-tail probabilities keep full relative precision.
        """
        arr = self._check_x(x)
        dist, args = self._scipy()
        values = dist.sf(arr, *args) if upper_tail else dist.cdf(arr, *args)
        return _unwrap(values, arr)

    def quantile_of(
        self,
        p: ArrayLike,
        *,
        max_iter: int = QUANTILE_MAX_ITER,
    ) -> float | NDArray[np.floating]:
        """
        Inverse CDF: the x with P(X <= x) = p.

        For discrete families this is the smallest x with P(X <= x) >= p.
        p = 0 and p = 1 map to the support bounds.

        Args:
            p: Probability or array of probabilities in [0, 1]
            max_iter: Iteration cap for root-finding families

        Raises:
            DomainError: If any p lies outside [0, 1]
            ConvergenceError: If the root solve exceeds max_iter
        """
        p_arr = check_probabilities(p, 'p')
        flat = np.atleast_1d(p_arr).ravel()
        out = np.empty(flat.shape, dtype=np.float64)
        lower, upper = self.support
        for i, pi in enumerate(flat):
            if pi == 0.0:
                out[i] = lower
            elif pi == 1.0:
                out[i] = upper
            else:
                out[i] = self._quantile_scalar(float(pi), max_iter)
        return _unwrap(out.reshape(np.shape(p_arr)), p_arr)

    def sample(self, n: int, seed: SeedLike = None) -> NDArray:
        """
        Draw n independent variates.

        The same seed always yields the same sequence. Without a seed the
        draw is not reproducible.

        Raises:
            InvalidParameterError: If n is not a non-negative integer
        """
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 0:
            raise InvalidParameterError(
                f"n must be a non-negative integer, got {n!r}"
            )
        rng = make_rng(seed)
        return self._draw(rng, int(n))

    def moments(self) -> tuple[float, float]:
        """Population (mean, variance); either may be inf or nan."""
        dist, args = self._scipy()
        m, v = dist.stats(*args, moments="mv")
        return float(m), float(v)

    # =================================================================
    # Internals
    # =================================================================

    def _quantile_scalar(self, p: float, max_iter: int) -> float:
        """Root-solve the CDF; subclasses with a closed form override."""
        dist, args = self._scipy()
        lower, upper = self.support

        def cdf(x: float) -> float:
            return float(dist.cdf(x, *args))

        if self.discrete:
            return float(invert_discrete(cdf, p, int(lower), upper, max_iter=max_iter))
        return invert_continuous(
            cdf, p, lower, upper, xtol=QUANTILE_XTOL, max_iter=max_iter,
        )

    def _check_x(self, x: ArrayLike) -> NDArray[np.floating]:
        arr = check_array(x, 'x')
        if np.any(np.isnan(arr)):
            raise ValidationError("x: contains NaN")
        return arr

    def _check_support(self, arr: NDArray[np.floating]) -> None:
        lower, upper = self.support
        outside = (arr < lower) | (arr > upper)
        if np.any(outside):
            bad = np.atleast_1d(arr[outside]).tolist()
            raise DomainError(
                f"x: values {bad} outside the support [{lower}, {upper}] "
                f"of {self!r}"
            )
        if self.discrete:
            finite = np.isfinite(arr)
            if np.any(arr[finite] != np.floor(arr[finite])):
                raise DomainError(
                    f"x: {self.name} is integer-valued, got non-integer values"
                )


def _unwrap(values: NDArray, like: NDArray) -> float | NDArray[np.floating]:
    """Return a Python float for 0-d input, else a float64 array."""
    if np.ndim(like) == 0:
        return float(values)
    return np.asarray(values, dtype=np.float64)
