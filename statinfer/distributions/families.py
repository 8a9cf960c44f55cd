"""
Distribution descriptors.

Each family is a frozen dataclass validated at construction:

    Normal(mean, sd)        sd > 0
    StudentT(df)            df > 0
    Binomial(n, p)          n >= 0 integer, 0 <= p <= 1
    Poisson(lam)            lam > 0
    FDist(df1, df2)         df1 > 0, df2 > 0
    ChiSquared(df)          df > 0

Normal has a closed-form quantile (scipy.special.ndtri). The others
invert their CDF with Brent's method (continuous) or integer search (discrete).

References:
    R Core Team. stats::Distributions (dnorm/pnorm/qnorm/rnorm, ...)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats
from scipy.special import ndtri

from statinfer.core.exceptions import InvalidParameterError
from statinfer.distributions._base import Distribution


def _require_positive(value: float, name: str, family: str) -> None:
    if not (isinstance(value, (int, float, np.integer, np.floating))
            and math.isfinite(value) and value > 0):
        raise InvalidParameterError(
            f"{family}: {name} must be a finite positive number, got {value!r}"
        )


# =====================================================================
# Continuous families
# =====================================================================

@dataclass(frozen=True)
class Normal(Distribution):
    """Normal distribution with mean `mean` and standard deviation `sd`."""
    mean: float = 0.0
    sd: float = 1.0

    def __post_init__(self) -> None:
        if not (isinstance(self.mean, (int, float, np.integer, np.floating))
                and math.isfinite(self.mean)):
            raise InvalidParameterError(
                f"Normal: mean must be finite, got {self.mean!r}"
            )
        _require_positive(self.sd, 'sd', 'Normal')

    @property
    def name(self) -> str:
        return 'normal'

    @property
    def support(self) -> tuple[float, float]:
        return (-math.inf, math.inf)

    def _scipy(self) -> tuple[Any, tuple[float, ...]]:
        return sp_stats.norm, (self.mean, self.sd)

    def _draw(self, rng: np.random.Generator, n: int) -> NDArray:
        return rng.normal(self.mean, self.sd, size=n)

    def _quantile_scalar(self, p: float, max_iter: int) -> float:
        # Closed form: mean + sd * Φ⁻¹(p)
        return float(self.mean + self.sd * ndtri(p))


@dataclass(frozen=True)
class StudentT(Distribution):
    """Student's t distribution with `df` degrees of freedom."""
    df: float

    def __post_init__(self) -> None:
        _require_positive(self.df, 'df', 'StudentT')

    @property
    def name(self) -> str:
        return 't'

    @property
    def support(self) -> tuple[float, float]:
        return (-math.inf, math.inf)

    def _scipy(self) -> tuple[Any, tuple[float, ...]]:
        return sp_stats.t, (self.df,)

    def _draw(self, rng: np.random.Generator, n: int) -> NDArray:
        return rng.standard_t(self.df, size=n)


@dataclass(frozen=True)
class FDist(Distribution):
    """F distribution with numerator `df1` and denominator `df2` df."""
    df1: float
    df2: float

    def __post_init__(self) -> None:
        _require_positive(self.df1, 'df1', 'FDist')
        _require_positive(self.df2, 'df2', 'FDist')

    @property
    def name(self) -> str:
        return 'F'

    @property
    def support(self) -> tuple[float, float]:
        return (0.0, math.inf)

    def _scipy(self) -> tuple[Any, tuple[float, ...]]:
        return sp_stats.f, (self.df1, self.df2)

    def _draw(self, rng: np.random.Generator, n: int) -> NDArray:
        return rng.f(self.df1, self.df2, size=n)


@dataclass(frozen=True)
class ChiSquared(Distribution):
    """Chi-squared distribution with `df` degrees of freedom."""
    df: float

    def __post_init__(self) -> None:
        _require_positive(self.df, 'df', 'ChiSquared')

    @property
    def name(self) -> str:
        return 'chi-squared'

    @property
    def support(self) -> tuple[float, float]:
        return (0.0, math.inf)

    def _scipy(self) -> tuple[Any, tuple[float, ...]]:
        return sp_stats.chi2, (self.df,)

    def _draw(self, rng: np.random.Generator, n: int) -> NDArray:
        return rng.chisquare(self.df, size=n)


# =====================================================================
# Discrete families
# =====================================================================

@dataclass(frozen=True)
class Binomial(Distribution):
    """Number of successes in `n` Bernoulli trials with probability `p`."""
    n: int
    p: float

    discrete = True

    def __post_init__(self) -> None:
        if (isinstance(self.n, bool)
                or not isinstance(self.n, (int, np.integer))
                or self.n < 0):
            raise InvalidParameterError(
                f"Binomial: n must be a non-negative integer, got {self.n!r}"
            )
        if not (isinstance(self.p, (int, float, np.integer, np.floating))
                and 0.0 <= self.p <= 1.0):
            raise InvalidParameterError(
                f"Binomial: p must lie in [0, 1], got {self.p!r}"
            )

    @property
    def name(self) -> str:
        return 'binomial'

    @property
    def support(self) -> tuple[float, float]:
        return (0.0, float(self.n))

    def _scipy(self) -> tuple[Any, tuple[float, ...]]:
        return sp_stats.binom, (self.n, self.p)

    def _draw(self, rng: np.random.Generator, n: int) -> NDArray:
        return rng.binomial(self.n, self.p, size=n)


@dataclass(frozen=True)
class Poisson(Distribution):
    """Poisson distribution with rate `lam`."""
    lam: float

    discrete = True

    def __post_init__(self) -> None:
        _require_positive(self.lam, 'lam', 'Poisson')

    @property
    def name(self) -> str:
        return 'poisson'

    @property
    def support(self) -> tuple[float, float]:
        return (0.0, math.inf)

    def _scipy(self) -> tuple[Any, tuple[float, ...]]:
        return sp_stats.poisson, (self.lam,)

    def _draw(self, rng: np.random.Generator, n: int) -> NDArray:
        return rng.poisson(self.lam, size=n)
