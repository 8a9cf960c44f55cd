"""
Probability distributions.

Immutable descriptors with a uniform interface:

    d = Normal(mean=20, sd=5)
    d.density(x)                     # pdf / pmf
    d.cumulative(x)                  # P(X <= x)
    d.cumulative(x, upper_tail=True) # P(X > x), computed directly
    d.quantile_of(p)                 # inverse CDF
    d.sample(n, seed=42)             # reproducible variates

Families: Normal, StudentT, Binomial, Poisson, FDist, ChiSquared.
"""

from statinfer.distributions._base import Distribution
from statinfer.distributions.families import (
    Normal,
    StudentT,
    Binomial,
    Poisson,
    FDist,
    ChiSquared,
)

__all__ = [
    "Distribution",
    "Normal",
    "StudentT",
    "Binomial",
    "Poisson",
    "FDist",
    "ChiSquared",
]
