"""
statinfer: statistical inference over in-memory numeric data.

Submodules:
    descriptive: Mean, variance, type-7 quantiles, summaries
    distributions: Normal, t, F, chi-squared, binomial and Poisson descriptors
    montecarlo: Bootstrap confidence intervals and permutation tests
    regression: Ordinary least squares via QR
    hypothesis: t-tests and multiple testing correction
"""

__version__ = "0.1.0"

from statinfer import descriptive
from statinfer import distributions
from statinfer import montecarlo
from statinfer import regression
from statinfer import hypothesis

__all__ = [
    "__version__",
    "descriptive",
    "distributions",
    "montecarlo",
    "regression",
    "hypothesis",
]
