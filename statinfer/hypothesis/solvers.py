"""
Solver dispatch for hypothesis tests.

Provides t_test() and re-exports adjust() for convenience.
"""

from __future__ import annotations

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from statinfer.core.exceptions import InvalidParameterError
from statinfer.hypothesis.design import HypothesisDesign
from statinfer.hypothesis.solution import HTestSolution
from statinfer.hypothesis.backends.cpu import CPUHypothesisBackend
from statinfer.hypothesis._adjust import adjust  # re-export


def _get_backend(backend: str = 'cpu'):
    if backend in ('cpu', 'auto'):
        return CPUHypothesisBackend()
    raise InvalidParameterError(
        f"Unknown backend: {backend!r}. Only 'cpu' is available."
    )


def t_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    alternative: Literal["two.sided", "less", "greater"] = "two.sided",
    mu: float = 0.0,
    paired: bool = False,
    var_equal: bool = False,
    conf_level: float = 0.95,
    backend: str = 'cpu',
) -> HTestSolution:
    """
    t-test for one mean, two means or paired differences, as R t.test().

    With two samples the default is Welch's test: variances are not
    pooled and the degrees of freedom come from the Welch-Satterthwaite
    approximation, left fractional. `var_equal=True` pools the variances
    and `paired=True` tests the mean of x - y.

    `mu` is the hypothesised mean, or difference in means. A prebuilt
    HypothesisDesign may be passed as `x`, in which case the remaining
    keyword arguments are ignored.

    Constant data give a NaN statistic, a RuntimeWarning and an entry in
    `warnings` rather than an error.

    Raises:
        InsufficientDataError: If a sample has fewer than 2 values
        DimensionMismatchError: If paired samples differ in length
        InvalidParameterError: For an unknown alternative or backend, or
            conf_level outside (0, 1)
        ValidationError: If a sample contains NaN or Inf
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_t_test(
            x, y,
            mu=mu,
            paired=paired,
            var_equal=var_equal,
            alternative=alternative,
            conf_level=conf_level,
        )

    be = _get_backend(backend)
    result = be.solve(design)

    if result.has_warning("essentially constant"):
        warnings.warn(
            "t-test data are essentially constant; statistic is NaN",
            RuntimeWarning,
            stacklevel=2,
        )

    return HTestSolution(_result=result, _design=design)
