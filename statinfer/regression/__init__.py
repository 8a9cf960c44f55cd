"""
Ordinary least squares linear models.

Public API:
    fit(X, y, ...) -> LinearSolution

The fit() function is the only entry point. It handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from statinfer.regression import fit
    >>> result = fit(X, y)
    >>> print(result.coefficients)
    >>> print(result.conf_int(0.95))
    >>> print(result.summary())
"""

from statinfer.regression.design import Design
from statinfer.regression.solution import LinearSolution, LinearParams
from statinfer.regression.solvers import fit

__all__ = [
    "fit",
    "Design",
    "LinearSolution",
    "LinearParams",
]
