"""
Monte Carlo inference.

Provides nonparametric bootstrap (with percentile, basic and normal
intervals) and two-sample permutation testing.

Usage:
    from statinfer.montecarlo import bootstrap, bootstrap_ci, permutation_test

    # Bootstrap
    result = bootstrap(data, np.median, R=999, seed=42)
    ci_result = bootstrap_ci(result, type="perc")

    # Permutation test
    result = permutation_test(x, y, R=9999, seed=42)
"""

from statinfer.montecarlo.design import (
    BootstrapDesign,
    PermutationDesign,
    mean_diff,
)
from statinfer.montecarlo.solution import BootstrapSolution, PermutationSolution
from statinfer.montecarlo.solvers import bootstrap, bootstrap_ci, permutation_test

__all__ = [
    "bootstrap",
    "bootstrap_ci",
    "permutation_test",
    "mean_diff",
    "BootstrapDesign",
    "PermutationDesign",
    "BootstrapSolution",
    "PermutationSolution",
]
