"""
Monte Carlo backends.

Available backends:
    CPUBootstrapBackend: Ordinary nonparametric bootstrap
    CPUPermutationBackend: Two-sample permutation test
"""

from statinfer.montecarlo.backends.cpu import (
    CPUBootstrapBackend,
    CPUPermutationBackend,
)

__all__ = [
    "CPUBootstrapBackend",
    "CPUPermutationBackend",
]
