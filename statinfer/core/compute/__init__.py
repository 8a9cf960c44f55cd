"""
Shared compute infrastructure for statinfer.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Solver tolerances and comparison tiers
    linalg: Linear algebra kernels (QR)
"""

from statinfer.core.compute.timing import Timer

__all__ = [
    "Timer",
]
