"""
Linear algebra kernels for statinfer.

CPU implementations backed by NumPy/SciPy (LAPACK under the hood). Each
operation returns a structured result dataclass and raises immediately
with a clear message on failure.
"""

from statinfer.core.compute.linalg.qr import (
    QRResult,
    qr_cpu,
    qr_solve_cpu,
    qr_unscaled_covariance,
)

__all__ = [
    "QRResult",
    "qr_cpu",
    "qr_solve_cpu",
    "qr_unscaled_covariance",
]
