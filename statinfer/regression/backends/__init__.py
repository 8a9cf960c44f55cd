"""
Least-squares backends for regression.fit().

    CPUQRBackend ('cpu_qr'): Householder QR with a rank check
"""

from statinfer.regression.backends.cpu import CPUQRBackend

__all__ = ["CPUQRBackend"]
