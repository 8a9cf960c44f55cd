"""
Core infrastructure for statinfer.

Shared abstractions used by every domain submodule (descriptive,
distributions, montecarlo, regression, hypothesis).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    random: Seeded Generator construction
    compute: Timing, tolerances, linear algebra kernels
"""

from statinfer.core.protocols import Backend
from statinfer.core.result import Result
from statinfer.core.random import make_rng
from statinfer.core.exceptions import (
    StatInferError,
    ValidationError,
    InsufficientDataError,
    EmptyInputError,
    InvalidParameterError,
    DomainError,
    DimensionMismatchError,
    NumericalError,
    SingularMatrixError,
    DegenerateResponseError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Random
    "make_rng",
    # Exceptions
    "StatInferError",
    "ValidationError",
    "InsufficientDataError",
    "EmptyInputError",
    "InvalidParameterError",
    "DomainError",
    "DimensionMismatchError",
    "NumericalError",
    "SingularMatrixError",
    "DegenerateResponseError",
    "ConvergenceError",
]
