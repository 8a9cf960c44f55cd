"""
Exception hierarchy for statinfer.

All exceptions inherit from StatInferError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class StatInferError(Exception):
    """Base exception for all statinfer errors."""
    pass


class ValidationError(StatInferError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InsufficientDataError(ValidationError):
    """
    Sample is too small for the requested statistic.

    Attributes:
        n: Number of observations supplied
        required: Minimum number of observations needed
    """

    def __init__(
        self,
        message: str,
        n: int | None = None,
        required: int | None = None
    ):
        super().__init__(message)
        self.n = n
        self.required = required


class EmptyInputError(InsufficientDataError):
    """
    A zero-length collection was supplied where data is required.

    Raised by multiple-testing correction and resampling on empty input.
    """

    def __init__(self, message: str, required: int = 1):
        super().__init__(message, n=0, required=required)


class InvalidParameterError(ValidationError):
    """
    A configuration parameter is out of range or unknown.

    Examples: replicate count <= 0, confidence level outside (0, 1),
    unknown correction method.
    """
    pass


class DomainError(ValidationError):
    """
    Argument lies outside the domain of the function.

    Raised for values outside a distribution's support and for
    probabilities outside [0, 1].
    """
    pass


class DimensionMismatchError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, when
    multiple arrays have inconsistent lengths, or when a design matrix
    does not have more rows than columns.
    """
    pass


class NumericalError(StatInferError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or numerically rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Numerical rank, if computed
        expected_rank: Expected rank (number of columns for a design matrix)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank


class DegenerateResponseError(NumericalError):
    """
    Response vector is constant, so the total sum of squares is zero.

    R² is undefined in this case.
    """
    pass


class ConvergenceError(StatInferError):
    """
    Iterative algorithm failed to converge.

    Raised when an iterative solve (e.g. inverse-CDF root finding) fails
    to meet its tolerance within the maximum number of iterations.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final bracket width or parameter change
        reason: Why convergence failed (e.g. 'max_iterations', 'no_bracket')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
