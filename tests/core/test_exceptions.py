"""
Tests for the statinfer exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via StatInferError)
    - Diagnostic attributes on InsufficientDataError, SingularMatrixError,
      ConvergenceError
    - Default attribute values (None for optional attributes)
"""

import pytest

from statinfer.core.exceptions import (
    ConvergenceError,
    DegenerateResponseError,
    DimensionMismatchError,
    DomainError,
    EmptyInputError,
    InsufficientDataError,
    InvalidParameterError,
    NumericalError,
    SingularMatrixError,
    StatInferError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via StatInferError."""

    @pytest.mark.parametrize("exc_type", [
        InsufficientDataError,
        EmptyInputError,
        InvalidParameterError,
        DomainError,
        DimensionMismatchError,
    ])
    def test_input_errors_are_validation_errors(self, exc_type):
        with pytest.raises(ValidationError):
            raise exc_type("bad input")

    def test_empty_input_is_insufficient_data(self):
        with pytest.raises(InsufficientDataError):
            raise EmptyInputError("empty")

    @pytest.mark.parametrize("exc_type", [SingularMatrixError, DegenerateResponseError])
    def test_numerical_errors(self, exc_type):
        with pytest.raises(NumericalError):
            raise exc_type("numerical")

    def test_everything_is_statinfer_error(self):
        for exc in (
            ValidationError("v"),
            NumericalError("n"),
            ConvergenceError("c", iterations=3),
        ):
            assert isinstance(exc, StatInferError)

    def test_convergence_error_is_not_numerical_error(self):
        err = ConvergenceError("did not converge", iterations=100)
        assert not isinstance(err, NumericalError)

    def test_validation_is_not_numerical(self):
        assert not isinstance(ValidationError("x"), NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_insufficient_data_attributes(self):
        err = InsufficientDataError("too few", n=1, required=2)
        assert err.n == 1
        assert err.required == 2
        assert str(err) == "too few"

    def test_insufficient_data_defaults(self):
        err = InsufficientDataError("too few")
        assert err.n is None
        assert err.required is None

    def test_empty_input_sets_n_zero(self):
        err = EmptyInputError("empty")
        assert err.n == 0
        assert err.required == 1

    def test_singular_matrix_attributes(self):
        err = SingularMatrixError("singular", matrix_name="X", rank=2, expected_rank=3)
        assert err.matrix_name == "X"
        assert err.rank == 2
        assert err.expected_rank == 3

    def test_singular_matrix_defaults(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.rank is None
        assert err.expected_rank is None

    def test_convergence_attributes(self):
        err = ConvergenceError(
            "stuck", iterations=50, final_change=1e-3,
            reason="max_iterations", threshold=1e-10,
        )
        assert err.iterations == 50
        assert err.final_change == 1e-3
        assert err.reason == "max_iterations"
        assert err.threshold == 1e-10

    def test_convergence_defaults(self):
        err = ConvergenceError("stuck", iterations=5)
        assert err.final_change is None
        assert err.reason is None
        assert err.threshold is None
