"""
Solver dispatch for regression.

This module provides the fit() function (public API) and backend selection.
"""

from typing import Literal
from numpy.typing import ArrayLike

from statinfer.core.exceptions import InvalidParameterError
from statinfer.regression.design import Design
from statinfer.regression.solution import LinearSolution
from statinfer.regression.backends.cpu import CPUQRBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_qr']


def fit(
    X: ArrayLike | Design,
    y: ArrayLike | None = None,
    *,
    backend: BackendChoice = 'cpu',
) -> LinearSolution:
    """
    Fit a linear regression model.

    Solves the ordinary least squares problem:
        min_β ||y - Xβ||²

    This is the primary public API for linear regression. All input validation,
    backend selection, and result wrapping happens here.

    Args:
        X: Design matrix (n x p), or a prebuilt Design. Include a column
            of ones for an intercept; none is added.
        y: Response vector (n,). Required unless X is a Design.
        backend: Computational backend to use:
            - 'auto' / 'cpu' / 'cpu_qr': CPU QR decomposition

    Returns:
        LinearSolution with coefficients, diagnostics, and summary methods

    Raises:
        ValidationError: If inputs are invalid
        DimensionMismatchError: If len(y) != n or n <= p
        SingularMatrixError: If X is rank-deficient

    Example:
        >>> import numpy as np
        >>> from statinfer.regression import fit
        >>>
        >>> rng = np.random.default_rng(0)
        >>> X = np.column_stack([np.ones(100), rng.standard_normal((100, 2))])
        >>> y = X @ [1, 2, 3] + rng.standard_normal(100) * 0.1
        >>>
        >>> result = fit(X, y)
        >>> print(result.coefficients)
        >>> print(result.summary())
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(X, Design):
        design = X
    else:
        if y is None:
            raise InvalidParameterError("y is required unless X is a Design")
        design = Design.from_arrays(X, y)

    # === Select Backend ===
    backend_impl = _get_backend(backend)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return LinearSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate backend.

    Raises:
        InvalidParameterError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_qr'):
        return CPUQRBackend()
    raise InvalidParameterError(f"Unknown backend: {choice!r}")
