"""
Regression Design.

Design holds the validated design matrix X and response y for an
ordinary least squares fit. The caller supplies an intercept column of
ones if one is wanted; none is injected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from statinfer.core.exceptions import DimensionMismatchError
from statinfer.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_1d,
    check_consistent_length,
)


@dataclass(frozen=True)
class Design:
    """
    Regression design matrix specification.

    Immutable after construction.

    Construction:
        Design.from_arrays(X, y)
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int

    @classmethod
    def from_arrays(cls, X: ArrayLike, y: ArrayLike) -> Design:
        """
        Build Design directly from arrays.

        A 1D X is treated as a single column; an (n, 1) y is flattened.

        Raises:
            ValidationError: If X or y is non-numeric or non-finite
            DimensionMismatchError: If len(y) != n, or n <= p
        """
        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')

        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()

        check_2d(X_arr, 'X')
        check_1d(y_arr, 'y')
        check_consistent_length(X_arr, y_arr, names=('X', 'y'))
        check_finite(X_arr, 'X')
        check_finite(y_arr, 'y')

        n, p = X_arr.shape
        if p == 0:
            raise DimensionMismatchError("X: must have at least one column")
        if n <= p:
            raise DimensionMismatchError(
                f"X: need more observations than columns, got n={n}, p={p}"
            )

        return cls(_X=X_arr.copy(), _y=y_arr.copy(), _n=n, _p=p)

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix (n x p)."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of columns of X, intercept included."""
        return self._p

    @property
    def intercept_column(self) -> int | None:
        """Index of the first nonzero constant column, or None."""
        for j in range(self._p):
            col = self._X[:, j]
            if col[0] != 0.0 and np.all(col == col[0]):
                return j
        return None

    @property
    def has_intercept(self) -> bool:
        """True if X contains a nonzero constant column."""
        return self.intercept_column is not None
