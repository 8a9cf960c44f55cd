"""
Input validation utilities for statinfer.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from statinfer.core.exceptions import (
    ValidationError,
    DimensionMismatchError,
    InsufficientDataError,
    EmptyInputError,
    InvalidParameterError,
    DomainError,
    SingularMatrixError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Booleans are accepted as 0/1 indicators
    if result.dtype == np.bool_:
        result = result.astype(np.float64)

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionMismatchError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionMismatchError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionMismatchError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionMismatchError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Zero-length input raises EmptyInputError, which is itself an
    InsufficientDataError.

    Raises:
        InsufficientDataError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n == 0 and min_samples > 0:
        raise EmptyInputError(
            f"{name}: requires at least {min_samples} samples, got 0",
            required=min_samples,
        )
    if n < min_samples:
        raise InsufficientDataError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            n=n,
            required=min_samples,
        )


def check_sample(
    x: ArrayLike,
    name: str,
    min_samples: int = 1,
) -> NDArray[np.floating[Any]]:
    """
    Convert and validate a 1D numeric sample.

    Combines check_array, check_1d, check_finite and check_min_samples.
    Returns a copy so callers can never mutate the input through the result.
    """
    arr = check_array(x, name)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    check_1d(arr, name)
    check_min_samples(arr, min_samples, name)
    check_finite(arr, name)
    return arr.copy()


def check_replicates(R: int, name: str = 'R') -> int:
    """
    Verify a replicate/iteration count is a positive integer.

    Raises:
        InvalidParameterError: If R is not an integer >= 1
    """
    if isinstance(R, bool) or not isinstance(R, (int, np.integer)):
        raise InvalidParameterError(f"{name} must be an integer, got {R!r}")
    if R < 1:
        raise InvalidParameterError(f"{name} must be >= 1, got {R}")
    return int(R)


def check_conf_level(conf_level: float, name: str = 'conf_level') -> float:
    """
    Verify a confidence level lies strictly inside (0, 1).

    Raises:
        InvalidParameterError: If conf_level is outside (0, 1)
    """
    if not (0.0 < conf_level < 1.0):
        raise InvalidParameterError(
            f"{name} must be in (0, 1), got {conf_level}"
        )
    return float(conf_level)


def check_probabilities(p: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Verify values are probabilities in [0, 1].

    Raises:
        DomainError: If any value is NaN or outside [0, 1]
    """
    arr = check_array(p, name)
    if np.any(np.isnan(arr)) or np.any(arr < 0.0) or np.any(arr > 1.0):
        bad = arr[np.isnan(arr) | (arr < 0.0) | (arr > 1.0)]
        raise DomainError(
            f"{name}: probabilities must lie in [0, 1], got {bad.tolist()}"
        )
    return arr


def check_column_rank(rank: int, p: int, name: str) -> None:
    """
    Verify a numerical rank equals the number of columns.

    Raises:
        SingularMatrixError: If the matrix is rank-deficient
    """
    if rank < p:
        raise SingularMatrixError(
            f"{name}: rank-deficient (rank={rank}, expected={p}). "
            f"This indicates perfect multicollinearity.",
            matrix_name=name,
            rank=rank,
            expected_rank=p,
        )
