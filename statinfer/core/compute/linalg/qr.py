"""
QR decomposition for least squares.

Householder QR via LAPACK (through NumPy), with numerical rank read off
the R diagonal and triangular solves via SciPy. Used by the regression
backend for coefficients and the unscaled covariance (X'X)⁻¹.
"""

from dataclasses import dataclass
from typing import Literal, Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from statinfer.core.validation import check_column_rank


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthogonal matrix (n x k where k = min(n, p) for reduced mode)
        R: Upper triangular matrix (k x p)
        rank: Numerical rank determined from R diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


def qr_cpu(
    X: NDArray[np.floating[Any]],
    mode: Literal['reduced', 'complete'] = 'reduced'
) -> QRResult:
    """
    QR decomposition using LAPACK (via NumPy).

    Computes X = QR where Q is orthogonal and R is upper triangular.

    Args:
        X: Matrix to decompose (n x p)
        mode: 'reduced' for economy QR (Q is n x k, R is k x p where k = min(n,p))
              'complete' for full QR (Q is n x n, R is n x p)

    Returns:
        QRResult with Q, R, and numerical rank
    """
    Q, R = np.linalg.qr(X, mode=mode)

    # Numerical rank from the R diagonal, relative to its largest entry
    diag_R = np.abs(np.diag(R))
    if len(diag_R) > 0 and diag_R.max() > 0:
        tol = max(X.shape) * np.finfo(X.dtype).eps * diag_R.max()
        rank = int(np.sum(diag_R > tol))
    else:
        rank = 0

    return QRResult(Q=Q, R=R, rank=rank)


def qr_solve_cpu(
    qr_result: QRResult,
    y: NDArray[np.floating[Any]],
    check_rank: bool
) -> NDArray[np.floating[Any]]:
    """
    Solve least squares from an existing QR decomposition.

    Solves: min_β ||y - Xβ||² where X = QR, as

        β = R⁻¹ Q'y

    Args:
        qr_result: Reduced QR of the design matrix (n x p, n > p)
        y: Response vector (n,)
        check_rank: If True, raise SingularMatrixError on rank-deficient X

    Returns:
        Coefficient vector β (p,)

    Raises:
        SingularMatrixError: If X is rank-deficient and check_rank=True
    """
    p = qr_result.R.shape[1]

    if check_rank:
        check_column_rank(qr_result.rank, p, 'X')

    Qty = qr_result.Q.T @ y
    return solve_triangular(qr_result.R[:p, :p], Qty[:p], lower=False)


def qr_unscaled_covariance(qr_result: QRResult) -> NDArray[np.floating[Any]]:
    """
    Compute (X'X)⁻¹ from the R factor without forming X'X.

    X'X = R'R, so (X'X)⁻¹ = R⁻¹ R⁻ᵀ. Inverting the triangular factor
    keeps the condition number at cond(X) instead of cond(X)².

    Args:
        qr_result: Reduced QR of a full-column-rank matrix

    Returns:
        Symmetric p x p matrix (X'X)⁻¹
    """
    p = qr_result.R.shape[1]
    R = qr_result.R[:p, :p]
    R_inv = solve_triangular(R, np.eye(p), lower=False)
    cov = R_inv @ R_inv.T
    # Symmetrize away rounding asymmetry
    return (cov + cov.T) / 2.0
