"""
CPU reference backend for linear regression.

Uses Householder QR via LAPACK (through NumPy) and triangular back
substitution (through SciPy), replicating R's lm() behavior for
full-rank designs.
"""

from typing import Any
import numpy as np

from statinfer.core.result import Result
from statinfer.core.compute.timing import Timer
from statinfer.core.compute.linalg.qr import (
    qr_cpu,
    qr_solve_cpu,
    qr_unscaled_covariance,
)
from statinfer.regression.design import Design
from statinfer.regression.solution import LinearParams


# Residual variance below this fraction of the fitted signal is a
# perfect fit, as in R's summary.lm
_PERFECT_FIT_RTOL = 1e-30


class CPUQRBackend:
    """
    CPU backend using QR decomposition.

    Implements the Backend protocol for Design -> LinearParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_qr'

    def solve(self, design: Design) -> Result[LinearParams]:
        """
        Solve OLS via QR decomposition.

        Algorithm:
            1. Compute QR decomposition: X = QR
            2. Solve: β = R⁻¹ Q'y
            3. Compute residuals, fitted values, and diagnostics
            4. Compute (X'X)⁻¹ = R⁻¹ R⁻ᵀ

        Args:
            design: Validated regression design

        Returns:
            Result containing LinearParams

        Raises:
            SingularMatrixError: If X is rank-deficient
        """
        timer = Timer()
        timer.start()

        X = design.X
        y = design.y
        n = design.n

        # === QR Decomposition and Solve ===
        with timer.section('qr_decomposition'):
            qr_result = qr_cpu(X, mode='reduced')

        with timer.section('solve'):
            coefficients = qr_solve_cpu(qr_result, y, check_rank=True)

        # === Compute Residuals and Fitted Values ===
        with timer.section('residuals'):
            fitted_values = X @ coefficients
            residuals = y - fitted_values

        # === Compute Summary Statistics ===
        with timer.section('statistics'):
            rss = float(residuals @ residuals)
            y_mean = np.mean(y)
            tss = float(np.sum((y - y_mean) ** 2))
            cov_unscaled = qr_unscaled_covariance(qr_result)

        timer.stop()

        df_residual = n - qr_result.rank

        warnings_list: list[str] = []
        signal = float(np.mean(fitted_values) ** 2 + np.var(fitted_values))
        if rss / df_residual < _PERFECT_FIT_RTOL * signal:
            warnings_list.append(
                "essentially perfect fit: standard errors and tests are unreliable"
            )

        # === Construct Result ===
        params = LinearParams(
            coefficients=coefficients,
            residuals=residuals,
            fitted_values=fitted_values,
            rss=rss,
            tss=tss,
            rank=qr_result.rank,
            df_residual=df_residual,
            cov_unscaled=cov_unscaled,
        )

        info: dict[str, Any] = {
            'method': 'qr',
            'rank': qr_result.rank,
            'n': n,
            'p': design.p,
            'has_intercept': design.has_intercept,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
