"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from statinfer.core.exceptions import DegenerateResponseError, DimensionMismatchError
from statinfer.core.result import Result
from statinfer.core.validation import check_array, check_conf_level, check_finite
from statinfer.distributions import FDist, StudentT

if TYPE_CHECKING:
    from statinfer.regression.design import Design


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for linear regression.

    This is the immutable data computed by backends. cov_unscaled is
    (X'X)⁻¹, from which the covariance at any residual variance (and so
    any confidence level) is rebuilt without refitting.
    """
    coefficients: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    rss: float
    tss: float
    rank: int
    df_residual: int
    cov_unscaled: NDArray[np.floating[Any]]


@dataclass
class LinearSolution:
    """
    User-facing regression results.

    Wraps the backend Result and provides convenient accessors
    for all regression outputs including standard errors, t-statistics,
    p-values and confidence intervals.
    """
    _result: Result[LinearParams]
    _design: 'Design'

    # Cached computations
    _standard_errors: NDArray[np.floating[Any]] | None = None
    _t_statistics: NDArray[np.floating[Any]] | None = None

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def rss(self) -> float:
        """Residual sum of squares."""
        return self._result.params.rss

    @property
    def tss(self) -> float:
        """Total sum of squares about the mean of y."""
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        """
        Coefficient of determination 1 - RSS/TSS.

        Raises:
            DegenerateResponseError: If the response is constant (TSS == 0)
        """
        if self.tss == 0:
            raise DegenerateResponseError(
                "R-squared is undefined for a constant response (TSS = 0)"
            )
        return 1.0 - (self.rss / self.tss)

    @property
    def adjusted_r_squared(self) -> float:
        """
        R-squared penalised for the number of columns.

        1 - (1 - R²)(n - k)/(n - p), with k = 1 for a model with an
        intercept and 0 otherwise.
        """
        n = self._design.n
        p = self.rank
        k = 1 if self.has_intercept else 0
        return 1.0 - (1.0 - self.r_squared) * (n - k) / (n - p)

    @property
    def rse(self) -> float:
        """Residual standard error sqrt(RSS / (n - p))."""
        return float(np.sqrt(self.rss / self.df_residual))

    @property
    def sigma(self) -> float:
        """Alias of rse, as in R's summary.lm."""
        return self.rse

    @property
    def cov_unscaled(self) -> NDArray[np.floating[Any]]:
        """(X'X)⁻¹."""
        return self._result.params.cov_unscaled

    @property
    def vcov(self) -> NDArray[np.floating[Any]]:
        """Coefficient covariance matrix RSE² (X'X)⁻¹."""
        return (self.rss / self.df_residual) * self.cov_unscaled

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """
        Standard errors of coefficients.

        Computed as SE(β) = sqrt(diag(σ² (X'X)⁻¹))
        """
        if self._standard_errors is None:
            self._standard_errors = np.sqrt(np.diag(self.vcov))
        return self._standard_errors

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        """t-statistics for coefficients; NaN where SE is zero."""
        if self._t_statistics is not None:
            return self._t_statistics

        se = self.standard_errors
        with np.errstate(divide='ignore', invalid='ignore'):
            t = self.coefficients / se
            t = np.where(np.isfinite(t), t, np.nan)
        self._t_statistics = t
        return self._t_statistics

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values from the t distribution with n - p df."""
        t = self.t_statistics
        p = np.full(t.shape, np.nan, dtype=np.float64)
        ok = np.isfinite(t)
        if np.any(ok):
            tail = StudentT(self.df_residual).cumulative(
                np.abs(t[ok]), upper_tail=True
            )
            p[ok] = np.minimum(2.0 * tail, 1.0)
        return p

    def conf_int(self, conf_level: float = 0.95) -> NDArray[np.floating[Any]]:
        """
        Confidence intervals for the coefficients.

        β ± t_{1-α/2, n-p} · SE, where α = 1 - conf_level.

        Args:
            conf_level: Confidence level in (0, 1)

        Returns:
            Array of shape (p, 2): lower and upper bounds per coefficient

        Raises:
            InvalidParameterError: If conf_level is outside (0, 1)
        """
        conf_level = check_conf_level(conf_level)
        alpha = 1.0 - conf_level
        q = StudentT(self.df_residual).quantile_of(1.0 - alpha / 2.0)
        half = q * self.standard_errors
        return np.column_stack([self.coefficients - half, self.coefficients + half])

    @property
    def f_statistic(self) -> float:
        """
        Overall F statistic against the intercept-only (or empty) model.

        NaN for an intercept-only model.
        """
        df1, df2 = self.f_df
        if df1 <= 0:
            return float('nan')
        fitted = self.fitted_values
        if self.has_intercept:
            mss = float(np.sum((fitted - np.mean(fitted)) ** 2))
        else:
            mss = float(fitted @ fitted)
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(mss / df1) / np.float64(self.rss / df2))

    @property
    def f_df(self) -> tuple[int, int]:
        """Numerator and denominator degrees of freedom of the F test."""
        k = 1 if self.has_intercept else 0
        return self.rank - k, self.df_residual

    @property
    def f_p_value(self) -> float:
        """Upper-tail p-value of the overall F statistic."""
        f = self.f_statistic
        if not np.isfinite(f):
            return 0.0 if f == np.inf else float('nan')
        df1, df2 = self.f_df
        return FDist(df1, df2).cumulative(f, upper_tail=True)

    def predict(self, X_new: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Predicted response for new rows.

        Args:
            X_new: Matrix (m x p) with the same column layout as the
                fitted X. A 1D input is one row, or one column when p == 1.

        Raises:
            DimensionMismatchError: If the column count differs from p
        """
        X_arr = check_array(X_new, 'X_new')
        p = self._design.p
        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1) if p == 1 else X_arr.reshape(1, -1)
        if X_arr.ndim != 2 or X_arr.shape[1] != p:
            raise DimensionMismatchError(
                f"X_new: expected {p} columns, got shape {X_arr.shape}"
            )
        check_finite(X_arr, 'X_new')
        return X_arr @ self.coefficients

    @property
    def has_intercept(self) -> bool:
        return self._design.has_intercept

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def p(self) -> int:
        return self._design.p

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        return self._result.has_warning(substring)

    def summary(self) -> str:
        """Generate R-style summary output."""
        lines = [
            "Linear Regression Results",
            "=" * 72,
            f"Observations: {self.n}",
            f"Predictors: {self.p}",
            "",
            "Coefficients:",
            "-" * 72,
            f"{'':<8} {'Estimate':>14} {'Std.Error':>12} {'t value':>10} {'Pr(>|t|)':>12}",
            "-" * 72,
        ]

        for i, (coef, se, t, pv) in enumerate(zip(
            self.coefficients, self.standard_errors,
            self.t_statistics, self.p_values,
        )):
            t_str = f"{t:10.3f}" if not np.isnan(t) else f"{'NA':>10}"
            p_str = f"{pv:12.4g}" if not np.isnan(pv) else f"{'NA':>12}"
            lines.append(f"{'b[' + str(i) + ']':<8} {coef:14.6f} {se:12.6f} {t_str} {p_str}")

        lines.append("-" * 72)
        lines.append(
            f"Residual standard error: {self.rse:.6g} on {self.df_residual} degrees of freedom"
        )
        if self.tss > 0:
            lines.append(
                f"Multiple R-squared: {self.r_squared:.6f}, "
                f"Adjusted R-squared: {self.adjusted_r_squared:.6f}"
            )
        else:
            lines.append("Multiple R-squared: NA (constant response)")

        df1, df2 = self.f_df
        if df1 > 0:
            lines.append(
                f"F-statistic: {self.f_statistic:.6g} on {df1} and {df2} DF, "
                f"p-value: {self.f_p_value:.4g}"
            )

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(n={self.n}, p={self.p}, "
            f"backend={self.backend_name!r})"
        )
