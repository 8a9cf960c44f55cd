"""
Tests for regression fit().

Tests the complete pipeline: Design construction, backend selection,
and solution properties. Inference quantities are cross-checked against
scipy.stats and closed-form expressions.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats as sp_stats

from statinfer.core.exceptions import (
    DegenerateResponseError,
    DimensionMismatchError,
    InvalidParameterError,
    NumericalError,
    SingularMatrixError,
    ValidationError,
)
from statinfer.regression import Design, LinearSolution, fit


# Five points with a known least-squares line: y ~ 2.2 + 0.6 x
X_SMALL = np.column_stack([np.ones(5), [1.0, 2.0, 3.0, 4.0, 5.0]])
Y_SMALL = np.array([2.0, 4.0, 5.0, 4.0, 5.0])


class TestFitBasic:

    def test_fit_from_arrays(self, simple_regression_data):
        X, y, beta_true = simple_regression_data
        result = fit(X, y)
        assert isinstance(result, LinearSolution)
        assert_allclose(result.coefficients, beta_true, atol=0.05)
        assert result.backend_name == "cpu_qr"

    def test_matches_lstsq(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit(X, y)
        expected, *_ = np.linalg.lstsq(X, y, rcond=None)
        assert_allclose(result.coefficients, expected, rtol=1e-10)

    def test_residuals_and_fitted(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit(X, y)
        assert_allclose(result.fitted_values + result.residuals, y)
        assert result.rss == pytest.approx(np.sum(result.residuals ** 2))
        assert result.tss == pytest.approx(np.sum((y - y.mean()) ** 2))

    def test_design_passthrough(self, simple_regression_data):
        X, y, _ = simple_regression_data
        design = Design.from_arrays(X, y)
        assert fit(design).coefficients.shape == (3,)

    def test_1d_x_is_one_column(self):
        result = fit([1.0, 2.0, 3.0, 4.0], [2.0, 4.1, 5.9, 8.0])
        assert result.p == 1
        assert result.coefficients.shape == (1,)

    def test_known_small_example(self):
        # lm(y ~ x) for x = 1:5, y = c(2, 4, 5, 4, 5)
        result = fit(X_SMALL, Y_SMALL)
        assert_allclose(result.coefficients, [2.2, 0.6], rtol=1e-12)
        assert result.rss == pytest.approx(2.4)
        assert result.tss == pytest.approx(6.0)
        assert result.r_squared == pytest.approx(0.6)
        assert result.rse == pytest.approx(np.sqrt(0.8))
        assert result.df_residual == 3

    def test_timing_and_info(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit(X, y)
        assert 'qr_decomposition' in result.timing
        assert result.info['rank'] == 3
        assert result.info['has_intercept'] is True


class TestNoiselessRecovery:
    """Exact data y = b0 + b1 x are recovered exactly."""

    def test_exact_line(self):
        x = np.linspace(-3.0, 7.0, 25)
        X = np.column_stack([np.ones_like(x), x])
        y = 1.5 - 0.75 * x
        result = fit(X, y)

        assert_allclose(result.coefficients, [1.5, -0.75], rtol=1e-12, atol=1e-12)
        assert result.r_squared == pytest.approx(1.0, abs=1e-12)
        assert result.rss == pytest.approx(0.0, abs=1e-20)


class TestInference:

    def test_standard_errors(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit(X, y)
        n, p = X.shape
        sigma2 = result.rss / (n - p)
        expected = np.sqrt(np.diag(sigma2 * np.linalg.inv(X.T @ X)))
        assert_allclose(result.standard_errors, expected, rtol=1e-9)

    def test_t_and_p_values(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit(X, y)
        t = result.coefficients / result.standard_errors
        assert_allclose(result.t_statistics, t)
        expected_p = 2.0 * sp_stats.t.sf(np.abs(t), result.df_residual)
        assert_allclose(result.p_values, expected_p, rtol=1e-10)

    def test_small_example_inference(self):
        result = fit(X_SMALL, Y_SMALL)
        # se(slope) = sqrt(0.8 / 10)
        assert result.standard_errors[1] == pytest.approx(np.sqrt(0.08))
        assert result.t_statistics[1] == pytest.approx(0.6 / np.sqrt(0.08))

    def test_conf_int_matches_t_quantile(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit(X, y)
        ci = result.conf_int(0.95)
        assert ci.shape == (3, 2)
        q = sp_stats.t.ppf(0.975, result.df_residual)
        assert_allclose(ci[:, 0], result.coefficients - q * result.standard_errors, rtol=1e-8)
        assert_allclose(ci[:, 1], result.coefficients + q * result.standard_errors, rtol=1e-8)

    def test_conf_int_from_vcov(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit(X, y)
        assert_allclose(result.vcov, (result.rse ** 2) * result.cov_unscaled)
        assert_allclose(np.sqrt(np.diag(result.vcov)), result.standard_errors)

        wide = result.conf_int(0.99)
        narrow = result.conf_int(0.80)
        assert np.all(wide[:, 0] < narrow[:, 0])
        assert np.all(wide[:, 1] > narrow[:, 1])

    def test_invalid_conf_level(self, simple_regression_data):
        X, y, _ = simple_regression_data
        with pytest.raises(InvalidParameterError):
            fit(X, y).conf_int(1.0)

    def test_adjusted_r_squared(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit(X, y)
        n, p = X.shape
        expected = 1 - (1 - result.r_squared) * (n - 1) / (n - p)
        assert result.adjusted_r_squared == pytest.approx(expected)

    def test_f_statistic(self, simple_regression_data):
        X, y, _ = simple_regression_data
        result = fit(X, y)
        n, p = X.shape
        expected = ((result.tss - result.rss) / (p - 1)) / (result.rss / (n - p))
        assert result.f_statistic == pytest.approx(expected, rel=1e-9)
        assert result.f_df == (2, n - p)
        assert result.f_p_value == pytest.approx(
            sp_stats.f.sf(expected, p - 1, n - p), rel=1e-8, abs=1e-300
        )

    def test_no_intercept_f_uses_uncentered_sum(self, rng):
        X = rng.standard_normal((40, 2))
        y = X @ [1.0, 2.0] + rng.standard_normal(40)
        result = fit(X, y)
        assert not result.has_intercept
        mss = np.sum(result.fitted_values ** 2)
        expected = (mss / 2) / (result.rss / 38)
        assert result.f_statistic == pytest.approx(expected)

    def test_intercept_only_f_is_nan(self, rng):
        y = rng.standard_normal(10)
        result = fit(np.ones((10, 1)), y)
        assert np.isnan(result.f_statistic)
        assert result.coefficients[0] == pytest.approx(y.mean())


class TestPredict:

    def test_predict_rows(self):
        result = fit(X_SMALL, Y_SMALL)
        pred = result.predict([[1.0, 10.0], [1.0, 0.0]])
        assert_allclose(pred, [8.2, 2.2])

    def test_predict_single_row(self):
        result = fit(X_SMALL, Y_SMALL)
        assert_allclose(result.predict([1.0, 2.0]), [3.4])

    def test_predict_wrong_columns(self):
        result = fit(X_SMALL, Y_SMALL)
        with pytest.raises(DimensionMismatchError):
            result.predict(np.ones((2, 3)))


class TestSummary:

    def test_summary_contents(self, simple_regression_data):
        X, y, _ = simple_regression_data
        s = fit(X, y).summary()
        assert "Coefficients" in s
        assert "Pr(>|t|)" in s
        assert "Residual standard error" in s
        assert "F-statistic" in s

    def test_repr(self, simple_regression_data):
        X, y, _ = simple_regression_data
        assert "LinearSolution" in repr(fit(X, y))


class TestFitErrors:

    def test_collinear_raises(self, collinear_data):
        X, y = collinear_data
        with pytest.raises(SingularMatrixError) as exc_info:
            fit(X, y)
        assert exc_info.value.rank == 2
        assert exc_info.value.expected_rank == 3

    def test_singular_is_numerical_error(self, collinear_data):
        X, y = collinear_data
        with pytest.raises(NumericalError):
            fit(X, y)

    def test_duplicate_column(self, rng):
        x = rng.standard_normal(20)
        X = np.column_stack([np.ones(20), x, x])
        with pytest.raises(SingularMatrixError):
            fit(X, rng.standard_normal(20))

    def test_length_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            fit(np.ones((10, 2)), np.ones(9))

    @pytest.mark.parametrize("n", [2, 3])
    def test_n_not_greater_than_p(self, n):
        X = np.arange(n * 3, dtype=float).reshape(n, 3)
        with pytest.raises(DimensionMismatchError):
            fit(X, np.ones(n))

    def test_constant_response(self):
        X = np.column_stack([np.ones(6), np.arange(6.0)])
        result = fit(X, np.full(6, 4.0))
        assert result.tss == 0.0
        with pytest.raises(DegenerateResponseError):
            result.r_squared
        assert "NA" in result.summary()

    def test_nan_rejected(self):
        X = np.column_stack([np.ones(5), [1.0, np.nan, 3.0, 4.0, 5.0]])
        with pytest.raises(ValidationError):
            fit(X, np.ones(5))

    def test_missing_y(self):
        with pytest.raises(InvalidParameterError):
            fit(np.ones((5, 2)))

    def test_unknown_backend(self):
        with pytest.raises(InvalidParameterError):
            fit(X_SMALL, Y_SMALL, backend='gpu')
