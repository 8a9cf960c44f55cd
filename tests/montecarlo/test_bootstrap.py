"""
Tests for bootstrap() and bootstrap_ci().
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from statinfer.core.exceptions import (
    DimensionMismatchError,
    EmptyInputError,
    InvalidParameterError,
)
from statinfer.descriptive import quantile
from statinfer.montecarlo import BootstrapDesign, bootstrap, bootstrap_ci


# ---------------------------------------------------------------------------
# bootstrap()
# ---------------------------------------------------------------------------

class TestBootstrap:

    def test_basic_fields(self, rng):
        data = rng.normal(5.0, 2.0, 40)
        result = bootstrap(data, np.mean, R=200, seed=1)

        assert result.t0 == pytest.approx(np.mean(data))
        assert result.replicates.shape == (200,)
        assert result.R == 200
        assert result.mode == "with_replacement"
        assert result.backend_name == "cpu_bootstrap"
        assert result.ci is None

    def test_bias_and_se(self, rng):
        data = rng.normal(0.0, 1.0, 30)
        result = bootstrap(data, np.mean, R=500, seed=2)
        assert result.bias == pytest.approx(np.mean(result.replicates) - result.t0)
        assert result.se == pytest.approx(np.std(result.replicates, ddof=1))

    def test_seed_reproducible(self, rng):
        data = rng.standard_normal(25)
        a = bootstrap(data, np.median, R=100, seed=99)
        b = bootstrap(data, np.median, R=100, seed=99)
        np.testing.assert_array_equal(a.replicates, b.replicates)

    def test_different_seeds_differ(self, rng):
        data = rng.standard_normal(25)
        a = bootstrap(data, np.mean, R=100, seed=1)
        b = bootstrap(data, np.mean, R=100, seed=2)
        assert not np.array_equal(a.replicates, b.replicates)

    def test_replicates_are_resample_statistics(self):
        # With a single distinct value every resample has the same mean
        result = bootstrap([3.0, 3.0, 3.0], np.mean, R=20, seed=0)
        assert_allclose(result.replicates, 3.0)
        assert result.se == 0.0

    def test_resamples_drawn_from_data(self):
        data = np.array([1.0, 10.0, 100.0])
        result = bootstrap(data, np.max, R=50, seed=5)
        assert set(np.unique(result.replicates)) <= {1.0, 10.0, 100.0}

    def test_2d_rows_resampled(self, rng):
        data = rng.standard_normal((30, 2))

        def corr(d):
            return np.corrcoef(d[:, 0], d[:, 1])[0, 1]

        result = bootstrap(data, corr, R=50, seed=3)
        assert result.replicates.shape == (50,)
        assert np.all(np.abs(result.replicates) <= 1.0 + 1e-12)

    def test_single_replicate_warns_in_result(self):
        result = bootstrap([1.0, 2.0, 3.0], np.mean, R=1, seed=0)
        assert np.isnan(result.se)
        assert result.has_warning("single replicate")

    def test_info_records_seed(self):
        result = bootstrap([1.0, 2.0, 3.0], R=5, seed=11)
        assert result.info['seed'] == 11
        assert result.info['n'] == 3

    def test_design_passthrough(self):
        design = BootstrapDesign.for_bootstrap([1.0, 2.0, 3.0], np.mean, 10, seed=4)
        result = bootstrap(design)
        assert result.R == 10
        assert result.seed == 4

    def test_timing_recorded(self):
        result = bootstrap([1.0, 2.0, 3.0], R=5, seed=0)
        assert 'bootstrap_replicates' in result.timing

    def test_summary(self, rng):
        result = bootstrap(rng.standard_normal(20), R=50, seed=0)
        s = result.summary()
        assert "ORDINARY NONPARAMETRIC BOOTSTRAP" in s
        assert "std. error" in s
        assert "BootstrapSolution" in repr(result)


class TestBootstrapValidation:

    @pytest.mark.parametrize("R", [0, -1])
    def test_invalid_R(self, R):
        with pytest.raises(InvalidParameterError):
            bootstrap([1.0, 2.0], R=R)

    def test_empty_data(self):
        with pytest.raises(EmptyInputError):
            bootstrap([], R=10)

    def test_scalar_data(self):
        with pytest.raises(DimensionMismatchError):
            bootstrap(5.0, R=10)

    def test_statistic_not_callable(self):
        with pytest.raises(InvalidParameterError):
            bootstrap([1.0, 2.0], statistic="mean", R=10)

    def test_unknown_backend(self):
        with pytest.raises(InvalidParameterError):
            bootstrap([1.0, 2.0], R=10, backend='gpu')


# ---------------------------------------------------------------------------
# bootstrap_ci()
# ---------------------------------------------------------------------------

class TestBootstrapCI:

    def test_percentile_is_replicate_quantiles(self, rng):
        data = rng.normal(10.0, 3.0, 50)
        result = bootstrap_ci(data, np.mean, R=999, seed=7)
        expected = quantile(result.replicates, [0.025, 0.975])
        assert_allclose(result.interval, expected)
        assert result.lower == pytest.approx(expected[0])
        assert result.upper == pytest.approx(expected[1])
        assert result.ci_conf_level == 0.95

    def test_same_seed_same_interval(self, rng):
        data = rng.standard_normal(30)
        a = bootstrap_ci(data, R=300, seed=123)
        b = bootstrap_ci(data, R=300, seed=123)
        np.testing.assert_array_equal(a.interval, b.interval)

    def test_reuses_existing_solution(self, rng):
        boot = bootstrap(rng.standard_normal(30), R=300, seed=5)
        result = bootstrap_ci(boot, conf_level=0.9)
        np.testing.assert_array_equal(result.replicates, boot.replicates)
        assert_allclose(result.interval, quantile(boot.replicates, [0.05, 0.95]))

    def test_wider_at_higher_level(self, rng):
        boot = bootstrap(rng.standard_normal(40), R=500, seed=8)
        narrow = bootstrap_ci(boot, conf_level=0.8).interval
        wide = bootstrap_ci(boot, conf_level=0.99).interval
        assert wide[0] <= narrow[0]
        assert wide[1] >= narrow[1]

    def test_basic_reflects_percentile(self, rng):
        boot = bootstrap(rng.standard_normal(40), R=400, seed=9)
        result = bootstrap_ci(boot, type=["perc", "basic"])
        perc = result.ci["perc"]
        basic = result.ci["basic"]
        assert_allclose(basic, [2 * result.t0 - perc[1], 2 * result.t0 - perc[0]])

    def test_normal_interval(self, rng):
        boot = bootstrap(rng.standard_normal(40), R=400, seed=10)
        result = bootstrap_ci(boot, type="normal")
        lo, hi = result.ci["normal"]
        center = 2 * result.t0 - np.mean(result.replicates)
        assert (lo + hi) / 2 == pytest.approx(center)
        assert (hi - lo) / 2 == pytest.approx(1.959963984540054 * result.se, rel=1e-9)

    @pytest.mark.parametrize("level", [0.0, 1.0, 1.2])
    def test_invalid_conf_level(self, level):
        with pytest.raises(InvalidParameterError):
            bootstrap_ci([1.0, 2.0, 3.0], R=10, conf_level=level)

    def test_unknown_type(self):
        with pytest.raises(InvalidParameterError):
            bootstrap_ci([1.0, 2.0, 3.0], R=10, type="bca")

    def test_summary_lists_interval(self, rng):
        result = bootstrap_ci(rng.standard_normal(20), R=100, seed=1)
        assert "95% perc CI" in result.summary()


class TestBootstrapCoverage:
    """The 95% percentile interval for the mean covers the true mean."""

    def test_coverage_of_normal_mean(self):
        master = np.random.default_rng(2024)
        trials = 300
        covered = 0
        for _ in range(trials):
            data = master.normal(20.0, 5.0, 50)
            seed = int(master.integers(0, 2**31))
            result = bootstrap_ci(data, np.mean, R=400, seed=seed)
            if result.lower <= 20.0 <= result.upper:
                covered += 1
        rate = covered / trials
        assert 0.88 <= rate <= 0.99
