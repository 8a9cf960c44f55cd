"""
Tests for adjust() matching R p.adjust().

R reference values computed in R 4.x.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from statinfer.core.exceptions import (
    DimensionMismatchError,
    DomainError,
    EmptyInputError,
    InvalidParameterError,
)
from statinfer.hypothesis import adjust


PV1 = np.array([0.001, 0.01, 0.05, 0.1, 0.5, 0.9])
R_BH_1 = np.array([0.006, 0.03, 0.1, 0.15, 0.6, 0.9])
R_BONFERRONI_1 = np.array([0.006, 0.06, 0.3, 0.6, 1.0, 1.0])

PV2 = np.array([0.01, 0.04, 0.03, 0.005])
R_BH_2 = np.array([0.02, 0.04, 0.04, 0.02])
R_BONFERRONI_2 = np.array([0.04, 0.16, 0.12, 0.02])

SCENARIO = [0.01, 0.02, 0.03, 0.04, 0.50]


class TestAdjustMethods:

    def test_bh(self):
        assert_allclose(adjust(PV1, method="BH"), R_BH_1, rtol=1e-10)

    def test_bh_is_default(self):
        assert_allclose(adjust(PV1), R_BH_1, rtol=1e-10)

    def test_fdr_alias(self):
        assert_allclose(adjust(PV1, method="fdr"), R_BH_1, rtol=1e-10)

    def test_bonferroni(self):
        assert_allclose(adjust(PV1, method="bonferroni"), R_BONFERRONI_1, rtol=1e-10)

    def test_unsorted_input_order_preserved(self):
        assert_allclose(adjust(PV2, method="BH"), R_BH_2, rtol=1e-10)
        assert_allclose(adjust(PV2, method="bonferroni"), R_BONFERRONI_2, rtol=1e-10)


class TestScenario:
    """p = [0.01, 0.02, 0.03, 0.04, 0.50], m = 5."""

    def test_bonferroni(self):
        assert_allclose(
            adjust(SCENARIO, method="bonferroni"),
            [0.05, 0.10, 0.15, 0.20, 1.00],
            rtol=1e-12,
        )

    def test_bh(self):
        assert_allclose(
            adjust(SCENARIO, method="BH"),
            [0.05, 0.05, 0.05, 0.05, 0.50],
            rtol=1e-12,
        )


class TestAdjustProperties:

    def test_bh_never_exceeds_bonferroni(self, rng):
        for _ in range(50):
            p = rng.uniform(0.0, 1.0, rng.integers(1, 40))
            assert np.all(adjust(p, "BH") <= adjust(p, "bonferroni") + 1e-15)

    def test_bh_monotone_in_sorted_order(self, rng):
        p = rng.uniform(0.0, 0.2, 30)
        order = np.argsort(p)
        adjusted = adjust(p, "BH")[order]
        assert np.all(np.diff(adjusted) >= 0.0)

    def test_adjusted_at_least_raw(self, rng):
        p = rng.uniform(0.0, 1.0, 25)
        for method in ("BH", "bonferroni"):
            assert np.all(adjust(p, method) >= p)

    def test_clipped_to_unit_interval(self):
        adjusted = adjust([0.3, 0.6, 0.9], "bonferroni")
        assert np.all(adjusted <= 1.0)
        assert adjusted[1] == 1.0

    def test_single_value_unchanged(self):
        assert_allclose(adjust([0.03]), [0.03])
        assert_allclose(adjust([0.03], "bonferroni"), [0.03])

    def test_ties(self):
        assert_allclose(adjust([0.02, 0.02, 0.02], "BH"), [0.02, 0.02, 0.02])

    def test_input_not_mutated(self):
        p = np.array([0.04, 0.01])
        adjust(p)
        np.testing.assert_array_equal(p, [0.04, 0.01])


class TestAdjustErrors:

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            adjust([])

    def test_unknown_method(self):
        with pytest.raises(InvalidParameterError):
            adjust([0.1, 0.2], method="holm")

    @pytest.mark.parametrize("bad", [[0.1, 1.5], [-0.01, 0.2], [0.1, np.nan]])
    def test_out_of_domain(self, bad):
        with pytest.raises(DomainError):
            adjust(bad)

    def test_2d_rejected(self):
        with pytest.raises(DimensionMismatchError):
            adjust(np.full((2, 2), 0.1))
