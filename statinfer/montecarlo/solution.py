"""
Solution wrappers for Monte Carlo results.

BootstrapSolution and PermutationSolution wrap Result[P] and provide
convenient accessors and R-style summary output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from statinfer.core.result import Result
from statinfer.montecarlo._common import BootParams, PermutationParams

if TYPE_CHECKING:
    from statinfer.montecarlo.design import BootstrapDesign, PermutationDesign


@dataclass
class BootstrapSolution:
    """
    User-facing bootstrap results.

    Matches the fields of R's boot object for a single statistic: t0,
    replicates, bias, SE, plus the interval when computed by
    bootstrap_ci().
    """
    _result: Result[BootParams]
    _design: 'BootstrapDesign'

    # --- Core boot fields ---

    @property
    def t0(self) -> float:
        """Observed statistic on the original data."""
        return self._result.params.t0

    @property
    def replicates(self) -> NDArray[np.floating[Any]]:
        """Bootstrap replicates, shape (R,)."""
        return self._result.params.replicates

    @property
    def R(self) -> int:
        """Number of bootstrap replicates."""
        return self._result.params.R

    @property
    def mode(self) -> str:
        """Resampling mode, always 'with_replacement'."""
        return self._result.params.mode

    @property
    def bias(self) -> float:
        """Bootstrap bias estimate: mean(replicates) - t0."""
        return self._result.params.bias

    @property
    def se(self) -> float:
        """Bootstrap standard error: sd(replicates)."""
        return self._result.params.se

    @property
    def ci(self) -> dict[str, NDArray] | None:
        """Confidence intervals keyed by type, or None if not computed."""
        return self._result.params.ci

    @property
    def ci_conf_level(self) -> float | None:
        """Confidence level used for CI computation."""
        return self._result.params.ci_conf_level

    @property
    def interval(self) -> NDArray | None:
        """
        The computed interval [lower, upper].

        With several CI types the percentile interval is preferred.
        """
        if not self.ci:
            return None
        if "perc" in self.ci:
            return self.ci["perc"]
        return next(iter(self.ci.values()))

    @property
    def lower(self) -> float | None:
        interval = self.interval
        return None if interval is None else float(interval[0])

    @property
    def upper(self) -> float | None:
        interval = self.interval
        return None if interval is None else float(interval[1])

    # --- Metadata ---

    @property
    def data(self) -> NDArray:
        """Original data."""
        return self._design.data

    @property
    def seed(self):
        """Seed the design was built with."""
        return self._design.seed

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

    # --- Display ---

    def summary(self) -> str:
        """
        R-style print.boot output.

        Produces:
            ORDINARY NONPARAMETRIC BOOTSTRAP

            Bootstrap Statistics :
                original       bias    std. error
            t1*  5.12345    0.01234     0.56789
        """
        lines = ["\nORDINARY NONPARAMETRIC BOOTSTRAP\n"]
        lines.append(f"Call: bootstrap(data, statistic, R={self.R})")
        lines.append("")
        lines.append("Bootstrap Statistics :")
        lines.append(
            f"{'':>8s} {'original':>14s} {'bias':>14s} {'std. error':>14s}"
        )
        lines.append(
            f"{'t1*':>8s} {self.t0:14.5f} {self.bias:14.5f} {self.se:14.5f}"
        )

        if self.ci is not None:
            lines.append("")
            conf_pct = round((self.ci_conf_level or 0.95) * 100, 2)
            for ci_type, bounds in self.ci.items():
                lines.append(
                    f"{conf_pct:g}% {ci_type} CI: "
                    f"({bounds[0]:.5f}, {bounds[1]:.5f})"
                )

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"BootstrapSolution(R={self.R}, t0={self.t0:.4g}, "
            f"backend={self.backend_name!r})"
        )


@dataclass
class PermutationSolution:
    """
    User-facing permutation test results.

    Provides the observed statistic, the permutation distribution and
    three views of the p-value:

    - p_value: raw fraction of replicates at least as extreme (can be 0)
    - p_value_floor: 1/R, the resolution limit of p_value
    - p_value_corrected: (count + 1) / (R + 1), never 0
    """
    _result: Result[PermutationParams]
    _design: 'PermutationDesign'

    # --- Core fields ---

    @property
    def observed_stat(self) -> float:
        """Test statistic on original (unpermuted) data."""
        return self._result.params.observed_stat

    @property
    def replicates(self) -> NDArray[np.floating[Any]]:
        """Permutation distribution, shape (R,)."""
        return self._result.params.replicates

    @property
    def count(self) -> int:
        """Number of replicates at least as extreme as observed."""
        return self._result.params.count

    @property
    def p_value(self) -> float:
        """Raw permutation p-value count / R; exactly 0.0 when count is 0."""
        return self._result.params.p_value

    @property
    def p_value_floor(self) -> float:
        """Smallest nonzero p-value R permutations can resolve, 1 / R."""
        return self._result.params.p_value_floor

    @property
    def p_value_corrected(self) -> float:
        """Phipson-Smyth p-value (count + 1) / (R + 1)."""
        return self._result.params.p_value_corrected

    @property
    def R(self) -> int:
        """Number of permutations."""
        return self._result.params.R

    @property
    def mode(self) -> str:
        """Resampling mode, always 'without_replacement'."""
        return self._result.params.mode

    @property
    def alternative(self) -> str:
        """Alternative hypothesis direction."""
        return self._result.params.alternative

    @property
    def two_sided(self) -> bool:
        return self.alternative == "two.sided"

    # --- Metadata ---

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

    # --- Display ---

    def summary(self) -> str:
        """Permutation test summary."""
        lines = [
            "\nPERMUTATION TEST",
            "",
            f"Number of permutations: {self.R}",
            f"Observed statistic: {self.observed_stat:.6g}",
            f"p-value ({self.alternative}): {self.p_value:.4g}",
            f"p-value floor (1/R): {self.p_value_floor:.4g}",
            f"p-value (count+1)/(R+1): {self.p_value_corrected:.4g}",
            "",
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PermutationSolution(R={self.R}, "
            f"observed={self.observed_stat:.4g}, "
            f"p_value={self.p_value:.4g})"
        )
