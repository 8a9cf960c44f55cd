"""
CPU backends for bootstrap and permutation test.

CPUBootstrapBackend: Ordinary nonparametric bootstrap.
CPUPermutationBackend: Two-sample permutation test by label shuffling.

Both draw every random index from a single Generator built from the
design's seed, so results depend only on the seed.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from statinfer.core.exceptions import ValidationError
from statinfer.core.random import make_rng, describe_seed
from statinfer.core.result import Result
from statinfer.core.compute.timing import Timer
from statinfer.montecarlo._common import (
    BootParams,
    PermutationParams,
    WITH_REPLACEMENT,
    WITHOUT_REPLACEMENT,
)
from statinfer.montecarlo.design import BootstrapDesign, PermutationDesign


# Replicates within this relative distance of the observed statistic
# count as "as extreme"
_TIE_RTOL = 1e-12


def _as_scalar(value, what: str) -> float:
    """Coerce a statistic's return value to float; it must be scalar."""
    arr = np.asarray(value, dtype=np.float64)
    if arr.size != 1:
        raise ValidationError(
            f"{what} must return a scalar, got shape {arr.shape}"
        )
    return float(arr.reshape(()))


class CPUBootstrapBackend:
    """
    CPU backend for bootstrap resampling.

    Each replicate draws n row indices uniformly with replacement and
    evaluates the statistic on the resampled data.
    """

    @property
    def name(self) -> str:
        return 'cpu_bootstrap'

    def solve(self, design: BootstrapDesign) -> Result[BootParams]:
        """Run bootstrap and return Result[BootParams]."""
        timer = Timer()
        timer.start()

        data = design.data
        statistic = design.statistic
        R = design.R
        n = design.n

        rng = make_rng(design.seed)

        with timer.section('t0_computation'):
            t0 = _as_scalar(statistic(data), 'statistic')

        replicates = np.empty(R, dtype=np.float64)
        with timer.section('bootstrap_replicates'):
            for b in range(R):
                indices = rng.integers(0, n, size=n)
                replicates[b] = _as_scalar(statistic(data[indices]), 'statistic')

        warnings_list: list[str] = []
        with timer.section('summary_statistics'):
            bias = float(np.mean(replicates) - t0)
            if R > 1:
                se = float(np.std(replicates, ddof=1))
            else:
                se = float('nan')
                warnings_list.append(
                    "standard error undefined with a single replicate"
                )
            if not np.all(np.isfinite(replicates)):
                warnings_list.append(
                    f"{int(np.sum(~np.isfinite(replicates)))} bootstrap "
                    f"replicates are not finite"
                )

        timer.stop()

        params = BootParams(
            t0=t0,
            replicates=replicates,
            R=R,
            mode=WITH_REPLACEMENT,
            bias=bias,
            se=se,
        )

        return Result(
            params=params,
            info={
                'n': n,
                'mode': WITH_REPLACEMENT,
                'seed': describe_seed(design.seed),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


class CPUPermutationBackend:
    """
    CPU backend for permutation testing.

    Pools both groups, shuffles the pooled values (sampling without
    replacement), and splits them back into groups of the original
    sizes R times.

    The p-value is the raw fraction count / R. It is exactly 0 when no
    replicate is as extreme as the observed statistic; the payload also
    carries the 1 / R floor and the (count + 1) / (R + 1) value.
    """

    @property
    def name(self) -> str:
        return 'cpu_permutation'

    def solve(self, design: PermutationDesign) -> Result[PermutationParams]:
        """Run permutation test and return Result[PermutationParams]."""
        timer = Timer()
        timer.start()

        x = design.x
        y = design.y
        statistic = design.statistic
        R = design.R
        alternative = design.alternative

        rng = make_rng(design.seed)

        with timer.section('observed_stat'):
            observed = _as_scalar(statistic(x, y), 'statistic')

        with timer.section('permutation_replicates'):
            combined = np.concatenate([x, y])
            n1 = len(x)
            replicates = np.empty(R, dtype=np.float64)

            for b in range(R):
                shuffled = rng.permutation(combined)
                replicates[b] = _as_scalar(
                    statistic(shuffled[:n1], shuffled[n1:]), 'statistic'
                )

        with timer.section('p_value'):
            count = _count_extreme(replicates, observed, alternative)
            p_value = count / R
            p_value_floor = 1.0 / R
            p_value_corrected = (count + 1.0) / (R + 1.0)

        warnings_list: list[str] = []
        if count == 0:
            warnings_list.append(
                f"no permutation replicate was as extreme as the observed "
                f"statistic; p-value reported as 0, true p-value is below "
                f"the resolution floor 1/R = {p_value_floor:.3g}"
            )

        timer.stop()

        params = PermutationParams(
            observed_stat=observed,
            replicates=replicates,
            R=R,
            mode=WITHOUT_REPLACEMENT,
            count=count,
            p_value=p_value,
            p_value_floor=p_value_floor,
            p_value_corrected=p_value_corrected,
            alternative=alternative,
        )

        return Result(
            params=params,
            info={
                'n1': len(x),
                'n2': len(y),
                'alternative': alternative,
                'mode': WITHOUT_REPLACEMENT,
                'seed': describe_seed(design.seed),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


def _count_extreme(replicates: NDArray, observed: float, alternative: str) -> int:
    """Number of replicates at least as extreme as observed."""
    tol = _TIE_RTOL * max(1.0, abs(observed))
    if alternative == "two.sided":
        hits = np.abs(replicates) >= abs(observed) - tol
    elif alternative == "greater":
        hits = replicates >= observed - tol
    elif alternative == "less":
        hits = replicates <= observed + tol
    else:
        raise ValidationError(f"Unknown alternative: {alternative!r}")
    return int(np.sum(hits))
