"""
CPU reference backend for hypothesis tests.

Dispatches to the test-specific function named by design.test_type.
"""

from __future__ import annotations

from statinfer.core.exceptions import InvalidParameterError
from statinfer.core.result import Result
from statinfer.core.compute.timing import Timer
from statinfer.hypothesis._common import HTestParams
from statinfer.hypothesis.backends._t_test import t_one_sample, t_paired, t_two_sample
from statinfer.hypothesis.design import HypothesisDesign


_DISPATCH = {
    "t_one_sample": t_one_sample,
    "t_two_sample": t_two_sample,
    "t_paired": t_paired,
}


class CPUHypothesisBackend:
    """CPU reference backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[HTestParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type
        try:
            run = _DISPATCH[test_type]
        except KeyError:
            raise InvalidParameterError(f"Unknown test_type: {test_type!r}") from None

        with timer.section(test_type):
            params, warnings_list = run(design)

        timer.stop()

        return Result(
            params=params,
            info={'test_type': test_type},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
