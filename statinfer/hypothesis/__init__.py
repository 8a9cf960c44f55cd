"""
Hypothesis testing module.

Public API:
    t_test(x, y)              - Student's / Welch's t-test (one-sample,
                                two-sample, paired)
    adjust(p, method="BH")    - Multiple testing correction
                                (Bonferroni, Benjamini-Hochberg)
"""

from statinfer.hypothesis.solvers import t_test
from statinfer.hypothesis._adjust import adjust
from statinfer.hypothesis.design import HypothesisDesign
from statinfer.hypothesis._common import HTestParams
from statinfer.hypothesis.solution import HTestSolution

__all__ = [
    "t_test",
    "adjust",
    "HypothesisDesign",
    "HTestParams",
    "HTestSolution",
]
