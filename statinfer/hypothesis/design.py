"""
HypothesisDesign: validated inputs for the t-test family.

Uses a factory classmethod per test. The `test_type` field identifies
which variant the backend runs. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import math
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statinfer.core.exceptions import DimensionMismatchError, InvalidParameterError
from statinfer.core.validation import check_conf_level, check_sample
from statinfer.hypothesis._common import VALID_ALTERNATIVES


def _validate_alternative(alternative: str) -> str:
    """Validate and return alternative hypothesis string."""
    if alternative not in VALID_ALTERNATIVES:
        raise InvalidParameterError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        )
    return alternative


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    test_type is one of "t_one_sample", "t_two_sample", "t_paired". For
    the paired test `x` holds the differences x - y.

    Do not construct directly; use factory classmethods.
    """
    test_type: str

    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]] | None = None

    _mu: float = 0.0
    _alternative: str = "two.sided"
    _conf_level: float = 0.95
    _var_equal: bool = False
    _paired: bool = False

    _data_name: str = ""

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def alternative(self) -> str:
        return self._alternative

    @property
    def conf_level(self) -> float:
        return self._conf_level

    @property
    def var_equal(self) -> bool:
        return self._var_equal

    @property
    def paired(self) -> bool:
        return self._paired

    @property
    def data_name(self) -> str:
        return self._data_name

    # --- Factory classmethods ---

    @classmethod
    def for_t_test(
        cls,
        x: ArrayLike,
        y: ArrayLike | None = None,
        *,
        mu: float = 0.0,
        paired: bool = False,
        var_equal: bool = False,
        alternative: str = "two.sided",
        conf_level: float = 0.95,
    ) -> HypothesisDesign:
        """
        Build design for t_test().

        Raises:
            InsufficientDataError: If a sample has fewer than 2 values
            DimensionMismatchError: If paired samples differ in length
            InvalidParameterError: If alternative, conf_level or mu is invalid
            ValidationError: If a sample is non-numeric or non-finite
        """
        alternative = _validate_alternative(alternative)
        conf_level = check_conf_level(conf_level)
        if not math.isfinite(mu):
            raise InvalidParameterError(f"mu must be finite, got {mu!r}")

        x_arr = check_sample(x, 'x', min_samples=2)

        if y is None:
            if paired:
                raise InvalidParameterError("paired t-test requires y")
            return cls(
                test_type="t_one_sample",
                _x=x_arr,
                _mu=float(mu),
                _alternative=alternative,
                _conf_level=conf_level,
                _data_name="x",
            )

        y_arr = check_sample(y, 'y', min_samples=2)

        if paired:
            if len(x_arr) != len(y_arr):
                raise DimensionMismatchError(
                    f"Paired t-test requires equal lengths: "
                    f"len(x)={len(x_arr)}, len(y)={len(y_arr)}"
                )
            return cls(
                test_type="t_paired",
                _x=x_arr - y_arr,
                _mu=float(mu),
                _paired=True,
                _alternative=alternative,
                _conf_level=conf_level,
                _data_name="x and y",
            )

        return cls(
            test_type="t_two_sample",
            _x=x_arr,
            _y=y_arr,
            _mu=float(mu),
            _var_equal=bool(var_equal),
            _alternative=alternative,
            _conf_level=conf_level,
            _data_name="x and y",
        )
