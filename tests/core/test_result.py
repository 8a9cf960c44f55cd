"""
Tests for the Result[P] envelope.
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from statinfer.core.protocols import Backend
from statinfer.core.result import Result
from statinfer.hypothesis.backends import CPUHypothesisBackend
from statinfer.montecarlo.backends import CPUBootstrapBackend, CPUPermutationBackend
from statinfer.regression.backends import CPUQRBackend


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "test"},
            timing={"total_seconds": 0.01},
            backend_name="cpu",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "test"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu"
        assert result.warnings == ()

    def test_timing_optional(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.timing is None

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "gpu"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1.0), info={}, timing=None, backend_name="cpu",
            warnings=("data are essentially constant", "second"),
        )
        assert result.has_warning("constant")
        assert result.has_warning("second")
        assert not result.has_warning("singular")


class TestBackendProtocol:

    @pytest.mark.parametrize("backend_cls,name", [
        (CPUBootstrapBackend, "cpu_bootstrap"),
        (CPUPermutationBackend, "cpu_permutation"),
        (CPUQRBackend, "cpu_qr"),
        (CPUHypothesisBackend, "cpu_hypothesis"),
    ])
    def test_backends_satisfy_protocol(self, backend_cls, name):
        backend = backend_cls()
        assert isinstance(backend, Backend)
        assert backend.name == name
