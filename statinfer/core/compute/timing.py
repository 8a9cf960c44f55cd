"""
Wall-clock timing for backend stages.

Every backend records how long each stage took so solutions can report
a timing breakdown alongside the numbers.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating section timer.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('observed_statistic'):
            t0 = statistic(x, y)
        for _ in range(R):
            with timer.section('replicates'):
                ...
        timer.stop()
        timer.result()
        # {'total_seconds': 0.41, 'observed_statistic': 1e-05, 'replicates': 0.40}
    """

    def __init__(self) -> None:
        self._sections: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()
        self._total = None

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time a named stage. Re-entering the same name adds to its total;
        stages may overlap one another.
        """
        began = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - began
            )

    def result(self) -> dict[str, float]:
        """
        Total and per-stage seconds, ready for Result.timing.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}

