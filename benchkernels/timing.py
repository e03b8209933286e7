"""Wall-clock and CPU timing around a benchmark run."""

from __future__ import annotations

import time
from collections.abc import Callable

CPU_MHZ = 1


class Timer:
    """Measures real and CPU time between :meth:`start` and :meth:`stop`."""

    def __init__(
        self,
        real_clock: Callable[[], float] = time.perf_counter,
        cpu_clock: Callable[[], float] = time.process_time,
    ) -> None:
        self._real_clock = real_clock
        self._cpu_clock = cpu_clock
        self._begin: tuple[float, float] | None = None
        self.real_seconds: float | None = None
        self.cpu_seconds: float | None = None

    def start(self) -> None:
        """Record the starting real and CPU times."""
        self._begin = (self._real_clock(), self._cpu_clock())
        self.real_seconds = None
        self.cpu_seconds = None

    def stop(self) -> tuple[float, float]:
        """Record the elapsed times and return ``(real_seconds, cpu_seconds)``."""
        if self._begin is None:
            raise RuntimeError("timer was not started")
        real_end = self._real_clock()
        cpu_end = self._cpu_clock()
        real_begin, cpu_begin = self._begin
        self._begin = None
        self.real_seconds = real_end - real_begin
        self.cpu_seconds = cpu_end - cpu_begin
        return self.real_seconds, self.cpu_seconds

    def report(self) -> str:
        """The elapsed times in milliseconds, as one line of text."""
        if self.real_seconds is None or self.cpu_seconds is None:
            raise RuntimeError("timer has not been stopped")
        return (
            f"Real time: {self.real_seconds * 1000.0:.6f} ms "
            f"CPU time: {self.cpu_seconds * 1000.0:.6f} ms "
        )

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()