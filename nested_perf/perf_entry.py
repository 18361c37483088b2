"""Stack entries and their elapsed-time clocks."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

NS_PER_MS = 1_000_000


class Stopwatch:
    """Monotonic elapsed-time clock, started on creation and stoppable once."""

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or time.perf_counter_ns
        self._start_ns = self._clock()
        self._stop_ns: Optional[int] = None

    @property
    def is_running(self) -> bool:
        return self._stop_ns is None

    def stop(self) -> None:
        """Freeze the elapsed time. Later calls keep the first stop."""
        if self._stop_ns is None:
            self._stop_ns = self._clock()

    @property
    def elapsed_ns(self) -> int:
        end = self._clock() if self._stop_ns is None else self._stop_ns
        return max(0, end - self._start_ns)

    @property
    def elapsed_ms(self) -> int:
        """Whole milliseconds elapsed (truncated)."""
        return self.elapsed_ns // NS_PER_MS


@dataclass
class PerfEntry:
    """Single measurement on the stack."""

    key: str
    data: tuple[Any, ...] = ()
    stopwatch: Stopwatch = field(default_factory=Stopwatch)

    @property
    def has_data(self) -> bool:
        return len(self.data) > 0
