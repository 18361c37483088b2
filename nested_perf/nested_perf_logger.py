"""Nested performance logger with a LIFO stack of measurements.

Usage:
    from nested_perf import NestedPerfLogger

    perf = NestedPerfLogger()
    print(perf.log_headers())

    # Manual start/stop
    print(perf.start("Product", "loading product", 123, "key-value"))
    print(perf.log("halfway"))
    print(perf.stop("done"))

    # Nested timing, keys compose as Product.Item
    print(perf.start("Product"))
    print(perf.start("Item"))
    print(perf.stop())
    print(perf.stop())

    # Scoped timing, lines go to a sink
    with perf.measure("load", sink=print):
        load()

    # Disposal stops any clocks still running
    with NestedPerfLogger() as perf:
        ...

Each call returns one formatted line; writing it anywhere is up to the caller.
An instance is meant for one call chain and is not thread-safe.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from .formatting import format_headers, format_line
from .perf_config import PerfConfig
from .perf_entry import PerfEntry, Stopwatch

ACTION_START = "Start"
ACTION_LOG = "Log"
ACTION_STOP = "Stop"


def timestamp_key() -> str:
    """Key for unlabeled root measurements: epoch milliseconds with fraction."""
    return str(time.time() * 1000)


class NestedPerfLogger:
    """Timer stack producing one delimited log line per start, log and stop."""

    def __init__(
        self,
        config: Optional[PerfConfig] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        self._config = config or PerfConfig()
        self._clock = clock
        self._stack: list[PerfEntry] = []

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def config(self) -> PerfConfig:
        return self._config

    def configure(self, config: Optional[PerfConfig] = None, **changes) -> PerfConfig:
        """Swap in a whole new configuration.

        Pass a PerfConfig, or field changes applied to the current one.
        """
        base = config or self._config
        self._config = base.replace(**changes) if changes else base
        return self._config

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def current_key(self) -> Optional[str]:
        return self._stack[-1].key if self._stack else None

    @property
    def entries(self) -> tuple[PerfEntry, ...]:
        """Snapshot of the stack, bottom first."""
        return tuple(self._stack)

    # -------------------------------------------------------------------------
    # Measurements
    # -------------------------------------------------------------------------

    def _compose_key(self, key: str) -> str:
        if self._stack:
            parent = self._stack[-1].key
            return parent + self._config.ns_delimiter + key if key else parent
        return key or timestamp_key()

    def _format(self, entry: PerfEntry, action: str, message: Optional[str]) -> str:
        return format_line(self._config, entry, self.depth, action, message)

    def start(self, key: str = "", message: str = "", *data: Any) -> str:
        """Push a new measurement and return its Start line."""
        entry = PerfEntry(
            key=self._compose_key(key or ""),
            data=tuple(data),
            stopwatch=Stopwatch(self._clock),
        )
        self._stack.append(entry)
        return self._format(entry, ACTION_START, message)

    def log(self, message: str = "") -> str:
        """Line for the innermost measurement, its clock keeps running."""
        if not self._stack:
            return ""
        return self._format(self._stack[-1], ACTION_LOG, message)

    def stop(self, message: str = "") -> str:
        """Stop and pop the innermost measurement, returning its Stop line."""
        if not self._stack:
            return ""
        entry = self._stack[-1]
        entry.stopwatch.stop()
        line = self._format(entry, ACTION_STOP, message)
        self._stack.pop()
        return line

    def log_headers(self) -> str:
        return format_headers(self._config)

    @contextmanager
    def measure(
        self,
        key: str = "",
        message: str = "",
        *data: Any,
        sink: Optional[Callable[[str], Any]] = None,
        stop_message: Optional[str] = None,
    ) -> Iterator[str]:
        """Context manager timing a block, yields the Start line.

        The Stop line is produced on every exit path and handed to sink.
        Entries the block left open above this one are stopped without
        output. If the block already stopped this entry, nothing happens.
        """
        line = self.start(key, message, *data)
        entry = self._stack[-1]
        if sink is not None:
            sink(line)
        try:
            yield line
        finally:
            if any(e is entry for e in self._stack):
                while self._stack[-1] is not entry:
                    self._stack.pop().stopwatch.stop()
                line = self.stop(message if stop_message is None else stop_message)
                if sink is not None:
                    sink(line)

    # -------------------------------------------------------------------------
    # Disposal
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Stop every running clock and clear the stack without output."""
        for entry in self._stack:
            entry.stopwatch.stop()
        self._stack.clear()

    def __enter__(self) -> NestedPerfLogger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"NestedPerfLogger(depth={self.depth}, current_key={self.current_key!r})"
