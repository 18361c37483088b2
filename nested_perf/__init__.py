"""Nested performance logging.

Usage:
    from nested_perf import NestedPerfLogger

    with NestedPerfLogger() as perf:
        print(perf.log_headers())
        print(perf.start("section_name"))
        work()
        print(perf.stop())
"""

from .decorators import measured
from .formatting import LOG_HEADERS
from .nested_perf_logger import NestedPerfLogger
from .perf_config import PerfConfig
from .perf_entry import PerfEntry, Stopwatch

__all__ = [
    "LOG_HEADERS",
    "NestedPerfLogger",
    "PerfConfig",
    "PerfEntry",
    "Stopwatch",
    "measured",
]
__version__ = "0.1.0"
