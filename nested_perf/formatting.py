"""Delimited text formatting for nested performance log lines.

A line has the same columns as LOG_HEADERS:

    TimeStamp,Level Indicator,Level,Key,Action,Elapsed Time,Log Message,Data
    03.14.07.512,-->,0002,Product.Item,Stop,150,done,"Shoe"

The first three columns form the line prefix. Adding a column here means
adding its header at the same position.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from .perf_config import PerfConfig
from .perf_entry import PerfEntry


LOG_HEADERS = (
    "TimeStamp",
    "Level Indicator",
    "Level",
    "Key",
    "Action",
    "Elapsed Time",
    "Log Message",
    "Data",
)

LEVEL_MARKER = "-"
LEVEL_TERMINATOR = ">"
DATA_QUOTE = '"'


# =============================================================================
# Field helpers
# =============================================================================


def on_condition(config: PerfConfig, value: Any, condition: bool = True) -> str:
    """Return value when condition holds, else an empty slot.

    Outside fixed-columns mode an empty value also yields an empty slot.
    """
    value = "" if value is None else str(value)
    keep = True if config.fixed_columns else bool(value)
    return value if keep and condition else ""


def format_timestamp(now: Optional[datetime] = None) -> str:
    """12-hour wall-clock time with milliseconds, e.g. 03.14.07.512."""
    now = now or datetime.now()
    return f"{now:%I.%M.%S}.{now.microsecond // 1000:03d}"


def format_indicator(depth: int) -> str:
    return LEVEL_MARKER * depth + LEVEL_TERMINATOR


def format_level(depth: int) -> str:
    return f"{depth:04d}"


def format_data(config: PerfConfig, data: tuple) -> str:
    joined = config.data_delimiter.join(str(item) for item in data)
    return f"{DATA_QUOTE}{joined}{DATA_QUOTE}"


# =============================================================================
# Lines
# =============================================================================


def format_prefix(config: PerfConfig, depth: int, now: Optional[datetime] = None) -> str:
    """Timestamp, level indicator and level number.

    Emitted regardless of do_log_time, do_log_indicator and do_log_level.
    """
    return config.delimiter.join(
        (
            on_condition(config, format_timestamp(now)),
            on_condition(config, format_indicator(depth)),
            on_condition(config, format_level(depth), depth > 0),
        )
    )


def format_line(
    config: PerfConfig,
    entry: PerfEntry,
    depth: int,
    action: str,
    message: Optional[str] = "",
    now: Optional[datetime] = None,
) -> str:
    """Render one entry as a delimited line. Depth 0 means no line."""
    if depth <= 0:
        return ""

    data = format_data(config, entry.data)
    return config.delimiter.join(
        (
            on_condition(config, format_prefix(config, depth, now)),
            on_condition(config, entry.key),
            on_condition(config, action, config.do_log_action),
            on_condition(config, str(entry.stopwatch.elapsed_ms), config.do_log_measure),
            on_condition(config, message, config.do_log_message),
            on_condition(
                config,
                data,
                config.do_log_data and (config.fixed_columns or entry.has_data),
            ),
        )
    )


def format_headers(config: PerfConfig) -> str:
    return config.delimiter.join(LOG_HEADERS)
