"""Immutable configuration for nested performance log lines."""

from __future__ import annotations

import dataclasses
import json
import re
from dataclasses import asdict, dataclass, fields
from pathlib import Path


DEFAULT_DELIMITER = ","
DEFAULT_DATA_DELIMITER = "|"
DEFAULT_NS_DELIMITER = "."


@dataclass(frozen=True)
class PerfConfig:
    """Which fields a log line carries and how they are delimited.

    do_log_time, do_log_level and do_log_indicator are declared for
    completeness but the line prefix is always emitted in full.
    """

    do_log_time: bool = True
    do_log_level: bool = True
    do_log_indicator: bool = True
    do_log_action: bool = True
    do_log_measure: bool = True
    do_log_message: bool = True
    do_log_data: bool = True
    delimiter: str = DEFAULT_DELIMITER
    data_delimiter: str = DEFAULT_DATA_DELIMITER
    ns_delimiter: str = DEFAULT_NS_DELIMITER
    fixed_columns: bool = False

    def __post_init__(self):
        for f in fields(self):
            if f.name.startswith("do_log_") or f.name == "fixed_columns":
                value = getattr(self, f.name)
                if not isinstance(value, bool):
                    raise ValueError(f"{f.name} must be a bool, got {type(value).__name__}")
        for name in ("delimiter", "data_delimiter", "ns_delimiter"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {type(value).__name__}")
        if not self.delimiter:
            raise ValueError("delimiter must not be empty")

    def replace(self, **changes) -> PerfConfig:
        """Return a new config with the given fields changed."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> PerfConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_json(cls, path: str | Path) -> PerfConfig:
        """Load a config from a JSON file. Robust to trailing commas."""
        with open(path) as f:
            s = f.read()
        s = re.sub(r",\s*([}\]])", r"\1", s)
        return cls.from_dict(json.loads(s))
