#!/usr/bin/env python
"""Walkthrough of flat and nested measurements.

Usage:
    python -m nested_perf.demo
    python -m nested_perf.demo --fixed-columns --delimiter ";"
    python -m nested_perf.demo --config perf_config.json
"""

from __future__ import annotations

import argparse
import time
from typing import Any, Callable, Optional

from .nested_perf_logger import NestedPerfLogger
from .perf_config import PerfConfig

RULE = "=" * 80


def run_demo(
    sink: Callable[[str], Any] = print,
    config: Optional[PerfConfig] = None,
    pause_s: float = 0.05,
) -> None:
    """Emit header, then flat, keyed, data-carrying and nested measurements."""
    with NestedPerfLogger(config) as perf:
        sink(perf.log_headers())
        sink(RULE)

        # Unlabeled measurement, key derived from the clock
        sink(perf.start("", "Testing for 100 ms"))
        sink(perf.log("Intermediate Log Message #1"))
        time.sleep(2 * pause_s)
        sink(perf.log("Intermediate Log Message #2"))
        sink(perf.stop("Testing for 100 ms"))
        sink(RULE)

        sink(perf.start("Key", "Testing 50 ms w Key"))
        time.sleep(pause_s)
        sink(perf.stop("Testing 50 ms w Key"))
        sink(RULE)

        sink(perf.start("Product", "Testing for 50 ms w Addl. data", 123, "key-value"))
        time.sleep(pause_s)
        sink(perf.stop("Testing for 50 ms w Addl. data"))
        sink(RULE)

        nested = "Testing for 150 ms w Addl. data and Nested Measurements"
        sink(perf.start("Product", nested, "Shoe"))
        time.sleep(pause_s)
        sink(perf.start("Item", nested, "Steve Madden Men's Jagwar"))
        time.sleep(pause_s)
        sink(perf.start("Node", nested, "Men's Shoes"))
        # Empty fragment keeps the parent key
        sink(perf.start("", "Node-Nested", 3))
        time.sleep(pause_s)
        sink(perf.log("done"))
        while perf.depth:
            sink(perf.stop("done"))
        sink(RULE)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Nested performance logger walkthrough")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON file with PerfConfig fields",
    )
    parser.add_argument(
        "--delimiter",
        type=str,
        default=None,
        help="Field delimiter (overrides config)",
    )
    parser.add_argument(
        "--fixed-columns",
        action="store_true",
        help="Always emit every enabled column",
    )
    parser.add_argument(
        "--pause",
        type=float,
        default=0.05,
        help="Base pause between steps in seconds",
    )
    args = parser.parse_args(argv)

    config = PerfConfig.from_json(args.config) if args.config else PerfConfig()
    changes = {}
    if args.delimiter is not None:
        changes["delimiter"] = args.delimiter
    if args.fixed_columns:
        changes["fixed_columns"] = True
    if changes:
        config = config.replace(**changes)

    run_demo(print, config, args.pause)


if __name__ == "__main__":
    main()
