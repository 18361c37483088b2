"""Pytest configuration for nested_perf tests."""

import sys
from pathlib import Path

# Add project root to path so 'nested_perf' imports work - MUST happen before pytest imports test files
_project_root = str(Path(__file__).parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import pytest


class FakeClock:
    """Monotonic nanosecond clock advanced by hand."""

    def __init__(self, start_ns: int = 1_000_000_000):
        self.now_ns = start_ns

    def advance(self, ms: float) -> None:
        self.now_ns += int(ms * 1_000_000)

    def __call__(self) -> int:
        return self.now_ns


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def perf(clock):
    from nested_perf import NestedPerfLogger

    return NestedPerfLogger(clock=clock)


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--skip-slow",
        action="store_true",
        default=False,
        help="Skip slow tests (real sleeps)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow (sleeps on the real clock)")


def pytest_collection_modifyitems(config, items):
    """Skip tests based on markers and command-line options."""
    if config.getoption("--skip-slow"):
        skip_slow = pytest.mark.skip(reason="Skipped via --skip-slow")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)
