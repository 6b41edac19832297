"""Shared benchmark fixtures."""

import sys

import pytest

sys.path.insert(0, "src")

from ecsbench import BenchSettings  # noqa: E402


@pytest.fixture(scope="session")
def bench_settings() -> BenchSettings:
    """Dataset sizes from ECSBENCH_* environment variables, else defaults."""
    return BenchSettings()
