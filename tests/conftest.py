"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from ecsbench import BenchSettings, World  # noqa: E402


@pytest.fixture
def world():
    """Fresh World instance."""
    return World()


@pytest.fixture
def small_settings() -> BenchSettings:
    """Small datasets with exclusivity checks on."""
    return BenchSettings(
        entities_count=20,
        points_count=4,
        iter_entities_count=50,
        max_workers=1,
        debug_assertions=True,
    )
