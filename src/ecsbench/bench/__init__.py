"""Benchmark scenarios, the timing harness, and the command-line runner."""

from ecsbench.bench.harness import (
    BenchmarkHarness,
    OutlierCounts,
    TimingReport,
    classify_outliers,
    format_duration,
)
from ecsbench.bench.scenarios import (
    ENTITY_GET,
    ENTITY_ITER,
    SCENARIOS,
    Fixture,
    MutationFixture,
    Scenario,
    get_scenario,
    scenarios_in_group,
)

__all__ = [
    # Harness
    "BenchmarkHarness",
    "TimingReport",
    "OutlierCounts",
    "classify_outliers",
    "format_duration",
    # Scenarios
    "Scenario",
    "Fixture",
    "MutationFixture",
    "SCENARIOS",
    "ENTITY_GET",
    "ENTITY_ITER",
    "get_scenario",
    "scenarios_in_group",
]
