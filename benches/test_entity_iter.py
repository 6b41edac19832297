"""Traversal benchmarks over one large collection of Points."""

from __future__ import annotations

from typing import Any

import pytest

from ecsbench import BenchSettings, get_scenario

# ruff: noqa: D103 ANN401


@pytest.mark.parametrize("name", ["entity_iter", "entity_for_each", "flat_iter", "flat_boxed_iter"])
def test_entity_iter(benchmark: Any, bench_settings: BenchSettings, name: str) -> None:
    scenario = get_scenario(name)
    fixture = scenario.build(bench_settings)
    benchmark.group = scenario.group
    benchmark(fixture.run_pass)
