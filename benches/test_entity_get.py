"""Mutation benchmarks: N referrers resolving K handles each per pass.

Run with ``pytest benches/ --benchmark-only``. Datasets are built before the
benchmark fixture starts timing and keep accumulating across rounds.
"""

from __future__ import annotations

from typing import Any

import pytest

from ecsbench import BenchSettings, get_scenario

# ruff: noqa: D103 ANN401


@pytest.mark.parametrize("name", ["entity", "owned", "locked", "unchecked"])
def test_entity_get(benchmark: Any, bench_settings: BenchSettings, name: str) -> None:
    scenario = get_scenario(name)
    fixture = scenario.build(bench_settings)
    benchmark.group = scenario.group
    benchmark.extra_info["aliasing"] = scenario.aliasing.value
    benchmark(fixture.run_pass)
