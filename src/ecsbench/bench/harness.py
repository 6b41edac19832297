"""Benchmark harness: build once, time repeated passes, report a distribution.

Usage:
    harness = BenchmarkHarness(HarnessSettings(rounds=50))
    report = harness.run(get_scenario("entity"), BenchSettings())
    print(report.summary())

The dataset is built before timing starts and is never rebuilt or reset;
counters keep accumulating across warm-up and timed passes.
"""

from __future__ import annotations

import gc
import logging
import statistics
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ecsbench.config import BenchSettings, HarnessSettings
from ecsbench.core.errors import BenchmarkError
from ecsbench.workload.referrers import Aliasing

if TYPE_CHECKING:
    from ecsbench.bench.scenarios import Fixture, Scenario

logger = logging.getLogger(__name__)

Clock = Callable[[], int]
"""Monotonic clock returning nanoseconds."""


@dataclass(frozen=True, slots=True)
class OutlierCounts:
    """Samples outside Tukey fences, split by side and severity."""

    low_severe: int = 0
    low_mild: int = 0
    high_mild: int = 0
    high_severe: int = 0

    @property
    def total(self) -> int:
        return self.low_severe + self.low_mild + self.high_mild + self.high_severe


def quartiles(samples: list[int] | tuple[int, ...]) -> tuple[float, float, float]:
    """First quartile, median and third quartile of at least one sample."""
    if len(samples) < 2:
        only = float(samples[0])
        return only, only, only
    q1, median, q3 = statistics.quantiles(samples, n=4, method="inclusive")
    return q1, median, q3


def classify_outliers(
    samples: list[int] | tuple[int, ...],
    mild_factor: float = 1.5,
    severe_factor: float = 3.0,
) -> OutlierCounts:
    """Count samples beyond the mild and severe fences around the quartiles.

    A sample is mild when it lies beyond ``mild_factor * IQR`` from the
    nearest quartile and severe beyond ``severe_factor * IQR``.
    """
    if len(samples) < 4:
        return OutlierCounts()
    q1, _, q3 = quartiles(samples)
    iqr = q3 - q1
    low_mild, low_severe = q1 - mild_factor * iqr, q1 - severe_factor * iqr
    high_mild, high_severe = q3 + mild_factor * iqr, q3 + severe_factor * iqr

    counts = {"low_severe": 0, "low_mild": 0, "high_mild": 0, "high_severe": 0}
    for sample in samples:
        if sample < low_severe:
            counts["low_severe"] += 1
        elif sample < low_mild:
            counts["low_mild"] += 1
        elif sample > high_severe:
            counts["high_severe"] += 1
        elif sample > high_mild:
            counts["high_mild"] += 1
    return OutlierCounts(**counts)


def format_duration(ns: float) -> str:
    """Render nanoseconds with a readable unit."""
    for unit, scale in (("s", 1e9), ("ms", 1e6), ("us", 1e3)):
        if abs(ns) >= scale:
            return f"{ns / scale:.3f} {unit}"
    return f"{ns:.0f} ns"


@dataclass(frozen=True)
class TimingReport:
    """Timing distribution of one scenario.

    Attributes:
        name: Scenario name.
        samples_ns: Wall time of each timed pass, in nanoseconds.
        warmup_rounds: Passes run and discarded before sampling.
        outliers: Outlier classification of the samples.
        aliasing: Handle aliasing of the scenario, if it is a mutation scenario.
    """

    name: str
    samples_ns: tuple[int, ...]
    warmup_rounds: int
    outliers: OutlierCounts
    aliasing: Aliasing | None = None

    def __post_init__(self) -> None:
        if not self.samples_ns:
            raise ValueError("TimingReport needs at least one sample")

    @property
    def rounds(self) -> int:
        return len(self.samples_ns)

    @property
    def mean(self) -> float:
        return statistics.fmean(self.samples_ns)

    @property
    def median(self) -> float:
        return float(statistics.median(self.samples_ns))

    @property
    def stddev(self) -> float:
        if len(self.samples_ns) < 2:
            return 0.0
        return statistics.stdev(self.samples_ns)

    @property
    def min(self) -> int:
        return min(self.samples_ns)

    @property
    def max(self) -> int:
        return max(self.samples_ns)

    @property
    def iqr(self) -> float:
        q1, _, q3 = quartiles(self.samples_ns)
        return q3 - q1

    def summary(self) -> str:
        """One-line human-readable summary."""
        parts = [
            f"{self.name:<16}",
            f"mean {format_duration(self.mean)}",
            f"median {format_duration(self.median)}",
            f"stddev {format_duration(self.stddev)}",
            f"[{format_duration(self.min)} .. {format_duration(self.max)}]",
            f"outliers {self.outliers.total}/{self.rounds}",
        ]
        if self.aliasing is not None:
            parts.append(self.aliasing.value)
        return "  ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        q1, median, q3 = quartiles(self.samples_ns)
        result: dict[str, Any] = {
            "name": self.name,
            "rounds": self.rounds,
            "warmup_rounds": self.warmup_rounds,
            "mean_ns": self.mean,
            "median_ns": median,
            "stddev_ns": self.stddev,
            "min_ns": self.min,
            "max_ns": self.max,
            "q1_ns": q1,
            "q3_ns": q3,
            "outliers": {
                "low_severe": self.outliers.low_severe,
                "low_mild": self.outliers.low_mild,
                "high_mild": self.outliers.high_mild,
                "high_severe": self.outliers.high_severe,
            },
        }
        if self.aliasing is not None:
            result["aliasing"] = self.aliasing.value
        return result


class BenchmarkHarness:
    """Drives one scenario at a time through build, warm-up and timed passes.

    Args:
        settings: Round counts and outlier fences.
        clock: Nanosecond clock used for pass timing.
    """

    def __init__(
        self,
        settings: HarnessSettings | None = None,
        clock: Clock = time.perf_counter_ns,
    ) -> None:
        self._settings = settings or HarnessSettings()
        self._clock = clock

    @property
    def settings(self) -> HarnessSettings:
        return self._settings

    def run(self, scenario: Scenario, bench_settings: BenchSettings | None = None) -> TimingReport:
        """Build the scenario's dataset, then measure its pass.

        Raises:
            BenchmarkError: If a handle fails to resolve, a lock is poisoned,
                or an exclusivity check fails. The run is aborted.
        """
        bench_settings = bench_settings or BenchSettings()
        logger.info("Building %s (%s)", scenario.name, scenario.description)
        started = time.perf_counter()
        fixture = scenario.build(bench_settings)
        logger.info("Built %s in %.1f ms", scenario.name, (time.perf_counter() - started) * 1e3)
        try:
            return self.measure(scenario.name, fixture, aliasing=scenario.aliasing)
        except BenchmarkError:
            logger.error("Benchmark %s aborted", scenario.name)
            raise

    def measure(
        self,
        name: str,
        fixture: Fixture,
        aliasing: Aliasing | None = None,
    ) -> TimingReport:
        """Time passes over an already-built fixture."""
        settings = self._settings
        run_pass = fixture.run_pass
        clock = self._clock

        for _ in range(settings.warmup_rounds):
            run_pass()
        logger.debug("%s: %d warm-up pass(es) done", name, settings.warmup_rounds)

        samples: list[int] = []
        gc_was_enabled = gc.isenabled()
        if settings.disable_gc:
            gc.disable()
        try:
            for _ in range(settings.rounds):
                start = clock()
                run_pass()
                samples.append(clock() - start)
        finally:
            if gc_was_enabled:
                gc.enable()

        outliers = classify_outliers(
            samples, settings.mild_outlier_factor, settings.severe_outlier_factor
        )
        if outliers.total:
            logger.info(
                "%s: %d of %d samples are outliers (%d mild, %d severe)",
                name,
                outliers.total,
                len(samples),
                outliers.low_mild + outliers.high_mild,
                outliers.low_severe + outliers.high_severe,
            )
        return TimingReport(
            name=name,
            samples_ns=tuple(samples),
            warmup_rounds=settings.warmup_rounds,
            outliers=outliers,
            aliasing=aliasing,
        )
