"""Configuration settings using Pydantic Settings.

Usage:
    from ecsbench.config import BenchSettings, HarnessSettings

    # Load from environment variables (ECSBENCH_*, ECSBENCH_HARNESS_*)
    bench = BenchSettings()
    harness = HarnessSettings()

    # Or override with explicit values
    bench = BenchSettings(entities_count=100, points_count=4)
"""

from __future__ import annotations

try:
    from pydantic import PositiveInt, model_validator
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install pydantic-settings"
    ) from e


class BenchSettings(BaseSettings):  # type: ignore[misc]
    """Dataset shape and runtime options for benchmark fixtures.

    Attributes:
        entities_count: Targets (and referrers) in mutation scenarios.
        points_count: Handles per referrer.
        iter_entities_count: Elements in iteration scenarios.
        max_workers: Scheduler worker threads per execution group.
        debug_assertions: Check exclusive access on unchecked shared records.

    Environment Variables:
        ECSBENCH_ENTITIES_COUNT
        ECSBENCH_POINTS_COUNT
        ECSBENCH_ITER_ENTITIES_COUNT
        ECSBENCH_MAX_WORKERS
        ECSBENCH_DEBUG_ASSERTIONS
    """

    model_config = SettingsConfigDict(
        env_prefix="ECSBENCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    entities_count: PositiveInt = 1000
    points_count: PositiveInt = 10
    iter_entities_count: PositiveInt = 100_000
    max_workers: PositiveInt = 1
    debug_assertions: bool = __debug__


class HarnessSettings(BaseSettings):  # type: ignore[misc]
    """Timing loop configuration.

    Attributes:
        warmup_rounds: Passes run and discarded before sampling.
        rounds: Timed passes, one sample each.
        mild_outlier_factor: IQR multiple for the mild outlier fences.
        severe_outlier_factor: IQR multiple for the severe outlier fences.
        disable_gc: Turn the garbage collector off while sampling.

    Environment Variables:
        ECSBENCH_HARNESS_WARMUP_ROUNDS
        ECSBENCH_HARNESS_ROUNDS
        ECSBENCH_HARNESS_MILD_OUTLIER_FACTOR
        ECSBENCH_HARNESS_SEVERE_OUTLIER_FACTOR
        ECSBENCH_HARNESS_DISABLE_GC
    """

    model_config = SettingsConfigDict(
        env_prefix="ECSBENCH_HARNESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    warmup_rounds: int = 5
    rounds: PositiveInt = 100
    mild_outlier_factor: float = 1.5
    severe_outlier_factor: float = 3.0
    disable_gc: bool = False

    @model_validator(mode="after")
    def _check_fences(self) -> HarnessSettings:
        if self.warmup_rounds < 0:
            raise ValueError("warmup_rounds must not be negative")
        if not 0 < self.mild_outlier_factor <= self.severe_outlier_factor:
            raise ValueError("outlier factors must satisfy 0 < mild <= severe")
        return self
