"""ecsbench: cost of indirect mutable access strategies on an ECS.

Usage:
    from ecsbench import BenchmarkHarness, BenchSettings, get_scenario

    harness = BenchmarkHarness()
    report = harness.run(get_scenario("entity"), BenchSettings())
    print(report.summary())
"""

__version__ = "0.1.0"

# Core primitives
from ecsbench.core import (
    BenchmarkError,
    EntityId,
    InvariantViolation,
    LockPoisoned,
    NotFound,
    Owned,
    SystemEntity,
    component,
    system,
)

# Scheduling
from ecsbench.scheduling import SchedulerConfig, SequentialScheduler, SimpleScheduler

# Storage
from ecsbench.storage import LocalStorage, Storage

# World and access
from ecsbench.world import AccessViolationError, QueryView, ScopedAccess, World

# Workload
from ecsbench.workload import (
    Aliasing,
    ExclusiveOwned,
    FlatDirect,
    FlatIndirect,
    LockedCell,
    Point,
    RegistryIterated,
    RegistryResolved,
    SharedArena,
    SharedLocked,
    SharedUnchecked,
)

# Configuration and benchmarks
from ecsbench.config import BenchSettings, HarnessSettings
from ecsbench.bench import (
    BenchmarkHarness,
    TimingReport,
    get_scenario,
    scenarios_in_group,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "SystemEntity",
    "component",
    "system",
    "Owned",
    "BenchmarkError",
    "NotFound",
    "LockPoisoned",
    "InvariantViolation",
    # World
    "World",
    "ScopedAccess",
    "QueryView",
    "AccessViolationError",
    # Storage
    "Storage",
    "LocalStorage",
    # Scheduling
    "SimpleScheduler",
    "SequentialScheduler",
    "SchedulerConfig",
    # Workload
    "Point",
    "Aliasing",
    "LockedCell",
    "SharedArena",
    "RegistryResolved",
    "ExclusiveOwned",
    "SharedLocked",
    "SharedUnchecked",
    "RegistryIterated",
    "FlatDirect",
    "FlatIndirect",
    # Benchmarks
    "BenchSettings",
    "HarnessSettings",
    "BenchmarkHarness",
    "TimingReport",
    "get_scenario",
    "scenarios_in_group",
]
