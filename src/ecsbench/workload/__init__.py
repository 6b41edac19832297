"""Benchmark workload: the mutated record, handle kinds, and access strategies."""

from ecsbench.workload.handles import LockedCell, SharedArena
from ecsbench.workload.iteration import (
    FlatDirect,
    FlatIndirect,
    IterationStrategy,
    RegistryIterated,
    TraversalStyle,
)
from ecsbench.workload.point import U32_MASK, Point, seeded_point
from ecsbench.workload.referrers import (
    Aliasing,
    PointBoxes,
    PointEntities,
    PointLocks,
    PointSlots,
    Referrer,
    ReferrerBuilder,
)
from ecsbench.workload.strategies import (
    ExclusiveOwned,
    OwnershipStrategy,
    RegistryResolved,
    SharedLocked,
    SharedUnchecked,
    mutate_referrers,
)

__all__ = [
    # Record
    "Point",
    "U32_MASK",
    "seeded_point",
    # Handles
    "LockedCell",
    "SharedArena",
    # Referrers
    "Aliasing",
    "Referrer",
    "ReferrerBuilder",
    "PointEntities",
    "PointBoxes",
    "PointLocks",
    "PointSlots",
    # Ownership strategies
    "OwnershipStrategy",
    "RegistryResolved",
    "ExclusiveOwned",
    "SharedLocked",
    "SharedUnchecked",
    "mutate_referrers",
    # Iteration strategies
    "IterationStrategy",
    "RegistryIterated",
    "FlatDirect",
    "FlatIndirect",
    "TraversalStyle",
]
